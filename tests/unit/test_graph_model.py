"""Unit tests for the graph primitives."""

from __future__ import annotations

from konigsberg.graph import (
    adjacent_nodes,
    available_edges,
    clone_graph,
    connected_components,
    edge_between,
    is_edge_connected,
    is_valid_move,
    node_degrees,
    remaining_edge_count,
    uncrossed_subgraph,
)


def test_adjacent_nodes_lists_each_neighbour_once(konigsberg):
    assert adjacent_nodes(konigsberg, "A") == ["C", "D"]
    assert adjacent_nodes(konigsberg, "C") == ["A", "B", "D"]


def test_adjacent_nodes_ignores_crossed_edges(triangle):
    triangle.edges[0].crossed = True  # A-B
    assert adjacent_nodes(triangle, "A") == ["C"]


def test_available_edges_in_graph_order(konigsberg):
    assert [e.id for e in available_edges(konigsberg, "A")] == ["e1", "e2", "e3"]
    konigsberg.edges[1].crossed = True
    assert [e.id for e in available_edges(konigsberg, "A")] == ["e1", "e3"]


def test_edge_between_is_first_uncrossed_match_in_either_direction(konigsberg):
    assert edge_between(konigsberg, "C", "A").id == "e1"
    konigsberg.edges[0].crossed = True
    assert edge_between(konigsberg, "A", "C").id == "e2"
    konigsberg.edges[1].crossed = True
    assert edge_between(konigsberg, "A", "C") is None
    assert not is_valid_move(konigsberg, "A", "C")


def test_edge_between_missing_pair(konigsberg):
    assert edge_between(konigsberg, "A", "B") is None


def test_node_degrees(konigsberg):
    assert node_degrees(konigsberg) == {"A": 3, "B": 3, "C": 5, "D": 3}


def test_node_degrees_excluding_crossed(konigsberg):
    konigsberg.edges[0].crossed = True
    assert node_degrees(konigsberg, exclude_crossed=True) == {"A": 2, "B": 3, "C": 4, "D": 3}
    assert node_degrees(konigsberg) == {"A": 3, "B": 3, "C": 5, "D": 3}


def test_isolated_node_has_degree_zero(make_graph):
    graph = make_graph([("A", "B")], nodes=["A", "B", "Z"])
    assert node_degrees(graph)["Z"] == 0


def test_self_loop_counts_twice(make_graph):
    graph = make_graph([("A", "A"), ("A", "B")])
    assert node_degrees(graph) == {"A": 3, "B": 1}


def test_remaining_edge_count(triangle):
    assert remaining_edge_count(triangle) == 3
    triangle.edges[2].crossed = True
    assert remaining_edge_count(triangle) == 2


def test_clone_is_independent(triangle):
    copy = clone_graph(triangle)
    copy.edges[0].crossed = True
    copy.nodes[0].label = "changed"

    assert triangle.edges[0].crossed is False
    assert triangle.nodes[0].label == "A"
    assert [e.id for e in copy.edges] == [e.id for e in triangle.edges]


def test_uncrossed_subgraph_keeps_nodes(triangle):
    triangle.edges[0].crossed = True
    sub = uncrossed_subgraph(triangle)
    assert sub.node_ids() == ["A", "B", "C"]
    assert [e.id for e in sub.edges] == ["e2", "e3"]
    assert all(not e.crossed for e in sub.edges)


def test_connected_components(two_triangles, triangle):
    assert connected_components(two_triangles) == [["A", "B", "C"], ["D", "E", "F"]]
    assert not is_edge_connected(two_triangles)
    assert is_edge_connected(triangle)


def test_isolated_nodes_do_not_break_connectivity(make_graph):
    graph = make_graph([("A", "B"), ("B", "C"), ("C", "A")], nodes=["A", "B", "C", "Z"])
    assert connected_components(graph) == [["A", "B", "C"]]
    assert is_edge_connected(graph)
