"""Unit tests for solution narration."""

from __future__ import annotations

from konigsberg.solver import describe, solution_edges, solution_steps


def test_describe_triangle(triangle):
    steps = describe(triangle, ["A", "B", "C", "A"])
    assert [s.description for s in steps] == [
        "Start at node A",
        "Cross bridge from A to B",
        "Cross bridge from B to C",
        "Cross bridge from C to A",
    ]
    assert steps[0].edge is None
    assert [s.edge.id for s in steps[1:]] == ["e1", "e2", "e3"]
    assert [s.node for s in steps] == ["A", "B", "C", "A"]


def test_parallel_bridges_are_told_apart(konigsberg):
    steps = describe(konigsberg, ["A", "C", "A"])
    assert [s.edge.id for s in steps[1:]] == ["e1", "e2"]


def test_crossed_bridges_are_not_narrated(konigsberg):
    konigsberg.edges[0].crossed = True
    steps = describe(konigsberg, ["A", "C"])
    assert steps[1].edge.id == "e2"


def test_describe_empty_path(triangle):
    assert describe(triangle, []) == []


def test_solution_steps(path_graph):
    solution = solution_steps(path_graph, "A")
    assert solution.path == ["A", "B", "C", "D"]
    assert [e.id for e in solution.edges] == ["e1", "e2", "e3"]
    assert solution.steps[-1].description == "Cross bridge from C to D"


def test_solution_edges(triangle):
    assert [e.id for e in solution_edges(triangle, "A")] == ["e1", "e2", "e3"]


def test_no_solution_for_unsolvable_graph(konigsberg):
    assert solution_steps(konigsberg) is None
    assert solution_edges(konigsberg) is None
