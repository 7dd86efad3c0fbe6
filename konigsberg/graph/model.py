"""Graph data model for the bridge puzzles.

A graph is an undirected multigraph: two edges may share the same endpoint
pair and still be distinct bridges. Edge endpoint order is kept as stored,
narration and drawing use it.

Every query here works on the graph as given and never mutates it. Edge
endpoints must reference node ids of the same graph; that is checked when a
level is built (see ``konigsberg.schemas.level_schema``), not here.
"""

from dataclasses import dataclass, field, replace
from typing import Dict, List, Optional


@dataclass
class Node:
    """A land mass. Position is cosmetic and only used for drawing."""
    id: str
    label: str
    x: float = 0
    y: float = 0


@dataclass
class Edge:
    """A bridge between two land masses."""
    id: str
    start: str
    end: str
    crossed: bool = False

    def connects(self, a: str, b: str) -> bool:
        return (self.start == a and self.end == b) or (self.start == b and self.end == a)

    def touches(self, node_id: str) -> bool:
        return self.start == node_id or self.end == node_id

    def other_end(self, node_id: str) -> str:
        return self.end if self.start == node_id else self.start


@dataclass
class Graph:
    nodes: List[Node] = field(default_factory=list)
    edges: List[Edge] = field(default_factory=list)

    def node_ids(self) -> List[str]:
        return [node.id for node in self.nodes]


# get neighbours over live bridges
def adjacent_nodes(graph: Graph, node_id: str) -> List[str]:
    """Node ids reachable from ``node_id`` over one uncrossed edge, without duplicates."""
    adjacent = []
    for edge in available_edges(graph, node_id):
        other = edge.other_end(node_id)
        if other not in adjacent:
            adjacent.append(other)
    return adjacent


def available_edges(graph: Graph, node_id: str) -> List[Edge]:
    """All uncrossed edges incident to ``node_id``, in graph order."""
    return [edge for edge in graph.edges if not edge.crossed and edge.touches(node_id)]


def edge_between(graph: Graph, a: str, b: str) -> Optional[Edge]:
    """First uncrossed edge (stored order) joining ``a`` and ``b`` in either direction.

    With parallel bridges this is always the first match, so replaying a move
    history picks the same edges again.
    """
    for edge in graph.edges:
        if not edge.crossed and edge.connects(a, b):
            return edge
    return None


def is_valid_move(graph: Graph, a: str, b: str) -> bool:
    return edge_between(graph, a, b) is not None


def node_degrees(graph: Graph, exclude_crossed: bool = False) -> Dict[str, int]:
    """Map node id -> number of incident edges. A self-loop counts twice."""
    degrees = {node.id: 0 for node in graph.nodes}
    for edge in graph.edges:
        if exclude_crossed and edge.crossed:
            continue
        degrees[edge.start] = degrees.get(edge.start, 0) + 1
        degrees[edge.end] = degrees.get(edge.end, 0) + 1
    return degrees


def remaining_edge_count(graph: Graph) -> int:
    return sum(1 for edge in graph.edges if not edge.crossed)


def clone_graph(graph: Graph) -> Graph:
    """Deep copy: node and edge records are copied by value."""
    return Graph(
        nodes=[replace(node) for node in graph.nodes],
        edges=[replace(edge) for edge in graph.edges],
    )


def uncrossed_subgraph(graph: Graph) -> Graph:
    """Clone keeping every node but only the edges not crossed yet."""
    return Graph(
        nodes=[replace(node) for node in graph.nodes],
        edges=[replace(edge) for edge in graph.edges if not edge.crossed],
    )


def node_index(graph: Graph) -> Dict[str, int]:
    """Dense id -> position mapping used to index the solver's arrays."""
    return {node.id: index for index, node in enumerate(graph.nodes)}


def connected_components(graph: Graph) -> List[List[str]]:
    """Components of the edge-bearing nodes, considering every edge of ``graph``.

    Isolated nodes are left out. Components come in node order, each listing
    its node ids in node order.
    """
    index = node_index(graph)
    parent = list(range(len(index)))

    def find(i):
        while parent[i] != i:
            parent[i] = parent[parent[i]]
            i = parent[i]
        return i

    touched = [False] * len(index)
    for edge in graph.edges:
        a, b = index[edge.start], index[edge.end]
        touched[a] = touched[b] = True
        root_a, root_b = find(a), find(b)
        if root_a != root_b:
            parent[max(root_a, root_b)] = min(root_a, root_b)

    components: Dict[int, List[str]] = {}
    for node in graph.nodes:
        i = index[node.id]
        if touched[i]:
            components.setdefault(find(i), []).append(node.id)
    return list(components.values())


def is_edge_connected(graph: Graph) -> bool:
    """True when all nodes with at least one edge lie in a single component."""
    return len(connected_components(graph)) <= 1
