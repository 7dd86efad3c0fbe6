from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Tuple

from konigsberg.graph import Edge, Graph
from konigsberg.solver.path_builder import build_path


@dataclass(frozen=True)
class Step:
    node: str
    edge: Optional[Edge]
    description: str


@dataclass(frozen=True)
class Solution:
    path: List[str]
    edges: List[Edge] = field(default_factory=list)
    steps: List[Step] = field(default_factory=list)


def _hops(graph: Graph, path: List[str]) -> Iterator[Tuple[str, str, Edge]]:
    """Pair each hop of ``path`` with the uncrossed edge it uses.

    Parallel bridges are told apart by id: a hop takes the first matching edge
    that no earlier hop has taken, so each edge shows up at most once. Hops
    with no such edge are skipped.
    """
    taken = set()
    for start, end in zip(path, path[1:]):
        for edge in graph.edges:
            if not edge.crossed and edge.id not in taken and edge.connects(start, end):
                taken.add(edge.id)
                yield start, end, edge
                break


def edges_along(graph: Graph, path: List[str]) -> List[Edge]:
    return [edge for _, _, edge in _hops(graph, path)]


def describe(graph: Graph, path: List[str]) -> List[Step]:
    """Turn a node sequence into playback steps."""
    if not path:
        return []

    steps = [Step(path[0], None, f"Start at node {path[0]}")]
    for start, end, edge in _hops(graph, path):
        steps.append(Step(end, edge, f"Cross bridge from {start} to {end}"))
    return steps


def solution_edges(graph: Graph, start_node: Optional[str] = None) -> Optional[List[Edge]]:
    path = build_path(graph, start_node)
    if path is None:
        return None
    return edges_along(graph, path)


def solution_steps(graph: Graph, start_node: Optional[str] = None) -> Optional[Solution]:
    """Solve ``graph`` and narrate the result in one go."""
    path = build_path(graph, start_node)
    if path is None:
        return None

    steps = describe(graph, path)
    return Solution(path=path, edges=[step.edge for step in steps[1:]], steps=steps)
