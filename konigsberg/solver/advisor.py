"""Explain why a puzzle cannot be solved and propose bridge changes that fix it."""

from dataclasses import dataclass, field
from enum import Enum
from typing import List

from konigsberg.graph import Graph, connected_components, node_degrees

MAX_MODIFICATIONS = 3


class ModificationType(str, Enum):
    ADD = "add"
    REMOVE = "remove"


@dataclass(frozen=True)
class BridgeModification:
    type: ModificationType
    start: str
    end: str
    reason: str


@dataclass(frozen=True)
class Analysis:
    solvable: bool
    odd_degree_count: int
    odd_degree_nodes: List[str]
    suggestion: str
    modifications: List[BridgeModification] = field(default_factory=list)


def analyze(graph: Graph, max_modifications: int = MAX_MODIFICATIONS) -> Analysis:
    degrees = node_degrees(graph)
    odd_nodes = [node_id for node_id, degree in degrees.items() if degree % 2]

    if len(odd_nodes) > 2:
        modifications = suggest_modifications(graph, odd_nodes, degrees)
        return Analysis(
            solvable=False,
            odd_degree_count=len(odd_nodes),
            odd_degree_nodes=odd_nodes,
            suggestion=(
                f"This puzzle is unsolvable. It has {len(odd_nodes)} nodes with odd degree "
                f"({', '.join(odd_nodes)}). An Eulerian path requires exactly 0 or 2 nodes "
                f"with odd degree."
            ),
            modifications=modifications[:max_modifications],
        )

    components = connected_components(graph)
    if len(components) > 1:
        return Analysis(
            solvable=False,
            odd_degree_count=len(odd_nodes),
            odd_degree_nodes=odd_nodes,
            suggestion=(
                f"This puzzle is unsolvable. Its bridges form {len(components)} separate "
                f"groups, so no single walk can reach all of them."
            ),
        )

    if not odd_nodes:
        return Analysis(
            solvable=True,
            odd_degree_count=0,
            odd_degree_nodes=[],
            suggestion="This puzzle has an Eulerian circuit! You can start from any node.",
        )
    return Analysis(
        solvable=True,
        odd_degree_count=2,
        odd_degree_nodes=odd_nodes,
        suggestion=f"This puzzle has an Eulerian path! Start from {odd_nodes[0]} or {odd_nodes[1]}.",
    )


def suggest_modifications(graph: Graph, odd_nodes: List[str], degrees: dict) -> List[BridgeModification]:
    """Pair up odd-degree nodes until at most two remain, then look for removable bridges.

    Adding a bridge flips the parity of both its ends, so every ``add`` joins two
    odd nodes. Pairs that already share a bridge are preferred.

    A bridge is offered for removal at most once, even when both of the first
    two odd nodes have it as their first bridge.
    """
    modifications = []
    remaining = list(odd_nodes)

    while len(remaining) > 2:
        start, end = _pick_pair(graph, remaining)
        modifications.append(BridgeModification(
            type=ModificationType.ADD,
            start=start,
            end=end,
            reason=f"Adding a bridge between {start} and {end} will make both nodes even-degree.",
        ))
        remaining.remove(start)
        remaining.remove(end)

    suggested = set()
    for node_id in odd_nodes[:2]:
        incident = [edge for edge in graph.edges if edge.touches(node_id)]
        if len(incident) <= 1:
            continue

        edge = incident[0]
        other = edge.other_end(node_id)
        if other == node_id or edge.id in suggested:
            continue
        if degrees.get(other, 0) % 2:
            suggested.add(edge.id)
            modifications.append(BridgeModification(
                type=ModificationType.REMOVE,
                start=edge.start,
                end=edge.end,
                reason=f"Removing this bridge would make both {node_id} and {other} even-degree.",
            ))

    return modifications


def _pick_pair(graph: Graph, candidates: List[str]):
    """First pair (index order) already joined by a bridge, else the very first pair."""
    first = None
    for i, start in enumerate(candidates):
        for end in candidates[i + 1:]:
            if any(edge.connects(start, end) for edge in graph.edges):
                return start, end
            if first is None:
                first = (start, end)
    return first
