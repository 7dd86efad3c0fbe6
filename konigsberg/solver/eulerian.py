from dataclasses import dataclass, field
from enum import Enum
from typing import List

from konigsberg.graph import Graph, is_edge_connected, node_degrees


class EulerianKind(str, Enum):
    CIRCUIT = "circuit"
    PATH = "path"
    NONE = "none"


@dataclass(frozen=True)
class Classification:
    exists: bool
    kind: EulerianKind
    start_candidates: List[str] = field(default_factory=list)
    odd_degree_nodes: List[str] = field(default_factory=list)
    connected: bool = True


def odd_degree_nodes(graph: Graph) -> List[str]:
    """Nodes with an odd number of incident edges, in node order."""
    return [node_id for node_id, degree in node_degrees(graph).items() if degree % 2]


def classify(graph: Graph) -> Classification:
    """Decide whether ``graph`` has an Eulerian circuit, an Eulerian path, or neither.

    Degrees are counted over every edge of ``graph``, crossed or not. To ask
    whether a game can still be finished, pass ``uncrossed_subgraph(state)``.

    Besides the parity rule, all nodes with at least one edge must lie in one
    connected component. A graph without edges is a trivial circuit that may
    start on any node.
    """
    degrees = node_degrees(graph)
    odd = [node_id for node_id, degree in degrees.items() if degree % 2]
    connected = is_edge_connected(graph)

    if not connected:
        return Classification(False, EulerianKind.NONE, [], odd, connected=False)

    if not odd:
        candidates = [node_id for node_id in graph.node_ids() if degrees[node_id] > 0]
        return Classification(True, EulerianKind.CIRCUIT, candidates or graph.node_ids(), odd)
    if len(odd) == 2:
        return Classification(True, EulerianKind.PATH, list(odd), odd)
    return Classification(False, EulerianKind.NONE, [], odd)
