from dataclasses import dataclass
from typing import Optional

from konigsberg.graph import Graph, uncrossed_subgraph
from konigsberg.solver.eulerian import EulerianKind, classify
from konigsberg.solver.path_builder import build_path


@dataclass(frozen=True)
class Hint:
    next_node: str
    message: str


def hint(graph: Graph, current_node: Optional[str]) -> Optional[Hint]:
    """Recommend the next node to visit, or None when there is nothing useful to say.

    Before the game starts this names a start node. Afterwards a fresh full
    trail is solved from ``current_node`` over the bridges still open and the
    node following ``current_node`` on it is recommended.
    """
    remaining = uncrossed_subgraph(graph)

    if current_node is None:
        info = classify(remaining)
        if not info.exists or not info.start_candidates:
            return None
        start = info.start_candidates[0]
        if info.kind == EulerianKind.PATH:
            return Hint(start, f"Start at {start} - it has an odd number of bridges!")
        return Hint(start, f"You can start anywhere! Try {start}.")

    path = build_path(remaining, current_node)
    if not path or current_node not in path:
        return None

    position = path.index(current_node)
    if position >= len(path) - 1:
        return None

    next_node = path[position + 1]
    return Hint(next_node, f"Move to {next_node} to continue the optimal path.")
