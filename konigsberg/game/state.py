"""Game state transitions.

A ``GameState`` is never mutated. Each transition clones the graph, applies
the change to the clone and returns a new state, so an older state stays valid
and undo is a replay of a shorter move history on a fresh clone of the level.
"""

import logging
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import FrozenSet, Optional, Sequence, Tuple

from konigsberg.graph import Graph, available_edges, clone_graph, edge_between, remaining_edge_count

logger = logging.getLogger(__name__)


class GameStatus(str, Enum):
    IDLE = "idle"
    PLAYING = "playing"
    WON = "won"
    LOST = "lost"


@dataclass(frozen=True)
class GameState:
    graph: Graph
    current_node: Optional[str] = None
    path: Tuple[str, ...] = ()
    crossed_edges: FrozenSet[str] = field(default_factory=frozenset)
    status: GameStatus = GameStatus.IDLE
    move_count: int = 0


@dataclass(frozen=True)
class MoveResult:
    success: bool
    message: Optional[str] = None
    game_won: bool = False
    game_lost: bool = False


def new_game(level_graph: Graph) -> GameState:
    return GameState(graph=clone_graph(level_graph))


def select_start_node(state: GameState, node_id: str) -> Tuple[GameState, bool]:
    """Put the player on ``node_id``. Only allowed before the first move."""
    if state.status != GameStatus.IDLE or node_id not in state.graph.node_ids():
        return state, False

    return replace(state, current_node=node_id, path=(node_id,), status=GameStatus.PLAYING), True


def make_move(state: GameState, target: str) -> Tuple[GameState, MoveResult]:
    """Cross the first open bridge from the current node to ``target``."""
    if state.status != GameStatus.PLAYING or state.current_node is None:
        return state, MoveResult(False, "Game not in progress")
    if target == state.current_node:
        return state, MoveResult(False, "Already at this node")

    edge = edge_between(state.graph, state.current_node, target)
    if edge is None:
        return state, MoveResult(False, "No bridge connects these locations!")

    graph = clone_graph(state.graph)
    for candidate in graph.edges:
        if candidate.id == edge.id:
            candidate.crossed = True
            break

    status = GameStatus.PLAYING
    won = lost = False
    if remaining_edge_count(graph) == 0:
        status, won = GameStatus.WON, True
    elif not available_edges(graph, target):
        # bridges remain but none leaves the target
        status, lost = GameStatus.LOST, True

    new_state = GameState(
        graph=graph,
        current_node=target,
        path=state.path + (target,),
        crossed_edges=state.crossed_edges | {edge.id},
        status=status,
        move_count=state.move_count + 1,
    )
    message = "Victory!" if won else "No more valid moves!" if lost else None
    return new_state, MoveResult(True, message, game_won=won, game_lost=lost)


def replay(level_graph: Graph, path: Sequence[str]) -> GameState:
    """Rebuild a state by playing ``path`` from a fresh clone of the level.

    The first entry is the start node. Hops that no longer match an open
    bridge stop the replay.
    """
    state = new_game(level_graph)
    if not path:
        return state

    state, _ = select_start_node(state, path[0])
    for target in path[1:]:
        state, result = make_move(state, target)
        if not result.success:
            logger.warning("Replay stopped at %s: %s", target, result.message)
            break
    return state


def undo_move(level_graph: Graph, state: GameState) -> Optional[GameState]:
    """State without the last move, or None when there is nothing to undo."""
    if len(state.path) <= 1:
        return None

    previous = replay(level_graph, state.path[:-1])
    # undoing a finished game always resumes play
    return replace(previous, status=GameStatus.PLAYING)
