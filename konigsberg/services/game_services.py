import logging
from typing import Optional, Tuple
from uuid import UUID

from fastapi import HTTPException

from konigsberg import models
from konigsberg.game import GameState, MoveResult, make_move, replay, select_start_node, undo_move
from konigsberg.graph import remaining_edge_count
from konigsberg.services.level_services import LevelServices
from konigsberg.solver import Hint, hint, is_solvable_from_state

logger = logging.getLogger(__name__)


class GameServices:
    """ Handles play sessions. Only the move history is stored, state is replayed from it"""

    def __init__(self, db):
        self.db = db
        self.levels = LevelServices(db)

    # create game
    def create_game(self, level_id: str) -> models.Game:
        level = self.levels.get_level_by_id(level_id)
        game = models.Game(level_id=level.id, path=[], status="idle", move_count=0)
        self.db.add(game)
        self.db.commit()
        self.db.refresh(game)
        logger.info("New game %s on level %s", game.id, level.id)
        return game

    # get one game by id
    def get_game_by_id(self, game_id: UUID) -> models.Game:
        game = self.db.get(models.Game, game_id)
        if not game:
            raise HTTPException(status_code=404, detail="Game not found")
        return game

    def get_state(self, game: models.Game) -> GameState:
        """Replay the stored path on a fresh clone of the level graph"""
        return replay(self.levels.to_graph(game.level), game.path or [])

    def start_game(self, game_id: UUID, node_id: str) -> Tuple[models.Game, GameState]:
        game = self.get_game_by_id(game_id)
        state, selected = select_start_node(self.get_state(game), node_id)
        if not selected:
            raise HTTPException(status_code=400, detail=f"Cannot start at {node_id}")
        return self._save(game, state), state

    def move(self, game_id: UUID, node_id: str) -> Tuple[models.Game, GameState, MoveResult]:
        game = self.get_game_by_id(game_id)
        state, result = make_move(self.get_state(game), node_id)
        if not result.success:
            raise HTTPException(status_code=400, detail=result.message)

        if result.game_won:
            logger.info("Game %s won on level %s in %d moves", game.id, game.level_id, state.move_count)
        return self._save(game, state), state, result

    def undo(self, game_id: UUID) -> Tuple[models.Game, GameState]:
        game = self.get_game_by_id(game_id)
        state = undo_move(self.levels.to_graph(game.level), self.get_state(game))
        if state is None:
            raise HTTPException(status_code=400, detail="Nothing to undo")
        return self._save(game, state), state

    def reset(self, game_id: UUID) -> Tuple[models.Game, GameState]:
        game = self.get_game_by_id(game_id)
        state = replay(self.levels.to_graph(game.level), [])
        return self._save(game, state), state

    def get_hint(self, game_id: UUID) -> Optional[Hint]:
        game = self.get_game_by_id(game_id)
        state = self.get_state(game)
        return hint(state.graph, state.current_node)

    def is_solvable(self, game_id: UUID) -> bool:
        """Can every open bridge still be crossed from where the player stands"""
        game = self.get_game_by_id(game_id)
        state = self.get_state(game)
        if state.current_node is None:
            return self.levels.classify_level(game.level_id).exists
        return is_solvable_from_state(state.graph, state.current_node)

    def _save(self, game: models.Game, state: GameState) -> models.Game:
        game.path = list(state.path)
        game.status = state.status.value
        game.move_count = state.move_count
        self.db.commit()
        self.db.refresh(game)
        return game

    # Serialize game data to JSON
    def serialize_game(self, game: models.Game, state: Optional[GameState] = None):
        state = state or self.get_state(game)
        return {
            "id": game.id,
            "level_id": game.level_id,
            "current_node": state.current_node,
            "path": list(state.path),
            "crossed_edges": sorted(state.crossed_edges),
            "status": state.status,
            "move_count": state.move_count,
            "remaining_edges": remaining_edge_count(state.graph),
            "graph": state.graph,
        }
