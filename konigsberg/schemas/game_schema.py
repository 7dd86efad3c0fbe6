from pydantic import BaseModel
from typing import List, Optional
from uuid import UUID

from konigsberg.game.state import GameStatus
from konigsberg.schemas.graph_schema import GraphRead


class GameCreate(BaseModel):
    level_id: str


class NodeSelect(BaseModel):
    node_id: str


class GameRead(BaseModel):
    id: UUID
    level_id: str
    current_node: Optional[str] = None
    path: List[str]
    crossed_edges: List[str]
    status: GameStatus
    move_count: int
    remaining_edges: int
    graph: GraphRead


class MoveRead(BaseModel):
    success: bool
    message: Optional[str] = None
    game_won: bool = False
    game_lost: bool = False
    game: GameRead


class SolvableRead(BaseModel):
    solvable: bool
