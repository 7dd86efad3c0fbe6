# import moduls/libraries
from fastapi import APIRouter, Depends, Response
from sqlalchemy.orm import Session
from typing import Optional
from uuid import UUID


# import form project
from konigsberg.core.database import get_db
from konigsberg.schemas import GameCreate, GameRead, HintRead, MoveRead, NodeSelect, SolvableRead
from konigsberg.services import GameServices
from konigsberg.visualization.graph_visualization import generate_graph_visualization


router = APIRouter()


# Create game
@router.post("/", response_model=GameRead, status_code=201)
async def create_game(game_data: GameCreate, db: Session = Depends(get_db)):
    """Start a new game on a level"""
    services = GameServices(db)
    game = services.create_game(game_data.level_id)
    return services.serialize_game(game)


# Get game by id
@router.get("/{game_id}", response_model=GameRead)
async def get_game(game_id: UUID, db: Session = Depends(get_db)):
    """Fetch one game by ID"""
    services = GameServices(db)
    return services.serialize_game(services.get_game_by_id(game_id))


@router.post("/{game_id}/start", response_model=GameRead)
async def start_game(game_id: UUID, selection: NodeSelect, db: Session = Depends(get_db)):
    """Choose the start node"""
    services = GameServices(db)
    game, state = services.start_game(game_id, selection.node_id)
    return services.serialize_game(game, state)


@router.post("/{game_id}/moves", response_model=MoveRead)
async def make_move(game_id: UUID, selection: NodeSelect, db: Session = Depends(get_db)):
    """Cross a bridge to a neighbouring node"""
    services = GameServices(db)
    game, state, result = services.move(game_id, selection.node_id)
    return {
        "success": result.success,
        "message": result.message,
        "game_won": result.game_won,
        "game_lost": result.game_lost,
        "game": services.serialize_game(game, state),
    }


@router.post("/{game_id}/undo", response_model=GameRead)
async def undo_move(game_id: UUID, db: Session = Depends(get_db)):
    """Take back the last move"""
    services = GameServices(db)
    game, state = services.undo(game_id)
    return services.serialize_game(game, state)


@router.post("/{game_id}/reset", response_model=GameRead)
async def reset_game(game_id: UUID, db: Session = Depends(get_db)):
    services = GameServices(db)
    game, state = services.reset(game_id)
    return services.serialize_game(game, state)


@router.get("/{game_id}/hint", response_model=Optional[HintRead])
async def get_hint(game_id: UUID, db: Session = Depends(get_db)):
    """Next recommended node, null when there is none"""
    services = GameServices(db)
    return services.get_hint(game_id)


@router.get("/{game_id}/solvable", response_model=SolvableRead)
async def get_solvable(game_id: UUID, db: Session = Depends(get_db)):
    services = GameServices(db)
    return {"solvable": services.is_solvable(game_id)}


# Plotly figure of the game in progress
@router.get("/{game_id}/figure")
async def get_game_figure(game_id: UUID, db: Session = Depends(get_db)):
    services = GameServices(db)
    game = services.get_game_by_id(game_id)
    state = services.get_state(game)
    fig = generate_graph_visualization(state.graph, state.current_node, title=game.level.name)
    return Response(content=fig.to_json(), media_type="application/json")
