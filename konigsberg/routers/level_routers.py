# import moduls/libraries
from fastapi import APIRouter, Depends, Query, Response
from sqlalchemy.orm import Session
from typing import List, Optional


# import form project
from konigsberg.core.database import get_db
from konigsberg.schemas import (
    AnalysisRead, ClassificationRead, LevelCreate, LevelDetail, LevelRead, SolutionRead
)
from konigsberg.services import LevelServices
from konigsberg.visualization.graph_visualization import generate_graph_visualization


router = APIRouter()


# get a list of levels (GET)
@router.get("/", response_model=List[LevelRead])
async def get_levels(db: Session = Depends(get_db)):
    """Get all levels in picker order"""
    services = LevelServices(db)
    completed = services.get_completed_level_ids()
    return [services.serialize_level(level, completed) for level in services.get_all_levels()]


# Create level
@router.post("/", response_model=LevelDetail, status_code=201)
async def create_level(level: LevelCreate, db: Session = Depends(get_db)):
    """Create a custom level"""
    services = LevelServices(db)
    new_level = services.create_level(level)
    return services.serialize_level(new_level, with_graph=True)


@router.get("/completed", response_model=List[str])
async def get_completed_levels(db: Session = Depends(get_db)):
    """Ids of levels with at least one won game"""
    services = LevelServices(db)
    return sorted(services.get_completed_level_ids())


# Get level by id
@router.get("/{level_id}", response_model=LevelDetail)
async def get_level(level_id: str, db: Session = Depends(get_db)):
    """Fetch one level by ID"""
    services = LevelServices(db)
    return services.serialize_level(services.get_level_by_id(level_id), with_graph=True)


# API Delete Request
@router.delete("/{level_id}", status_code=204)
async def delete_level(level_id: str, db: Session = Depends(get_db)):
    """Delete a custom level"""
    services = LevelServices(db)
    services.delete_level(level_id)
    return Response(status_code=204)


@router.get("/{level_id}/next", response_model=Optional[LevelRead])
async def get_next_level(level_id: str, db: Session = Depends(get_db)):
    """Level that follows in picker order, null after the last one"""
    services = LevelServices(db)
    next_level = services.get_next_level(level_id)
    if next_level is None:
        return None
    return services.serialize_level(next_level)


@router.get("/{level_id}/classification", response_model=ClassificationRead)
async def get_classification(level_id: str, db: Session = Depends(get_db)):
    """Circuit, path or none"""
    services = LevelServices(db)
    return services.classify_level(level_id)


@router.get("/{level_id}/analysis", response_model=AnalysisRead)
async def get_analysis(level_id: str, db: Session = Depends(get_db)):
    """Why a level is (un)solvable and how to fix it"""
    services = LevelServices(db)
    return services.analyze_level(level_id)


@router.get("/{level_id}/solution", response_model=SolutionRead)
async def get_solution(
    level_id: str,
    db: Session = Depends(get_db),
    start: Optional[str] = Query(None, description="Preferred start node"),
):
    """Full solution with narrated steps for playback"""
    services = LevelServices(db)
    return services.solve_level(level_id, start)


# Plotly figure of the level for visualization
@router.get("/{level_id}/figure")
async def get_level_figure(level_id: str, db: Session = Depends(get_db)):
    services = LevelServices(db)
    level = services.get_level_by_id(level_id)
    fig = generate_graph_visualization(services.to_graph(level), title=level.name)
    return Response(content=fig.to_json(), media_type="application/json")
