import logging
from typing import List, Optional, Set
from uuid import uuid4

from fastapi import HTTPException
from sqlalchemy import func

from konigsberg import models
from konigsberg.core.config import settings
from konigsberg.graph import Edge, Graph, Node
from konigsberg.levels import LEVELS
from konigsberg.schemas import EdgeCreate, LevelCreate, NodeCreate
from konigsberg.solver import Analysis, Classification, Solution, analyze, classify, solution_steps

logger = logging.getLogger(__name__)


class LevelServices:
    """ Handles all level related DB operation"""

    def __init__(self, db):
        self.db = db

    # seed built-in levels
    def seed_levels(self) -> int:
        """Insert the built-in levels that are missing. Returns how many were added"""
        added = 0
        for position, level in enumerate(LEVELS):
            if self.db.get(models.Level, level.id):
                continue
            level_data = LevelCreate(
                id=level.id,
                name=level.name,
                description=level.description,
                difficulty=level.difficulty,
                nodes=[NodeCreate(id=n.id, label=n.label, x=n.x, y=n.y) for n in level.graph.nodes],
                edges=[EdgeCreate(id=e.id, start=e.start, end=e.end) for e in level.graph.edges],
            )
            self.create_level(level_data, is_builtin=True, position=position)
            added += 1

        if added:
            logger.info("Seeded %d built-in levels", added)
        return added

    # create level
    def create_level(self, level_data: LevelCreate, is_builtin: bool = False, position: Optional[int] = None):
        """Insert new level to DB table levels and its nodes and edges"""
        level_id = level_data.id or f"custom-{uuid4().hex[:8]}"
        if self.db.get(models.Level, level_id):
            raise HTTPException(status_code=409, detail=f"Level {level_id} already exists")

        if position is None:
            last = self.db.query(func.max(models.Level.position)).scalar()
            position = 0 if last is None else last + 1

        level = models.Level(
            id=level_id,
            name=level_data.name,
            description=level_data.description,
            difficulty=level_data.difficulty,
            position=position,
            is_builtin=is_builtin,
            node_count=len(level_data.nodes),
            edge_count=len(level_data.edges),
        )
        self.db.add(level)
        self.db.flush()

        # Create nodes, build and return key → id map. Used to build edges
        node_map = {}
        for index, node_data in enumerate(level_data.nodes):
            node = models.Node(
                id=uuid4(),
                node_key=node_data.id,
                node_index=index,
                label=node_data.label,
                x_position=node_data.x,
                y_position=node_data.y,
                level_id=level.id,
            )
            self.db.add(node)
            node_map[node_data.id] = node.id
        self.db.flush()

        for index, edge_data in enumerate(level_data.edges):
            edge = models.Edge(
                id=uuid4(),
                edge_key=edge_data.id,
                edge_index=index,
                start_node_id=node_map[edge_data.start],
                end_node_id=node_map[edge_data.end],
                level_id=level.id,
            )
            self.db.add(edge)
        self.db.flush()

        self.db.commit()
        self.db.refresh(level)
        logger.info("Created level %s (%d nodes, %d bridges)", level.id, level.node_count, level.edge_count)
        return level

    # get all levels
    def get_all_levels(self) -> List[models.Level]:
        """Fetch levels in picker order"""
        return self.db.query(models.Level).order_by(models.Level.position.asc()).all()

    # get one level by id
    def get_level_by_id(self, level_id: str) -> models.Level:
        """Fetch level by id"""
        level = self.db.get(models.Level, level_id)
        if not level:
            raise HTTPException(status_code=404, detail="Level not found")
        return level

    def get_next_level(self, level_id: str) -> Optional[models.Level]:
        """Level after ``level_id`` in picker order, None for the last one"""
        level = self.get_level_by_id(level_id)
        return (
            self.db.query(models.Level)
            .filter(models.Level.position > level.position)
            .order_by(models.Level.position.asc())
            .first()
        )

    # delete one level
    def delete_level(self, level_id: str):
        """Fetch level by id an delete. Built-in levels stay"""
        level = self.get_level_by_id(level_id)
        if level.is_builtin:
            raise HTTPException(status_code=403, detail="Built-in levels cannot be deleted")
        self.db.delete(level)
        self.db.commit()
        logger.info("Deleted level %s", level_id)

    # completed levels are the ones with at least one won game
    def get_completed_level_ids(self) -> Set[str]:
        rows = (
            self.db.query(models.Game.level_id)
            .filter(models.Game.status == "won")
            .distinct()
            .all()
        )
        return {row[0] for row in rows}

    # convert ORM rows to the solver graph
    def to_graph(self, level: models.Level) -> Graph:
        """Canonical graph of a level, nodes and edges in stored order"""
        keys = {node.id: node.node_key for node in level.nodes}
        return Graph(
            nodes=[
                Node(id=node.node_key, label=node.label, x=node.x_position, y=node.y_position)
                for node in sorted(level.nodes, key=lambda n: n.node_index)
            ],
            edges=[
                Edge(id=edge.edge_key, start=keys[edge.start_node_id], end=keys[edge.end_node_id])
                for edge in sorted(level.edges, key=lambda e: e.edge_index)
            ],
        )

    def get_graph(self, level_id: str) -> Graph:
        return self.to_graph(self.get_level_by_id(level_id))

    def classify_level(self, level_id: str) -> Classification:
        return classify(self.get_graph(level_id))

    def analyze_level(self, level_id: str) -> Analysis:
        return analyze(self.get_graph(level_id), max_modifications=settings.MAX_MODIFICATIONS)

    def solve_level(self, level_id: str, start_node: Optional[str] = None) -> Solution:
        solution = solution_steps(self.get_graph(level_id), start_node)
        if solution is None:
            raise HTTPException(status_code=404, detail="This level has no solution")
        return solution

    # Serialize level data to JSON
    def serialize_level(self, level: models.Level, completed: Optional[Set[str]] = None, with_graph: bool = False):
        graph = self.to_graph(level)
        completed = self.get_completed_level_ids() if completed is None else completed
        level_data = {
            "id": level.id,
            "name": level.name,
            "description": level.description,
            "difficulty": level.difficulty,
            "position": level.position,
            "is_builtin": level.is_builtin,
            "node_count": level.node_count,
            "edge_count": level.edge_count,
            "kind": classify(graph).kind,
            "completed": level.id in completed,
        }
        if with_graph:
            level_data["graph"] = graph
        return level_data
