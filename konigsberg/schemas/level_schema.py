from pydantic import BaseModel, model_validator
from typing import List, Literal, Optional

from konigsberg.schemas.node_schema import NodeCreate
from konigsberg.schemas.edge_schema import EdgeCreate
from konigsberg.schemas.graph_schema import GraphRead
from konigsberg.solver.eulerian import EulerianKind

Difficulty = Literal["easy", "medium", "hard", "impossible"]

# taken by fixed routes under /levels
RESERVED_LEVEL_IDS = {"completed"}


# Data sent by user
class LevelCreate(BaseModel):
    id: Optional[str] = None  # generated when missing
    name: str
    description: Optional[str] = ""
    difficulty: Difficulty = "medium"
    nodes: List[NodeCreate]
    edges: List[EdgeCreate]

    @model_validator(mode="after")
    def check_graph(self):
        """Reject graphs the solver cannot work with: duplicate ids or dangling bridges."""
        if self.id in RESERVED_LEVEL_IDS:
            raise ValueError(f"level id {self.id!r} is reserved")

        node_ids = [node.id for node in self.nodes]
        if len(set(node_ids)) != len(node_ids):
            raise ValueError("node ids must be unique")

        edge_ids = [edge.id for edge in self.edges]
        if len(set(edge_ids)) != len(edge_ids):
            raise ValueError("edge ids must be unique")

        known = set(node_ids)
        for edge in self.edges:
            if edge.start not in known or edge.end not in known:
                raise ValueError(f"edge {edge.id} references an unknown node")
        return self


class LevelRead(BaseModel):
    id: str
    name: str
    description: Optional[str] = ""
    difficulty: str
    position: int
    is_builtin: bool
    node_count: int
    edge_count: int
    kind: EulerianKind
    completed: bool = False


class LevelDetail(LevelRead):
    graph: GraphRead
