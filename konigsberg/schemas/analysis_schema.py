from pydantic import BaseModel
from typing import List, Optional

from konigsberg.schemas.edge_schema import EdgeRead
from konigsberg.solver.advisor import ModificationType
from konigsberg.solver.eulerian import EulerianKind


class ClassificationRead(BaseModel):
    exists: bool
    kind: EulerianKind
    start_candidates: List[str]
    odd_degree_nodes: List[str]
    connected: bool

    class Config:
        from_attributes = True


class ModificationRead(BaseModel):
    type: ModificationType
    start: str
    end: str
    reason: str

    class Config:
        from_attributes = True


class AnalysisRead(BaseModel):
    solvable: bool
    odd_degree_count: int
    odd_degree_nodes: List[str]
    suggestion: str
    modifications: List[ModificationRead] = []

    class Config:
        from_attributes = True


class StepRead(BaseModel):
    node: str
    edge: Optional[EdgeRead] = None
    description: str

    class Config:
        from_attributes = True


class SolutionRead(BaseModel):
    path: List[str]
    edges: List[EdgeRead]
    steps: List[StepRead]

    class Config:
        from_attributes = True


class HintRead(BaseModel):
    next_node: str
    message: str

    class Config:
        from_attributes = True
