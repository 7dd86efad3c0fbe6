from konigsberg.schemas.node_schema import NodeCreate, NodeRead
from konigsberg.schemas.edge_schema import EdgeCreate, EdgeRead
from konigsberg.schemas.graph_schema import GraphRead
from konigsberg.schemas.level_schema import LevelCreate, LevelRead, LevelDetail
from konigsberg.schemas.analysis_schema import (
    AnalysisRead, ClassificationRead, HintRead, ModificationRead, SolutionRead, StepRead
)
from konigsberg.schemas.game_schema import GameCreate, GameRead, MoveRead, NodeSelect, SolvableRead
