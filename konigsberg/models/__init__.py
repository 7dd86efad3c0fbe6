from konigsberg.models.level_model import Level
from konigsberg.models.node_model import Node
from konigsberg.models.edge_model import Edge
from konigsberg.models.game_model import Game
