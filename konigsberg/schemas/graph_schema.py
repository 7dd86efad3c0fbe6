from pydantic import BaseModel
from typing import List

from konigsberg.schemas.node_schema import NodeRead
from konigsberg.schemas.edge_schema import EdgeRead


class GraphRead(BaseModel):
    nodes: List[NodeRead]
    edges: List[EdgeRead]

    class Config:
        from_attributes = True
