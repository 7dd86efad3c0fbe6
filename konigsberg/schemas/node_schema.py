from pydantic import BaseModel


class NodeCreate(BaseModel):
    id: str
    label: str
    x: float = 0
    y: float = 0


class NodeRead(NodeCreate):

    class Config:
        from_attributes = True
