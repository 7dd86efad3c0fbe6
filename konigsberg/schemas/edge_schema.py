from pydantic import BaseModel


class EdgeCreate(BaseModel):
    id: str
    start: str
    end: str


class EdgeRead(EdgeCreate):
    crossed: bool = False

    class Config:
        from_attributes = True
