from sqlalchemy import Column, ForeignKey, Integer, JSON, String, DateTime, Uuid, func
from sqlalchemy.orm import relationship
from konigsberg.core.database import Base
from uuid import uuid4


class Game(Base):
    """A play session. Only the move history is stored, the graph state is replayed from it."""
    __tablename__ = "games"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid4)
    level_id = Column(String, ForeignKey("levels.id"), nullable=False)
    path = Column(JSON, nullable=False, default=list)  # visited node ids, start node first
    status = Column(String, nullable=False, default="idle")  # idle, playing, won, lost
    move_count = Column(Integer, nullable=False, default=0)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    level = relationship("Level", back_populates="games")
