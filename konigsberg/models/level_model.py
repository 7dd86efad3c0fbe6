from sqlalchemy import Column, Integer, String, func, DateTime, Boolean
from sqlalchemy.orm import relationship
from konigsberg.core.database import Base


class Level(Base):
    __tablename__ = "levels"

    id = Column(String, primary_key=True)  # slug, e.g. "konigsberg-original"
    name = Column(String, nullable=False)
    description = Column(String, default="")
    difficulty = Column(String, nullable=False, default="medium")
    position = Column(Integer, nullable=False)  # order in the level picker
    is_builtin = Column(Boolean, nullable=False, default=False)
    node_count = Column(Integer, nullable=False)
    edge_count = Column(Integer, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    # relationship
    nodes = relationship("Node", back_populates="level", cascade="all, delete-orphan", order_by="Node.node_index")
    edges = relationship("Edge", back_populates="level", cascade="all, delete-orphan", order_by="Edge.edge_index")
    games = relationship("Game", back_populates="level", cascade="all, delete-orphan")
