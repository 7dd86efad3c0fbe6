from sqlalchemy import Column, Float, ForeignKey, Integer, String, Uuid
from sqlalchemy.orm import relationship
from konigsberg.core.database import Base
from uuid import uuid4


class Node(Base):
    __tablename__ = "nodes"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid4)
    node_key = Column(String, nullable=False)  # id inside the level graph, e.g. "A"
    node_index = Column(Integer, nullable=False)
    label = Column(String, nullable=False)
    x_position = Column(Float, nullable=False)
    y_position = Column(Float, nullable=False)
    level_id = Column(String, ForeignKey("levels.id"), nullable=False)

    # Relationship
    level = relationship("Level", back_populates="nodes")
