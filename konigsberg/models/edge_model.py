from sqlalchemy import Column, ForeignKey, Integer, String, Uuid
from sqlalchemy.orm import relationship
from konigsberg.core.database import Base
from uuid import uuid4


class Edge(Base):
    __tablename__ = "edges"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid4)
    edge_key = Column(String, nullable=False)  # bridge id inside the level graph, e.g. "e1"
    edge_index = Column(Integer, nullable=False)  # stored order, breaks ties between parallel bridges
    start_node_id = Column(Uuid(as_uuid=True), ForeignKey("nodes.id"), nullable=False)
    end_node_id = Column(Uuid(as_uuid=True), ForeignKey("nodes.id"), nullable=False)
    level_id = Column(String, ForeignKey("levels.id"), nullable=False)

    # Relationships
    level = relationship("Level", back_populates="edges")
    start_node = relationship("Node", foreign_keys=[start_node_id])
    end_node = relationship("Node", foreign_keys=[end_node_id])
