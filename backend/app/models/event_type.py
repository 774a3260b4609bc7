"""Event type reference model."""
from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship
from app.database import Base

TYPE_NAME_MAX_LENGTH = 15

# Seed rows created by scripts/init_db.py
DEFAULT_EVENT_TYPES = (
    (1, "Animals"),
    (2, "Fun"),
    (3, "Discussion"),
    (4, "Work"),
)


class EventType(Base):
    """Category an event belongs to (e.g. Fun, Work)."""
    __tablename__ = "types"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(TYPE_NAME_MAX_LENGTH), nullable=False)

    events = relationship("Event", back_populates="type")

    def __repr__(self):
        return f"<EventType(id={self.id}, name={self.name})>"
