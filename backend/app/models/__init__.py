"""SQLAlchemy models."""
from app.models.user import User
from app.models.event_type import EventType, DEFAULT_EVENT_TYPES
from app.models.event import Event, EventParticipant

__all__ = [
    "User",
    "EventType",
    "DEFAULT_EVENT_TYPES",
    "Event",
    "EventParticipant",
]
