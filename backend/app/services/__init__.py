"""Service layer."""
from app.services.event_service import EventService

__all__ = [
    "EventService",
]
