"""Pydantic schemas for event forms and views."""
from datetime import datetime
from typing import Optional, List
from pydantic import BaseModel, Field

from app.models.event import (
    EVENT_NAME_MAX_LENGTH,
    EVENT_DESCRIPTION_MAX_LENGTH,
)

DATE_FORMAT = "%Y-%m-%d %H:%M"


class EventTypeOption(BaseModel):
    """Event type as offered in the create/edit form."""
    id: int
    name: str

    model_config = {
        "from_attributes": True
    }


class EventFormModel(BaseModel):
    """
    User supplied fields for creating or editing an event.

    Only the column length limits are checked. Empty or short text and an
    end before the start are accepted and stored as given.
    """
    name: str = Field(..., max_length=EVENT_NAME_MAX_LENGTH)
    description: str = Field(..., max_length=EVENT_DESCRIPTION_MAX_LENGTH)
    start: datetime
    end: datetime
    type_id: Optional[int] = None

    # Filled when the form is prepared for editing
    types: List[EventTypeOption] = []


class EventInfo(BaseModel):
    """Event row in the all-events and joined-events lists."""
    id: int
    name: str
    start: datetime
    type: Optional[str] = None
    organiser: Optional[str] = None

    @property
    def start_text(self) -> str:
        return self.start.strftime(DATE_FORMAT)


class EventDetails(BaseModel):
    """Read-only view of a single event."""
    id: int
    name: str
    description: str
    start: datetime
    end: datetime
    created_on: datetime
    type: Optional[str] = None
    organiser: Optional[str] = None

    @property
    def start_text(self) -> str:
        return self.start.strftime(DATE_FORMAT)

    @property
    def end_text(self) -> str:
        return self.end.strftime(DATE_FORMAT)

    @property
    def created_on_text(self) -> str:
        return self.created_on.strftime(DATE_FORMAT)
