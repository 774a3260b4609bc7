"""Event and participation models."""
from sqlalchemy import Column, Integer, String, DateTime, ForeignKey, Index
from sqlalchemy.orm import relationship
from app.database import Base

EVENT_NAME_MAX_LENGTH = 20
EVENT_DESCRIPTION_MAX_LENGTH = 150


class Event(Base):
    """
    A community gathering organised by a user.

    The organiser is assigned once on creation. Start and end are stored
    as given; nothing checks that the event ends after it starts.
    """
    __tablename__ = "events"

    id = Column(Integer, primary_key=True, index=True)

    name = Column(String(EVENT_NAME_MAX_LENGTH), nullable=False)
    description = Column(String(EVENT_DESCRIPTION_MAX_LENGTH), nullable=False)

    # References
    organiser_id = Column(
        String(450),
        ForeignKey('users.id'),
        nullable=False,
        index=True
    )
    type_id = Column(Integer, ForeignKey('types.id'), nullable=True)

    # Dates (naive local time)
    created_on = Column(DateTime, nullable=False)
    start = Column(DateTime, nullable=False)
    end = Column(DateTime, nullable=False)

    # Relationships
    organiser = relationship("User", back_populates="organised_events")
    type = relationship("EventType", back_populates="events")
    participants = relationship(
        "EventParticipant",
        back_populates="event",
        cascade="all, delete-orphan"
    )

    def __repr__(self):
        return (
            f"<Event(id={self.id}, name={self.name}, "
            f"organiser_id={self.organiser_id}, type_id={self.type_id})>"
        )


class EventParticipant(Base):
    """A user who joined someone else's event."""
    __tablename__ = "events_participants"

    helper_id = Column(
        String(450),
        ForeignKey('users.id', ondelete='CASCADE'),
        primary_key=True
    )
    event_id = Column(
        Integer,
        ForeignKey('events.id', ondelete='CASCADE'),
        primary_key=True
    )

    helper = relationship("User", back_populates="joined_events")
    event = relationship("Event", back_populates="participants")

    __table_args__ = (
        Index('idx_participant_event', 'event_id'),
    )

    def __repr__(self):
        return f"<EventParticipant(helper_id={self.helper_id}, event_id={self.event_id})>"
