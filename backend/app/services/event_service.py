"""Event service for creating, editing and joining events."""
import logging
from datetime import datetime
from typing import Optional, List

from sqlalchemy import select, func
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from app.models.event import Event, EventParticipant
from app.models.event_type import EventType
from app.schemas.event import EventFormModel, EventTypeOption, EventInfo, EventDetails

logger = logging.getLogger(__name__)


def _to_info(event: Event) -> EventInfo:
    return EventInfo(
        id=event.id,
        name=event.name,
        start=event.start,
        type=event.type.name if event.type else None,
        organiser=event.organiser.user_name if event.organiser else None,
    )


class EventService:
    """Service for managing events and participation."""

    def __init__(self, session: AsyncSession):
        """Initialize event service."""
        self.session = session

    async def _commit(self) -> None:
        """Commit the unit of work, rolling back before re-raising on failure."""
        try:
            await self.session.commit()
        except SQLAlchemyError:
            logger.exception("Failed to commit event changes")
            await self.session.rollback()
            raise

    async def _load_event(self, event_id: int) -> Optional[Event]:
        result = await self.session.execute(
            select(Event)
            .options(selectinload(Event.type), selectinload(Event.organiser))
            .execution_options(populate_existing=True)
            .where(Event.id == event_id)
        )
        return result.scalar_one_or_none()

    # ============== Create / Edit ==============

    async def add_event(self, form: EventFormModel, user_id: str) -> None:
        """
        Create a new event organised by the given user.

        Args:
            form: Submitted event fields
            user_id: Id of the authenticated user, stored as organiser
        """
        event = Event(
            name=form.name,
            description=form.description,
            created_on=datetime.now(),
            start=form.start,
            end=form.end,
            type_id=form.type_id,
            organiser_id=user_id,
        )
        self.session.add(event)
        await self._commit()
        logger.info("Event %r created by %s", event.name, user_id)

    async def edit_event(self, event_id: int, form: EventFormModel) -> Optional[Event]:
        """
        Overwrite the editable fields of an event.

        The organiser and creation time are left as they are.

        Returns:
            Updated event or None if not found
        """
        event = await self.session.get(Event, event_id)
        if event is None:
            logger.debug("Edit requested for missing event %s", event_id)
            return None

        event.name = form.name
        event.description = form.description
        event.start = form.start
        event.end = form.end
        event.type_id = form.type_id

        await self._commit()
        logger.info("Event %s updated", event_id)
        return event

    # ============== Queries ==============

    async def get_all_events(self) -> List[EventInfo]:
        """List every event ordered by id."""
        result = await self.session.execute(
            select(Event)
            .options(selectinload(Event.type), selectinload(Event.organiser))
            .execution_options(populate_existing=True)
            .order_by(Event.id)
        )
        return [_to_info(event) for event in result.scalars().all()]

    async def count_events(self) -> int:
        """Count all persisted events."""
        result = await self.session.execute(select(func.count(Event.id)))
        return result.scalar_one()

    async def get_event_details(self, event_id: int) -> Optional[EventDetails]:
        """Get the read-only view of an event, or None if it does not exist."""
        event = await self._load_event(event_id)
        if event is None:
            return None

        return EventDetails(
            id=event.id,
            name=event.name,
            description=event.description,
            start=event.start,
            end=event.end,
            created_on=event.created_on,
            type=event.type.name if event.type else None,
            organiser=event.organiser.user_name if event.organiser else None,
        )

    async def get_event_for_edit(self, event_id: int) -> Optional[EventFormModel]:
        """
        Get an event as a pre-filled form, or None if it does not exist.

        The returned form carries the available event types so the caller
        can render the type selector.
        """
        event = await self._load_event(event_id)
        if event is None:
            return None

        # Stored values may predate the current length limits
        return EventFormModel.model_construct(
            name=event.name,
            description=event.description,
            start=event.start,
            end=event.end,
            type_id=event.type_id,
            types=await self.get_event_types(),
        )

    async def get_event_types(self) -> List[EventTypeOption]:
        """List all event types ordered by id."""
        result = await self.session.execute(select(EventType).order_by(EventType.id))
        return [EventTypeOption.model_validate(t) for t in result.scalars().all()]

    async def is_organiser(self, event_id: int, user_id: str) -> bool:
        """Check whether the user organises the event."""
        event = await self.session.get(Event, event_id)
        return event is not None and event.organiser_id == user_id

    # ============== Participation ==============

    async def join_event(self, event_id: int, user_id: str) -> bool:
        """
        Add the user to the event's participants.

        Returns:
            True if joined, False if the event is missing or already joined
        """
        event = await self.session.get(Event, event_id)
        if event is None:
            return False

        existing = await self.session.get(EventParticipant, (user_id, event_id))
        if existing is not None:
            return False

        self.session.add(EventParticipant(helper_id=user_id, event_id=event_id))
        await self._commit()
        logger.info("User %s joined event %s", user_id, event_id)
        return True

    async def leave_event(self, event_id: int, user_id: str) -> bool:
        """
        Remove the user from the event's participants.

        Returns:
            True if removed, False if the user had not joined
        """
        participation = await self.session.get(EventParticipant, (user_id, event_id))
        if participation is None:
            return False

        await self.session.delete(participation)
        await self._commit()
        logger.info("User %s left event %s", user_id, event_id)
        return True

    async def get_joined_events(self, user_id: str) -> List[EventInfo]:
        """List the events the user joined, ordered by id."""
        result = await self.session.execute(
            select(Event)
            .join(EventParticipant, EventParticipant.event_id == Event.id)
            .options(selectinload(Event.type), selectinload(Event.organiser))
            .execution_options(populate_existing=True)
            .where(EventParticipant.helper_id == user_id)
            .order_by(Event.id)
        )
        return [_to_info(event) for event in result.scalars().all()]
