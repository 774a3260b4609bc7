"""Reference data seeding."""
import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.event_type import EventType, DEFAULT_EVENT_TYPES

logger = logging.getLogger(__name__)


async def seed_event_types(session: AsyncSession) -> int:
    """
    Insert the default event types that are not present yet.

    Returns:
        Number of types inserted
    """
    result = await session.execute(select(EventType.id))
    existing_ids = set(result.scalars().all())

    missing = [
        EventType(id=type_id, name=name)
        for type_id, name in DEFAULT_EVENT_TYPES
        if type_id not in existing_ids
    ]
    if not missing:
        return 0

    session.add_all(missing)
    await session.commit()
    logger.info("Seeded %d event types", len(missing))
    return len(missing)
