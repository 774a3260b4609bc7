"""Logging setup shared by scripts and the hosting application."""
import logging
from typing import Optional

from app.config import get_settings


def configure_logging(level: Optional[str] = None) -> None:
    """Configure root logging and quiet the SQLAlchemy loggers."""
    level = (level or get_settings().LOG_LEVEL).upper()

    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    # Explicitly set root logger level in case a host configured it already
    logging.getLogger().setLevel(level)

    # Silence SQLAlchemy query logging (too verbose)
    logging.getLogger('sqlalchemy.engine').setLevel(logging.WARNING)
    logging.getLogger('sqlalchemy.pool').setLevel(logging.WARNING)
