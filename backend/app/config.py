"""Application configuration management."""
from pydantic_settings import BaseSettings
from functools import lru_cache
import subprocess
import logging


class Settings(BaseSettings):
    """Application settings."""

    # Database
    DATABASE_URL: str = "sqlite+aiosqlite:///./homies.db"

    @property
    def async_database_url(self) -> str:
        """Get DATABASE_URL with an async driver for async SQLAlchemy.

        Converts postgresql:// to postgresql+asyncpg:// and sqlite:// to
        sqlite+aiosqlite:// so plain URLs can be provided.
        """
        if self.DATABASE_URL.startswith("postgresql://"):
            return self.DATABASE_URL.replace("postgresql://", "postgresql+asyncpg://", 1)
        if self.DATABASE_URL.startswith("sqlite://"):
            return self.DATABASE_URL.replace("sqlite://", "sqlite+aiosqlite://", 1)
        return self.DATABASE_URL

    # Application
    ENVIRONMENT: str = "development"  # development, staging, or production
    SQL_ECHO: bool = False  # Log every SQL statement (very verbose)
    LOG_LEVEL: str = "INFO"

    class Config:
        env_file = ".env"
        case_sensitive = True


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


def get_version() -> str:
    """
    Get application version string.

    In staging: Returns version with commit hash (e.g., "v0.1.0+abc1234")
    Elsewhere: Returns clean version (e.g., "v0.1.0")
    """
    from app.version import VERSION

    settings = get_settings()
    version_str = f"v{VERSION}"

    if settings.ENVIRONMENT == "staging":
        try:
            commit_hash = subprocess.check_output(
                ["git", "rev-parse", "--short=7", "HEAD"],
                stderr=subprocess.DEVNULL,
                text=True
            ).strip()
            version_str = f"{version_str}+{commit_hash}"
        except (subprocess.CalledProcessError, FileNotFoundError):
            logger = logging.getLogger(__name__)
            logger.warning("Could not retrieve git commit hash for version string")

    return version_str
