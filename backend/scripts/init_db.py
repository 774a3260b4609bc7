"""Database initialization script - creates tables and default event types."""
import asyncio
import sys
from pathlib import Path

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from app.config import get_settings, get_version
from app.database import AsyncSessionLocal, init_models
from app.logging_config import configure_logging
from app.seed import seed_event_types


async def main():
    """Main initialization function."""
    settings = get_settings()
    print(f"🚀 Homies {get_version()} - Database Initialization")
    print("=" * 60)
    print(f"Database: {settings.DATABASE_URL.split('@')[-1]}")

    try:
        print("📦 Creating database tables...")
        await init_models()
        print("✅ Tables created successfully")

        async with AsyncSessionLocal() as session:
            inserted = await seed_event_types(session)
        print(f"✅ Event types seeded ({inserted} new)")

        print("\n" + "=" * 60)
        print("✅ Database initialized successfully!")

    except Exception as e:
        print(f"\n❌ Initialization failed: {e}")
        import traceback
        traceback.print_exc()
        sys.exit(1)


if __name__ == "__main__":
    configure_logging()
    asyncio.run(main())
