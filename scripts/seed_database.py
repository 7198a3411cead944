"""
Seed the database with demo data.

Creates tables if needed, replaces all rows with the demo dataset and
prints a bearer token for every seeded user.

Usage:
    python scripts/seed_database.py
"""
import asyncio
import logging

from orderdesk.api.security import create_access_token
from orderdesk.infrastructure.database import close_database, get_session_factory, init_database
from orderdesk.infrastructure.database.seed import seed_database
from orderdesk.infrastructure.logging import configure_logging

configure_logging("INFO")
logger = logging.getLogger(__name__)


async def main() -> None:
    logger.info("=" * 80)
    logger.info("DATABASE SEEDING")
    logger.info("=" * 80)

    try:
        await init_database()
        users = await seed_database(get_session_factory())

        logger.info("✅ Database seeding completed successfully")
        for user in users:
            token = create_access_token(user.id, role=user.role, email=user.email)
            logger.info(f"{user.email} ({user.role}): Bearer {token}")
    finally:
        await close_database()


if __name__ == "__main__":
    asyncio.run(main())
