"""Script to create database tables from SQLAlchemy models."""

import asyncio
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from bookstore.infrastructure.database.session import create_tables  # noqa: E402
from bookstore.infrastructure.logging import configure_logging, get_logger  # noqa: E402
from bookstore.modules.book import models as book_models  # noqa: E402,F401

logger = get_logger(__name__)


async def main() -> None:
    """Create database tables."""
    configure_logging()
    logger.info("Creating database tables...")

    try:
        await create_tables()
        logger.info("Database tables created successfully")
    except Exception as e:
        logger.error(f"Error creating database tables: {str(e)}", exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    asyncio.run(main())
