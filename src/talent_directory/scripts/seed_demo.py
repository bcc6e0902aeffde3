"""Seed the demo tenant's subscribers and talent pools into the database.

Usage: python -m talent_directory.scripts.seed_demo
"""

import sys

import structlog

from talent_directory.core.database import db_manager
from talent_directory.core.logging import configure_logging
from talent_directory.kv.sql import SqlKeyValueStore
from talent_directory.services.seed_service import SeedService

logger = structlog.get_logger(__name__)


def seed() -> bool:
    db_manager.initialize()
    try:
        with db_manager.get_session() as db:
            return SeedService().seed_demo_data(SqlKeyValueStore(db))
    finally:
        db_manager.close()


if __name__ == "__main__":
    configure_logging()
    written = seed()
    logger.info("Seeding finished", written=written, database=db_manager.database_url)
    sys.exit(0)
