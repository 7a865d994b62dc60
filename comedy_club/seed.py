"""
Standalone seeding entry point.

Usage:
    python -m comedy_club.seed
"""

import asyncio
import sys

from comedy_club.config import AppConfig, config
from comedy_club.exceptions import StoreUnavailableError
from comedy_club.repositories.joke_repository import JokeRepository, create_mongo_client
from comedy_club.services.seeder import seed_database
from comedy_club.utils.logger import get_logger, setup_logging

logger = get_logger(__name__)


async def run(app_config: AppConfig) -> int:
    """
    Connect, seed and disconnect.

    Args:
        app_config: Application configuration

    Returns:
        Number of jokes inserted

    Raises:
        StoreUnavailableError: If MongoDB cannot be reached
    """
    client = create_mongo_client(app_config)
    try:
        store = JokeRepository(
            client[app_config.mongodb_database], app_config.mongodb_collection
        )
        if not await store.ping():
            raise StoreUnavailableError("MongoDB ping failed")
        return await seed_database(store)
    finally:
        await client.close()


def main() -> None:
    """Run the seeder and exit with a status code."""
    setup_logging(config.log_level)
    try:
        inserted = asyncio.run(run(config))
    except StoreUnavailableError as e:
        logger.error("Seeding failed", error=str(e), uri=config.masked_mongodb_uri)
        sys.exit(1)
    logger.info("Seeding completed", inserted=inserted)


if __name__ == "__main__":
    main()
