"""
Script to create the target schema without migrating any data
"""

import asyncio
import logging
import sys

import click
from sqlalchemy.exc import SQLAlchemyError

from core.config import settings
from core.database import create_target_engine, create_tables, mask_url
from core.logging import setup_logging

logger = logging.getLogger(__name__)


async def init_database(url: str):
    logger.info(f"Connecting to {mask_url(url)}...")
    engine = create_target_engine(url)
    
    try:
        async with engine.connect() as conn:
            await create_tables(conn)
    finally:
        await engine.dispose()


@click.command()
@click.option("--target-url", default=None, help="Target database URL (default: TARGET_DATABASE_URL)")
def main(target_url):
    """Create every target table that does not exist yet."""
    setup_logging()
    
    try:
        asyncio.run(init_database(target_url or settings.TARGET_DATABASE_URL))
    except (SQLAlchemyError, OSError) as e:
        logger.error(f"Schema creation failed: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
