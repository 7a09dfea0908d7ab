"""
Script to create an API user, or reset the password of an existing one

Usage:
    python scripts/add_user.py --username padraic --password testing
"""

import asyncio
import logging
import sys

import click
from sqlalchemy.exc import SQLAlchemyError

from core.config import MigrationConfig
from core.database import create_target_engine
from core.exceptions import MigrationException
from core.logging import setup_logging
from migration.users import upsert_user

logger = logging.getLogger(__name__)


async def add_user(url: str, username: str, password: str, attempts: int, delay: float):
    engine = create_target_engine(url)
    
    try:
        async with engine.connect() as conn:
            await upsert_user(conn, username, password, attempts=attempts, delay=delay)
    finally:
        await engine.dispose()


@click.command()
@click.option("--username", required=True, help="Username")
@click.option("--password", required=True, help="Plain-text password (stored as a bcrypt hash)")
@click.option("--target-url", default=None, help="Target database URL (default: TARGET_DATABASE_URL)")
def main(username, password, target_url):
    """Create or update an API user."""
    setup_logging()
    config = MigrationConfig.from_settings(target_url=target_url)
    
    try:
        asyncio.run(add_user(
            config.target_url,
            username,
            password,
            attempts=config.retry_attempts,
            delay=config.retry_delay,
        ))
    except (MigrationException, SQLAlchemyError) as e:
        logger.error(f"Saving user failed: {e}")
        sys.exit(1)
    
    click.echo(f"user {username!r} saved")


if __name__ == "__main__":
    main()
