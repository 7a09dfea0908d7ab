"""
Async engine factories and target schema bootstrap
"""

import logging

from sqlalchemy import event
from sqlalchemy.engine import make_url
from sqlalchemy.exc import ArgumentError
from sqlalchemy.ext.asyncio import AsyncConnection, AsyncEngine, create_async_engine
from sqlalchemy.pool import NullPool

from models.base import Base
import models  # noqa: F401  registers every target table on Base.metadata

logger = logging.getLogger(__name__)


def mask_url(url: str) -> str:
    """Render a connection URL with its password hidden, for logs and errors"""
    try:
        return make_url(url).render_as_string(hide_password=True)
    except ArgumentError:
        return "<unparseable url>"


def create_source_engine(url: str, echo: bool = False) -> AsyncEngine:
    """Create the engine for the legacy source database (read only use)"""
    return create_async_engine(
        url,
        echo=echo,
        poolclass=NullPool,  # one connection for the lifetime of a run
    )


def create_target_engine(url: str, echo: bool = False) -> AsyncEngine:
    """
    Create the engine for the target database.
    
    SQLite does not enforce foreign keys unless asked to per connection,
    so strict mode is switched on for every new SQLite connection.
    """
    engine = create_async_engine(
        url,
        echo=echo,
        poolclass=NullPool,
    )
    
    if engine.dialect.name == "sqlite":
        @event.listens_for(engine.sync_engine, "connect")
        def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
            cursor = dbapi_connection.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()
    
    return engine


async def create_tables(conn: AsyncConnection) -> None:
    """
    Create every target table that does not exist yet.
    
    Safe to call on every run: existing tables are left untouched.
    """
    logger.info("Ensuring target schema")
    await conn.run_sync(Base.metadata.create_all)
    await conn.commit()
    logger.info("Target schema ready")
