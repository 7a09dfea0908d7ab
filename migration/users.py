"""
Create or update API users on the target database
"""

import logging

import bcrypt
from sqlalchemy.ext.asyncio import AsyncConnection

from core.exceptions import ConfigurationError
from core.retry import retry_async
from migration.loaders.bulk_writer import dialect_insert
from models import User

logger = logging.getLogger(__name__)

DEFAULT_ROUNDS = 10


def hash_password(username: str, password: str, rounds: int = DEFAULT_ROUNDS) -> str:
    """
    Validate credentials and return a bcrypt hash of the password.

    Raises:
        ConfigurationError: If the username or password is blank
    """
    if not username.strip():
        raise ConfigurationError("username is required", context={"field": "username"})
    if not password.strip():
        raise ConfigurationError("password is required", context={"field": "password"})

    hashed = bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt(rounds=rounds))
    return hashed.decode("utf-8")


def check_password(password: str, hashed: str) -> bool:
    return bcrypt.checkpw(password.encode("utf-8"), hashed.encode("utf-8"))


async def upsert_user(
    conn: AsyncConnection,
    username: str,
    password: str,
    attempts: int = 5,
    delay: float = 0.1,
    rounds: int = DEFAULT_ROUNDS,
) -> None:
    """
    Insert a user, or replace the password of an existing one.

    The write is retried on transient database errors.
    """
    hashed = hash_password(username, password, rounds=rounds)
    table = User.__table__

    stmt = dialect_insert(conn.dialect.name, table).values(
        username=username,
        password=hashed,
    )
    stmt = stmt.on_conflict_do_update(
        index_elements=[table.c.username],
        set_={"password": stmt.excluded.password},
    )

    async def write() -> None:
        try:
            await conn.execute(stmt)
            await conn.commit()
        except Exception:
            await conn.rollback()
            raise

    await retry_async(write, attempts=attempts, delay=delay, description=f"save user {username}")
    logger.info(f"user {username!r} saved")
