"""
Scoped relaxation of foreign-key enforcement on the target session
"""

import logging
from typing import Dict

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncConnection

from core.exceptions import ConstraintError, UnsupportedDialectError

logger = logging.getLogger(__name__)

RELAX_STATEMENTS: Dict[str, str] = {
    "postgresql": "SET session_replication_role = 'replica'",
    "sqlite": "PRAGMA foreign_keys = OFF",
}

RESTORE_STATEMENTS: Dict[str, str] = {
    "postgresql": "SET session_replication_role = 'origin'",
    "sqlite": "PRAGMA foreign_keys = ON",
}

# Query reporting the current mode, and the value meaning "enforced"
ENFORCEMENT_CHECKS: Dict[str, tuple] = {
    "postgresql": ("SHOW session_replication_role", "origin"),
    "sqlite": ("PRAGMA foreign_keys", 1),
}


class ConstraintManager:
    """
    Turn foreign-key checks off for the duration of a bulk load.
    
    The setting is session scoped, so it only affects the connection
    passed in. Use as an async context manager to guarantee ``release``
    runs on every exit path:
    
        async with ConstraintManager(conn):
            ...load...
    
    A failed ``acquire`` raises ConstraintError. A failed ``release`` is
    logged and reported through its return value only.
    """
    
    def __init__(self, conn: AsyncConnection):
        self.conn = conn
        self.dialect_name = conn.dialect.name
        if self.dialect_name not in RELAX_STATEMENTS:
            raise UnsupportedDialectError(
                f"Cannot relax constraints for dialect '{self.dialect_name}'",
                context={"dialect": self.dialect_name, "operation": "relax_constraints"}
            )
        self.relaxed = False
    
    async def acquire(self) -> None:
        """Disable foreign-key enforcement for this session"""
        try:
            await self.conn.execute(text(RELAX_STATEMENTS[self.dialect_name]))
            await self.conn.commit()
        except SQLAlchemyError as e:
            raise ConstraintError(
                "Failed to relax foreign-key enforcement",
                context={"dialect": self.dialect_name},
                original_exception=e
            )
        self.relaxed = True
        logger.info("Foreign-key enforcement relaxed for bulk load")
    
    async def release(self) -> bool:
        """
        Restore strict foreign-key enforcement.
        
        Any transaction left open by a failed write is rolled back first.
        Returns True when strict mode was restored.
        """
        try:
            if self.conn.in_transaction():
                await self.conn.rollback()
            await self.conn.execute(text(RESTORE_STATEMENTS[self.dialect_name]))
            await self.conn.commit()
        except SQLAlchemyError as e:
            logger.error(f"Failed to restore foreign-key enforcement: {e}")
            return False
        
        self.relaxed = False
        logger.info("Foreign-key enforcement restored")
        return True
    
    async def is_enforced(self) -> bool:
        """Check the session's current enforcement mode"""
        query, enforced_value = ENFORCEMENT_CHECKS[self.dialect_name]
        result = await self.conn.execute(text(query))
        return result.scalar() == enforced_value
    
    async def __aenter__(self) -> "ConstraintManager":
        await self.acquire()
        return self
    
    async def __aexit__(self, exc_type, exc, tb) -> bool:
        await self.release()
        return False
