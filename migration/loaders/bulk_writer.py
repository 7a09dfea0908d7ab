"""
Write batches of migrated rows with skip-on-duplicate semantics (idempotency)
"""

from typing import Callable, Dict, List, Sequence
import logging

from sqlalchemy import Table
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncConnection

from core.exceptions import BulkWriteError, UnsupportedDialectError
from schemas.rows import TargetRow

logger = logging.getLogger(__name__)

# Insert constructs that support ON CONFLICT, per target dialect
INSERT_CONSTRUCTS: Dict[str, Callable] = {
    "postgresql": postgresql.insert,
    "sqlite": sqlite.insert,
}


def dialect_insert(dialect_name: str, table: Table):
    """Return an INSERT for ``table`` that supports ON CONFLICT clauses"""
    try:
        construct = INSERT_CONSTRUCTS[dialect_name]
    except KeyError:
        raise UnsupportedDialectError(
            f"No ON CONFLICT insert for dialect '{dialect_name}'",
            context={"dialect": dialect_name, "operation": "INSERT"}
        )
    return construct(table)


class BulkWriter:
    """
    Insert migrated rows into the target database.
    
    Ensures:
    - One INSERT statement per batch
    - Rows whose primary key already exists are skipped, not updated
    - Each batch is committed on its own
    """
    
    def __init__(self, conn: AsyncConnection):
        self.conn = conn
        self.dialect_name = conn.dialect.name
        if self.dialect_name not in INSERT_CONSTRUCTS:
            raise UnsupportedDialectError(
                f"Bulk writes are not supported for dialect '{self.dialect_name}'",
                context={"dialect": self.dialect_name, "operation": "bulk_insert"}
            )
    
    def build_statement(self, table: Table):
        """INSERT ... ON CONFLICT (<primary key>) DO NOTHING"""
        stmt = dialect_insert(self.dialect_name, table)
        return stmt.on_conflict_do_nothing(
            index_elements=list(table.primary_key.columns)
        )
    
    @staticmethod
    def check_params(table: Table, params: List[dict]) -> None:
        """
        Reject parameter keys that are not column keys of ``table``.

        An executemany silently ignores unknown keys, which would turn a
        misnamed field into a column full of NULLs.
        """
        column_keys = set(table.c.keys())
        unknown = sorted({key for row in params for key in row} - column_keys)
        if unknown:
            raise BulkWriteError(
                f"Rows for {table.name} carry unknown columns: {', '.join(unknown)}",
                context={
                    "table_name": table.name,
                    "operation": "bind parameters",
                    "unknown_keys": unknown,
                }
            )

    async def rollback_quietly(self, table: Table) -> None:
        """Roll back after a failed batch without masking the write error"""
        try:
            await self.conn.rollback()
        except SQLAlchemyError as e:
            logger.warning(f"Rollback after failed insert into {table.name} also failed: {e}")

    async def write(self, model, rows: Sequence[TargetRow]) -> int:
        """
        Insert a batch of rows, skipping primary-key duplicates.
        
        Args:
            model: Target ORM model the rows belong to
            rows: Target-shaped rows, in source read order
            
        Returns:
            Number of rows attempted (skipped duplicates are included)
        """
        if not rows:
            return 0
        
        table: Table = model.__table__
        params = [row.to_insert_params() for row in rows]
        self.check_params(table, params)

        try:
            await self.conn.execute(self.build_statement(table), params)
            await self.conn.commit()
        except SQLAlchemyError as e:
            await self.rollback_quietly(table)
            pk = table.primary_key.columns.keys()[0]
            raise BulkWriteError(
                f"Bulk insert into {table.name} failed",
                context={
                    "table_name": table.name,
                    "operation": "INSERT ON CONFLICT DO NOTHING",
                    "batch_size": len(params),
                    "first_key": params[0].get(pk),
                    "last_key": params[-1].get(pk),
                },
                original_exception=e
            )
        
        logger.debug(f"Wrote batch of {len(params)} rows to {table.name}")
        return len(params)
