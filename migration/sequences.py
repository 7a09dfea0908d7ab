"""
Advance target key generators past the migrated keys.

Rows are inserted with explicit primary keys, which leaves each table's
sequence where it started. Reconciliation sets every sequence from the
current MAX of its key column so the next application insert does not
collide with a migrated row.
"""

from typing import List, NamedTuple
import logging

from sqlalchemy import Integer, cast, func, literal, select
from sqlalchemy.dialects.postgresql import REGCLASS
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncConnection

from core.exceptions import SequenceResetError, UnsupportedDialectError
from models import Course, Horse, Intermediary, PreRace, Race, Result, Trainer, User
from schemas.migration import SequenceResult

logger = logging.getLogger(__name__)


class SequenceEntry(NamedTuple):
    """A table's key column and the sequence that feeds it"""
    model: type
    key: str
    sequence: str


SEQUENCES = (
    SequenceEntry(User, "id", "users_id_seq"),
    SequenceEntry(Course, "course_id", "courses_course_id_seq"),
    SequenceEntry(Horse, "horse_id", "horses_horse_id_seq"),
    SequenceEntry(Trainer, "trainer_id", "trainers_trainer_id_seq"),
    SequenceEntry(Race, "race_id", "races_race_id_seq"),
    SequenceEntry(PreRace, "id", "pre_race_id_seq"),
    SequenceEntry(Result, "id", "results_id_seq"),
    SequenceEntry(Intermediary, "id", "intermediary_id_seq"),
)

SUPPORTED_DIALECTS = ("postgresql", "sqlite")


class SequenceReconciler:
    """
    Reset every key sequence on the target to MAX(key).

    Each table is handled in its own transaction; a failure on one table
    is logged and recorded in its result, and the remaining tables are
    still processed.

    On PostgreSQL an empty table leaves its sequence so that the next
    value is 1. SQLite derives new rowids from MAX(rowid) itself, so only
    the current maximum is recorded there.
    """

    def __init__(self, conn: AsyncConnection, sequences=SEQUENCES):
        self.conn = conn
        self.sequences = sequences
        self.dialect_name = conn.dialect.name
        if self.dialect_name not in SUPPORTED_DIALECTS:
            raise UnsupportedDialectError(
                f"Cannot reset sequences for dialect '{self.dialect_name}'",
                context={"dialect": self.dialect_name, "operation": "reset_sequences"}
            )

    def build_statement(self, entry: SequenceEntry):
        """SELECT that performs (or, on SQLite, simply reads) the reset"""
        key_column = entry.model.__table__.c[entry.key]
        max_key = select(func.max(key_column)).scalar_subquery()

        if self.dialect_name == "postgresql":
            return select(
                func.setval(
                    cast(literal(entry.sequence), REGCLASS),
                    func.coalesce(max_key, 1),
                    max_key.is_not(None),
                    type_=Integer,
                ).label("last_value"),
                max_key.label("max_key"),
            )
        return select(max_key.label("max_key"))

    async def reset(self, entry: SequenceEntry) -> SequenceResult:
        table_name = entry.model.__tablename__
        try:
            result = await self.conn.execute(self.build_statement(entry))
            max_key = result.mappings().one()["max_key"]
            await self.conn.commit()
        except SQLAlchemyError as e:
            try:
                await self.conn.rollback()
            except SQLAlchemyError as rollback_error:
                logger.warning(f"Rollback after failed reset of {entry.sequence} also failed: {rollback_error}")
            error = SequenceResetError(
                f"Failed to reset {entry.sequence}",
                context={"table_name": table_name, "sequence": entry.sequence},
                original_exception=e
            )
            logger.warning(str(error))
            return SequenceResult(
                table_name=table_name,
                sequence_name=entry.sequence,
                reset=False,
                error=str(e),
            )

        logger.debug(f"{entry.sequence} set from max {table_name}.{entry.key} = {max_key}")
        return SequenceResult(
            table_name=table_name,
            sequence_name=entry.sequence,
            max_key=max_key,
            reset=True,
        )

    async def reconcile(self) -> List[SequenceResult]:
        results = [await self.reset(entry) for entry in self.sequences]

        failed = [r.sequence_name for r in results if not r.reset]
        if failed:
            logger.warning(f"Sequences not reset: {', '.join(failed)}")
        logger.info("sequences reset")
        return results
