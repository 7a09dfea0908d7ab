"""
Abstract base class for per-entity extractors
"""

from abc import ABC, abstractmethod
from typing import Any, Mapping, Tuple
import logging

from sqlalchemy import Select, Table, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncConnection

from core.exceptions import ExtractionError, RowDecodeError
from migration.batching import DEFAULT_BATCH_SIZE, BatchAccumulator
from migration.loaders.bulk_writer import BulkWriter
from schemas.rows import TargetRow

logger = logging.getLogger(__name__)


class EntityExtractor(ABC):
    """
    Copy one entity from the source database to the target.
    
    Responsibilities:
    - Select exactly the columns the target row needs
    - Stream source rows without materialising the table
    - Convert each row to its target shape
    - Feed rows to a batch accumulator and flush the remainder
    
    Subclasses set the class attributes and implement ``transform``.
    Nothing is retried; any failure aborts the extractor.
    """
    
    name: str
    model: Any  # target ORM model
    source_table: Table
    depends_on: Tuple[str, ...] = ()
    
    def __init__(self, batch_size: int = DEFAULT_BATCH_SIZE):
        self.batch_size = batch_size
    
    def build_query(self) -> Select:
        """SELECT of the source columns this entity needs"""
        return select(*self.source_table.columns)
    
    @abstractmethod
    def transform(self, record: Mapping[str, Any]) -> TargetRow:
        """Convert one source row (keyed by source column name) to a target row"""
        pass
    
    def decode(self, record: Mapping[str, Any], row_number: int) -> TargetRow:
        """``transform`` with conversion failures reported as RowDecodeError"""
        try:
            return self.transform(record)
        except (ValueError, TypeError, KeyError) as e:
            field_errors = e.errors() if hasattr(e, "errors") else None
            raise RowDecodeError(
                f"Cannot convert {self.source_table.name} row {row_number}",
                context={
                    "entity": self.name,
                    "source_table": self.source_table.name,
                    "row_number": row_number,
                    "field_errors": field_errors,
                },
                original_exception=e
            )
    
    async def run(self, source: AsyncConnection, writer: BulkWriter) -> int:
        """
        Stream the source table into the target.
        
        Args:
            source: Open connection to the source database
            writer: Bulk writer bound to the target connection
            
        Returns:
            Number of rows processed (fed to the writer)
        
        Raises:
            ExtractionError: If the source query or stream fails
            RowDecodeError: If a row cannot be converted
            BulkWriteError: If a batch cannot be written
        """
        accumulator = BatchAccumulator(writer, self.model, self.batch_size)
        rows_read = 0
        
        logger.info(f"Extracting {self.name} from {self.source_table.name}")
        
        try:
            result = await source.stream(self.build_query())
        except SQLAlchemyError as e:
            raise ExtractionError(
                f"Failed to query {self.source_table.name}",
                context={
                    "entity": self.name,
                    "source_table": self.source_table.name,
                    "operation": "SELECT",
                },
                original_exception=e
            )
        
        try:
            async for record in result.mappings():
                rows_read += 1
                await accumulator.add(self.decode(record, rows_read))
        except SQLAlchemyError as e:
            raise ExtractionError(
                f"Failed while reading {self.source_table.name}",
                context={
                    "entity": self.name,
                    "source_table": self.source_table.name,
                    "rows_processed": rows_read,
                },
                original_exception=e
            )
        finally:
            await result.close()
        
        total = await accumulator.finish()
        logger.debug(f"{self.name}: {total} rows in {accumulator.flushes} batches")
        return total
