"""
Fixed-size batching between an extractor and the bulk writer
"""

from typing import List
import logging

from migration.loaders.bulk_writer import BulkWriter
from schemas.rows import TargetRow

logger = logging.getLogger(__name__)

DEFAULT_BATCH_SIZE = 500


class BatchAccumulator:
    """
    Buffer rows for one entity and flush them in fixed-size batches.
    
    ``add`` flushes as soon as the buffer is full; ``finish`` flushes the
    trailing partial batch and must be called once the source is
    exhausted. Flushes are independent writes with no transaction
    spanning them.
    """
    
    def __init__(self, writer: BulkWriter, model, batch_size: int = DEFAULT_BATCH_SIZE):
        if batch_size < 1:
            raise ValueError("batch_size must be at least 1")
        self.writer = writer
        self.model = model
        self.batch_size = batch_size
        self.buffer: List[TargetRow] = []
        self.total = 0
        self.flushes = 0
    
    async def add(self, row: TargetRow) -> None:
        self.buffer.append(row)
        if len(self.buffer) >= self.batch_size:
            await self._flush()
    
    async def finish(self) -> int:
        """Flush whatever is left and return the total rows written"""
        if self.buffer:
            await self._flush()
        return self.total
    
    async def _flush(self) -> None:
        count = await self.writer.write(self.model, self.buffer)
        self.total += count
        self.flushes += 1
        logger.debug(
            f"Batch {self.flushes}: {count} rows for {self.model.__tablename__} "
            f"({self.total} so far)"
        )
        self.buffer = []
