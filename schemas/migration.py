"""
Pydantic schemas describing the outcome of a migration run
"""

from datetime import datetime
from typing import Dict, List, Optional
import enum

from pydantic import BaseModel, Field


class MigrationStatus(str, enum.Enum):
    """Terminal status of a run"""
    SUCCESS = "success"
    FAILED = "failed"


class SequenceResult(BaseModel):
    """Outcome of reconciling one table's key generator"""
    table_name: str
    sequence_name: str
    max_key: Optional[int] = None
    reset: bool
    error: Optional[str] = None


class MigrationReport(BaseModel):
    """
    Summary returned by a successful run.
    
    ``counts`` preserves load order and holds the rows fed to the writer
    per entity, whether or not they already existed in the target.
    """
    status: MigrationStatus
    counts: Dict[str, int] = Field(default_factory=dict)
    sequences: List[SequenceResult] = Field(default_factory=list)
    constraints_restored: bool = False
    started_at: datetime
    completed_at: Optional[datetime] = None
    duration_seconds: Optional[float] = None
    
    @property
    def total_rows(self) -> int:
        return sum(self.counts.values())
