"""
Custom exceptions for the migration pipeline with structured error context.

Every exception carries a context dictionary so the failing step (entity,
table, batch, SQL operation) can be reported without parsing messages.

Exception Hierarchy:
    MigrationException (base)
    ├── ConfigurationError
    │   └── UnsupportedDialectError
    ├── ConnectivityError
    ├── ExtractionError
    │   └── RowDecodeError
    ├── LoadError
    │   └── BulkWriteError
    ├── ConstraintError
    ├── SequenceResetError
    ├── MigrationAbortedError
    └── RetryableError
"""

from typing import Optional, Dict, Any
from datetime import datetime, timezone


class MigrationException(Exception):
    """
    Base exception for all migration errors.

    Attributes:
        message: Human-readable error message
        context: Additional context information (entity, table, etc.)
        original_exception: The original exception that was caught (if any)
    """

    def __init__(
        self,
        message: str,
        context: Optional[Dict[str, Any]] = None,
        original_exception: Optional[Exception] = None
    ):
        self.message = message
        self.context = context or {}
        self.original_exception = original_exception
        self.timestamp = datetime.now(timezone.utc)

        # Add timestamp to context
        self.context["error_timestamp"] = self.timestamp.isoformat()

        # Chain original exception if provided
        super().__init__(message)
        if original_exception:
            self.__cause__ = original_exception

    def __str__(self) -> str:
        """Format error message with context."""
        base_msg = f"{self.__class__.__name__}: {self.message}"

        if self.context:
            context_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            base_msg += f" | Context: {context_str}"

        if self.original_exception:
            base_msg += f" | Caused by: {type(self.original_exception).__name__}: {str(self.original_exception)}"

        return base_msg

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for logging."""
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "context": self.context,
            "timestamp": self.timestamp.isoformat(),
            "original_error": str(self.original_exception) if self.original_exception else None
        }


# ============================================================================
# Setup Errors
# ============================================================================

class ConfigurationError(MigrationException):
    """
    Exception raised when the pipeline is assembled incorrectly.

    Examples: an extractor list that violates dependency order, a batch
    size below one.
    """
    pass


class UnsupportedDialectError(ConfigurationError):
    """
    Exception raised when the target database dialect has no idempotent
    insert, constraint relaxation or sequence strategy.

    Context should include:
        - dialect: Name of the SQLAlchemy dialect
        - operation: Which component rejected it
    """
    pass


class ConnectivityError(MigrationException):
    """
    Exception raised when the source or target store cannot be reached.

    Context should include:
        - store: "source" or "target"
        - url: Connection URL with the password masked
    """
    pass


# ============================================================================
# Extraction Errors
# ============================================================================

class ExtractionError(MigrationException):
    """
    Exception raised when reading from the source store fails.

    Context should include:
        - entity: Name of the entity being extracted
        - source_table: Source table name
        - rows_processed: Rows handled before the failure
    """
    pass


class RowDecodeError(ExtractionError):
    """
    Exception raised when a source row cannot be converted to the
    target row shape.

    Context should include:
        - entity: Name of the entity being extracted
        - row_number: 1-based position of the row in the source stream
        - field_errors: Field-level validation errors
    """
    pass


# ============================================================================
# Load Errors
# ============================================================================

class LoadError(MigrationException):
    """Base exception for target write failures."""
    pass


class BulkWriteError(LoadError):
    """
    Exception raised when a bulk insert fails for a reason other than a
    primary-key duplicate.

    Context should include:
        - table_name: Target table
        - batch_size: Rows in the failed batch
        - first_key / last_key: Primary key range of the batch
    """
    pass


# ============================================================================
# Session State Errors
# ============================================================================

class ConstraintError(MigrationException):
    """
    Exception raised when foreign-key enforcement cannot be relaxed.

    Restoration failures are logged, never raised.
    """
    pass


class SequenceResetError(MigrationException):
    """
    Exception describing a failed sequence reset for a single table.

    Reconciliation logs these and continues with the next table.
    """
    pass


class MigrationAbortedError(MigrationException):
    """
    Exception raised by the runner when a fatal error stops the run.

    Context includes:
        - entity: Entity being loaded when the run failed (if any)
        - state: Runner state at the time of failure
        - counts: Rows migrated per entity before the failure
    """
    pass


# ============================================================================
# Retry Strategy
# ============================================================================

class RetryableError(MigrationException):
    """
    Marker for transient errors that the single-row retry helper repeats.

    The bulk path never retries; it relies on idempotent inserts instead.
    """

    def __init__(
        self,
        message: str,
        context: Optional[Dict[str, Any]] = None,
        original_exception: Optional[Exception] = None,
        max_retries: int = 5,
        retry_delay: float = 0.1
    ):
        super().__init__(message, context, original_exception)
        self.max_retries = max_retries
        self.retry_delay = retry_delay
