"""
Core utilities and configuration for the racing data migration.

Modules:
    config: Environment settings and the explicit MigrationConfig
    database: Async engine factories and target schema bootstrap
    exceptions: Custom exception hierarchy with structured context
    logging: Logging configuration
    retry: Fixed-delay retry for small single-row writes

Usage:
    from core.config import settings, MigrationConfig
    from core.database import create_target_engine, create_tables
    from core.exceptions import MigrationAbortedError
    from core.logging import setup_logging
"""

__all__ = [
    "settings",
    "MigrationConfig",
    "setup_logging",
    "create_source_engine",
    "create_target_engine",
    "create_tables",
    "retry_async",
    # Exceptions
    "MigrationException",
    "ConfigurationError",
    "UnsupportedDialectError",
    "ConnectivityError",
    "ExtractionError",
    "RowDecodeError",
    "LoadError",
    "BulkWriteError",
    "ConstraintError",
    "SequenceResetError",
    "MigrationAbortedError",
    "RetryableError",
]
