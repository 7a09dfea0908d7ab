"""
Script to migrate the legacy racing database into the target store
"""

import asyncio
import logging
import sys

import click

from core.config import MigrationConfig
from core.exceptions import MigrationException
from core.logging import setup_logging
from migration.runner import MigrationRunner
from schemas.migration import MigrationReport

logger = logging.getLogger(__name__)


async def run_migration(config: MigrationConfig) -> MigrationReport:
    """Run the full pipeline once"""
    runner = MigrationRunner(config)
    return await runner.run()


@click.command()
@click.option("--source-url", default=None, help="Source database URL (default: SOURCE_DATABASE_URL)")
@click.option("--target-url", default=None, help="Target database URL (default: TARGET_DATABASE_URL)")
@click.option("--batch-size", type=click.IntRange(min=1), default=None, help="Rows per INSERT (default: MIGRATION_BATCH_SIZE)")
@click.option("--log-level", default=None, help="Logging level (default: LOG_LEVEL)")
def main(source_url, target_url, batch_size, log_level):
    """Copy every entity from the source database to the target."""
    setup_logging(log_level)
    
    config = MigrationConfig.from_settings(
        source_url=source_url,
        target_url=target_url,
        batch_size=batch_size,
    )
    
    try:
        report = asyncio.run(run_migration(config))
    except MigrationException as e:
        logger.error(f"Migration failed: {e}")
        sys.exit(1)
    
    logger.info(
        f"Migrated {report.total_rows} rows across {len(report.counts)} entities "
        f"in {report.duration_seconds:.1f}s"
    )


if __name__ == "__main__":
    main()
