# ============================================================================
# File: migration/runner.py
# Description: One-shot migration orchestrator
# ============================================================================
"""
Migration Runner - copies every entity from the source database to the target.

Run phases:
1. Connect to the source, then the target
2. Ensure the target schema exists
3. Relax foreign-key enforcement on the target session
4. Load each entity in dependency order, one at a time
5. Restore foreign-key enforcement (on every exit path)
6. Reset key sequences
7. Report counts

Any error while loading aborts the run; entities after the failing one
are not attempted.
"""

from datetime import datetime, timezone
from typing import Awaitable, Callable, Dict, List, Optional, Sequence
import enum
import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncConnection, AsyncEngine

from core.config import MigrationConfig
from core.database import create_source_engine, create_tables, create_target_engine, mask_url
from core.exceptions import (
    ConfigurationError,
    ConnectivityError,
    MigrationAbortedError,
    MigrationException,
)
from migration.base import EntityExtractor
from migration.constraints import ConstraintManager
from migration.extractors import default_extractors
from migration.loaders.bulk_writer import BulkWriter
from migration.sequences import SequenceReconciler
from schemas.migration import MigrationReport, MigrationStatus

logger = logging.getLogger(__name__)


class MigrationState(str, enum.Enum):
    IDLE = "idle"
    CONNECTING_SOURCE = "connecting_source"
    CONNECTING_TARGET = "connecting_target"
    RELAXING_CONSTRAINTS = "relaxing_constraints"
    LOADING = "loading"
    RESTORING_CONSTRAINTS = "restoring_constraints"
    RECONCILING = "reconciling"
    DONE = "done"
    FAILED = "failed"


def validate_dependency_order(extractors: Sequence[EntityExtractor]) -> None:
    """
    Check that every entity is loaded after the entities it references.

    Raises:
        ConfigurationError: On a duplicate entity, or a dependency that is
            missing or scheduled later
    """
    seen = set()
    for extractor in extractors:
        if extractor.name in seen:
            raise ConfigurationError(
                f"Entity '{extractor.name}' is scheduled twice",
                context={"entity": extractor.name}
            )
        missing = [dep for dep in extractor.depends_on if dep not in seen]
        if missing:
            raise ConfigurationError(
                f"Entity '{extractor.name}' is scheduled before its dependencies",
                context={"entity": extractor.name, "missing": missing}
            )
        seen.add(extractor.name)


class MigrationRunner:
    """
    One-shot migration orchestrator

    Responsibilities:
    - Hold exactly one source and one target connection for the run
    - Run extractors sequentially in dependency order
    - Guarantee constraint restoration whether loading succeeds or fails
    - Reconcile sequences after a successful load
    - Stop at the first failure and name the failing entity

    ``history`` records every state the run passed through.
    """

    def __init__(
        self,
        config: MigrationConfig,
        extractors: Optional[List[EntityExtractor]] = None,
        ensure_schema: Optional[Callable[[AsyncConnection], Awaitable[None]]] = create_tables,
    ):
        self.config = config
        self.extractors = (
            extractors if extractors is not None
            else default_extractors(config.batch_size)
        )
        validate_dependency_order(self.extractors)

        self.ensure_schema = ensure_schema
        self.state = MigrationState.IDLE
        self.history: List[MigrationState] = [self.state]
        self.counts: Dict[str, int] = {}
        self.current_entity: Optional[str] = None
        self.constraints_restored = False

    def transition(self, state: MigrationState) -> None:
        logger.debug(f"Migration state: {self.state.value} -> {state.value}")
        self.state = state
        self.history.append(state)

    def build_engine(
        self,
        factory: Callable[[str], AsyncEngine],
        store: str,
        url: str,
    ) -> AsyncEngine:
        """Create an engine, reporting a bad URL or missing driver as ConfigurationError"""
        try:
            return factory(url)
        except (SQLAlchemyError, ImportError) as e:
            raise ConfigurationError(
                f"Cannot create {store} database engine",
                context={"store": store, "url": mask_url(url)},
                original_exception=e
            )

    async def connect(self, engine: AsyncEngine, store: str, url: str) -> AsyncConnection:
        try:
            return await engine.connect()
        except (SQLAlchemyError, OSError) as e:
            raise ConnectivityError(
                f"Cannot connect to {store} database",
                context={"store": store, "url": mask_url(url)},
                original_exception=e
            )

    async def run(self) -> MigrationReport:
        """
        Run the full migration.

        Returns:
            MigrationReport with per-entity counts and sequence results

        Raises:
            ConfigurationError: If an engine cannot be built from its URL
            ConnectivityError: If either database cannot be reached
            MigrationAbortedError: If any later phase fails
        """
        started_at = datetime.now(timezone.utc)
        source_engine: Optional[AsyncEngine] = None
        target_engine: Optional[AsyncEngine] = None
        source: Optional[AsyncConnection] = None
        target: Optional[AsyncConnection] = None
        try:
            # --------------------------------------------------
            # PHASE 1: CONNECT
            # --------------------------------------------------
            source_engine = self.build_engine(create_source_engine, "source", self.config.source_url)
            target_engine = self.build_engine(create_target_engine, "target", self.config.target_url)

            self.transition(MigrationState.CONNECTING_SOURCE)
            source = await self.connect(source_engine, "source", self.config.source_url)

            self.transition(MigrationState.CONNECTING_TARGET)
            target = await self.connect(target_engine, "target", self.config.target_url)

            if self.ensure_schema is not None:
                await self.ensure_schema(target)

            writer = BulkWriter(target)
            reconciler = SequenceReconciler(target)

            # --------------------------------------------------
            # PHASE 2: LOAD WITH CONSTRAINTS RELAXED
            # --------------------------------------------------
            self.transition(MigrationState.RELAXING_CONSTRAINTS)
            constraints = ConstraintManager(target)
            await constraints.acquire()

            try:
                self.transition(MigrationState.LOADING)
                for extractor in self.extractors:
                    self.current_entity = extractor.name
                    count = await extractor.run(source, writer)
                    self.counts[extractor.name] = count
                    logger.info(f"{extractor.name:<15}  {count} rows migrated")
                self.current_entity = None
            finally:
                self.transition(MigrationState.RESTORING_CONSTRAINTS)
                self.constraints_restored = await constraints.release()

            # --------------------------------------------------
            # PHASE 3: RECONCILE SEQUENCES
            # --------------------------------------------------
            self.transition(MigrationState.RECONCILING)
            sequences = await reconciler.reconcile()

            self.transition(MigrationState.DONE)
            completed_at = datetime.now(timezone.utc)
            logger.info("migration complete")

            return MigrationReport(
                status=MigrationStatus.SUCCESS,
                counts=dict(self.counts),
                sequences=sequences,
                constraints_restored=self.constraints_restored,
                started_at=started_at,
                completed_at=completed_at,
                duration_seconds=(completed_at - started_at).total_seconds(),
            )

        except (ConfigurationError, ConnectivityError) as e:
            self.transition(MigrationState.FAILED)
            logger.error(f"Migration failed: {e.message}", extra={"error_context": e.to_dict()})
            raise

        except MigrationException as e:
            failed_in = self.failed_state()
            self.transition(MigrationState.FAILED)
            logger.error(
                f"Migration failed: {e.message}",
                extra={"error_context": e.to_dict()}
            )
            raise MigrationAbortedError(
                self.abort_message(),
                context=self.abort_context(failed_in),
                original_exception=e
            )

        except Exception as e:
            failed_in = self.failed_state()
            self.transition(MigrationState.FAILED)
            logger.exception("Unexpected error in migration")
            raise MigrationAbortedError(
                self.abort_message(),
                context=self.abort_context(failed_in),
                original_exception=e
            )

        finally:
            if source is not None:
                await source.close()
            if target is not None:
                await target.close()
            if source_engine is not None:
                await source_engine.dispose()
            if target_engine is not None:
                await target_engine.dispose()

    def failed_state(self) -> MigrationState:
        """Phase the run was in when it failed"""
        if self.current_entity:
            return MigrationState.LOADING
        return self.state

    def abort_message(self) -> str:
        if self.current_entity:
            return f"Migration aborted while loading {self.current_entity}"
        return "Migration aborted"

    def abort_context(self, failed_in: MigrationState) -> dict:
        return {
            "entity": self.current_entity,
            "state": failed_in.value,
            "counts": dict(self.counts),
        }
