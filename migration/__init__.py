"""
Batched migration of the legacy racing database into the target store.

Modules:
    base: Abstract per-entity extractor (stream, convert, batch)
    batching: Batch accumulator that flushes every N rows
    constraints: Scoped relaxation of foreign-key enforcement
    sequences: Key sequence reconciliation after the load
    runner: Orchestrator that runs every phase in order
    users: API user provisioning

Subpackages:
    extractors: One extractor per entity, listed in load order
    transformers: Nullable value adapters for source column values
    loaders: Idempotent bulk writer

Usage:
    from core.config import MigrationConfig
    from migration.runner import MigrationRunner

    report = await MigrationRunner(MigrationConfig.from_settings()).run()
    print(report.counts)
"""

__all__ = [
    "EntityExtractor",
    "BatchAccumulator",
    "ConstraintManager",
    "SequenceReconciler",
    "MigrationRunner",
    "upsert_user",
]
