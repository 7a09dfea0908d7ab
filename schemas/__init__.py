"""
Pydantic schemas for migrated rows and run reports.

Schemas:
    rows: Target-shaped rows produced by extractors (one per entity)
    migration: Run status, per-table sequence results, final report

Usage:
    from schemas.rows import CourseRow
    from schemas.migration import MigrationReport

Example:
    row = CourseRow(course_id=7, course="Ascot", direction="R", is_aw=False, code="GB")
    row.to_insert_params()["course"]  # "Ascot"
"""

__all__ = [
    "TargetRow",
    "UserRow",
    "CourseRow",
    "HorseRow",
    "TrainerRow",
    "RaceRow",
    "PreRaceRow",
    "ResultRow",
    "IntermediaryRow",
    "MigrationStatus",
    "SequenceResult",
    "MigrationReport",
]
