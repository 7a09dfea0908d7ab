from migration.loaders.bulk_writer import BulkWriter, dialect_insert

__all__ = ["BulkWriter", "dialect_insert"]
