"""
Column types shared by the source and target schemas
"""

from datetime import date, datetime
from typing import Optional, Union

from sqlalchemy import Date, Text
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.types import TypeDecorator


class IsoDate(TypeDecorator):
    """
    DATE column exchanged with Python as a ``YYYY-MM-DD`` string.
    
    The database keeps a real DATE type; the string form is what every
    migrated row carries, so it is converted only at the driver boundary.
    """
    impl = Date
    cache_ok = True
    
    def process_bind_param(self, value: Optional[Union[str, date]], dialect) -> Optional[date]:
        if value is None:
            return None
        if isinstance(value, datetime):
            return value.date()
        if isinstance(value, date):
            return value
        return date.fromisoformat(value)
    
    def process_result_value(self, value: Optional[date], dialect) -> Optional[str]:
        if value is None:
            return None
        if isinstance(value, datetime):
            value = value.date()
        return value.isoformat()


class RawJSON(TypeDecorator):
    """
    JSON document passed through as its original text.
    
    PostgreSQL stores it as JSONB; other databases store the text as is.
    The JSON serializer and parser are bypassed in both directions so the
    document is never decoded by the application.
    """
    impl = Text
    cache_ok = True
    
    def load_dialect_impl(self, dialect):
        if dialect.name == "postgresql":
            return dialect.type_descriptor(JSONB())
        return dialect.type_descriptor(Text())
    
    def bind_processor(self, dialect):
        return self._to_text
    
    def result_processor(self, dialect, coltype):
        return self._to_text
    
    @staticmethod
    def _to_text(value):
        if isinstance(value, (bytes, bytearray, memoryview)):
            return bytes(value).decode("utf-8")
        return value
