"""
Convert source column values into target row values.

Drivers already hand SQL NULL over as ``None``; these helpers keep it that
way (never turning it into 0, "" or a sentinel) and normalise the few
representations that differ between the legacy MySQL driver and the
target schema: DECIMAL floats, binary strings, TIME columns, dates and
JSON documents.

None of the helpers validate types. A value that is not the expected
scalar is passed through unchanged and rejected by the row schema, so the
failure is reported by the extractor together with the row position.
"""

import json
from datetime import date, datetime, time, timedelta
from decimal import Decimal
from typing import Any, Optional


def null_int(value: Any) -> Optional[int]:
    """Nullable integer column"""
    if value is None:
        return None
    return value


def null_float(value: Any) -> Optional[float]:
    """Nullable floating-point column; MySQL DECIMAL arrives as Decimal"""
    if value is None:
        return None
    if isinstance(value, Decimal):
        return float(value)
    return value


def null_str(value: Any) -> Optional[str]:
    """Nullable text column; binary collations arrive as bytes"""
    if value is None:
        return None
    if isinstance(value, (bytes, bytearray)):
        return bytes(value).decode("utf-8")
    return value


def null_bool(value: Any) -> Optional[bool]:
    """Nullable flag column; MySQL TINYINT(1) arrives as 0/1"""
    if value is None:
        return None
    if isinstance(value, int) and not isinstance(value, bool) and value in (0, 1):
        return bool(value)
    return value


def fmt_date(value: Any) -> str:
    """
    Format a source date as ``YYYY-MM-DD``.
    
    Accepts ``date``/``datetime`` objects and ISO strings (with or without
    a time part). Raises ValueError for anything else.
    """
    if isinstance(value, datetime):
        return value.date().isoformat()
    if isinstance(value, date):
        return value.isoformat()
    if isinstance(value, str):
        head = value.strip()[:10]
        return date.fromisoformat(head).isoformat()
    raise ValueError(f"Cannot interpret {value!r} as a date")


def fmt_time(value: Any) -> Any:
    """
    Format a source off time as text.
    
    MySQL TIME columns come back as ``timedelta``; they are rendered as
    ``HH:MM:SS`` like the MySQL client does. Text passes through. A
    negative interval is not a time of day and raises ``ValueError``.
    """
    if isinstance(value, timedelta):
        if value < timedelta(0):
            raise ValueError(f"Negative off time {value!r}")
        total = int(value.total_seconds())
        hours, remainder = divmod(total, 3600)
        minutes, seconds = divmod(remainder, 60)
        return f"{hours:02d}:{minutes:02d}:{seconds:02d}"
    if isinstance(value, time):
        return value.strftime("%H:%M:%S")
    return null_str(value)


def raw_json(value: Any) -> Any:
    """
    JSON document as text, without reinterpreting it.
    
    Text and bytes are passed through as text. Only a driver that already
    decoded the document forces a re-serialisation.
    """
    if isinstance(value, (bytes, bytearray, memoryview)):
        return bytes(value).decode("utf-8")
    if isinstance(value, (dict, list)):
        return json.dumps(value)
    return value
