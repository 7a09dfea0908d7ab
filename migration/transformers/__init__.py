from migration.transformers.nullable import (
    fmt_date,
    fmt_time,
    null_bool,
    null_float,
    null_int,
    null_str,
    raw_json,
)

__all__ = [
    "fmt_date",
    "fmt_time",
    "null_bool",
    "null_float",
    "null_int",
    "null_str",
    "raw_json",
]
