"""
Cell value formatting for MySQL INSERT statements.

Each value a DB-API driver hands back is classified once into a CellKind and
rendered by the single rule registered for that kind.
"""

import uuid
from datetime import date, datetime, time, timezone
from decimal import Decimal
from enum import Enum
from typing import Any, Callable, Dict


class CellKind(Enum):
    """Closed set of cell value kinds"""
    NULL = "null"
    STRING = "string"
    BOOLEAN = "boolean"
    INTEGER = "integer"
    FLOAT = "float"
    DECIMAL = "decimal"
    TIMESTAMP = "timestamp"
    TIMESTAMP_TZ = "timestamp_tz"
    DATE = "date"
    TIME = "time"
    UUID = "uuid"
    BINARY = "binary"
    OTHER = "other"


# Order matters: bool is an int subclass and datetime is a date subclass
_KIND_BY_TYPE = (
    (bool, CellKind.BOOLEAN),
    (str, CellKind.STRING),
    (int, CellKind.INTEGER),
    (float, CellKind.FLOAT),
    (Decimal, CellKind.DECIMAL),
    (datetime, None),  # resolved by tzinfo below
    (date, CellKind.DATE),
    (time, CellKind.TIME),
    (uuid.UUID, CellKind.UUID),
    ((bytes, bytearray, memoryview), CellKind.BINARY),
)

# \ ' and " escaped in a single pass
_STRING_ESCAPES = str.maketrans({
    "\\": "\\\\",
    "'": "''",
    '"': '\\"',
})


def classify_value(value: Any) -> CellKind:
    """Return the CellKind for a raw driver value"""
    if value is None:
        return CellKind.NULL
    for py_type, kind in _KIND_BY_TYPE:
        if isinstance(value, py_type):
            if kind is None:
                aware = value.tzinfo is not None and value.utcoffset() is not None
                return CellKind.TIMESTAMP_TZ if aware else CellKind.TIMESTAMP
            return kind
    return CellKind.OTHER


def _quote(text: str) -> str:
    return f"'{text}'"


def _date_text(value) -> str:
    # strftime does not zero-pad years below 1000 on every platform
    return f"{value.year:04d}-{value.month:02d}-{value.day:02d}"


def _time_text(value) -> str:
    # milliseconds are truncated, not rounded
    return f"{value.hour:02d}:{value.minute:02d}:{value.second:02d}.{value.microsecond // 1000:03d}"


def _format_string(value: str) -> str:
    return _quote(value.translate(_STRING_ESCAPES))


def _format_timestamp(value: datetime) -> str:
    return _quote(f"{_date_text(value)} {_time_text(value)}")


def _format_timestamp_tz(value: datetime) -> str:
    return _format_timestamp(value.astimezone(timezone.utc))


def _format_date(value: date) -> str:
    return _quote(_date_text(value))


def _format_time(value: time) -> str:
    return _quote(_time_text(value))


def _format_binary(value) -> str:
    return f"X'{bytes(value).hex().upper()}'"


class ValueFormatter:
    """Renders cell values as MySQL literals"""

    RULES: Dict[CellKind, Callable[[Any], str]] = {
        CellKind.NULL: lambda value: "NULL",
        CellKind.STRING: _format_string,
        CellKind.BOOLEAN: lambda value: "1" if value else "0",
        CellKind.INTEGER: str,
        CellKind.FLOAT: str,
        CellKind.DECIMAL: lambda value: format(value, 'f'),
        CellKind.TIMESTAMP: _format_timestamp,
        CellKind.TIMESTAMP_TZ: _format_timestamp_tz,
        CellKind.DATE: _format_date,
        CellKind.TIME: _format_time,
        CellKind.UUID: lambda value: _quote(str(value)),
        CellKind.BINARY: _format_binary,
        CellKind.OTHER: str,
    }

    def __init__(self):
        missing = [kind.name for kind in CellKind if kind not in self.RULES]
        if missing:
            raise TypeError(f"No formatting rule for cell kinds: {', '.join(missing)}")

    def format(self, value: Any) -> str:
        return self.RULES[classify_value(value)](value)

    def format_row(self, row) -> str:
        """Render one row as a parenthesized value list"""
        return "(" + ",".join(self.format(value) for value in row) + ")"


_default_formatter = ValueFormatter()


def format_value(value: Any) -> str:
    """Format a single value with the shared formatter"""
    return _default_formatter.format(value)
