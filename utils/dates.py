"""
utils/dates.py
--------------
Conversion between Python dates and the values a DB-API driver
sends to / returns from a DATE column.
"""

from datetime import date, datetime
from typing import Optional, Union

SqlDate = Union[date, str, None]


def to_sql_date(value: Optional[date]) -> Optional[date]:
    """
    Convert a Python date into a DATE parameter.

    Args:
        value: A date, a datetime (truncated to its date part) or None.

    Returns:
        The date to bind, or None for SQL NULL.
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    return value


def from_sql_date(value: SqlDate) -> Optional[date]:
    """
    Convert a DATE column value into a Python date.

    psycopg2 already returns ``datetime.date``; drivers without a native
    DATE type (sqlite3 without type detection) return an ISO string.

    Raises:
        ValueError: If a string value is not an ISO ``YYYY-MM-DD`` date.
        TypeError: If the value has an unsupported type.
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        return date.fromisoformat(value.strip()[:10])
    raise TypeError(f"Unsupported DATE value: {value!r}")
