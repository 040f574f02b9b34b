"""Next-page URI generation."""

from __future__ import annotations

import numbers
from datetime import datetime, timezone

from .exceptions import UnsupportedTypeError
from .options import Options
from .types import Cursor


def format_cursor(cursor: Cursor) -> str:
    """Render a cursor as a base-10 integer.

    Integers render as-is. Datetimes render as Unix seconds, with naive
    values taken as UTC.
    """
    if isinstance(cursor, datetime):
        if cursor.tzinfo is None:
            cursor = cursor.replace(tzinfo=timezone.utc)
        return str(int(cursor.timestamp()))
    if isinstance(cursor, numbers.Integral) and not isinstance(cursor, bool):
        return str(int(cursor))
    raise UnsupportedTypeError(type(cursor).__name__, "format_cursor")


def generate_offset_uri(limit: int, offset: int, options: Options) -> str:
    """Return ``?<limit key>=<limit>&<offset key>=<offset>``."""
    return f"?{options.limit_key_name}={limit}&{options.offset_key_name}={offset}"


def generate_cursor_uri(limit: int, cursor: Cursor, options: Options) -> str:
    """Return ``?<limit key>=<limit>&<cursor key>=<cursor>``."""
    return f"?{options.limit_key_name}={limit}&{options.cursor_key_name}={format_cursor(cursor)}"
