"""Pagination types."""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Union


class PaginationType(str, Enum):
    """Pagination strategy in effect for a request."""

    OFFSET = "offset"
    CURSOR = "cursor"


OFFSET_TYPE = PaginationType.OFFSET
CURSOR_TYPE = PaginationType.CURSOR

Cursor = Union[int, datetime]
