"""Last-element accessor used to derive the next cursor."""

from __future__ import annotations

import numbers
from collections.abc import Mapping, Sequence
from datetime import datetime
from typing import Any, Protocol, runtime_checkable

from .exceptions import FieldNotFoundError, UnsupportedTypeError
from .types import Cursor


@runtime_checkable
class CursorRecord(Protocol):
    """Record that exposes its cursor fields by name."""

    def get_cursor_field(self, name: str) -> Cursor: ...


def _field_value(record: Any, field: str) -> Any:
    if isinstance(record, CursorRecord):
        return record.get_cursor_field(field)
    if isinstance(record, Mapping):
        if field not in record:
            raise FieldNotFoundError(type(record).__name__, field)
        return record[field]
    try:
        return getattr(record, field)
    except AttributeError as e:
        raise FieldNotFoundError(type(record).__name__, field) from e


def last(sequence: Sequence[Any], field: str) -> Cursor:
    """Return the value of field on the last element of sequence.

    An empty sequence yields 0. Datetime values are returned unchanged and
    integral values as int. Raises UnsupportedTypeError when sequence is
    not a sequence or the field holds any other type.
    """
    if not isinstance(sequence, Sequence) or isinstance(sequence, (str, bytes, bytearray)):
        raise UnsupportedTypeError(type(sequence).__name__, "last")

    if len(sequence) == 0:
        return 0

    value = _field_value(sequence[-1], field)
    if isinstance(value, datetime):
        return value
    if isinstance(value, numbers.Integral) and not isinstance(value, bool):
        return int(value)
    raise UnsupportedTypeError(type(value).__name__, "last")
