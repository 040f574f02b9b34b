"""Limit and marker validation."""

from __future__ import annotations

from .exceptions import InvalidPageParamsError, PagingErrorCodes


def validate_limit_marker(limit: int, marker: int) -> bool:
    """Return True if the limit and the offset/cursor marker are both >= 0."""
    return limit >= 0 and marker >= 0


def require_valid_limit_marker(limit: int, marker: int) -> None:
    """Raise InvalidPageParamsError unless limit and marker are both >= 0."""
    if limit < 0:
        raise InvalidPageParamsError("limit", limit, code=PagingErrorCodes.INVALID_LIMIT)
    if marker < 0:
        raise InvalidPageParamsError("marker", marker, code=PagingErrorCodes.INVALID_MARKER)
