"""Pagination parameter extraction from HTTP requests."""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any

import httpx
import structlog

from .exceptions import UnsupportedTypeError
from .options import Options, new_options
from .types import PaginationType

logger = structlog.get_logger(__name__)

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

_INT_RE = re.compile(r"[+-]?[0-9]+")


def parse_int64(value: str | None) -> int | None:
    """Parse a base-10 signed 64-bit integer.

    Returns None when value is empty or not a valid int64.
    """
    if not value or not _INT_RE.fullmatch(value):
        return None
    parsed = int(value)
    if parsed < INT64_MIN or parsed > INT64_MAX:
        return None
    return parsed


def _query_params(request: Any) -> Any:
    if isinstance(request, httpx.Request):
        return request.url.params
    if isinstance(request, httpx.URL):
        return request.params
    if isinstance(request, str):
        if "?" in request:
            return httpx.URL(request).params
        return httpx.QueryParams(request)
    # Starlette requests are themselves Mappings over the ASGI scope.
    query_params = getattr(request, "query_params", None)
    if query_params is not None:
        return query_params
    url = getattr(request, "url", None)
    params = getattr(url, "params", None)
    if params is not None:
        return params
    if isinstance(request, Mapping):
        return request
    raise UnsupportedTypeError(type(request).__name__, "request query extraction")


def get_query_value(request: Any, key: str) -> str | None:
    """Return the first query value for key, or None when absent."""
    params = _query_params(request)
    # Multi-value containers: first value wins.
    for getter in ("get_list", "getlist"):
        if hasattr(params, getter):
            values = getattr(params, getter)(key)
            return str(values[0]) if values else None
    value = params.get(key)
    if isinstance(value, (list, tuple)):
        value = value[0] if value else None
    if value is None:
        return None
    return str(value)


def get_limit_from_request(request: Any, options: Options) -> int:
    """Return the requested limit.

    Falls back to options.default_limit when the parameter is absent or
    malformed. A present parameter is clamped to options.max_limit when
    max_limit is positive.
    """
    raw = get_query_value(request, options.limit_key_name)
    if not raw:
        return options.default_limit

    limit = parse_int64(raw)
    if limit is None:
        limit = options.default_limit
    if options.max_limit > 0 and limit > options.max_limit:
        logger.debug("paging.limit_clamped", requested=limit, max_limit=options.max_limit)
        limit = options.max_limit
    return limit


def get_offset_from_request(request: Any, options: Options) -> int:
    """Return the requested offset, or 0 when absent or malformed."""
    offset = parse_int64(get_query_value(request, options.offset_key_name))
    return offset if offset is not None else 0


def get_cursor_from_request(request: Any, options: Options) -> int:
    """Return the requested cursor, or 0 when absent or malformed."""
    cursor = parse_int64(get_query_value(request, options.cursor_key_name))
    return cursor if cursor is not None else 0


def get_pagination_type(request: Any, options: Options | None = None) -> PaginationType:
    """Return CURSOR when a positive cursor is present, OFFSET otherwise."""
    if options is None:
        options = new_options()

    if get_cursor_from_request(request, options) > 0:
        return PaginationType.CURSOR
    return PaginationType.OFFSET
