"""Parsed page parameters for a single request."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any

import structlog

from .options import Options, new_options
from .request import (
    get_cursor_from_request,
    get_limit_from_request,
    get_offset_from_request,
    get_pagination_type,
)
from .types import Cursor, PaginationType
from .uri import format_cursor, generate_cursor_uri, generate_offset_uri
from .validation import require_valid_limit_marker

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class PageParams:
    """Limit and marker (offset or cursor) of the requested page."""

    type: PaginationType
    limit: int
    marker: int

    @property
    def offset(self) -> int:
        return self.marker if self.type == PaginationType.OFFSET else 0

    @property
    def cursor(self) -> int:
        return self.marker if self.type == PaginationType.CURSOR else 0

    def next_uri(self, options: Options, next_marker: Cursor | None = None) -> str | None:
        """Return the query string of the following page.

        Offset pagination advances by limit unless next_marker is given.
        Cursor pagination requires next_marker, usually last(items, field),
        and returns None when it does not resolve to a positive cursor, as
        for an empty page.
        """
        if self.type == PaginationType.CURSOR:
            if next_marker is None:
                raise ValueError("next_marker is required for cursor pagination")
            if int(format_cursor(next_marker)) <= 0:
                return None
            return generate_cursor_uri(self.limit, next_marker, options)
        if next_marker is None:
            return generate_offset_uri(self.limit, self.offset + self.limit, options)
        if isinstance(next_marker, datetime):
            raise ValueError("offset pagination requires an integer next_marker")
        return generate_offset_uri(self.limit, next_marker, options)


def parse_page_params(request: Any, options: Options | None = None) -> PageParams:
    """Extract and validate the page parameters of request.

    Raises InvalidPageParamsError when the limit or marker is negative.
    """
    if options is None:
        options = new_options()

    pagination_type = get_pagination_type(request, options)
    limit = get_limit_from_request(request, options)
    if pagination_type == PaginationType.CURSOR:
        marker = get_cursor_from_request(request, options)
    else:
        marker = get_offset_from_request(request, options)

    require_valid_limit_marker(limit, marker)
    logger.debug(
        "paging.page_params_parsed",
        type=pagination_type.value,
        limit=limit,
        marker=marker,
    )
    return PageParams(type=pagination_type, limit=limit, marker=marker)
