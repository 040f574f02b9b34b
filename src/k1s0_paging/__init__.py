"""k1s0 paging library."""

from .exceptions import (
    FieldNotFoundError,
    InvalidPageParamsError,
    PagingError,
    PagingErrorCodes,
    UnsupportedTypeError,
)
from .last import CursorRecord, last
from .options import (
    DEFAULT_CURSOR_KEY_NAME,
    DEFAULT_LIMIT,
    DEFAULT_LIMIT_KEY_NAME,
    DEFAULT_MAX_LIMIT,
    DEFAULT_OFFSET_KEY_NAME,
    Options,
    load_options,
    new_options,
)
from .params import PageParams, parse_page_params
from .request import (
    get_cursor_from_request,
    get_limit_from_request,
    get_offset_from_request,
    get_pagination_type,
    parse_int64,
)
from .types import CURSOR_TYPE, OFFSET_TYPE, PaginationType
from .uri import format_cursor, generate_cursor_uri, generate_offset_uri
from .validation import require_valid_limit_marker, validate_limit_marker

__all__ = [
    "CURSOR_TYPE",
    "CursorRecord",
    "DEFAULT_CURSOR_KEY_NAME",
    "DEFAULT_LIMIT",
    "DEFAULT_LIMIT_KEY_NAME",
    "DEFAULT_MAX_LIMIT",
    "DEFAULT_OFFSET_KEY_NAME",
    "FieldNotFoundError",
    "InvalidPageParamsError",
    "OFFSET_TYPE",
    "Options",
    "PageParams",
    "PagingError",
    "PagingErrorCodes",
    "PaginationType",
    "UnsupportedTypeError",
    "format_cursor",
    "generate_cursor_uri",
    "generate_offset_uri",
    "get_cursor_from_request",
    "get_limit_from_request",
    "get_offset_from_request",
    "get_pagination_type",
    "last",
    "load_options",
    "new_options",
    "parse_int64",
    "parse_page_params",
    "require_valid_limit_marker",
    "validate_limit_marker",
]
