"""Paging options (pydantic BaseModel)."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .exceptions import PagingError, PagingErrorCodes

DEFAULT_LIMIT_KEY_NAME = "limit"
DEFAULT_OFFSET_KEY_NAME = "offset"
DEFAULT_CURSOR_KEY_NAME = "cursor"
DEFAULT_LIMIT = 20
DEFAULT_MAX_LIMIT = 100


class Options(BaseModel):
    """Query parameter names and limit bounds.

    A max_limit of 0 or below disables clamping.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    limit_key_name: str = Field(
        default=DEFAULT_LIMIT_KEY_NAME, min_length=1, alias="limitKeyName"
    )
    offset_key_name: str = Field(
        default=DEFAULT_OFFSET_KEY_NAME, min_length=1, alias="offsetKeyName"
    )
    cursor_key_name: str = Field(
        default=DEFAULT_CURSOR_KEY_NAME, min_length=1, alias="cursorKeyName"
    )
    default_limit: int = Field(default=DEFAULT_LIMIT, alias="defaultLimit")
    max_limit: int = Field(default=DEFAULT_MAX_LIMIT, alias="maxLimit")


def new_options() -> Options:
    """Return options with the default key names and limits."""
    return Options()


def load_options(data: Mapping[str, Any] | None) -> Options:
    """Validate a config mapping into Options.

    data: e.g. the ``pagination`` section of a service config. None or an
    empty mapping yields the defaults.
    """
    try:
        return Options.model_validate(dict(data or {}))
    except ValidationError as e:
        raise PagingError(
            code=PagingErrorCodes.INVALID_OPTIONS,
            message=f"Paging options validation failed: {e}",
            cause=e,
        ) from e
