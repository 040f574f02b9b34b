"""Paging exceptions."""

from __future__ import annotations


class PagingError(Exception):
    """Base error for the paging library."""

    def __init__(
        self,
        code: str,
        message: str,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        if cause is not None:
            self.__cause__ = cause

    def __str__(self) -> str:
        return f"{self.code}: {super().__str__()}"


class PagingErrorCodes:
    """Error code constants for PagingError."""

    UNSUPPORTED_TYPE: str = "UNSUPPORTED_TYPE"
    FIELD_NOT_FOUND: str = "FIELD_NOT_FOUND"
    INVALID_OPTIONS: str = "INVALID_OPTIONS"
    INVALID_LIMIT: str = "INVALID_LIMIT"
    INVALID_MARKER: str = "INVALID_MARKER"


class UnsupportedTypeError(PagingError, TypeError):
    """Raised when a value of an unsupported type reaches the library."""

    def __init__(self, type_name: str, operation: str) -> None:
        super().__init__(
            code=PagingErrorCodes.UNSUPPORTED_TYPE,
            message=f"Type {type_name} is not supported by {operation}",
        )
        self.type_name = type_name
        self.operation = operation


class FieldNotFoundError(PagingError, AttributeError):
    """Raised when a record has no field with the requested name."""

    def __init__(self, type_name: str, field: str) -> None:
        super().__init__(
            code=PagingErrorCodes.FIELD_NOT_FOUND,
            message=f"Type {type_name} has no field {field!r}",
        )
        self.type_name = type_name
        self.field = field


class InvalidPageParamsError(PagingError, ValueError):
    """Raised when a limit or marker is negative."""

    def __init__(self, field: str, value: int, *, code: str) -> None:
        super().__init__(code=code, message=f"{field} must be >= 0, got {value}")
        self.field = field
        self.value = value
