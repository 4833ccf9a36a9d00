"""
Value conversion exception classes.
"""
from typing import Any


class TypeConversionError(Exception):
    """Base class for all value conversion errors.
    """


class UnsupportedTypeError(TypeConversionError, TypeError):
    """Value has no wire representation.
    """

    def __init__(self, kind: type, message: str | None = None) -> None:
        self.kind = kind
        super().__init__(message or f'Unexpected type is given: {kind.__name__}')


class ParseError(TypeConversionError, ValueError):
    """Malformed numeric segment in an epoch or day-count string.
    """

    def __init__(self, raw: Any, message: str | None = None) -> None:
        self.raw = raw
        super().__init__(message or f'invalid numeric value: {raw!r}')


class InvalidTimestampTzError(TypeConversionError, ValueError):
    """Malformed TIMESTAMP_TZ payload.
    """

    def __init__(self, raw: str) -> None:
        self.raw = raw
        super().__init__(f'invalid TIMESTAMP_TZ data: {raw}')
