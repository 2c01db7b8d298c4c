"""Exception hierarchy for legacybits.

This module defines all custom exceptions used throughout the package.
All exceptions inherit from LegacyBitsError for easy catching of any legacybits-specific error.
"""

from __future__ import annotations

from typing import Sequence


class LegacyBitsError(Exception):
    """Base exception for all legacybits errors."""

    pass


class SchemaError(LegacyBitsError):
    """Raised when a flag type cannot be used with the legacy format.

    Examples:
        - Type lacks bits() or from_bits_retain()
        - Declared bits_width is not a positive integer
    """

    pass


class EncodeError(LegacyBitsError):
    """Raised by a serializer when writing a record fails.

    Examples:
        - Value not representable in the output format
        - Record closed with a different number of fields than declared
        - Output sink failure
    """

    pass


class DecodeError(LegacyBitsError):
    """Raised when decoding a legacy record fails.

    Subclasses identify the kind of failure; callers that only need a
    diagnostic can catch this class and use str(err).
    """

    pass


class DuplicateFieldError(DecodeError):
    """A field appeared more than once in one record."""

    def __init__(self, field: str) -> None:
        super().__init__(f"duplicate field `{field}`")
        self.field = field


class UnknownFieldError(DecodeError):
    """A field the record format does not recognize was present."""

    def __init__(self, field: str, expected: Sequence[str]) -> None:
        if expected:
            names = ", ".join(f"`{name}`" for name in expected)
            message = f"unknown field `{field}`, expected {names}"
        else:
            message = f"unknown field `{field}`, there are no fields"
        super().__init__(message)
        self.field = field
        self.expected = tuple(expected)


class MissingFieldError(DecodeError):
    """The record ended without a required field."""

    def __init__(self, field: str) -> None:
        super().__init__(f"missing field `{field}`")
        self.field = field


class MalformedDataError(DecodeError):
    """The input is not valid in the transport's syntax (e.g. broken JSON)."""

    pass


class InvalidTypeError(DecodeError):
    """The input has the wrong shape or primitive type.

    Examples:
        - A JSON array or number where a record was expected
        - A string or float where the raw integer was expected
    """

    pass


class InvalidValueError(DecodeError):
    """A primitive has the right type but is out of range for the target.

    Example:
        - A negative integer, or one wider than the flag type's bits_width
    """

    pass
