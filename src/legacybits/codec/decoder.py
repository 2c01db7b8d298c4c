"""Legacy-format decoder for flag sets.

This module provides the decode() function that reads a ``{"bits": n}``
record and rebuilds the flag set, keeping bits that have no name.
"""

from __future__ import annotations

from typing import Any, TypeVar

from ..transport.base import RecordDeserializer
from ..transport.json import JsonDeserializer
from ..transport.native import PythonDeserializer
from .schema import RECORD_FIELDS, bits_width, type_name
from .visitor import BitsVisitor

F = TypeVar("F")


def decode(flag_type: type[F], deserializer: RecordDeserializer) -> F:
    """Decode a flag set from the legacy record shape.

    The record must contain exactly one field, ``bits``. The value is rebuilt
    with ``flag_type.from_bits_retain()``, so bits unknown to this version of
    the flag type survive. The record label is ignored.

    Args:
        flag_type: Flag type to decode to
        deserializer: Record deserializer over the input

    Returns:
        Decoded flag set

    Raises:
        SchemaError: If flag_type declares an invalid bits_width
        DuplicateFieldError: If ``bits`` appears more than once
        UnknownFieldError: If any other field is present
        MissingFieldError: If ``bits`` is absent
        DecodeError: If the deserializer cannot read the input (malformed
            text, wrong type, value wider than the flag type)

    Examples:
        ```python
        from legacybits import JsonDeserializer, decode

        flags = decode(Flags, JsonDeserializer('{"bits":3}'))
        assert flags == Flags.A | Flags.B
        ```
    """
    visitor = BitsVisitor(bits_width(flag_type))
    bits = deserializer.decode_record(type_name(flag_type), RECORD_FIELDS, visitor)
    return flag_type.from_bits_retain(bits)  # type: ignore[attr-defined]


def from_json(flag_type: type[F], data: str | bytes | bytearray) -> F:
    """Decode a flag set from JSON text."""
    return decode(flag_type, JsonDeserializer(data))


def from_python(flag_type: type[F], data: Any) -> F:
    """Decode a flag set from a mapping such as ``{"bits": 3}``."""
    return decode(flag_type, PythonDeserializer(data))
