"""Legacy-format encoder for flag sets.

This module provides the encode() function that writes a flag set as a record
with a single ``bits`` field holding its raw integer.
"""

from __future__ import annotations

from typing import IO, Any, Optional

from ..flags.base import BitFlagsType
from ..transport.base import RecordSerializer
from ..transport.json import JsonSerializer
from ..transport.native import PythonSerializer
from .schema import BITS_FIELD, type_name


def encode(flags: BitFlagsType, serializer: RecordSerializer) -> Any:
    """Encode a flag set in the legacy ``{"bits": n}`` record shape.

    Every bit of the value is written, including bits that do not belong to
    any named flag.

    Args:
        flags: Flag set to encode
        serializer: Record serializer for the target format

    Returns:
        Whatever the serializer produces for a finished record

    Raises:
        EncodeError: If the serializer fails to write the record

    Examples:
        ```python
        from legacybits import BitFlags, JsonSerializer, encode

        class Flags(BitFlags):
            A = 1
            B = 2

        encode(Flags.A | Flags.B, JsonSerializer())  # '{"bits":3}'
        ```
    """
    record = serializer.begin_record(type_name(type(flags)), 1)
    record.write_field(BITS_FIELD, flags.bits())
    return record.end()


def to_json(flags: BitFlagsType, sink: Optional[IO[str]] = None) -> Optional[str]:
    """Encode a flag set as compact JSON text.

    Args:
        flags: Flag set to encode
        sink: Optional text stream to write to instead of returning the text

    Returns:
        The JSON text, or None when written to ``sink``
    """
    return encode(flags, JsonSerializer(sink))


def to_python(flags: BitFlagsType) -> dict[str, int]:
    """Encode a flag set as a plain dict, e.g. ``{"bits": 3}``."""
    return encode(flags, PythonSerializer())
