"""legacybits: Legacy Wire Format for Bit-Flag Sets

A Python library that reads and writes bit-flag sets in the record shape used
by older producers: a structured record with exactly one field, ``bits``,
holding the raw integer. Flag types can gain names, widen or add validation
without breaking anything that stored or transmitted the old format.

Key Features:
- enum.IntFlag-based BitFlags base class that keeps unknown bits
- Strict decoding: exactly one ``bits`` field, no duplicates, no extras
- Format-agnostic codec with Python-object and JSON transports
- Pydantic field type for flag sets on models

Quick Start:
    >>> from legacybits import BitFlags, to_json, from_json
    >>>
    >>> class Flags(BitFlags):
    ...     A = 1
    ...     B = 2
    ...     C = 4
    ...     D = 8
    >>>
    >>> to_json(Flags.A | Flags.B)
    '{"bits":3}'
    >>> from_json(Flags, '{"bits":3}') == Flags.A | Flags.B
    True
"""

from __future__ import annotations

from .codec import (
    BITS_FIELD,
    BitsVisitor,
    FlagSchema,
    decode,
    encode,
    from_json,
    from_python,
    to_json,
    to_python,
)
from .exceptions import (
    DecodeError,
    DuplicateFieldError,
    EncodeError,
    InvalidTypeError,
    InvalidValueError,
    LegacyBitsError,
    MalformedDataError,
    MissingFieldError,
    SchemaError,
    UnknownFieldError,
)
from .flags import BitFlags, BitFlagsType
from .models import LegacyBits
from .transport import (
    FieldValue,
    JsonDeserializer,
    JsonSerializer,
    PythonDeserializer,
    PythonSerializer,
    RecordDeserializer,
    RecordSerializer,
    RecordVisitor,
    RecordWriter,
)

__version__ = "0.1.0"

__all__ = [
    # Core API
    "encode",
    "decode",
    "to_json",
    "from_json",
    "to_python",
    "from_python",
    "BitsVisitor",
    "FlagSchema",
    "BITS_FIELD",
    # Flag types
    "BitFlags",
    "BitFlagsType",
    # Pydantic
    "LegacyBits",
    # Transports
    "RecordSerializer",
    "RecordWriter",
    "RecordDeserializer",
    "RecordVisitor",
    "FieldValue",
    "PythonSerializer",
    "PythonDeserializer",
    "JsonSerializer",
    "JsonDeserializer",
    # Exceptions
    "LegacyBitsError",
    "SchemaError",
    "EncodeError",
    "DecodeError",
    "DuplicateFieldError",
    "UnknownFieldError",
    "MissingFieldError",
    "MalformedDataError",
    "InvalidTypeError",
    "InvalidValueError",
    # Version
    "__version__",
]
