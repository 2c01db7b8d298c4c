"""Legacy bits codec for legacybits.

This module provides encoding and decoding of flag sets in the legacy
single-field ``{"bits": n}`` record shape.
"""

from __future__ import annotations

from .decoder import decode, from_json, from_python
from .encoder import encode, to_json, to_python
from .schema import BITS_FIELD, FlagSchema, raw_bits_adapter, type_name
from .visitor import BitsVisitor

__all__ = [
    "encode",
    "decode",
    "to_json",
    "from_json",
    "to_python",
    "from_python",
    "BitsVisitor",
    "FlagSchema",
    "BITS_FIELD",
    "raw_bits_adapter",
    "type_name",
]
