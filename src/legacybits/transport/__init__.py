"""Structured record transports for legacybits.

This module provides the serializer/deserializer interfaces the codec is
written against, plus two concrete transports: plain Python objects and JSON
text.
"""

from __future__ import annotations

from .base import FieldValue, RecordDeserializer, RecordSerializer, RecordVisitor, RecordWriter
from .json import JsonDeserializer, JsonSerializer
from .native import PythonDeserializer, PythonSerializer

__all__ = [
    "RecordSerializer",
    "RecordWriter",
    "RecordDeserializer",
    "RecordVisitor",
    "FieldValue",
    "PythonSerializer",
    "PythonDeserializer",
    "JsonSerializer",
    "JsonDeserializer",
]
