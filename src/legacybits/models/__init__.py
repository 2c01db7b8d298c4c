"""Pydantic integration for legacybits.

This module provides the LegacyBits field type for storing flag sets on
Pydantic models in the legacy record shape.
"""

from __future__ import annotations

from .fields import LegacyBits

__all__ = [
    "LegacyBits",
]
