"""Flag types usable with the legacy bits format.

This module provides the BitFlagsType capability protocol and the BitFlags
base class built on enum.IntFlag.
"""

from __future__ import annotations

from .base import DEFAULT_BITS_WIDTH, BitFlags, BitFlagsType

__all__ = [
    "BitFlags",
    "BitFlagsType",
    "DEFAULT_BITS_WIDTH",
]
