"""Flag-type capability and the BitFlags base class.

The legacy codec never looks inside a flag type beyond two operations: read
the full raw integer, and build a value back from one without discarding bits
that have no name. Any class providing those satisfies BitFlagsType; BitFlags
is a ready-made implementation on top of enum.IntFlag.
"""

from __future__ import annotations

import enum
from functools import reduce
from operator import or_
from typing import Iterable, Protocol, TypeVar, runtime_checkable

F = TypeVar("F", bound="BitFlagsType")

DEFAULT_BITS_WIDTH = 32


def known_mask(values: Iterable[int]) -> int:
    """Union of the given flag values."""
    return reduce(or_, (int(value) for value in values), 0)


@runtime_checkable
class BitFlagsType(Protocol):
    """Capability surface required from a flag type.

    A flag type may also declare a ``bits_width`` class attribute, the width
    in bits of its raw integer storage. Types without one accept any
    non-negative integer.
    """

    def bits(self) -> int:
        """Return the full raw integer, including unnamed bits."""
        ...

    @classmethod
    def from_bits_retain(cls: type[F], bits: int) -> F:
        """Build a value from a raw integer, keeping every bit."""
        ...


class BitFlags(enum.IntFlag, boundary=enum.KEEP):
    """Base class for flag sets that round-trip through the legacy format.

    Subclasses declare named flags as ordinary members. The KEEP boundary
    means values with bits outside the named flags are kept as-is rather than
    rejected or masked.

    Example:
        >>> class Flags(BitFlags):
        ...     A = 1
        ...     B = 2
        ...     C = 4
        ...     D = 8
        >>> (Flags.A | Flags.B).bits()
        3
        >>> Flags.from_bits_retain(0x13).unknown_bits()
        16

    Storage width defaults to 32 bits. Override it with a non-member:

        >>> class Small(BitFlags):
        ...     bits_width = enum.nonmember(8)
        ...     X = 1
    """

    bits_width = enum.nonmember(DEFAULT_BITS_WIDTH)

    def bits(self) -> int:
        return int(self)

    @classmethod
    def from_bits_retain(cls, bits: int) -> BitFlags:
        return cls(bits)

    @classmethod
    def known_mask(cls) -> int:
        """Union of the bits of every named flag."""
        return known_mask(cls.__members__.values())

    def unknown_bits(self) -> int:
        """Bits set in this value that no named flag covers."""
        return int(self) & ~type(self).known_mask()
