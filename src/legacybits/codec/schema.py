"""Flag type introspection and the shape of the legacy record.

This module holds the one piece of shared knowledge between the encoder and
the decoder: the record has a single field named ``bits`` whose value is the
raw integer of the flag type, sized to the type's storage width.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from functools import lru_cache
from typing import Annotated, Any, Optional, Tuple

from pydantic import AfterValidator, Strict, TypeAdapter
from pydantic_core import PydanticCustomError

from ..exceptions import SchemaError
from ..flags.base import known_mask

BITS_FIELD = "bits"
RECORD_FIELDS: Tuple[str, ...] = (BITS_FIELD,)


def type_name(flag_type: type) -> str:
    """Diagnostic label written with each record.

    The label is never checked on decode.
    """
    return f"{flag_type.__module__}.{flag_type.__qualname__}"


def bits_width(flag_type: type) -> Optional[int]:
    """Return the declared storage width of a flag type, or None if unbounded.

    Raises:
        SchemaError: If the declared width is not a positive integer
    """
    width = getattr(flag_type, "bits_width", None)
    if width is None:
        return None
    if isinstance(width, bool) or not isinstance(width, int) or width <= 0:
        raise SchemaError(
            f"{flag_type.__qualname__}.bits_width must be a positive integer, got {width!r}"
        )
    return width


@lru_cache(maxsize=None)
def raw_bits_adapter(width: Optional[int]) -> TypeAdapter[int]:
    """Pydantic adapter for the raw integer of a flag type.

    Only real integers are accepted (no bools, floats or numeric strings),
    and they must fit in ``width`` unsigned bits. Type failures report an
    ``int_type`` error; range failures report ``bits_range``.

    Args:
        width: Storage width in bits, or None for any non-negative integer

    Returns:
        TypeAdapter validating the raw bits value
    """
    max_bits = None if width is None else (1 << width) - 1

    # Range checked in Python so widths beyond 64 bits behave like narrow ones
    def check_range(value: int) -> int:
        if value < 0:
            raise PydanticCustomError("bits_range", "Input should be a non-negative integer")
        if max_bits is not None and value > max_bits:
            raise PydanticCustomError(
                "bits_range",
                "Input should fit in {width} bits (at most {max_bits})",
                {"width": width, "max_bits": max_bits},
            )
        return value

    return TypeAdapter(Annotated[int, Strict(), AfterValidator(check_range)])


@dataclass(frozen=True)
class FlagSchema:
    """Schema information for a flag type.

    Attributes:
        name: Diagnostic label used for records of this type
        flag_type: The flag type itself
        width: Storage width in bits, None when unbounded
        flags: Named flags as (name, value) pairs in declaration order
    """

    name: str
    flag_type: type
    width: Optional[int]
    flags: Tuple[Tuple[str, int], ...]

    @classmethod
    def from_type(cls, flag_type: type) -> FlagSchema:
        """Introspect a flag type.

        Raises:
            SchemaError: If the type lacks the bits()/from_bits_retain() capability
                or declares an invalid width
        """
        if not isinstance(flag_type, type):
            raise SchemaError(f"expected a flag type, got {flag_type!r}")

        missing = [
            attr for attr in ("bits", "from_bits_retain") if not callable(getattr(flag_type, attr, None))
        ]
        if missing:
            raise SchemaError(
                f"{flag_type.__qualname__} cannot be used as a flag type: "
                f"missing {', '.join(missing)}"
            )

        flags: Tuple[Tuple[str, int], ...] = ()
        if issubclass(flag_type, enum.Flag):
            flags = tuple((name, int(member.value)) for name, member in flag_type.__members__.items())

        return cls(
            name=type_name(flag_type),
            flag_type=flag_type,
            width=bits_width(flag_type),
            flags=flags,
        )

    def max_bits(self) -> Optional[int]:
        """Largest raw value the storage width allows, None when unbounded."""
        if self.width is None:
            return None
        return (1 << self.width) - 1

    def known_mask(self) -> int:
        """Union of the bits of every named flag."""
        return known_mask(value for _name, value in self.flags)

    def flag_names(self, bits: int) -> list[str]:
        """Names of the single-bit flags set in ``bits``, lowest bit first."""
        names = []
        for name, value in sorted(self.flags, key=lambda item: item[1]):
            if value and value & (value - 1) == 0 and bits & value:
                names.append(name)
        return names

    def adapter(self) -> TypeAdapter[int]:
        """Raw bits adapter for this type's width."""
        return raw_bits_adapter(self.width)

    def json_schema(self) -> dict[str, Any]:
        """JSON schema of the legacy record for this type."""
        bits_schema: dict[str, Any] = {"type": "integer", "minimum": 0}
        max_bits = self.max_bits()
        if max_bits is not None:
            bits_schema["maximum"] = max_bits
        return {
            "title": self.flag_type.__name__,
            "type": "object",
            "properties": {BITS_FIELD: bits_schema},
            "required": [BITS_FIELD],
            "additionalProperties": False,
        }
