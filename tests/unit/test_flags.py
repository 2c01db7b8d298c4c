"""Unit tests for flag types and schema introspection."""

from __future__ import annotations

import enum
from dataclasses import dataclass

import pytest

from legacybits import BitFlags, BitFlagsType, FlagSchema, SchemaError
from legacybits.codec.schema import bits_width, type_name
from legacybits.flags.base import known_mask


class Flags(BitFlags):
    """Test flags."""

    A = 1
    B = 2
    C = 4
    D = 8


class SmallFlags(BitFlags):
    """8-bit flags."""

    bits_width = enum.nonmember(8)

    X = 1
    Y = 0x80


class AliasFlags(BitFlags):
    """Flags with a combined alias."""

    READ = 1
    WRITE = 2
    READ_WRITE = 3


@dataclass(frozen=True)
class RawFlags:
    """Flag type that is not an enum at all."""

    value: int

    def bits(self) -> int:
        return self.value

    @classmethod
    def from_bits_retain(cls, bits: int) -> RawFlags:
        return cls(bits)


class TestBitFlags:
    """Test the BitFlags base class."""

    def test_bits_of_combination(self) -> None:
        assert (Flags.A | Flags.B).bits() == 3
        assert Flags.D.bits() == 8
        assert Flags(0).bits() == 0

    def test_bits_is_plain_int(self) -> None:
        bits = (Flags.A | Flags.C).bits()
        assert type(bits) is int

    def test_from_bits_retain_keeps_unknown_bits(self) -> None:
        flags = Flags.from_bits_retain(0x13)
        assert isinstance(flags, Flags)
        assert flags.bits() == 0x13
        assert flags.unknown_bits() == 0x10
        assert Flags.A in flags
        assert Flags.B in flags
        assert Flags.C not in flags

    def test_from_bits_retain_all_ones(self) -> None:
        flags = Flags.from_bits_retain(0xFFFF_FFFF)
        assert flags.bits() == 0xFFFF_FFFF
        assert flags.unknown_bits() == 0xFFFF_FFF0

    def test_from_bits_retain_equals_named_combination(self) -> None:
        assert Flags.from_bits_retain(3) == Flags.A | Flags.B

    def test_known_mask(self) -> None:
        assert Flags.known_mask() == 0xF
        assert SmallFlags.known_mask() == 0x81
        assert AliasFlags.known_mask() == 3

    def test_known_mask_matches_schema(self) -> None:
        for flag_type in (Flags, SmallFlags, AliasFlags):
            assert flag_type.known_mask() == FlagSchema.from_type(flag_type).known_mask()
        assert known_mask([]) == 0

    def test_default_width(self) -> None:
        assert Flags.bits_width == 32

    def test_width_override(self) -> None:
        assert SmallFlags.bits_width == 8
        assert "bits_width" not in SmallFlags.__members__

    def test_satisfies_capability(self) -> None:
        assert isinstance(Flags.A, BitFlagsType)
        assert isinstance(RawFlags(5), BitFlagsType)
        assert not isinstance(5, BitFlagsType)


class TestFlagSchema:
    """Test flag type introspection."""

    def test_enum_flags(self) -> None:
        schema = FlagSchema.from_type(Flags)
        assert schema.flag_type is Flags
        assert schema.width == 32
        assert schema.flags == (("A", 1), ("B", 2), ("C", 4), ("D", 8))
        assert schema.max_bits() == 0xFFFF_FFFF
        assert schema.known_mask() == 0xF

    def test_label_is_qualified_name(self) -> None:
        schema = FlagSchema.from_type(Flags)
        assert schema.name == type_name(Flags)
        assert schema.name.endswith(".Flags")
        assert schema.name.startswith(Flags.__module__)

    def test_aliases_listed(self) -> None:
        schema = FlagSchema.from_type(AliasFlags)
        assert ("READ_WRITE", 3) in schema.flags

    def test_flag_names_skip_aliases_and_unknown(self) -> None:
        schema = FlagSchema.from_type(AliasFlags)
        assert schema.flag_names(0x13) == ["READ", "WRITE"]
        assert FlagSchema.from_type(Flags).flag_names(0) == []

    def test_non_enum_type(self) -> None:
        schema = FlagSchema.from_type(RawFlags)
        assert schema.width is None
        assert schema.max_bits() is None
        assert schema.flags == ()
        assert schema.known_mask() == 0

    def test_missing_capability(self) -> None:
        class NotFlags:
            def bits(self) -> int:
                return 0

        with pytest.raises(SchemaError, match="from_bits_retain"):
            FlagSchema.from_type(NotFlags)

    def test_not_a_type(self) -> None:
        with pytest.raises(SchemaError):
            FlagSchema.from_type(Flags.A)  # type: ignore[arg-type]

    @pytest.mark.parametrize("width", [0, -8, True, 8.0, "32"])
    def test_invalid_width(self, width: object) -> None:
        class BadWidth(RawFlags):
            pass

        BadWidth.bits_width = width  # type: ignore[attr-defined]

        with pytest.raises(SchemaError, match="bits_width"):
            bits_width(BadWidth)

    def test_json_schema(self) -> None:
        schema = FlagSchema.from_type(SmallFlags).json_schema()
        assert schema["type"] == "object"
        assert schema["required"] == ["bits"]
        assert schema["additionalProperties"] is False
        assert schema["properties"]["bits"] == {"type": "integer", "minimum": 0, "maximum": 255}

    def test_json_schema_unbounded(self) -> None:
        schema = FlagSchema.from_type(RawFlags).json_schema()
        assert "maximum" not in schema["properties"]["bits"]
