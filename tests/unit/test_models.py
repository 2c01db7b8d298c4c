"""Unit tests for the Pydantic LegacyBits field type."""

from __future__ import annotations

import enum

import pytest
from pydantic import BaseModel, ValidationError

from legacybits import BitFlags, LegacyBits, SchemaError


class Permissions(BitFlags):
    """Test permissions."""

    bits_width = enum.nonmember(16)

    READ = 1
    WRITE = 2
    ADMIN = 4


PermissionSet = LegacyBits(Permissions)


class Account(BaseModel):
    """Model with a legacy flag field."""

    name: str
    permissions: PermissionSet


class TestLegacyBitsField:
    """Test validation and serialization through Pydantic."""

    def test_accepts_instance(self) -> None:
        account = Account(name="ops", permissions=Permissions.READ)
        assert account.permissions is Permissions.READ

    def test_accepts_record(self) -> None:
        account = Account(name="ops", permissions={"bits": 3})
        assert isinstance(account.permissions, Permissions)
        assert account.permissions == Permissions.READ | Permissions.WRITE

    def test_dump(self) -> None:
        account = Account(name="ops", permissions=Permissions.READ | Permissions.ADMIN)
        assert account.model_dump() == {"name": "ops", "permissions": {"bits": 5}}

    def test_dump_json(self) -> None:
        account = Account(name="ops", permissions=Permissions.READ)
        assert account.model_dump_json() == '{"name":"ops","permissions":{"bits":1}}'

    def test_json_round_trip_keeps_unknown_bits(self) -> None:
        account = Account.model_validate_json('{"name":"ops","permissions":{"bits":65535}}')
        assert account.permissions.bits() == 0xFFFF
        assert account.model_dump_json() == '{"name":"ops","permissions":{"bits":65535}}'

    @pytest.mark.parametrize(
        "permissions, message",
        [
            ({"bits": 1, "extra": 2}, "unknown field `extra`"),
            ({}, "missing field `bits`"),
            ({"bits": 65536}, "16 bits"),
            ({"bits": "1"}, "field `bits`"),
            (1, "expected a primitive bitflags value"),
        ],
    )
    def test_invalid_record(self, permissions: object, message: str) -> None:
        with pytest.raises(ValidationError) as exc_info:
            Account(name="ops", permissions=permissions)
        errors = exc_info.value.errors()
        assert len(errors) == 1
        assert errors[0]["type"] == "legacy_bits"
        assert errors[0]["loc"] == ("permissions",)
        assert message in errors[0]["msg"]

    def test_json_schema(self) -> None:
        schema = Account.model_json_schema()["properties"]["permissions"]
        assert schema["type"] == "object"
        assert schema["required"] == ["bits"]
        assert schema["additionalProperties"] is False
        assert schema["properties"]["bits"]["maximum"] == 0xFFFF

    def test_rejects_non_flag_type(self) -> None:
        with pytest.raises(SchemaError):
            LegacyBits(int)

    def test_instance_wider_than_field(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            Account(name="ops", permissions=Permissions.from_bits_retain(0x10000))
        errors = exc_info.value.errors()
        assert errors[0]["type"] == "legacy_bits"
        assert "16 bits" in errors[0]["msg"]

    def test_accepts_json_text_record(self) -> None:
        account = Account(name="ops", permissions='{"bits":3}')
        assert account.permissions == Permissions.READ | Permissions.WRITE

    def test_json_text_record_rejects_duplicates(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            Account(name="ops", permissions='{"bits":1,"bits":2}')
        assert "duplicate field `bits`" in exc_info.value.errors()[0]["msg"]

    def test_document_parser_collapses_duplicates(self) -> None:
        # pydantic's JSON parser keeps the last key before the field sees it
        account = Account.model_validate_json('{"name":"ops","permissions":{"bits":1,"bits":2}}')
        assert account.permissions.bits() == 2
