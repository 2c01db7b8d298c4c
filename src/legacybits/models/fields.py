"""Pydantic field type for flag sets in the legacy format.

This module provides LegacyBits(), which turns a flag type into an annotated
type usable on any Pydantic model field. The field validates and serializes
through the same codec as encode()/decode().
"""

from __future__ import annotations

from typing import Annotated, Any, Callable, TypeVar

from pydantic import PlainSerializer, PlainValidator, WithJsonSchema
from pydantic_core import PydanticCustomError

from ..codec.decoder import decode
from ..codec.encoder import to_python
from ..codec.schema import BITS_FIELD, FlagSchema
from ..exceptions import DecodeError
from ..transport.base import FieldValue
from ..transport.json import JsonDeserializer
from ..transport.native import PythonDeserializer

F = TypeVar("F")


def _validator(flag_type: type[F], schema: FlagSchema) -> Callable[[Any], F]:
    def validate(value: Any) -> F:
        try:
            if isinstance(value, flag_type):
                FieldValue(BITS_FIELD, value.bits()).read(schema.adapter())  # type: ignore[attr-defined]
                return value
            if isinstance(value, (str, bytes, bytearray)):
                return decode(flag_type, JsonDeserializer(value))
            return decode(flag_type, PythonDeserializer(value))
        except DecodeError as err:
            raise PydanticCustomError(
                "legacy_bits",
                "Invalid {type} record: {error}",
                {"type": flag_type.__name__, "error": str(err)},
            ) from err

    return validate


def LegacyBits(flag_type: type[F]) -> Any:
    """Create a field type storing ``flag_type`` as a ``{"bits": n}`` record.

    Args:
        flag_type: Flag type satisfying BitFlagsType

    Returns:
        An ``Annotated`` type to use as a field annotation

    Raises:
        SchemaError: If flag_type cannot be used with the legacy format

    The field accepts a flag_type instance (checked against its bits_width),
    a mapping such as ``{"bits": 3}``, or the record as JSON text. Repeated
    ``bits`` keys are rejected in JSON text, but not inside a document read
    with ``model_validate_json()``: pydantic's JSON parser keeps only the last
    occurrence of a key before the field sees the record.

    Example:
        >>> Permissions = LegacyBits(Flags)
        >>> class User(BaseModel):
        ...     name: str
        ...     permissions: Permissions
        >>> User(name="x", permissions={"bits": 3}).permissions == Flags.A | Flags.B
        True
        >>> User(name="x", permissions=Flags.A).model_dump_json()
        '{"name":"x","permissions":{"bits":1}}'
    """
    schema = FlagSchema.from_type(flag_type)
    return Annotated[
        flag_type,
        PlainValidator(_validator(flag_type, schema)),
        PlainSerializer(to_python),
        WithJsonSchema(schema.json_schema()),
    ]
