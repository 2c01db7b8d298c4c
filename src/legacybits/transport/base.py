"""Abstract record serializer and deserializer.

A serializer writes one structured record (a labelled set of named fields);
a deserializer walks one incoming record and feeds its fields, in input order,
to a RecordVisitor. Concrete transports (Python objects, JSON text) live in
sibling modules. Codecs depend only on these interfaces.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Generic, Sequence, TypeVar

from pydantic import TypeAdapter, ValidationError

from ..exceptions import EncodeError, InvalidTypeError, InvalidValueError

T = TypeVar("T")
V = TypeVar("V")


class RecordWriter(ABC):
    """Writes the fields of one open record.

    Subclasses implement _write_field() and _finish(); the field count
    declared when the record was opened is enforced here.
    """

    def __init__(self, name: str, field_count: int) -> None:
        self.name = name
        self.field_count = field_count
        self._written = 0

    def write_field(self, name: str, value: Any) -> None:
        """Write one named field."""
        if self._written >= self.field_count:
            raise EncodeError(
                f"record {self.name} declared {self.field_count} field(s), "
                f"got extra field {name!r}"
            )
        self._write_field(name, value)
        self._written += 1

    def end(self) -> Any:
        """Close the record and return the serializer's output."""
        if self._written != self.field_count:
            raise EncodeError(
                f"record {self.name} declared {self.field_count} field(s), "
                f"but {self._written} were written"
            )
        return self._finish()

    @abstractmethod
    def _write_field(self, name: str, value: Any) -> None:
        raise NotImplementedError

    @abstractmethod
    def _finish(self) -> Any:
        raise NotImplementedError


class RecordSerializer(ABC):
    @abstractmethod
    def begin_record(self, name: str, field_count: int) -> RecordWriter:
        """Open a record labelled ``name`` that will hold ``field_count`` fields."""
        raise NotImplementedError


class FieldValue:
    """The not-yet-interpreted value of one field of an incoming record.

    Visitors call read() only for fields they accept, so a rejected field's
    value is never interpreted.
    """

    def __init__(self, field: str, raw: Any) -> None:
        self.field = field
        self._raw = raw

    def read(self, adapter: TypeAdapter[V]) -> V:
        """Interpret the value with a pydantic adapter.

        Raises:
            InvalidTypeError: If the value has the wrong primitive type
            InvalidValueError: If the value has the right type but is out of range
        """
        try:
            return adapter.validate_python(self._raw)
        except ValidationError as err:
            error = err.errors()[0]
            message = f"field `{self.field}`: {error['msg']}, got {self._raw!r}"
            if error["type"].endswith(("_type", "_parsing")):
                raise InvalidTypeError(message) from err
            raise InvalidValueError(message) from err


class RecordVisitor(ABC, Generic[T]):
    """Receives the fields of one record, one at a time.

    Attributes:
        expecting: Human-readable description of the accepted input, used in
            error messages when the input is not a record at all
    """

    expecting: str = "a record"

    @abstractmethod
    def visit_field(self, name: str, value: FieldValue) -> None:
        """Handle one field. Raising stops the walk."""
        raise NotImplementedError

    @abstractmethod
    def finish(self) -> T:
        """Called at the end of the record; returns the visitor's result."""
        raise NotImplementedError


class RecordDeserializer(ABC):
    @abstractmethod
    def decode_record(self, name: str, fields: Sequence[str], visitor: RecordVisitor[T]) -> T:
        """Walk one record, driving ``visitor`` over its fields.

        Args:
            name: Diagnostic label of the expected record
            fields: Field names the visitor recognizes (a hint; the visitor
                does the checking)
            visitor: Receives each field in input order, then finish()

        Returns:
            Whatever visitor.finish() returns
        """
        raise NotImplementedError

    def walk(self, entries: Sequence[tuple[Any, Any]], visitor: RecordVisitor[T]) -> T:
        """Feed already-parsed (key, value) entries to a visitor.

        Shared by transports whose records are key/value pairs.
        """
        for key, raw in entries:
            if not isinstance(key, str):
                raise InvalidTypeError(
                    f"invalid type: field name {key!r}, expected a string"
                )
            visitor.visit_field(key, FieldValue(key, raw))
        return visitor.finish()


def describe(value: Any) -> str:
    """Short description of an unexpected input, for InvalidTypeError messages."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return f"boolean `{str(value).lower()}`"
    if isinstance(value, int):
        return f"integer `{value}`"
    if isinstance(value, float):
        return f"floating point `{value}`"
    if isinstance(value, str):
        return f"string {value!r}"
    if isinstance(value, (list, tuple)):
        return "sequence"
    return type(value).__name__
