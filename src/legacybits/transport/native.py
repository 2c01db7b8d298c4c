"""Records as plain Python objects.

PythonSerializer produces a dict per record; PythonDeserializer walks a
mapping (or, to represent inputs with repeated keys, an explicit list of
key/value pairs).
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Iterable, Sequence, TypeVar

from ..exceptions import InvalidTypeError
from .base import RecordDeserializer, RecordSerializer, RecordVisitor, RecordWriter, describe

T = TypeVar("T")


class _DictWriter(RecordWriter):
    def __init__(self, name: str, field_count: int) -> None:
        super().__init__(name, field_count)
        self._record: dict[str, Any] = {}

    def _write_field(self, name: str, value: Any) -> None:
        self._record[name] = value

    def _finish(self) -> dict[str, Any]:
        return self._record


class PythonSerializer(RecordSerializer):
    """Serialize records to dicts. The record label is not kept."""

    def begin_record(self, name: str, field_count: int) -> RecordWriter:
        return _DictWriter(name, field_count)


class PythonDeserializer(RecordDeserializer):
    """Deserialize a record from a mapping.

    Example:
        >>> from legacybits.codec.visitor import BitsVisitor
        >>> PythonDeserializer({"bits": 3}).decode_record("Flags", ("bits",), BitsVisitor(32))
        3
    """

    def __init__(self, data: Any) -> None:
        self._data = data
        self._pairs: list[tuple[Any, Any]] | None = None

    @classmethod
    def from_pairs(cls, pairs: Iterable[tuple[Any, Any]]) -> PythonDeserializer:
        """Build a deserializer over explicit key/value pairs, in order.

        Unlike a dict, the pairs may repeat a key.
        """
        deserializer = cls(None)
        deserializer._pairs = list(pairs)
        return deserializer

    def decode_record(self, name: str, fields: Sequence[str], visitor: RecordVisitor[T]) -> T:
        if self._pairs is not None:
            return self.walk(self._pairs, visitor)
        if not isinstance(self._data, Mapping):
            raise InvalidTypeError(
                f"invalid type: {describe(self._data)}, expected {visitor.expecting}"
            )
        return self.walk(list(self._data.items()), visitor)
