"""Records as JSON text.

JsonSerializer writes compact objects (``{"bits":3}``); JsonDeserializer
parses one JSON document and keeps repeated object keys, so the visitor sees
every occurrence in document order.
"""

from __future__ import annotations

import json
from typing import IO, Any, Optional, Sequence, TypeVar

from ..exceptions import EncodeError, InvalidTypeError, InvalidValueError, MalformedDataError
from .base import RecordDeserializer, RecordSerializer, RecordVisitor, RecordWriter, describe

T = TypeVar("T")


class _Pairs(list):
    """Object members as parsed, duplicates included."""


class _JsonWriter(RecordWriter):
    def __init__(self, name: str, field_count: int, sink: Optional[IO[str]]) -> None:
        super().__init__(name, field_count)
        self._sink = sink
        self._parts: list[str] = []

    def _write_field(self, name: str, value: Any) -> None:
        try:
            encoded = json.dumps(value, separators=(",", ":"), allow_nan=False)
        except (TypeError, ValueError) as err:
            raise EncodeError(f"field {name!r} of {self.name}: {err}") from err
        self._parts.append(f"{json.dumps(name)}:{encoded}")

    def _finish(self) -> Optional[str]:
        text = "{" + ",".join(self._parts) + "}"
        if self._sink is None:
            return text
        try:
            self._sink.write(text)
        except OSError as err:
            raise EncodeError(f"failed to write {self.name}: {err}") from err
        return None


class JsonSerializer(RecordSerializer):
    """Serialize records to compact JSON text.

    Args:
        sink: Optional text stream. When given, the record is written to it
            and end() returns None; otherwise end() returns the text.
    """

    def __init__(self, sink: Optional[IO[str]] = None) -> None:
        self._sink = sink

    def begin_record(self, name: str, field_count: int) -> RecordWriter:
        return _JsonWriter(name, field_count, self._sink)


class JsonDeserializer(RecordDeserializer):
    """Deserialize a record from one JSON document.

    Args:
        data: JSON text (str, bytes or bytearray)

    Raises:
        MalformedDataError: From decode_record(), if the text is not valid JSON
            or is nested too deeply to parse
        InvalidValueError: From decode_record(), if an integer literal is too
            long to convert (over the interpreter's int digit limit)
    """

    def __init__(self, data: str | bytes | bytearray) -> None:
        self._data = data

    def decode_record(self, name: str, fields: Sequence[str], visitor: RecordVisitor[T]) -> T:
        document = self._parse()
        if not isinstance(document, _Pairs):
            raise InvalidTypeError(
                f"invalid type: {describe(document)}, expected {visitor.expecting}"
            )
        return self.walk(document, visitor)

    def _parse(self) -> Any:
        try:
            return json.loads(self._data, object_pairs_hook=_Pairs, parse_int=_parse_int)
        except json.JSONDecodeError as err:
            raise MalformedDataError(f"{err.msg} at line {err.lineno} column {err.colno}") from err
        except UnicodeDecodeError as err:
            raise MalformedDataError(f"invalid UTF-8 in JSON input: {err}") from err
        except RecursionError as err:
            raise MalformedDataError("JSON input is nested too deeply") from err
        except ValueError as err:
            raise MalformedDataError(f"invalid JSON input: {err}") from err


def _parse_int(text: str) -> int:
    # Integers past the interpreter's str-to-int digit limit are refused
    try:
        return int(text)
    except ValueError as err:
        raise InvalidValueError(
            f"integer literal with {len(text.lstrip('-'))} digits is too large"
        ) from err
