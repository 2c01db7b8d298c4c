"""Decode-time validation of the legacy record.

BitsVisitor accepts exactly one field, ``bits``, and nothing else. It is a
small state machine: empty until the first ``bits`` field is read, holding a
value after that. Any other shape is rejected, because a lenient decoder would
accept records the legacy producer could never have written.
"""

from __future__ import annotations

from typing import Optional

from ..exceptions import DuplicateFieldError, MissingFieldError, UnknownFieldError
from ..transport.base import FieldValue, RecordVisitor
from .schema import BITS_FIELD, RECORD_FIELDS, raw_bits_adapter


class BitsVisitor(RecordVisitor[int]):
    """Collect the raw integer of one legacy record.

    Args:
        width: Storage width of the target flag type in bits, or None for
            any non-negative integer

    A visitor instance is good for a single record.
    """

    expecting = "a primitive bitflags value wrapped in a struct"

    def __init__(self, width: Optional[int]) -> None:
        self._adapter = raw_bits_adapter(width)
        self._bits: Optional[int] = None

    def visit_field(self, name: str, value: FieldValue) -> None:
        if name != BITS_FIELD:
            raise UnknownFieldError(name, RECORD_FIELDS)
        if self._bits is not None:
            raise DuplicateFieldError(BITS_FIELD)
        self._bits = value.read(self._adapter)

    def finish(self) -> int:
        if self._bits is None:
            raise MissingFieldError(BITS_FIELD)
        return self._bits
