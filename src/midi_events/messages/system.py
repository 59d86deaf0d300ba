"""
System common and system realtime messages.

Both use status nibble 0xF; the low nibble identifies the message:

    SystemRealtime.find("Stop").new()        # FC
    SystemCommon.find("Song Select").new(3)   # F3 03
"""

from __future__ import annotations

from collections.abc import Sequence

from midi_events.constants import ErrorMessages, MessageKind
from midi_events.dictionary import ConstantMap
from midi_events.errors import SchemaMismatchError
from midi_events.messages.base import ShortMessage
from midi_events.messages.schema import MessageSchema


class SystemCommon(ShortMessage):
    """
    System common message: id plus up to two data bytes.

    Ids: 0x1 MTC quarter frame, 0x2 song position, 0x3 song select,
    0x6 tune request.
    """

    schema = MessageSchema(
        MessageKind.SYSTEM_COMMON.value,
        fields=("id",),
        constant_field="id",
    )

    def __init__(self, *values: int | None, const: ConstantMap | None = None):
        """
        Args:
            values: id, then optional data bytes (None entries are skipped)
            const: Constant whose value is the id
        """
        values_list = self._insert_constant(values, const)  # type: ignore[arg-type]
        if not 1 <= len(values_list) <= 3:
            raise SchemaMismatchError(
                ErrorMessages.SCHEMA_MISMATCH.format(
                    kind=type(self).__name__,
                    expected="1-3",
                    fields="id, data bytes",
                    actual=len(values_list),
                )
            )
        message_id, *data = values_list
        self._initialize(self.type_for_status(), message_id, (b for b in data if b is not None))

    @classmethod
    def from_status(cls, status_byte: int, data: Sequence[int]) -> SystemCommon:
        return cls(status_byte & 0x0F, *data[:2])


class SystemRealtime(ShortMessage):
    """
    System realtime message: a single status byte.

    Ids: 0x8 timing clock, 0xA start, 0xB continue, 0xC stop,
    0xE active sensing, 0xF reset.
    """

    schema = MessageSchema(
        MessageKind.SYSTEM_REALTIME.value,
        fields=("id",),
        constant_field="id",
    )

    def __init__(self, *values: int, const: ConstantMap | None = None):
        values_list = self._insert_constant(values, const)
        if len(values_list) != 1:
            raise SchemaMismatchError(
                ErrorMessages.SCHEMA_MISMATCH.format(
                    kind=type(self).__name__, expected=1, fields="id", actual=len(values_list)
                )
            )
        self._initialize(self.type_for_status(), values_list[0], ())

    @classmethod
    def from_status(cls, status_byte: int, data: Sequence[int]) -> SystemRealtime:
        return cls(status_byte & 0x0F)
