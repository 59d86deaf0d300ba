"""
Channel messages - messages addressed to one of 16 channels.

The status byte's high nibble is the message type, the low nibble the
channel, followed by one or two data bytes:

    ChannelMessage(0x9, 0x0, 0x40, 0x40)   # raw, bytes 90 40 40
    NoteOn(0, 64, 100)                      # channel, note, velocity
    NoteOn.find("C4").new(0, 100)           # note resolved by name

Fields are mutable; the wire bytes always follow:

    msg = NoteOn(0, 64, 100)
    msg.note += 5
    msg.to_byte_array()   # [0x90, 69, 100]
"""

from __future__ import annotations

import re
from collections.abc import Sequence

from midi_events.constants import PITCH_BEND_CENTER, ErrorMessages, MessageKind
from midi_events.conversion import byte_to_nibbles
from midi_events.dictionary import ConstantMap
from midi_events.errors import SchemaMismatchError
from midi_events.messages.base import ShortMessage
from midi_events.messages.schema import MessageSchema

_NOTE_LETTER = re.compile(r"[A-Ga-g]#?")


class ChannelMessage(ShortMessage):
    """
    Common behavior for channel messages.

    Instantiated directly, this is a raw channel message built from
    status nibbles and data bytes:

        ChannelMessage(0x9, 0x0, 0x40, 0x40)

    Specific kinds (NoteOn, ControlChange, ...) take their schema fields
    instead and resolve the status nibble from their display name.
    """

    schema = MessageSchema(MessageKind.CHANNEL_MESSAGE.value)

    def __init__(self, *values: int, const: ConstantMap | None = None):
        """
        Args:
            values: Raw: status high, status low, data byte 0, [data byte 1].
                Specific kinds: their schema fields, in order.
            const: Constant whose value fills the constant-carrying field

        Raises:
            SchemaMismatchError: wrong number of values for the kind
        """
        values_list = self._insert_constant(values, const)
        if self.schema.fields:
            self._initialize_fields(values_list)
        else:
            self._initialize_raw(values_list)

    def _initialize_raw(self, values: list[int]) -> None:
        if not 3 <= len(values) <= 4:
            raise SchemaMismatchError(
                ErrorMessages.RAW_MISMATCH.format(kind=type(self).__name__, actual=len(values))
            )
        status_high, status_low, *data = values
        if len(data) == 1:
            data.append(0)
        self._initialize(status_high, status_low, data)

    def _initialize_fields(self, values: list[int]) -> None:
        fields = self.schema.fields
        if len(values) != len(fields):
            raise SchemaMismatchError(
                ErrorMessages.SCHEMA_MISMATCH.format(
                    kind=type(self).__name__,
                    expected=len(fields),
                    fields=", ".join(fields),
                    actual=len(values),
                )
            )
        channel, *data = values
        self._initialize(self.type_for_status(), channel, data)

    @classmethod
    def required_data_bytes(cls) -> int:
        if not cls.schema.fields:
            return 1
        return cls.schema.data_byte_count

    @classmethod
    def from_status(cls, status_byte: int, data: Sequence[int]) -> ChannelMessage:
        """
        Build this kind from a status byte and data bytes.

        The raw class keeps both status nibbles; specific kinds take the
        channel from the low nibble.
        """
        status_high, status_low = byte_to_nibbles(status_byte)
        if not cls.schema.fields:
            return cls(status_high, status_low, *data[:2])
        return cls(status_low, *data[: cls.schema.data_byte_count])

    def to_type(self) -> ShortMessage:
        """
        Narrow to the specific kind for this status byte.

            ChannelMessage(0x9, 0x0, 0x40, 0x40).to_type()   # NoteOn(0, 0x40, 0x40)

        Returns the message unchanged if no kind claims the status.
        """
        from midi_events.messages.dispatch import DEFAULT_DISPATCHER

        return DEFAULT_DISPATCHER.narrow(self)


class NoteMessage(ChannelMessage):
    """Common behavior for note on/off."""

    @property
    def note_name(self) -> str | None:
        """Pitch letter of the resolved note name ("C#4" -> "C#")."""
        if self.name is None:
            return None
        match = _NOTE_LETTER.match(self.name)
        return match.group(0).upper() if match else None


class NoteOff(NoteMessage):
    """Note off: channel, note, velocity."""

    schema = MessageSchema(
        MessageKind.NOTE_OFF.value,
        fields=("channel", "note", "velocity"),
        constant_group="Note",
        constant_field="note",
    )

    def to_note_on(self) -> NoteOn:
        """The matching note on message."""
        return NoteOn(self.channel, self.note, self.velocity)


class NoteOn(NoteMessage):
    """Note on: channel, note, velocity."""

    schema = MessageSchema(
        MessageKind.NOTE_ON.value,
        fields=("channel", "note", "velocity"),
        constant_group="Note",
        constant_field="note",
    )

    def to_note_off(self) -> NoteOff:
        """The matching note off message."""
        return NoteOff(self.channel, self.note, self.velocity)


class PolyphonicAftertouch(ChannelMessage):
    """Per-note pressure: channel, note, value."""

    schema = MessageSchema(
        MessageKind.POLYPHONIC_AFTERTOUCH.value,
        fields=("channel", "note", "value"),
        constant_group="Note",
        constant_field="note",
    )


class ControlChange(ChannelMessage):
    """Controller change: channel, controller index, value."""

    schema = MessageSchema(
        MessageKind.CONTROL_CHANGE.value,
        fields=("channel", "index", "value"),
        constant_field="index",
    )


class ProgramChange(ChannelMessage):
    """Program change: channel, program. One data byte."""

    schema = MessageSchema(
        MessageKind.PROGRAM_CHANGE.value,
        fields=("channel", "program"),
        constant_field="program",
    )


class ChannelAftertouch(ChannelMessage):
    """Channel-wide pressure: channel, value. One data byte."""

    schema = MessageSchema(
        MessageKind.CHANNEL_AFTERTOUCH.value,
        fields=("channel", "value"),
    )


class PitchBend(ChannelMessage):
    """Pitch bend: channel, low 7 bits, high 7 bits."""

    schema = MessageSchema(
        MessageKind.PITCH_BEND.value,
        fields=("channel", "low", "high"),
    )

    @property
    def bend(self) -> int:
        """Signed 14-bit bend amount, 0 at center (-8192 to 8191)."""
        return ((self.high << 7) | self.low) - PITCH_BEND_CENTER


# Aliases
PolyAftertouch = PolyphonicAftertouch
PolyPressure = PolyphonicAftertouch
ChannelPressure = ChannelAftertouch
Controller = ControlChange

CHANNEL_KINDS: tuple[type[ChannelMessage], ...] = (
    NoteOff,
    NoteOn,
    PolyphonicAftertouch,
    ControlChange,
    ProgramChange,
    ChannelAftertouch,
    PitchBend,
)
