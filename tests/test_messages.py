"""
Tests for channel messages.

Tests cover:
- Raw channel message construction
- Each channel kind's wire bytes
- Field accessors writing through to the buffer
- Name resolution and refresh
- Argument count validation
- Equality, repr and mido conversion
"""

import mido
import pytest

from midi_events.dictionary import ConstantRegistry
from midi_events.errors import ConstantNotFoundError, SchemaMismatchError
from midi_events.messages import (
    CHANNEL_KINDS,
    ChannelAftertouch,
    ChannelMessage,
    ChannelPressure,
    ControlChange,
    Controller,
    MessageSchema,
    NoteOff,
    NoteOn,
    PitchBend,
    PolyAftertouch,
    PolyphonicAftertouch,
    PolyPressure,
    ProgramChange,
)
from midi_events.messages.schema import SchemaField


@pytest.fixture(autouse=True)
def _packaged(packaged_registry: ConstantRegistry) -> None:
    """Every test here runs against the packaged dictionary."""


class TestRawChannelMessage:
    """Tests for ChannelMessage built from nibbles and data bytes."""

    def test_bytes(self) -> None:
        """Status nibbles combine into the status byte."""
        msg = ChannelMessage(0x9, 0x0, 0x40, 0x40)
        assert msg.to_byte_array() == [0x90, 0x40, 0x40]
        assert msg.to_hex_string() == "904040"

    def test_buffer(self) -> None:
        """Status and data are exposed as given."""
        msg = ChannelMessage(0x9, 0x0, 0x40, 0x40)
        assert msg.status == [0x9, 0x0]
        assert msg.data == [0x40, 0x40]
        assert msg.status_byte == 0x90

    def test_second_data_byte_defaults(self) -> None:
        """A single data byte is padded with 0."""
        msg = ChannelMessage(0xC, 0x3, 0x40)
        assert msg.data == [0x40, 0x00]

    def test_too_few_values(self) -> None:
        """Raw construction needs at least one data byte."""
        with pytest.raises(SchemaMismatchError):
            ChannelMessage(0x9, 0x0)

    def test_too_many_values(self) -> None:
        """Raw construction takes at most two data bytes."""
        with pytest.raises(SchemaMismatchError):
            ChannelMessage(0x9, 0x0, 1, 2, 3)

    def test_no_name(self) -> None:
        """Raw messages carry no resolved name."""
        msg = ChannelMessage(0x9, 0x0, 0x40, 0x40)
        assert msg.name is None
        assert msg.verbose_name is None

    def test_repr(self) -> None:
        """Raw messages show their buffer."""
        assert repr(ChannelMessage(0x9, 0x0, 1, 2)) == "ChannelMessage(status=[9, 0], data=[1, 2])"


class TestChannelKinds:
    """Tests for the wire bytes of each channel kind."""

    def test_note_on(self) -> None:
        """Note on: 0x9n, note, velocity."""
        msg = NoteOn(0, 64, 100)
        assert msg.to_byte_array() == [0x90, 64, 100]
        assert msg.to_hex_string() == "904064"
        assert (msg.channel, msg.note, msg.velocity) == (0, 64, 100)

    def test_note_off(self) -> None:
        """Note off: 0x8n, note, velocity."""
        assert NoteOff(1, 60, 0).to_hex_string() == "813C00"

    def test_polyphonic_aftertouch(self) -> None:
        """Poly aftertouch: 0xAn, note, value."""
        msg = PolyphonicAftertouch(2, 60, 0x40)
        assert msg.to_hex_string() == "A23C40"
        assert msg.value == 0x40
        assert msg.name == "C4"

    def test_control_change(self) -> None:
        """Control change: 0xBn, index, value."""
        msg = ControlChange(2, 1, 0x20)
        assert msg.to_byte_array() == [0xB2, 0x01, 0x20]
        assert msg.index == 1
        assert msg.value == 0x20

    def test_program_change(self) -> None:
        """Program change has one data byte."""
        msg = ProgramChange(3, 0x40)
        assert msg.to_hex_string() == "C340"
        assert msg.program == 0x40

    def test_channel_aftertouch(self) -> None:
        """Channel aftertouch has one data byte."""
        msg = ChannelAftertouch(3, 0x50)
        assert msg.to_hex_string() == "D350"
        assert msg.value == 0x50

    def test_pitch_bend(self) -> None:
        """Pitch bend: 0xEn, low, high."""
        msg = PitchBend(0, 0x50, 0xA0)
        assert msg.to_hex_string() == "E050A0"
        assert (msg.low, msg.high) == (0x50, 0xA0)

    def test_bytes_protocol(self) -> None:
        """bytes() gives the wire bytes."""
        assert bytes(NoteOn(0, 60, 100)) == b"\x90\x3c\x64"

    def test_aliases(self) -> None:
        """Alternate names refer to the same kinds."""
        assert PolyAftertouch is PolyphonicAftertouch
        assert PolyPressure is PolyphonicAftertouch
        assert ChannelPressure is ChannelAftertouch
        assert Controller is ControlChange


class TestFields:
    """Tests for field accessors."""

    def test_fields_are_accessors(self) -> None:
        """Schema fields become class-level accessors."""
        assert isinstance(NoteOn.note, SchemaField)
        assert NoteOn.note.slot == 1

    def test_increment_writes_through(self) -> None:
        """Changing a field changes the wire bytes."""
        msg = NoteOn(0, 64, 100)
        msg.note += 5
        assert msg.note == 69
        assert msg.to_byte_array() == [0x90, 69, 100]

    def test_channel_writes_status(self) -> None:
        """The channel lives in the status low nibble."""
        msg = NoteOn(0, 64, 100)
        msg.channel = 3
        assert msg.status == [0x9, 0x3]
        assert msg.to_byte_array()[0] == 0x93

    def test_data_reflects_fields(self) -> None:
        """Data bytes follow field writes."""
        msg = ControlChange(0, 7, 100)
        msg.value = 50
        assert msg.data == [7, 50]

    @pytest.mark.parametrize(
        ("kind", "slot", "field"),
        [
            (kind, slot, field)
            for kind in CHANNEL_KINDS
            for slot, field in enumerate(kind.schema.fields)
        ],
        ids=lambda param: getattr(param, "__name__", str(param)),
    )
    def test_every_field_writes_its_slot(self, kind, slot: int, field: str) -> None:
        """Setting a field changes exactly its byte, and the getter agrees."""
        msg = kind(*[1, 0x21, 0x22][: len(kind.schema.fields)])
        before = msg.to_byte_array()
        written = 0x9 if slot == 0 else 0x55
        setattr(msg, field, written)

        assert getattr(msg, field) == written
        after = msg.to_byte_array()
        if slot == 0:
            assert after[0] == (before[0] & 0xF0) | written
        else:
            assert after[slot] == written
        assert [b for i, b in enumerate(after) if i != slot] == [
            b for i, b in enumerate(before) if i != slot
        ]

    def test_one_data_byte_setters(self) -> None:
        """Kinds with one data byte write it in place."""
        program = ProgramChange(3, 0x40)
        program.program = 0x10
        assert program.to_byte_array() == [0xC3, 0x10]
        assert program.name == "Drawbar Organ"

        pressure = ChannelAftertouch(3, 0x50)
        pressure.value = 0x20
        assert pressure.to_byte_array() == [0xD3, 0x20]

    def test_pitch_bend_setters(self) -> None:
        bend = PitchBend(0, 0x00, 0x40)
        bend.low = 0x7F
        bend.high = 0x7F
        assert bend.to_byte_array() == [0xE0, 0x7F, 0x7F]
        assert bend.bend == 8191

    def test_poly_aftertouch_setters(self) -> None:
        poly = PolyphonicAftertouch(2, 60, 0x40)
        poly.value = 0x01
        poly.note = 64
        assert poly.to_byte_array() == [0xA2, 64, 0x01]
        assert poly.name == "E4"

    def test_schema_data_byte_count(self) -> None:
        """Two-field schemas have one data byte."""
        assert NoteOn.schema.data_byte_count == 2
        assert ProgramChange.schema.data_byte_count == 1
        assert ChannelAftertouch.schema.data_byte_count == 1

    def test_schema_too_many_fields(self) -> None:
        """A schema binds at most three fields."""
        with pytest.raises(ValueError):
            MessageSchema("Too Wide", fields=("a", "b", "c", "d"))

    def test_schema_unknown_constant_field(self) -> None:
        """The constant field must be one of the fields."""
        with pytest.raises(ValueError):
            MessageSchema("Broken", fields=("channel",), constant_field="note")


class TestNames:
    """Tests for resolved constant names."""

    def test_note_name(self) -> None:
        """Notes resolve in the Note group."""
        msg = NoteOn(0, 64, 100)
        assert msg.name == "E4"
        assert msg.verbose_name == "Note On: E4"
        assert msg.const is not None
        assert msg.const.value == 64

    def test_name_refreshes(self) -> None:
        """Changing the constant field re-resolves the name."""
        msg = NoteOn(0, 64, 100)
        msg.note += 5
        assert msg.name == "A4"
        assert msg.verbose_name == "Note On: A4"

    def test_name_cleared_on_miss(self) -> None:
        """A value with no constant clears the stale name."""
        msg = NoteOn(0, 64, 100)
        msg.note = 200
        assert msg.name is None
        assert msg.verbose_name is None
        assert msg.const is None

    def test_other_fields_keep_name(self) -> None:
        """Non-constant fields leave the name alone."""
        msg = NoteOn(0, 64, 100)
        msg.velocity = 10
        assert msg.name == "E4"

    def test_control_change_name(self) -> None:
        """Controllers resolve in their own group."""
        msg = ControlChange(2, 1, 0x20)
        assert msg.name == "Modulation Wheel"
        assert msg.verbose_name == "Control Change: Modulation Wheel"

    def test_program_change_name(self) -> None:
        """Programs resolve to General MIDI names."""
        assert ProgramChange(3, 0x40).name == "Soprano Sax"

    def test_no_group(self) -> None:
        """Kinds without a constant group have no name."""
        assert ChannelAftertouch(0, 10).name is None
        assert PitchBend(0, 0, 0x40).name is None

    def test_note_name_letter(self) -> None:
        """The pitch letter of the resolved name."""
        assert NoteOn(0, 60, 100).note_name == "C"
        assert NoteOn(0, 61, 100).note_name == "C#"
        assert NoteOff(0, 200, 0).note_name is None


class TestArgumentCounts:
    """Tests for schema argument validation."""

    def test_too_few(self) -> None:
        """Missing values raise, naming the kind."""
        with pytest.raises(SchemaMismatchError, match="NoteOn"):
            NoteOn(0, 64)

    def test_too_many(self) -> None:
        """Extra values raise."""
        with pytest.raises(SchemaMismatchError):
            ProgramChange(0, 1, 2)

    def test_is_type_error(self) -> None:
        """Callers can catch the standard exception."""
        with pytest.raises(TypeError):
            PitchBend(0)


class TestEqualityAndConversion:
    """Tests for equality, repr and related conversions."""

    def test_equal(self) -> None:
        """Same kind and bytes are equal."""
        assert NoteOn(0, 60, 100) == NoteOn(0, 60, 100)

    def test_kind_matters(self) -> None:
        """Same bytes, different kind are not equal."""
        assert NoteOn(0, 60, 100) != ChannelMessage(0x9, 0x0, 60, 100)
        assert NoteOn(0, 60, 100) != NoteOff(0, 60, 100)

    def test_unhashable(self) -> None:
        """Mutable messages are unhashable."""
        with pytest.raises(TypeError):
            hash(NoteOn(0, 60, 100))

    def test_repr(self) -> None:
        """Repr shows fields and name."""
        assert repr(NoteOn(0, 60, 100)) == "NoteOn(channel=0, note=60, velocity=100, name='C4')"
        assert repr(ChannelAftertouch(1, 5)) == "ChannelAftertouch(channel=1, value=5)"

    def test_note_on_off(self) -> None:
        """Note on and off convert into each other."""
        note_off = NoteOn(2, 60, 90).to_note_off()
        assert isinstance(note_off, NoteOff)
        assert note_off.to_byte_array() == [0x82, 60, 90]
        assert note_off.to_note_on() == NoteOn(2, 60, 90)

    def test_bend(self) -> None:
        """Bend is signed around the center."""
        assert PitchBend(0, 0x00, 0x40).bend == 0
        assert PitchBend(0, 0x00, 0x00).bend == -8192
        assert PitchBend(0, 0x7F, 0x7F).bend == 8191


class TestMido:
    """Cross-check wire bytes against mido's own encoding."""

    def test_note_on(self) -> None:
        message = NoteOn(3, 60, 100).to_mido()
        expected = mido.Message("note_on", channel=3, note=60, velocity=100)
        assert message.bytes() == expected.bytes()
        assert (message.type, message.channel, message.note) == ("note_on", 3, 60)

    def test_control_change(self) -> None:
        message = ControlChange(2, 1, 0x20).to_mido()
        assert message.type == "control_change"
        assert message.control == 1
        assert message.value == 0x20

    def test_program_change(self) -> None:
        message = ProgramChange(3, 0x40).to_mido()
        assert message.type == "program_change"
        assert message.program == 0x40

    def test_pitch_bend(self) -> None:
        message = PitchBend(0, 0x00, 0x40).to_mido()
        assert message.type == "pitchwheel"
        assert message.pitch == 0

    def test_bytes_agree(self) -> None:
        """mido produces the same bytes."""
        for msg in [
            NoteOff(1, 60, 0),
            PolyphonicAftertouch(2, 60, 0x40),
            ChannelAftertouch(3, 0x50),
        ]:
            assert msg.to_mido().bytes() == msg.to_byte_array()

    def test_out_of_range_rejected(self) -> None:
        """mido refuses data bytes above 127."""
        with pytest.raises(ValueError):
            NoteOn(0, 200, 100).to_mido()


class TestSubstitutedDictionary:
    """Messages resolve against whichever registry is installed."""

    def test_names_from_small_dictionary(self, small_registry: ConstantRegistry) -> None:
        """Names come from the substituted dictionary."""
        assert NoteOn(0, 10, 100).name == "Low"
        assert ControlChange(0, 1, 0).name == "Wobble"

    def test_first_declared_name_wins(self, small_registry: ConstantRegistry) -> None:
        """Duplicate values resolve to the first declared name."""
        assert NoteOn(0, 60, 100).name == "Middle"

    def test_status_from_small_dictionary(self, small_registry: ConstantRegistry) -> None:
        """Kinds missing from the Status group cannot be built."""
        with pytest.raises(ConstantNotFoundError):
            ChannelAftertouch(0, 1)
