"""
Context - build messages that share channel and velocity.

    with with_context(channel=0, velocity=100) as ctx:
        ctx.note_on("E4")
        ctx.note_on("C4", velocity=127)    # override
        ctx.control_change("Portamento", 64)

    ctx.messages   # everything built above, in order

Notes, controllers and programs may be given by number or by name.
"""

from __future__ import annotations

from typing import Any

from midi_events.constants import ErrorMessages
from midi_events.errors import ConstantNotFoundError
from midi_events.messages import (
    ChannelAftertouch,
    ControlChange,
    NoteOff,
    NoteOn,
    PitchBend,
    PolyphonicAftertouch,
    ProgramChange,
    ShortMessage,
)


def _require(method: str, **params: int | None) -> None:
    missing = [name for name, param in params.items() if param is None]
    if missing:
        raise ValueError(
            ErrorMessages.CONTEXT_REQUIRES.format(method=method, params=" and ".join(missing))
        )


class Context:
    """
    Shared parameters for a run of messages.

    Keyword arguments to each method override the context values.
    """

    def __init__(self, channel: int | None = None, velocity: int | None = None):
        """
        Args:
            channel: MIDI channel (0-15)
            velocity: Note velocity (0-127)
        """
        self.channel = channel
        self.velocity = velocity
        self.messages: list[ShortMessage] = []

    def __enter__(self) -> Context:
        return self

    def __exit__(self, *exc_info: Any) -> None:
        return None

    def _build(self, kind: type[ShortMessage], symbol: int | str, *values: int) -> Any:
        """Build ``kind``, resolving ``symbol`` by name when it is a string."""
        if isinstance(symbol, str):
            builder = kind.find(symbol)
            if builder is None:
                group = kind.constant_group()
                raise ConstantNotFoundError(
                    ErrorMessages.CONSTANT_NOT_FOUND.format(
                        name=symbol, group=group.key if group else kind.schema.display_name
                    ),
                    group=group.key if group else None,
                    name=symbol,
                )
            message = builder.new(*values)
        else:
            index = kind.schema.constant_index
            message = kind(*values[:index], symbol, *values[index:])
        self.messages.append(message)
        return message

    def note_on(
        self, note: int | str, channel: int | None = None, velocity: int | None = None
    ) -> NoteOn:
        """A note on message."""
        channel = self.channel if channel is None else channel
        velocity = self.velocity if velocity is None else velocity
        _require("note_on", channel=channel, velocity=velocity)
        return self._build(NoteOn, note, channel, velocity)

    def note_off(
        self, note: int | str, channel: int | None = None, velocity: int | None = None
    ) -> NoteOff:
        """A note off message."""
        channel = self.channel if channel is None else channel
        velocity = self.velocity if velocity is None else velocity
        _require("note_off", channel=channel, velocity=velocity)
        return self._build(NoteOff, note, channel, velocity)

    def program_change(self, program: int | str, channel: int | None = None) -> ProgramChange:
        """A program change message."""
        channel = self.channel if channel is None else channel
        _require("program_change", channel=channel)
        return self._build(ProgramChange, program, channel)

    def control_change(
        self, index: int | str, value: int, channel: int | None = None
    ) -> ControlChange:
        """A control change message."""
        channel = self.channel if channel is None else channel
        _require("control_change", channel=channel)
        return self._build(ControlChange, index, channel, value)

    def polyphonic_aftertouch(
        self, note: int | str, value: int, channel: int | None = None
    ) -> PolyphonicAftertouch:
        """A per-note pressure message."""
        channel = self.channel if channel is None else channel
        _require("polyphonic_aftertouch", channel=channel)
        return self._build(PolyphonicAftertouch, note, channel, value)

    def channel_aftertouch(self, value: int, channel: int | None = None) -> ChannelAftertouch:
        """A channel pressure message."""
        channel = self.channel if channel is None else channel
        _require("channel_aftertouch", channel=channel)
        message = ChannelAftertouch(channel, value)
        self.messages.append(message)
        return message

    def pitch_bend(self, low: int, high: int, channel: int | None = None) -> PitchBend:
        """A pitch bend message."""
        channel = self.channel if channel is None else channel
        _require("pitch_bend", channel=channel)
        message = PitchBend(channel, low, high)
        self.messages.append(message)
        return message

    # Aliases
    controller = control_change
    poly_aftertouch = polyphonic_aftertouch
    poly_pressure = polyphonic_aftertouch
    channel_pressure = channel_aftertouch


def with_context(channel: int | None = None, velocity: int | None = None) -> Context:
    """Shortcut for Context(...), for use in a with statement."""
    return Context(channel=channel, velocity=velocity)
