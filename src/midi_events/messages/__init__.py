"""
MIDI message kinds.

- ChannelMessage: raw channel message, and the base of the specific kinds
- NoteOff, NoteOn, PolyphonicAftertouch, ControlChange, ProgramChange,
  ChannelAftertouch, PitchBend: channel messages with named fields
- SystemCommon, SystemRealtime: 0xF status messages
- SystemExclusive, Node, Command, Request: SysEx messages
- ConstantMessageBuilder: a kind bound to a named constant
- StatusDispatcher: status byte -> message kind
"""

from midi_events.messages.base import ShortMessage
from midi_events.messages.builder import ConstantMessageBuilder
from midi_events.messages.channel import (
    CHANNEL_KINDS,
    ChannelAftertouch,
    ChannelMessage,
    ChannelPressure,
    ControlChange,
    Controller,
    NoteMessage,
    NoteOff,
    NoteOn,
    PitchBend,
    PolyAftertouch,
    PolyphonicAftertouch,
    PolyPressure,
    ProgramChange,
)
from midi_events.messages.dispatch import (
    DEFAULT_DISPATCHER,
    StatusDispatcher,
    StatusRoute,
    default_routes,
    message_from_bytes,
)
from midi_events.messages.schema import MessageSchema, SchemaField
from midi_events.messages.sysex import Command, Node, Request, SystemExclusive, checksum
from midi_events.messages.system import SystemCommon, SystemRealtime

__all__ = [
    # Schema
    "MessageSchema",
    "SchemaField",
    "ShortMessage",
    # Channel
    "ChannelMessage",
    "NoteMessage",
    "NoteOff",
    "NoteOn",
    "PolyphonicAftertouch",
    "PolyAftertouch",
    "PolyPressure",
    "ControlChange",
    "Controller",
    "ProgramChange",
    "ChannelAftertouch",
    "ChannelPressure",
    "PitchBend",
    "CHANNEL_KINDS",
    # System
    "SystemCommon",
    "SystemRealtime",
    "SystemExclusive",
    "Node",
    "Command",
    "Request",
    "checksum",
    # Construction
    "ConstantMessageBuilder",
    "StatusDispatcher",
    "StatusRoute",
    "DEFAULT_DISPATCHER",
    "default_routes",
    "message_from_bytes",
]
