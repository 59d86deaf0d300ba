"""
MIDI events - MIDI messages as mutable records with symbolic names.

    from midi_events import NoteOn, ControlChange, ChannelMessage

    NoteOn(0, 64, 100).to_byte_array()            # [0x90, 64, 100]
    NoteOn.find("C4").new(0, 100).name             # "C4"
    ControlChange.find("Modulation Wheel").new(0, 64)
    ChannelMessage(0x9, 0x0, 0x40, 0x40).to_type()  # NoteOn

Layers:
- conversion: hex text <-> nibbles <-> bytes
- dictionary: named constant groups loaded from YAML
- messages: schema-bound message kinds, builder, status dispatch
- context: shared channel/velocity for runs of messages
- process: field transformations
"""

from midi_events import conversion as type_conversion
from midi_events.constants import MessageKind
from midi_events.context import Context, with_context
from midi_events.dictionary import (
    ConstantGroup,
    ConstantMap,
    ConstantRegistry,
    MappingConstantSource,
    YamlConstantSource,
    get_registry,
    set_registry,
    status,
    use_source,
)
from midi_events.errors import (
    ConstantNotFoundError,
    DictionaryError,
    MalformedInputError,
    MidiEventsError,
    SchemaMismatchError,
)
from midi_events.messages import (
    ChannelAftertouch,
    ChannelMessage,
    ChannelPressure,
    Command,
    ConstantMessageBuilder,
    ControlChange,
    Controller,
    MessageSchema,
    Node,
    NoteOff,
    NoteOn,
    PitchBend,
    PolyAftertouch,
    PolyphonicAftertouch,
    PolyPressure,
    ProgramChange,
    Request,
    ShortMessage,
    StatusDispatcher,
    SystemCommon,
    SystemExclusive,
    SystemRealtime,
    message_from_bytes,
)
from midi_events.process import limit

__version__ = "0.7.0"

__all__ = [
    "__version__",
    "type_conversion",
    "MessageKind",
    # Dictionary
    "ConstantMap",
    "ConstantGroup",
    "ConstantRegistry",
    "YamlConstantSource",
    "MappingConstantSource",
    "get_registry",
    "set_registry",
    "use_source",
    "status",
    # Messages
    "ShortMessage",
    "MessageSchema",
    "ChannelMessage",
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
    "SystemCommon",
    "SystemRealtime",
    "SystemExclusive",
    "Node",
    "Command",
    "Request",
    "ConstantMessageBuilder",
    "StatusDispatcher",
    "message_from_bytes",
    # DSL and processing
    "Context",
    "with_context",
    "limit",
    # Errors
    "MidiEventsError",
    "ConstantNotFoundError",
    "SchemaMismatchError",
    "MalformedInputError",
    "DictionaryError",
]
