"""
Constants and enums for MIDI events.

No magic numbers - status bytes, paths and message texts live here.
"""

from enum import Enum, IntEnum
from pathlib import Path

# Packaged constant dictionary (group -> {name -> value})
DICTIONARY_PATH = Path(__file__).parent / "dictionary" / "midi.yaml"

# Group that maps status display names to the status nibble
STATUS_GROUP = "Status"


class StatusByte(IntEnum):
    """Full status bytes for system messages."""

    SYSEX_START = 0xF0
    SYSEX_END = 0xF7


class SysexType(IntEnum):
    """Type bytes of device-addressed system exclusive messages."""

    REQUEST = 0x11  # Data request (RQ1)
    COMMAND = 0x12  # Data set (DT1)


class MessageKind(str, Enum):
    """
    Closed set of message kinds.

    Values are the display names used to resolve status nibbles
    and constant groups from the dictionary.
    """

    CHANNEL_MESSAGE = "Channel Message"
    NOTE_OFF = "Note Off"
    NOTE_ON = "Note On"
    POLYPHONIC_AFTERTOUCH = "Polyphonic Aftertouch"
    CONTROL_CHANGE = "Control Change"
    PROGRAM_CHANGE = "Program Change"
    CHANNEL_AFTERTOUCH = "Channel Aftertouch"
    PITCH_BEND = "Pitch Bend"
    SYSTEM_EXCLUSIVE = "System Exclusive"
    SYSTEM_COMMON = "System Common"
    SYSTEM_REALTIME = "System Realtime"


# Pitch bend center (14-bit)
PITCH_BEND_CENTER = 0x2000


class ErrorMessages:
    """Standardized error messages."""

    GROUP_NOT_FOUND = "Constant group '{group}' not found."
    CONSTANT_NOT_FOUND = "Constant '{name}' not found in group '{group}'."
    STATUS_NOT_FOUND = "No status nibble for '{name}'."
    SCHEMA_MISMATCH = "{kind} takes {expected} values ({fields}), got {actual}."
    RAW_MISMATCH = "{kind} takes 3 or 4 values (status nibbles and data bytes), got {actual}."
    ODD_HEX_STRING = "Hex string must have an even length, got {length} characters."
    INVALID_HEX = "Invalid hex digits: '{text}'."
    INVALID_DICTIONARY = "Invalid constant dictionary: {reason}"
    CONTEXT_REQUIRES = "{method} requires {params}."
    UNKNOWN_FIELD = "{kind} has no field '{field}'."
    EMPTY_MESSAGE = "Cannot build a message from empty data."
    TRUNCATED_MESSAGE = "Status 0x{status:02X} ({kind}) needs {expected} data bytes, got {actual}."
    INVALID_NIBBLE = "Expected single hex characters, got {nibble!r}."
