"""
Exceptions raised by midi_events.

Lookups that can legitimately miss return None; these are raised
where a caller asked for a value that must exist, or misused an API.
"""

from __future__ import annotations


class MidiEventsError(Exception):
    """Base class for all midi_events errors."""


class ConstantNotFoundError(MidiEventsError, LookupError):
    """A named constant or constant group does not exist."""

    def __init__(self, message: str, group: str | None = None, name: str | None = None):
        super().__init__(message)
        self.group = group
        self.name = name


class SchemaMismatchError(MidiEventsError, TypeError):
    """A message kind was constructed with the wrong number of values."""


class MalformedInputError(MidiEventsError, ValueError):
    """Textual MIDI data could not be decoded."""


class DictionaryError(MidiEventsError, ValueError):
    """The constant dictionary source is not a group -> {name -> int} mapping."""
