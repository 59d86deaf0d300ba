"""
Message processing - in-place transformations of message fields.
"""

from __future__ import annotations

from typing import TypeVar

from midi_events.constants import ErrorMessages
from midi_events.messages import ShortMessage

M = TypeVar("M", bound=ShortMessage)


def limit(message: M, field: str, minimum: int, maximum: int) -> M:
    """
    Clamp a named field into [minimum, maximum].

    The field is written through its accessor, so the wire bytes and
    the resolved name follow.

        limit(NoteOn(0, 130, 100), "note", 0, 127)   # note 127

    Raises:
        AttributeError: the message kind has no such field
    """
    if field not in message.schema.fields:
        raise AttributeError(
            ErrorMessages.UNKNOWN_FIELD.format(kind=type(message).__name__, field=field)
        )
    value = getattr(message, field)
    if value < minimum:
        setattr(message, field, minimum)
    elif value > maximum:
        setattr(message, field, maximum)
    return message
