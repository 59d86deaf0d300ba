"""
Constant message builder - a message kind with a resolved constant.

Returned by a kind's find() (NoteOn.find("C4")). Calling new() with the
remaining arguments builds the message with the constant's value
already in its constant-carrying field.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from midi_events.dictionary import ConstantMap

if TYPE_CHECKING:
    from midi_events.messages.base import ShortMessage


@dataclass(frozen=True)
class ConstantMessageBuilder:
    """
    Binds a constant to a message kind.

        builder = NoteOn.find("C4")
        note = builder.new(0, 100)   # channel 0, note 60, velocity 100
    """

    kind: type[ShortMessage]
    const: ConstantMap

    def new(self, *args: Any, **options: Any) -> ShortMessage:
        """
        Build the message.

        The constant travels through the ``const`` option, so any other
        options are passed along unchanged.
        """
        options["const"] = self.const
        return self.kind(*args, **options)

    __call__ = new

    @property
    def name(self) -> str:
        return self.const.key

    @property
    def value(self) -> int:
        return self.const.value
