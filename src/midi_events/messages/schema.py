"""
Message schema - named fields bound to raw buffer slots.

Every message kind declares an ordered list of field names. Field i is
bound to slot i of the raw buffer:

    slot 0 -> status low nibble (channel, or system message id)
    slot 1 -> data byte 0
    slot 2 -> data byte 1

The buffer is the single source of truth: SchemaField reads the slot on
every access and writes straight into it.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from midi_events.messages.base import ShortMessage

MAX_FIELDS = 3


@dataclass(frozen=True)
class MessageSchema:
    """
    Declaration of a message kind's fields.

    Attributes:
        display_name: Human name, resolves the status nibble ("Note On")
        fields: Field names in slot order (1-3 of them)
        constant_group: Group the constant-carrying field resolves in,
            when it differs from display_name ("Note" for "Note On")
        constant_field: Field that symbolic names resolve into
    """

    display_name: str
    fields: tuple[str, ...] = ()
    constant_group: str | None = None
    constant_field: str | None = None

    def __post_init__(self) -> None:
        if len(self.fields) > MAX_FIELDS:
            raise ValueError(f"A schema binds at most {MAX_FIELDS} fields, got {self.fields}")
        if self.constant_field is not None and self.constant_field not in self.fields:
            raise ValueError(f"Constant field '{self.constant_field}' is not in {self.fields}")

    @property
    def data_byte_count(self) -> int:
        """Number of data bytes: one for schemas of length <= 2, else two."""
        return 1 if len(self.fields) <= 2 else 2

    @property
    def constant_index(self) -> int:
        """Argument position the constant value is inserted at."""
        if self.constant_field is None:
            return 0
        return self.fields.index(self.constant_field)

    @property
    def group_names(self) -> list[str]:
        """Constant groups to try, alias first."""
        names = [self.display_name]
        if self.constant_group:
            names.insert(0, self.constant_group)
        return names


class SchemaField:
    """
    Accessor for one schema field.

    Reading returns the buffer slot; writing stores into the slot and
    refreshes the message's derived name.
    """

    def __init__(self, slot: int, name: str):
        self.slot = slot
        self.name = name

    def __get__(self, message: ShortMessage | None, owner: type | None = None) -> Any:
        if message is None:
            return self
        return message._read_slot(self.slot)

    def __set__(self, message: ShortMessage, value: int) -> None:
        message._write_slot(self.slot, value)
        message.update()

    def __repr__(self) -> str:
        return f"SchemaField({self.slot}, {self.name!r})"
