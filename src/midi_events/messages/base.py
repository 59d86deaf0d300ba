"""
Short message base - the raw buffer every message kind is built on.

A message holds a status nibble pair and its data bytes. Named fields
are SchemaField accessors installed from the kind's MessageSchema when
the class is created; they read and write the buffer directly.

Derived metadata (const, name, verbose_name) is re-resolved from the
constant registry whenever a field changes.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import TYPE_CHECKING, Any, ClassVar

import mido

from midi_events.constants import ErrorMessages
from midi_events.conversion import bytes_to_hex_string
from midi_events.dictionary import ConstantGroup, ConstantMap, get_registry
from midi_events.errors import ConstantNotFoundError
from midi_events.messages.schema import MessageSchema, SchemaField

if TYPE_CHECKING:
    from midi_events.messages.builder import ConstantMessageBuilder


class ShortMessage:
    """
    Common behavior for all message kinds.

    Subclasses declare a ``schema``; its fields become attributes bound
    to the status low nibble and the data bytes.
    """

    schema: ClassVar[MessageSchema] = MessageSchema("Message")

    _status: list[int]
    _data: list[int]
    const: ConstantMap | None
    name: str | None
    verbose_name: str | None

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        schema = cls.__dict__.get("schema")
        if schema is None:
            return
        for slot, field in enumerate(schema.fields):
            if field not in cls.__dict__:
                setattr(cls, field, SchemaField(slot, field))

    def _initialize(self, status_high: int, status_low: int, data: Iterable[int]) -> None:
        """Assign the buffer and resolve derived metadata."""
        self._status = [status_high, status_low]
        self._data = list(data)
        self.const = None
        self.name = None
        self.verbose_name = None
        self.update()

    # Buffer access

    @property
    def status(self) -> list[int]:
        """Status nibbles [high, low]."""
        return self._status

    @property
    def data(self) -> list[int]:
        """Data bytes."""
        return self._data

    @property
    def status_byte(self) -> int:
        """Full status byte (high << 4 | low)."""
        return (self._status[0] << 4) | self._status[1]

    def _read_slot(self, slot: int) -> int:
        if slot == 0:
            return self._status[1]
        return self._data[slot - 1]

    def _write_slot(self, slot: int, value: int) -> None:
        if slot == 0:
            self._status[1] = value
        else:
            self._data[slot - 1] = value

    # Constants

    def update(self) -> None:
        """Re-resolve const, name and verbose_name from the current values."""
        const = self._find_constant_for_value()
        self.const = const
        self.name = const.key if const else None
        self.verbose_name = f"{self.schema.display_name}: {const.key}" if const else None

    def _constant_value(self) -> int:
        field = self.schema.constant_field
        if field is None:
            return self._status[1]
        return getattr(self, field)

    def _find_constant_for_value(self) -> ConstantMap | None:
        group = self.constant_group()
        if group is None:
            return None
        return group.find_by_value(self._constant_value())

    @classmethod
    def constant_group(cls) -> ConstantGroup | None:
        """The group this kind's symbolic names resolve in, if any."""
        registry = get_registry()
        for group_name in cls.schema.group_names:
            group = registry.find(group_name)
            if group is not None:
                return group
        return None

    @classmethod
    def get_constant(cls, name: str) -> ConstantMap | None:
        """Find a constant for this kind by name (e.g. "C4" for NoteOn)."""
        group = cls.constant_group()
        return group.find(name) if group else None

    @classmethod
    def find(cls, name: str) -> ConstantMessageBuilder | None:
        """
        Find a constant and bind it to this kind.

            NoteOn.find("C4").new(0, 100)   # note 60

        Returns:
            ConstantMessageBuilder, or None if the name is unknown
        """
        from midi_events.messages.builder import ConstantMessageBuilder

        const = cls.get_constant(str(name))
        return ConstantMessageBuilder(cls, const) if const is not None else None

    @classmethod
    def status_nibble(cls) -> int | None:
        """Status nibble for this kind, resolved by display name."""
        return get_registry().status(cls.schema.display_name)

    @classmethod
    def type_for_status(cls) -> int:
        """
        Status nibble for this kind.

        Raises:
            ConstantNotFoundError: the Status group has no entry for this kind
        """
        nibble = cls.status_nibble()
        if nibble is None:
            raise ConstantNotFoundError(
                ErrorMessages.STATUS_NOT_FOUND.format(name=cls.schema.display_name),
                name=cls.schema.display_name,
            )
        return nibble

    @classmethod
    def _insert_constant(cls, values: Sequence[int], const: ConstantMap | None) -> list[int]:
        """Insert a constant's value at the constant-carrying position."""
        values = list(values)
        if const is not None:
            values.insert(cls.schema.constant_index, const.value)
        return values

    @classmethod
    def required_data_bytes(cls) -> int:
        """Fewest data bytes that may follow this kind's status byte."""
        return 0

    @classmethod
    def from_status(cls, status_byte: int, data: Sequence[int]) -> ShortMessage:
        """
        Build this kind from its full status byte and the data bytes after it.

        Every concrete kind implements this; data beyond the kind's data
        bytes is ignored.
        """
        raise NotImplementedError(f"{cls.__name__} cannot be built from a status byte")

    # Output

    def to_byte_array(self) -> list[int]:
        """Wire bytes: [status byte, data bytes...]."""
        return [self.status_byte, *self.data]

    def to_hex_string(self) -> str:
        """Wire bytes as an uppercase hex string (e.g. "904040")."""
        return bytes_to_hex_string(self.to_byte_array())

    def to_mido(self) -> mido.Message:
        """
        Convert to a mido Message, e.g. for sending through a mido port.

        Raises:
            ValueError: a value is outside the MIDI data range
        """
        return mido.Message.from_bytes(self.to_byte_array())

    def __bytes__(self) -> bytes:
        return bytes(self.to_byte_array())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ShortMessage):
            return NotImplemented
        return type(self) is type(other) and self.to_byte_array() == other.to_byte_array()

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        if self.schema.fields:
            parts = [f"{field}={getattr(self, field)!r}" for field in self.schema.fields]
        else:
            parts = [f"status={self._status!r}", f"data={self.data!r}"]
        if self.name is not None:
            parts.append(f"name={self.name!r}")
        return f"{type(self).__name__}({', '.join(parts)})"
