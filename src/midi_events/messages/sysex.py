"""
System exclusive messages.

Raw SysEx wraps arbitrary data between F0 and F7. Device-addressed
messages go through a Node that identifies the device:

    synth = Node("Roland", model_id=0x42, device_id=0x10)
    synth.command([0x40, 0x7F, 0x00], 0x00).to_hex_string()
    # "F041104212407F000041F7" (checksum 0x41 before F7)
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from midi_events.constants import MessageKind, StatusByte, SysexType
from midi_events.dictionary import value as constant_value
from midi_events.messages.base import ShortMessage
from midi_events.messages.schema import MessageSchema

MANUFACTURER_GROUP = "Manufacturer"


def _as_list(data: int | Iterable[int]) -> list[int]:
    if isinstance(data, int):
        return [data]
    return list(data)


def checksum(values: Iterable[int]) -> int:
    """Roland-style checksum: the 7-bit value that brings the sum to 0 mod 128."""
    return (128 - sum(values) % 128) % 128


class SystemExclusive(ShortMessage):
    """A raw SysEx message: F0, data bytes, F7."""

    schema = MessageSchema(MessageKind.SYSTEM_EXCLUSIVE.value)

    def __init__(self, data: Iterable[int] = (), node: Node | None = None):
        """
        Args:
            data: Bytes between the F0 and F7 markers
            node: Device the message belongs to, if any
        """
        self.node = node
        high, low = divmod(StatusByte.SYSEX_START, 0x10)
        self._initialize(high, low, data)

    @classmethod
    def from_status(cls, status_byte: int, data: Sequence[int]) -> SystemExclusive:
        payload = list(data)
        if payload and payload[-1] == StatusByte.SYSEX_END:
            payload.pop()
        return cls(payload)

    def to_byte_array(self) -> list[int]:
        return [*super().to_byte_array(), int(StatusByte.SYSEX_END)]


class _DeviceMessage(SystemExclusive):
    """SysEx addressed to a node: header, type byte, address, payload, checksum."""

    type_byte: SysexType

    def __init__(
        self,
        address: Iterable[int],
        payload: int | Iterable[int],
        node: Node | None = None,
    ):
        self.address = list(address)
        self._payload = _as_list(payload)
        super().__init__(node=node)

    @property
    def checksum(self) -> int:
        return checksum([*self.address, *self._payload])

    @property
    def data(self) -> list[int]:
        header = self.node.to_byte_array() if self.node else []
        return [*header, int(self.type_byte), *self.address, *self._payload, self.checksum]


class Command(_DeviceMessage):
    """Data set: write ``data`` at ``address`` on the device."""

    type_byte = SysexType.COMMAND

    def __init__(self, address: Iterable[int], data: int | Iterable[int], node: Node | None = None):
        super().__init__(address, data, node=node)

    @property
    def value(self) -> list[int]:
        """The data being written."""
        return self._payload

    @value.setter
    def value(self, data: int | Iterable[int]) -> None:
        self._payload = _as_list(data)


class Request(_DeviceMessage):
    """Data request: ask the device for ``size`` bytes at ``address``."""

    type_byte = SysexType.REQUEST

    def __init__(self, address: Iterable[int], size: int | Iterable[int], node: Node | None = None):
        super().__init__(address, self._size_bytes(size), node=node)

    @staticmethod
    def _size_bytes(size: int | Iterable[int]) -> list[int]:
        """A size as three 7-bit bytes, most significant first."""
        if isinstance(size, int):
            return [(size >> 14) & 0x7F, (size >> 7) & 0x7F, size & 0x7F]
        values = list(size)
        return [0] * (3 - len(values)) + values

    @property
    def size(self) -> list[int]:
        return self._payload


class Node:
    """
    A SysEx device: manufacturer, and optionally model and device ids.

    The manufacturer may be an id or a name from the "Manufacturer"
    constant group.
    """

    def __init__(
        self,
        manufacturer: int | str,
        model_id: int | None = None,
        device_id: int | None = None,
    ):
        """
        Raises:
            ConstantNotFoundError: unknown manufacturer name
        """
        if isinstance(manufacturer, str):
            manufacturer = constant_value(MANUFACTURER_GROUP, manufacturer)
        self.manufacturer_id = manufacturer
        self.model_id = model_id
        self.device_id = device_id

    def to_byte_array(self) -> list[int]:
        """Header bytes: manufacturer, device id, model id (when set)."""
        return [b for b in (self.manufacturer_id, self.device_id, self.model_id) if b is not None]

    def command(self, address: Iterable[int], data: int | Iterable[int]) -> Command:
        """A data set message for this node."""
        return Command(address, data, node=self)

    def request(self, address: Iterable[int], size: int | Iterable[int]) -> Request:
        """A data request message for this node."""
        return Request(address, size, node=self)

    def message(self, data: Iterable[int]) -> SystemExclusive:
        """A raw SysEx message prefixed with this node's header."""
        return SystemExclusive([*self.to_byte_array(), *data], node=self)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Node):
            return NotImplemented
        return self.to_byte_array() == other.to_byte_array()

    def __hash__(self) -> int:
        return hash(tuple(self.to_byte_array()))

    def __repr__(self) -> str:
        return (
            f"Node(manufacturer_id={self.manufacturer_id:#04x}, "
            f"model_id={self.model_id!r}, device_id={self.device_id!r})"
        )
