"""
Status dispatch - narrowing a status byte to a message kind.

Routes are tried in order; the first whose status predicate matches
claims the byte. Channel kinds match on the high nibble alone, system
kinds on the full byte. Narrowing is best effort: an unclaimed status
leaves the message as it was.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from midi_events.constants import ErrorMessages
from midi_events.conversion import byte_to_nibbles
from midi_events.errors import MalformedInputError
from midi_events.messages.base import ShortMessage
from midi_events.messages.channel import CHANNEL_KINDS, ChannelMessage
from midi_events.messages.sysex import SystemExclusive
from midi_events.messages.system import SystemCommon, SystemRealtime

logger = logging.getLogger(__name__)

# Low nibbles claimed by each system kind under status 0xF
SYSEX_IDS = (0x0,)
SYSTEM_COMMON_IDS = tuple(range(0x1, 0x7))
SYSTEM_REALTIME_IDS = tuple(range(0x8, 0x10))


@dataclass(frozen=True)
class StatusRoute:
    """
    A message kind and the status bytes it claims.

    The high nibble comes from the kind's display name in the Status
    group; ``low`` is exact, or None to accept any channel.
    """

    kind: type[ShortMessage]
    low: int | None = None

    def matches(self, status_byte: int) -> bool:
        high, low = byte_to_nibbles(status_byte)
        if self.kind.status_nibble() != high:
            return False
        return self.low is None or self.low == low


class StatusDispatcher:
    """Maps status bytes to message kinds."""

    def __init__(self, routes: Iterable[StatusRoute]):
        self.routes = tuple(routes)

    def kind_for(self, status_byte: int) -> type[ShortMessage] | None:
        """First kind whose route claims the status byte, if any."""
        for route in self.routes:
            if route.matches(status_byte):
                return route.kind
        return None

    def build(self, status_byte: int, data: Sequence[int]) -> ShortMessage | None:
        """
        Build the specific message for a status byte and its data.

        Returns:
            The message, or None if no kind claims the status
        """
        kind = self.kind_for(status_byte)
        if kind is None:
            logger.debug("No message kind for status 0x%02X", status_byte)
            return None
        return kind.from_status(status_byte, data)

    def narrow(self, message: ShortMessage) -> ShortMessage:
        """Convert a message to its specific kind, or return it unchanged."""
        narrowed = self.build(message.status_byte, message.data)
        return message if narrowed is None else narrowed


def default_routes() -> list[StatusRoute]:
    """Channel kinds, then SysEx, system common and system realtime."""
    routes = [StatusRoute(kind) for kind in CHANNEL_KINDS]
    routes += [StatusRoute(SystemExclusive, low) for low in SYSEX_IDS]
    routes += [StatusRoute(SystemCommon, low) for low in SYSTEM_COMMON_IDS]
    routes += [StatusRoute(SystemRealtime, low) for low in SYSTEM_REALTIME_IDS]
    return routes


DEFAULT_DISPATCHER = StatusDispatcher(default_routes())


def message_from_bytes(
    data: Sequence[int], dispatcher: StatusDispatcher = DEFAULT_DISPATCHER
) -> ShortMessage:
    """
    Build one message from its wire bytes.

        message_from_bytes([0x90, 0x40, 0x40])   # NoteOn(0, 0x40, 0x40)

    A status no kind claims gives a raw ChannelMessage. Data beyond a
    claimed kind's data bytes is ignored.

    Raises:
        MalformedInputError: empty data, fewer data bytes than the kind
            needs, or more than a raw channel message holds
    """
    if not data:
        raise MalformedInputError(ErrorMessages.EMPTY_MESSAGE)
    status_byte, *payload = data
    kind = dispatcher.kind_for(status_byte)
    if kind is None:
        logger.debug("No message kind for status 0x%02X, keeping it raw", status_byte)
        if len(payload) > 2:
            raise MalformedInputError(
                ErrorMessages.RAW_MISMATCH.format(kind="ChannelMessage", actual=len(payload) + 2)
            )
        kind = ChannelMessage
    required = kind.required_data_bytes()
    if len(payload) < required:
        raise MalformedInputError(
            ErrorMessages.TRUNCATED_MESSAGE.format(
                status=status_byte, kind=kind.__name__, expected=required, actual=len(payload)
            )
        )
    return kind.from_status(status_byte, payload)
