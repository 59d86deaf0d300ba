"""
Type conversion - hex text, nibbles and numeric bytes.

Pure functions, no state.

    hex_string_to_bytes("904040")      -> [0x90, 0x40, 0x40]
    bytes_to_hex_string([0x90, 0x40])  -> "9040"
    byte_to_nibbles(0x90)              -> (0x9, 0x0)
"""

from __future__ import annotations

import logging
import string
from collections.abc import Iterable, Sequence

from midi_events.constants import ErrorMessages
from midi_events.errors import MalformedInputError

logger = logging.getLogger(__name__)

_HEX_DIGITS = frozenset(string.hexdigits)


def _check_hex(text: str) -> None:
    if not all(char in _HEX_DIGITS for char in text):
        raise MalformedInputError(ErrorMessages.INVALID_HEX.format(text=text))


def hex_string_to_bytes(text: str) -> list[int]:
    """
    Convert a string of hex digits to numeric bytes.

    Args:
        text: Hex digits, two per byte (e.g. "904040")

    Returns:
        List of byte values

    Raises:
        MalformedInputError: odd length or non-hex characters
    """
    if len(text) % 2:
        raise MalformedInputError(ErrorMessages.ODD_HEX_STRING.format(length=len(text)))
    _check_hex(text)
    return [int(text[i : i + 2], 16) for i in range(0, len(text), 2)]


def bytes_to_hex_string(data: Iterable[int]) -> str:
    """Convert numeric bytes to an uppercase, zero-padded hex string."""
    return "".join(f"{byte:02X}" for byte in data)


def hex_string_to_hex_chars(text: str) -> list[str]:
    """Split a hex string into single-character nibbles."""
    return list(text)


def hex_chars_to_bytes(nibbles: Sequence[str]) -> list[int]:
    """
    Pair hex character nibbles into bytes.

    An odd trailing nibble has no partner and is dropped.

    Args:
        nibbles: Single hex characters (e.g. ["9", "0", "4", "0"])

    Returns:
        List of byte values (e.g. [0x90, 0x40])

    Raises:
        MalformedInputError: an element is not a single hex character
    """
    for nibble in nibbles:
        if len(nibble) != 1:
            raise MalformedInputError(ErrorMessages.INVALID_NIBBLE.format(nibble=nibble))
    if len(nibbles) % 2:
        logger.debug("Dropping unpaired trailing nibble %r", nibbles[-1])
        nibbles = nibbles[:-1]
    _check_hex("".join(nibbles))
    return [
        (int(nibbles[i], 16) << 4) + int(nibbles[i + 1], 16) for i in range(0, len(nibbles), 2)
    ]


def byte_to_nibbles(byte: int) -> tuple[int, int]:
    """Split a byte into its (high, low) nibbles."""
    return (byte & 0xF0) >> 4, byte & 0x0F


def byte_to_hex_chars(byte: int) -> list[str]:
    """Convert a byte to its two lowercase hex character nibbles."""
    return [format(nibble, "x") for nibble in byte_to_nibbles(byte)]
