#!/usr/bin/env python3
"""
Example: Building and inspecting short messages.

This demonstrates message kinds, symbolic names, field writes and
narrowing raw bytes back into typed messages.

Usage:
    python examples/short_messages.py
"""

from midi_events import (
    ChannelMessage,
    ControlChange,
    NoteOn,
    SystemRealtime,
    message_from_bytes,
    type_conversion,
)


def main() -> None:
    """Walk through the message API."""
    print("MIDI Events - Short Messages")
    print("=" * 40)

    # Example 1: By number and by name
    by_number = NoteOn(0, 64, 100)
    by_name = NoteOn.find("E4").new(0, 100)
    print(f"\n{by_number!r}")
    print(f"  hex: {by_number.to_hex_string()}")
    print(f"  same as by name: {by_number == by_name}")

    # Example 2: Fields write straight into the bytes
    by_number.note += 5
    print(f"\nAfter note += 5: {by_number.verbose_name}")
    print(f"  bytes: {[hex(b) for b in by_number.to_byte_array()]}")

    # Example 3: Controllers and realtime messages
    mod = ControlChange.find("Modulation Wheel").new(2, 0x20)
    stop = SystemRealtime.find("Stop").new()
    print(f"\n{mod.verbose_name}: {mod.to_hex_string()}")
    print(f"{stop.verbose_name}: {stop.to_hex_string()}")

    # Example 4: Raw bytes narrowed to a kind
    raw = ChannelMessage(0x9, 0x0, 0x40, 0x40)
    print(f"\nRaw {raw!r} -> {raw.to_type()!r}")

    for text in ["B20120", "C340", "F8"]:
        message = message_from_bytes(type_conversion.hex_string_to_bytes(text))
        print(f"  {text} -> {message!r}")


if __name__ == "__main__":
    main()
