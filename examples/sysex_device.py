#!/usr/bin/env python3
"""
Example: Talking to a SysEx device.

A Node identifies the device; commands and requests get the header and
checksum filled in.

Usage:
    python examples/sysex_device.py
"""

from midi_events import Node


def main() -> None:
    """Show a data set and a data request for one device."""
    synth = Node("Roland", model_id=0x42, device_id=0x10)
    print(f"Device: {synth!r}")

    # Data set: write 0x00 at address 40 7F 00
    command = synth.command([0x40, 0x7F, 0x00], 0x00)
    print(f"Command: {command.to_hex_string()} (checksum {command.checksum:#04x})")

    # Data request: ask for 4 bytes at address 40 00 00
    request = synth.request([0x40, 0x00, 0x00], 4)
    print(f"Request: {request.to_hex_string()}")


if __name__ == "__main__":
    main()
