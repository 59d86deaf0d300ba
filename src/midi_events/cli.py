#!/usr/bin/env python3
"""
Command line entry point for midi-events.

Inspect the constant dictionary and decode single messages:

    midi-events groups
    midi-events lookup Note C4
    midi-events describe 904040
"""

from __future__ import annotations

import argparse
import json
import logging
from typing import Any

from midi_events.conversion import hex_string_to_bytes
from midi_events.dictionary import get_registry
from midi_events.errors import MidiEventsError
from midi_events.messages import ShortMessage, message_from_bytes

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def describe_message(message: ShortMessage) -> dict[str, Any]:
    """Summarize a message as JSON-ready data."""
    return {
        "kind": type(message).__name__,
        "fields": {field: getattr(message, field) for field in message.schema.fields},
        "name": message.name,
        "verbose_name": message.verbose_name,
        "bytes": message.to_byte_array(),
        "hex": message.to_hex_string(),
    }


def _groups() -> dict[str, Any]:
    groups = get_registry().groups
    return {
        "status": "success",
        "groups": [{"name": g.key, "count": len(g.constants)} for g in groups],
        "count": len(groups),
    }


def _lookup(group: str, name: str) -> dict[str, Any]:
    registry = get_registry()
    value = registry.value(group, name)
    const = registry.find_constant(group, name)
    return {
        "status": "success",
        "group": group,
        "name": const.key if const else name,
        "value": value,
    }


def _describe(text: str) -> dict[str, Any]:
    message = message_from_bytes(hex_string_to_bytes(text))
    return {"status": "success", **describe_message(message)}


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(description="MIDI events constant and message inspector")
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )
    commands = parser.add_subparsers(dest="command", required=True)
    commands.add_parser("groups", help="List constant groups")
    lookup = commands.add_parser("lookup", help="Look up a constant value")
    lookup.add_argument("group", help="Group name (e.g. Note)")
    lookup.add_argument("name", help="Constant name (e.g. C4)")
    describe = commands.add_parser("describe", help="Decode one message from hex")
    describe.add_argument("hex", help="Message bytes as hex (e.g. 904040)")

    args = parser.parse_args(argv)

    if args.debug:
        logging.getLogger().setLevel(logging.DEBUG)

    try:
        if args.command == "groups":
            result = _groups()
        elif args.command == "lookup":
            result = _lookup(args.group, args.name)
        else:
            result = _describe(args.hex)
    except MidiEventsError as e:
        logger.exception("Failed to run %s", args.command)
        print(json.dumps({"status": "error", "message": str(e)}))
        return 1

    print(json.dumps(result))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
