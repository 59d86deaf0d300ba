#!/usr/bin/env python3
"""
Example: Write a short melody to a MIDI file.

Messages are built in a shared context, clamped into a playable range
and handed to mido for the file export.

Usage:
    python examples/write_melody.py
    # Creates: examples/output/melody.mid
"""

from pathlib import Path

import mido

from midi_events import limit, with_context

TICKS_PER_BEAT = 480

# (note, beats)
MELODY = [("E4", 1), ("D4", 1), ("C4", 1), ("D4", 1), ("E4", 1), ("E4", 1), ("E4", 2)]


def build_track() -> mido.MidiTrack:
    """Build one track: a program change, then the melody."""
    track = mido.MidiTrack()

    with with_context(channel=0, velocity=96) as ctx:
        ctx.program_change("Electric Piano 1")
        ctx.control_change("Channel Volume", 110)
        track.extend(message.to_mido() for message in ctx.messages)

        for name, beats in MELODY:
            note_on = limit(ctx.note_on(name), "note", 48, 84)
            note_off = note_on.to_note_off()
            track.append(note_on.to_mido())
            track.append(note_off.to_mido().copy(time=beats * TICKS_PER_BEAT))

    return track


def main() -> None:
    """Generate the melody file."""
    output_dir = Path(__file__).parent / "output"
    output_dir.mkdir(exist_ok=True)

    mid = mido.MidiFile(ticks_per_beat=TICKS_PER_BEAT)
    mid.tracks.append(build_track())

    path = output_dir / "melody.mid"
    mid.save(str(path))
    print(f"Created: {path}")


if __name__ == "__main__":
    main()
