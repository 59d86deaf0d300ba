"""
Pytest configuration and shared fixtures.
"""

import tempfile
from collections.abc import Iterator
from pathlib import Path

import pytest

from midi_events.dictionary import (
    ConstantRegistry,
    MappingConstantSource,
    set_registry,
)

SMALL_DICTIONARY = {
    "Status": {
        "Note Off": 0x8,
        "Note On": 0x9,
        "Control Change": 0xB,
        "Program Change": 0xC,
    },
    "Note": {
        "Low": 10,
        "Middle": 60,
        "Also Middle": 60,
    },
    "Control Change": {
        "Wobble": 1,
    },
}


@pytest.fixture
def temp_dir() -> Iterator[Path]:
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def packaged_registry() -> Iterator[ConstantRegistry]:
    """The default registry over the packaged YAML dictionary."""
    registry = ConstantRegistry()
    previous = set_registry(registry)
    yield registry
    set_registry(previous)


@pytest.fixture
def small_registry() -> Iterator[ConstantRegistry]:
    """A substituted default registry over a small in-memory dictionary."""
    registry = ConstantRegistry(MappingConstantSource(SMALL_DICTIONARY))
    previous = set_registry(registry)
    yield registry
    set_registry(previous)
