"""
Dictionary sources - where constant groups come from.

A source yields group name -> {constant name -> value}. The packaged
YAML dictionary is the default; tests and callers can substitute an
in-memory mapping or another file.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Protocol

import yaml
from pydantic import TypeAdapter, ValidationError

from midi_events.constants import DICTIONARY_PATH, ErrorMessages
from midi_events.errors import DictionaryError

logger = logging.getLogger(__name__)

Dictionary = dict[str, dict[str, int]]

_dictionary_adapter: TypeAdapter[Dictionary] = TypeAdapter(Dictionary)


class ConstantSource(Protocol):
    """Anything that can load a constant dictionary."""

    def load(self) -> Mapping[str, Mapping[str, int]]:
        """Return group name -> {constant name -> value}."""
        ...


def validate_dictionary(data: object) -> Dictionary:
    """
    Validate raw dictionary data.

    Raises:
        DictionaryError: data is not a group -> {name -> int} mapping
    """
    try:
        return _dictionary_adapter.validate_python(data)
    except ValidationError as e:
        raise DictionaryError(ErrorMessages.INVALID_DICTIONARY.format(reason=e)) from e


class YamlConstantSource:
    """Loads the constant dictionary from a YAML file."""

    def __init__(self, path: Path | None = None):
        """
        Args:
            path: YAML file to load (defaults to the packaged midi.yaml)
        """
        self.path = path or DICTIONARY_PATH

    def load(self) -> Dictionary:
        """Read and validate the YAML file."""
        logger.debug("Loading constant dictionary from %s", self.path)
        with open(self.path) as f:
            data = yaml.safe_load(f)
        return validate_dictionary(data)

    def __repr__(self) -> str:
        return f"YamlConstantSource({str(self.path)!r})"


class MappingConstantSource:
    """Serves a constant dictionary that is already in memory."""

    def __init__(self, data: Mapping[str, Mapping[str, int]]):
        self.data = validate_dictionary(data)

    def load(self) -> Dictionary:
        return self.data
