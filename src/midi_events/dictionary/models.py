"""
Constant models - named MIDI values and the groups that hold them.

A ConstantMap pairs a human-readable name with its numeric value
("C4" -> 60). A ConstantGroup is an ordered set of them for one
category ("Note", "Control Change", "Status").

Names match case-insensitively with spaces and underscores
interchangeable: "Control Change" == "control_change".
"""

from __future__ import annotations

import re
from collections.abc import Mapping

from pydantic import BaseModel, Field

_SPACES = re.compile(r" +")


def underscore(name: object) -> str:
    """
    Normalize a name for matching.

    "Control Change" -> "control_change"
    """
    return _SPACES.sub("_", str(name).lower())


def names_match(key: object, other: object) -> bool:
    """Check if two names match (case-insensitive, spaced or underscored)."""
    return underscore(key) == underscore(other)


class ConstantMap(BaseModel):
    """
    A single named constant.

    Immutable - created once when its group is populated.
    """

    key: str = Field(..., description="Constant name (e.g. 'C4', 'Note On')")
    value: int = Field(..., description="Numeric MIDI value (e.g. 60, 0x9)")

    model_config = {"frozen": True}

    def __str__(self) -> str:
        return f"{self.key}={self.value}"


class ConstantGroup(BaseModel):
    """
    An ordered group of related constants.

    Declaration order from the dictionary is preserved; it breaks
    ties for reverse (value) lookups.
    """

    key: str = Field(..., description="Group name (e.g. 'Note')")
    constants: tuple[ConstantMap, ...] = Field(default=(), description="Constants in order")

    model_config = {"frozen": True}

    @classmethod
    def from_mapping(cls, key: str, constants: Mapping[str, int]) -> ConstantGroup:
        """Build a group from a name -> value mapping."""
        return cls(
            key=key,
            constants=tuple(
                ConstantMap(key=str(name), value=value) for name, value in constants.items()
            ),
        )

    def find(self, name: object) -> ConstantMap | None:
        """
        Find a constant by name.

        Args:
            name: Constant name, e.g. "C4" or "modulation_wheel"

        Returns:
            First matching constant, None if not found
        """
        return next((const for const in self.constants if names_match(const.key, name)), None)

    def find_by_value(self, value: int) -> ConstantMap | None:
        """
        Find a constant by its value (reverse lookup).

        Returns:
            First constant with an equal value, None if not found
        """
        return next((const for const in self.constants if const.value == value), None)

    def keys(self) -> list[str]:
        """Constant names in declaration order."""
        return [const.key for const in self.constants]
