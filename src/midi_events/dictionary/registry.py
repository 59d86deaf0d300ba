"""
Constant registry - every constant group, loaded once.

The registry is built lazily from a ConstantSource on first access.
Initialization is guarded so concurrent first access loads the source
exactly once; afterwards the registry is read-only and shared freely.

A process-wide default registry backs the module-level shortcuts
(find, find_constant, value, status). Substitute it with set_registry()
or use_source().
"""

from __future__ import annotations

import logging
import threading

from midi_events.constants import STATUS_GROUP, ErrorMessages
from midi_events.dictionary.loader import ConstantSource, YamlConstantSource
from midi_events.dictionary.models import ConstantGroup, ConstantMap, names_match
from midi_events.errors import ConstantNotFoundError

logger = logging.getLogger(__name__)


class ConstantRegistry:
    """
    Collection of all constant groups.

    Groups are populated from the source on first access and never
    reloaded.
    """

    def __init__(self, source: ConstantSource | None = None):
        """
        Initialize the registry.

        Args:
            source: Dictionary source (defaults to the packaged YAML)
        """
        self.source: ConstantSource = source or YamlConstantSource()
        self._groups: tuple[ConstantGroup, ...] | None = None
        self._lock = threading.Lock()

    @property
    def is_initialized(self) -> bool:
        """Whether the source has been loaded."""
        return self._groups is not None

    @property
    def groups(self) -> tuple[ConstantGroup, ...]:
        """All constant groups, in dictionary order."""
        return self._ensure_initialized()

    def find(self, group_name: object) -> ConstantGroup | None:
        """
        Find a constant group by name.

        Args:
            group_name: Group name, e.g. "Note" or "control_change"

        Returns:
            ConstantGroup if found, None otherwise
        """
        return next((g for g in self._ensure_initialized() if names_match(g.key, group_name)), None)

    def find_constant(self, group_name: object, const_name: object) -> ConstantMap | None:
        """Find a constant by group and constant name."""
        group = self.find(group_name)
        if group is None:
            return None
        return group.find(const_name)

    def value(self, group_name: object, const_name: object) -> int:
        """
        Get the value of a constant.

        Raises:
            ConstantNotFoundError: the group or the constant does not exist
        """
        group = self.find(group_name)
        if group is None:
            raise ConstantNotFoundError(
                ErrorMessages.GROUP_NOT_FOUND.format(group=group_name),
                group=str(group_name),
            )
        const = group.find(const_name)
        if const is None:
            raise ConstantNotFoundError(
                ErrorMessages.CONSTANT_NOT_FOUND.format(name=const_name, group=group.key),
                group=group.key,
                name=str(const_name),
            )
        return const.value

    def status(self, status_name: object) -> int | None:
        """
        Find a status nibble by its display name.

        "Note On" -> 0x9, "Control Change" -> 0xB
        """
        const = self.find_constant(STATUS_GROUP, status_name)
        return const.value if const else None

    def _ensure_initialized(self) -> tuple[ConstantGroup, ...]:
        """Load the source once."""
        groups = self._groups
        if groups is not None:
            return groups

        with self._lock:
            if self._groups is None:
                dictionary = self.source.load()
                self._groups = tuple(
                    ConstantGroup.from_mapping(key, constants)
                    for key, constants in dictionary.items()
                )
                logger.debug("Loaded %d constant groups from %r", len(self._groups), self.source)
            return self._groups

    def __repr__(self) -> str:
        state = "loaded" if self.is_initialized else "pending"
        return f"ConstantRegistry({self.source!r}, {state})"


_default_registry: ConstantRegistry | None = None
_default_lock = threading.Lock()


def get_registry() -> ConstantRegistry:
    """Get the process-wide registry, creating it on first use."""
    global _default_registry
    registry = _default_registry
    if registry is not None:
        return registry

    with _default_lock:
        if _default_registry is None:
            _default_registry = ConstantRegistry()
        return _default_registry


def set_registry(registry: ConstantRegistry | None) -> ConstantRegistry | None:
    """
    Install a process-wide registry.

    Passing None makes the next get_registry() build a fresh default.

    Returns:
        The previously installed registry
    """
    global _default_registry
    with _default_lock:
        previous = _default_registry
        _default_registry = registry
    return previous


def use_source(source: ConstantSource) -> ConstantRegistry:
    """Install a fresh process-wide registry over the given source."""
    registry = ConstantRegistry(source)
    set_registry(registry)
    return registry


def find(group_name: object) -> ConstantGroup | None:
    """Find a constant group in the default registry."""
    return get_registry().find(group_name)


def find_constant(group_name: object, const_name: object) -> ConstantMap | None:
    """Find a constant in the default registry."""
    return get_registry().find_constant(group_name, const_name)


def value(group_name: object, const_name: object) -> int:
    """Get a constant value from the default registry."""
    return get_registry().value(group_name, const_name)


def status(status_name: object) -> int | None:
    """Find a status nibble by name in the default registry."""
    return get_registry().status(status_name)
