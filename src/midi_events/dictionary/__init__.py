"""
Constant dictionary - symbolic names for MIDI values.

Groups of name -> value constants ("Note", "Control Change", "Status",
...) loaded once from YAML:

    find_constant("Note", "C4").value   # 60
    value("Control Change", "Modulation Wheel")  # 1
    status("Note On")   # 0x9
"""

from midi_events.dictionary.loader import (
    ConstantSource,
    MappingConstantSource,
    YamlConstantSource,
    validate_dictionary,
)
from midi_events.dictionary.models import ConstantGroup, ConstantMap, names_match, underscore
from midi_events.dictionary.registry import (
    ConstantRegistry,
    find,
    find_constant,
    get_registry,
    set_registry,
    status,
    use_source,
    value,
)

__all__ = [
    # Models
    "ConstantMap",
    "ConstantGroup",
    "names_match",
    "underscore",
    # Sources
    "ConstantSource",
    "YamlConstantSource",
    "MappingConstantSource",
    "validate_dictionary",
    # Registry
    "ConstantRegistry",
    "get_registry",
    "set_registry",
    "use_source",
    "find",
    "find_constant",
    "value",
    "status",
]
