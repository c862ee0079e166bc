"""
Peel presets.

A preset is a macro: hinge constraints to add (in order) plus option
overrides.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Mapping, Tuple

from peel_engine.geometry.container import Corner


class Preset(str, Enum):
    BOOK = "book"
    CALENDAR = "calendar"


@dataclass(frozen=True)
class PresetDefinition:
    constraints: Tuple[Corner, ...]
    overrides: Mapping[str, Any] = field(default_factory=dict)


PRESETS: Dict[Preset, PresetDefinition] = {
    # Constraints apply in order
    Preset.BOOK: PresetDefinition(
        constraints=(Corner.BOTTOM_LEFT, Corner.TOP_LEFT),
        overrides={
            "back_reflection": False,
            "back_shadow_distribute": False,
            "bottom_shadow_distribute": False,
        },
    ),
    Preset.CALENDAR: PresetDefinition(
        constraints=(Corner.TOP_RIGHT, Corner.TOP_LEFT),
    ),
}


def get_preset(preset) -> PresetDefinition:
    """
    Raises:
        ValueError: If preset is not a known preset name
    """
    return PRESETS[Preset(preset)]
