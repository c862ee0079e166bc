"""
Configuration schema for the peel engine.

This module defines the options record consumed by the Peel controller:
anchor corner, shadow/reflection/fade effects, clipping box scale, flip
smoothing, presets and an optional custom clip shape. Options can be
built in code, from a dict, or from YAML.
"""

import numbers
import re
from dataclasses import dataclass, fields, replace
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

import yaml

from peel_engine.geometry.container import Corner
from peel_engine.geometry.shapes import Point
from peel_engine.presets import Preset
from peel_engine.rendering.schemas import ShapeDescriptor, ShapeKind


class PeelConfigurationError(ValueError):
    """Raised when options are invalid or contradictory."""
    pass


_ALPHA_OPTIONS = (
    "top_shadow_alpha",
    "back_reflection_alpha",
    "back_shadow_alpha",
    "bottom_shadow_dark_alpha",
    "bottom_shadow_light_alpha",
)

_SHAPE_OPTIONS = {
    "rect": ShapeKind.RECT,
    "circle": ShapeKind.CIRCLE,
    "polygon": ShapeKind.POLYGON,
    "path": ShapeKind.PATH,
}


@dataclass(frozen=True)
class PeelOptions:
    """
    Options for the peel effect.

    Immutable after construction (frozen dataclass); use with_overrides()
    to derive a changed copy. Validated at construction, before any
    geometry or clip region exists.

    At most one of rect/circle/polygon/path may be set: it is the custom
    clip shape, given as SVG attributes for that element.
    """

    corner: Union[Corner, Point] = Corner.BOTTOM_RIGHT
    fade_threshold: float = 0.0  # 0 disables fading

    top_shadow: bool = True
    top_shadow_blur: float = 5
    top_shadow_alpha: float = 0.5
    top_shadow_offset_x: float = 0
    top_shadow_offset_y: float = 1
    top_shadow_creates_shape: bool = True

    back_reflection: bool = False
    back_reflection_size: float = 0.02
    back_reflection_offset: float = 0
    back_reflection_alpha: float = 0.15
    back_reflection_distribute: bool = True

    back_shadow: bool = True
    back_shadow_size: float = 0.04
    back_shadow_offset: float = 0
    back_shadow_alpha: float = 0.1
    back_shadow_distribute: bool = True

    bottom_shadow: bool = True
    bottom_shadow_size: float = 1.5
    bottom_shadow_offset: float = 0
    bottom_shadow_dark_alpha: float = 0.7
    bottom_shadow_light_alpha: float = 0.1
    bottom_shadow_distribute: bool = True

    set_peel_on_init: bool = True
    clipping_box_scale: float = 4
    flip_constraint_offset: float = 5  # pixels, 0 disables
    drag_prevents_default: bool = True  # passed through to input wiring
    preset: Optional[Preset] = None

    # Custom clip shape (SVG attributes), at most one
    rect: Optional[Mapping[str, Any]] = None
    circle: Optional[Mapping[str, Any]] = None
    polygon: Optional[Mapping[str, Any]] = None
    path: Optional[Mapping[str, Any]] = None

    def __post_init__(self):
        """Validate options."""
        for f in fields(self):
            _check_type(f.name, f.default, getattr(self, f.name))

        shapes = [name for name in _SHAPE_OPTIONS if getattr(self, name) is not None]
        if len(shapes) > 1:
            raise PeelConfigurationError(
                f"Only one custom clip shape may be set, got {', '.join(shapes)}"
            )

        object.__setattr__(self, "corner", _parse_corner(self.corner))

        if self.preset is not None:
            try:
                object.__setattr__(self, "preset", Preset(self.preset))
            except ValueError:
                raise PeelConfigurationError(
                    f"Invalid preset: {self.preset!r}. "
                    f"Must be one of {[p.value for p in Preset]}"
                ) from None

        if not 0.0 <= self.fade_threshold < 1.0:
            raise PeelConfigurationError(
                f"fade_threshold must be in [0.0, 1.0), got {self.fade_threshold}"
            )

        if self.clipping_box_scale < 1:
            raise PeelConfigurationError(
                f"clipping_box_scale must be >= 1, got {self.clipping_box_scale}"
            )

        if self.flip_constraint_offset < 0:
            raise PeelConfigurationError(
                f"flip_constraint_offset must be >= 0, got {self.flip_constraint_offset}"
            )

        if self.top_shadow_blur < 0:
            raise PeelConfigurationError(
                f"top_shadow_blur must be >= 0, got {self.top_shadow_blur}"
            )

        for name in _ALPHA_OPTIONS:
            value = getattr(self, name)
            if not 0.0 <= value <= 1.0:
                raise PeelConfigurationError(
                    f"{name} must be in [0.0, 1.0], got {value}"
                )

    @property
    def shape(self) -> Optional[ShapeDescriptor]:
        """The custom clip shape, if one is set."""
        for name, kind in _SHAPE_OPTIONS.items():
            attributes = getattr(self, name)
            if attributes is not None:
                return ShapeDescriptor(kind, attributes)
        return None

    def with_overrides(self, **changes: Any) -> "PeelOptions":
        """
        Copy with some options changed (re-validated).

        Raises:
            PeelConfigurationError: If an option name is unknown or a
                value is invalid
        """
        changes = {option_name(key): value for key, value in changes.items()}
        unknown = set(changes) - OPTION_NAMES
        if unknown:
            raise PeelConfigurationError(f"Unknown options: {sorted(unknown)}")
        return replace(self, **changes)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "PeelOptions":
        """
        Build options from a mapping.

        Keys may be snake_case (top_shadow_alpha) or camelCase
        (topShadowAlpha).

        Raises:
            PeelConfigurationError: If a key is unknown or a value is invalid
        """
        return cls().with_overrides(**dict(data or {}))

    @classmethod
    def from_yaml(cls, yaml_path: Path) -> "PeelOptions":
        """
        Load options from a YAML file.

        Example YAML:
            corner: bottom_right      # or 3, or [200, 100]
            preset: book
            fade_threshold: 0.9
            top_shadow_alpha: 0.4
            circle:
              cx: 100
              cy: 50
              r: 45
        """
        with open(yaml_path) as f:
            data = yaml.safe_load(f)
        return cls.from_dict(data or {})

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to a YAML/JSON-compatible dict."""
        data: Dict[str, Any] = {}
        for f in fields(self):
            value = getattr(self, f.name)
            if isinstance(value, Corner):
                value = value.name.lower()
            elif isinstance(value, Point):
                value = [value.x, value.y]
            elif isinstance(value, Preset):
                value = value.value
            elif isinstance(value, Mapping):
                value = dict(value)
            data[f.name] = value
        return data


OPTION_NAMES = frozenset(f.name for f in fields(PeelOptions))


def option_name(key: str) -> str:
    """topShadowAlpha -> top_shadow_alpha (snake_case passes through)."""
    return re.sub(r"(?<!^)(?=[A-Z])", "_", key).lower()


def _parse_corner(value: Any) -> Union[Corner, Point]:
    """Corner from a Corner, corner id, name, Point or [x, y] pair."""
    try:
        if isinstance(value, Point):
            return value
        if isinstance(value, str):
            return Corner.from_name(value)
        if isinstance(value, int) and not isinstance(value, bool):
            return Corner(value)
        if isinstance(value, (list, tuple)) and len(value) == 2:
            return Point(float(value[0]), float(value[1]))
    except (TypeError, ValueError) as e:
        raise PeelConfigurationError(f"Invalid corner: {value!r} ({e})") from e
    raise PeelConfigurationError(
        f"corner must be a corner name, corner id or [x, y], got {value!r}"
    )


def _check_type(name: str, default: Any, value: Any) -> None:
    """Flag and number options must keep the kind of their default."""
    if isinstance(default, bool):
        if not isinstance(value, bool):
            raise PeelConfigurationError(f"{name} must be true or false, got {value!r}")
    elif isinstance(default, (int, float)) and not isinstance(default, Enum):
        if isinstance(value, bool) or not isinstance(value, numbers.Real):
            raise PeelConfigurationError(f"{name} must be a number, got {value!r}")
