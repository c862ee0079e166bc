"""
Renderer Schemas
================

Bounded Context: Values handed to a rendering surface.

The engine never touches a renderer. It emits these immutable
descriptors, and a renderer (DOM, SVG, canvas, ...) applies them.

Design Principles:
- Immutability: frozen=True prevents accidental mutation
- Every number is rounded to 2 decimals at construction
- to_dict() for JSON export, to_css() for CSS/SVG attribute strings

Types:
- ShapeKind / ShapeDescriptor: optional custom clip shape
- ColorStop: one gradient stop
- GradientDescriptor: rotated linear gradient (empty = clear gradient)
- ShadowDescriptor: box-shadow or drop-shadow filter
- TransformDescriptor: translate + rotate
- ClipOutline: polygon clip region points
- PeelFrame: everything produced by one position update
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Sequence, Tuple

from peel_engine.geometry.numeric import clamp, format_number, round_value
from peel_engine.geometry.shapes import Point


class ShapeKind(str, Enum):
    """SVG element types allowed as a custom clip shape."""

    RECT = "rect"
    CIRCLE = "circle"
    POLYGON = "polygon"
    PATH = "path"


@dataclass(frozen=True)
class ShapeDescriptor:
    """
    Custom clip shape passed through to the renderer unmodified.

    Attributes:
        kind: SVG element type
        attributes: SVG attributes for the element (e.g. {"cx": 50, "r": 40})
    """

    kind: ShapeKind
    attributes: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        object.__setattr__(self, "kind", ShapeKind(self.kind))
        object.__setattr__(self, "attributes", MappingProxyType(dict(self.attributes)))

    def to_dict(self) -> Dict[str, Any]:
        return {"type": self.kind.value, "attributes": dict(self.attributes)}


@dataclass(frozen=True)
class ColorStop:
    """
    One gradient color stop.

    Attributes:
        red, green, blue: 0-255 channels
        alpha: Opacity, clamped to [0, 1]
        position: Percent along the gradient (not clamped)

    Example:
        >>> ColorStop.black(0.5, 0.25).to_css()
        'rgba(0,0,0,0.5) 25%'
    """

    red: int
    green: int
    blue: int
    alpha: float
    position: float

    @classmethod
    def create(cls, red: int, green: int, blue: int, alpha: float, position: float) -> ColorStop:
        """Build a stop from an unclamped alpha and a 0-1 position."""
        return cls(
            red=red,
            green=green,
            blue=blue,
            alpha=round_value(clamp(alpha)),
            position=round_value(position * 100),
        )

    @classmethod
    def black(cls, alpha: float, position: float) -> ColorStop:
        return cls.create(0, 0, 0, alpha, position)

    @classmethod
    def white(cls, alpha: float, position: float) -> ColorStop:
        return cls.create(255, 255, 255, alpha, position)

    def to_css(self) -> str:
        return (
            f"rgba({self.red},{self.green},{self.blue},{format_number(self.alpha)}) "
            f"{format_number(self.position)}%"
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "color": [self.red, self.green, self.blue],
            "alpha": self.alpha,
            "position": self.position,
        }


@dataclass(frozen=True)
class GradientDescriptor:
    """
    Linear gradient at a rotation.

    An empty stop list means "no gradient": the renderer should clear
    any gradient it applied before.
    """

    rotation: float
    stops: Tuple[ColorStop, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "rotation", round_value(self.rotation))
        object.__setattr__(self, "stops", tuple(self.stops))

    @property
    def is_empty(self) -> bool:
        return len(self.stops) == 0

    def to_css(self) -> str:
        if self.is_empty:
            return "none"
        stops = ",".join(stop.to_css() for stop in self.stops)
        return f"linear-gradient({format_number(self.rotation)}deg,{stops})"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "rotation": self.rotation,
            "stops": [stop.to_dict() for stop in self.stops],
        }


class ShadowKind(str, Enum):
    """How the top shadow is rendered."""

    BOX = "box"    # box-shadow, no custom shape
    DROP = "drop"  # drop-shadow filter following a custom shape


@dataclass(frozen=True)
class ShadowDescriptor:
    """
    Black shadow cast by the peeled layer.

    Attributes:
        kind: BOX or DROP
        offset_x, offset_y: Shadow offset (pixels)
        blur: Blur radius (pixels)
        alpha: Shadow opacity
        spread: Spread (pixels), box shadows only
    """

    kind: ShadowKind
    offset_x: float
    offset_y: float
    blur: float
    alpha: float
    spread: Optional[float] = None

    def __post_init__(self):
        for name in ("offset_x", "offset_y", "blur", "alpha"):
            object.__setattr__(self, name, round_value(getattr(self, name)))
        if self.kind == ShadowKind.BOX and self.spread is None:
            object.__setattr__(self, "spread", 0.0)
        if self.spread is not None:
            object.__setattr__(self, "spread", round_value(self.spread))

    def to_css(self) -> str:
        """
        CSS value: box-shadow for BOX, filter for DROP.

        A zero spread is omitted.
        """
        parts = [
            f"{format_number(self.offset_x)}px",
            f"{format_number(self.offset_y)}px",
            f"{format_number(self.blur)}px",
        ]
        if self.kind == ShadowKind.BOX and self.spread:
            parts.append(f"{format_number(self.spread)}px")
        parts.append(f"rgba(0,0,0,{format_number(self.alpha)})")
        shadow = " ".join(parts)
        if self.kind == ShadowKind.DROP:
            return f"drop-shadow({shadow})"
        return shadow

    def to_dict(self) -> Dict[str, Any]:
        data = {
            "kind": self.kind.value,
            "offset_x": self.offset_x,
            "offset_y": self.offset_y,
            "blur": self.blur,
            "alpha": self.alpha,
        }
        if self.kind == ShadowKind.BOX:
            data["spread"] = self.spread
        return data


@dataclass(frozen=True)
class TransformDescriptor:
    """Translate then rotate, shared by the back layer and the top shadow."""

    translate_x: float
    translate_y: float
    rotate: float

    def __post_init__(self):
        for name in ("translate_x", "translate_y", "rotate"):
            object.__setattr__(self, name, round_value(getattr(self, name)))

    def to_css(self) -> str:
        return (
            f"translate({format_number(self.translate_x)}px, "
            f"{format_number(self.translate_y)}px) "
            f"rotate({format_number(self.rotate)}deg)"
        )

    def to_dict(self) -> Dict[str, float]:
        return {
            "translate_x": self.translate_x,
            "translate_y": self.translate_y,
            "rotate": self.rotate,
        }


@dataclass(frozen=True)
class ClipOutline:
    """
    Polygon points for a named clip region.

    Attributes:
        region_id: Clip region name (see ClipRegistry)
        points: Rounded (x, y) vertices in order
    """

    region_id: str
    points: Tuple[Tuple[float, float], ...]

    @classmethod
    def from_points(cls, region_id: str, points: Sequence[Point]) -> ClipOutline:
        return cls(
            region_id=region_id,
            points=tuple((round_value(p.x), round_value(p.y)) for p in points),
        )

    def to_svg_points(self) -> str:
        """SVG "points" attribute, e.g. "0,0 200,0 200,100"."""
        return " ".join(f"{format_number(x)},{format_number(y)}" for x, y in self.points)

    def to_dict(self) -> Dict[str, Any]:
        return {"region_id": self.region_id, "points": [list(p) for p in self.points]}

    def __len__(self) -> int:
        return len(self.points)


@dataclass(frozen=True)
class PeelFrame:
    """
    Complete renderer bundle for one position update.

    Attributes:
        front_clip: Outline of the still-flat top layer
        back_clip: Outline of the peeled back layer (mirrored)
        back_transform: Transform of the back layer and top shadow
        top_shadow: Shadow under the peeled part, None if disabled
        back_reflection: Reflection gradient on the back layer
        back_shadow: Shadow gradient on the back layer
        bottom_shadow: Shadow gradient on the bottom layer
        opacity: Fade applied to top/back/bottom-shadow, None if fade disabled
        peel_line_distance: Fold progress along the facing diagonal
        fold_rotation: Rotation of the fold line (degrees)
    """

    front_clip: ClipOutline
    back_clip: ClipOutline
    back_transform: TransformDescriptor
    top_shadow: Optional[ShadowDescriptor]
    back_reflection: GradientDescriptor
    back_shadow: GradientDescriptor
    bottom_shadow: GradientDescriptor
    opacity: Optional[float]
    peel_line_distance: float
    fold_rotation: float

    def __post_init__(self):
        object.__setattr__(self, "peel_line_distance", round_value(self.peel_line_distance))
        object.__setattr__(self, "fold_rotation", round_value(self.fold_rotation))
        if self.opacity is not None:
            object.__setattr__(self, "opacity", round_value(self.opacity))

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to JSON-compatible dict."""
        return {
            "front_clip": self.front_clip.to_dict(),
            "back_clip": self.back_clip.to_dict(),
            "back_transform": self.back_transform.to_dict(),
            "top_shadow": self.top_shadow.to_dict() if self.top_shadow else None,
            "back_reflection": self.back_reflection.to_dict(),
            "back_shadow": self.back_shadow.to_dict(),
            "bottom_shadow": self.bottom_shadow.to_dict(),
            "opacity": self.opacity,
            "peel_line_distance": self.peel_line_distance,
            "fold_rotation": self.fold_rotation,
        }
