"""
Container Geometry
==================

The rectangle being peeled, its four corners and the boxes derived from it.

Design:
- Dimensions captured once (no re-measuring)
- Corner ids are a 2-bit encoding: bit 0 -> x = width, bit 1 -> y = height
- Positions enter the engine as a single tagged type (Corner | Point)
  and are resolved here, once
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Tuple, Union

from peel_engine.geometry.shapes import LineSegment, Point


class Corner(IntEnum):
    """Corners of the container from which peeling can occur."""

    TOP_LEFT = 0x0
    TOP_RIGHT = 0x1
    BOTTOM_LEFT = 0x2
    BOTTOM_RIGHT = 0x3

    @classmethod
    def from_name(cls, name: str) -> Corner:
        """Parse "bottom_right", "BOTTOM-RIGHT", "bottom right", ..."""
        key = name.strip().upper().replace("-", "_").replace(" ", "_")
        try:
            return cls[key]
        except KeyError:
            raise ValueError(
                f"Invalid corner: {name!r}. Must be one of {[c.name.lower() for c in cls]}"
            ) from None


PeelTarget = Union[Corner, Point]
"""A position given either by corner id or by coordinates."""

Box = Tuple[LineSegment, LineSegment, LineSegment, LineSegment]
"""Four boundary segments: top, right, bottom, left."""


@dataclass(frozen=True)
class Container:
    """
    Immutable container extents.

    Attributes:
        width: Container width (pixels)
        height: Container height (pixels)

    Invariants:
        - width > 0
        - height > 0
    """

    width: float
    height: float

    def __post_init__(self):
        if self.width <= 0 or self.height <= 0:
            raise ValueError(
                f"Container dimensions must be positive, got {self.width}x{self.height}"
            )

    @property
    def center(self) -> Point:
        return Point(self.width / 2, self.height / 2)

    @property
    def area(self) -> float:
        return self.width * self.height

    def corner_point(self, corner: int) -> Point:
        """Point of a corner id (see Corner)."""
        corner = Corner(corner)
        x = self.width if corner & 1 else 0
        y = self.height if corner & 2 else 0
        return Point(x, y)

    def resolve(self, target: PeelTarget) -> Point:
        """
        Resolve a tagged position into a point.

        Raises:
            TypeError: If target is neither a Corner (or corner id) nor a Point
        """
        if isinstance(target, Point):
            return target
        if isinstance(target, int) and not isinstance(target, bool):
            return self.corner_point(target)
        raise TypeError(
            f"Position must be a Corner or a Point, got {type(target).__name__}"
        )

    def scaled_box(self, scale: float) -> Box:
        """
        Box of 4 segments at a scale of the container.

        The bottom/right edges sit at scale * size, the top/left edges at
        -(scale - 1) * size, so scale 1 is exactly the container.
        """
        br_scale = scale
        tl_scale = scale - 1

        tl = Point(-self.width * tl_scale, -self.height * tl_scale)
        tr = Point(self.width * br_scale, -self.height * tl_scale)
        br = Point(self.width * br_scale, self.height * br_scale)
        bl = Point(-self.width * tl_scale, self.height * br_scale)

        return (
            LineSegment(tl, tr),
            LineSegment(tr, br),
            LineSegment(br, bl),
            LineSegment(bl, tl),
        )

    def flip_horizontally(self, p: Point) -> Point:
        """Mirror p about the vertical center line."""
        return Point(p.x - ((p.x - self.center.x) * 2), p.y)
