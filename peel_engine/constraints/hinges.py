"""
Hinge Constraints Module
========================

Hinges are points the peeled layer stays attached to, modeled as
circles of frozen radius around each hinge.

Design:
- ConstraintSet: immutable ordered circles + explicit flip index
- HingeClamp: stateless clamping (static methods, state injected)
- Clamping is sequential in insertion order, so order is observable
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Optional, Sequence, Tuple

from peel_engine.geometry.numeric import normalize
from peel_engine.geometry.shapes import Circle, Point

FLIP_RAMP_START_DEGREES = 45


@dataclass(frozen=True)
class ConstraintSet:
    """
    Immutable ordered hinge constraints.

    Attributes:
        circles: Constraint circles in insertion order
        flip_index: Index of the flip constraint, None when empty

    Usage:
        constraints = ConstraintSet()
        constraints = constraints.add(Point(0, 100), corner=Point(200, 100))
        constraints.flip_constraint  # Circle(center=Point(0, 100), radius=200.0)
    """

    circles: Tuple[Circle, ...] = ()
    flip_index: Optional[int] = None

    @classmethod
    def from_circles(cls, circles: Sequence[Circle], corner: Point) -> ConstraintSet:
        """Build a set from ready-made circles, keeping their order."""
        circles = tuple(circles)
        return cls(circles, cls._closest_to_corner(circles, corner))

    def add(self, hinge: Point, corner: Point) -> ConstraintSet:
        """
        Add a hinge at a point.

        The radius is the hinge-to-corner distance at this moment and
        never changes afterwards.
        """
        radius = (corner - hinge).length
        return self.add_circle(Circle(hinge, radius), corner)

    def add_circle(self, circle: Circle, corner: Point) -> ConstraintSet:
        return ConstraintSet.from_circles(self.circles + (circle,), corner)

    def reindexed(self, corner: Point) -> ConstraintSet:
        """Same circles, flip index recomputed for another corner."""
        return ConstraintSet.from_circles(self.circles, corner)

    @staticmethod
    def _closest_to_corner(circles: Tuple[Circle, ...], corner: Point) -> Optional[int]:
        # Nearest in y; min() keeps the first of equal candidates
        if not circles:
            return None
        return min(
            range(len(circles)),
            key=lambda i: abs(corner.y - circles[i].center.y),
        )

    @property
    def flip_constraint(self) -> Optional[Circle]:
        if self.flip_index is None:
            return None
        return self.circles[self.flip_index]

    def __len__(self) -> int:
        return len(self.circles)

    def __iter__(self) -> Iterator[Circle]:
        return iter(self.circles)


class HingeClamp:
    """
    Stateless clamping of peel positions against hinge constraints.

    Design Philosophy:
    - All methods are static (no instance state)
    - Constraints, corner and center are injected
    - Returns a new position, never mutates the constraints
    """

    @staticmethod
    def clamp(
        constraints: ConstraintSet,
        position: Point,
        corner: Point,
        center: Point,
        flip_offset: float = 0.0,
    ) -> Point:
        """
        Constrain a position by every hinge, one after another.

        Args:
            constraints: Ordered constraint set
            position: Candidate peel position
            corner: Anchor corner
            center: Container center
            flip_offset: Pixels to pull the flip constraint in by (0 disables)

        Returns:
            Constrained position
        """
        for index, circle in enumerate(constraints.circles):
            if index == constraints.flip_index and flip_offset:
                offset = HingeClamp.flip_offset(circle, position, corner, center, flip_offset)
                if offset:
                    circle = circle.shrink(offset)
            position = circle.constrain_point(position)
        return position

    @staticmethod
    def flip_offset(
        circle: Circle,
        position: Point,
        corner: Point,
        center: Point,
        offset: float,
    ) -> float:
        """
        Radius reduction that keeps the fold from flipping 180 degrees.

        The position is expressed in the frame of the corner -> hinge
        vector. Inside the critical quadrant the offset ramps linearly
        from 0 at 45 degrees to the full offset at 0 degrees.

        Returns:
            Offset in pixels, 0.0 outside the critical quadrant
        """
        corner_to_center = corner - center
        corner_to_constraint = corner - circle.center
        base_angle = corner_to_constraint.angle

        local = (position - circle.center).rotate(-base_angle)

        # Corners bottom-left/top-right of the center pull the other way
        if corner_to_center.x * corner_to_center.y < 0:
            local = Point(local.x, -local.y)

        if local.x > 0 and local.y > 0:
            return normalize(local.angle, FLIP_RAMP_START_DEGREES, 0) * offset
        return 0.0
