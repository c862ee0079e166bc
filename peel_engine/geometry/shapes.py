"""
Geometric Shapes Module
========================

Pure geometric representations - NO state, NO side effects.

Design:
- Immutable shapes (frozen dataclass pattern)
- Screen coordinates: x grows right, y grows down
- Angles in degrees, normalized to [0, 360)
- Cross-product for line side calculation
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Iterator, Optional, Sequence, Tuple

import numpy as np

EPSILON = 1e-6
DEGREES_IN_RADIANS = 180 / math.pi


def deg_to_rad(deg: float) -> float:
    return deg / DEGREES_IN_RADIANS


def rad_to_deg(rad: float) -> float:
    """Convert radians to degrees, shifting negative results into [0, 360)."""
    deg = rad * DEGREES_IN_RADIANS
    while deg < 0:
        deg += 360
    return deg


@dataclass(frozen=True)
class Point:
    """
    Immutable 2D point, also used as a 2D vector.

    Attributes:
        x: Horizontal coordinate (pixels)
        y: Vertical coordinate (pixels, growing down)

    Example:
        >>> Point(3, 4).length
        5.0
        >>> Point(1, 0).rotate(90)
        Point(x=6.123233995736766e-17, y=1.0)
    """

    x: float
    y: float

    @classmethod
    def from_polar(cls, degrees: float, length: float) -> Point:
        """Create a vector from a rotation in degrees and a length."""
        rad = deg_to_rad(degrees)
        return cls(math.cos(rad) * length, math.sin(rad) * length)

    def __add__(self, other: Point) -> Point:
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Point) -> Point:
        return Point(self.x - other.x, self.y - other.y)

    def __mul__(self, n: float) -> Point:
        return Point(self.x * n, self.y * n)

    def scale(self, n: float) -> Point:
        return self * n

    @property
    def length(self) -> float:
        return math.sqrt(self.x ** 2 + self.y ** 2)

    @property
    def angle(self) -> float:
        """
        Angle of the vector in degrees, in [0, 360).

        The zero vector has angle 0 (atan2(0, 0) == 0).
        """
        return rad_to_deg(math.atan2(self.y, self.x))

    def set_angle(self, deg: float) -> Point:
        """Return a vector of the same length pointing at deg."""
        return Point.from_polar(deg, self.length)

    def rotate(self, deg: float) -> Point:
        """
        Rotate by deg degrees.

        Rebuilt from (angle, length) rather than a rotation matrix, so
        the zero vector stays the zero vector.
        """
        return self.set_angle(self.angle + deg)

    def to_tuple(self) -> Tuple[float, float]:
        return (self.x, self.y)

    def to_array(self) -> np.ndarray:
        return np.array([self.x, self.y], dtype=np.float64)


@dataclass(frozen=True)
class LineSegment:
    """
    Immutable line segment between two points.

    The direction vector (p2 - p1) is computed once at construction.
    Degenerate segments (p1 == p2) are allowed but have no meaningful
    direction, so they must never be used as a fold line.

    Attributes:
        p1: Start point
        p2: End point
    """

    p1: Point
    p2: Point
    vector: Point = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        object.__setattr__(self, "vector", self.p2 - self.p1)

    def point_for_time(self, t: float) -> Point:
        """Point at parameter t (0 -> p1, 1 -> p2, not clamped)."""
        return self.p1 + self.vector * t

    def scale(self, n: float) -> LineSegment:
        """
        Push both endpoints outward by n times the current span.

        Each endpoint moves n spans towards and past the other one, so
        n=2 reaches one full span beyond either end (direction reversed).
        """
        p1 = self.p1 + (self.p2 - self.p1) * n
        p2 = self.p2 + (self.p1 - self.p2) * n
        return LineSegment(p1, p2)

    def point_determinant(self, p: Point) -> float:
        """
        Signed side of p relative to the directed line.

        Returns:
            < 0: p is on the "front" side
            > 0: p is on the "back" side
            0: p lies on the line (|d| < EPSILON is snapped to 0)
        """
        d = ((p.x - self.p1.x) * self.vector.y) - ((p.y - self.p1.y) * self.vector.x)
        if -EPSILON < d < EPSILON:
            d = 0.0
        return d

    def intersect(self, other: LineSegment) -> Optional[Point]:
        """
        Intersection point with another segment, if any.

        Parallel and collinear segments never intersect here. Both
        segment parameters must fall in [0, 1].
        """
        r = self.vector
        s = other.vector
        offset = other.p1 - self.p1

        denominator = _cross(r, s)
        if denominator == 0:
            return None

        u = _cross(offset, r) / denominator
        t = _cross(offset, s) / denominator

        if 0 <= t <= 1 and 0 <= u <= 1:
            return self.p1 + r * t
        return None

    @property
    def angle(self) -> float:
        """Angle of the direction vector in degrees."""
        return self.vector.angle

    @property
    def length(self) -> float:
        return self.vector.length


def _cross(a: Point, b: Point) -> float:
    return a.x * b.y - a.y * b.x


@dataclass(frozen=True)
class BezierCurve:
    """
    Immutable cubic bezier curve.

    Attributes:
        p1: Start point
        c1: Control point of p1
        c2: Control point of p2
        p2: End point
    """

    p1: Point
    c1: Point
    c2: Point
    p2: Point

    def __post_init__(self):
        controls = np.array([
            self.p1.to_tuple(),
            self.c1.to_tuple(),
            self.c2.to_tuple(),
            self.p2.to_tuple(),
        ], dtype=np.float64)
        controls.flags.writeable = False
        object.__setattr__(self, "_controls", controls)

    def point_for_time(self, t: float) -> Point:
        """Evaluate the Bernstein form at t (expected in [0, 1], not clamped)."""
        weights = np.array([
            (1 - t) ** 3,
            3 * t * (1 - t) ** 2,
            3 * t ** 2 * (1 - t),
            t ** 3,
        ])
        x, y = weights @ self._controls
        return Point(float(x), float(y))


@dataclass(frozen=True)
class Circle:
    """
    Immutable circle used as a hinge constraint.

    Attributes:
        center: Hinge point
        radius: Maximum distance from center
    """

    center: Point
    radius: float

    def contains_point(self, p: Point) -> bool:
        """Whether p lies inside or on the circle."""
        if not self._bounding_rect_contains_point(p):
            return False
        dx = self.center.x - p.x
        dy = self.center.y - p.y
        return dx * dx + dy * dy <= self.radius * self.radius

    def _bounding_rect_contains_point(self, p: Point) -> bool:
        return (
            self.center.x - self.radius <= p.x <= self.center.x + self.radius
            and self.center.y - self.radius <= p.y <= self.center.y + self.radius
        )

    def constrain_point(self, p: Point) -> Point:
        """
        Move p onto the circumference if it lies outside.

        The angle from the center is preserved; points inside are
        returned unchanged.
        """
        if self.contains_point(p):
            return p
        rotation = (p - self.center).angle
        return self.center + Point.from_polar(rotation, self.radius)

    def shrink(self, amount: float) -> Circle:
        """Copy with the radius reduced by amount."""
        return Circle(self.center, self.radius - amount)


@dataclass(frozen=True)
class Polygon:
    """
    Immutable ordered polygon outline.

    Vertex order is significant: it encodes winding and therefore the
    sign of the area.
    """

    points: Tuple[Point, ...] = ()

    def add_point(self, point: Point) -> Polygon:
        """Return a new polygon with point appended."""
        return Polygon(self.points + (point,))

    @staticmethod
    def get_area(points: Sequence[Point]) -> float:
        """
        Signed area via the shoelace formula.

        Positive for clockwise order in screen coordinates (y down),
        negative for counter-clockwise. Never normalized.
        """
        if not points:
            return 0.0
        coords = np.array([p.to_tuple() for p in points], dtype=np.float64)
        xs, ys = coords[:, 0], coords[:, 1]
        twice_area = np.sum(xs * np.roll(ys, -1)) - np.sum(ys * np.roll(xs, -1))
        return float(twice_area / 2)

    @property
    def area(self) -> float:
        return Polygon.get_area(self.points)

    def to_array(self) -> np.ndarray:
        """Nx2 array of vertices."""
        return np.array([p.to_tuple() for p in self.points], dtype=np.float64).reshape(-1, 2)

    def __len__(self) -> int:
        return len(self.points)

    def __iter__(self) -> Iterator[Point]:
        return iter(self.points)
