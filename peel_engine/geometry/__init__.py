"""
Geometry Layer
==============

Bounded Context: Pure 2D primitives and container geometry.

Responsibilities:
- Value types (Point, LineSegment, BezierCurve, Circle, Polygon)
- Container extents, corners and scaled boxes
- Scalar helpers (rounding, clamping, bell-curve distribution)
- NO state, NO rendering

Design Philosophy:
- Immutable data structures
- Pure functions
- Documented edge cases instead of exceptions
"""

from peel_engine.geometry.shapes import (
    EPSILON,
    Point,
    LineSegment,
    BezierCurve,
    Circle,
    Polygon,
)
from peel_engine.geometry.container import Box, Container, Corner, PeelTarget

__all__ = [
    "EPSILON",
    "Point",
    "LineSegment",
    "BezierCurve",
    "Circle",
    "Polygon",
    "Box",
    "Container",
    "Corner",
    "PeelTarget",
]
