"""
Peel Path Module
================

Maps a time value in [0, 1] onto a point along a line or bezier path.
"""

from typing import Tuple, Union

from peel_engine.geometry.numeric import clamp
from peel_engine.geometry.shapes import BezierCurve, LineSegment, Point

PeelPath = Union[LineSegment, BezierCurve]


class PathArgumentError(ValueError):
    """Raised when a path is built from neither 4 nor 8 coordinates."""
    pass


def path_from_coordinates(*coords: float) -> PeelPath:
    """
    Build a path from flat coordinates.

    Args:
        coords: 4 numbers (x1, y1, x2, y2) for a straight line, or
            8 numbers (x1, y1, cx1, cy1, cx2, cy2, x2, y2) for a bezier
            curve from p1 to p2 with control points c1 and c2

    Raises:
        PathArgumentError: For any other number of coordinates
    """
    if len(coords) == 4:
        x1, y1, x2, y2 = coords
        return LineSegment(Point(x1, y1), Point(x2, y2))
    if len(coords) == 8:
        x1, y1, cx1, cy1, cx2, cy2, x2, y2 = coords
        return BezierCurve(Point(x1, y1), Point(cx1, cy1), Point(cx2, cy2), Point(x2, y2))
    raise PathArgumentError(
        f"A peel path needs 4 (line) or 8 (bezier) coordinates, got {len(coords)}"
    )


def point_along_path(path: PeelPath, t: float) -> Tuple[float, Point]:
    """
    Point at time t along a path.

    Returns:
        (clamped t, point)
    """
    t = clamp(t)
    return t, path.point_for_time(t)
