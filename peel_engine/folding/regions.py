"""
Region Splitting Module
=======================

Splits a box into front/back outlines along the fold line.

Design:
- Stateless: box + fold line in, immutable polygons out
- Half-plane test via LineSegment.point_determinant
- Points on the fold line go to both outlines
- Back outline is mirrored about the vertical center line, since the
  back layer is rendered flipped
"""

from dataclasses import dataclass
from typing import Optional

from peel_engine.geometry.container import Box, Container
from peel_engine.geometry.numeric import normalize
from peel_engine.geometry.shapes import LineSegment, Point, Polygon


@dataclass(frozen=True)
class SplitResult:
    """Front (still flat) and back (peeled) outlines of a box."""

    front: Polygon
    back: Polygon


def split_box(
    box: Box,
    fold_line: LineSegment,
    container: Container,
    include_back: bool = True,
) -> SplitResult:
    """
    Distribute a box's corners and fold intersections into two polygons.

    For each side, its start point and then its intersection with the
    fold line (if any) are tested:
        determinant <= 0 -> front (unchanged)
        determinant >= 0 -> back (mirrored horizontally)

    Args:
        box: Four boundary segments (top, right, bottom, left)
        fold_line: Current fold line
        container: Container used for mirroring
        include_back: False skips building the back outline

    Returns:
        SplitResult (back is empty when include_back is False)
    """
    front = []
    back = []

    def distribute(p: Optional[Point]) -> None:
        if p is None:
            return
        d = fold_line.point_determinant(p)
        if d <= 0:
            front.append(p)
        if d >= 0 and include_back:
            back.append(container.flip_horizontally(p))

    for side in box:
        intersect = fold_line.intersect(side)
        distribute(side.p1)
        distribute(intersect)

    return SplitResult(front=Polygon(tuple(front)), back=Polygon(tuple(back)))


def clipped_area_ratio(container: Container, fold_line: LineSegment) -> float:
    """
    Fraction of the container that has been peeled away.

    Splits the exact container box and compares the remaining front area
    with the full area: 0 when nothing is peeled, 1 when fully peeled.
    """
    element_box = container.scaled_box(1)
    front = split_box(element_box, fold_line, container, include_back=False).front
    return normalize(front.area, container.area, 0)
