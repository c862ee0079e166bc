"""
Fold Line Module
================

Builds the fold line and measures how far it has advanced.

Design:
- Pure functions (container and positions in, geometry out)
- The fold line is the perpendicular bisector of corner <-> position,
  stretched far past the container so it acts as an infinite line
"""

from typing import Tuple

from peel_engine.geometry.container import Container, Corner
from peel_engine.geometry.shapes import LineSegment, Point

FOLD_LENGTH_FACTOR = 10
DIAGONAL_SCALE = 2
OVERFLOW_DISTANCE = 2.0

# Fold rotation bucket upper bound -> (corner, opposing corner)
_FACING_CORNERS = (
    (90, Corner.TOP_RIGHT, Corner.BOTTOM_LEFT),
    (180, Corner.BOTTOM_RIGHT, Corner.TOP_LEFT),
    (270, Corner.BOTTOM_LEFT, Corner.TOP_RIGHT),
    (360, Corner.TOP_LEFT, Corner.BOTTOM_RIGHT),
)


def build_fold_line(container: Container, corner: Point, position: Point) -> LineSegment:
    """
    Build the fold line for a peel position.

    Args:
        container: Container extents
        corner: Anchor corner being peeled
        position: Current (already constrained) peel position

    Returns:
        Segment along the perpendicular bisector of corner and position,
        always much longer than the container diagonal.

    A position exactly on the corner would give a zero-length bisector,
    so the center -> position vector is used as the direction instead,
    keeping the midpoint on the corner.
    """
    half_to_corner = (corner - position) * 0.5
    midpoint = position + half_to_corner
    if half_to_corner.x == 0 and half_to_corner.y == 0:
        half_to_corner = position - container.center

    mult = (max(container.width, container.height) / half_to_corner.length) * FOLD_LENGTH_FACTOR
    half = half_to_corner.rotate(-90) * mult
    return LineSegment(midpoint + half, midpoint - half)


def facing_corners(rotation: float) -> Tuple[Corner, Corner]:
    """
    Corner pair whose diagonal the fold line faces.

    A rotation of exactly 360 (float rounding of a tiny negative angle)
    is treated as 0.
    """
    rotation = rotation % 360
    for upper, corner, opposing in _FACING_CORNERS:
        if rotation < upper:
            return corner, opposing
    return _FACING_CORNERS[0][1], _FACING_CORNERS[0][2]


def peel_line_distance(container: Container, fold_line: LineSegment) -> float:
    """
    How far the fold line has advanced along the diagonal it faces.

    Returns:
        0 at the facing corner, 1 at the opposing corner, possibly more
        past it. OVERFLOW_DISTANCE when the fold line misses the doubled
        diagonal entirely.
    """
    corner_id, opposing_id = facing_corners(fold_line.angle)
    corner = container.corner_point(corner_id)
    opposing = container.corner_point(opposing_id)

    # Scaled past both corners so effects can fade out beyond 1
    corner_to_corner = LineSegment(corner, opposing).scale(DIAGONAL_SCALE)
    intersect = fold_line.intersect(corner_to_corner)
    if intersect is None:
        return OVERFLOW_DISTANCE

    distance_to_fold = (corner - intersect).length
    total_distance = (corner - opposing).length
    return distance_to_fold / total_distance


def back_transform(
    container: Container,
    corner: Point,
    position: Point,
    fold_rotation: float,
) -> Tuple[Point, float]:
    """
    Translation and rotation that lay the mirrored back layer onto the fold.

    Returns:
        (translate, rotate_degrees)
    """
    mirrored_corner = container.flip_horizontally(corner)
    rotation = (fold_rotation - 90) * 2
    translate = position - mirrored_corner.rotate(rotation)
    return translate, rotation
