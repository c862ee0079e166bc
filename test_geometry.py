"""
Test Geometry Primitives
========================

Points, segments, curves, circles, polygons and the container.

Usage:
    pytest test_geometry.py
    python test_geometry.py
"""

import math

import pytest

from peel_engine.geometry import (
    BezierCurve,
    Circle,
    Container,
    Corner,
    LineSegment,
    Point,
    Polygon,
)
from peel_engine.geometry.numeric import (
    clamp,
    distribute,
    format_number,
    normalize,
    round_value,
)


def test_numeric_helpers():
    """Rounding goes half up, helpers behave at their edges."""
    assert round_value(0.125) == 0.13
    assert round_value(-0.125) == -0.12
    assert round_value(2.0) == 2.0

    assert clamp(-1) == 0.0
    assert clamp(2) == 1.0
    assert clamp(0.3) == 0.3

    assert normalize(5, 0, 10) == 0.5
    assert normalize(2500, 10000, 0) == 0.75

    assert distribute(0) == 0
    assert distribute(1) == 0
    assert distribute(0.5) == 1
    assert distribute(0.25, 2) == pytest.approx(1.0)

    assert format_number(1.0) == "1"
    assert format_number(0.5) == "0.5"
    assert format_number(100) == "100"
    assert format_number(-0.0) == "0"
    assert format_number(-0.001) == "0"
    assert format_number(12.3456) == "12.35"


def test_point_arithmetic():
    """Vector operations return new points."""
    a = Point(3, 4)
    b = Point(1, 2)

    assert a + b == Point(4, 6)
    assert a - b == Point(2, 2)
    assert a * 2 == Point(6, 8)
    assert a.scale(0.5) == Point(1.5, 2)
    assert a.length == 5.0
    assert a.to_tuple() == (3, 4)
    assert a.to_array().tolist() == [3.0, 4.0]


def test_point_angles():
    """Angles are degrees in [0, 360) with y growing down."""
    assert Point(1, 0).angle == 0
    assert Point(0, 1).angle == pytest.approx(90)
    assert Point(-1, 0).angle == pytest.approx(180)
    assert Point(0, -1).angle == pytest.approx(270)

    rotated = Point(1, 0).rotate(90)
    assert rotated.x == pytest.approx(0, abs=1e-12)
    assert rotated.y == pytest.approx(1)

    polar = Point.from_polar(45, math.sqrt(2))
    assert polar.x == pytest.approx(1)
    assert polar.y == pytest.approx(1)

    assert Point(0, 5).set_angle(0).x == pytest.approx(5)


def test_zero_vector_stays_zero():
    """The zero vector has angle 0 and rotating it keeps it at zero."""
    zero = Point(0, 0)
    assert zero.angle == 0
    assert zero.rotate(123) == Point(0, 0)


def test_segment_point_for_time_and_scale():
    """Parametric points and outward scaling."""
    segment = LineSegment(Point(0, 0), Point(10, 0))

    assert segment.vector == Point(10, 0)
    assert segment.point_for_time(0.5) == Point(5, 0)
    assert segment.point_for_time(2) == Point(20, 0)
    assert segment.length == 10
    assert segment.angle == 0

    scaled = segment.scale(2)
    assert scaled.p1 == Point(20, 0)
    assert scaled.p2 == Point(-10, 0)


def test_segment_point_determinant():
    """Sign tells the side of the directed line, near-zero snaps to 0."""
    segment = LineSegment(Point(0, 0), Point(10, 0))

    assert segment.point_determinant(Point(5, 5)) < 0
    assert segment.point_determinant(Point(5, -5)) > 0
    assert segment.point_determinant(Point(3, 0)) == 0
    assert segment.point_determinant(Point(3, 1e-9)) == 0


def test_segment_intersection():
    """Crossing segments meet once, parallel or distant ones never."""
    horizontal = LineSegment(Point(0, 0), Point(10, 0))
    vertical = LineSegment(Point(5, -5), Point(5, 5))

    hit = horizontal.intersect(vertical)
    assert hit == Point(5, 0)
    assert vertical.intersect(horizontal) == Point(5, 0)

    # Touching at an endpoint counts
    touching = LineSegment(Point(10, -5), Point(10, 5))
    assert horizontal.intersect(touching) == Point(10, 0)

    # Parallel
    assert horizontal.intersect(LineSegment(Point(0, 5), Point(10, 5))) is None
    # Collinear and overlapping
    assert horizontal.intersect(LineSegment(Point(5, 0), Point(15, 0))) is None
    # Lines cross, segments don't
    short = LineSegment(Point(0, 0), Point(1, 0))
    assert short.intersect(vertical) is None


def test_bezier_point_for_time():
    """Cubic bezier hits its end points and is symmetric at t=0.5."""
    curve = BezierCurve(Point(0, 0), Point(0, 10), Point(10, 10), Point(10, 0))

    assert curve.point_for_time(0) == Point(0, 0)
    assert curve.point_for_time(1) == Point(10, 0)

    mid = curve.point_for_time(0.5)
    assert mid.x == pytest.approx(5)
    assert mid.y == pytest.approx(7.5)


def test_circle_contains_and_constrain():
    """Boundary is inside, outside points are projected at the same angle."""
    circle = Circle(Point(0, 0), 10)

    assert circle.contains_point(Point(3, 4))
    assert circle.contains_point(Point(6, 8))
    assert not circle.contains_point(Point(8, 8))
    assert not circle.contains_point(Point(20, 0))

    assert circle.constrain_point(Point(3, 4)) == Point(3, 4)

    projected = circle.constrain_point(Point(20, 0))
    assert projected.x == pytest.approx(10)
    assert projected.y == pytest.approx(0)

    projected = circle.constrain_point(Point(-30, -40))
    assert projected.x == pytest.approx(-6)
    assert projected.y == pytest.approx(-8)

    assert circle.shrink(2.5).radius == 7.5
    assert circle.shrink(2.5).center == circle.center


def test_polygon_signed_area():
    """Shoelace area keeps the winding sign."""
    clockwise = (Point(0, 0), Point(10, 0), Point(10, 10), Point(0, 10))

    assert Polygon.get_area(clockwise) == 100
    assert Polygon.get_area(tuple(reversed(clockwise))) == -100
    assert Polygon.get_area(()) == 0.0
    assert Polygon().area == 0.0

    polygon = Polygon()
    grown = polygon.add_point(Point(1, 2))
    assert len(polygon) == 0
    assert len(grown) == 1
    assert list(grown) == [Point(1, 2)]
    assert grown.to_array().shape == (1, 2)


def test_container_corners():
    """Corner ids encode x in bit 0 and y in bit 1."""
    container = Container(200, 100)

    assert container.corner_point(Corner.TOP_LEFT) == Point(0, 0)
    assert container.corner_point(Corner.TOP_RIGHT) == Point(200, 0)
    assert container.corner_point(Corner.BOTTOM_LEFT) == Point(0, 100)
    assert container.corner_point(Corner.BOTTOM_RIGHT) == Point(200, 100)
    assert container.corner_point(3) == Point(200, 100)

    assert container.center == Point(100, 50)
    assert container.area == 20000

    assert Corner.from_name("bottom-right") is Corner.BOTTOM_RIGHT
    assert Corner.from_name("Top Left") is Corner.TOP_LEFT
    with pytest.raises(ValueError):
        Corner.from_name("middle")


def test_container_resolve():
    """Positions resolve from a Corner, a corner id or a Point."""
    container = Container(200, 100)

    assert container.resolve(Corner.BOTTOM_LEFT) == Point(0, 100)
    assert container.resolve(1) == Point(200, 0)
    assert container.resolve(Point(12, 34)) == Point(12, 34)

    with pytest.raises(TypeError):
        container.resolve("bottom_left")
    with pytest.raises(TypeError):
        container.resolve(True)


def test_container_rejects_empty_extents():
    with pytest.raises(ValueError):
        Container(0, 100)
    with pytest.raises(ValueError):
        Container(200, -1)


def test_container_boxes_and_mirroring():
    """Scale 1 is the container itself, larger scales grow every side."""
    container = Container(200, 100)

    top, right, bottom, left = container.scaled_box(1)
    assert top.p1 == Point(0, 0)
    assert right.p1 == Point(200, 0)
    assert bottom.p1 == Point(200, 100)
    assert left.p1 == Point(0, 100)
    assert left.p2 == top.p1

    top, right, bottom, left = container.scaled_box(4)
    assert top.p1 == Point(-600, -300)
    assert bottom.p1 == Point(800, 400)

    assert container.flip_horizontally(Point(50, 10)) == Point(150, 10)
    assert container.flip_horizontally(Point(100, 10)) == Point(100, 10)


def main():
    """Run all tests."""
    print("\n📐 peel_engine - Geometry Tests")
    print("=" * 60)

    tests = [
        test_numeric_helpers,
        test_point_arithmetic,
        test_point_angles,
        test_zero_vector_stays_zero,
        test_segment_point_for_time_and_scale,
        test_segment_point_determinant,
        test_segment_intersection,
        test_bezier_point_for_time,
        test_circle_contains_and_constrain,
        test_polygon_signed_area,
        test_container_corners,
        test_container_resolve,
        test_container_rejects_empty_extents,
        test_container_boxes_and_mirroring,
    ]

    try:
        for test in tests:
            test()
            print(f"✓ {test.__name__}")

        print("\n" + "=" * 60)
        print("✅ ALL TESTS PASSED!")
        print("=" * 60)

    except AssertionError as e:
        print(f"\n❌ TEST FAILED: {e}")
        raise


if __name__ == "__main__":
    main()
