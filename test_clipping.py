"""
Test Clip Regions and Renderer Descriptors
==========================================

Clip id generation, the clip registry, descriptor formatting and the
structured logger behind them.

Usage:
    pytest test_clipping.py
    python test_clipping.py
"""

import json
import logging
import threading

import pytest

from peel_engine.geometry import Point
from peel_engine.logging import LogEvent, StructuredLogger, create_logger
from peel_engine.rendering import (
    ClipIdGenerator,
    ClipOutline,
    ClipRegistry,
    ColorStop,
    GradientDescriptor,
    ShadowDescriptor,
    ShadowKind,
    ShapeDescriptor,
    ShapeKind,
    TransformDescriptor,
    default_id_generator,
)


def test_clip_ids_increase():
    generator = ClipIdGenerator()
    assert generator.next_id() == "svg-clip-1"
    assert generator.next_id() == "svg-clip-2"

    custom = ClipIdGenerator(prefix="peel-", start=10)
    assert custom.next_id() == "peel-10"


def test_clip_ids_unique_across_threads():
    """Read-and-increment happens exactly once per id."""
    generator = ClipIdGenerator()
    ids = []
    lock = threading.Lock()

    def worker():
        local = [generator.next_id() for _ in range(200)]
        with lock:
            ids.extend(local)

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert len(ids) == 1600
    assert len(set(ids)) == 1600


def test_registry_records_regions():
    registry = ClipRegistry(ClipIdGenerator())
    top = registry.create("top")
    shape = registry.create("top-shape", ShapeDescriptor("circle", {"r": 10}))

    assert top.region_id == "svg-clip-1"
    assert top.layer == "top"
    assert top.is_polygon
    assert shape.shape.kind == ShapeKind.CIRCLE
    assert not shape.is_polygon

    assert registry.get("svg-clip-2") is shape
    assert "svg-clip-1" in registry
    assert "svg-clip-3" not in registry
    assert len(registry) == 2
    assert [region.layer for region in registry] == ["top", "top-shape"]
    assert repr(registry) == "ClipRegistry(regions=2)"

    with pytest.raises(KeyError):
        registry.get("svg-clip-3")


def test_registries_can_share_a_generator():
    generator = ClipIdGenerator()
    first = ClipRegistry(id_generator=generator)
    second = ClipRegistry(id_generator=generator)

    assert first.create("top").region_id == "svg-clip-1"
    assert second.create("top").region_id == "svg-clip-2"


def test_default_registries_never_reuse_ids():
    """Registries built without a generator share the process-wide one."""
    first = ClipRegistry()
    second = ClipRegistry()

    ids = [
        first.create("top").region_id,
        second.create("top").region_id,
        first.create("back").region_id,
        second.create("back").region_id,
    ]
    assert len(set(ids)) == 4
    assert default_id_generator().next_id() not in ids



def test_shape_attributes_are_read_only():
    attributes = {"cx": 5}
    shape = ShapeDescriptor(ShapeKind.CIRCLE, attributes)
    attributes["cx"] = 6

    assert shape.attributes["cx"] == 5
    with pytest.raises(TypeError):
        shape.attributes["cx"] = 7


def test_color_stops():
    stop = ColorStop.black(0.5, 0.25)
    assert stop.to_css() == "rgba(0,0,0,0.5) 25%"
    assert stop.to_dict() == {"color": [0, 0, 0], "alpha": 0.5, "position": 25}

    # Alpha is clamped, position is not
    stop = ColorStop.white(1.7, 1.2)
    assert stop.alpha == 1
    assert stop.position == 120
    assert stop.to_css() == "rgba(255,255,255,1) 120%"

    assert ColorStop.black(0.333, 0.12346).to_css() == "rgba(0,0,0,0.33) 12.35%"


def test_gradient_css():
    gradient = GradientDescriptor(
        rotation=30.456,
        stops=[ColorStop.black(0, 0), ColorStop.black(0.5, 1)],
    )
    assert gradient.rotation == 30.46
    assert gradient.to_css() == "linear-gradient(30.46deg,rgba(0,0,0,0) 0%,rgba(0,0,0,0.5) 100%)"
    assert GradientDescriptor(rotation=0).to_css() == "none"


def test_shadow_css():
    box = ShadowDescriptor(ShadowKind.BOX, offset_x=0, offset_y=1, blur=5, alpha=0.123)
    assert box.spread == 0
    assert box.alpha == 0.12
    assert box.to_css() == "0px 1px 5px rgba(0,0,0,0.12)"

    spread = ShadowDescriptor(ShadowKind.BOX, offset_x=0, offset_y=1, blur=5, alpha=0.5, spread=2)
    assert spread.to_css() == "0px 1px 5px 2px rgba(0,0,0,0.5)"

    drop = ShadowDescriptor(ShadowKind.DROP, offset_x=-1.5, offset_y=2, blur=4, alpha=0.25)
    assert drop.to_css() == "drop-shadow(-1.5px 2px 4px rgba(0,0,0,0.25))"


def test_transform_css():
    transform = TransformDescriptor(translate_x=12.346, translate_y=-0.001, rotate=53.1301)
    assert transform.to_dict() == {"translate_x": 12.35, "translate_y": 0.0, "rotate": 53.13}
    assert transform.to_css() == "translate(12.35px, 0px) rotate(53.13deg)"


def test_clip_outline_points():
    outline = ClipOutline.from_points(
        "svg-clip-1",
        [Point(0, 0), Point(150.004, 0), Point(150, 100.126)],
    )
    assert outline.points == ((0, 0), (150, 0), (150, 100.13))
    assert outline.to_svg_points() == "0,0 150,0 150,100.13"
    assert outline.to_dict() == {
        "region_id": "svg-clip-1",
        "points": [[0, 0], [150, 0], [150, 100.13]],
    }
    assert len(outline) == 3


def test_registry_logs_created_regions():
    logger = StructuredLogger("clip", level=logging.DEBUG, logger_name="peel_engine.test.clip")
    entries = []

    class Recorder(logging.Handler):
        def emit(self, record):
            entries.append(json.loads(record.getMessage()))

    logger.logger.addHandler(Recorder())
    logger.logger.propagate = False

    registry = ClipRegistry(ClipIdGenerator(), logger=logger)
    registry.create("back")

    assert len(entries) == 1
    entry = entries[0]
    assert entry["event"] == LogEvent.CLIP_REGION_CREATED.value
    assert entry["level"] == "DEBUG"
    assert entry["component"] == "clip"
    assert entry["metadata"] == {"region_id": "svg-clip-1", "shape": "polygon"}
    assert "timestamp" in entry

    # Below the threshold nothing is emitted
    logger.set_level(logging.INFO)
    registry.create("top")
    assert len(entries) == 1


def test_create_logger_names():
    logger = create_logger("peel")
    assert logger.component == "peel"
    assert logger.logger_name == "peel_engine.peel"


def main():
    """Run all tests."""
    print("\n✂️  peel_engine - Clipping & Descriptor Tests")
    print("=" * 60)

    tests = [
        test_clip_ids_increase,
        test_clip_ids_unique_across_threads,
        test_registry_records_regions,
        test_registries_can_share_a_generator,
        test_default_registries_never_reuse_ids,
        test_shape_attributes_are_read_only,
        test_color_stops,
        test_gradient_css,
        test_shadow_css,
        test_transform_css,
        test_clip_outline_points,
        test_registry_logs_created_regions,
        test_create_logger_names,
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
