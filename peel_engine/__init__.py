"""
Peel Engine v1.0
================

Bounded Context: 2D page-peel geometry for renderers.

Given a container, an anchor corner, optional hinge constraints and a peel
position, computes the fold line, the front/back clip outlines and the
shadow, reflection, transform and fade values that make the fold look
plausible. The engine never draws: a renderer applies the values.

Architecture:

    peel_engine/
    ├── geometry/          # Pure primitives (immutable, stateless)
    │   ├── shapes.py      # Point, LineSegment, BezierCurve, Circle, Polygon
    │   ├── container.py   # Container, Corner
    │   └── numeric.py     # rounding, clamping, distribution
    │
    ├── folding/           # Fold line + region splitting (pure)
    ├── constraints/       # Hinge circles, flip smoothing (pure)
    ├── effects/           # Shadow/gradient/fade derivation (pure)
    ├── rendering/         # Output descriptors + clip registry
    ├── logging/           # Structured JSON logging
    │
    ├── path.py            # Line/bezier peel paths
    ├── presets.py         # book, calendar
    ├── config.py          # PeelOptions (YAML loadable)
    ├── controller.py      # Peel: orchestration, the only mutable state
    └── builder.py         # PeelBuilder

Usage:

    from peel_engine import Peel, PeelOptions, Corner, Point

    peel = Peel(200, 100, PeelOptions(preset="book", fade_threshold=0.9))
    frame = peel.set_peel_position(Point(80, 40))

    frame.front_clip.to_svg_points()    # "0,0 200,0 ..."
    frame.back_transform.to_css()       # "translate(...px, ...px) rotate(...deg)"
    frame.bottom_shadow.to_css()        # "linear-gradient(...)"

    # Or follow a path
    peel.set_peel_path(200, 100, 120, 90, 60, 40, 0, 0)
    frame = peel.set_time_along_path(0.25)
"""

# Geometry Layer (immutable, stateless)
from peel_engine.geometry import (
    Point,
    LineSegment,
    BezierCurve,
    Circle,
    Polygon,
    Container,
    Corner,
)

# Engine Layers (pure)
from peel_engine.constraints import ConstraintSet, HingeClamp
from peel_engine.path import PathArgumentError, path_from_coordinates

# Rendering Layer (output values)
from peel_engine.rendering import (
    ClipIdGenerator,
    ClipRegistry,
    PeelFrame,
    ShapeDescriptor,
    ShapeKind,
)

# Configuration
from peel_engine.config import PeelConfigurationError, PeelOptions
from peel_engine.presets import Preset

# Orchestration
from peel_engine.controller import Peel, PeelState, PeelStateError
from peel_engine.builder import PeelBuilder

__all__ = [
    # Geometry
    "Point",
    "LineSegment",
    "BezierCurve",
    "Circle",
    "Polygon",
    "Container",
    "Corner",
    # Engine
    "ConstraintSet",
    "HingeClamp",
    "PathArgumentError",
    "path_from_coordinates",
    # Rendering
    "ClipIdGenerator",
    "ClipRegistry",
    "PeelFrame",
    "ShapeDescriptor",
    "ShapeKind",
    # Configuration
    "PeelConfigurationError",
    "PeelOptions",
    "Preset",
    # Orchestration
    "Peel",
    "PeelState",
    "PeelStateError",
    "PeelBuilder",
]

__version__ = "1.0.0"
