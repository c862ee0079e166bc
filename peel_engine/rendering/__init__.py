"""
Rendering Layer
===============

Bounded Context: Renderer-facing output values.

Responsibilities:
- Immutable descriptors (clip outlines, transform, shadow, gradients)
- Clip region naming (injected id generator, caller-owned registry)
- NO drawing: a renderer consumes these values
"""

from peel_engine.rendering.schemas import (
    ShapeKind,
    ShapeDescriptor,
    ColorStop,
    GradientDescriptor,
    ShadowKind,
    ShadowDescriptor,
    TransformDescriptor,
    ClipOutline,
    PeelFrame,
)
from peel_engine.rendering.clipping import (
    ClipIdGenerator,
    ClipRegion,
    ClipRegistry,
    default_id_generator,
)

__all__ = [
    "ShapeKind",
    "ShapeDescriptor",
    "ColorStop",
    "GradientDescriptor",
    "ShadowKind",
    "ShadowDescriptor",
    "TransformDescriptor",
    "ClipOutline",
    "PeelFrame",
    "ClipIdGenerator",
    "ClipRegion",
    "ClipRegistry",
    "default_id_generator",
]
