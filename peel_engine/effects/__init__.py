"""
Effects Layer
=============

Bounded Context: Visual effect parameters.

Responsibilities:
- Top shadow intensity (box or drop shadow)
- Back reflection, back shadow and bottom shadow gradients
- Fade opacity

Design Philosophy:
- Pure functions of (progress, rotation, options)
"""

from peel_engine.effects.shading import (
    back_reflection,
    back_shadow,
    bottom_shadow,
    distribute_or_linear,
    exponential,
    fade_opacity,
    top_shadow,
)

__all__ = [
    "back_reflection",
    "back_shadow",
    "bottom_shadow",
    "distribute_or_linear",
    "exponential",
    "fade_opacity",
    "top_shadow",
]
