"""
Shading Effects Module
======================

Pure derivation of shadow, reflection and fade values from the fold
progress t (the peel line distance) and the options.

Design:
- Pure functions, no state
- Each effect can be switched off in PeelOptions
- Gradients are always emitted; an empty stop list clears them
"""

from typing import Optional

from peel_engine.config import PeelOptions
from peel_engine.geometry.numeric import clamp, distribute
from peel_engine.rendering.schemas import (
    ColorStop,
    GradientDescriptor,
    ShadowDescriptor,
    ShadowKind,
)

TOP_SHADOW_EXPONENT = 5
BOTTOM_SHADOW_DARK_BAND = 0.025
BOTTOM_SHADOW_MID_BAND = 0.03
BOTTOM_SHADOW_LIGHT_BAND = 0.02


def distribute_or_linear(t: float, use_distribution: bool, mult: float) -> float:
    """Bell curve peaking at t=0.5 if use_distribution, else t * mult."""
    if use_distribution:
        return distribute(t, mult)
    return t * mult


def exponential(t: float, exp: float, mult: float) -> float:
    """mult * clamp((1 + t)^exp - 1): near 0 for small t, then steep."""
    return mult * clamp(pow(1 + t, exp) - 1)


def top_shadow(t: float, options: PeelOptions, uses_box_shadow: bool) -> Optional[ShadowDescriptor]:
    """
    Shadow cast by the peeled layer.

    Args:
        t: Peel line distance
        options: Effect options
        uses_box_shadow: True without a custom shape (box-shadow),
            False with one (drop-shadow filter following the shape)

    Returns:
        ShadowDescriptor, or None if the top shadow is disabled
    """
    if not options.top_shadow:
        return None
    alpha = exponential(t, TOP_SHADOW_EXPONENT, options.top_shadow_alpha)
    if uses_box_shadow:
        return ShadowDescriptor(
            kind=ShadowKind.BOX,
            offset_x=options.top_shadow_offset_x,
            offset_y=options.top_shadow_offset_y,
            blur=options.top_shadow_blur,
            spread=0,
            alpha=alpha,
        )
    return ShadowDescriptor(
        kind=ShadowKind.DROP,
        offset_x=options.top_shadow_offset_x,
        offset_y=options.top_shadow_offset_y,
        blur=options.top_shadow_blur,
        alpha=alpha,
    )


def back_reflection(t: float, fold_rotation: float, options: PeelOptions) -> GradientDescriptor:
    """White highlight band running along the fold on the back layer."""
    stops = ()
    if options.back_reflection and t > 0:
        size = distribute_or_linear(t, options.back_reflection_distribute, options.back_reflection_size)
        stop = t - options.back_reflection_offset
        mid = stop - size
        start = mid - size
        alpha = options.back_reflection_alpha
        stops = (
            ColorStop.white(0, 0),
            ColorStop.white(0, start),
            ColorStop.white(alpha, mid),
            ColorStop.white(0, stop),
        )
    return GradientDescriptor(rotation=180 - fold_rotation, stops=stops)


def back_shadow(t: float, fold_rotation: float, options: PeelOptions) -> GradientDescriptor:
    """Dark band on the back layer, solid from the band to the fold."""
    stops = ()
    if options.back_shadow and t > 0:
        size = distribute_or_linear(t, options.back_shadow_distribute, options.back_shadow_size)
        stop = t - options.back_shadow_offset
        mid = stop - size
        start = mid - size
        alpha = options.back_shadow_alpha
        stops = (
            ColorStop.black(0, 0),
            ColorStop.black(0, start),
            ColorStop.black(alpha, mid),
            ColorStop.black(alpha, stop),
        )
    return GradientDescriptor(rotation=180 - fold_rotation, stops=stops)


def bottom_shadow(t: float, fold_rotation: float, options: PeelOptions) -> GradientDescriptor:
    """
    Shadow on the bottom layer under the fold.

    A light band fades in ahead of a dark band that ends at the fold.
    """
    stops = ()
    if options.bottom_shadow and t > 0:
        size = options.bottom_shadow_size
        offset = options.bottom_shadow_offset

        dark_start = t - (BOTTOM_SHADOW_DARK_BAND - offset)
        mid_start = (
            dark_start
            - distribute_or_linear(t, options.bottom_shadow_distribute, BOTTOM_SHADOW_MID_BAND) * size
            - offset
        )
        light_start = mid_start - ((BOTTOM_SHADOW_LIGHT_BAND * size) - offset)
        stops = (
            ColorStop.black(0, 0),
            ColorStop.black(0, light_start),
            ColorStop.black(options.bottom_shadow_light_alpha, mid_start),
            ColorStop.black(options.bottom_shadow_light_alpha, dark_start),
            ColorStop.black(options.bottom_shadow_dark_alpha, t),
        )
    return GradientDescriptor(rotation=fold_rotation + 180, stops=stops)


def fade_opacity(progress: float, threshold: float) -> Optional[float]:
    """
    Opacity of the fading layers.

    Args:
        progress: Path time if a path is in use, else clipped area ratio
        threshold: Progress after which fading starts (0 disables)

    Returns:
        None when fading is disabled, 1.0 up to the threshold, then a
        linear ramp reaching 0 at progress 1
    """
    if not threshold:
        return None
    if progress > threshold:
        return (1 - progress) / (1 - threshold)
    return 1.0
