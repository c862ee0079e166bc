"""
Numeric Helpers
===============

Scalar helpers shared by the geometry, effects and rendering layers.

All functions are pure.
"""

import math

PRECISION = 1e2  # 2 decimals


def round_value(n: float) -> float:
    """
    Round to 2 decimals, halves rounded up (towards +inf).

    Unlike round(), ties never go to even: 0.125 -> 0.13, 0.135 -> 0.14.
    """
    return math.floor(n * PRECISION + 0.5) / PRECISION


def clamp(n: float) -> float:
    """Clamp n to [0, 1]."""
    return max(0.0, min(1.0, n))


def normalize(n: float, low: float, high: float) -> float:
    """Map n linearly so that low -> 0 and high -> 1 (may be inverted)."""
    return (n - low) / (high - low)


def distribute(t: float, mult: float = 1.0) -> float:
    """Bell-shaped weighting: 0 at t=0 and t=1, mult at t=0.5."""
    return mult * 2 * (0.5 - abs(t - 0.5))


def format_number(n: float) -> str:
    """
    Format a number for CSS/SVG output.

    Rounds to 2 decimals and strips trailing zeros, so 1.0 -> "1",
    0.50 -> "0.5" and -0.0 -> "0".
    """
    text = f"{round_value(n):.2f}".rstrip("0").rstrip(".")
    if text in ("-0", ""):
        return "0"
    return text
