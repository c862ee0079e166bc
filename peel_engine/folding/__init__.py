"""
Folding Layer
=============

Bounded Context: Fold line construction and region splitting.

Responsibilities:
- Build the fold line for a corner/position pair
- Measure fold progress along the facing diagonal
- Split boxes into front/back outlines
- Back layer transform

Design Philosophy:
- Pure functions, immutable results
"""

from peel_engine.folding.fold_line import (
    OVERFLOW_DISTANCE,
    back_transform,
    build_fold_line,
    facing_corners,
    peel_line_distance,
)
from peel_engine.folding.regions import SplitResult, clipped_area_ratio, split_box

__all__ = [
    "OVERFLOW_DISTANCE",
    "back_transform",
    "build_fold_line",
    "facing_corners",
    "peel_line_distance",
    "SplitResult",
    "clipped_area_ratio",
    "split_box",
]
