"""
Constraints Layer
=================

Bounded Context: Hinge constraints on the peel position.

Responsibilities:
- Ordered hinge circles with frozen radii
- Flip constraint selection
- Sequential clamping with flip smoothing
"""

from peel_engine.constraints.hinges import ConstraintSet, HingeClamp

__all__ = [
    "ConstraintSet",
    "HingeClamp",
]
