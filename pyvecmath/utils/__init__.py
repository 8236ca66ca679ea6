# This file marks pyvecmath.utils as a Python package.

from .helpers import (
    TWO_PI,
    clamp,
    clamp_unit,
    wrap_angle,
    safe_acos,
    scale_by_largest,
    cosine_between,
    minkowski,
)
from .dispatch import mutator, sampler

__all__ = [
    # Constants
    "TWO_PI",
    # Scalar helpers
    "clamp", "clamp_unit", "wrap_angle", "safe_acos",
    # Component helpers
    "scale_by_largest", "cosine_between",
    # Metrics
    "minkowski",
    # Descriptors
    "mutator", "sampler",
]
