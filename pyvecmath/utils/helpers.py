import math

from pyvecmath.exceptions import VectorDomainError

# Constants
TWO_PI = 2.0 * math.pi


def clamp(value, min_val, max_val):
    """Clamps a value to the range [min_val, max_val]."""
    return max(min_val, min(value, max_val))

def clamp_unit(t: float) -> float:
    """Clamps an interpolant to [0, 1]. NaN is passed through untouched."""
    if t > 1.0:
        return 1.0
    if t < 0.0:
        return 0.0
    return t

def wrap_angle(theta: float) -> float:
    """
    Maps an atan2 result from (-PI, PI] into [0, 2PI).
    Negative zero comes back as positive zero.
    """
    if theta < 0.0:
        theta += TWO_PI
        # -1e-17 + 2PI rounds to exactly 2PI
        if theta >= TWO_PI:
            theta = 0.0
    return theta + 0.0

def safe_acos(cosine: float) -> float:
    """acos that tolerates rounding just outside [-1, 1]. NaN stays NaN."""
    if math.isnan(cosine):
        return math.nan
    return math.acos(clamp(cosine, -1.0, 1.0))

def scale_by_largest(components) -> list[float]:
    """
    Divides every component by the largest absolute component, so the result lies
    in [-1, 1]. Direction is unchanged. The input must not be all zeros.
    """
    largest = max(abs(c) for c in components)
    return [c / largest for c in components]

def cosine_between(a, b) -> float:
    """
    Cosine of the angle between two non-zero component sequences.
    Both are scaled by their largest component first, so neither the dot product
    nor the product of the lengths can underflow or overflow.
    """
    a = scale_by_largest(a)
    b = scale_by_largest(b)
    dot = sum(p * q for p, q in zip(a, b))
    return dot / math.hypot(*a) / math.hypot(*b)

def minkowski(differences, p: float) -> float:
    """
    Minkowski distance of order p over componentwise differences.

    The sum is taken relative to the largest difference so that large p does not
    overflow; as p grows the result tends to the largest difference (Chebyshev).
    As p shrinks towards 0 the result grows without bound and becomes inf once
    it leaves the float range.

    Raises:
        VectorDomainError: If p <= 0 (p == 0 would divide by zero in the exponent).
    """
    if p <= 0:
        raise VectorDomainError(f"Minkowski order must be positive, got {p}.")
    magnitudes = [abs(d) for d in differences]
    if math.isnan(p) or any(math.isnan(m) for m in magnitudes):
        return math.nan
    largest = max(magnitudes)
    if largest == 0.0 or math.isinf(largest) or math.isinf(p):
        return largest
    total = sum((m / largest) ** p for m in magnitudes)
    try:
        return largest * total ** (1.0 / p)
    except OverflowError:
        # total >= 1 always; it only overflows when total > 1
        return math.inf
