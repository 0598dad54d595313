"""
2-D vector helpers used by the pose classifier.
"""
import math
from typing import Optional

from .types import Point


def vector(a: Point, b: Point) -> Point:
    """Return b - a componentwise."""
    return (b[0] - a[0], b[1] - a[1])


def dot(u: Point, v: Point) -> float:
    return u[0] * v[0] + u[1] * v[1]


def magnitude(v: Point) -> float:
    """Euclidean norm; 0.0 for the zero vector."""
    return math.hypot(v[0], v[1])


def angle_between(u: Point, v: Point) -> Optional[float]:
    """
    Angle between two vectors in radians, in [0, pi].

    Args:
        u: First vector
        v: Second vector

    Returns:
        The angle, or None when either vector has zero length (the angle is
        undefined and callers treat it as "not extended" / "not down").
    """
    mag_u = magnitude(u)
    mag_v = magnitude(v)
    if mag_u == 0 or mag_v == 0:
        return None

    # Rounding can push the cosine just outside [-1, 1] for collinear vectors
    cos_angle = max(-1.0, min(1.0, dot(u, v) / (mag_u * mag_v)))
    return math.acos(cos_angle)
