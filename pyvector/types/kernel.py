"""
Dimension-generic vector formulas.

Every function works on plain tuples of floats so the same code serves the
2, 3 and 4 component types of both variants. Nothing here validates its
input: zero divisors and zero-length vectors yield inf/NaN components.
"""
import math
from typing import Tuple

from pyvector.utils.helpers import clamp, ieee_divide, lerp as scalar_lerp

Components = Tuple[float, ...]


def add(a: Components, b: Components) -> Components:
    return tuple(ai + bi for ai, bi in zip(a, b))

def sub(a: Components, b: Components) -> Components:
    return tuple(ai - bi for ai, bi in zip(a, b))

def scale(v: Components, scalar: float) -> Components:
    return tuple(c * scalar for c in v)

def divide(v: Components, scalar: float) -> Components:
    return tuple(ieee_divide(c, scalar) for c in v)

def negate(v: Components) -> Components:
    return tuple(-c for c in v)

def dot(a: Components, b: Components) -> float:
    """Sum of componentwise products."""
    return sum(ai * bi for ai, bi in zip(a, b))

def magnitude_squared(v: Components) -> float:
    # c * c rather than c ** 2: float ** raises OverflowError, * gives inf.
    return sum(c * c for c in v)

def magnitude(v: Components) -> float:
    return math.sqrt(magnitude_squared(v))

def normalize(v: Components) -> Components:
    """v / |v|. A zero vector gives NaN components."""
    return divide(v, magnitude(v))

def distance(a: Components, b: Components) -> float:
    return magnitude(sub(a, b))

def lerp(a: Components, b: Components, t: float) -> Components:
    """Componentwise t*(b - a) + a. t outside [0, 1] extrapolates."""
    return tuple(scalar_lerp(ai, bi, t) for ai, bi in zip(a, b))

def project(a: Components, b: Components) -> Components:
    """Projection of a onto b: (a.b / |b|^2) * b."""
    return scale(b, ieee_divide(dot(a, b), magnitude_squared(b)))

def project_on_plane(v: Components, normal: Components) -> Components:
    """Component of v lying in the plane whose normal is `normal`."""
    return sub(v, project(v, normal))

def angle_between(a: Components, b: Components) -> float:
    """
    Angle in radians between a and b.

    The cosine is clamped to [-1, 1] because rounding can push it just past
    the domain of acos. A NaN cosine (zero-length operand) stays NaN.
    """
    cosine = ieee_divide(dot(a, b), magnitude(a) * magnitude(b))
    return math.acos(clamp(cosine, -1.0, 1.0))

def cross(a: Components, b: Components) -> Components:
    """Right-handed cross product of two 3 component tuples."""
    ax, ay, az = a
    bx, by, bz = b
    return (
        ay * bz - az * by,
        az * bx - ax * bz,
        ax * by - ay * bx,
    )
