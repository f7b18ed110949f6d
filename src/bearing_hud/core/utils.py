"""Angle conversions, clamped inverse trig and a small 3-vector."""
from __future__ import annotations
import math
from typing import NamedTuple

wrap_deg = lambda a: -((-a+180.)%360.-180.)
wrap_rad = lambda a: -((-a+math.pi)%(2*math.pi)-math.pi)

def to_radians(deg: float) -> float: return deg*math.pi/180.0
def to_degrees(rad: float) -> float: return rad*180.0/math.pi


def clamped_acos(x: float) -> float:
    """acos with the argument saturated to [-1, 1] (→ 0 or π, never ValueError)."""
    return math.acos(max(-1.0, min(1.0, x)))


def clamped_asin(x: float) -> float:
    """asin with the argument saturated to [-1, 1] (→ ±π/2)."""
    return math.asin(max(-1.0, min(1.0, x)))


class Vec3(NamedTuple):
    x: float
    y: float
    z: float

def dot(a, b) -> float:   return a[0]*b[0] + a[1]*b[1] + a[2]*b[2]
def cross(a, b) -> Vec3:
    return Vec3(a[1]*b[2] - a[2]*b[1],
                a[2]*b[0] - a[0]*b[2],
                a[0]*b[1] - a[1]*b[0])

def normalize(v) -> Vec3:
    """Unit vector along v; a zero-length v comes back unchanged."""
    n = math.sqrt(dot(v, v))
    if n > 0:
        return Vec3(v[0]/n, v[1]/n, v[2]/n)
    return Vec3(*v)

def angle_between(a, b) -> float:
    """Unsigned angle between two vectors, 0 if either is zero."""
    c = cross(a, b)
    return math.atan2(math.sqrt(dot(c, c)), dot(a, b))
