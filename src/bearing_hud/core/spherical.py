"""Spherical-triangle solve for the HUD angles.

Both bearings are turned into great-circle distances from the +Y pole
(f for the target, h for the nose) and into angles about that pole (C, D).
The law of cosines then gives the separation j, and the law of sines the
angle F that, together with E, rotates the marker on the HUD:

    f = acos(cos AzT cos ElT)           h = acos(cos AzR cos ElR)
    C = atan2(tan ElT, sin AzT)         D = atan2(tan ElR, sin AzR)
    J = pi - C - D
    j = acos(cos f cos h + sin f sin h cos J)
    E = atan2(tan AzR, sin ElR)
    F = asin(sin J sin f / sin j)       (0 when |sin j| <= 1e-6)
    G = pi - E - F

The cotangent relations (cot C = sin Az / tan El, cot E = sin El / tan Az)
are solved in atan2 form so sin Az = 0 or tan El = inf land on +-pi/2
instead of dividing by zero. Nothing here raises; every finite input gives
a finite angle.
"""
from __future__ import annotations
import math
from typing import NamedTuple

from .bearing import BearingPair
from .utils import clamped_acos, clamped_asin

SINE_RULE_EPS = 1e-6


class SphericalAngles(NamedTuple):
    j: float   # separation from the nose, >= 0
    G: float   # marker bearing on the HUD (before roll)
    E: float
    F: float
    J: float


def solve(target: BearingPair, forward: BearingPair) -> SphericalAngles:
    AzT, ElT = target
    AzR, ElR = forward

    f = clamped_acos(math.cos(AzT)*math.cos(ElT))
    h = clamped_acos(math.cos(AzR)*math.cos(ElR))

    C = math.atan2(math.tan(ElT), math.sin(AzT))
    D = math.atan2(math.tan(ElR), math.sin(AzR))
    J = math.pi - C - D

    j = clamped_acos(math.cos(f)*math.cos(h) + math.sin(f)*math.sin(h)*math.cos(J))

    E = math.atan2(math.tan(AzR), math.sin(ElR))

    sj = math.sin(j)
    if abs(sj) > SINE_RULE_EPS:
        F = clamped_asin(math.sin(J)*math.sin(f)/sj)
    else:
        # target on the nose: sine rule is 0/0
        F = 0.0

    G = math.pi - E - F
    return SphericalAngles(j, G, E, F, J)
