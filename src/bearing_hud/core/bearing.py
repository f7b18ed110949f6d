"""Azimuth / elevation of a point or a direction.

Azimuth is measured from the +Y axis towards +X, i.e. ``atan2(x, y)``.
Everything downstream (the C, D and E terms of the spherical solver) is
calibrated to that argument order, so it must not be flipped to atan2(y, x).
"""
from __future__ import annotations
import math
from typing import NamedTuple

import numpy as np


class BearingPair(NamedTuple):
    az: float   # rad, (-pi, pi]
    el: float   # rad, [-pi/2, pi/2]


def bearing_of_direction(v) -> BearingPair:
    """Bearing of direction ``v`` in world axes. No normalization needed."""
    x, y, z = (float(c) for c in v)
    az = math.atan2(x, y)
    el = math.atan2(z, math.hypot(x, y))
    return BearingPair(az, el)


def bearing_of(origin, point) -> BearingPair:
    """Bearing of ``point`` as seen from ``origin``.

    A point coincident with the origin gives (0, 0).
    """
    d = np.asarray(point, float) - np.asarray(origin, float)
    return bearing_of_direction(d)
