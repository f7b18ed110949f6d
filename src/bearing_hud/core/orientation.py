"""Observer attitude → world-space forward direction.

World is Z-up. The body's forward axis is +Y, right is +X, up is +Z.
The body→world rotation is R = Rz(yaw) · Rx(pitch) · Ry(roll).
"""
from __future__ import annotations
import math
from typing import NamedTuple

import numpy as np

from .utils import Vec3, normalize

BODY_FORWARD = np.array([0.0, 1.0, 0.0])


class Orientation(NamedTuple):
    yaw: float    # rad
    pitch: float  # rad
    roll: float   # rad


def rotation_matrix(yaw: float, pitch: float, roll: float) -> np.ndarray:
    """3x3 body→world rotation, columns are the body axes in world frame."""
    cy, sy = math.cos(yaw), math.sin(yaw)
    cp, sp = math.cos(pitch), math.sin(pitch)
    cr, sr = math.cos(roll), math.sin(roll)

    Rz = np.array([[cy, -sy, 0.0],
                   [sy,  cy, 0.0],
                   [0.0, 0.0, 1.0]])
    Rx = np.array([[1.0, 0.0, 0.0],
                   [0.0,  cp, -sp],
                   [0.0,  sp,  cp]])
    Ry = np.array([[ cr, 0.0,  sr],
                   [0.0, 1.0, 0.0],
                   [-sr, 0.0,  cr]])
    return Rz @ Rx @ Ry


def forward_vector(yaw: float, pitch: float, roll: float) -> Vec3:
    """Unit nose direction. Roll spins about this very axis, so it drops out."""
    v = rotation_matrix(yaw, pitch, roll) @ BODY_FORWARD
    return normalize(tuple(float(c) for c in v))
