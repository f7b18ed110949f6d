"""One-call-per-frame pipeline: positions + attitude → bearings, angles, HUD point."""
from __future__ import annotations
from typing import NamedTuple

import numpy as np

from .bearing import BearingPair, bearing_of, bearing_of_direction
from .hud import HudConfig, HudPoint, project
from .orientation import forward_vector
from .spherical import SphericalAngles, solve
from .utils import Vec3, angle_between


class Frame(NamedTuple):
    target: BearingPair        # AzT, ElT
    forward: BearingPair       # AzR, ElR
    forward_vec: Vec3
    angles: SphericalAngles
    hud: HudPoint
    offset: float              # true angle between nose and line of sight, rad


def evaluate(observer, target, yaw: float, pitch: float, roll: float,
             cfg: HudConfig = HudConfig()) -> Frame:
    tb  = bearing_of(observer, target)
    fwd = forward_vector(yaw, pitch, roll)
    fb  = bearing_of_direction(fwd)
    ang = solve(tb, fb)
    hud = project(ang.j, ang.G, roll, cfg.center,
                  cfg.kpix, cfg.max_radius_frac, cfg.height)
    los = np.asarray(target, float) - np.asarray(observer, float)
    return Frame(tb, fb, fwd, ang, hud, angle_between(fwd, los))
