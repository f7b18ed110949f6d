"""HUD projection: separation j → radius, bearing G (+ roll) → clock angle."""
from __future__ import annotations
import math
from typing import NamedTuple

# ─────────────────── defaults ───────────────────
KPIX        = 220.0        # px per radian of separation
MAX_R_FRAC  = 0.45         # radius clamp, fraction of viewport height
SCREEN_W, SCREEN_H = 1280, 720


class HudPoint(NamedTuple):
    x: float
    y: float


class HudConfig(NamedTuple):
    kpix: float = KPIX
    max_radius_frac: float = MAX_R_FRAC
    width: int = SCREEN_W
    height: int = SCREEN_H

    @property
    def center(self) -> HudPoint:
        return HudPoint(self.width/2, self.height/2)

    @property
    def max_radius(self) -> float:
        return self.max_radius_frac*self.height


def project(j: float, G: float, roll: float, center,
            pixels_per_radian: float, max_radius_frac: float,
            screen_height: float) -> HudPoint:
    """Screen position of the target marker.

    Angle 0 is straight up from ``center`` and grows clockwise; screen Y
    points down. Roll only rotates the marker, the radius depends on j alone.
    """
    r = min(pixels_per_radian*j, max_radius_frac*screen_height)
    ang = G + roll
    cx, cy = center
    return HudPoint(cx + r*math.sin(ang), cy - r*math.cos(ang))
