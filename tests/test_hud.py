"""
HUD projector and the full per-frame pipeline
"""

import math
import numpy as np
import pytest

from bearing_hud.core.engine import Frame, evaluate
from bearing_hud.core.hud import HudConfig, HudPoint, project
from bearing_hud.core.orientation import forward_vector

CFG = HudConfig()                       # 220 px/rad, 0.45 H clamp, 1280x720
OBS, TGT = (0.0, 0.0, 2.0), (8.0, 6.0, 4.0)
YPR = tuple(math.radians(a) for a in (20.0, -5.0, 15.0))


# ------------------ 1. projector ----------------------------
def test_config_defaults():
    assert CFG.center == HudPoint(640.0, 360.0)
    assert math.isclose(CFG.max_radius, 0.45 * 720)


@pytest.mark.parametrize("ang,dx,dy", [
    (0.0,               0.0, -1.0),    # up
    (math.pi / 2,       1.0,  0.0),    # clockwise → right
    (math.pi,           0.0,  1.0),    # down
    (-math.pi / 2,     -1.0,  0.0),
])
def test_project_clock_convention(ang, dx, dy):
    j = 0.2
    p = project(j, ang, 0.0, (100.0, 50.0), 220.0, 0.45, 720)
    r = 220.0 * j
    assert p.x == pytest.approx(100.0 + r * dx, abs=1e-9)
    assert p.y == pytest.approx(50.0 + r * dy, abs=1e-9)


def test_roll_adds_to_bearing():
    a = project(0.3, 0.5, 0.25, (0, 0), 220.0, 0.45, 720)
    b = project(0.3, 0.75, 0.0, (0, 0), 220.0, 0.45, 720)
    assert a == pytest.approx(b)


def test_radius_clamp():
    p = project(math.pi, 1.0, 0.0, (640, 360), 220.0, 0.45, 720)
    assert math.hypot(p.x - 640, p.y - 360) == pytest.approx(0.45 * 720)


def test_zero_separation_is_center():
    assert project(0.0, 2.1, -0.7, (640, 360), 220.0, 0.45, 720) == (640.0, 360.0)


# ------------------ 2. pipeline -----------------------------
def test_evaluate_scenario1():
    fr = evaluate(OBS, TGT, *YPR, CFG)
    assert isinstance(fr, Frame)
    assert math.hypot(fr.hud.x - 640, fr.hud.y - 360) == pytest.approx(CFG.kpix * fr.angles.j)
    ang = fr.angles.G + YPR[2]
    assert fr.hud.x == pytest.approx(640 + CFG.kpix * fr.angles.j * math.sin(ang))
    assert fr.hud.y == pytest.approx(360 - CFG.kpix * fr.angles.j * math.cos(ang))
    # true line-of-sight offset: acos(fwd · los)
    los = np.subtract(TGT, OBS)
    cos_off = np.dot(fr.forward_vec, los) / np.linalg.norm(los)
    assert fr.offset == pytest.approx(math.acos(cos_off))


def test_evaluate_is_idempotent():
    assert evaluate(OBS, TGT, *YPR, CFG) == evaluate(OBS, TGT, *YPR, CFG)


def test_evaluate_accepts_arrays():
    a = evaluate(np.array(OBS), np.array(TGT), *YPR, CFG)
    assert a == evaluate(list(OBS), list(TGT), *YPR, CFG)


@pytest.mark.parametrize("roll_deg", [0.0, 33.0, 90.0, -145.0, 270.0])
def test_target_on_nose_is_center(roll_deg):
    roll = math.radians(roll_deg)
    fwd = forward_vector(0.0, math.radians(10.0), roll)
    tgt = np.add(OBS, 25.0 * np.asarray(fwd))
    fr = evaluate(OBS, tgt, 0.0, math.radians(10.0), roll, CFG)
    assert fr.angles.j == pytest.approx(0.0, abs=1e-6)
    assert math.hypot(fr.hud.x - 640, fr.hud.y - 360) < 1e-3
    assert fr.offset == pytest.approx(0.0, abs=1e-9)


def test_roll_sweep_traces_circle():
    yaw, pitch, _ = YPR
    frames = [evaluate(OBS, TGT, yaw, pitch, r, CFG)
              for r in np.linspace(0.0, 2 * math.pi, 37)]
    j0, G0 = frames[0].angles.j, frames[0].angles.G
    radius = CFG.kpix * j0
    angles = []
    for fr in frames:
        assert (fr.angles.j, fr.angles.G) == pytest.approx((j0, G0), abs=1e-12)
        dx, dy = fr.hud.x - 640, fr.hud.y - 360
        assert math.hypot(dx, dy) == pytest.approx(radius, rel=1e-9)
        angles.append(math.atan2(dx, -dy))
    # marker actually moves round the centre, first and last coincide
    assert np.ptp(np.unwrap(angles)) == pytest.approx(2 * math.pi, rel=1e-9)
    assert (frames[0].hud.x, frames[0].hud.y) == pytest.approx((frames[-1].hud.x, frames[-1].hud.y))


def test_custom_config_clamps():
    cfg = HudConfig(kpix=5000.0, max_radius_frac=0.25, width=800, height=600)
    fr = evaluate(OBS, TGT, *YPR, cfg)
    assert math.hypot(fr.hud.x - 400, fr.hud.y - 300) == pytest.approx(150.0)
