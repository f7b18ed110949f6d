"""
Bearing calculator and orientation resolver
"""

import math
import numpy as np
import pytest

from bearing_hud.core.bearing import BearingPair, bearing_of, bearing_of_direction
from bearing_hud.core.orientation import forward_vector, rotation_matrix


# ------------------ 1. azimuth convention -------------------
@pytest.mark.parametrize("point,az,el", [
    ((0, 5, 0),  0.0,            0.0),            # +Y is azimuth 0
    ((5, 0, 0),  math.pi / 2,    0.0),            # +X is +90°
    ((-5, 0, 0), -math.pi / 2,   0.0),
    ((0, -5, 0), math.pi,        0.0),
    ((0, 0, 3),  0.0,            math.pi / 2),    # straight up
    ((3, 4, 5),  math.atan2(3, 4), math.atan2(5, 5)),
])
def test_bearing_of_known(point, az, el):
    b = bearing_of((0, 0, 0), point)
    assert isinstance(b, BearingPair)
    assert math.isclose(b.az, az, abs_tol=1e-12)
    assert math.isclose(b.el, el, abs_tol=1e-12)


def test_bearing_is_relative_to_origin():
    assert bearing_of((1, 1, 1), (9, 7, 3)) == bearing_of((0, 0, 2), (8, 6, 4))


def test_coincident_point_is_zero():
    assert bearing_of((2.0, -1.0, 3.0), (2.0, -1.0, 3.0)) == (0.0, 0.0)
    assert bearing_of_direction((0.0, 0.0, 0.0)) == (0.0, 0.0)


def test_direction_is_scale_invariant():
    a = bearing_of_direction((0.3, -1.2, 0.4))
    b = bearing_of_direction((3.0, -12.0, 4.0))
    assert a == pytest.approx(b, abs=1e-12)


def test_bearing_ranges():
    rng = np.random.default_rng(7)
    for _ in range(500):
        o, p = rng.uniform(-100, 100, size=(2, 3))
        az, el = bearing_of(o, p)
        assert -math.pi < az <= math.pi
        assert -math.pi / 2 <= el <= math.pi / 2


# ------------------ 2. forward vector -----------------------
def test_forward_level_nose_is_plus_y():
    assert forward_vector(0.0, 0.0, 0.0) == pytest.approx((0.0, 1.0, 0.0), abs=1e-15)


@pytest.mark.parametrize("yaw_deg,pitch_deg", [(20, -5), (-135, 30), (90, 0), (0, 89)])
def test_forward_matches_yaw_pitch(yaw_deg, pitch_deg):
    """Nose bearing is (-yaw, pitch): yaw turns +Y towards -X."""
    yaw, pitch = math.radians(yaw_deg), math.radians(pitch_deg)
    az, el = bearing_of_direction(forward_vector(yaw, pitch, 0.7))
    assert math.isclose(az, -yaw, abs_tol=1e-9)
    assert math.isclose(el, pitch, abs_tol=1e-9)


def test_roll_does_not_move_nose():
    ref = forward_vector(0.4, -0.2, 0.0)
    for roll in np.linspace(-2 * math.pi, 2 * math.pi, 17):
        assert forward_vector(0.4, -0.2, roll) == pytest.approx(ref, abs=1e-12)


def test_forward_unit_length():
    rng = np.random.default_rng(11)
    for yaw, pitch, roll in rng.uniform(-50, 50, size=(300, 3)):
        v = forward_vector(yaw, pitch, roll)
        assert math.isclose(math.sqrt(v.x**2 + v.y**2 + v.z**2), 1.0, rel_tol=1e-12)


def test_rotation_matrix_is_orthonormal():
    R = rotation_matrix(0.3, -1.1, 2.5)
    assert np.allclose(R @ R.T, np.eye(3))
    assert math.isclose(np.linalg.det(R), 1.0)
    # roll tilts the wings: right axis leaves the horizontal plane
    assert abs(R[2, 0]) > 0.1
