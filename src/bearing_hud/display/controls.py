"""
Keyboard → scene state.

  aircraft   I/K  ±Y    J/L  -X/+X    U/O  ±Z
  target     W/S  ±Y    A/D  -X/+X    Q/E  ±Z
  yaw        ←/→        pitch ↑/↓     roll Z/X
  Esc        quit
"""
from __future__ import annotations

import numpy as np

from ..core.orientation import Orientation
from ..core.utils import to_degrees, to_radians, wrap_rad

# ─────────────────── rates ───────────────────
MOVE_SPEED = 5.0                  # units / s
ROT_SPEED  = to_radians(45.0)     # rad / s

# ─────────────────── initial scene ───────────────────
OBSERVER0 = (0.0, 0.0, 2.0)
TARGET0   = (8.0, 6.0, 4.0)
YPR0_DEG  = (20.0, -5.0, 15.0)

KEY_ESC = 27
# cv2.waitKeyEx codes: GTK/Qt, Windows, macOS
KEY_LEFT  = (65361, 2424832, 63234)
KEY_UP    = (65362, 2490368, 63232)
KEY_RIGHT = (65363, 2555904, 63235)
KEY_DOWN  = (65364, 2621440, 63233)

MOVES = {   # key -> (entity, axis, sign)
    "i": ("observer", 1, +1), "k": ("observer", 1, -1),
    "j": ("observer", 0, -1), "l": ("observer", 0, +1),
    "u": ("observer", 2, +1), "o": ("observer", 2, -1),
    "w": ("target",   1, +1), "s": ("target",   1, -1),
    "a": ("target",   0, -1), "d": ("target",   0, +1),
    "q": ("target",   2, +1), "e": ("target",   2, -1),
}
TURNS = {   # key -> (attitude angle, sign)
    **{k: ("yaw",   -1) for k in KEY_LEFT},
    **{k: ("yaw",   +1) for k in KEY_RIGHT},
    **{k: ("pitch", +1) for k in KEY_UP},
    **{k: ("pitch", -1) for k in KEY_DOWN},
    ord("z"): ("roll", -1), ord("Z"): ("roll", -1),
    ord("x"): ("roll", +1), ord("X"): ("roll", +1),
}

HELP = ("Controls: Aircraft I/K J/L U/O, Target W/S A/D Q/E, "
        "Yaw/Pitch Arrows, Roll Z/X, Orbit Cam in 3D view, Esc quits")


def new_scene(observer=OBSERVER0, target=TARGET0, ypr_deg=YPR0_DEG) -> dict:
    yaw, pitch, roll = (to_radians(a) for a in ypr_deg)
    return {
        "observer": np.array(observer, float),
        "target":   np.array(target, float),
        "yaw": yaw, "pitch": pitch, "roll": roll,
    }


def attitude(scene: dict) -> Orientation:
    return Orientation(scene["yaw"], scene["pitch"], scene["roll"])


def apply_key(scene: dict, key: int, dt: float) -> bool:
    """Nudge ``scene`` in place for one key press held ``dt`` seconds.

    Returns False for keys that are not bound.
    """
    if key in TURNS:
        name, sign = TURNS[key]
        scene[name] = wrap_rad(scene[name] + sign*ROT_SPEED*dt)
        return True
    if 0 <= key < 256 and chr(key).lower() in MOVES:
        ent, axis, sign = MOVES[chr(key).lower()]
        scene[ent][axis] += sign*MOVE_SPEED*dt
        return True
    return False


def heading_deg(scene: dict) -> tuple[float, float, float]:
    return tuple(to_degrees(a) for a in attitude(scene))
