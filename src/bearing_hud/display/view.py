#!/usr/bin/env python3
"""
HUD overlay window (OpenCV): draws the engine output and reads the keyboard.
Used in main.py: for fr in run_hud_loop(cfg, shared): …
Press Esc in the window to quit.
"""
from __future__ import annotations
import math
import time

import cv2
import numpy as np

from ..core.engine import Frame, evaluate
from ..core.hud import HudConfig
from ..core.utils import to_radians, wrap_deg
from .controls import HELP, KEY_ESC, apply_key, heading_deg

WINDOW = "Bearing HUD"

# ─────────────────── colours (BGR) ───────────────────
RAYWHITE  = (245, 245, 245)
BLACK     = (0, 0, 0)
LIGHTGRAY = (200, 200, 200)
DARKGRAY  = (80, 80, 80)
MAROON    = (55, 33, 190)

RINGS_DEG = (10, 20, 30)
RETICLE_R = 12
CROSS     = 20
FONT      = cv2.FONT_HERSHEY_SIMPLEX


def readouts(fr: Frame) -> tuple[str, str]:
    d = math.degrees
    a = fr.angles
    return (
        f"AzT={d(fr.target.az):.1f} deg  ElT={d(fr.target.el):.1f} deg  "
        f"AzR={d(fr.forward.az):.1f} deg  ElR={d(fr.forward.el):.1f} deg",
        f"j={d(a.j):.2f} deg  J={d(a.J):.2f} deg  E={d(a.E):.2f} deg  "
        f"F={d(a.F):.2f} deg  G={d(a.G):.2f} deg",
    )


def draw_hud(fr: Frame, cfg: HudConfig, scene: dict | None = None,
             canvas: np.ndarray | None = None) -> np.ndarray:
    """Render one HUD frame into a (H, W, 3) uint8 image."""
    if canvas is None:
        canvas = np.full((cfg.height, cfg.width, 3), RAYWHITE, np.uint8)
    cx, cy = (int(c) for c in cfg.center)

    cv2.circle(canvas, (cx, cy), RETICLE_R, BLACK, 1, cv2.LINE_AA)
    for ring in RINGS_DEG:
        cv2.circle(canvas, (cx, cy), int(cfg.kpix*to_radians(ring)), LIGHTGRAY, 1, cv2.LINE_AA)
    cv2.line(canvas, (cx-CROSS, cy), (cx+CROSS, cy), DARKGRAY, 1)
    cv2.line(canvas, (cx, cy-CROSS), (cx, cy+CROSS), DARKGRAY, 1)

    hx, hy = int(round(fr.hud.x)), int(round(fr.hud.y))
    cv2.circle(canvas, (hx, hy), 6, MAROON, -1, cv2.LINE_AA)
    cv2.circle(canvas, (hx, hy), 10, MAROON, 1, cv2.LINE_AA)

    line1, line2 = readouts(fr)
    cv2.putText(canvas, line1, (16, 28), FONT, 0.55, BLACK, 1, cv2.LINE_AA)
    cv2.putText(canvas, line2, (16, 54), FONT, 0.55, BLACK, 1, cv2.LINE_AA)
    if scene is not None:
        yaw, pitch, roll = (wrap_deg(a) for a in heading_deg(scene))
        cv2.putText(canvas, f"yaw={yaw:+.1f}  pitch={pitch:+.1f}  roll={roll:+.1f}  "
                            f"off={math.degrees(fr.offset):.2f} deg",
                    (16, 80), FONT, 0.5, DARKGRAY, 1, cv2.LINE_AA)
    cv2.putText(canvas, HELP, (16, cfg.height-16), FONT, 0.45, DARKGRAY, 1, cv2.LINE_AA)
    return canvas


def snapshot(shared: dict) -> tuple:
    with shared["lock"]:
        sc = shared["scene"]
        return (sc["observer"].copy(), sc["target"].copy(),
                sc["yaw"], sc["pitch"], sc["roll"])


# ─────────── main generator ────────────
def run_hud_loop(cfg: HudConfig, shared: dict, wait_ms: int = 16):
    cv2.namedWindow(WINDOW)
    last = time.monotonic()
    try:
        while shared.get("running", True):
            obs, tgt, yaw, pitch, roll = snapshot(shared)
            fr = evaluate(obs, tgt, yaw, pitch, roll, cfg)
            cv2.imshow(WINDOW, draw_hud(fr, cfg, shared["scene"]))

            key = cv2.waitKeyEx(wait_ms)
            now = time.monotonic()
            dt, last = now - last, now
            if key == KEY_ESC:
                break
            if key >= 0:
                with shared["lock"]:
                    apply_key(shared["scene"], key, dt)
            if cv2.getWindowProperty(WINDOW, cv2.WND_PROP_VISIBLE) < 1:
                break
            yield fr
    finally:
        shared["running"] = False
        cv2.destroyWindow(WINDOW)
