"""Per-frame CSV log of the engine output and its plots."""
from __future__ import annotations
import csv
import math

import pandas as pd
import matplotlib.pyplot as plt

from ..core.engine import Frame

COLUMNS = [
    "time",
    "azt_deg", "elt_deg", "azr_deg", "elr_deg",
    "j_deg", "J_deg", "E_deg", "F_deg", "G_deg",
    "hud_x", "hud_y", "offset_deg",
]


class FrameLog:
    """Appends one row per ``interval`` seconds to ``path``."""
    def __init__(self, path: str = "hud_log.csv", interval: float = 0.05):
        self.path = path
        self.interval = interval
        self._next_log_time = 0.0
        with open(self.path, "w", newline="") as f:
            csv.writer(f).writerow(COLUMNS)

    def log_step(self, t: float, fr: Frame) -> bool:
        if t < self._next_log_time:
            return False
        self._next_log_time = t + self.interval
        a = fr.angles
        deg = [math.degrees(v) for v in (*fr.target, *fr.forward,
                                         a.j, a.J, a.E, a.F, a.G)]
        with open(self.path, "a", newline="") as f:
            csv.writer(f).writerow([
                round(t, 4),
                *(round(v, 2) for v in deg),
                round(fr.hud.x, 1), round(fr.hud.y, 1),
                round(math.degrees(fr.offset), 2),
            ])
        return True


def plot_logs(csv_path: str = "hud_log.csv", show: bool = True) -> list:
    """
    Three figures from the log:
    1) bearings of target and nose; 2) spherical angles; 3) HUD marker track.
    """
    df = pd.read_csv(csv_path)

    # --- 1. bearings ------------------------------------------------
    f1 = plt.figure("bearings")
    plt.title("Target / nose bearings (°)")
    for col in ("azt_deg", "elt_deg", "azr_deg", "elr_deg"):
        plt.plot(df["time"], df[col], label=col[:-4])
    plt.ylabel("angle, °");  plt.xlabel("t, s");  plt.legend();  plt.grid()

    # --- 2. spherical angles ----------------------------------------
    f2 = plt.figure("angles")
    plt.title("Spherical angles (°)")
    for col in ("j_deg", "J_deg", "E_deg", "F_deg", "G_deg"):
        plt.plot(df["time"], df[col], label=col[:-4])
    plt.plot(df["time"], df["offset_deg"], "--", label="offset")
    plt.ylabel("angle, °");  plt.xlabel("t, s");  plt.legend();  plt.grid()

    # --- 3. HUD marker ----------------------------------------------
    f3 = plt.figure("hud")
    plt.title("HUD marker track (px)")
    plt.plot(df["hud_x"], df["hud_y"], "-o", markersize=2)
    plt.gca().invert_yaxis()
    plt.axis("equal");  plt.xlabel("x");  plt.ylabel("y");  plt.grid()

    if show:
        plt.show()
    return [f1, f2, f3]
