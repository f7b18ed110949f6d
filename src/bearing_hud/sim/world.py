#!/usr/bin/env python3
"""
world.py - MuJoCo scene: aircraft and target as mocap bodies.
"""
from __future__ import annotations
from pathlib import Path

import numpy as np
import mujoco as mj
from mujoco.viewer import launch_passive

from ..core.orientation import rotation_matrix

XML_PATH = Path(__file__).parent / "world_hud.xml"

LOS_RGBA  = np.array([0.75, 0.13, 0.22, 0.6], np.float32)   # maroon, faded
LOS_WIDTH = 2.0                                              # px


def attitude_quat(yaw: float, pitch: float, roll: float) -> np.ndarray:
    """MuJoCo (w, x, y, z) quaternion of the body→world rotation."""
    quat = np.zeros(4)
    mj.mju_mat2Quat(quat, rotation_matrix(yaw, pitch, roll).flatten())
    return quat


def draw_line_of_sight(scn: mj.MjvScene, observer, target) -> None:
    """Replace the user geoms of ``scn`` with one observer→target line."""
    g = scn.geoms[0]
    mj.mjv_initGeom(g, int(mj.mjtGeom.mjGEOM_LINE), np.zeros(3), np.zeros(3),
                    np.eye(3).flatten(), LOS_RGBA)
    mj.mjv_connector(g, int(mj.mjtGeom.mjGEOM_LINE), LOS_WIDTH,
                     np.asarray(observer, float), np.asarray(target, float))
    scn.ngeom = 1


class WorldProc:
    """Loads the world, poses the mocap bodies and keeps the viewer in sync."""
    def __init__(
        self,
        xml_path: str | Path = XML_PATH,
        headless: bool = False,
        aircraft_body: str = "aircraft",
        target_body: str = "target",
    ):
        self.model = mj.MjModel.from_xml_path(str(xml_path))
        self.data  = mj.MjData(self.model)
        self.aircraft_mocap_i = self._mocap_index(aircraft_body)
        self.target_mocap_i   = self._mocap_index(target_body)
        mj.mj_forward(self.model, self.data)

        self.viewer = None
        if not headless:
            self.viewer = launch_passive(self.model, self.data)

    def _mocap_index(self, name: str) -> int:
        bid = mj.mj_name2id(self.model, mj.mjtObj.mjOBJ_BODY, name)
        if bid < 0:
            raise RuntimeError(f"Body '{name}' not found in the model. Please check your XML model.")
        i = self.model.body_mocapid[bid]
        if i < 0:
            raise RuntimeError(f"Body '{name}' is not mocap-enabled in the model. Please check your XML model.")
        return int(i)

    def set_pose(self, observer, target, yaw: float, pitch: float, roll: float) -> None:
        self.data.mocap_pos[self.aircraft_mocap_i]  = np.asarray(observer, float)
        self.data.mocap_quat[self.aircraft_mocap_i] = attitude_quat(yaw, pitch, roll)
        self.data.mocap_pos[self.target_mocap_i]    = np.asarray(target, float)
        # pose only, no dynamics: recompute kinematics so the viewer sees it
        mj.mj_forward(self.model, self.data)

    def get_aircraft_pos(self) -> np.ndarray:
        return self.data.mocap_pos[self.aircraft_mocap_i].copy()

    def get_target_pos(self) -> np.ndarray:
        return self.data.mocap_pos[self.target_mocap_i].copy()

    def running(self) -> bool:
        return self.viewer is None or self.viewer.is_running()

    def sync(self) -> None:
        if self.viewer:
            with self.viewer.lock():
                # camera orbits around the aircraft
                self.viewer.cam.lookat[:] = self.get_aircraft_pos()
                draw_line_of_sight(self.viewer.user_scn,
                                   self.get_aircraft_pos(), self.get_target_pos())
            self.viewer.sync()

    def close(self) -> None:
        if self.viewer:
            self.viewer.close()
            self.viewer = None
