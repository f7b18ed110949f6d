#!/usr/bin/env python3
"""
Run: HUD window + MuJoCo 3D view.
CLI:
  --observer 0 0 2  --target 8 6 4  --ypr 20 -5 15   # degrees
  --kpix 220 --max-radius 0.45 --size 1280 720
  --headless          # HUD only, no 3D viewer
  --once              # print one frame of readouts and exit
  --log hud_log.csv --plot
"""
import argparse, threading, time
from pathlib import Path

from .core.engine import evaluate
from .core.hud import HudConfig, KPIX, MAX_R_FRAC, SCREEN_W, SCREEN_H
from .display.controls import new_scene, OBSERVER0, TARGET0, YPR0_DEG
from .display.view import readouts, run_hud_loop, snapshot
from .sim.log import FrameLog, plot_logs
from .sim.world import WorldProc, XML_PATH

FPS = 60.0

def mujoco_worker(cfg, shared):
    world = WorldProc(cfg.xml, headless=cfg.headless)
    try:
        while shared["running"] and world.running():
            world.set_pose(*snapshot(shared))
            world.sync()
            time.sleep(1.0/FPS)
    finally:
        world.close()
        shared["running"] = False

def main(argv=None):
    pa = argparse.ArgumentParser("bearing-hud")
    pa.add_argument("--observer", type=float, nargs=3, default=OBSERVER0, metavar=("X", "Y", "Z"))
    pa.add_argument("--target",   type=float, nargs=3, default=TARGET0,   metavar=("X", "Y", "Z"))
    pa.add_argument("--ypr",      type=float, nargs=3, default=YPR0_DEG,
                    metavar=("YAW", "PITCH", "ROLL"), help="attitude, °")
    pa.add_argument("--kpix", type=float, default=KPIX, help="HUD px per radian")
    pa.add_argument("--max-radius", type=float, default=MAX_R_FRAC, help="HUD radius clamp, fraction of height")
    pa.add_argument("--size", type=int, nargs=2, default=(SCREEN_W, SCREEN_H), metavar=("W", "H"))
    pa.add_argument("--xml", type=Path, default=XML_PATH)
    pa.add_argument("--headless", action="store_true", help="no MuJoCo viewer")
    pa.add_argument("--once", action="store_true", help="print readouts for the given state and exit")
    pa.add_argument("--log", default="hud_log.csv")
    pa.add_argument("--plot", action="store_true", help="plot the log on exit")
    cfg = pa.parse_args(argv)

    hud = HudConfig(cfg.kpix, cfg.max_radius, *cfg.size)
    scene = new_scene(cfg.observer, cfg.target, cfg.ypr)

    if cfg.once:
        fr = evaluate(scene["observer"], scene["target"],
                      scene["yaw"], scene["pitch"], scene["roll"], hud)
        for line in readouts(fr):
            print(line)
        print(f"HUD=({fr.hud.x:.1f}, {fr.hud.y:.1f}) px")
        return 0

    shared = {"scene": scene, "running": True, "lock": threading.Lock()}
    th = threading.Thread(target=mujoco_worker, args=(cfg, shared), daemon=True)
    th.start()

    log = FrameLog(cfg.log)
    t0 = time.monotonic()
    try:
        for fr in run_hud_loop(hud, shared):
            log.log_step(time.monotonic() - t0, fr)
    except KeyboardInterrupt:
        print("Session interrupted by user.")
    finally:
        shared["running"] = False
        th.join(timeout=1.0)
        print(f"Frame log written to {cfg.log}")
        if cfg.plot:
            plot_logs(cfg.log)
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
