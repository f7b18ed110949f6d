"""Relative-bearing HUD: angle engine, MuJoCo scene and OpenCV overlay."""
from .core import evaluate, Frame, HudConfig

__version__ = "0.1.0"
