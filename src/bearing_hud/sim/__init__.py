"""MuJoCo scene and the per-frame CSV log."""
