"""Keyboard controls and the OpenCV HUD window."""
