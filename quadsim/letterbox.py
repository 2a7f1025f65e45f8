"""Fitting a fixed-size virtual screen into a window with letterbox bars."""

from __future__ import annotations

from typing import Iterable

from quadsim.geometry import Rect, Vec2

VIRTUAL_WIDTH = 1280.0
VIRTUAL_HEIGHT = 720.0


def letterbox_scale(
    screen_w: float,
    screen_h: float,
    virtual_w: float = VIRTUAL_WIDTH,
    virtual_h: float = VIRTUAL_HEIGHT,
) -> float:
    """Largest scale at which the virtual screen fits inside the window."""
    if virtual_w <= 0 or virtual_h <= 0:
        raise ValueError("virtual screen dimensions must be positive")
    if screen_w <= 0 or screen_h <= 0:
        raise ValueError("window dimensions must be positive")
    return min(screen_w / virtual_w, screen_h / virtual_h)


def letterbox_rect(
    screen_w: float,
    screen_h: float,
    virtual_w: float = VIRTUAL_WIDTH,
    virtual_h: float = VIRTUAL_HEIGHT,
) -> Rect:
    """Where the scaled virtual screen is drawn, centred in the window."""
    scale = letterbox_scale(screen_w, screen_h, virtual_w, virtual_h)
    width, height = virtual_w * scale, virtual_h * scale
    return Rect((screen_w - width) * 0.5, (screen_h - height) * 0.5, width, height)


def virtual_mouse_position(
    mouse: Iterable[float],
    screen_w: float,
    screen_h: float,
    virtual_w: float = VIRTUAL_WIDTH,
    virtual_h: float = VIRTUAL_HEIGHT,
) -> Vec2:
    """Map a window mouse position to virtual-screen coordinates."""
    mouse_x, mouse_y = mouse
    scale = letterbox_scale(screen_w, screen_h, virtual_w, virtual_h)
    return Vec2(
        (mouse_x - (screen_w - virtual_w * scale) * 0.5) / scale,
        (mouse_y - (screen_h - virtual_h * scale) * 0.5) / scale,
    )