"""Keyboard handling: key codes and the changes they make to the viewer state."""

from __future__ import annotations

from enum import IntEnum

from fractview.state import DEFAULT_ZOOM, Env, Fractal

ZOOM_FACTOR = 1.1
MOVE_STEP = 50
MIN_ZOOM_OUT_ITERATIONS = 25


class Key(IntEnum):
    """Keyboard codes the viewer reacts to."""

    ONE = 18
    TWO = 19
    THREE = 20
    FOUR = 21
    FIVE = 23
    PLUS = 24
    MINUS = 27
    ZERO = 29
    F = 3
    G = 5
    V = 9
    B = 11
    E = 14
    R = 15
    SPACE = 49
    ESCAPE = 53
    KP_PLUS = 69
    KP_MINUS = 78
    KP_0 = 82
    KP_1 = 83
    KP_2 = 84
    KP_3 = 85
    KP_4 = 86
    LEFT = 123
    RIGHT = 124
    DOWN = 125
    UP = 126


_ZOOM_KEYS = frozenset({Key.KP_PLUS, Key.KP_MINUS, Key.PLUS, Key.MINUS})
_COLOR_KEYS = frozenset({Key.F, Key.G, Key.V, Key.B, Key.E, Key.R})
_RESET_KEYS = frozenset({Key.KP_0, Key.ZERO})

_FRACTAL_KEYS = {
    Key.KP_1: Fractal.MANDELBROT,
    Key.KP_2: Fractal.JULIA,
    Key.KP_3: Fractal.BURNING_SHIP,
}

_JULIA_PRESETS = {
    Key.ONE: (0.285, -0.013),
    Key.TWO: (-0.129, -0.768),
    Key.THREE: (-0.823, -0.134),
    Key.FOUR: (-0.255, 0.756),
    Key.FIVE: (0.371, -0.1),
}

_REDRAW_KEYS = frozenset(
    {
        Key.KP_PLUS, Key.KP_MINUS,
        Key.LEFT, Key.RIGHT, Key.DOWN, Key.UP,
        Key.KP_0, Key.KP_1, Key.KP_2, Key.KP_3, Key.KP_4,
        Key.R, Key.E, Key.F, Key.G, Key.B, Key.V,
        Key.ONE, Key.TWO, Key.THREE, Key.FOUR, Key.FIVE,
        Key.PLUS, Key.MINUS, Key.ZERO,
    }
)


def triggers_redraw(key: int) -> bool:
    """Whether pressing this key changes the picture."""
    return key in _REDRAW_KEYS


def zoom(env: Env, key: int) -> None:
    """Zoom in or out, or change the iteration limit."""
    if key == Key.KP_PLUS:
        env.zoom *= ZOOM_FACTOR
        env.it_max += 1
    elif key == Key.KP_MINUS:
        env.zoom /= ZOOM_FACTOR
        if env.it_max > MIN_ZOOM_OUT_ITERATIONS:
            env.it_max -= 1
    elif key == Key.PLUS:
        env.it_max += 1
    elif key == Key.MINUS:
        if env.it_max > 1:
            env.it_max -= 1


def move(env: Env, key: int) -> None:
    """Pan the view by a fixed number of pixels."""
    step = MOVE_STEP / env.zoom
    if key == Key.RIGHT:
        env.x_min -= step
    elif key == Key.LEFT:
        env.x_min += step
    elif key == Key.DOWN:
        env.y_min -= step
    elif key == Key.UP:
        env.y_min += step


def select_fractal(env: Env, key: int) -> None:
    """Switch fractal and restore its default view and zoom."""
    fractal = _FRACTAL_KEYS.get(key)
    if fractal is not None:
        env.fractal = fractal
    env.reset_view()
    env.zoom = DEFAULT_ZOOM


def select_julia_preset(env: Env, key: int) -> None:
    """Set the Julia parameter to one of the preset shapes."""
    preset = _JULIA_PRESETS.get(key)
    if preset is not None:
        env.c_r, env.c_i = preset


def handle_key(env: Env, key: int) -> None:
    """Apply the effect of one key press to the state."""
    if key in _ZOOM_KEYS:
        zoom(env, key)
    elif Key.LEFT <= key <= Key.UP:
        move(env, key)
    elif Key.KP_1 <= key <= Key.KP_3:
        select_fractal(env, key)
    elif key in _RESET_KEYS:
        env.reset_color()
        env.reset_view()
        env.zoom = DEFAULT_ZOOM
    elif Key.ONE <= key <= Key.FIVE and env.fractal is Fractal.JULIA:
        env.reset_view()
        select_julia_preset(env, key)
    elif key in _COLOR_KEYS:
        env.adjust_color(key)
    elif key == Key.KP_4:
        env.toggle_palette()