"""Viewer state: which fractal is shown, the visible region and the colours."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import NamedTuple

DEFAULT_ZOOM = 300.0
WHITE = 0xFFFFFF
COLOR_STEP = 5
CHANNEL_MAX = 255

# Centre of the window and scale used when the pointer steers the Julia set.
_POINTER_CENTER_X = 750
_POINTER_CENTER_Y = 500
_POINTER_SCALE_X = 650
_POINTER_SCALE_Y = 500


class Fractal(Enum):
    """The fractals the viewer can draw."""

    MANDELBROT = 1
    JULIA = 2
    BURNING_SHIP = 3


_NAMES = {
    "Mandelbrot": Fractal.MANDELBROT,
    "mandelbrot": Fractal.MANDELBROT,
    "Julia": Fractal.JULIA,
    "julia": Fractal.JULIA,
    "Burning ship": Fractal.BURNING_SHIP,
    "burning ship": Fractal.BURNING_SHIP,
}


def parse_fractal(name: str) -> Fractal:
    """Return the fractal named on the command line; raise ValueError otherwise."""
    try:
        return _NAMES[name]
    except KeyError:
        raise ValueError(f"unknown fractal: {name!r}") from None


class _View(NamedTuple):
    x_min: float
    x_max: float
    y_min: float
    y_max: float
    it_max: int
    julia_c: tuple[float, float] | None = None


_VIEWS = {
    Fractal.MANDELBROT: _View(-2.3, 0.6, -1.5, 1.2, 50),
    Fractal.JULIA: _View(-2.0, 2.0, -1.6, 1.2, 80, (-0.8, -0.2)),
    Fractal.BURNING_SHIP: _View(-2.2, 1.0, -2.0, 1.2, 50),
}

# key code -> (channel attribute, signed step)
_COLOR_KEYS = {
    15: ("r", COLOR_STEP),
    14: ("r", -COLOR_STEP),
    5: ("g", COLOR_STEP),
    3: ("g", -COLOR_STEP),
    11: ("b", COLOR_STEP),
    9: ("b", -COLOR_STEP),
}


@dataclass
class Env:
    """Everything needed to draw one frame and react to input."""

    fractal: Fractal
    zoom: float = DEFAULT_ZOOM
    space: bool = True
    palette: bool = False
    color: int = WHITE
    r: int = 0
    g: int = 0
    b: int = 0
    x_min: float = field(init=False, default=0.0)
    x_max: float = field(init=False, default=0.0)
    y_min: float = field(init=False, default=0.0)
    y_max: float = field(init=False, default=0.0)
    c_r: float = field(init=False, default=0.0)
    c_i: float = field(init=False, default=0.0)
    it_max: int = field(init=False, default=0)

    def __post_init__(self) -> None:
        self.reset_view()

    def reset_view(self) -> None:
        """Restore the current fractal's default region and iteration limit.

        The zoom factor is left as it is.
        """
        view = _VIEWS[self.fractal]
        self.x_min = view.x_min
        self.x_max = view.x_max
        self.y_min = view.y_min
        self.y_max = view.y_max
        self.it_max = view.it_max
        if view.julia_c is not None:
            self.c_r, self.c_i = view.julia_c

    def reset_color(self) -> None:
        """Restore the text colour and clear the colour offsets."""
        self.color = WHITE
        self.r = 0
        self.g = 0
        self.b = 0

    def adjust_color(self, key: int) -> None:
        """Raise or lower one colour channel by a step, within 0..255."""
        entry = _COLOR_KEYS.get(int(key))
        if entry is None:
            return
        channel, step = entry
        value = getattr(self, channel)
        if (step > 0 and value < CHANNEL_MAX) or (step < 0 and value > 0):
            setattr(self, channel, value + step)

    def toggle_palette(self) -> None:
        """Switch between the plain gradient and the banded palette."""
        self.palette = not self.palette

    def follow_pointer(self, x: float, y: float) -> bool:
        """Steer the Julia parameter with the pointer.

        Returns True when the parameter changed and the frame must be redrawn.
        """
        if self.fractal is not Fractal.JULIA or not self.space:
            return False
        self.reset_view()
        self.c_r = (float(x) - _POINTER_CENTER_X) / _POINTER_SCALE_X
        self.c_i = -(float(y) - _POINTER_CENTER_Y) / _POINTER_SCALE_Y
        return True