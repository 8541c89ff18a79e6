"""State of a fractal view and how input events change it."""

from __future__ import annotations

import enum
from dataclasses import dataclass

DEFAULT_ESCAPE_VALUE = 4.0
DEFAULT_ITERATIONS = 42
ITERATION_STEP = 10
PAN_FACTOR = 0.5
ZOOM_IN_FACTOR = 0.95
ZOOM_OUT_FACTOR = 1.05


class FractalKind(enum.Enum):
    """The fractal families that can be drawn."""

    MANDELBROT = "mandelbrot"
    JULIA = "julia"


class Key(enum.Enum):
    """Keyboard commands understood by a fractal view."""

    ESCAPE = "escape"
    LEFT = "left"
    RIGHT = "right"
    UP = "up"
    DOWN = "down"
    MORE_ITERATIONS = "4"
    FEWER_ITERATIONS = "-"
    RESET = "r"


class Button(enum.IntEnum):
    """Mouse buttons that change the zoom."""

    SCROLL_UP = 4
    SCROLL_DOWN = 5


@dataclass
class Fractal:
    """Parameters of the current view."""

    kind: FractalKind
    julia: complex = 0j
    escape_value: float = DEFAULT_ESCAPE_VALUE
    iterations: int = DEFAULT_ITERATIONS
    shift_x: float = 0.0
    shift_y: float = 0.0
    zoom: float = 1.0

    @property
    def name(self) -> str:
        return self.kind.value

    def reset(self) -> None:
        """Restore the default view parameters."""
        self.escape_value = DEFAULT_ESCAPE_VALUE
        self.iterations = DEFAULT_ITERATIONS
        self.shift_x = 0.0
        self.shift_y = 0.0
        self.zoom = 1.0

    def handle_key(self, key: Key | None) -> bool:
        """Apply a key press; return False when the view should close."""
        step = PAN_FACTOR * self.zoom
        if key is Key.ESCAPE:
            return False
        if key is Key.LEFT:
            self.shift_x -= step
        elif key is Key.RIGHT:
            self.shift_x += step
        elif key is Key.UP:
            self.shift_y += step
        elif key is Key.DOWN:
            self.shift_y -= step
        elif key is Key.MORE_ITERATIONS:
            self.iterations += ITERATION_STEP
        elif key is Key.FEWER_ITERATIONS:
            self.iterations -= ITERATION_STEP
        elif key is Key.RESET:
            self.reset()
        return True

    def handle_button(self, button: int) -> None:
        """Apply a mouse button press; wheel buttons change the zoom."""
        if button == Button.SCROLL_DOWN:
            self.zoom *= ZOOM_IN_FACTOR
        elif button == Button.SCROLL_UP:
            self.zoom *= ZOOM_OUT_FACTOR