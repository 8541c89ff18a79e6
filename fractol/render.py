"""Escape-time computation and colouring of fractal images."""

from __future__ import annotations

from fractol.complexmath import norm, scale, square
from fractol.model import Fractal, FractalKind

WIDTH = 800
HEIGHT = 800


def get_color(iteration: int, max_iterations: int, kind: FractalKind) -> int:
    """Return the 0xRRGGBB colour for an escape count."""
    t = iteration / max_iterations if max_iterations else 0.0
    u = 1 - t
    if kind is FractalKind.MANDELBROT:
        red = 255 - int(2 * u * t * t * 100)
        green = 255 - int(18 * u * u * t * t * 180)
        blue = 255 - int(9 * u * u * u * t * 220)
    else:
        red = 255 - int(16 * u * t * t * 220)
        green = 255 - int(12 * u * u * t * 130)
        blue = 255
    return (red << 16) | (green << 8) | blue


def escape_iterations(fractal: Fractal, x: int, y: int, width: int, height: int) -> int:
    """Count the iterations before the orbit of pixel ``(x, y)`` escapes."""
    z = complex(
        scale(x, -2, 2, width) * fractal.zoom + fractal.shift_x,
        scale(y, 2, -2, height) * fractal.zoom + fractal.shift_y,
    )
    c = fractal.julia if fractal.kind is FractalKind.JULIA else z
    for i in range(fractal.iterations):
        z = square(z) + c
        if norm(z) > fractal.escape_value:
            return i
    return max(fractal.iterations, 0)


def render(fractal: Fractal, width: int = WIDTH, height: int = HEIGHT) -> list[list[int]]:
    """Return the image as rows of 0xRRGGBB colours, top row first."""
    return [
        [
            get_color(escape_iterations(fractal, x, y, width, height), fractal.iterations, fractal.kind)
            for x in range(width)
        ]
        for y in range(height)
    ]