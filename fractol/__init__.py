"""Mandelbrot and Julia set rendering with an interactive pygame viewer."""

__version__ = "0.1.0"