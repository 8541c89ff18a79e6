"""Small numeric helpers used when mapping pixels onto the complex plane."""

from __future__ import annotations


def scale(value: float, new_min: float, new_max: float, old_max: float) -> float:
    """Linearly map ``value`` from ``[0, old_max]`` onto ``[new_min, new_max]``."""
    return (new_max - new_min) * (value / old_max) + new_min


def square(z: complex) -> complex:
    """Return ``z`` squared."""
    return complex(z.real * z.real - z.imag * z.imag, 2 * z.real * z.imag)


def norm(z: complex) -> float:
    """Return the squared magnitude of ``z``."""
    return z.real * z.real + z.imag * z.imag