"""Lenient decimal parsing for command-line parameters."""

from __future__ import annotations

_WHITESPACE = frozenset("\t\n\v\f\r ")


def parse_decimal(text: str) -> float:
    """Parse a decimal such as ``-0.8`` leniently.

    Leading whitespace is skipped and any run of ``+``/``-`` signs is
    accepted, each ``-`` flipping the sign. Characters are not validated:
    every character is taken as a digit by its offset from ``'0'``.
    """
    stripped = text.lstrip("".join(_WHITESPACE))
    body = stripped.lstrip("+-")
    sign = -1 if (len(stripped) - len(body) and stripped[: len(stripped) - len(body)].count("-") % 2) else 1

    whole, _, fraction = body.partition(".")
    int_part = 0
    for char in whole:
        int_part = int_part * 10 + (ord(char) - ord("0"))

    frac_part = 0.0
    power = 1.0
    for char in fraction:
        power /= 10
        frac_part += (ord(char) - ord("0")) * power

    return (int_part + frac_part) * sign