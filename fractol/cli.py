"""Command-line entry point that opens an interactive fractal window."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from fractol.model import Fractal, FractalKind, Key
from fractol.parsing import parse_decimal
from fractol.render import HEIGHT, WIDTH, render

USAGE = "Usage: ./fractol <fractal_type> <real> <image>"


class UsageError(Exception):
    """Raised when the command-line arguments are not understood."""


def parse_args(argv: Sequence[str]) -> Fractal:
    """Build a fractal view from arguments (without the program name)."""
    args = list(argv)
    if len(args) == 1 and args[0] == FractalKind.MANDELBROT.value:
        return Fractal(FractalKind.MANDELBROT)
    if len(args) == 3 and args[0] == FractalKind.JULIA.value:
        return Fractal(
            FractalKind.JULIA,
            julia=complex(parse_decimal(args[1]), parse_decimal(args[2])),
        )
    raise UsageError(USAGE)


def _key_map(pygame) -> dict[int, Key]:
    return {
        pygame.K_ESCAPE: Key.ESCAPE,
        pygame.K_LEFT: Key.LEFT,
        pygame.K_RIGHT: Key.RIGHT,
        pygame.K_UP: Key.UP,
        pygame.K_DOWN: Key.DOWN,
        pygame.K_4: Key.MORE_ITERATIONS,
        pygame.K_MINUS: Key.FEWER_ITERATIONS,
        pygame.K_r: Key.RESET,
    }


def _draw(pygame, screen, fractal: Fractal) -> None:
    pixels = bytearray()
    for row in render(fractal, WIDTH, HEIGHT):
        for color in row:
            pixels += color.to_bytes(3, "big")
    image = pygame.image.frombuffer(bytes(pixels), (WIDTH, HEIGHT), "RGB")
    screen.blit(image, (0, 0))
    pygame.display.flip()


def run(fractal: Fractal) -> None:
    """Show the fractal in a window and react to input until it is closed."""
    import pygame

    pygame.init()
    try:
        screen = pygame.display.set_mode((WIDTH, HEIGHT))
        pygame.display.set_caption(fractal.name)
        keys = _key_map(pygame)
        _draw(pygame, screen, fractal)
        while True:
            event = pygame.event.wait()
            if event.type == pygame.QUIT:
                return
            if event.type == pygame.KEYDOWN:
                if not fractal.handle_key(keys.get(event.key)):
                    return
                _draw(pygame, screen, fractal)
            elif event.type == pygame.MOUSEBUTTONDOWN:
                fractal.handle_button(event.button)
                _draw(pygame, screen, fractal)
    finally:
        pygame.quit()


def main(argv: Sequence[str] | None = None) -> int:
    """Parse arguments and run the viewer; return the exit status."""
    if argv is None:
        argv = sys.argv[1:]
    try:
        fractal = parse_args(argv)
    except UsageError as error:
        print(f"Error\n{error}", file=sys.stderr)
        return 0
    run(fractal)
    return 0


if __name__ == "__main__":
    sys.exit(main())