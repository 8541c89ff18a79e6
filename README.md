# fractol

An interactive viewer for the Mandelbrot set and Julia sets. It opens an
800×800 window with pygame. Each point is coloured by how quickly its orbit
under z → z² + c escapes.

## Installation

```
pip install .
```

## Usage

Show the Mandelbrot set:

```
fractol mandelbrot
```

Show a Julia set. Give the real and imaginary parts of the constant `c`:

```
fractol julia -0.8 0.156
```

Any other arguments print `Error` and a usage line to standard error, and
the program exits with status 0 without opening a window.

The two numbers are read leniently by `fractol.parsing.parse_decimal`.
Leading whitespace is skipped. A run of `+` and `-` signs is allowed, and
each `-` flips the sign. The characters after that are not checked. Each one
counts as a digit by its offset from `'0'`, so write plain decimals.

## Controls

| Input            | Action                                    |
|------------------|-------------------------------------------|
| Arrow keys       | Move the view                             |
| `4`              | Add 10 to the iteration limit             |
| `-`              | Take 10 off the iteration limit           |
| `r`              | Reset the view to its defaults            |
| Mouse wheel up   | Zoom out (zoom × 1.05)                    |
| Mouse wheel down | Zoom in (zoom × 0.95)                     |
| `Esc` / close    | Quit                                      |

Each pan step is half the current zoom factor. Every step therefore moves
the view by the same share of what is on screen.

A new view starts with these settings:

- zoom 1.0
- no shift
- an iteration limit of 42
- an escape threshold of 4 on |z|²

The whole image is computed again after every key press or mouse button
press.

## Library use

The computation works without a window:

- `fractol.model.Fractal` holds the view state: `kind` (a `FractalKind`),
  `julia`, `escape_value`, `iterations`, `shift_x`, `shift_y` and `zoom`.
  - `reset()` restores the defaults.
  - `handle_key(key)` takes a `Key` member. It returns `False` for
    `Key.ESCAPE`.
  - `handle_button(button)` takes a button number. `Button.SCROLL_UP` is 4
    and `Button.SCROLL_DOWN` is 5.
- `fractol.render` has the rendering functions:
  - `render(fractal, width, height)` returns the image as rows of `0xRRGGBB`
    integers, top row first.
  - `escape_iterations` gives the escape count for one pixel.
  - `get_color` maps an escape count to a colour.
- `fractol.complexmath` provides `scale`, `square` and `norm`, the helpers
  the renderer uses.
- `fractol.cli.parse_args(argv)` builds a `Fractal` from the arguments. It
  raises `UsageError` for arguments it does not accept.
- `fractol.cli.run(fractal)` opens the window.

```python
from fractol.model import Fractal, FractalKind
from fractol.render import render

view = Fractal(FractalKind.JULIA, julia=complex(-0.8, 0.156))
rows = render(view, 80, 60)
```

## Limitations

The program only shows the image on screen. It cannot save the image to a
file. The window size is fixed at 800×800.

## Running the tests

```
pip install .[test]
pytest
```