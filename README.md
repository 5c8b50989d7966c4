# fractview

fractview computes and colours three escape-time fractals — Mandelbrot, Julia
and Burning Ship — as NumPy arrays, and keeps the state of an interactive view
of them: the visible region, the zoom, the iteration limit, the Julia parameter
and the colours. Key codes can be applied to that state the way an interactive
viewer would apply key presses.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Rendering

```python
from fractview.state import Env, parse_fractal
from fractview.render import render

env = Env(parse_fractal("julia"))
pixels = render(env, 300, 200)   # uint8 array of shape (200, 300, 3), RGB
```

`parse_fractal` accepts `Mandelbrot`, `mandelbrot`, `Julia`, `julia`,
`Burning ship` and `burning ship`, and raises `ValueError` for anything else.
The result is a member of the `Fractal` enum.

`fractview.render` has:

- `escape_counts(env, width, height)` – the iteration count of every pixel,
  from 1 up to `env.it_max`;
- `shade_plain(env, counts)` – a gradient that gets brighter with more
  iterations, black for points that never escape;
- `shade_palette(env, counts)` – a banded palette that picks a colour channel
  by iteration band;
- `render(env, width, height)` – counts plus the shading chosen by
  `env.palette`.

Width and height default to 1500 × 1100. Pixel `(x, y)` maps to the point
`x / zoom + x_min`, `y / zoom + y_min`.

## View state

`Env(fractal)` starts with the fractal's default region and iteration limit, a
zoom of 300 and white text colour. Its methods:

- `reset_view()` – restore the default region, iteration limit and (for Julia)
  parameter; the zoom is kept;
- `reset_color()` – clear the red, green and blue offsets;
- `adjust_color(key)` – raise or lower one colour offset by 5, within 0–255;
- `toggle_palette()` – switch between the plain and the banded shading;
- `follow_pointer(x, y)` – in Julia mode, while `env.space` is true, set the
  Julia parameter from a pointer position; returns whether anything changed.

## Keys

`fractview.keys.handle_key(env, key)` applies one key code (a `Key` member or
its integer value) to an `Env`. `triggers_redraw(key)` tells whether the key
changes the picture.

| Key                         | Effect                                               |
|-----------------------------|------------------------------------------------------|
| `KP_PLUS` / `KP_MINUS`      | zoom in / out by 1.1, raising / lowering the limit    |
| `PLUS` / `MINUS`            | raise / lower the iteration limit                    |
| `LEFT` `RIGHT` `UP` `DOWN`  | pan the view by 50 pixels                            |
| `KP_1` / `KP_2` / `KP_3`    | Mandelbrot / Julia / Burning Ship, default view      |
| `KP_0` or `ZERO`            | reset view, zoom and colours                         |
| `R` / `G` / `B`             | add red / green / blue                               |
| `E` / `F` / `V`             | take away red / green / blue                         |
| `ONE`–`FIVE` (Julia only)   | preset Julia parameters                              |
| `KP_4`                      | switch palette                                       |

The helpers `zoom`, `move`, `select_fractal` and `select_julia_preset` apply
one group of these on their own.

## Small utilities

- `fractview.chars` – ASCII classification (`is_alpha`, `is_digit`, …),
  `to_lower`/`to_upper`, a 32-bit `atoi`, `itoa`, `power` and `exact_sqrt`.
- `fractview.textops` – string comparison, searching, `split`, `trim`,
  `capitalize`, `join`, `substring` and `lcat`.
- `fractview.lines.read_lines(stream, buffer_size)` – yields the lines of a
  text or binary stream, read in fixed-size chunks.
- `fractview.bytesutil` – `mem_find`, `mem_compare` and `mem_copy_until`.
- `fractview.output` – `put_str`, `put_endl`, `put_nbr` and `print_table`,
  writing to standard output or a given stream.

## What the package does not do

There is no window and no command-line program. The package never displays
anything: `render` returns an array, and showing it, saving it or feeding key
presses and pointer positions into `handle_key` and `follow_pointer` is left to
the calling code. Escape and Space have no effect in `handle_key`; quitting and
toggling `env.space` are the caller's to handle.