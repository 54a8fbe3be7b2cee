# hdlab

A collection of small, self-contained experiments in numerics and program
design. The package has no dependencies outside the standard library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## Numerics

- `hdlab.factorial.factorial(k)` returns `k!` as a float (`0!` and `1!` are
  1); a negative `k` raises `ValueError`.
- `hdlab.grid.get_grid(gtype, rng, n)` returns `n` coordinates spread evenly
  over a `Range(min, max)`, both ends included. The only `GridType` is
  `GridType.EQUIDISTANT`; fewer than two points raise `ValueError`.
- `hdlab.derivatives.fd_dfdx(a, b, c, u)` and `fd_d2fdx2(a, b, c, u)` apply
  three-point stencil coefficients to the values `u` and return the first or
  second derivative at every point. One-sided stencils are used at both ends
  (points `0, 1, 2` and `n-3, n-2, n-1`). All sequences must have the same
  length, at least three.
- `hdlab.rk4.get_time_rkstep(ti, dt, rk)` gives the evaluation time of stage
  `rk` (0..3); `rk4_step(u, uh, rhs, dt, rk_step)` advances `u` in place
  through stage `rk_step` (1..4) of the classical four-stage Runge-Kutta
  scheme, using the two rows of `uh` as workspace. `u[0]` is never changed,
  as it is meant to be set by a boundary condition.
- `hdlab.output.write_polyline(fname, points)` writes a list of `Point3D` as
  one polyline to an ASCII XML PolyData (`.vtp`) file and returns its path.
  `write_to_file(otype, nt, x, u)` emits one snapshot according to an
  `OutputType`: `NONE` does nothing, `PRINT` prints the values of `u`, and
  `VTP` writes `file{nt:04}.vtp` in the current directory.
- `hdlab.wave.wave_points(t, num_pts, wavelength, frequency, amplitude)`
  returns the points of `y = A sin(kx - wt)` over two wavelengths.

```python
from hdlab.grid import GridType, Range, get_grid
from hdlab.factorial import factorial

x = get_grid(GridType.EQUIDISTANT, Range(0.0, 10.0), 101)
print(x[:3], factorial(10))
```

## Commands

| Command | What it does |
| --- | --- |
| `hdlab-wave [--outdir DIR]` | Writes 51 snapshots of one period of a travelling sine wave as `test0000.vtp` ... `test0050.vtp` |
| `hdlab-properties [INPUT]` | Reads a JSON property file (default `../json_test/input/input.json`), prints it and the window, font, circle and rectangle properties found |
| `hdlab-variadic` | Prints three examples of a label followed by zero, one and two numbered arguments |
| `hdlab-dynamic-array` | Fills a ten-element array and prints its contents |
| `hdlab-lotto [--seed N]` | Draws five sets of six unique, sorted numbers from 1 to 90 |
| `hdlab-dice [--rolls N] [--seed N]` | Rolls a die (ten million times by default) and prints counts, minimum, maximum and star bars |
| `hdlab-animals` | Shows three ways to hold unrelated types behind one interface |

## Library use of the smaller pieces

- `hdlab.properties.read_properties(fname)` returns a list of `Window`,
  `Font`, `Circle` and `Rectangle` objects in file order, each built with its
  `from_json` class method. Unknown keys, missing fields and unreadable files
  raise `PropertyError`.
- `hdlab.variadic.format_variadic(initial, *args)` returns the text that
  `variadic_print` prints; non-string arguments raise `TypeError`.
- `hdlab.dynamic_array.DynamicArray(size, fill=0.0)` is a fixed-size array
  whose indexing raises `IndexError` outside `0..size-1`.
- `hdlab.lotto.draw_unique` and `hdlab.lotto.draw_lotto` accept a
  `random.Random` instance, so draws can be reproduced with a seed.
- `hdlab.dice.roll_histogram` and `hdlab.dice.star_bars` build and render a
  roll histogram.
- `hdlab.animals` offers `Cat` and `Dog` behind the `NoisyAnimal` base class
  and behind the `TypeErased` wrapper, which keeps its own copy of any object
  with `make_noise()` and `id()`.

## What is not included

- The package does not compute finite-difference stencil coefficients: the
  `a`, `b`, `c` sequences passed to `fd_dfdx` and `fd_d2fdx2` must be supplied
  by the caller.
- There is no command that solves the advection-diffusion equation; the grid,
  derivative, Runge-Kutta and output functions are building blocks only.