"""Second-order finite differences on three-point stencils.

For i = 0 the stencil uses points i, i+1, i+2; in the interior i-1, i, i+1;
at i = n-1 it uses i-2, i-1, i. The coefficients a, b, c weigh these three
points in that order.
"""

from collections.abc import Sequence


def _apply_stencil(
    a: Sequence[float], b: Sequence[float], c: Sequence[float], u: Sequence[float]
) -> list[float]:
    n = len(a)
    if not (len(b) == len(c) == len(u) == n):
        raise ValueError("incompatible lengths of coefficients and/or values")
    if n < 3:
        raise ValueError("at least three points are required")

    def at(i: int, lo: int) -> float:
        return a[i] * u[lo] + b[i] * u[lo + 1] + c[i] * u[lo + 2]

    return [at(0, 0), *(at(i, i - 1) for i in range(1, n - 1)), at(n - 1, n - 3)]


def fd_dfdx(
    a0_f1: Sequence[float],
    b0_f1: Sequence[float],
    c0_f1: Sequence[float],
    u: Sequence[float],
) -> list[float]:
    """Return du/dx at every point from precomputed first-derivative coefficients."""
    return _apply_stencil(a0_f1, b0_f1, c0_f1, u)


def fd_d2fdx2(
    a0_f2: Sequence[float],
    b0_f2: Sequence[float],
    c0_f2: Sequence[float],
    u: Sequence[float],
) -> list[float]:
    """Return d2u/dx2 at every point from precomputed second-derivative coefficients."""
    return _apply_stencil(a0_f2, b0_f2, c0_f2, u)