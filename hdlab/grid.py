"""One-dimensional grids for the discretised problem."""

from dataclasses import dataclass
from enum import Enum


class GridType(Enum):
    """Kind of grid point distribution."""

    EQUIDISTANT = "equidistant"


@dataclass(frozen=True)
class Range:
    """Closed interval [min, max] covered by a grid."""

    min: float
    max: float


def get_grid(gtype: GridType, rng: Range, n: int) -> list[float]:
    """Return n grid coordinates covering ``rng`` including both ends."""
    if n < 2:
        raise ValueError("a grid needs at least two points")
    if gtype is GridType.EQUIDISTANT:
        delta = (rng.max - rng.min) / (n - 1)
        return [rng.min + i * delta for i in range(n)]
    raise ValueError(f"unsupported grid type: {gtype!r}")