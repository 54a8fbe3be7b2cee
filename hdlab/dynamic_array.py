"""A fixed-size array with bounds-checked element access."""

from collections.abc import Iterator
from typing import Any


class DynamicArray:
    """Array of a size fixed at creation, every element set to ``fill``."""

    def __init__(self, size: int, fill: Any = 0.0) -> None:
        if size < 0:
            raise ValueError("size must not be negative")
        self._items = [fill] * size

    def __len__(self) -> int:
        return len(self._items)

    def _check(self, idx: int) -> int:
        if not 0 <= idx < len(self._items):
            raise IndexError(f"index {idx} out of range for size {len(self._items)}")
        return idx

    def __getitem__(self, idx: int) -> Any:
        return self._items[self._check(idx)]

    def __setitem__(self, idx: int, value: Any) -> None:
        self._items[self._check(idx)] = value

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"DynamicArray({self._items!r})"


def main(argv: list[str] | None = None) -> int:
    """Fill a small array and print its elements."""
    print("\nStart RAII demo.\n")
    dim = 10
    ia = DynamicArray(dim)
    ia[4] = 42.2
    ia[dim - 1] = 9.99999
    for cnt, value in enumerate(ia):
        print(f"ia[{cnt}] = {value:g}")
    print("\nEnd RAII demo.\n")
    return 0