r"""
Grid Processing Library

Dense fixed-size 2D grids backed by numpy arrays.

An Image holds one value per cell, addressed by (x, y) = (col, row) with
0 <= x < width and 0 <= y < height. Two kinds of cells are supported:
    1\ scalar cells (bool, int), stored in a (height, width) array
    2\ tuple cells (colors), stored in a (height, width, channels) uint8 array

Every Image carries one Neighborhood, fixed at construction, so that neighbor
enumeration is consistent for as long as the grid lives.
"""

from collections.abc import Callable, Iterator
from typing import Any, Generic, TypeVar

import numpy as np

from constants import DEFAULT_NEIGHBORHOOD
from freeman import Neighborhood
from localtypes import Coord, NeighborCallback, Proportions

T = TypeVar("T")


def _cell_layout(default: Any) -> tuple[np.dtype, tuple[int, ...]]:
    """Return the dtype and the trailing shape used to store `default`."""
    match default:
        case bool() | np.bool_():
            return np.dtype(np.bool_), ()
        case int() | np.integer():
            return np.dtype(np.int64), ()
        case tuple():
            return np.dtype(np.uint8), (len(default),)
        case _:
            raise TypeError(f"Unsupported cell value: {default!r}")


class Image(Generic[T]):
    """
    A dense width x height grid with a fixed neighborhood.

    Example:
        >>> seen = Image.new(False, 3, 2)
        >>> seen.set(1, 1, True)
        >>> seen.get(1, 1), seen.neighbors(0, 0)
        (True, (Coord(col=1, row=0), Coord(col=0, row=1), Coord(col=1, row=1)))
    """

    def __init__(
        self,
        default: T,
        width: int,
        height: int,
        neighborhood: Neighborhood = DEFAULT_NEIGHBORHOOD,
    ) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(
                f"Image proportions must be positive, got {width}x{height}"
            )

        dtype, channels = _cell_layout(default)
        self._cells = np.empty((height, width, *channels), dtype=dtype)
        self._cells[...] = default
        self._wrap: Callable[[Any], T] = self._wrapper(default)

        self.width = width
        self.height = height
        self.neighborhood = neighborhood
        self._deltas = neighborhood.deltas

    @classmethod
    def new(
        cls,
        default: T,
        width: int,
        height: int,
        neighborhood: Neighborhood = DEFAULT_NEIGHBORHOOD,
    ) -> "Image[T]":
        return cls(default, width, height, neighborhood)

    @staticmethod
    def _wrapper(default: Any) -> Callable[[Any], Any]:
        if isinstance(default, (bool, np.bool_)):
            return bool
        if isinstance(default, tuple):
            # NamedTuples rebuild from positional fields, plain tuples from an iterable
            factory = type(default)
            if hasattr(factory, "_fields"):
                return lambda cell: factory(*(int(v) for v in cell))
            return lambda cell: tuple(int(v) for v in cell)
        return int

    # Operations
    @property
    def proportions(self) -> Proportions:
        return Proportions(self.width, self.height)

    @property
    def array(self) -> np.ndarray:
        """The backing array, indexed as array[row, col]."""
        return self._cells

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def _check(self, x: int, y: int) -> None:
        if not self.in_bounds(x, y):
            raise IndexError(
                f"Cell ({x}, {y}) is outside of the {self.width}x{self.height} image"
            )

    def get(self, x: int, y: int) -> T:
        self._check(x, y)
        return self._wrap(self._cells[y, x])

    def set(self, x: int, y: int, value: T) -> None:
        self._check(x, y)
        self._cells[y, x] = value

    def for_each_neighbor(self, x: int, y: int, callback: NeighborCallback) -> None:
        """Invoke callback(nx, ny) for every in-bounds neighbor of (x, y)."""
        for dx, dy in self._deltas:
            nx, ny = x + dx, y + dy
            if 0 <= nx < self.width and 0 <= ny < self.height:
                callback(nx, ny)

    def neighbors(self, x: int, y: int) -> tuple[Coord, ...]:
        found: list[Coord] = []
        self.for_each_neighbor(x, y, lambda nx, ny: found.append(Coord(nx, ny)))
        return tuple(found)

    def coords(self) -> Iterator[Coord]:
        """Every coordinate, row by row."""
        for row in range(self.height):
            for col in range(self.width):
                yield Coord(col, row)

    def count(self, value: T) -> int:
        """Number of cells holding `value`."""
        matches = self._cells == np.asarray(value, dtype=self._cells.dtype)
        if self._cells.ndim == 3:
            matches = matches.all(axis=2)
        return int(matches.sum())

    def to_rows(self) -> list[list[T]]:
        """Functional view: rows[row][col] -> value."""
        return [
            [self._wrap(self._cells[row, col]) for col in range(self.width)]
            for row in range(self.height)
        ]

    def __repr__(self) -> str:
        return (
            f"Image({self.width}x{self.height}, dtype={self._cells.dtype}, "
            f"neighborhood={self.neighborhood.value})"
        )
