"""
The frontier: unseen cells with at least one seen neighbor.

The frontier is the candidate pool of the growth loop. It is maintained
incrementally, never recomputed, and stored so that vectorised scoring can
read every member at once:

- add(coord): O(1), no-op for members
- remove(coord): O(1), the last slot is moved into the freed one
- array: (size, 2) int64 view of the members as (col, row) rows

Slots are the tie-break order of the selection: among equal scores the
lowest slot wins.
"""

from collections.abc import Iterator

import numpy as np

from localtypes import Coord
from utils.grid import Image

from .errors import FrontierInvariantError

INITIAL_CAPACITY = 64


class Frontier:
    """
    Set of coordinates with slot-addressed storage.

    Example:
        >>> frontier = Frontier()
        >>> frontier.add(Coord(1, 0)), frontier.add(Coord(1, 0))
        (True, False)
        >>> frontier.remove(Coord(1, 0))
        >>> len(frontier)
        0
    """

    def __init__(self, capacity: int = INITIAL_CAPACITY) -> None:
        self._slots: dict[Coord, int] = {}
        self._coords = np.empty((max(1, capacity), 2), dtype=np.int64)

    def __len__(self) -> int:
        return len(self._slots)

    def __contains__(self, coord: object) -> bool:
        return coord in self._slots

    def __iter__(self) -> Iterator[Coord]:
        """Members in slot order."""
        for col, row in self.array.tolist():
            yield Coord(col, row)

    @property
    def array(self) -> np.ndarray:
        return self._coords[: len(self._slots)]

    def at(self, slot: int) -> Coord:
        col, row = self._coords[slot]
        return Coord(int(col), int(row))

    def add(self, coord: Coord) -> bool:
        """Insert coord, returning False if it was already a member."""
        if coord in self._slots:
            return False

        size = len(self._slots)
        if size == len(self._coords):
            grown = np.empty((2 * size, 2), dtype=np.int64)
            grown[:size] = self._coords
            self._coords = grown

        self._coords[size] = coord
        self._slots[Coord(*coord)] = size
        return True

    def remove(self, coord: Coord) -> None:
        """Remove a member, raising KeyError if coord is not one."""
        slot = self._slots.pop(coord)
        last = len(self._slots)
        if slot != last:
            moved = self.at(last)
            self._coords[slot] = self._coords[last]
            self._slots[moved] = slot

    def discard(self, coord: Coord) -> None:
        if coord in self._slots:
            self.remove(coord)

    def validate(self, seen: Image[bool]) -> None:
        """
        Check both frontier invariants against the seen grid.

        - no member is seen, and every member has a seen neighbor
        - every unseen cell next to a seen cell is a member
        """
        for col, row in self:
            if seen.get(col, row):
                raise FrontierInvariantError(
                    f"Frontier contains the seen cell ({col}, {row})"
                )
            if not any(seen.get(*n) for n in seen.neighbors(col, row)):
                raise FrontierInvariantError(
                    f"Frontier cell ({col}, {row}) has no seen neighbor"
                )

        for col, row in seen.coords():
            if seen.get(col, row):
                continue
            if Coord(col, row) in self:
                continue
            if any(seen.get(*n) for n in seen.neighbors(col, row)):
                raise FrontierInvariantError(
                    f"Cell ({col}, {row}) borders a seen cell but is missing "
                    "from the frontier"
                )

    def __repr__(self) -> str:
        return f"Frontier(size={len(self)})"
