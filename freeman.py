"""
Freeman chain code directions and the neighborhoods built on them.

A neighborhood is an ordered subset of the 8 Freeman directions:
- KING: 8 directions (orthogonal + diagonal) → 8-connectivity
- TOWER: 4 orthogonal directions → 4-connectivity
"""

from enum import Enum
from typing import Final, Literal

from localtypes import Coord

# Directions

Tower = Literal[0, 1, 2, 3]
King = Literal[0, 1, 2, 3, 4, 5, 6, 7]

TOWER: Final[list[Tower]] = [0, 1, 2, 3]
KING: Final[list[King]] = [0, 1, 2, 3, 4, 5, 6, 7]

DIRECTIONS_FREEMAN: Final[dict[King, Coord]] = {
    0: Coord(-1, 0),  # left
    1: Coord(0, -1),  # up
    2: Coord(1, 0),  # right
    3: Coord(0, 1),  # down
    4: Coord(-1, -1),  # up-left
    5: Coord(1, -1),  # up-right
    6: Coord(1, 1),  # down-right
    7: Coord(-1, 1),  # down-left
}


class Neighborhood(Enum):
    """Adjacency used by a grid for the whole of its lifetime."""

    TOWER = "tower"
    KING = "king"

    @property
    def directions(self) -> list[King]:
        match self:
            case Neighborhood.TOWER:
                return list(TOWER)
            case Neighborhood.KING:
                return list(KING)

    @property
    def deltas(self) -> tuple[Coord, ...]:
        return tuple(DIRECTIONS_FREEMAN[d] for d in self.directions)

    @classmethod
    def from_name(cls, name: str) -> "Neighborhood":
        try:
            return cls(name.lower())
        except ValueError:
            choices = ", ".join(n.value for n in cls)
            raise ValueError(
                f"Unknown neighborhood: {name}, expected one of: {choices}"
            )
