"""
Seed placement helpers: where the painting nucleates.
"""

import random

from localtypes import Coord, Proportions


def center_seed(proportions: Proportions) -> set[Coord]:
    width, height = proportions
    return {Coord(width // 2, height // 2)}


def corner_seeds(proportions: Proportions) -> set[Coord]:
    """The four corners, fewer on degenerate one-row or one-column images."""
    width, height = proportions
    return {
        Coord(0, 0),
        Coord(width - 1, 0),
        Coord(0, height - 1),
        Coord(width - 1, height - 1),
    }


def random_seeds(
    count: int, proportions: Proportions, rng_seed: int | None = None
) -> set[Coord]:
    width, height = proportions
    if not 0 < count <= width * height:
        raise ValueError(
            f"Cannot draw {count} distinct seeds in a {width}x{height} image"
        )
    cells = random.Random(rng_seed).sample(range(width * height), count)
    return {Coord(cell % width, cell // width) for cell in cells}


def parse_seed(text: str) -> Coord:
    """Parse 'col,row' into a Coord."""
    try:
        col, row = (int(part) for part in text.split(","))
    except ValueError:
        raise ValueError(f"Seed must look like 'col,row', got: {text!r}")
    return Coord(col, row)
