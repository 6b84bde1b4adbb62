"""
Type definitions for palette growth painting.

This module contains the custom types used throughout the painter,
organized by their primary use cases.

Coordinate Convention:
    All coordinates use (col, row) order, where:
    - col: x-axis, increases rightward (0 to width-1)
    - row: y-axis, increases downward (0 to height-1)
"""

from __future__ import annotations

from collections.abc import Callable, Set
from typing import NamedTuple, TypeAlias


# Color-related types
class Rgb(NamedTuple):
    """8-bit RGB color. Compares equal to the plain (r, g, b) tuple."""

    red: int
    green: int
    blue: int


Palette: TypeAlias = list[Rgb]  # Stack of colors, the last one is placed first


# Coordinate systems
class Coord(NamedTuple):
    col: int
    row: int


class Proportions(NamedTuple):
    width: int
    height: int


Seeds: TypeAlias = Set[Coord]

# Grid collaborator callbacks
NeighborCallback: TypeAlias = Callable[[int, int], None]
