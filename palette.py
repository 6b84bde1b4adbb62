"""
Palette generation.

A palette is the stack of colors a painting consumes, each exactly once.
The generator subdivides every RGB channel evenly and enumerates the cube
red-major, blue-minor. Orderings only permute a palette; since the growth
engine pops from the end, the last color of an ordered palette is placed first.
"""

import colorsys
import logging
import math
import random
from collections.abc import Sequence
from enum import Enum

from localtypes import Palette, Proportions, Rgb

logger = logging.getLogger(__name__)


def generate_equally_spaced_rgb_colors(num_colors: int) -> Palette:
    """
    Enumerate the num_colors³ colors of an evenly subdivided RGB cube.

    Channel values are floor(index * 255 / num_colors) for index in
    [0, num_colors), so the brightest value is never reached for num_colors > 1.

    Example:
        >>> generate_equally_spaced_rgb_colors(2)[:3]
        [Rgb(red=0, green=0, blue=0), Rgb(red=0, green=0, blue=127), Rgb(red=0, green=127, blue=0)]
    """
    levels = [index * 255 // num_colors for index in range(num_colors)]
    return [
        Rgb(red, green, blue) for red in levels for green in levels for blue in levels
    ]


generate_palette = generate_equally_spaced_rgb_colors


def palette_proportions(num_colors: int) -> Proportions:
    """Square proportions holding exactly num_colors³ pixels."""
    pixels = num_colors**3
    side = math.isqrt(pixels)
    if num_colors <= 0 or side * side != pixels:
        raise ValueError(
            f"{num_colors}³ = {pixels} colors do not fill a square image, "
            "give the proportions explicitly"
        )
    return Proportions(side, side)


def check_palette_fits(palette: Sequence[Rgb], proportions: Proportions) -> None:
    width, height = proportions
    if len(palette) != width * height:
        raise ValueError(
            f"Palette holds {len(palette)} colors but a {width}x{height} image "
            f"needs exactly {width * height}"
        )


class PaletteOrder(Enum):
    LEXICOGRAPHIC = "lexicographic"
    REVERSED = "reversed"
    SHUFFLED = "shuffled"
    HUE = "hue"


def _hue_key(color: Rgb) -> tuple[float, float, float]:
    hue, saturation, value = colorsys.rgb_to_hsv(*(channel / 255 for channel in color))
    return (hue, value, saturation)


def order_palette(
    palette: Sequence[Rgb], order: PaletteOrder, rng_seed: int | None = None
) -> Palette:
    """
    Return a reordered copy of the palette. The multiset of colors is unchanged.
    """
    match order:
        case PaletteOrder.LEXICOGRAPHIC:
            ordered = list(palette)
        case PaletteOrder.REVERSED:
            ordered = list(reversed(palette))
        case PaletteOrder.SHUFFLED:
            ordered = list(palette)
            random.Random(rng_seed).shuffle(ordered)
        case PaletteOrder.HUE:
            ordered = sorted(palette, key=_hue_key)

    logger.debug(f"Ordered {len(ordered)} colors as {order.value}")
    return ordered
