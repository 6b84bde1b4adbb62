"""
Color distance and the reference neighborhood score.
"""

from localtypes import Rgb
from utils.grid import Image

from .errors import FrontierInvariantError


def color_dist(a: Rgb, b: Rgb) -> int:
    """Squared euclidean distance in RGB space, at most 3 * 255² = 195075."""
    dr = int(a[0]) - int(b[0])
    dg = int(a[1]) - int(b[1])
    db = int(a[2]) - int(b[2])
    return dr * dr + dg * dg + db * db


def neighborhood_score(
    color: Rgb, x: int, y: int, image: Image[Rgb], seen: Image[bool]
) -> int:
    """
    Average distance between `color` and the seen neighbors of (x, y).

    Unseen neighbors are ignored; the average is floored.
    """
    neighbors = 0
    total_color_dist = 0

    def accumulate(nx: int, ny: int) -> None:
        nonlocal neighbors, total_color_dist
        if not seen.get(nx, ny):
            return
        neighbors += 1
        total_color_dist += color_dist(color, image.get(nx, ny))

    image.for_each_neighbor(x, y, accumulate)

    if neighbors == 0:
        raise FrontierInvariantError(f"Candidate ({x}, {y}) has no seen neighbor")
    return total_color_dist // neighbors
