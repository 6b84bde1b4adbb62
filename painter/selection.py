"""
Best-candidate selection over the frontier.

For a fixed color, every frontier cell is scored as the floored mean of the
squared distances between the color and the cell's seen neighbors. The
selection is a read-only min-reduction:

    1. the frontier slots are split into contiguous chunks
    2. each chunk is scored with numpy and reduced to its best slot
    3. the partial results are reduced to the global minimum by (score, slot)

Chunks run on a thread pool when the frontier is large enough; numpy releases
the GIL for the heavy part of the scoring. The grids and the frontier are not
mutated until select_best returns.
"""

from concurrent.futures import Executor
from dataclasses import dataclass

import numpy as np

from constants import CHUNK_SIZE, MIN_PARALLEL_FRONTIER
from localtypes import Coord, Rgb
from utils.grid import Image

from .errors import FrontierInvariantError
from .frontier import Frontier


@dataclass(frozen=True)
class Candidate:
    """Best cell of a chunk, or of the whole frontier."""

    score: int
    slot: int
    coord: Coord


class NeighborhoodScorer:
    """
    Vectorised version of distance.neighborhood_score.

    Scores a (k, 2) block of (col, row) coordinates against one color,
    reading the color and seen arrays without copying them.
    """

    def __init__(self, image: Image[Rgb], seen: Image[bool]) -> None:
        assert image.proportions == seen.proportions
        assert image.neighborhood == seen.neighborhood

        self.width, self.height = image.proportions
        self._colors = image.array
        self._seen = seen.array
        self._deltas = np.array(image.neighborhood.deltas, dtype=np.int64)

    def scores(self, coords: np.ndarray, color: Rgb) -> np.ndarray:
        cols = coords[:, 0:1] + self._deltas[:, 0]
        rows = coords[:, 1:2] + self._deltas[:, 1]
        inside = (cols >= 0) & (cols < self.width) & (rows >= 0) & (rows < self.height)

        # Clipped indices are only read where `inside` holds
        cols = np.clip(cols, 0, self.width - 1)
        rows = np.clip(rows, 0, self.height - 1)
        counted = inside & self._seen[rows, cols]

        diff = self._colors[rows, cols].astype(np.int64) - np.asarray(
            color, dtype=np.int64
        )
        dist = np.einsum("kmc,kmc->km", diff, diff)
        totals = np.where(counted, dist, 0).sum(axis=1)
        neighbors = counted.sum(axis=1)

        if not neighbors.all():
            col, row = coords[int(np.argmin(neighbors))]
            raise FrontierInvariantError(
                f"Candidate ({col}, {row}) has no seen neighbor"
            )
        return totals // neighbors

    def best(self, coords: np.ndarray, color: Rgb, offset: int = 0) -> Candidate:
        scores = self.scores(coords, color)
        index = int(np.argmin(scores))
        col, row = coords[index]
        return Candidate(int(scores[index]), offset + index, Coord(int(col), int(row)))


def chunk_bounds(size: int, chunk_size: int) -> list[tuple[int, int]]:
    """Split [0, size) into contiguous [start, end) ranges."""
    chunk_size = max(1, chunk_size)
    return [(start, min(start + chunk_size, size)) for start in range(0, size, chunk_size)]


def select_best(
    frontier: Frontier,
    color: Rgb,
    scorer: NeighborhoodScorer,
    executor: Executor | None = None,
    parallel_threshold: int = MIN_PARALLEL_FRONTIER,
    chunk_size: int = CHUNK_SIZE,
) -> Candidate:
    """
    Frontier cell minimizing the score for `color`, lowest slot on ties.

    The result does not depend on whether the executor is used.
    """
    if not frontier:
        raise FrontierInvariantError(f"No frontier cell left for color {color}")

    coords = frontier.array
    if executor is None or len(coords) <= parallel_threshold:
        return scorer.best(coords, color)

    def run_one(bounds: tuple[int, int]) -> Candidate:
        start, end = bounds
        return scorer.best(coords[start:end], color, offset=start)

    partials = executor.map(run_one, chunk_bounds(len(coords), chunk_size))
    return min(partials, key=lambda candidate: (candidate.score, candidate.slot))
