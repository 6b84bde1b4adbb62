"""
The growth engine.

Paints an image where every pixel receives a distinct palette color, growing
outward from seed cells. Each step pops the next color off the palette stack
and commits it to the frontier cell whose seen neighbors match it best.

Algorithm overview:
    1. Place one color on each seed and add its unseen neighbors to the frontier
    2. While colors remain:
        a. pop a color
        b. select the best frontier cell (read-only, possibly parallel)
        c. commit the color, mark the cell seen
        d. move the cell out of the frontier, add its unseen neighbors
    3. Return the color image once the palette is exhausted

Selection never mutates anything; every write happens on the calling thread
between two selections, so no locking is involved.
"""

import logging
from collections.abc import Callable, Sequence
from concurrent.futures import Executor, ThreadPoolExecutor
from contextlib import nullcontext
from dataclasses import dataclass, field
from typing import TypeAlias

from constants import (
    CHUNK_SIZE,
    DEBUG,
    DEFAULT_COLOR,
    DEFAULT_NEIGHBORHOOD,
    DEFAULT_WORKERS,
    LOG_EVERY,
    MIN_PARALLEL_FRONTIER,
)
from freeman import Neighborhood
from localtypes import Coord, Palette, Proportions, Rgb, Seeds
from palette import check_palette_fits
from utils.grid import Image

from .errors import FrontierInvariantError
from .frontier import Frontier
from .selection import NeighborhoodScorer, select_best

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GrowthConfig:
    neighborhood: Neighborhood = DEFAULT_NEIGHBORHOOD
    workers: int = DEFAULT_WORKERS
    parallel_threshold: int = MIN_PARALLEL_FRONTIER
    chunk_size: int = CHUNK_SIZE
    check_invariants: bool = DEBUG  # O(pixels) per step, for tests and debugging
    log_every: int = LOG_EVERY


@dataclass
class GrowthState:
    """Everything one invocation of generate() owns while it runs."""

    image: Image[Rgb]
    seen: Image[bool]
    frontier: Frontier = field(default_factory=Frontier)
    placed: int = 0

    @classmethod
    def empty(cls, proportions: Proportions, neighborhood: Neighborhood) -> "GrowthState":
        width, height = proportions
        return cls(
            image=Image.new(DEFAULT_COLOR, width, height, neighborhood),
            seen=Image.new(False, width, height, neighborhood),
        )

    def commit(self, coord: Coord, color: Rgb) -> None:
        """Color an unseen cell and update the frontier around it."""
        col, row = coord
        if self.seen.get(col, row):
            raise FrontierInvariantError(f"Cell ({col}, {row}) is already colored")

        self.image.set(col, row, color)
        self.seen.set(col, row, True)
        self.placed += 1

        self.frontier.discard(coord)

        def track(nx: int, ny: int) -> None:
            if not self.seen.get(nx, ny):
                self.frontier.add(Coord(nx, ny))

        self.seen.for_each_neighbor(col, row, track)


@dataclass(frozen=True)
class GrowthStep:
    """One placement, as reported to observers. Seeds have no score."""

    index: int
    coord: Coord
    color: Rgb
    score: int | None
    frontier_size: int


GrowthObserver: TypeAlias = Callable[[GrowthStep, GrowthState], None]


def validate_request(
    palette: Sequence[Rgb], proportions: Proportions, seeds: Seeds
) -> None:
    """Reject a request that breaks the engine's contract, before any work."""
    width, height = proportions
    if width <= 0 or height <= 0:
        raise ValueError(f"Image proportions must be positive, got {width}x{height}")

    check_palette_fits(palette, proportions)

    invalid = [
        color
        for color in palette
        if len(color) != 3 or not all(0 <= channel <= 255 for channel in color)
    ]
    if invalid:
        raise ValueError(
            f"Palette holds {len(invalid)} color(s) that are not 8-bit RGB, "
            f"first: {tuple(invalid[0])}"
        )

    if not seeds:
        raise ValueError("At least one seed is required")

    # Lists are accepted too, and a Coord equals the plain (col, row) tuple
    if len(set(seeds)) != len(seeds):
        raise ValueError(f"Seeds must be distinct, got {list(seeds)}")

    outside = sorted(
        (col, row) for col, row in seeds if not (0 <= col < width and 0 <= row < height)
    )
    if outside:
        raise ValueError(
            f"Seeds {outside} are outside of the {width}x{height} image"
        )


def generate(
    palette: Sequence[Rgb],
    proportions: tuple[int, int],
    seeds: Seeds,
    config: GrowthConfig | None = None,
    observer: GrowthObserver | None = None,
) -> Image[Rgb]:
    """
    Paint a width x height image using every palette color exactly once.

    Args:
        palette: Colors to place, consumed from the end. Not modified.
        proportions: (width, height); width * height must equal len(palette).
        seeds: Non-empty set of distinct in-bounds (col, row) cells, placed in
            (row, col) order.
        config: Neighborhood and parallelism settings.
        observer: Called after every placement, seeds included.

    Returns:
        The completed color image.

    Raises:
        ValueError: If the request breaks the contract; nothing is built.
        FrontierInvariantError: If frontier maintenance is found broken.
    """
    config = config or GrowthConfig()
    proportions = Proportions(*proportions)
    validate_request(palette, proportions, seeds)

    colors: Palette = [Rgb(*color) for color in palette]
    state = GrowthState.empty(proportions, config.neighborhood)

    logger.info(
        f"Growing a {proportions.width}x{proportions.height} image from "
        f"{len(seeds)} seed(s), {config.neighborhood.value} adjacency"
    )

    def report(coord: Coord, color: Rgb, score: int | None) -> None:
        if config.check_invariants:
            state.frontier.validate(state.seen)
        if observer is not None:
            step = GrowthStep(state.placed - 1, coord, color, score, len(state.frontier))
            observer(step, state)

    for col, row in sorted(seeds, key=lambda seed: (seed[1], seed[0])):
        color = colors.pop()
        state.commit(Coord(col, row), color)
        report(Coord(col, row), color, None)

    scorer = NeighborhoodScorer(state.image, state.seen)
    # The frontier never holds more cells than there are colors left
    parallel = config.workers > 1 and len(palette) > config.parallel_threshold
    pool: Executor | nullcontext[None] = (
        ThreadPoolExecutor(max_workers=config.workers) if parallel else nullcontext()
    )

    with pool as executor:
        while colors:
            color = colors.pop()
            candidate = select_best(
                state.frontier,
                color,
                scorer,
                executor=executor,
                parallel_threshold=config.parallel_threshold,
                chunk_size=config.chunk_size,
            )
            state.commit(candidate.coord, color)
            report(candidate.coord, color, candidate.score)

            if config.log_every and state.placed % config.log_every == 0:
                logger.debug(
                    f"Placed {state.placed}/{len(palette)} colors, "
                    f"frontier size: {len(state.frontier)}"
                )

    assert state.placed == len(palette)
    assert not state.frontier, f"{len(state.frontier)} frontier cells left uncolored"

    logger.info(f"Placed {state.placed} colors")
    return state.image
