"""
Paint a palette growth image from the command line.

Usage:
    python main.py --colors 16 --output painting.png
    python main.py --colors 64 --corners --order shuffled --rng-seed 7
    python main.py --colors 4 --size 16x4 --seed 0,0 --seed 15,3 --preview
"""

import argparse
import logging
import sys
from collections.abc import Sequence

from rich.progress import (
    BarColumn,
    MofNCompleteColumn,
    Progress,
    TextColumn,
    TimeElapsedColumn,
    TimeRemainingColumn,
)

from constants import (
    CHUNK_SIZE,
    DEFAULT_NEIGHBORHOOD,
    DEFAULT_NUM_COLORS,
    DEFAULT_OUTPUT,
    DEFAULT_WORKERS,
    MIN_PARALLEL_FRONTIER,
)
from freeman import Neighborhood
from localtypes import Coord, Proportions
from painter import (
    GrowthConfig,
    GrowthState,
    GrowthStep,
    center_seed,
    corner_seeds,
    generate,
    parse_seed,
    random_seeds,
    validate_request,
)
from palette import (
    PaletteOrder,
    generate_palette,
    order_palette,
    palette_proportions,
)
from utils.display import display_image
from utils.io.png import save_png

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(levelname)s | %(message)s",
)
logger = logging.getLogger(__name__)


def parse_proportions(text: str) -> Proportions:
    try:
        width, height = (int(part) for part in text.lower().split("x"))
    except ValueError:
        raise argparse.ArgumentTypeError(f"Size must look like WxH, got: {text!r}")
    return Proportions(width, height)


def parse_seed_argument(text: str) -> Coord:
    try:
        return parse_seed(text)
    except ValueError as error:
        raise argparse.ArgumentTypeError(str(error))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Grow an image using every color of an evenly spaced palette once"
    )
    parser.add_argument(
        "--colors",
        type=int,
        default=DEFAULT_NUM_COLORS,
        help="Subdivisions per channel, the palette holds colors³ entries",
    )
    parser.add_argument(
        "--size",
        type=parse_proportions,
        help="Image size as WxH, must hold exactly colors³ pixels (default: square)",
    )

    seeding = parser.add_mutually_exclusive_group()
    seeding.add_argument(
        "--seed",
        type=parse_seed_argument,
        action="append",
        dest="seeds",
        metavar="COL,ROW",
        help="Seed cell, can be repeated (default: the center)",
    )
    seeding.add_argument(
        "--corners", action="store_true", help="Seed the four corners"
    )
    seeding.add_argument(
        "--random-seeds", type=int, metavar="K", help="Seed K random cells"
    )

    parser.add_argument(
        "--order",
        choices=[order.value for order in PaletteOrder],
        default=PaletteOrder.LEXICOGRAPHIC.value,
        help="Palette ordering, the last color is placed first",
    )
    parser.add_argument(
        "--rng-seed", type=int, help="Random seed for shuffling and random seeds"
    )
    parser.add_argument(
        "--neighborhood",
        choices=[neighborhood.value for neighborhood in Neighborhood],
        default=DEFAULT_NEIGHBORHOOD.value,
        help="Adjacency: king (8 neighbors) or tower (4 neighbors)",
    )
    parser.add_argument(
        "--workers",
        type=int,
        default=DEFAULT_WORKERS,
        help="Threads scoring the frontier, 1 disables the pool",
    )
    parser.add_argument(
        "--parallel-threshold",
        type=int,
        default=MIN_PARALLEL_FRONTIER,
        help="Frontier size above which the pool is used",
    )
    parser.add_argument(
        "--chunk-size",
        type=int,
        default=CHUNK_SIZE,
        help="Frontier cells scored per task",
    )
    parser.add_argument(
        "--output", default=DEFAULT_OUTPUT, help="PNG file to write"
    )
    parser.add_argument(
        "--preview", action="store_true", help="Render the result in the terminal"
    )
    parser.add_argument(
        "--no-progress", action="store_true", help="Disable the progress bar"
    )
    parser.add_argument(
        "--check-invariants",
        action="store_true",
        help="Validate the frontier after every placement (slow)",
    )
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    return parser


def choose_seeds(args: argparse.Namespace, proportions: Proportions) -> set[Coord]:
    if args.seeds:
        return set(args.seeds)
    if args.corners:
        return corner_seeds(proportions)
    if args.random_seeds is not None:
        return random_seeds(args.random_seeds, proportions, args.rng_seed)
    return center_seed(proportions)


def run(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.debug:
        logging.getLogger().setLevel(logging.DEBUG)

    if args.colors <= 0:
        parser.error(f"--colors must be positive, got {args.colors}")
    if args.workers <= 0:
        parser.error(f"--workers must be positive, got {args.workers}")

    palette = generate_palette(args.colors)
    palette = order_palette(palette, PaletteOrder(args.order), args.rng_seed)

    try:
        proportions = args.size or palette_proportions(args.colors)
        seeds = choose_seeds(args, proportions)
        validate_request(palette, proportions, seeds)
    except ValueError as error:
        parser.error(str(error))

    config = GrowthConfig(
        neighborhood=Neighborhood.from_name(args.neighborhood),
        workers=args.workers,
        parallel_threshold=args.parallel_threshold,
        chunk_size=args.chunk_size,
        check_invariants=args.check_invariants,
    )
    logger.info(
        f"Palette: {len(palette)} colors ({args.order}), "
        f"image: {proportions.width}x{proportions.height}, seeds: {sorted(seeds)}"
    )

    if args.no_progress:
        image = generate(palette, proportions, seeds, config)
    else:
        with Progress(
            TextColumn("[progress.description]{task.description}"),
            BarColumn(),
            MofNCompleteColumn(),
            TimeElapsedColumn(),
            TimeRemainingColumn(),
        ) as progress:
            task = progress.add_task("Painting", total=len(palette))

            def advance(step: GrowthStep, state: GrowthState) -> None:
                if step.index % 256 == 0 or state.placed == len(palette):
                    progress.update(task, completed=state.placed)

            image = generate(palette, proportions, seeds, config, observer=advance)

    save_png(image, args.output)

    if args.preview:
        display_image(image)

    return 0


if __name__ == "__main__":
    sys.exit(run())
