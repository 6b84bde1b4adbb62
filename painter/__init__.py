"""
Palette growth painting.

Paints an image in which every pixel gets a distinct palette color, chosen so
that colors vary smoothly outward from one or more seeds.

Main entry point: generate()

Modules:
    distance   - color distance and the reference neighborhood score
    frontier   - incremental set of candidate cells
    selection  - vectorised, optionally threaded, best-candidate reduction
    growth     - the growth loop and its configuration
    seeds      - seed placement helpers
"""

from .distance import color_dist, neighborhood_score
from .errors import FrontierInvariantError
from .frontier import Frontier
from .growth import (
    GrowthConfig,
    GrowthObserver,
    GrowthState,
    GrowthStep,
    generate,
    validate_request,
)
from .seeds import center_seed, corner_seeds, parse_seed, random_seeds
from .selection import Candidate, NeighborhoodScorer, chunk_bounds, select_best

__all__ = [
    # Main entry point
    "generate",
    "GrowthConfig",
    "GrowthState",
    "GrowthStep",
    "GrowthObserver",
    "validate_request",
    # Scoring
    "color_dist",
    "neighborhood_score",
    "NeighborhoodScorer",
    "Candidate",
    "chunk_bounds",
    "select_best",
    # Frontier
    "Frontier",
    "FrontierInvariantError",
    # Seeds
    "center_seed",
    "corner_seeds",
    "random_seeds",
    "parse_seed",
]
