"""
Global constants used throughout the project
"""

import os

from freeman import Neighborhood
from localtypes import Rgb

# Placeholder written in every cell before it is colored
DEFAULT_COLOR = Rgb(0, 0, 0)

# 16 subdivisions per channel → 4096 colors → a 64x64 painting
DEFAULT_NUM_COLORS = 16
DEFAULT_NEIGHBORHOOD = Neighborhood.KING

# Below this frontier size the thread pool costs more than it saves
MIN_PARALLEL_FRONTIER = 4096
CHUNK_SIZE = 2048
DEFAULT_WORKERS = os.cpu_count() or 1

LOG_EVERY = 10_000
DEFAULT_OUTPUT = "painting.png"

DEBUG = False
