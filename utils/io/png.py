"""
PNG import/export of color images through Pillow.
"""

import logging
from pathlib import Path

import numpy as np
from PIL import Image as PILImage

from constants import DEFAULT_COLOR, DEFAULT_NEIGHBORHOOD
from freeman import Neighborhood
from localtypes import Rgb
from utils.grid import Image

logger = logging.getLogger(__name__)


def image_to_pil(image: Image[Rgb]) -> PILImage.Image:
    return PILImage.fromarray(np.ascontiguousarray(image.array))


def save_png(image: Image[Rgb], path: str | Path) -> Path:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    image_to_pil(image).save(path, format="PNG")
    logger.info(f"Saved {image.width}x{image.height} image to {path}")
    return path


def load_png(
    path: str | Path, neighborhood: Neighborhood = DEFAULT_NEIGHBORHOOD
) -> Image[Rgb]:
    with PILImage.open(path) as pil:
        pixels = np.asarray(pil.convert("RGB"), dtype=np.uint8)

    height, width, _ = pixels.shape
    image = Image.new(DEFAULT_COLOR, width, height, neighborhood)
    image.array[...] = pixels
    return image
