import logging
import math

import numpy as np
from PIL import Image

from asciiramp.errors import InvalidInput

logger = logging.getLogger(__name__)

# Terminal glyphs are roughly twice as tall as they are wide
ASPECT_CORRECTION = 0.5


def target_height(width: int, height: int, target_width: int) -> int:
    """Number of text rows for a bitmap of the given size rendered target_width columns wide."""
    rows = math.floor(target_width * (height / width) * ASPECT_CORRECTION)
    # Very wide images with a narrow target floor to 0
    return max(1, rows)


def sample(bitmap: Image.Image, target_width: int) -> np.ndarray:
    """Downscale a bitmap to one RGBA sample per output character.

    Uses nearest-neighbour resampling so every cell holds a real source pixel.

    Returns a uint8 array of shape (rows, target_width, 4).
    """
    if isinstance(target_width, bool) or not isinstance(target_width, int):
        raise InvalidInput(f"Target width must be an integer, got {target_width!r}")
    if target_width < 1:
        raise InvalidInput(f"Target width must be at least 1, got {target_width}")
    if not isinstance(bitmap, Image.Image):
        raise InvalidInput(f"Expected a PIL image, got {type(bitmap).__name__}")
    width, height = bitmap.size
    if width < 1 or height < 1:
        raise InvalidInput(f"Bitmap has zero area: {width}x{height}")

    rows = target_height(width, height, target_width)
    logger.debug("Sampling %dx%d bitmap to %dx%d cells", width, height, target_width, rows)
    resized = bitmap.convert("RGBA").resize((target_width, rows), Image.NEAREST)
    return np.asarray(resized, dtype=np.uint8)
