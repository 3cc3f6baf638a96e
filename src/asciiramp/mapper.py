import numpy as np

from asciiramp.errors import InvalidInput
from asciiramp.model import AsciiArt

# ITU-R BT.601 weights scaled to integers so pure white sums to exactly 255000
_WEIGHTS = np.array([299, 587, 114], dtype=np.int64)


def _check_grid(grid: np.ndarray) -> np.ndarray:
    grid = np.asarray(grid)
    if grid.ndim != 3 or grid.shape[2] != 4:
        raise InvalidInput(f"Expected an RGBA grid of shape (rows, cols, 4), got {grid.shape}")
    if grid.shape[0] < 1 or grid.shape[1] < 1:
        raise InvalidInput(f"Grid has zero area: {grid.shape[1]}x{grid.shape[0]}")
    return grid


def luminance(grid: np.ndarray) -> np.ndarray:
    """Per-cell brightness in [0, 1], attenuated by alpha.

    Transparent pixels are scaled towards black rather than blended onto a
    background colour.
    """
    grid = _check_grid(grid).astype(np.int64)
    weighted = grid[:, :, :3] @ _WEIGHTS
    return (weighted / 255000.0) * (grid[:, :, 3] / 255.0)


def map_to_text(grid: np.ndarray, ramp: str, invert: bool = False) -> AsciiArt:
    """Map each cell of an RGBA grid to a character from ramp (dark to bright)."""
    if not ramp:
        raise InvalidInput("Ramp must not be empty")
    grid = _check_grid(grid)
    top = len(ramp) - 1

    lum = luminance(grid)
    indices = np.clip(np.floor(lum * top).astype(np.int64), 0, top)
    if invert:
        # Mirror the quantisation so inverting is the same as reversing the ramp.
        # Mid-tones can land one glyph above floor((1 - L) * top).
        indices = top - indices
    # Fully transparent cells stay on the darkest glyph either way
    indices[grid[:, :, 3] == 0] = 0

    lines = tuple("".join(ramp[i] for i in row) for row in indices.tolist())
    return AsciiArt(lines=lines)
