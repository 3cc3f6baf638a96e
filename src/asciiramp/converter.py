import io
import logging
import threading
from pathlib import Path

from PIL import Image, ImageOps, UnidentifiedImageError

from asciiramp.errors import DecodeFailure, InvalidInput
from asciiramp.mapper import map_to_text
from asciiramp.model import AsciiArt, ConversionConfig
from asciiramp.sampling import sample

logger = logging.getLogger(__name__)


def load_image(source: Image.Image | str | Path | bytes) -> Image.Image:
    """Decode a path, raw bytes or an already-open image into a bitmap."""
    if isinstance(source, Image.Image):
        return source
    try:
        if isinstance(source, (bytes, bytearray)):
            image = Image.open(io.BytesIO(source))
        else:
            image = Image.open(Path(source))
        image.load()
    except FileNotFoundError as e:
        raise DecodeFailure(f"File not found: {source}") from e
    except Image.DecompressionBombError as e:
        raise DecodeFailure(f"Image too large: {e}") from e
    except (UnidentifiedImageError, OSError) as e:
        raise DecodeFailure(f"Not a recognised image: {e}") from e
    # Phone photos store rotation in EXIF; render them as they are displayed
    return ImageOps.exif_transpose(image)


def convert(bitmap: Image.Image, config: ConversionConfig) -> AsciiArt:
    grid = sample(bitmap, config.target_width)
    art = map_to_text(grid, config.ramp, invert=config.invert)
    logger.debug("Converted to %dx%d characters (invert=%s)", art.width, art.height, config.invert)
    return art


def image_to_ascii(image: Image.Image | str | Path | bytes, config: ConversionConfig) -> AsciiArt:
    return convert(load_image(image), config)


class ImageSession:
    """The currently loaded image, passed explicitly to each conversion.

    Conversions against one session are serialised so a reload can never
    race a render.
    """

    def __init__(self, bitmap: Image.Image | None = None):
        self._bitmap = bitmap
        self._lock = threading.Lock()

    @property
    def bitmap(self) -> Image.Image | None:
        return self._bitmap

    def load(self, source: Image.Image | str | Path | bytes) -> Image.Image:
        image = load_image(source)
        with self._lock:
            self._bitmap = image
        logger.debug("Loaded %dx%d image", image.width, image.height)
        return image

    def render(self, config: ConversionConfig) -> AsciiArt:
        with self._lock:
            if self._bitmap is None:
                raise InvalidInput("No image loaded")
            return convert(self._bitmap, config)
