"""Pixel dimension probing for raster images."""
import logging
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import NamedTuple

from PIL import Image, UnidentifiedImageError

from .errors import ProbeError

log = logging.getLogger(__name__)


class ImageSize(NamedTuple):
    width: int
    height: int

    def __str__(self):
        return f"{self.width}x{self.height}"


def size_of_image(path: Path) -> ImageSize:
    """Read the pixel size of an image without decoding its pixel data."""
    try:
        with Image.open(path) as img:
            width, height = img.size
    except (UnidentifiedImageError, Image.DecompressionBombError, OSError) as e:
        raise ProbeError(Path(path), e) from e
    log.debug(f"SIZE {path}: {width}x{height}")
    return ImageSize(width, height)


def size_of_images(first: Path, second: Path) -> tuple[ImageSize, ImageSize]:
    """Probe two images concurrently. A failure on either one propagates."""
    with ThreadPoolExecutor(max_workers=2) as executor:
        first_future = executor.submit(size_of_image, first)
        second_future = executor.submit(size_of_image, second)
        return first_future.result(), second_future.result()
