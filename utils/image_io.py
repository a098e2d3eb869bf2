"""Image I/O: PNG/JPEG/BMP through OpenCV, plain-text PPM (P3) by hand."""

import logging
from pathlib import Path
from typing import Optional, Union

import cv2
import numpy as np

from models.errors import ImageFormatError, ValidationError
from models.raster_buffer import RasterBuffer
from utils.constants import MAX_VALUE

logger = logging.getLogger(__name__)

CODEC_EXTENSIONS = {'.png', '.jpg', '.jpeg', '.bmp'}
PPM_EXTENSION = '.ppm'

PathLike = Union[str, Path]


def _extension(path: Path) -> str:
    ext = path.suffix.lower()
    if ext != PPM_EXTENSION and ext not in CODEC_EXTENSIONS:
        raise ImageFormatError(f"Unsupported image format: '{path.name}'")
    return ext


def read_ppm(text: str) -> np.ndarray:
    """Parse plain PPM text into a height x width x 3 array.

    Only 8-bit files (max value 255) are accepted, and the pixel data must
    hold exactly width * height RGB triplets.
    """
    lines = [line.strip() for line in text.splitlines()]
    tokens = ' '.join(line for line in lines if line and not line.startswith('#')).split()
    if not tokens or tokens[0] != 'P3':
        raise ImageFormatError("Invalid PPM file: plain PPM must begin with P3")
    try:
        width, height, max_value = (int(t) for t in tokens[1:4])
        values = np.array([int(t) for t in tokens[4:]], dtype=np.int64)
    except ValueError as e:
        raise ImageFormatError(f"Invalid PPM file: {e}") from e

    if max_value != MAX_VALUE:
        raise ImageFormatError(f"Invalid PPM file: max value must be {MAX_VALUE}, got {max_value}")

    expected = width * height * 3
    if len(values) != expected:
        raise ImageFormatError(
            f"Invalid PPM file: expected {expected} values for {width}x{height}, got {len(values)}"
        )
    return values.reshape(height, width, 3)


def write_ppm(pixels: np.ndarray) -> str:
    """Format pixels as plain PPM text, one RGB triplet per line."""
    height, width = pixels.shape[:2]
    lines = ['P3', f"{width} {height}", '255']
    lines.extend(f"{r} {g} {b}" for r, g, b in pixels.reshape(-1, 3).tolist())
    return '\n'.join(lines) + '\n'


def load_image(path: PathLike, name: Optional[str] = None) -> RasterBuffer:
    """Load an image file as an RGB raster buffer."""
    path = Path(path)
    ext = _extension(path)
    if not path.is_file():
        raise ImageFormatError(f"Could not load image from {path}: no such file")

    if ext == PPM_EXTENSION:
        try:
            text = path.read_text(encoding='ascii')
        except UnicodeDecodeError as e:
            raise ImageFormatError(f"Invalid PPM file {path}: not plain ASCII text") from e
        pixels = read_ppm(text)
    else:
        img = cv2.imread(str(path), cv2.IMREAD_COLOR)
        if img is None:
            raise ImageFormatError(f"Could not load image from {path}")
        pixels = cv2.cvtColor(img, cv2.COLOR_BGR2RGB)

    try:
        buffer = RasterBuffer(name or path.stem, pixels)
    except ValidationError as e:
        raise ImageFormatError(f"Invalid pixel data in {path}: {e}") from e
    logger.info("Loaded %s (%dx%d)", path, buffer.width, buffer.height)
    return buffer


def save_image(buffer: RasterBuffer, path: PathLike) -> Path:
    """Write a raster buffer; the format follows the file extension."""
    path = Path(path)
    ext = _extension(path)
    if not path.parent.exists():
        raise ImageFormatError(f"Directory does not exist: {path.parent}")

    if ext == PPM_EXTENSION:
        path.write_text(write_ppm(buffer.pixels))
    elif not cv2.imwrite(str(path), cv2.cvtColor(buffer.to_array(), cv2.COLOR_RGB2BGR)):
        raise ImageFormatError(f"Could not save image to {path}")
    logger.info("Saved %s to %s", buffer.name, path)
    return path
