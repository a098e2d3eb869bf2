"""Raster buffer: a named, immutable RGB pixel grid."""

from dataclasses import dataclass, field

import numpy as np

from models.errors import ValidationError
from utils.constants import CHANNELS, MAX_VALUE


@dataclass(frozen=True, eq=False)
class RasterBuffer:
    """Height x width x 3 grid of 8-bit values.

    The pixel array is copied on construction and marked read-only, so a
    buffer never changes after it has been produced. Engines build new
    buffers instead of writing into existing ones.
    """

    name: str
    pixels: np.ndarray = field(repr=False)

    def __post_init__(self):
        data = np.asarray(self.pixels)
        if data.ndim != 3:
            raise ValidationError(f"Pixel data must be 3D (height, width, channels), got shape {data.shape}")
        if data.shape[2] != CHANNELS:
            raise ValidationError(f"Pixel data must have {CHANNELS} channels, got {data.shape[2]}")
        if data.size and (data.min() < 0 or data.max() > MAX_VALUE):
            raise ValidationError(f"Pixel values must lie in [0, {MAX_VALUE}]")
        if np.issubdtype(data.dtype, np.floating) and not np.array_equal(data, np.floor(data)):
            raise ValidationError("Pixel values must be integers")
        frozen = data.astype(np.uint8, copy=True)
        frozen.setflags(write=False)
        object.__setattr__(self, 'pixels', frozen)

    @classmethod
    def blank(cls, name: str, height: int, width: int, value: int = 0) -> 'RasterBuffer':
        """Uniform buffer filled with one value."""
        return cls(name, np.full((height, width, CHANNELS), value, dtype=np.uint8))

    @property
    def height(self) -> int:
        return self.pixels.shape[0]

    @property
    def width(self) -> int:
        return self.pixels.shape[1]

    @property
    def channels(self) -> int:
        return self.pixels.shape[2]

    @property
    def shape(self) -> tuple:
        return self.pixels.shape

    def with_name(self, name: str) -> 'RasterBuffer':
        """Same pixels stored under another key."""
        return RasterBuffer(name, self.pixels)

    def derive(self, pixels: np.ndarray) -> 'RasterBuffer':
        """New buffer carrying this buffer's name."""
        return RasterBuffer(self.name, pixels)

    def to_array(self) -> np.ndarray:
        """Writable copy of the pixel data."""
        return self.pixels.copy()

    def same_shape(self, other: 'RasterBuffer') -> bool:
        return self.pixels.shape == other.pixels.shape

    def __eq__(self, other):
        if not isinstance(other, RasterBuffer):
            return NotImplemented
        return self.same_shape(other) and np.array_equal(self.pixels, other.pixels)

    __hash__ = None


def require_same_shape(*buffers: RasterBuffer) -> None:
    """Raise ValidationError unless all buffers share height, width and channels."""
    first = buffers[0]
    for other in buffers[1:]:
        if not first.same_shape(other):
            raise ValidationError(
                f"Image dimensions differ: {first.name} is {first.shape}, {other.name} is {other.shape}"
            )
