"""Per-pixel color transforms: color matrices, component extraction, channel split/combine."""

from typing import Tuple

import numpy as np

from models.errors import ValidationError
from models.operations import Component
from models.raster_buffer import RasterBuffer, require_same_shape
from engines.pixel_math import clamp_to_pixels
from utils.constants import LUMA_MATRIX, SEPIA_MATRIX


def apply_matrix(matrix: np.ndarray, buffer: RasterBuffer) -> RasterBuffer:
    """Multiply every (R, G, B) vector by a 3x3 matrix.

    Each output channel is accumulated in input channel order, truncated
    toward zero and then clamped.
    """
    matrix = np.asarray(matrix, dtype=np.float64)
    if matrix.shape != (3, 3):
        raise ValidationError(f"Color matrix must be 3x3, got {matrix.shape}")
    rgb = buffer.pixels.astype(np.float64)
    out = np.zeros_like(rgb)
    for i in range(3):
        for j in range(3):
            out[:, :, i] += matrix[i, j] * rgb[:, :, j]
    return buffer.derive(clamp_to_pixels(np.trunc(out)))


def sepia(buffer: RasterBuffer) -> RasterBuffer:
    return apply_matrix(SEPIA_MATRIX, buffer)


def luma(buffer: RasterBuffer) -> RasterBuffer:
    return apply_matrix(LUMA_MATRIX, buffer)


def _replicate(buffer: RasterBuffer, plane: np.ndarray) -> RasterBuffer:
    return buffer.derive(np.repeat(plane[:, :, np.newaxis], buffer.channels, axis=2))


def extract_component(buffer: RasterBuffer, kind) -> RasterBuffer:
    """Greyscale image built from one scalar per pixel."""
    component = Component.parse(kind)
    rgb = buffer.pixels.astype(np.int32)

    if component is Component.LUMA:
        return luma(buffer)
    if component is Component.RED:
        plane = rgb[:, :, 0]
    elif component is Component.GREEN:
        plane = rgb[:, :, 1]
    elif component is Component.BLUE:
        plane = rgb[:, :, 2]
    elif component is Component.VALUE:
        plane = rgb.max(axis=2)
    else:
        # integer mean, remainder dropped
        plane = rgb.sum(axis=2) // 3
    return _replicate(buffer, plane)


def brighten(buffer: RasterBuffer, intensity: int) -> RasterBuffer:
    """Add a signed offset to every channel value."""
    shifted = buffer.pixels.astype(np.int32) + int(intensity)
    return buffer.derive(clamp_to_pixels(shifted))


def split_channels(buffer: RasterBuffer) -> Tuple[RasterBuffer, RasterBuffer, RasterBuffer]:
    """Red, green and blue component images."""
    return (
        extract_component(buffer, Component.RED),
        extract_component(buffer, Component.GREEN),
        extract_component(buffer, Component.BLUE),
    )


def combine_channels(red: RasterBuffer, green: RasterBuffer, blue: RasterBuffer) -> RasterBuffer:
    """Build an RGB image from the first channel of three greyscale images."""
    require_same_shape(red, green, blue)
    rgb = np.stack(
        [red.pixels[:, :, 0], green.pixels[:, :, 0], blue.pixels[:, :, 0]],
        axis=-1,
    )
    return red.derive(rgb)
