"""Mirror flips."""

import cv2

from models.raster_buffer import RasterBuffer


def flip_horizontal(buffer: RasterBuffer) -> RasterBuffer:
    """Mirror left to right."""
    return buffer.derive(cv2.flip(buffer.to_array(), 1))


def flip_vertical(buffer: RasterBuffer) -> RasterBuffer:
    """Mirror top to bottom."""
    return buffer.derive(cv2.flip(buffer.to_array(), 0))
