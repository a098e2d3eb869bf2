"""Bilinear downscaling."""

import numpy as np

from models.operations import ResizeParams
from models.raster_buffer import RasterBuffer
from engines.pixel_math import round_half_up, clamp_to_pixels


def _sample_grid(source_len: int, target_len: int):
    """Source coordinates, clamped floor/ceil neighbours and blend fractions along one axis."""
    ratio = source_len / target_len
    coords = np.arange(target_len) * ratio
    lower = np.minimum(np.floor(coords).astype(np.intp), source_len - 1)
    upper = np.minimum(np.ceil(coords).astype(np.intp), source_len - 1)
    return lower, upper, coords - lower


def downscale(buffer: RasterBuffer, target_height: int, target_width: int) -> RasterBuffer:
    """Shrink to target_height x target_width by bilinear interpolation."""
    params = ResizeParams(target_height, target_width)
    params.check_fits(buffer.height, buffer.width)

    x0, x1, fx = _sample_grid(buffer.height, params.height)
    y0, y1, fy = _sample_grid(buffer.width, params.width)
    src = buffer.pixels.astype(np.float64)

    fx = fx[:, np.newaxis, np.newaxis]
    fy = fy[np.newaxis, :, np.newaxis]
    rows0, rows1 = x0[:, np.newaxis], x1[:, np.newaxis]

    # blend along height first, at the left and right neighbour columns
    left = src[rows0, y0[np.newaxis, :]] * (1 - fx) + src[rows1, y0[np.newaxis, :]] * fx
    right = src[rows0, y1[np.newaxis, :]] * (1 - fx) + src[rows1, y1[np.newaxis, :]] * fx
    blended = left * (1 - fy) + right * fy
    return buffer.derive(clamp_to_pixels(round_half_up(blended)))
