"""Kernel convolution: blur and sharpen."""

import numpy as np
from scipy.ndimage import correlate

from models.raster_buffer import RasterBuffer
from engines.pixel_math import round_half_up, clamp_to_pixels
from utils.constants import BLUR_KERNEL, SHARPEN_KERNEL


def apply_kernel(kernel: np.ndarray, buffer: RasterBuffer) -> RasterBuffer:
    """Weighted neighbourhood sum per channel.

    Kernel cells that fall outside the image contribute nothing, which is
    the same as correlating against a zero border. The kernel is applied
    without flipping.
    """
    kernel = np.asarray(kernel, dtype=np.float64)
    source = buffer.pixels.astype(np.float64)
    result = np.empty_like(source)
    for k in range(buffer.channels):
        result[:, :, k] = correlate(source[:, :, k], kernel, mode='constant', cval=0.0)
    return buffer.derive(clamp_to_pixels(round_half_up(result)))


def blur(buffer: RasterBuffer) -> RasterBuffer:
    """3x3 Gaussian-like blur."""
    return apply_kernel(BLUR_KERNEL, buffer)


def sharpen(buffer: RasterBuffer) -> RasterBuffer:
    """5x5 sharpen."""
    return apply_kernel(SHARPEN_KERNEL, buffer)
