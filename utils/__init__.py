"""Shared utilities.

image_io and test_images build RasterBuffer objects and are imported from
their modules directly.
"""

from .constants import (
    BLUR_KERNEL,
    SHARPEN_KERNEL,
    SEPIA_MATRIX,
    LUMA_MATRIX,
    PEAK_SEARCH_LOW,
    PEAK_SEARCH_HIGH,
)
from .metrics import compute_psnr_ssim, Timer

__all__ = [
    'BLUR_KERNEL',
    'SHARPEN_KERNEL',
    'SEPIA_MATRIX',
    'LUMA_MATRIX',
    'PEAK_SEARCH_LOW',
    'PEAK_SEARCH_HIGH',
    'compute_psnr_ssim',
    'Timer',
]
