"""Metrics: PSNR, SSIM and command timing."""

import time
from typing import Dict

import numpy as np
from skimage.metrics import peak_signal_noise_ratio, structural_similarity

from utils.constants import LUMA_MATRIX


def _luma_plane(rgb: np.ndarray) -> np.ndarray:
    weights = LUMA_MATRIX[0]
    return weights[0] * rgb[:, :, 0] + weights[1] * rgb[:, :, 1] + weights[2] * rgb[:, :, 2]


def compute_psnr_ssim(original_rgb: np.ndarray, processed_rgb: np.ndarray) -> Dict[str, float]:
    """PSNR and SSIM on RGB and on the luma plane.

    Identical inputs give an infinite PSNR. SSIM needs at least 7x7 pixels
    and is reported as NaN for smaller images.
    """
    original_rgb = np.asarray(original_rgb, dtype=np.float64)
    processed_rgb = np.asarray(processed_rgb, dtype=np.float64)
    original_y = _luma_plane(original_rgb)
    processed_y = _luma_plane(processed_rgb)

    if np.array_equal(original_rgb, processed_rgb):
        psnr_rgb = psnr_y = float('inf')
    else:
        psnr_rgb = peak_signal_noise_ratio(original_rgb, processed_rgb, data_range=255)
        psnr_y = peak_signal_noise_ratio(original_y, processed_y, data_range=255)

    if min(original_rgb.shape[:2]) >= 7:
        ssim_rgb = structural_similarity(original_rgb, processed_rgb, channel_axis=2, data_range=255)
        ssim_y = structural_similarity(original_y, processed_y, data_range=255)
    else:
        ssim_rgb = ssim_y = float('nan')

    return {
        'psnr_rgb': float(psnr_rgb),
        'ssim_rgb': float(ssim_rgb),
        'psnr_y': float(psnr_y),
        'ssim_y': float(ssim_y)
    }


class Timer:
    """Wall-clock timer for a single call."""

    def __init__(self):
        self.elapsed_ms = 0.0

    def measure(self, func, *args, **kwargs):
        start = time.perf_counter()
        result = func(*args, **kwargs)
        self.elapsed_ms = (time.perf_counter() - start) * 1000.0
        return result
