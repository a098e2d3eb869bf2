"""Haar wavelet lossy compression."""

import logging
from typing import Dict

import numpy as np

from models.operations import CompressionParams
from models.raster_buffer import RasterBuffer
from engines.pixel_math import round_half_up, clamp_to_pixels
from utils.constants import THRESHOLD_DECIMALS

logger = logging.getLogger(__name__)

SQRT2 = np.sqrt(2.0)


def padded_size(height: int, width: int) -> int:
    """Smallest power of two >= max(height, width)."""
    size = 1
    while size < max(height, width):
        size *= 2
    return size


def pad_to_square(channel: np.ndarray, size: int) -> np.ndarray:
    """Zero-pad a 2D channel to size x size."""
    h, w = channel.shape
    padded = np.zeros((size, size), dtype=np.float64)
    padded[:h, :w] = channel
    return padded


def _forward_step(matrix: np.ndarray, size: int, axis: int) -> None:
    # views over the leading `size` entries along the axis
    lead = matrix[:, :size] if axis == 1 else matrix[:size, :]
    even = lead[:, 0::2] if axis == 1 else lead[0::2, :]
    odd = lead[:, 1::2] if axis == 1 else lead[1::2, :]
    avg = (even + odd) / SQRT2
    diff = (even - odd) / SQRT2
    half = size // 2
    if axis == 1:
        matrix[:, :half] = avg
        matrix[:, half:size] = diff
    else:
        matrix[:half, :] = avg
        matrix[half:size, :] = diff


def _inverse_step(matrix: np.ndarray, size: int, axis: int) -> None:
    half = size // 2
    if axis == 1:
        avg, diff = matrix[:, :half], matrix[:, half:size]
    else:
        avg, diff = matrix[:half, :], matrix[half:size, :]
    first = (avg + diff) / SQRT2
    second = (avg - diff) / SQRT2
    if axis == 1:
        matrix[:, 0:size:2] = first
        matrix[:, 1:size:2] = second
    else:
        matrix[0:size:2, :] = first
        matrix[1:size:2, :] = second


def haar_transform(channel: np.ndarray) -> np.ndarray:
    """Multi-level 2D Haar decomposition of a square power-of-two matrix.

    At every level the leading `size` entries of each row, then of each
    column, are replaced by pairwise averages followed by pairwise
    differences (both scaled by 1/sqrt(2)); then `size` halves.
    """
    matrix = np.array(channel, dtype=np.float64)
    size = matrix.shape[0]
    while size > 1:
        _forward_step(matrix, size, axis=1)
        _forward_step(matrix, size, axis=0)
        size //= 2
    return matrix


def inverse_haar_transform(coefficients: np.ndarray) -> np.ndarray:
    """Undo haar_transform, growing the block size from 2 to the full size."""
    matrix = np.array(coefficients, dtype=np.float64)
    full = matrix.shape[0]
    size = 2
    while size <= full:
        _inverse_step(matrix, size, axis=1)
        _inverse_step(matrix, size, axis=0)
        size *= 2
    return matrix


def compute_threshold(coefficients: np.ndarray, percentage: float) -> float:
    """Magnitude below which coefficients are discarded.

    Magnitudes are rounded to three decimals and deduplicated; the
    threshold is the distinct value at rank round(percentage% of count).
    """
    if percentage >= 100:
        return float('inf')
    scale = 10.0 ** THRESHOLD_DECIMALS
    distinct = np.unique(np.abs(np.floor(coefficients * scale + 0.5) / scale))
    index = int(np.floor(len(distinct) * (percentage / 100.0) + 0.5))
    index = min(index, len(distinct) - 1)
    return float(distinct[index])


def threshold_coefficients(coefficients: np.ndarray, percentage: float) -> np.ndarray:
    """Zero every coefficient whose magnitude is strictly below the threshold."""
    threshold = compute_threshold(coefficients, percentage)
    result = np.array(coefficients, dtype=np.float64)
    result[np.abs(result) < threshold] = 0.0
    return result


def _compress_channel(channel: np.ndarray, size: int, percentage: float) -> np.ndarray:
    transformed = haar_transform(pad_to_square(channel, size))
    kept = threshold_coefficients(transformed, percentage)
    return inverse_haar_transform(kept)


def compress(buffer: RasterBuffer, percentage: float) -> RasterBuffer:
    """Lossy round trip through the Haar domain.

    Percentages below 1 leave the image untouched; 100 discards every
    coefficient and yields a black image.
    """
    params = CompressionParams(percentage)
    if params.percentage < 1:
        return buffer.derive(buffer.pixels)

    h, w = buffer.height, buffer.width
    size = padded_size(h, w)
    source = buffer.pixels.astype(np.float64)
    out = np.empty((h, w, buffer.channels), dtype=np.float64)
    for k in range(buffer.channels):
        out[:, :, k] = _compress_channel(source[:, :, k], size, params.percentage)[:h, :w]

    logger.debug("Compressed %dx%d image at %s%% (padded to %d)", h, w, params.percentage, size)
    return buffer.derive(clamp_to_pixels(round_half_up(out)))


def compression_stats(buffer: RasterBuffer, percentage: float) -> Dict[str, float]:
    """Count the wavelet coefficients that survive thresholding."""
    params = CompressionParams(percentage)
    size = padded_size(buffer.height, buffer.width)
    total = 0
    kept = 0
    for k in range(buffer.channels):
        transformed = haar_transform(pad_to_square(buffer.pixels[:, :, k].astype(np.float64), size))
        if params.percentage >= 1:
            transformed = threshold_coefficients(transformed, params.percentage)
        total += transformed.size
        kept += int(np.count_nonzero(transformed))
    return {
        'total_coeffs': total,
        'nonzero_coeffs': kept,
        'kept_ratio': kept / total if total else 0.0,
    }
