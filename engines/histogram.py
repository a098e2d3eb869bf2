"""Channel histograms, peak-based color correction and the histogram plot."""

import numpy as np

from models.errors import ValidationError
from models.raster_buffer import RasterBuffer
from engines.pixel_math import round_half_up, clamp_to_pixels
from utils.constants import (
    HISTOGRAM_BACKGROUND_COLOR,
    HISTOGRAM_GRID_COLOR,
    HISTOGRAM_GRID_SPACING,
    HISTOGRAM_LINE_COLORS,
    HISTOGRAM_SIZE,
    LEVELS,
    MAX_VALUE,
    PEAK_SEARCH_HIGH,
    PEAK_SEARCH_LOW,
)


def compute_frequency(buffer: RasterBuffer, channel: int) -> np.ndarray:
    """Count of pixels at each intensity 0..255 for one channel."""
    if channel not in (0, 1, 2):
        raise ValidationError(f"Channel must be 0 (red), 1 (green) or 2 (blue), got {channel}")
    return np.bincount(buffer.pixels[:, :, channel].ravel(), minlength=LEVELS).astype(np.int64)


def find_peak(frequency: np.ndarray) -> int:
    """Most frequent intensity in the peak search range, lowest index on ties.

    Returns 0 when the search range holds no pixels at all.
    """
    window = np.asarray(frequency)[PEAK_SEARCH_LOW:PEAK_SEARCH_HIGH + 1]
    if window.max() <= 0:
        return 0
    # argmax returns the first occurrence of the maximum
    return PEAK_SEARCH_LOW + int(np.argmax(window))


def color_correct(buffer: RasterBuffer) -> RasterBuffer:
    """Shift each channel so its histogram peak moves to the mean peak."""
    peaks = [find_peak(compute_frequency(buffer, k)) for k in range(3)]
    average = sum(peaks) // 3
    offsets = np.array([average - p for p in peaks], dtype=np.int32)
    corrected = buffer.pixels.astype(np.int32) + offsets
    return buffer.derive(clamp_to_pixels(corrected))


def normalize_frequency(frequency: np.ndarray) -> np.ndarray:
    """Scale a frequency table so its maximum maps to 255."""
    frequency = np.asarray(frequency, dtype=np.float64)
    return round_half_up(frequency * MAX_VALUE / frequency.max()).astype(np.int32)


def _background() -> np.ndarray:
    image = np.empty((HISTOGRAM_SIZE, HISTOGRAM_SIZE, 3), dtype=np.uint8)
    image[:, :] = HISTOGRAM_BACKGROUND_COLOR
    grid = np.arange(HISTOGRAM_SIZE) % HISTOGRAM_GRID_SPACING == 0
    image[grid, :] = HISTOGRAM_GRID_COLOR
    image[:, grid] = HISTOGRAM_GRID_COLOR
    return image


def normalized_histogram(buffer: RasterBuffer) -> RasterBuffer:
    """256x256 line plot of the red, green and blue histograms.

    Each channel is normalized against its own maximum. Column j holds a
    vertical segment joining the previous and current heights; blue is
    drawn last and wins where lines overlap.
    """
    image = _background()
    rows = [MAX_VALUE - normalize_frequency(compute_frequency(buffer, k)) for k in range(3)]

    for j in range(1, LEVELS):
        for heights, color in zip(rows, HISTOGRAM_LINE_COLORS):
            top, bottom = sorted((int(heights[j - 1]), int(heights[j])))
            image[top:bottom + 1, j] = color
    return buffer.derive(image)
