"""Tests for frequencies, peak search, color correction and the histogram plot."""

import numpy as np
import pytest

from engines.compositing import split_preview
from engines.histogram import (
    color_correct,
    compute_frequency,
    find_peak,
    normalize_frequency,
    normalized_histogram,
)
from models.errors import ValidationError
from models.raster_buffer import RasterBuffer
from utils.test_images import generate_color_cast

RED, GREEN, BLUE = (255, 0, 0), (0, 255, 0), (0, 0, 255)
GRID, WHITE = (170, 170, 170), (255, 255, 255)


def test_frequency_counts(static_image):
    freq = compute_frequency(static_image, 0)
    assert freq.shape == (256,)
    assert freq.sum() == 12
    assert freq[0] == 3 and freq[128] == 2 and freq[64] == 2 and freq[255] == 1


def test_frequency_bad_channel(static_image):
    with pytest.raises(ValidationError):
        compute_frequency(static_image, 3)


def test_peak_ties_take_lowest_index():
    freq = np.zeros(256, dtype=int)
    freq[64] = 2
    freq[128] = 2
    freq[50] = 1
    assert find_peak(freq) == 64


def test_peak_ignores_extremes():
    freq = np.zeros(256, dtype=int)
    freq[5] = 100
    freq[250] = 100
    freq[10] = 1
    freq[245] = 1
    assert find_peak(freq) == 10


def test_peak_of_empty_range_is_zero():
    freq = np.zeros(256, dtype=int)
    freq[0] = 9
    freq[255] = 9
    assert find_peak(freq) == 0


def test_color_correct_static(static_image):
    """Peaks are R=64, G=128, B=64, so the mean peak is 85."""
    result = color_correct(static_image)
    assert tuple(result.pixels[0, 0]) == (255, 0, 21)
    assert tuple(result.pixels[1, 0]) == (149, 85, 149)
    assert tuple(result.pixels[1, 1]) == (213, 149, 213)


def test_color_correct_balanced_region_unchanged(static_image):
    """The first two columns have every peak at 128, so nothing moves."""
    assert split_preview('color-correct', static_image, 70.3) == static_image


def test_color_correct_removes_cast():
    """A constant per-channel offset is removed, leaving equal channels."""
    result = color_correct(generate_color_cast())
    assert np.array_equal(result.pixels[..., 0], result.pixels[..., 1])
    assert np.array_equal(result.pixels[..., 1], result.pixels[..., 2])


def test_normalize_frequency_rounds_half_up():
    freq = np.zeros(256, dtype=int)
    freq[3] = 5
    freq[7] = 10
    norm = normalize_frequency(freq)
    assert norm[7] == 255
    assert norm[3] == 128
    assert norm[0] == 0


def test_histogram_layout_for_flat_image():
    """A single intensity draws two full-height spikes and a baseline."""
    plot = normalized_histogram(RasterBuffer.blank('flat', 6, 9, 100)).pixels
    assert plot.shape == (256, 256, 3)
    assert np.all(plot[:, 100] == BLUE)
    assert np.all(plot[:, 101] == BLUE)
    assert np.all(plot[255, 1:] == BLUE)
    assert tuple(plot[10, 50]) == WHITE
    assert tuple(plot[15, 50]) == GRID
    assert tuple(plot[10, 45]) == GRID
    assert tuple(plot[10, 0]) == GRID


def test_histogram_draws_channels_in_order():
    """Red and green lines show where blue does not cover them."""
    pixels = np.zeros((4, 4, 3), dtype=np.uint8)
    pixels[..., 0] = 200
    pixels[..., 1] = 20
    plot = normalized_histogram(RasterBuffer('img', pixels)).pixels
    assert tuple(plot[100, 200]) == RED
    assert tuple(plot[100, 20]) == GREEN
    # blue piles up at 0 and is drawn last along the baseline
    assert tuple(plot[255, 200]) == BLUE


def test_histogram_normalizes_channels_independently():
    pixels = np.zeros((2, 2, 3), dtype=np.uint8)
    pixels[..., 0] = 100
    pixels[:, 0, 1] = 50
    pixels[:, 1, 1] = 150
    plot = normalized_histogram(RasterBuffer('img', pixels)).pixels
    # green has only half as many pixels per bin but still reaches the top
    assert tuple(plot[0, 50]) == GREEN
    assert tuple(plot[0, 150]) == GREEN
