"""Tests for blur and sharpen."""

import numpy as np
import pytest

from engines.convolution import apply_kernel, blur, sharpen
from models.raster_buffer import RasterBuffer
from utils.constants import BLUR_KERNEL, SHARPEN_KERNEL


def test_kernels_sum_to_one():
    assert np.isclose(BLUR_KERNEL.sum(), 1.0)
    assert np.isclose(SHARPEN_KERNEL.sum(), 1.0)


def test_blur_corner_rounds_to_nearest(static_image):
    """Corner sums only the in-bounds cells: 91.75, 59.875, 28."""
    result = blur(static_image)
    assert tuple(result.pixels[0, 0]) == (92, 60, 28)


def test_blur_skips_cells_outside_image():
    """Uniform image keeps its value inside and loses weight at the border."""
    result = blur(RasterBuffer.blank('flat', 5, 5, 100))
    assert np.all(result.pixels[1:-1, 1:-1] == 100)
    # corner sees 9/16 of the kernel weight
    assert np.all(result.pixels[0, 0] == 56)
    # edge sees 12/16
    assert np.all(result.pixels[0, 2] == 75)


def test_sharpen_keeps_flat_interior():
    result = sharpen(RasterBuffer.blank('flat', 7, 7, 80))
    assert np.all(result.pixels[2:-2, 2:-2] == 80)


def test_sharpen_clamps(static_image):
    result = sharpen(static_image)
    assert result.pixels.dtype == np.uint8
    assert result.pixels.max() == 255


def test_convolution_preserves_shape_and_input(random_image):
    before = random_image.to_array()
    for op in (blur, sharpen):
        result = op(random_image)
        assert result.shape == random_image.shape
        assert result.name == random_image.name
    assert np.array_equal(random_image.pixels, before)


def test_identity_kernel(random_image):
    identity = np.zeros((3, 3))
    identity[1, 1] = 1.0
    assert apply_kernel(identity, random_image) == random_image


@pytest.mark.parametrize('size', [(1, 1), (1, 6), (6, 1), (2, 3)])
def test_tiny_images(size):
    buffer = RasterBuffer.blank('tiny', *size, value=200)
    assert blur(buffer).shape == buffer.shape
    assert sharpen(buffer).shape == buffer.shape
