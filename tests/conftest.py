"""Shared fixtures."""

import numpy as np
import pytest

from models.raster_buffer import RasterBuffer
from utils.test_images import generate_static


@pytest.fixture
def static_image():
    return generate_static()


@pytest.fixture
def random_image():
    rng = np.random.default_rng(1234)
    return RasterBuffer('random', rng.integers(0, 256, size=(13, 17, 3), dtype=np.uint8))
