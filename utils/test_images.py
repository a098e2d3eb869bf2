"""Synthetic test images for experiments and tests."""

from typing import Optional

import numpy as np

from models.raster_buffer import RasterBuffer

STATIC_PIXELS = [
    [[255, 0, 0], [0, 255, 0], [0, 0, 255]],
    [[128, 128, 128], [192, 192, 192], [64, 64, 64]],
    [[100, 200, 150], [50, 50, 150], [150, 50, 50]],
    [[0, 128, 64], [128, 0, 128], [64, 128, 0]],
]


def generate_static(name: str = 'static') -> RasterBuffer:
    """4x3 image of distinct primaries, greys and mixed colors."""
    return RasterBuffer(name, np.array(STATIC_PIXELS, dtype=np.uint8))


def generate_colored_checkerboard(size: int = 64, block_size: int = 8) -> RasterBuffer:
    """High-contrast checkerboard - shows blur and compression edges."""
    img = np.zeros((size, size, 3), dtype=np.uint8)

    for i in range(0, size, block_size):
        for j in range(0, size, block_size):
            block_idx = (i // block_size + j // block_size) % 2
            if block_idx == 0:
                img[i:i+block_size, j:j+block_size] = [30, 30, 30]
            else:
                img[i:i+block_size, j:j+block_size] = [220, 220, 220]

    return RasterBuffer('checkerboard', img)


def generate_thin_stripes(size: int = 64, stripe_width: int = 2) -> RasterBuffer:
    """Fine vertical stripes - shows aliasing from downscaling."""
    img = np.zeros((size, size, 3), dtype=np.uint8)

    for j in range(size):
        if (j // stripe_width) % 2 == 0:
            img[:, j] = [200, 60, 60]
        else:
            img[:, j] = [60, 180, 200]

    return RasterBuffer('stripes', img)


def generate_gradient(height: int = 48, width: int = 64) -> RasterBuffer:
    """Smooth diagonal gradient - reveals banding from compression."""
    i, j = np.mgrid[0:height, 0:width]
    t = (i + j) / max(height + width - 2, 1)
    img = np.stack([40 + t * 180, 60 + t * 140, 120 + t * 100], axis=-1)
    return RasterBuffer('gradient', np.clip(np.round(img), 0, 255).astype(np.uint8))


def generate_color_cast(height: int = 32, width: int = 32, cast=(30, 0, -20), seed: int = 7) -> RasterBuffer:
    """Mid-grey noise with a constant per-channel offset - color correction input."""
    rng = np.random.default_rng(seed)
    base = rng.normal(128, 12, size=(height, width, 1))
    img = np.clip(np.round(base + np.array(cast, dtype=np.float64)), 0, 255)
    return RasterBuffer('color_cast', img.astype(np.uint8))


def generate_demo_image(key: str) -> Optional[RasterBuffer]:
    """Generate demo image by key."""
    generators = {
        "static": generate_static,
        "checkerboard": lambda: generate_colored_checkerboard(256, 32),
        "stripes": lambda: generate_thin_stripes(256, 4),
        "gradient": lambda: generate_gradient(256, 384),
        "color_cast": lambda: generate_color_cast(256, 256),
    }

    if key in generators:
        return generators[key]().with_name(key)

    return None


DEMO_IMAGES = ("static", "checkerboard", "stripes", "gradient", "color_cast")
