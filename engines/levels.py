"""Quadratic level curve through the black, mid and white points."""

from typing import Tuple

import numpy as np

from models.operations import LevelsParams
from models.raster_buffer import RasterBuffer
from engines.pixel_math import clamp_to_pixels
from utils.constants import LEVELS_TARGETS


def curve_coefficients(black: int, mid: int, white: int) -> Tuple[float, float, float]:
    """Coefficients (a, b, c) of y = a*x^2 + b*x + c.

    The curve maps black to 0, mid to 128 and white to 255. Solved with
    Cramer's rule; the black point's output is zero, so its column drops out.
    """
    LevelsParams(black, mid, white)
    _, m, w = (float(t) for t in LEVELS_TARGETS)
    black, mid, white = float(black), float(mid), float(white)

    det = (black ** 2 * (mid - white)) - (black * (mid ** 2 - white ** 2)) \
        + (white * mid ** 2) - (mid * white ** 2)
    det_a = (-1 * black * (m - w)) + m * white - w * mid
    det_b = (black ** 2 * (m - w)) + (w * mid ** 2) - (m * white ** 2)
    det_c = (black ** 2 * (w * mid - m * white)) - (black * ((w * mid ** 2) - (m * white ** 2)))
    return det_a / det, det_b / det, det_c / det


def apply_levels(buffer: RasterBuffer, black: int, mid: int, white: int) -> RasterBuffer:
    """Map every channel value through the level curve, truncating the result."""
    a, b, c = curve_coefficients(black, mid, white)
    v = buffer.pixels.astype(np.float64)
    curve = (a * v * v) + (b * v) + c
    return buffer.derive(clamp_to_pixels(np.trunc(curve)))
