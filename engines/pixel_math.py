"""Rounding and clamping shared by the engines."""

import numpy as np

from utils.constants import MAX_VALUE


def round_half_up(values: np.ndarray) -> np.ndarray:
    """Round to the nearest integer, halves away from negative infinity."""
    return np.floor(np.asarray(values, dtype=np.float64) + 0.5)


def clamp_to_pixels(values: np.ndarray) -> np.ndarray:
    """Clip to [0, 255] and cast to uint8. Input must already be integral."""
    return np.clip(values, 0, MAX_VALUE).astype(np.uint8)
