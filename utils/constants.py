"""Fixed kernels, color matrices and boundary constants."""

import numpy as np


def _frozen(rows) -> np.ndarray:
    arr = np.array(rows, dtype=np.float64)
    arr.setflags(write=False)
    return arr


BLUR_KERNEL = _frozen([
    [1.0 / 16.0, 1.0 / 8.0, 1.0 / 16.0],
    [1.0 / 8.0, 1.0 / 4.0, 1.0 / 8.0],
    [1.0 / 16.0, 1.0 / 8.0, 1.0 / 16.0],
])

SHARPEN_KERNEL = _frozen([
    [-1.0 / 8.0, -1.0 / 8.0, -1.0 / 8.0, -1.0 / 8.0, -1.0 / 8.0],
    [-1.0 / 8.0, 1.0 / 4.0, 1.0 / 4.0, 1.0 / 4.0, -1.0 / 8.0],
    [-1.0 / 8.0, 1.0 / 4.0, 1.0, 1.0 / 4.0, -1.0 / 8.0],
    [-1.0 / 8.0, 1.0 / 4.0, 1.0 / 4.0, 1.0 / 4.0, -1.0 / 8.0],
    [-1.0 / 8.0, -1.0 / 8.0, -1.0 / 8.0, -1.0 / 8.0, -1.0 / 8.0],
])

SEPIA_MATRIX = _frozen([
    [0.393, 0.769, 0.189],
    [0.349, 0.686, 0.168],
    [0.272, 0.534, 0.131],
])

# Rec. 709 luma weights, one identical row per output channel
LUMA_MATRIX = _frozen([
    [0.2126, 0.7152, 0.0722],
    [0.2126, 0.7152, 0.0722],
    [0.2126, 0.7152, 0.0722],
])

CHANNELS = 3
MAX_VALUE = 255
LEVELS = 256

# Inclusive intensity range searched for histogram peaks
PEAK_SEARCH_LOW = 10
PEAK_SEARCH_HIGH = 245

HISTOGRAM_SIZE = 256
HISTOGRAM_GRID_SPACING = 15
HISTOGRAM_GRID_COLOR = (170, 170, 170)
HISTOGRAM_BACKGROUND_COLOR = (255, 255, 255)
HISTOGRAM_LINE_COLORS = (
    (255, 0, 0),
    (0, 255, 0),
    (0, 0, 255),
)

# Level curve output values at the black, mid and white points
LEVELS_TARGETS = (0, 128, 255)

# Decimal places kept when collecting distinct wavelet coefficients
THRESHOLD_DECIMALS = 3
