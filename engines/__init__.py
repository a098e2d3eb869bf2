"""Image transform engines - pure computation over raster buffers."""

from .convolution import apply_kernel, blur, sharpen
from .color_transform import (
    apply_matrix,
    sepia,
    luma,
    extract_component,
    brighten,
    split_channels,
    combine_channels,
)
from .geometry import flip_horizontal, flip_vertical
from .histogram import (
    compute_frequency,
    find_peak,
    color_correct,
    normalize_frequency,
    normalized_histogram,
)
from .levels import curve_coefficients, apply_levels
from .wavelet import (
    haar_transform,
    inverse_haar_transform,
    threshold_coefficients,
    compress,
    compression_stats,
)
from .resampling import downscale
from .compositing import OPERATION_TABLE, apply_operation, mask, split_preview

__all__ = [
    'apply_kernel',
    'blur',
    'sharpen',
    'apply_matrix',
    'sepia',
    'luma',
    'extract_component',
    'brighten',
    'split_channels',
    'combine_channels',
    'flip_horizontal',
    'flip_vertical',
    'compute_frequency',
    'find_peak',
    'color_correct',
    'normalize_frequency',
    'normalized_histogram',
    'curve_coefficients',
    'apply_levels',
    'haar_transform',
    'inverse_haar_transform',
    'threshold_coefficients',
    'compress',
    'compression_stats',
    'downscale',
    'OPERATION_TABLE',
    'apply_operation',
    'mask',
    'split_preview',
]
