"""Data models: raster buffers, operation parameters, the image store."""

from .errors import ValidationError, ImageNotFoundError, ImageFormatError
from .raster_buffer import RasterBuffer, require_same_shape
from .operations import (
    Component,
    Operation,
    LevelsParams,
    CompressionParams,
    SplitParams,
    ResizeParams,
)
from .image_store import ImageStore

__all__ = [
    'ValidationError',
    'ImageNotFoundError',
    'ImageFormatError',
    'RasterBuffer',
    'require_same_shape',
    'Component',
    'Operation',
    'LevelsParams',
    'CompressionParams',
    'SplitParams',
    'ResizeParams',
    'ImageStore',
]
