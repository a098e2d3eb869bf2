"""Mask-restricted and width-split application of named operations."""

import logging
from typing import Callable, Dict, Optional, Sequence

import numpy as np

from models.operations import LevelsParams, Operation, SplitParams
from models.raster_buffer import RasterBuffer, require_same_shape
from engines.color_transform import extract_component, sepia
from engines.convolution import blur, sharpen
from engines.histogram import color_correct
from engines.levels import apply_levels

logger = logging.getLogger(__name__)

Params = Optional[Sequence[int]]


def _component(op: Operation) -> Callable[[RasterBuffer, Params], RasterBuffer]:
    kind = op.component
    return lambda buffer, params: extract_component(buffer, kind)


def _levels(buffer: RasterBuffer, params: Params) -> RasterBuffer:
    levels = LevelsParams.from_sequence(params)
    return apply_levels(buffer, *levels.as_tuple())


OPERATION_TABLE: Dict[Operation, Callable[[RasterBuffer, Params], RasterBuffer]] = {
    Operation.BLUR: lambda buffer, params: blur(buffer),
    Operation.SHARPEN: lambda buffer, params: sharpen(buffer),
    Operation.SEPIA: lambda buffer, params: sepia(buffer),
    Operation.RED_COMPONENT: _component(Operation.RED_COMPONENT),
    Operation.GREEN_COMPONENT: _component(Operation.GREEN_COMPONENT),
    Operation.BLUE_COMPONENT: _component(Operation.BLUE_COMPONENT),
    Operation.LUMA_COMPONENT: _component(Operation.LUMA_COMPONENT),
    Operation.VALUE_COMPONENT: _component(Operation.VALUE_COMPONENT),
    Operation.INTENSITY_COMPONENT: _component(Operation.INTENSITY_COMPONENT),
    Operation.COLOR_CORRECT: lambda buffer, params: color_correct(buffer),
    Operation.LEVELS_ADJUST: _levels,
}


def apply_operation(operation, buffer: RasterBuffer, params: Params = None) -> RasterBuffer:
    """Run one operation from the closed operation set on a whole buffer."""
    op = Operation.parse(operation)
    return OPERATION_TABLE[op](buffer, params)


def mask(operation, buffer: RasterBuffer, mask_buffer: RasterBuffer, params: Params = None) -> RasterBuffer:
    """Apply an operation only where the mask pixel is pure black.

    Selection is all-or-nothing per pixel; any non-black mask pixel keeps
    the original value.
    """
    op = Operation.parse(operation)
    require_same_shape(buffer, mask_buffer)
    if op.needs_params:
        LevelsParams.from_sequence(params)

    transformed = OPERATION_TABLE[op](buffer, params)
    selected = np.all(mask_buffer.pixels == 0, axis=2)
    out = np.where(selected[:, :, np.newaxis], transformed.pixels, buffer.pixels)
    logger.debug("Masked %s applied to %d of %d pixels", op.value, int(selected.sum()), selected.size)
    return buffer.derive(out)


def split_preview(operation, buffer: RasterBuffer, percentage: float, params: Params = None) -> RasterBuffer:
    """Apply an operation to the leftmost percentage of the columns.

    The operation sees only those columns, so image-wide statistics such as
    histogram peaks are computed over the preview region alone.
    """
    op = Operation.parse(operation)
    split = SplitParams(percentage).split_width(buffer.width)
    if op.needs_params:
        LevelsParams.from_sequence(params)
    if split == 0:
        return buffer.derive(buffer.pixels)

    region = buffer.derive(buffer.pixels[:, :split])
    transformed = OPERATION_TABLE[op](region, params)
    out = np.concatenate([transformed.pixels, buffer.pixels[:, split:]], axis=1)
    logger.debug("Split preview of %s over %d of %d columns", op.value, split, buffer.width)
    return buffer.derive(out)
