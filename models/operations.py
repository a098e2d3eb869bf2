"""Operation kinds and their validated parameters."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Sequence, Tuple

from models.errors import ValidationError


class Component(Enum):
    """Scalar extracted from each pixel and replicated into all channels."""

    RED = 'red'
    GREEN = 'green'
    BLUE = 'blue'
    VALUE = 'value'
    INTENSITY = 'intensity'
    LUMA = 'luma'

    @classmethod
    def parse(cls, kind) -> 'Component':
        if isinstance(kind, cls):
            return kind
        try:
            return cls(str(kind).lower())
        except ValueError:
            raise ValidationError(f"Unknown component: {kind}") from None


class Operation(Enum):
    """Operations that can be masked or previewed on part of an image."""

    BLUR = 'blur'
    SHARPEN = 'sharpen'
    SEPIA = 'sepia'
    RED_COMPONENT = 'red-component'
    GREEN_COMPONENT = 'green-component'
    BLUE_COMPONENT = 'blue-component'
    LUMA_COMPONENT = 'luma-component'
    VALUE_COMPONENT = 'value-component'
    INTENSITY_COMPONENT = 'intensity-component'
    COLOR_CORRECT = 'color-correct'
    LEVELS_ADJUST = 'levels-adjust'

    @classmethod
    def parse(cls, name) -> 'Operation':
        if isinstance(name, cls):
            return name
        try:
            return cls(str(name).lower())
        except ValueError:
            raise ValidationError(f"Unsupported operation: {name}") from None

    @property
    def component(self) -> Optional[Component]:
        """Component extracted by this operation, if it is a component operation."""
        if self.value.endswith('-component'):
            return Component(self.value[:-len('-component')])
        return None

    @property
    def needs_params(self) -> bool:
        return self is Operation.LEVELS_ADJUST


@dataclass(frozen=True)
class LevelsParams:
    """Black, mid and white points of a level adjustment."""

    black: int
    mid: int
    white: int

    def __post_init__(self):
        if not (0 <= self.black < self.mid < self.white <= 255):
            raise ValidationError(
                f"Levels must satisfy 0 <= black < mid < white <= 255, "
                f"got {self.black}, {self.mid}, {self.white}"
            )

    @classmethod
    def from_sequence(cls, params: Optional[Sequence[int]]) -> 'LevelsParams':
        if params is None or len(params) != 3:
            raise ValidationError("Levels adjustment needs exactly three parameters: black, mid, white")
        return cls(*(int(p) for p in params))

    def as_tuple(self) -> Tuple[int, int, int]:
        return (self.black, self.mid, self.white)


def _check_percentage(percentage: float) -> None:
    if not (0 <= percentage <= 100):
        raise ValidationError(f"Percentage must be between 0 and 100, got {percentage}")


@dataclass(frozen=True)
class CompressionParams:
    """Share of wavelet coefficients (by distinct magnitude) to discard."""

    percentage: float = 50

    def __post_init__(self):
        _check_percentage(self.percentage)


@dataclass(frozen=True)
class SplitParams:
    """Share of the image width, from the left, that receives an operation."""

    percentage: float = 50

    def __post_init__(self):
        _check_percentage(self.percentage)

    def split_width(self, width: int) -> int:
        return int(width * self.percentage / 100)


@dataclass(frozen=True)
class ResizeParams:
    """Target dimensions of a downscale."""

    height: int
    width: int

    def __post_init__(self):
        if self.height <= 0 or self.width <= 0:
            raise ValidationError(f"Target size must be positive, got {self.height}x{self.width}")

    def check_fits(self, height: int, width: int) -> None:
        if self.height > height or self.width > width:
            raise ValidationError(
                f"Target size {self.height}x{self.width} exceeds source size {height}x{width}; "
                f"only downscaling is supported"
            )
