"""Text command language mapped onto engine calls against an image store."""

import logging
from dataclasses import dataclass
from typing import Callable, Dict, List, Sequence, Tuple

import engines
from models.errors import ValidationError
from models.image_store import ImageStore
from models.operations import CompressionParams, LevelsParams, Operation, SplitParams
from utils.image_io import load_image, save_image
from utils.metrics import compute_psnr_ssim

logger = logging.getLogger(__name__)

Action = Callable[[ImageStore], None]


@dataclass(frozen=True)
class Command:
    """A parsed command, ready to run against a store."""

    name: str
    args: Tuple[str, ...]
    action: Action

    def execute(self, store: ImageStore) -> None:
        self.action(store)


class ExitRequested(Exception):
    """Raised by the exit command to stop a runner."""


def _expect(tokens: Sequence[str], *lengths: int) -> None:
    if len(tokens) not in lengths:
        raise ValidationError(f"Invalid parameters for '{tokens[0]}': expected "
                              f"{' or '.join(str(n - 1) for n in lengths)} arguments, got {len(tokens) - 1}")


def _int(value: str, what: str) -> int:
    try:
        return int(value)
    except ValueError:
        raise ValidationError(f"{what} must be an integer, got '{value}'") from None


def _float(value: str, what: str) -> float:
    try:
        return float(value)
    except ValueError:
        raise ValidationError(f"{what} must be a number, got '{value}'") from None


def _split_percentage(keyword: str, value: str) -> float:
    if keyword.lower() != 'split':
        raise ValidationError(f"Expected 'split <percentage>', got '{keyword}'")
    return SplitParams(_float(value, 'Split percentage')).percentage


def _parse_load(tokens):
    _expect(tokens, 3)
    path, name = tokens[1], tokens[2]
    return lambda store: store.put(name, load_image(path, name))


def _parse_save(tokens):
    _expect(tokens, 3)
    path, name = tokens[1], tokens[2]
    return lambda store: save_image(store.get(name), path)


def _parse_brighten(tokens):
    _expect(tokens, 4)
    amount = _int(tokens[1], 'Brightness increment')
    src, dst = tokens[2], tokens[3]
    return lambda store: store.put(dst, engines.brighten(store.get(src), amount))


def _parse_flip(flip):
    def parse(tokens):
        _expect(tokens, 3)
        src, dst = tokens[1], tokens[2]
        return lambda store: store.put(dst, flip(store.get(src)))
    return parse


def _parse_rgb_split(tokens):
    _expect(tokens, 5)
    src, names = tokens[1], tokens[2:5]

    def action(store):
        for name, part in zip(names, engines.split_channels(store.get(src))):
            store.put(name, part)
    return action


def _parse_rgb_combine(tokens):
    _expect(tokens, 5)
    dst, red, green, blue = tokens[1:5]
    return lambda store: store.put(
        dst, engines.combine_channels(store.get(red), store.get(green), store.get(blue))
    )


def _parse_compress(tokens):
    _expect(tokens, 4)
    percentage = CompressionParams(_float(tokens[1], 'Compression percentage')).percentage
    src, dst = tokens[2], tokens[3]

    def action(store):
        original = store.get(src)
        result = store.put(dst, engines.compress(original, percentage))
        quality = compute_psnr_ssim(original.pixels, result.pixels)
        logger.info("compress %s%%: PSNR %.2f dB", percentage, quality['psnr_rgb'])
    return action


def _parse_histogram(tokens):
    _expect(tokens, 3)
    src, dst = tokens[1], tokens[2]
    return lambda store: store.put(dst, engines.normalized_histogram(store.get(src)))


def _parse_downscale(tokens):
    _expect(tokens, 5)
    src, dst = tokens[1], tokens[2]
    height = _int(tokens[3], 'Height')
    width = _int(tokens[4], 'Width')
    return lambda store: store.put(dst, engines.downscale(store.get(src), height, width))


def _operation_action(op: Operation, rest: Sequence[str], params=None) -> Action:
    """Whole-image, masked or split-preview form of an operation.

    rest is `src dst`, `src mask dst` or `src dst split pct`.
    """
    if len(rest) == 2:
        src, dst = rest
        return lambda store: store.put(dst, engines.apply_operation(op, store.get(src), params))
    if len(rest) == 3:
        src, mask_name, dst = rest
        return lambda store: store.put(
            dst, engines.mask(op, store.get(src), store.get(mask_name), params)
        )
    src, dst, keyword, value = rest
    percentage = _split_percentage(keyword, value)
    return lambda store: store.put(
        dst, engines.split_preview(op, store.get(src), percentage, params)
    )


def _parse_operation(tokens):
    _expect(tokens, 3, 4, 5)
    return _operation_action(Operation.parse(tokens[0]), tokens[1:])


def _parse_color_correct(tokens):
    _expect(tokens, 3, 5)
    return _operation_action(Operation.COLOR_CORRECT, tokens[1:])


def _parse_levels(tokens):
    _expect(tokens, 6, 8)
    levels = LevelsParams(
        _int(tokens[1], 'Black level'), _int(tokens[2], 'Mid level'), _int(tokens[3], 'White level')
    )
    return _operation_action(Operation.LEVELS_ADJUST, tokens[4:], levels.as_tuple())


def _parse_exit(tokens):
    _expect(tokens, 1)

    def action(store):
        raise ExitRequested()
    return action


PARSERS: Dict[str, Callable[[Sequence[str]], Action]] = {
    'load': _parse_load,
    'save': _parse_save,
    'brighten': _parse_brighten,
    'horizontal-flip': _parse_flip(engines.flip_horizontal),
    'vertical-flip': _parse_flip(engines.flip_vertical),
    'rgb-split': _parse_rgb_split,
    'rgb-combine': _parse_rgb_combine,
    'compress': _parse_compress,
    'histogram': _parse_histogram,
    'downscale': _parse_downscale,
    'color-correct': _parse_color_correct,
    'levels-adjust': _parse_levels,
    'exit': _parse_exit,
}
for _op in Operation:
    PARSERS.setdefault(_op.value, _parse_operation)


def tokenize(line: str) -> List[str]:
    tokens = line.split()
    if tokens:
        tokens[0] = tokens[0].lower()
    return tokens


def parse_command(line: str) -> Command:
    """Parse one command line. Raises ValidationError on malformed input."""
    tokens = tokenize(line)
    if not tokens:
        raise ValidationError("Empty command")
    parser = PARSERS.get(tokens[0])
    if parser is None:
        raise ValidationError(f"Command does not exist: {tokens[0]}")
    return Command(tokens[0], tuple(tokens[1:]), parser(tokens))
