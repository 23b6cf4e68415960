"""Plans the intermediate sizes of a progressive bilinear resize.

A single bilinear resample over a large ratio loses detail, so the resize is
split into steps of at most ``RESIZE_FACTOR`` per axis. The plan only holds the
*intermediate* sizes: an empty plan means one direct blit suffices.
"""

import logging
from typing import Any, Sequence

from .exceptions import InvalidConfigError, InvalidDimensionError
from .types import BlitKind, BlitStep, Size

logger = logging.getLogger(__name__)

RESIZE_FACTOR = 2
RESIZE_SKIP_THRESHOLD = 3  # a "few" pixels


def _check_dimension(name: str, value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise InvalidDimensionError(name, value)
    return value


def axis_plan(
    source_size: int,
    target_size: int,
    *,
    factor: int = RESIZE_FACTOR,
    skip_threshold: int = RESIZE_SKIP_THRESHOLD,
) -> list[int]:
    """Return the intermediate sizes for one axis, in traversal order.

    The sizes are the powers of ``factor`` times the smaller of the two sizes
    that lie strictly below the larger one. When the first step (the one
    nearest the larger size) differs from it by no more than ``skip_threshold``
    pixels it is dropped, as such a small step adds noise rather than quality.
    """
    _check_dimension("source_size", source_size)
    _check_dimension("target_size", target_size)
    if factor < 2:
        raise InvalidConfigError(f"resize factor must be at least 2, got {factor}")
    if skip_threshold < 0:
        raise InvalidConfigError(f"skip threshold must not be negative, got {skip_threshold}")

    enlarging = source_size < target_size
    if enlarging:
        source_size, target_size = target_size, source_size

    # From here on the axis is always reduced from source_size to target_size.
    steps: list[int] = []
    intermediate = target_size * factor
    while intermediate < source_size:
        steps.insert(0, intermediate)
        intermediate *= factor

    if steps and steps[0] >= source_size - skip_threshold:
        del steps[0]

    if enlarging:
        steps.reverse()
    return steps


def plan(
    source_width: int,
    source_height: int,
    target_width: int,
    target_height: int,
    *,
    factor: int = RESIZE_FACTOR,
    skip_threshold: int = RESIZE_SKIP_THRESHOLD,
) -> list[Size]:
    """Get the intermediate sizes between the source and target sizes.

    Width and height are planned independently. If one axis needs fewer steps,
    its list is padded at the front with its *source* size, so that axis holds
    still while the other one catches up. Neither the source nor the target
    size is part of the result.
    """
    _check_dimension("source_width", source_width)
    _check_dimension("source_height", source_height)
    _check_dimension("target_width", target_width)
    _check_dimension("target_height", target_height)

    widths = axis_plan(source_width, target_width, factor=factor, skip_threshold=skip_threshold)
    heights = axis_plan(source_height, target_height, factor=factor, skip_threshold=skip_threshold)

    if len(widths) < len(heights):
        widths = [source_width] * (len(heights) - len(widths)) + widths
    elif len(heights) < len(widths):
        heights = [source_height] * (len(widths) - len(heights)) + heights

    steps = [Size(width, height) for width, height in zip(widths, heights)]
    logger.debug(
        "Planned resize",
        extra={
            "source": f"{source_width}*{source_height}",
            "target": f"{target_width}*{target_height}",
            "steps": len(steps),
        },
    )
    return steps


def max_size(steps: Sequence[Size]) -> Size:
    """Return the largest width and the largest height found in ``steps``.

    The two maxima may come from different entries.
    """
    if not steps:
        raise ValueError("Cannot take the maximum size of an empty plan")
    return Size(max(s.width for s in steps), max(s.height for s in steps))


def schedule(source: Size, target: Size, steps: Sequence[Size]) -> list[BlitStep]:
    """List the scaled copies needed to walk ``steps`` from source to target."""
    if not steps:
        return [BlitStep(0, BlitKind.SOURCE_TO_TARGET, source, target)]

    blits: list[BlitStep] = []
    current = source
    for index, step_size in enumerate(steps):
        kind = BlitKind.SOURCE_TO_WORK if index == 0 else BlitKind.WORK_TO_WORK
        blits.append(BlitStep(index, kind, current, step_size))
        current = step_size
    blits.append(BlitStep(len(steps), BlitKind.WORK_TO_TARGET, current, target))
    return blits
