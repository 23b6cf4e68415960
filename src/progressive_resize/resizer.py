import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Sequence

from PIL import Image

from .callbacks import ResizeCallback
from .exceptions import InvalidConfigError
from .planner import RESIZE_FACTOR, RESIZE_SKIP_THRESHOLD, max_size, plan, schedule
from .surfaces import PillowBackend
from .types import BlitKind, BlitStep, Size

logger = logging.getLogger(__name__)


@dataclass
class ResizerConfig:
    """Configuration for progressive resizing."""

    resize_factor: int = RESIZE_FACTOR
    skip_threshold: int = RESIZE_SKIP_THRESHOLD

    def __post_init__(self) -> None:
        if self.resize_factor < 2:
            raise InvalidConfigError(f"resize_factor must be at least 2, got {self.resize_factor}")
        if self.skip_threshold < 0:
            raise InvalidConfigError(f"skip_threshold must not be negative, got {self.skip_threshold}")


class ProgressiveBilinearResizer:
    """Resizes one surface into another through a series of bilinear steps.

    Every intermediate step is drawn into a single scratch surface, sized to
    the largest intermediate width and height of the plan. Each step reads the
    valid top-left region left by the previous one and replaces it.
    """

    def __init__(
        self,
        config: Optional[ResizerConfig] = None,
        backend: Optional[PillowBackend] = None,
        callbacks: Optional[list[ResizeCallback]] = None,
    ) -> None:
        self.config = config or ResizerConfig()
        self.backend = backend or PillowBackend()
        self.callbacks: list[ResizeCallback] = callbacks or []

    def add_callback(self, callback: ResizeCallback) -> None:
        self.callbacks.append(callback)

    def plan_for(self, source: Size, target: Size) -> list[Size]:
        return plan(
            source.width,
            source.height,
            target.width,
            target.height,
            factor=self.config.resize_factor,
            skip_threshold=self.config.skip_threshold,
        )

    def _blit(self, step: BlitStep, source: Image.Image, destination: Image.Image) -> None:
        for callback in self.callbacks:
            callback.before_blit(step)

        self.backend.blit(source, step.source, destination, step.target)

        for callback in self.callbacks:
            callback.after_blit(step)

    def resize(self, source: Image.Image, target: Image.Image) -> None:
        """Draw ``source`` into ``target``, scaled to the target's size.

        ``target`` is written exactly once, by the last blit, and never read.
        """
        source_size = self.backend.size_of(source)
        target_size = self.backend.size_of(target)
        steps = self.plan_for(source_size, target_size)
        blits = schedule(source_size, target_size, steps)

        for callback in self.callbacks:
            callback.before_resize(source_size, target_size, steps)

        try:
            if not steps:
                self._blit(blits[0], source, target)
            else:
                self._resize_through_scratch(blits, steps, source, target)
        except Exception:
            logger.exception(
                "Progressive resize failed",
                extra={"source": str(source_size), "target": str(target_size)},
            )
            raise

        for callback in self.callbacks:
            callback.after_resize(source_size, target_size)

    def _resize_through_scratch(
        self,
        blits: Sequence[BlitStep],
        steps: Sequence[Size],
        source: Image.Image,
        target: Image.Image,
    ) -> None:
        scratch_size = max_size(steps)
        mode = self.backend.mode_of(target)

        with self.backend.scratch(scratch_size, mode) as work:
            for blit in blits:
                read_from = source if blit.kind is BlitKind.SOURCE_TO_WORK else work
                write_to = target if blit.kind is BlitKind.WORK_TO_TARGET else work
                self._blit(blit, read_from, write_to)


def fit_within(source: Size, box: Size) -> Size:
    """Return the largest size with the aspect ratio of ``source`` that fits in ``box``."""
    scale = min(box.width / source.width, box.height / source.height)
    width = min(box.width, max(1, round(source.width * scale)))
    height = min(box.height, max(1, round(source.height * scale)))
    return Size(width, height)


def resize_image(
    image: Image.Image,
    width: int,
    height: int,
    *,
    config: Optional[ResizerConfig] = None,
    callbacks: Optional[list[ResizeCallback]] = None,
) -> Image.Image:
    """Return a new image of ``width`` x ``height`` holding the resized ``image``."""
    resizer = ProgressiveBilinearResizer(config, callbacks=callbacks)
    target = resizer.backend.allocate(Size(width, height), image.mode)
    if image.mode == "P":
        target.putpalette(image.getpalette())
    resizer.resize(image, target)
    return target


def resize_file(
    *,
    input_path: str | Path,
    output_path: str | Path,
    width: int,
    height: int,
    maintain_aspect_ratio: bool = False,
    config: Optional[ResizerConfig] = None,
    callbacks: Optional[list[ResizeCallback]] = None,
) -> str:
    """
    Resize a single image file and write the output.

    Args:
        input_path: Path to input image
        output_path: Path to output image
        width: Target width (the bounding box width if maintaining aspect ratio)
        height: Target height (the bounding box height if maintaining aspect ratio)
        maintain_aspect_ratio: Fit inside width x height, preserving aspect ratio

    Returns:
        Output file path as string

    Raises:
        FileNotFoundError: If input image does not exist
        InvalidDimensionError: If width or height is not a positive integer
        OSError: If Pillow fails to read/write the image
    """
    input_path = Path(input_path)
    output_path = Path(output_path)
    size = Size(width, height)

    with Image.open(input_path) as img:
        img.load()
        if maintain_aspect_ratio:
            size = fit_within(Size(*img.size), size)
        resized = resize_image(img, size.width, size.height, config=config, callbacks=callbacks)

    try:
        resized.save(output_path)
    finally:
        resized.close()

    return str(output_path)
