import logging
import time
from typing import Sequence

from progressive_resize.types import BlitStep, Size

logger = logging.getLogger(__name__)


class ResizeCallback:
    """Interface for resize observers."""

    def before_resize(self, source: Size, target: Size, steps: Sequence[Size]) -> None:
        pass

    def before_blit(self, step: BlitStep) -> None:
        pass

    def after_blit(self, step: BlitStep) -> None:
        pass

    def after_resize(self, source: Size, target: Size) -> None:
        pass


class LoggingCallback(ResizeCallback):
    """Callback that logs the plan and every scaled copy."""

    def __init__(self, level: int = logging.INFO) -> None:
        self.level = level

    def before_resize(self, source: Size, target: Size, steps: Sequence[Size]) -> None:
        logger.log(
            self.level,
            "Resizing %s -> %s in %d blit(s)",
            source,
            target,
            len(steps) + 1,
            extra={"source": str(source), "target": str(target)},
        )

    def after_blit(self, step: BlitStep) -> None:
        logger.log(
            self.level,
            "%s",
            step.describe(),
            extra={"kind": step.kind.value, "source": str(step.source), "target": str(step.target)},
        )


class TimingCallback(ResizeCallback):
    """Callback that tracks execution time for each scaled copy."""

    def __init__(self) -> None:
        self.blit_timings: list[tuple[BlitStep, float]] = []
        self._current_start: float = 0.0

    def before_blit(self, step: BlitStep) -> None:
        self._current_start = time.perf_counter()

    def after_blit(self, step: BlitStep) -> None:
        duration = time.perf_counter() - self._current_start
        self.blit_timings.append((step, duration))
        logger.info("Finished blit", extra={"kind": step.kind.value, "duration": duration})

    @property
    def total(self) -> float:
        return sum(duration for _, duration in self.blit_timings)
