from .callbacks import LoggingCallback, ResizeCallback, TimingCallback
from .exceptions import (
    AllocationError,
    BlitError,
    InvalidConfigError,
    InvalidDimensionError,
    ResizeError,
)
from .planner import RESIZE_FACTOR, RESIZE_SKIP_THRESHOLD, axis_plan, max_size, plan, schedule
from .resizer import ProgressiveBilinearResizer, ResizerConfig, fit_within, resize_file, resize_image
from .surfaces import PillowBackend
from .types import BlitKind, BlitStep, Size

__all__ = [
    "AllocationError",
    "BlitError",
    "BlitKind",
    "BlitStep",
    "InvalidConfigError",
    "InvalidDimensionError",
    "LoggingCallback",
    "PillowBackend",
    "ProgressiveBilinearResizer",
    "RESIZE_FACTOR",
    "RESIZE_SKIP_THRESHOLD",
    "ResizeCallback",
    "ResizeError",
    "ResizerConfig",
    "Size",
    "TimingCallback",
    "axis_plan",
    "fit_within",
    "max_size",
    "plan",
    "resize_file",
    "resize_image",
    "schedule",
]
