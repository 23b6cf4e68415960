from typing import Any


class ResizeError(Exception):
    """Base exception class for progressive-resize errors."""


class InvalidDimensionError(ResizeError):
    """Raised when a width or height is not a positive integer."""

    def __init__(self, name: str, value: Any) -> None:
        self.name = name
        self.value = value
        super().__init__(f"{name} must be a positive integer, got {value!r}")


class InvalidConfigError(ResizeError):
    """Raised when a resizer configuration value is out of range."""


class BlitError(ResizeError):
    """Raised when a scaled copy between two surfaces fails."""

    def __init__(self, cause: Exception) -> None:
        super().__init__(f"Scaled blit failed: {cause}")


class AllocationError(ResizeError):
    """Raised when the scratch surface cannot be allocated."""

    def __init__(self, width: int, height: int, mode: str, cause: Exception) -> None:
        super().__init__(f"Cannot allocate {width}*{height} surface in mode '{mode}': {cause}")
