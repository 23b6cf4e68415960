import logging
from contextlib import contextmanager
from typing import Iterator

from PIL import Image

from .exceptions import AllocationError, BlitError
from .types import Size

logger = logging.getLogger(__name__)


class PillowBackend:
    """Scaled-blit and allocation primitives over Pillow images."""

    resample = Image.Resampling.BILINEAR

    def size_of(self, surface: Image.Image) -> Size:
        width, height = surface.size
        return Size(width, height)

    def mode_of(self, surface: Image.Image) -> str:
        return surface.mode

    def allocate(self, size: Size, mode: str) -> Image.Image:
        try:
            return Image.new(mode, size.as_tuple())
        except (ValueError, KeyError, MemoryError, OSError) as e:
            raise AllocationError(size.width, size.height, mode, e) from e

    def release(self, surface: Image.Image) -> None:
        surface.close()

    @contextmanager
    def scratch(self, size: Size, mode: str) -> Iterator[Image.Image]:
        """Allocate a work surface and release it on every exit path."""
        surface = self.allocate(size, mode)
        logger.debug("Allocated scratch surface", extra={"size": str(size), "mode": mode})
        try:
            yield surface
        finally:
            self.release(surface)

    def blit(
        self,
        source: Image.Image,
        source_size: Size,
        destination: Image.Image,
        destination_size: Size,
    ) -> None:
        """Scale the top-left ``source_size`` region of ``source`` onto ``destination``.

        The scaled pixels replace whatever the destination held in that region.
        The region is cropped out first, so pixels outside it never leak in
        through the filter support. ``source`` and ``destination`` may be the
        same image: the scaled copy is fully built before it is pasted back.
        """
        if source_size.width > source.width or source_size.height > source.height:
            raise BlitError(ValueError(f"region {source_size} exceeds surface {Size(*source.size)}"))
        try:
            region = source
            if source.size != source_size.as_tuple():
                region = source.crop((0, 0, source_size.width, source_size.height))
            # Pillow resamples these modes with nearest-neighbour only
            if region.mode in ("P", "1") and region.mode != destination.mode:
                region = region.convert(destination.mode)
            scaled = region.resize(destination_size.as_tuple(), self.resample)
            destination.paste(scaled, (0, 0))
        except (ValueError, OSError) as e:
            raise BlitError(e) from e
