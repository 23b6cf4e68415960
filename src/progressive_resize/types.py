# types.py
from dataclasses import dataclass
from enum import Enum

from .exceptions import InvalidDimensionError


class BlitKind(Enum):
    SOURCE_TO_TARGET = "SRC->TGT"
    SOURCE_TO_WORK = "SRC->wrk"
    WORK_TO_WORK = "wrk->wrk"
    WORK_TO_TARGET = "wrk->TGT"


@dataclass(frozen=True)
class Size:
    width: int
    height: int

    def __post_init__(self) -> None:
        for name in ("width", "height"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
                raise InvalidDimensionError(name, value)

    def as_tuple(self) -> tuple[int, int]:
        return (self.width, self.height)

    def __str__(self) -> str:
        return f"{self.width}*{self.height}"


@dataclass(frozen=True)
class BlitStep:
    """One scaled copy: read `source` from the top-left corner, write `target`."""

    index: int
    kind: BlitKind
    source: Size
    target: Size

    def describe(self) -> str:
        return f"{self.kind.value}.: {self.source}\t-> {self.target}"
