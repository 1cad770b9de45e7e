from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar


T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class Loc:
    """Half-open range [start, end) of offsets into a single input line.

    Offsets index the input string. The lexer only accepts ASCII, so for
    any accepted text they are also byte offsets.
    """

    start: int
    end: int

    def __post_init__(self) -> None:
        if not 0 <= self.start <= self.end:
            raise ValueError(f"invalid location: {self.start}-{self.end}")

    def merge(self, other: Loc) -> Loc:
        return Loc(min(self.start, other.start), max(self.end, other.end))

    def __str__(self) -> str:
        return f"{self.start}-{self.end}"


@dataclass(frozen=True, slots=True)
class Annot(Generic[T]):
    """A value paired with the location it was read from."""

    value: T
    loc: Loc

    def __repr__(self) -> str:
        return f"{self.value!r}@{self.loc}"
