from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class LineColumn:
    """A zero-based line/column pair.

    Add one to both for user-facing messages.
    """

    line: int
    column: int


@dataclass(frozen=True, slots=True)
class SourceSpan:
    """Half-open span [start, end) of offsets into a named source."""

    source_name: str | None
    start: int
    end: int

    def __post_init__(self) -> None:
        if self.start < 0 or self.end < 0:
            raise ValueError(f"negative offset in span [{self.start}, {self.end})")
        if self.start > self.end:
            raise ValueError(f"span start {self.start} is after end {self.end}")

    def __len__(self) -> int:
        return self.end - self.start
