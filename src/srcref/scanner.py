from __future__ import annotations

import bisect
from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import Callable, Protocol

from .errors import UnknownSourceError
from .spans import LineColumn


class ScannerView(Protocol):
    def translate_position_to_line_column(self, offset: int) -> LineColumn: ...

    def line_at_position(self, offset: int) -> str: ...


ScannerLookup = Callable[[str], ScannerView]


class Scanner:
    """Line index for one source text.

    Offsets are indexes into the text. An offset that points at a newline
    belongs to the line that newline terminates; ``len(source)`` is a valid
    offset (end of input).
    """

    __slots__ = ("source", "source_name", "_line_starts")

    def __init__(self, source: str, source_name: str | None = None) -> None:
        self.source = source
        self.source_name = source_name
        starts = [0]
        i = source.find("\n")
        while i != -1:
            starts.append(i + 1)
            i = source.find("\n", i + 1)
        self._line_starts = starts

    @property
    def line_count(self) -> int:
        return len(self._line_starts)

    def _line_index(self, offset: int) -> int:
        if offset < 0 or offset > len(self.source):
            raise IndexError(
                f"offset {offset} outside source {self.source_name or '<memory>'!s} "
                f"of length {len(self.source)}"
            )
        return bisect.bisect_right(self._line_starts, offset) - 1

    def translate_position_to_line_column(self, offset: int) -> LineColumn:
        line = self._line_index(offset)
        return LineColumn(line=line, column=offset - self._line_starts[line])

    def line_at_position(self, offset: int) -> str:
        line = self._line_index(offset)
        start = self._line_starts[line]
        if line + 1 < len(self._line_starts):
            end = self._line_starts[line + 1] - 1
        else:
            end = len(self.source)
        text = self.source[start:end]
        if text.endswith("\r"):
            text = text[:-1]
        return text


class ScannerRegistry:
    """Resolves source names to scanners.

    Instances are callable and can be handed directly to
    :class:`~srcref.formatter.SourceReferenceFormatter`.
    """

    def __init__(self, sources: Mapping[str, str] | None = None) -> None:
        self._scanners: dict[str, Scanner] = {}
        for name, text in (sources or {}).items():
            self.add(name, text)

    @classmethod
    def from_paths(cls, paths: Iterable[str | Path]) -> ScannerRegistry:
        reg = cls()
        for p in paths:
            reg.add(str(p), Path(p).read_text(encoding="utf-8"))
        return reg

    def add(self, source_name: str, source: str) -> Scanner:
        scanner = Scanner(source, source_name=source_name)
        self._scanners[source_name] = scanner
        return scanner

    def __contains__(self, source_name: object) -> bool:
        return source_name in self._scanners

    def __call__(self, source_name: str) -> Scanner:
        try:
            return self._scanners[source_name]
        except KeyError:
            raise UnknownSourceError(source_name, tuple(sorted(self._scanners))) from None
