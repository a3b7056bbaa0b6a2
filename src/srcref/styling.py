from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Protocol, TextIO

from termcolor import colored


class Style(str, Enum):
    RED = "red"
    YELLOW = "yellow"
    BOLD = "bold"


_COLORS = (Style.RED, Style.YELLOW)


class OutputSink(Protocol):
    def write(self, text: str, *styles: Style) -> None:
        """Append ``text``; styles apply to this write only."""
        ...


@dataclass(slots=True)
class TerminalSink:
    """Writes ANSI-styled text to a stream."""

    stream: TextIO

    def write(self, text: str, *styles: Style) -> None:
        if not styles or not text:
            self.stream.write(text)
            return
        color = next((s.value for s in styles if s in _COLORS), None)
        attrs = ["bold"] if Style.BOLD in styles else None
        # The sink was chosen because color is wanted; don't let termcolor
        # second-guess that from the tty state of sys.stdout.
        self.stream.write(colored(text, color, attrs=attrs, force_color=True))


@dataclass(slots=True)
class PlainSink:
    """Writes text to a stream and drops all styling."""

    stream: TextIO

    def write(self, text: str, *styles: Style) -> None:
        self.stream.write(text)


@dataclass(slots=True)
class RecordingSink:
    """Keeps every write as a ``(text, styles)`` pair."""

    writes: list[tuple[str, frozenset[Style]]] = field(default_factory=list)

    def write(self, text: str, *styles: Style) -> None:
        if text:
            self.writes.append((text, frozenset(styles)))

    def text(self) -> str:
        return "".join(t for t, _ in self.writes)

    def styled(self) -> list[tuple[str, frozenset[Style]]]:
        return [(t, s) for t, s in self.writes if s]
