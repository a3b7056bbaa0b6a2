from __future__ import annotations

from dataclasses import dataclass, field

from .severity import Severity, severity_to_string
from .spans import SourceSpan


@dataclass(slots=True)
class SecondarySourceLocation:
    """Labelled related locations, shown in insertion order."""

    infos: list[tuple[str, SourceSpan]] = field(default_factory=list)

    def append(self, label: str, location: SourceSpan) -> SecondarySourceLocation:
        self.infos.append((label, location))
        return self

    def __iter__(self):
        return iter(self.infos)

    def __len__(self) -> int:
        return len(self.infos)


@dataclass(slots=True)
class Diagnostic(Exception):
    severity: Severity = Severity.ERROR
    comment: str | None = None
    primary_location: SourceSpan | None = None
    secondary_location: SecondarySourceLocation | None = None

    def __str__(self) -> str:
        base = severity_to_string(self.severity)
        if self.comment is not None:
            return f"{base}: {self.comment}"
        return base
