from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class UnknownSourceError(KeyError):
    source_name: str
    known: tuple[str, ...] = ()

    def __str__(self) -> str:
        base = f"no scanner registered for source {self.source_name!r}"
        if self.known:
            return f"{base} (known: {', '.join(self.known)})"
        return base
