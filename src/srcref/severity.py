from __future__ import annotations

from enum import Enum

from .styling import Style


class Severity(str, Enum):
    WARNING = "warning"
    ERROR = "error"


def severity_to_string(severity: Severity) -> str:
    return "Warning" if severity is Severity.WARNING else "Error"


def severity_color(severity: Severity) -> Style:
    # Only warnings get their own color; everything else renders as an error.
    return Style.YELLOW if severity is Severity.WARNING else Style.RED
