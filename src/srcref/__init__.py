from __future__ import annotations

from .diagnostic import Diagnostic, SecondarySourceLocation
from .errors import UnknownSourceError
from .formatter import SourceReferenceFormatter, format_exception_information
from .scanner import Scanner, ScannerRegistry, ScannerView
from .severity import Severity, severity_to_string
from .spans import LineColumn, SourceSpan
from .styling import OutputSink, PlainSink, RecordingSink, Style, TerminalSink

__all__ = [
    "Diagnostic",
    "LineColumn",
    "OutputSink",
    "PlainSink",
    "RecordingSink",
    "Scanner",
    "ScannerRegistry",
    "ScannerView",
    "SecondarySourceLocation",
    "Severity",
    "SourceReferenceFormatter",
    "SourceSpan",
    "Style",
    "TerminalSink",
    "UnknownSourceError",
    "format_exception_information",
    "severity_to_string",
]
