from __future__ import annotations

import io
import logging

from .diagnostic import Diagnostic
from .scanner import ScannerLookup
from .severity import Severity, severity_color, severity_to_string
from .spans import SourceSpan
from .styling import OutputSink, PlainSink, Style, TerminalSink


logger = logging.getLogger(__name__)

MAX_DISPLAY_LENGTH = 150
SPAN_CONTEXT = 35
TRUNCATED_SPAN_LENGTH = 75
ELLIPSIS = " ... "
MULTILINE_MARKER = "^ (Relevant source part starts here and spans across multiple lines)."


class SourceReferenceFormatter:
    def __init__(self, sink: OutputSink, scanner_from_source_name: ScannerLookup) -> None:
        self._sink = sink
        self._scanner_from_source_name = scanner_from_source_name

    def print_source_location(self, location: SourceSpan | None, severity: Severity) -> None:
        if location is None or not location.source_name:
            return
        scanner = self._scanner_from_source_name(location.source_name)
        start = scanner.translate_position_to_line_column(location.start)
        end = scanner.translate_position_to_line_column(location.end)

        if start.line != end.line:
            logger.debug(
                "%s: span [%d, %d) covers lines %d-%d, showing first line only",
                location.source_name,
                location.start,
                location.end,
                start.line + 1,
                end.line + 1,
            )
            self._sink.write(
                scanner.line_at_position(location.start)
                + "\n"
                + " " * start.column
                + MULTILINE_MARKER
                + "\n"
            )
            return

        color = severity_color(severity)
        line = scanner.line_at_position(location.start)
        start_column = start.column
        end_column = end.column

        location_length = end_column - start_column
        if location_length > MAX_DISPLAY_LENGTH:
            logger.debug("%s: shortening %d character span", location.source_name, location_length)
            line = (
                line[: start_column + SPAN_CONTEXT]
                + ELLIPSIS
                + line[end_column - SPAN_CONTEXT :]
            )
            end_column = start_column + TRUNCATED_SPAN_LENGTH
            location_length = TRUNCATED_SPAN_LENGTH
        if len(line) > MAX_DISPLAY_LENGTH:
            logger.debug("%s: shortening %d character line", location.source_name, len(line))
            line = ELLIPSIS + line[start_column : start_column + location_length] + ELLIPSIS
            start_column = len(ELLIPSIS)
            end_column = start_column + location_length

        self._sink.write(line[:start_column])
        self._sink.write(line[start_column:end_column], color)
        self._sink.write(line[end_column:] + "\n")

        # Keep tabs so the carets line up under tab-indented code.
        self._sink.write("".join("\t" if ch == "\t" else " " for ch in line[:start_column]))
        self._sink.write("^" * location_length, Style.BOLD, color)
        self._sink.write("\n")

    def print_source_name(self, location: SourceSpan | None) -> None:
        if location is None or not location.source_name:
            return
        scanner = self._scanner_from_source_name(location.source_name)
        pos = scanner.translate_position_to_line_column(location.start)
        self._sink.write(f"{location.source_name}:{pos.line + 1}:{pos.column + 1}: ")

    def print_exception_information(self, diagnostic: Diagnostic, severity: Severity) -> None:
        location = diagnostic.primary_location
        secondary = diagnostic.secondary_location

        self.print_source_name(location)

        self._sink.write(severity_to_string(severity), Style.BOLD, severity_color(severity))
        if diagnostic.comment is not None:
            self._sink.write(": " + diagnostic.comment + "\n")
        else:
            self._sink.write("\n")

        self.print_source_location(location, severity)

        if secondary is not None and len(secondary) > 0:
            for label, info in secondary:
                self.print_source_name(info)
                self._sink.write(label + "\n")
                self.print_source_location(info, severity)
            self._sink.write("\n")


def format_exception_information(
    diagnostic: Diagnostic,
    severity: Severity,
    scanner_from_source_name: ScannerLookup,
    *,
    color: bool = False,
) -> str:
    """Render ``diagnostic`` and return the text.

    With ``color=False`` the result holds no escape codes.
    """
    buf = io.StringIO()
    sink: OutputSink = TerminalSink(buf) if color else PlainSink(buf)
    SourceReferenceFormatter(sink, scanner_from_source_name).print_exception_information(
        diagnostic, severity
    )
    return buf.getvalue()
