from __future__ import annotations

import argparse
import logging
import sys

from .diagnostic import Diagnostic, SecondarySourceLocation
from .formatter import format_exception_information
from .scanner import ScannerRegistry
from .settings import Settings
from .severity import Severity
from .spans import SourceSpan


logger = logging.getLogger(__name__)


def _parse_note(raw: str) -> tuple[str, str, int, int]:
    # LABEL:FILE:START:END, the label may contain colons but FILE may not
    parts = raw.rsplit(":", 3)
    if len(parts) != 4:
        raise ValueError(f"expected LABEL:FILE:START:END, got {raw!r}")
    label, path, start, end = parts
    return label, path, int(start), int(end)


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(
        prog="srcref", description="Render a compiler-style diagnostic for a span of a file"
    )
    ap.add_argument("file", help="Source file the diagnostic points into")
    ap.add_argument("--start", type=int, required=True, help="Start offset of the span")
    ap.add_argument("--end", type=int, required=True, help="End offset of the span (exclusive)")
    ap.add_argument(
        "--severity",
        choices=[s.value for s in Severity],
        default=Severity.ERROR.value,
    )
    ap.add_argument("-m", "--message", default=None, help="Description printed after the severity")
    ap.add_argument(
        "--note",
        action="append",
        default=[],
        metavar="LABEL:FILE:START:END",
        help="Secondary location (repeatable); FILE must not contain a colon",
    )
    ap.add_argument(
        "--color",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Force colored output on or off",
    )
    args = ap.parse_args(argv)

    settings = Settings()
    logging.basicConfig(level=settings.log_level.upper())

    try:
        notes = [_parse_note(n) for n in args.note]
    except ValueError as e:
        ap.error(str(e))

    paths = [args.file] + [path for _, path, _, _ in notes]
    try:
        registry = ScannerRegistry.from_paths(dict.fromkeys(paths))
    except OSError as e:
        ap.error(f"cannot read {e.filename}: {e.strerror}")
    logger.debug("loaded %d source(s)", len(dict.fromkeys(paths)))

    try:
        secondary = SecondarySourceLocation()
        for label, path, start, end in notes:
            secondary.append(label, SourceSpan(path, start, end))
        diagnostic = Diagnostic(
            severity=Severity(args.severity),
            comment=args.message,
            primary_location=SourceSpan(args.file, args.start, args.end),
            secondary_location=secondary,
        )
    except ValueError as e:
        ap.error(str(e))

    color = args.color if args.color is not None else settings.use_color(sys.stdout)
    try:
        out = format_exception_information(diagnostic, diagnostic.severity, registry, color=color)
    except IndexError as e:
        ap.error(str(e))
    sys.stdout.write(out)
    return 1 if diagnostic.severity is Severity.ERROR else 0
