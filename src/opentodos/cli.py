"""Command line interface: print the open todos of an outline file."""

from __future__ import annotations

import argparse
import logging
import re
import sys
from pathlib import Path
from typing import Sequence

from opentodos.config import (
    DEFAULT_DONE_STATUS_MARKERS,
    OPENTODOS_DONE_STATUS_MARKERS,
    OPENTODOS_SEGMENTATION,
    SEGMENTATION_MODES,
)
from opentodos.exceptions import OpenTodosError, SourceReadError
from opentodos.extraction import TodoOptions, extract_todos

logger = logging.getLogger(__name__)

_LINE_BREAK_RE = re.compile(r"\r\n|\r|\n")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="opentodos",
        description="Print the open checkbox items of a markdown outline, dropping done items and empty headings.",
    )
    parser.add_argument("path", help="Outline file to read ('-' for stdin)")
    parser.add_argument(
        "--done-markers",
        default=OPENTODOS_DONE_STATUS_MARKERS,
        help=(
            "Characters that mark a checkbox as done "
            f"(default: {OPENTODOS_DONE_STATUS_MARKERS or DEFAULT_DONE_STATUS_MARKERS})".replace("%", "%%")
        ),
    )
    parser.add_argument(
        "--with-children",
        action="store_true",
        help="Accepted for compatibility; does not change the output",
    )
    parser.add_argument(
        "--segmentation",
        choices=SEGMENTATION_MODES,
        default=None,
        help=f"How checkbox markers are split into characters (default: {OPENTODOS_SEGMENTATION})",
    )
    parser.add_argument("-o", "--output", help="Write the result to this file instead of stdout")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def read_lines(path: str) -> list[str]:
    """Read a document and split it on any newline convention.

    Raises:
        SourceReadError: If the file cannot be read or decoded.
    """
    try:
        if path == "-":
            text = sys.stdin.read()
        else:
            text = Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise SourceReadError(f"Cannot read {path}: {exc}") from exc
    return _LINE_BREAK_RE.split(text)


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        lines = read_lines(args.path)
        result = extract_todos(
            lines,
            TodoOptions(
                with_children=args.with_children,
                done_status_markers=args.done_markers,
                segmentation=args.segmentation,
            ),
        )
        output = "\n".join(result)
        if args.output:
            try:
                Path(args.output).write_text(output + "\n", encoding="utf-8")
            except OSError as exc:
                raise OpenTodosError(f"Cannot write {args.output}: {exc}") from exc
            logger.debug("Wrote %d lines to %s", len(result), args.output)
        else:
            print(output)
    except OpenTodosError as exc:
        print(f"opentodos: {exc}", file=sys.stderr)
        return 1
    return 0
