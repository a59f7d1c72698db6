"""Line classification predicates for outline documents."""

from __future__ import annotations

import re
from typing import Final

from opentodos.config import BULLET_SYMBOLS, DEFAULT_DONE_STATUS_MARKERS
from opentodos.segmentation import split_characters

_HEADING_RE: Final = re.compile(r"^(#{1,6})\s+")
_CHECKBOX_RE: Final = re.compile(
    r"^\s*[" + re.escape(BULLET_SYMBOLS) + r"]\s+\[(.+?)\]"
)


def parse_done_markers(markers: str | None, *, segmentation: str = "grapheme") -> frozenset[str]:
    """Build the set of done status markers from a marker string.

    Each grapheme cluster of ``markers`` becomes one accepted marker. ``None``
    or an empty string selects the default ``x``, ``X`` and ``-`` markers.
    """
    if not markers:
        return frozenset(DEFAULT_DONE_STATUS_MARKERS)
    return frozenset(split_characters(markers, mode=segmentation, context="done status markers"))


def heading_level(line: str) -> int:
    """Return the heading level (1-6) of a line, or 0 if it is not a heading."""
    match = _HEADING_RE.match(line)
    return len(match.group(1)) if match else 0


def is_heading(line: str) -> bool:
    return heading_level(line) > 0


def is_checkbox(line: str) -> bool:
    """Return True for any checkbox line, checked or not."""
    return _CHECKBOX_RE.match(line) is not None


def is_checked_checkbox(
    line: str, done_markers: frozenset[str], *, segmentation: str = "grapheme"
) -> bool:
    """Return True if the line is a checkbox marked with a single done marker.

    The bracket content must be exactly one character (grapheme cluster), so
    ``[  ]`` or ``[xx]`` never count as done.
    """
    match = _CHECKBOX_RE.match(line)
    if not match:
        return False
    chars = split_characters(match.group(1), mode=segmentation, context="checkbox content")
    if len(chars) != 1:
        return False
    return chars[0] in done_markers


def is_empty(line: str) -> bool:
    return line.strip() == ""


def classify_line(
    line: str, done_markers: frozenset[str], *, segmentation: str = "grapheme"
) -> str:
    """Return a short label for the kind of line, used for document statistics."""
    if is_empty(line):
        return "blank"
    level = heading_level(line)
    if level:
        return f"heading h{level}"
    if is_checked_checkbox(line, done_markers, segmentation=segmentation):
        return "checkbox (done)"
    if is_checkbox(line):
        return "checkbox (open)"
    return "text"
