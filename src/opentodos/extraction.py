"""Extraction pipeline for outline -> open todos."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Literal, Sequence

from opentodos.classifiers import parse_done_markers
from opentodos.output_formatter import clean_output, count_headings, tree_to_lines
from opentodos.pruning import prune_tree
from opentodos.segmentation import resolve_segmentation
from opentodos.tree import build_tree

logger = logging.getLogger(__name__)


@dataclass
class TodoOptions:
    """Options for todo extraction.

    Attributes:
        with_children: Accepted for compatibility with existing callers. It
            does not change which lines are kept.
        done_status_markers: String whose characters mark a checkbox as done
            or cancelled. None uses ``x``, ``X`` and ``-``.
        segmentation: ``"grapheme"`` or ``"codepoint"``. None uses the
            ``OPENTODOS_SEGMENTATION`` setting.
    """

    with_children: bool = False
    done_status_markers: str | None = None
    segmentation: Literal["grapheme", "codepoint"] | None = None


def extract_todos(lines: Sequence[str], options: TodoOptions | None = None) -> list[str]:
    """Return the open items of an outline document.

    Completed checkboxes are removed, headings left without content are
    dropped, and checkbox groups are separated from surrounding text by
    single blank lines.

    Args:
        lines: Document lines without trailing newlines.
        options: Extraction options. Uses defaults if None.

    Returns:
        Output lines, ready to be joined with newlines. Empty if nothing is
        left open.

    Raises:
        ConfigError: If the segmentation mode is not recognized.
    """
    opts = options or TodoOptions()
    segmentation = resolve_segmentation(opts.segmentation)
    done_markers = parse_done_markers(opts.done_status_markers, segmentation=segmentation)

    tree = build_tree(lines)
    logger.debug(
        "Built outline tree: %d lines, %d headings, with_children=%s",
        len(lines),
        count_headings(tree),
        opts.with_children,
    )

    pruned = prune_tree(tree, done_markers, segmentation=segmentation)
    if pruned is None or pruned.is_empty:
        logger.debug("No open items left after pruning")
        return []

    result = clean_output(tree_to_lines(pruned))
    logger.debug("Extracted %d output lines (%d headings kept)", len(result), count_headings(pruned))
    return result


def get_todos(
    lines: Sequence[str],
    *,
    with_children: bool = False,
    done_status_markers: str | None = None,
    segmentation: Literal["grapheme", "codepoint"] | None = None,
) -> list[str]:
    """Keyword-argument wrapper around ``extract_todos``."""
    return extract_todos(
        lines,
        TodoOptions(
            with_children=with_children,
            done_status_markers=done_status_markers,
            segmentation=segmentation,
        ),
    )
