"""Serialize pruned outline trees back into lines."""

from __future__ import annotations

from typing import Iterable

from opentodos.classifiers import is_checkbox, is_empty, is_heading
from opentodos.schemas import ContentGroup, OutlineNode


def group_content(content: Iterable[str]) -> list[ContentGroup]:
    """Split content into maximal runs of checkbox and non-checkbox lines."""
    groups: list[ContentGroup] = []
    current: ContentGroup | None = None

    for line in content:
        checkbox = is_checkbox(line)
        if current is not None and current.is_checkbox_group == checkbox:
            current.lines.append(line)
            continue
        if current is not None:
            groups.append(current)
        current = ContentGroup(is_checkbox_group=checkbox, lines=[line])

    if current is not None:
        groups.append(current)
    return groups


def tree_to_lines(node: OutlineNode) -> list[str]:
    """Flatten a tree into lines, padding checkbox groups with blank lines.

    A checkbox group gets a blank line before it unless it is the first group
    under a heading, and always gets one after it. Text groups are emitted
    as-is. Blank lines are not normalized here; see ``clean_output``.
    """
    lines: list[str] = []
    if node.heading is not None:
        lines.append(node.heading)

    # no blank between a heading and the group directly under it
    first_under_heading = node.heading is not None
    for group in group_content(node.content):
        if group.is_checkbox_group:
            if not first_under_heading:
                lines.append("")
            lines.extend(group.lines)
            lines.append("")
        else:
            lines.extend(group.lines)
        first_under_heading = False

    for child in node.children:
        lines.extend(tree_to_lines(child))
    return lines


def clean_output(lines: list[str]) -> list[str]:
    """Normalize blank lines.

    Removes repeated blank lines and blank lines followed by a heading, then
    trims blank lines from both ends.
    """
    cleaned: list[str] = []
    prev_empty = False

    for index, line in enumerate(lines):
        empty = is_empty(line)
        if empty:
            if prev_empty:
                continue
            next_line = _next_non_empty(lines, index + 1)
            if next_line is not None and is_heading(next_line):
                continue
        cleaned.append(line)
        prev_empty = empty

    start = 0
    while start < len(cleaned) and is_empty(cleaned[start]):
        start += 1
    end = len(cleaned)
    while end > start and is_empty(cleaned[end - 1]):
        end -= 1
    return cleaned[start:end]


def _next_non_empty(lines: list[str], start: int) -> str | None:
    for line in lines[start:]:
        if not is_empty(line):
            return line
    return None


def count_headings(node: OutlineNode) -> int:
    """Count heading nodes below (and including) ``node``."""
    total = 0 if node.heading is None else 1
    for child in node.children:
        total += count_headings(child)
    return total


def render_outline_tree(node: OutlineNode, indent: int = 0) -> str:
    """Render the heading structure as an indented tree with content counts."""
    lines: list[str] = []
    if node.heading is None:
        lines.append(f"(root) [{len(node.content)} lines]")
    else:
        lines.append(" " * (indent * 4) + f"{node.heading.strip()} [{len(node.content)} lines]")
    for child in node.children:
        lines.append(render_outline_tree(child, indent + 1))
    return "\n".join(lines)
