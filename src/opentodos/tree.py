"""Build a heading-nested outline tree from flat lines."""

from __future__ import annotations

from typing import Iterable

from opentodos.classifiers import heading_level, is_empty
from opentodos.schemas import OutlineNode


def build_tree(lines: Iterable[str]) -> OutlineNode:
    """Nest lines under their headings.

    Blank lines are discarded. A heading closes every open heading of the same
    or deeper level before it opens; any other line is appended to the
    innermost open heading (or the root).

    Args:
        lines: Document lines without trailing newlines.

    Returns:
        The root node of the tree.
    """
    root = OutlineNode()
    stack: list[OutlineNode] = [root]

    for line in lines:
        if is_empty(line):
            continue

        level = heading_level(line)
        if level == 0:
            stack[-1].content.append(line)
            continue

        while len(stack) > 1 and stack[-1].level >= level:
            stack.pop()

        node = OutlineNode(level=level, heading=line)
        stack[-1].children.append(node)
        stack.append(node)

    return root
