"""Remove completed items and empty headings from an outline tree."""

from __future__ import annotations

from opentodos.classifiers import is_checked_checkbox
from opentodos.schemas import OutlineNode


def filter_content(
    content: list[str], done_markers: frozenset[str], *, segmentation: str = "grapheme"
) -> list[str]:
    """Drop checked checkbox lines, keeping unchecked items and text in order."""
    return [
        line
        for line in content
        if not is_checked_checkbox(line, done_markers, segmentation=segmentation)
    ]


def prune_tree(
    node: OutlineNode, done_markers: frozenset[str], *, segmentation: str = "grapheme"
) -> OutlineNode | None:
    """Filter a tree in place and drop headings left without content.

    Children are pruned before their parent is checked, so a heading whose
    sub-headings all become empty is removed as well. The root is always
    returned.

    Returns:
        The pruned node, or None if a heading node ended up empty.
    """
    node.content = filter_content(node.content, done_markers, segmentation=segmentation)

    children: list[OutlineNode] = []
    for child in node.children:
        pruned = prune_tree(child, done_markers, segmentation=segmentation)
        if pruned is not None:
            children.append(pruned)
    node.children = children

    if not node.is_root and node.is_empty:
        return None
    return node
