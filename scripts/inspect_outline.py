"""Inspect the heading tree and line classes of an outline file."""

from __future__ import annotations

import argparse
from collections import Counter

from opentodos.classifiers import classify_line, parse_done_markers
from opentodos.cli import read_lines
from opentodos.config import SEGMENTATION_MODES
from opentodos.output_formatter import render_outline_tree
from opentodos.pruning import prune_tree
from opentodos.segmentation import resolve_segmentation
from opentodos.tree import build_tree


def main() -> None:
    parser = argparse.ArgumentParser(description="Inspect outline headings and checkbox classes.")
    parser.add_argument("path", help="Outline file path ('-' for stdin)")
    parser.add_argument("--done-markers", help="Characters that mark a checkbox as done")
    parser.add_argument(
        "--segmentation",
        choices=SEGMENTATION_MODES,
        help="How checkbox markers are split into characters (default: OPENTODOS_SEGMENTATION)",
    )
    args = parser.parse_args()

    segmentation = resolve_segmentation(args.segmentation)
    lines = read_lines(args.path)
    done_markers = parse_done_markers(args.done_markers, segmentation=segmentation)

    print("Line classes:")
    for name, count in collect_stats(lines, done_markers, segmentation=segmentation).most_common():
        print(f"{name}: {count}")

    print("\nTree:")
    tree = build_tree(lines)
    print(render_outline_tree(tree))

    print("\nPruned tree:")
    pruned = prune_tree(tree, done_markers, segmentation=segmentation)
    print(render_outline_tree(pruned) if pruned else "(empty)")


def collect_stats(
    lines: list[str], done_markers: frozenset[str], *, segmentation: str
) -> Counter:
    return Counter(
        classify_line(line, done_markers, segmentation=segmentation) for line in lines
    )


if __name__ == "__main__":
    main()
