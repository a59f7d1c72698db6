"""Tests for line classification predicates."""

from __future__ import annotations

import pytest

from opentodos import segmentation
from opentodos.classifiers import (
    classify_line,
    heading_level,
    is_checkbox,
    is_checked_checkbox,
    is_empty,
    is_heading,
    parse_done_markers,
)

DEFAULT_MARKERS = parse_done_markers(None)


@pytest.mark.parametrize(
    ("line", "level"),
    [
        ("# Title", 1),
        ("## Sub", 2),
        ("###### Deepest", 6),
        ("#\tTabbed", 1),
        ("# ", 1),
        ("####### Seven", 0),
        ("#NoSpace", 0),
        ("#", 0),
        ("  # Indented", 0),
        ("- [ ] task", 0),
    ],
)
def test_heading_level(line: str, level: int) -> None:
    assert heading_level(line) == level
    assert is_heading(line) == (level > 0)


@pytest.mark.parametrize(
    ("line", "expected"),
    [
        ("- [ ] task", True),
        ("* [x] task", True),
        ("+ [/] task", True),
        ("    - [ ] nested", True),
        ("- [ ]", True),
        ("- [  ] two spaces", True),
        ("- [] empty", False),
        ("-[ ] no space", False),
        ("1. [ ] ordered", False),
        ("- plain bullet", False),
        ("plain text [x]", False),
    ],
)
def test_is_checkbox(line: str, expected: bool) -> None:
    assert is_checkbox(line) is expected


class TestIsCheckedCheckbox:
    """Tests for is_checked_checkbox."""

    @pytest.mark.parametrize(
        "line",
        ["- [x] done", "- [X] done", "- [-] cancelled", "  * [x] nested", "+ [x]"],
    )
    def test_default_markers_are_done(self, line: str) -> None:
        """x, X and - mark a checkbox as done."""
        assert is_checked_checkbox(line, DEFAULT_MARKERS)

    @pytest.mark.parametrize(
        "line",
        ["- [ ] open", "- [/] in progress", "- [xx] double", "- [  ] spaces", "- [] empty", "x [x] not a bullet"],
    )
    def test_not_done(self, line: str) -> None:
        """Other markers, multi-character brackets and non-checkboxes are not done."""
        assert not is_checked_checkbox(line, DEFAULT_MARKERS)

    def test_custom_markers_replace_defaults(self) -> None:
        """A custom marker set no longer accepts the defaults."""
        markers = parse_done_markers("C?")
        assert is_checked_checkbox("- [C] task", markers)
        assert is_checked_checkbox("- [?] task", markers)
        assert not is_checked_checkbox("- [c] task", markers)
        assert not is_checked_checkbox("- [x] task", markers)

    def test_multi_codepoint_marker_is_one_character(self) -> None:
        """A base letter with a combining accent counts as a single marker."""
        accented = "e\u0301"
        markers = parse_done_markers(accented)
        assert markers == frozenset({accented})
        assert is_checked_checkbox(f"- [{accented}] task", markers)

    def test_codepoint_mode_splits_combining_sequences(self) -> None:
        """Code point splitting treats a combining sequence as two characters."""
        accented = "e\u0301"
        markers = frozenset({accented})
        assert not is_checked_checkbox(f"- [{accented}] task", markers, segmentation="codepoint")


class TestParseDoneMarkers:
    """Tests for parse_done_markers."""

    def test_default_set(self) -> None:
        assert parse_done_markers(None) == frozenset({"x", "X", "-"})

    def test_empty_string_uses_default(self) -> None:
        assert parse_done_markers("") == frozenset({"x", "X", "-"})

    def test_emoji_markers(self) -> None:
        assert parse_done_markers("✅\U0001F7E3") == frozenset({"✅", "\U0001F7E3"})


@pytest.mark.parametrize(
    ("line", "expected"),
    [("", True), ("   ", True), ("\t", True), (" a ", False), ("-", False)],
)
def test_is_empty(line: str, expected: bool) -> None:
    assert is_empty(line) is expected


class TestClassifyLine:
    """Tests for classify_line."""

    @pytest.mark.parametrize(
        ("line", "label"),
        [
            ("", "blank"),
            ("## Sub", "heading h2"),
            ("- [x] done", "checkbox (done)"),
            ("- [ ] open", "checkbox (open)"),
            ("- [] empty", "text"),
            ("words", "text"),
        ],
    )
    def test_labels(self, line: str, label: str) -> None:
        assert classify_line(line, DEFAULT_MARKERS) == label

    def test_follows_segmentation_mode(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """A combining marker is done with graphemes and open with code points."""
        monkeypatch.setattr(segmentation, "_fallback_warned", True)
        line = "- [e\u0301] task"
        markers = frozenset({"e\u0301"})

        assert classify_line(line, markers) == "checkbox (done)"
        assert classify_line(line, markers, segmentation="codepoint") == "checkbox (open)"
