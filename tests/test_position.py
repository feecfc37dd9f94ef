"""Tests for strandparse.position: line/column helpers and excerpts."""

from __future__ import annotations

import pytest

from strandparse.position import (
    LineInfo,
    column_offset,
    find_line,
    line_offset,
    next_on_line,
)

# ============================================================================
# LINE AND COLUMN OFFSETS
# ============================================================================


class TestOffsets:
    """Test line_offset() and column_offset()."""

    @pytest.mark.parametrize(
        ("pos", "expected"),
        [(0, 0), (5, 0), (6, 1), (11, 1), (12, 2), (17, 2)],
    )
    def test_line_offset(self, pos: int, expected: int) -> None:
        """Line numbers are 0-based and advance after each line break."""
        assert line_offset("line1\nline2\nline3", pos) == expected

    @pytest.mark.parametrize(
        ("pos", "expected"),
        [(0, 0), (3, 3), (6, 0), (10, 4)],
    )
    def test_column_offset(self, pos: int, expected: int) -> None:
        """Columns are 0-based and restart after each line break."""
        assert column_offset("hello\nworld", pos) == expected

    def test_offsets_clamped_past_end(self) -> None:
        """Offsets past the end are treated as the end."""
        assert line_offset("a\nb", 99) == 1
        assert column_offset("a\nb", 99) == 1

    @pytest.mark.parametrize("helper", [line_offset, column_offset, find_line, next_on_line])
    def test_negative_offset_rejected(self, helper: object) -> None:
        """A negative offset is a ValueError."""
        with pytest.raises(ValueError, match="must be >= 0"):
            helper("abc", -1)  # type: ignore[operator]


# ============================================================================
# FIND LINE
# ============================================================================


class TestFindLine:
    """Test find_line()."""

    def test_single_line(self) -> None:
        """The only line of a one-line source."""
        assert find_line("wat", 0) == LineInfo(row=0, column=0, line="wat")

    def test_later_line(self) -> None:
        """Row, column and text of a later line."""
        assert find_line("omg\nomg omg lol", 12) == LineInfo(1, 8, "omg omg lol")

    def test_middle_line_excludes_break(self) -> None:
        """The returned line never includes its line break."""
        info = find_line("omg\nomg\nomg\nlol\nomg\n", 12)
        assert info == LineInfo(3, 0, "lol")

    def test_offset_on_line_break(self) -> None:
        """An offset on a line break belongs to the line it ends."""
        assert find_line("ab\ncd", 2) == LineInfo(0, 2, "ab")

    def test_end_after_trailing_newline(self) -> None:
        """The end of a source ending in a newline is an empty line."""
        assert find_line("omg\nomg\nomg\n", 12) == LineInfo(3, 0, "")

    def test_empty_source(self) -> None:
        """The empty source has one empty line."""
        assert find_line("", 0) == LineInfo(0, 0, "")


# ============================================================================
# EXCERPTS
# ============================================================================


class TestNextOnLine:
    """Test next_on_line()."""

    def test_short_remainder_not_truncated(self) -> None:
        """Text up to the end of the line is echoed whole."""
        assert next_on_line("lol\nomg", 0) == "lol"

    def test_long_remainder_truncated_with_ellipsis(self) -> None:
        """Longer text is cut to six characters plus an ellipsis."""
        assert next_on_line("lololololol\nomg", 0) == "lololo..."

    def test_exactly_width_not_truncated(self) -> None:
        """An excerpt that reaches the line end exactly has no ellipsis."""
        assert next_on_line("abcdef", 0) == "abcdef"

    def test_custom_width(self) -> None:
        """The excerpt width is configurable."""
        assert next_on_line("abcdef", 1, width=2) == "bc..."

    def test_on_line_break_is_empty(self) -> None:
        """At a line break the excerpt is empty."""
        assert next_on_line("ab\ncd", 2) == ""

    def test_at_end_is_empty(self) -> None:
        """At the end of the source the excerpt is empty."""
        assert next_on_line("abc", 3) == ""
