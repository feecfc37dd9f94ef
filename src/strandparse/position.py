"""Position utilities for diagnostics.

Helper functions for converting buffer offsets into line/column positions
and short excerpts. Used by Failure.render(); independent of the parser
engine and usable on any string.

All helpers clamp offsets past the end of the source to its length.
"""

from typing import NamedTuple

from strandparse.constants import ELLIPSIS, EXCERPT_WIDTH

__all__ = [
    "LineInfo",
    "column_offset",
    "find_line",
    "line_offset",
    "next_on_line",
]


class LineInfo(NamedTuple):
    """Line containing an offset.

    Attributes:
        row: 0-based line number
        column: 0-based column within the line
        line: Text of the line, without its line break
    """

    row: int
    column: int
    line: str


def _clamp(source: str, pos: int) -> int:
    if pos < 0:
        msg = f"Position must be >= 0, got {pos}"
        raise ValueError(msg)
    return min(pos, len(source))


def line_offset(source: str, pos: int) -> int:
    """Get 0-based line number from offset.

    Example:
        >>> source = "line1\\nline2\\nline3"
        >>> line_offset(source, 0)
        0
        >>> line_offset(source, 6)
        1
    """
    pos = _clamp(source, pos)
    return source.count("\n", 0, pos)


def column_offset(source: str, pos: int) -> int:
    """Get 0-based column number from offset.

    Example:
        >>> column_offset("hello\\nworld", 10)
        4
    """
    pos = _clamp(source, pos)
    return pos - (source.rfind("\n", 0, pos) + 1)


def find_line(source: str, pos: int) -> LineInfo:
    """Locate the line containing pos.

    An offset sitting on a line break belongs to the line the break ends.

    Args:
        source: Complete source text
        pos: Character offset in source

    Returns:
        LineInfo with row, column and the line text

    Example:
        >>> find_line("omg\\nomg omg lol", 12)
        LineInfo(row=1, column=8, line='omg omg lol')
        >>> find_line("omg\\n", 4)
        LineInfo(row=1, column=0, line='')
    """
    pos = _clamp(source, pos)
    start = source.rfind("\n", 0, pos) + 1
    end = source.find("\n", pos)
    if end == -1:
        end = len(source)
    return LineInfo(
        row=source.count("\n", 0, pos),
        column=pos - start,
        line=source[start:end],
    )


def next_on_line(source: str, pos: int, width: int = EXCERPT_WIDTH) -> str:
    """Return up to width characters from pos, stopping at a line break.

    Appends ELLIPSIS when the excerpt was cut short before the end of the
    line.

    Example:
        >>> next_on_line("lololololol\\nomg", 0)
        'lololo...'
        >>> next_on_line("lol\\nomg", 0)
        'lol'
    """
    pos = _clamp(source, pos)
    end = source.find("\n", pos)
    if end == -1:
        end = len(source)
    stop = min(pos + width, end)
    excerpt = source[pos:stop]
    if stop < end:
        return excerpt + ELLIPSIS
    return excerpt
