"""Parse outcomes: Result for success, Failure for an ordinary parse failure.

Every parser returns exactly one of these two frozen values. Failure is a
plain value, never an exception: it is merged by alternation, relabeled by
label(), escalated by cut() and only turned into a raised
ParseFailedError by execute() (or explicitly via Failure.to_error()).

Outcomes are discriminated by class (isinstance), never by attribute tags.

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass, replace
from typing import Literal

from strandparse.constants import (
    CARET,
    CONTINUATION,
    EOF_MARKER,
    EXCERPT_WIDTH,
    EXPECTATION_SEPARATOR,
)
from strandparse.diagnostics import ErrorTemplate, ParseFailedError, SourceSpan
from strandparse.position import find_line, next_on_line
from strandparse.stream import Stream

__all__ = [
    "Failure",
    "Outcome",
    "Result",
    "is_failure",
    "is_result",
    "make_failure",
    "make_result",
]


@dataclass(frozen=True, slots=True)
class Result[T]:
    """Successful parse: value, remaining input, start position, consumed text.

    Invariants:
        - next.cursor >= start.cursor
        - For parsers built from character-consuming primitives,
          matched == start.slice_to(next)

    Example:
        >>> s = make_stream("hi")
        >>> r = make_result("h", s.next(), s, "h")
        >>> r.span
        (0, 1)
    """

    value: T
    next: Stream
    start: Stream
    matched: str

    @property
    def span(self) -> tuple[int, int]:
        """(start, end) offsets of the consumed text."""
        return (self.start.cursor, self.next.cursor)

    def __bool__(self) -> Literal[True]:
        return True


@dataclass(frozen=True, slots=True)
class Failure:
    """Unsuccessful parse: where it failed, what was expected, whether fatal.

    ``expected`` behaves as an insertion-ordered set; duplicates are dropped
    at construction and the first occurrence keeps its place.

    A fatal failure disables backtracking in every enclosing alternative.
    It still propagates as an ordinary return value.

    Example:
        >>> s = make_stream("wat")
        >>> f = make_failure(s, '"hai"').extend(make_failure(s, '"lol"'))
        >>> f.expected
        ('"hai"', '"lol"')
        >>> print(f.render())
        At line 1, column 0:
        <BLANKLINE>
        wat
        ^
        |
        ERROR: Expected "hai" or "lol", saw "wat"
    """

    position: Stream
    expected: tuple[str, ...] = ()
    fatal: bool = False

    def __post_init__(self) -> None:
        """Deduplicate expectations, keeping first occurrences in order."""
        object.__setattr__(self, "expected", tuple(dict.fromkeys(self.expected)))

    def __bool__(self) -> Literal[False]:
        return False

    # ------------------------------------------------------------------
    # Error model
    # ------------------------------------------------------------------

    def with_expected(self, description: str) -> "Failure":
        """Replace the expectations with a single description.

        Position and fatal flag are preserved.
        """
        return replace(self, expected=(description,))

    def extend(self, other: "Failure") -> "Failure":
        """Merge with the failure of an alternative branch.

        Rules:
            - other failed further into the input: other wins
            - other failed earlier: self wins
            - same position: union of expectations (self's first) with
              self's fatal flag

        Args:
            other: Failure of the branch tried after this one

        Returns:
            The more informative failure, or the merged one on a tie
        """
        if other.position.cursor > self.position.cursor:
            return other
        if other.position.cursor < self.position.cursor:
            return self
        return replace(self, expected=self.expected + other.expected)

    def escalate(self) -> "Failure":
        """Return a fatal copy of this failure."""
        return replace(self, fatal=True)

    # ------------------------------------------------------------------
    # Reporting
    # ------------------------------------------------------------------

    def saw(self, excerpt_width: int = EXCERPT_WIDTH) -> str:
        """Describe the input at the failure position.

        Returns:
            EOF_MARKER at end of input, else the quoted upcoming text of the
            current line (truncated to excerpt_width with an ellipsis)
        """
        if self.position.at_end:
            return EOF_MARKER
        excerpt = next_on_line(self.position.buffer, self.position.cursor, excerpt_width)
        if not excerpt:
            # Sitting on a line break
            excerpt = "\\n"
        return f'"{excerpt}"'

    def describe(self, excerpt_width: int = EXCERPT_WIDTH) -> str:
        """Return 'Expected A or B, saw X' (or 'Unexpected X' with no expectations)."""
        saw = self.saw(excerpt_width)
        if not self.expected:
            return f"Unexpected {saw}"
        return f"Expected {EXPECTATION_SEPARATOR.join(self.expected)}, saw {saw}"

    @property
    def summary(self) -> str:
        """Single-line description including the buffer offset."""
        saw = self.saw()
        if not self.expected:
            return f"At position {self.position.cursor}: unexpected {saw}"
        expected = EXPECTATION_SEPARATOR.join(self.expected)
        return f"At position {self.position.cursor}: expected {expected}, saw {saw}"

    def render(self, *, excerpt_width: int = EXCERPT_WIDTH) -> str:
        """Render a multi-line diagnostic with source context.

        Layout (a compatibility surface, snapshot-tested downstream):
            At line <row + 1>, column <column>:
            <blank line>
            <source line>        only when the line is not blank
            <padding>^           only when the line is not blank
            <padding>|           only when the line is not blank
            ERROR: Expected <e1> or <e2>, saw <excerpt>

        Args:
            excerpt_width: Upcoming characters echoed after "saw"

        Returns:
            Rendered diagnostic without a trailing newline
        """
        info = find_line(self.position.buffer, self.position.cursor)
        parts = [f"At line {info.row + 1}, column {info.column}:", ""]
        if info.line.strip():
            padding = " " * info.column
            parts += [info.line, padding + CARET, padding + CONTINUATION]
        parts.append(f"ERROR: {self.describe(excerpt_width)}")
        return "\n".join(parts)

    def source_span(self) -> SourceSpan:
        """Return the failure location as a SourceSpan."""
        line, column = self.position.line_col()
        cursor = self.position.cursor
        return SourceSpan(start=cursor, end=cursor, line=line, column=column)

    def to_error(self) -> ParseFailedError:
        """Wrap this failure in a ParseFailedError (not raised)."""
        return ParseFailedError(ErrorTemplate.parse_failed(self.summary, self.source_span()), self)

    def __str__(self) -> str:
        return self.summary


type Outcome[T] = Result[T] | Failure


def make_result[T](value: T, next: Stream, start: Stream, matched: str) -> Result[T]:  # noqa: A002
    """Construct a successful outcome."""
    return Result(value, next, start, matched)


def make_failure(position: Stream, expected: str | None = None) -> Failure:
    """Construct a non-fatal failure, optionally with one expectation."""
    if expected is None:
        return Failure(position)
    return Failure(position, (expected,))


def is_result(value: object) -> bool:
    """True if value is a Result."""
    return isinstance(value, Result)


def is_failure(value: object) -> bool:
    """True if value is a Failure."""
    return isinstance(value, Failure)
