"""Diagnostic codes and data structures.

Defines error codes, source spans, and diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .formatter import DiagnosticFormatter

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "SourceSpan",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Contract violations (bugs in parser composition)
        2000-2999: Parse failures surfaced by execute()
    """

    # Contract violations (1000-1999)
    NOT_A_PARSER = 1001
    NOT_A_STREAM = 1002
    INVALID_OUTCOME = 1003
    STREAM_READ_PAST_END = 1004
    STREAM_STEP_PAST_END = 1005
    CURSOR_OUT_OF_RANGE = 1006
    INVALID_STEP = 1007
    INVALID_SLICE = 1008

    # Parse failures (2000-2999)
    PARSE_FAILED = 2001


@dataclass(frozen=True, slots=True)
class SourceSpan:
    """Source code location for error reporting.

    Note:
        Python strings measure positions in characters (Unicode code points),
        not bytes.

    Attributes:
        start: Starting character offset (0-indexed)
        end: Ending character offset (exclusive)
        line: Line number (1-indexed)
        column: Column number (0-indexed, as printed by Failure.render())
    """

    start: int
    end: int
    line: int
    column: int

    def __post_init__(self) -> None:
        """Validate SourceSpan invariants.

        Raises:
            ValueError: If start is negative, end precedes start, line is
                less than 1, or column is negative.
        """
        if self.start < 0:
            msg = f"SourceSpan.start must be >= 0, got {self.start}"
            raise ValueError(msg)
        if self.end < self.start:
            msg = f"SourceSpan.end ({self.end}) must be >= start ({self.start})"
            raise ValueError(msg)
        if self.line < 1:
            msg = f"SourceSpan.line must be >= 1 (1-indexed), got {self.line}"
            raise ValueError(msg)
        if self.column < 0:
            msg = f"SourceSpan.column must be >= 0, got {self.column}"
            raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Inspired by Rust compiler diagnostics. Carried by every StrandError so
    callers and tools can inspect the code instead of parsing message text.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        span: Source location (None for errors not tied to input text)
        hint: Suggestion for fixing the error
    """

    code: DiagnosticCode
    message: str
    span: SourceSpan | None = None
    hint: str | None = None

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self, formatter: "DiagnosticFormatter | None" = None) -> str:
        """Format diagnostic like Rust compiler, or with the given formatter.

        Delegates to DiagnosticFormatter for consistent output.

        Args:
            formatter: Formatter to use; defaults to the Rust style

        Example output:
            error[NOT_A_PARSER]: Expected a parser function, got 42
              = help: Combinators accept callables taking a Stream

        Returns:
            Formatted error message
        """
        if formatter is None:
            from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

            formatter = DiagnosticFormatter()
        return formatter.format(self)
