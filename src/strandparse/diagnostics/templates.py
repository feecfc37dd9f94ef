"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, SourceSpan

__all__ = ["ErrorTemplate"]

# Longest repr of a foreign object echoed back in a contract diagnostic.
_MAX_REPR_LENGTH: int = 60


def _short_repr(value: object) -> str:
    text = repr(value)
    if len(text) > _MAX_REPR_LENGTH:
        return text[:_MAX_REPR_LENGTH] + "..."
    return text


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    This provides:
        - Testable error messages
        - Consistent formatting
        - Documentation of all error cases
    """

    # =========================================================================
    # CONTRACT VIOLATIONS (1000-1999)
    # =========================================================================

    @staticmethod
    def not_a_parser(value: object) -> Diagnostic:
        """Something other than a callable was run as a parser.

        Args:
            value: The offending object

        Returns:
            Diagnostic for NOT_A_PARSER
        """
        msg = f"Expected a parser function, got {_short_repr(value)}"
        return Diagnostic(
            code=DiagnosticCode.NOT_A_PARSER,
            message=msg,
            hint="Combinators accept callables taking a Stream; "
            "check that a continuation returned a parser",
        )

    @staticmethod
    def not_a_stream(value: object) -> Diagnostic:
        """A parser was run on something other than a Stream.

        Args:
            value: The offending input

        Returns:
            Diagnostic for NOT_A_STREAM
        """
        msg = f"Expected a Stream, got {_short_repr(value)}"
        return Diagnostic(
            code=DiagnosticCode.NOT_A_STREAM,
            message=msg,
            hint="Wrap raw text with make_stream(), or use execute()",
        )

    @staticmethod
    def invalid_outcome(value: object) -> Diagnostic:
        """A parser returned neither a Result nor a Failure.

        Args:
            value: The value the parser returned

        Returns:
            Diagnostic for INVALID_OUTCOME
        """
        msg = f"Parser returned unexpected value: {_short_repr(value)}"
        return Diagnostic(
            code=DiagnosticCode.INVALID_OUTCOME,
            message=msg,
            hint="Parsers must return make_result(...) or make_failure(...)",
        )

    @staticmethod
    def read_past_end(position: int) -> Diagnostic:
        """Stream.get() called at the end of the buffer.

        Args:
            position: Cursor of the stream

        Returns:
            Diagnostic for STREAM_READ_PAST_END
        """
        msg = f"Cannot read past end of buffer (position {position})"
        return Diagnostic(
            code=DiagnosticCode.STREAM_READ_PAST_END,
            message=msg,
            hint="Check Stream.at_end before reading",
        )

    @staticmethod
    def step_past_end(position: int) -> Diagnostic:
        """Stream.next() called at the end of the buffer.

        Args:
            position: Cursor of the stream

        Returns:
            Diagnostic for STREAM_STEP_PAST_END
        """
        msg = f"Cannot step past end of buffer (position {position})"
        return Diagnostic(
            code=DiagnosticCode.STREAM_STEP_PAST_END,
            message=msg,
            hint="Check Stream.at_end before stepping",
        )

    @staticmethod
    def cursor_out_of_range(position: int, length: int) -> Diagnostic:
        """Stream constructed with a cursor outside its buffer.

        Args:
            position: Requested cursor
            length: Buffer length

        Returns:
            Diagnostic for CURSOR_OUT_OF_RANGE
        """
        msg = f"Cursor {position} out of range for buffer of length {length}"
        return Diagnostic(
            code=DiagnosticCode.CURSOR_OUT_OF_RANGE,
            message=msg,
        )

    @staticmethod
    def invalid_step(name: str | None) -> Diagnostic:
        """Step built with both or neither of a parser and a builder.

        Args:
            name: Binding name of the step, if any

        Returns:
            Diagnostic for INVALID_STEP
        """
        label = "anonymous step" if name is None else f"step '{name}'"
        msg = f"Invalid {label}: exactly one of parser or build is required"
        return Diagnostic(
            code=DiagnosticCode.INVALID_STEP,
            message=msg,
            hint="Use step(parser) or bind(build) instead of Step(...)",
        )

    @staticmethod
    def invalid_slice(start: int, end: int, *, same_buffer: bool) -> Diagnostic:
        """Stream.slice_to() given an end that is not a later position.

        Args:
            start: Cursor of the stream being sliced
            end: Cursor of the end stream
            same_buffer: Whether both streams share one buffer

        Returns:
            Diagnostic for INVALID_SLICE
        """
        if same_buffer:
            msg = f"Cannot slice from position {start} back to position {end}"
        else:
            msg = f"Cannot slice from position {start} to a position in another buffer"
        return Diagnostic(
            code=DiagnosticCode.INVALID_SLICE,
            message=msg,
            hint="The end must come from stepping the stream being sliced",
        )

    # =========================================================================
    # PARSE FAILURES (2000-2999)
    # =========================================================================

    @staticmethod
    def parse_failed(summary: str, span: SourceSpan) -> Diagnostic:
        """A top-level parse did not match its input.

        Args:
            summary: Single-line failure summary
            span: Location of the failure

        Returns:
            Diagnostic for PARSE_FAILED
        """
        return Diagnostic(
            code=DiagnosticCode.PARSE_FAILED,
            message=summary,
            span=span,
        )
