"""strandparse exception hierarchy with structured diagnostics.

Only two things are ever raised: contract violations (bugs in parser
composition) and ParseFailedError from execute(). Ordinary parse failures
are returned as Failure values.

Python 3.13+. Zero external dependencies.
"""

from typing import TYPE_CHECKING

from .codes import Diagnostic

if TYPE_CHECKING:
    from strandparse.outcome import Failure

    from .formatter import DiagnosticFormatter

__all__ = [
    "ContractViolationError",
    "ParseFailedError",
    "StrandError",
    "StreamBoundsError",
]


class StrandError(Exception):
    """Base exception for all strandparse errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize StrandError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)

    def format(self, formatter: "DiagnosticFormatter | None" = None) -> str:
        """Render this error for display or tooling.

        Args:
            formatter: Output style; defaults to the Rust style used for the
                exception message

        Returns:
            The formatted diagnostic, or the plain message when the error
            carries no diagnostic

        Example:
            >>> try:
            ...     execute(string("hai"), "wat")
            ... except ParseFailedError as e:
            ...     print(e.format(DiagnosticFormatter(output_format=OutputFormat.SIMPLE)))
            PARSE_FAILED: At position 0: expected "hai", saw "wat"
        """
        if self.diagnostic is None:
            return str(self)
        return self.diagnostic.format_error(formatter)


class ContractViolationError(StrandError):
    """A parser composition broke the execution protocol.

    Examples:
    - Running something that is not callable as a parser
    - A parser returning neither a Result nor a Failure
    - Reading or stepping a Stream past its end

    Never a consequence of bad input; always a bug in the grammar code.
    """


class StreamBoundsError(ContractViolationError, IndexError):
    """Stream read, stepped or constructed outside its buffer.

    Also an IndexError so generic out-of-bounds handlers catch it.
    """


class ParseFailedError(StrandError):
    """Raised by execute() when the parser returns a Failure.

    Attributes:
        failure: The Failure returned by the top-level parser
    """

    def __init__(self, message: str | Diagnostic, failure: "Failure") -> None:
        """Initialize ParseFailedError.

        Args:
            message: Error message string OR Diagnostic object
            failure: The failure being raised
        """
        super().__init__(message)
        self.failure = failure
