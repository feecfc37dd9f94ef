"""Parser execution protocol.

A parser is any callable taking a Stream and returning a Result or a
Failure. parse() is the single entry point every combinator uses to run a
child parser, so the protocol is checked uniformly: a non-callable parser,
a non-Stream input or a foreign return value is a ContractViolationError,
never a parse failure.
"""

import logging
from collections.abc import Callable

from strandparse.diagnostics import ContractViolationError, ErrorTemplate
from strandparse.outcome import Failure, Outcome, Result
from strandparse.stream import Stream, make_stream

__all__ = ["Parser", "execute", "parse"]

logger = logging.getLogger(__name__)

type Parser[T] = Callable[[Stream], Outcome[T]]


def parse[T](parser: Parser[T], stream: Stream) -> Outcome[T]:
    """Run a parser on a stream.

    Args:
        parser: Callable taking a Stream
        stream: Input position

    Returns:
        The parser's Result or Failure

    Raises:
        ContractViolationError: If parser is not callable, stream is not a
            Stream, or the parser returned neither a Result nor a Failure
    """
    if not callable(parser):
        raise ContractViolationError(ErrorTemplate.not_a_parser(parser))
    if not isinstance(stream, Stream):
        raise ContractViolationError(ErrorTemplate.not_a_stream(stream))
    outcome = parser(stream)
    if not isinstance(outcome, (Result, Failure)):
        raise ContractViolationError(ErrorTemplate.invalid_outcome(outcome))
    return outcome


def execute[T](parser: Parser[T], text: str) -> T:
    """Parse text from its start and return the parsed value.

    The only place an ordinary Failure is raised. Input left unconsumed is
    not an error; sequence with eof to require full consumption.

    Args:
        parser: Parser to run
        text: Input text

    Returns:
        The value of the Result

    Raises:
        ParseFailedError: If the parser fails; the Failure is available as
            the error's ``failure`` attribute
        ContractViolationError: If the parser breaks the protocol

    Example:
        >>> execute(integer_number, "-42")
        -42
    """
    outcome = parse(parser, make_stream(text))
    if isinstance(outcome, Failure):
        logger.debug("Parse failed: %s", outcome)
        raise outcome.to_error()
    logger.debug("Parsed %d of %d characters", outcome.next.cursor, len(text))
    return outcome.value
