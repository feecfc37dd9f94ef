"""Core combinators.

Each function here takes parsers, predicates or values and returns a new
parser. Only item() and eof() look at the Stream directly; everything else
is composed from them through parse().

Failure handling shared by all combinators:
    - A failure is returned, never raised
    - sequence() never undoes a successful first parser
    - alternative() tries the next branch on the same input unless the
      failure is fatal
    - label() and cut() rewrite a failure without moving it
"""

from collections.abc import Callable, Iterable
from typing import Any, overload

from strandparse.constants import END_OF_FILE
from strandparse.outcome import Failure, Outcome, make_failure, make_result
from strandparse.parser.protocol import Parser, parse
from strandparse.stream import Stream

__all__ = [
    "alternative",
    "alternative_all",
    "cut",
    "eof",
    "fail",
    "item",
    "label",
    "maybe",
    "sat",
    "sequence",
    "sequence_all",
    "unit",
]


# ============================================================================
# PRIMITIVES
# ============================================================================


def unit[T](value: T, matched: str = "") -> Parser[T]:
    """Parser that succeeds with value without consuming input.

    Useful at the end of a sequence to inject a computed value.

    Args:
        value: Value of every Result this parser produces
        matched: Matched text to report; usually left empty
    """

    def parser(stream: Stream) -> Outcome[T]:
        return make_result(value, stream, stream, matched)

    return parser


def fail(stream: Stream) -> Failure:
    """Parser that always fails at the current position with no expectation."""
    return make_failure(stream)


def item(stream: Stream) -> Outcome[str]:
    """Parser that consumes any single character and returns it."""
    if stream.at_end:
        return make_failure(stream)
    char = stream.get()
    return make_result(char, stream.next(), stream, char)


def eof(stream: Stream) -> Outcome[None]:
    """Parser that succeeds with None only at the end of input."""
    if stream.at_end:
        return make_result(None, stream, stream, "")
    return make_failure(stream, END_OF_FILE)


# ============================================================================
# SEQUENCING
# ============================================================================


def sequence[T, U](
    parser: Parser[T],
    then: Callable[[T, Stream], Parser[U]],
) -> Parser[U]:
    """Run parser, then the parser built from its value.

    ``then`` receives the first value and the stream the sequence started
    at, and returns the parser to run on the remaining input. The Result
    spans both parsers and its matched text is the concatenation of theirs.
    Either failure is returned unchanged.

    Example:
        >>> two = sequence(item, lambda first, _start: sequence(
        ...     item, lambda second, _start: unit(first + second)))
        >>> execute(two, "hi")
        'hi'
    """

    def run(stream: Stream) -> Outcome[U]:
        first = parse(parser, stream)
        if isinstance(first, Failure):
            return first
        second = parse(then(first.value, stream), first.next)
        if isinstance(second, Failure):
            return second
        return make_result(second.value, second.next, stream, first.matched + second.matched)

    return run


def sequence_all(parsers: Iterable[Parser[object]]) -> Parser[object]:
    """Run parsers one after another; the last value is the overall value.

    Stops at the first failure and returns it. An empty list succeeds with
    None without consuming input.
    """
    steps = tuple(parsers)

    def run(stream: Stream) -> Outcome[object]:
        current = stream
        value: object = None
        matched: list[str] = []
        for parser in steps:
            outcome = parse(parser, current)
            if isinstance(outcome, Failure):
                return outcome
            value = outcome.value
            matched.append(outcome.matched)
            current = outcome.next
        return make_result(value, current, stream, "".join(matched))

    return run


# ============================================================================
# ALTERNATION
# ============================================================================


def alternative[T](first: Parser[T], second: Parser[T]) -> Parser[T]:
    """Try first; if it fails without being fatal, try second on the same input.

    When both fail the failures are merged with Failure.extend(): the one
    that got further wins, equal positions pool their expectations.
    """

    def run(stream: Stream) -> Outcome[T]:
        left = parse(first, stream)
        if not isinstance(left, Failure) or left.fatal:
            return left
        right = parse(second, stream)
        if not isinstance(right, Failure):
            return right
        return left.extend(right)

    return run


def alternative_all[T](parsers: Iterable[Parser[T]]) -> Parser[T]:
    """Try each parser in order; the first success wins.

    Same rules as alternative(). A fatal failure stops the search and is
    merged into the failures collected so far. An empty list fails with no
    expectations.

    Example:
        >>> keyword = alternative_all([string("omg"), string("wtf"), string("bbq")])
        >>> execute(keyword, "wtf")
        'wtf'
    """
    branches = tuple(parsers)

    def run(stream: Stream) -> Outcome[T]:
        failure: Failure | None = None
        for branch in branches:
            outcome = parse(branch, stream)
            if not isinstance(outcome, Failure):
                return outcome
            if failure is None:
                failure = outcome
            else:
                failure = failure.extend(outcome)
            if outcome.fatal:
                return failure
        if failure is None:
            return make_failure(stream)
        return failure

    return run


def maybe(parser: Parser[str]) -> Parser[str]:
    """Run parser, or succeed with "" without consuming input if it fails."""
    return alternative(parser, unit(""))


# ============================================================================
# FAILURE SHAPING
# ============================================================================


def label[T](parser: Parser[T], description: str) -> Parser[T]:
    """Replace the expectations of any failure with description.

    Position and fatal flag are kept, so a composite parser can report one
    meaningful expectation instead of its low-level character complaints.
    """

    def run(stream: Stream) -> Outcome[T]:
        outcome = parse(parser, stream)
        if isinstance(outcome, Failure):
            return outcome.with_expected(description)
        return outcome

    return run


def sat(predicate: Callable[[str], bool]) -> Parser[str]:
    """Consume one character if predicate holds for it.

    Fails at the position before the character, with no expectation; wrap
    in label() to describe what was wanted.
    """
    return sequence(
        item,
        lambda char, start: unit(char) if predicate(char) else _fail_at(start),
    )


def _fail_at(position: Stream) -> Parser[object]:
    def parser(_stream: Stream) -> Failure:
        return make_failure(position)

    return parser


@overload
def cut[T](parser: Parser[T]) -> Parser[T]: ...


@overload
def cut[U](parser: Parser[Any], then: Parser[U]) -> Parser[U]: ...


def cut(parser: Parser[Any], then: Parser[Any] | None = None) -> Parser[Any]:
    """Escalate failures to fatal so enclosing alternatives stop backtracking.

    With one argument, any failure of parser becomes fatal. With ``then``,
    parser acts as a guard: once it matches, any failure of ``then`` is
    fatal, while a failure of the guard itself stays recoverable. The value is
    then's; the guard's value is discarded.

    Example:
        >>> assignment = cut(string("let"), program(
        ...     step(spaces1), step(word, "name"), returning=lambda b: b["name"]))
    """
    if then is not None:
        committed = cut(then)
        return sequence(parser, lambda _value, _start: committed)

    def run(stream: Stream) -> Outcome[Any]:
        outcome = parse(parser, stream)
        if isinstance(outcome, Failure):
            return outcome.escalate()
        return outcome

    return run
