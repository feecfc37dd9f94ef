"""Repetition combinators.

Two flavors share one definition:
    - many1 / many: string-valued, the values are concatenated
    - many1_list / many_list: list-valued, the values are collected

one-or-more runs the parser once (it must succeed) and then zero-or-more
of the remainder; zero-or-more is alternative(one-or-more, unit(empty)).

The loop in _one_or_more is the unrolled form of the recursive definition

    many1(p) = sequence(p, lambda head, _: sequence(many(p),
                        lambda tail, _: unit(head + tail)))
    many(p)  = alternative(many1(p), unit(""))

and, for any parser that consumes input when it succeeds, yields
identical outcomes: the same value, matched text and next stream on
success, and the same Failure otherwise. A non-fatal failure ends the run;
a fatal failure is returned as the failure of the whole repetition.
Unrolling keeps long runs off the Python stack.
"""

import logging
from collections.abc import Callable

from strandparse.outcome import Failure, Outcome, make_result
from strandparse.parser.combinators import alternative, unit
from strandparse.parser.protocol import Parser, parse
from strandparse.stream import Stream

__all__ = ["many", "many1", "many1_list", "many_list"]

logger = logging.getLogger(__name__)


def _one_or_more[T, C](parser: Parser[T], combine: Callable[[list[T]], C]) -> Parser[C]:
    def run(stream: Stream) -> Outcome[C]:
        head = parse(parser, stream)
        if isinstance(head, Failure):
            return head
        values = [head.value]
        matched = [head.matched]
        current = head.next
        while True:
            outcome = parse(parser, current)
            if isinstance(outcome, Failure):
                if outcome.fatal:
                    return outcome
                break
            if outcome.next.cursor == current.cursor:
                # No progress
                logger.debug(
                    "Repetition stopped at position %d: parser matched without consuming",
                    current.cursor,
                )
                break
            values.append(outcome.value)
            matched.append(outcome.matched)
            current = outcome.next
        return make_result(combine(values), current, stream, "".join(matched))

    return run


def many1(parser: Parser[str]) -> Parser[str]:
    """Match parser one or more times; the value is the concatenated string."""
    return _one_or_more(parser, "".join)


def many(parser: Parser[str]) -> Parser[str]:
    """Match parser zero or more times; the value may be ""."""
    return alternative(many1(parser), unit(""))


def many1_list[T](parser: Parser[T]) -> Parser[list[T]]:
    """Match parser one or more times; the value is the list of results."""
    return _one_or_more(parser, list)


def many_list[T](parser: Parser[T]) -> Parser[list[T]]:
    """Match parser zero or more times; the value is a (possibly empty) list."""
    return alternative(many1_list(parser), _empty_list)


def _empty_list(stream: Stream) -> Outcome[list[object]]:
    # Fresh list per match
    return make_result([], stream, stream, "")
