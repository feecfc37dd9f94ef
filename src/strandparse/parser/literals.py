"""Literal parsers composed from the core combinators.

Characters and strings, whitespace runs, words, and the number and quoted
string literals. Nothing here reads the Stream directly; every parser is a
composition of sat(), sequence(), alternative() and the repetition
combinators.
"""

from collections.abc import Callable, Iterable
from typing import Any

from strandparse.parser.chars import alphanum, digit, is_space, negate, space
from strandparse.parser.combinators import (
    alternative,
    fail,
    item,
    label,
    maybe,
    sat,
    sequence,
    sequence_all,
    unit,
)
from strandparse.parser.protocol import Parser
from strandparse.parser.repetition import many, many1
from strandparse.parser.steps import Bindings, bind, program, step

__all__ = [
    "char",
    "concat_all",
    "float_number",
    "integer_number",
    "not_char",
    "not_spaces",
    "not_spaces1",
    "quote",
    "quoted_string",
    "spaces",
    "spaces1",
    "string",
    "token",
    "word",
]

_QUOTE = '"'
_BACKSLASH = "\\"


# ============================================================================
# CHARACTERS AND STRINGS
# ============================================================================


def char(expected_char: str) -> Parser[str]:
    """Match exactly expected_char."""
    return label(
        sat(lambda c: c == expected_char),
        f'the character "{expected_char}"',
    )


def not_char(excluded_char: str) -> Parser[str]:
    """Match any single character except excluded_char."""
    return label(
        sat(lambda c: c != excluded_char),
        f'anything but the character "{excluded_char}"',
    )


def string(text: str) -> Parser[str]:
    """Match text exactly; the value is text itself.

    Each character is matched in order with char(). A failure reports the
    whole literal, quoted, at the position where matching stopped. The
    empty literal succeeds without consuming input.
    """
    if not text:
        return unit("")
    return label(
        sequence_all([*(char(c) for c in text), unit(text)]),
        f'"{text}"',
    )


def concat_all(parsers: Iterable[Parser[str]]) -> Parser[str]:
    """Match string-valued parsers in order; the value is their concatenation.

    Builds a right fold of sequence(). An empty list succeeds with "".

    Example:
        >>> signed = concat_all([maybe(char("-")), many1(digit)])
        >>> execute(signed, "-12")
        '-12'
    """
    parts = tuple(parsers)
    if not parts:
        return unit("")
    combined = parts[-1]
    for head in reversed(parts[:-1]):
        combined = _concat_pair(head, combined)
    return combined


def _concat_pair(head: Parser[str], tail: Parser[str]) -> Parser[str]:
    return sequence(
        head,
        lambda left, _start: sequence(tail, lambda right, _start: unit(left + right)),
    )


# ============================================================================
# WHITESPACE AND WORDS
# ============================================================================

spaces = many(space)
spaces1 = label(many1(space), "whitespace")

not_spaces = many(sat(negate(is_space)))
not_spaces1 = label(
    many1(sat(negate(is_space))),
    "one or more non-whitespace characters",
)

word = label(many1(alphanum), "a word")


def token[T](parser: Parser[T]) -> Parser[T]:
    """Match parser surrounded by optional whitespace; the value is parser's."""
    return program(
        step(spaces),
        step(parser, "value"),
        step(spaces),
        returning=lambda b: b["value"],
    )


# ============================================================================
# NUMBERS
# ============================================================================


def _converted(convert: Callable[[str], Any]) -> Callable[[Bindings], Parser[Any]]:
    """Build a step that converts the bound literal, failing if conversion does."""

    def build(bindings: Bindings) -> Parser[Any]:
        try:
            number = convert(bindings["literal"])
        except ValueError:
            return fail
        return unit(number)

    return build


integer_number = label(
    program(
        step(concat_all([maybe(char("-")), many1(digit)]), "literal"),
        bind(_converted(int)),
    ),
    "an integer",
)

float_number = label(
    program(
        step(
            concat_all([
                maybe(char("-")),
                many(digit),
                maybe(concat_all([char("."), many1(digit)])),
            ]),
            "literal",
        ),
        bind(_converted(float)),
    ),
    "a number",
)


# ============================================================================
# QUOTED STRINGS
# ============================================================================

_escaped_char = sequence(char(_BACKSLASH), lambda _backslash, _start: item)

quoted_string = label(
    program(
        step(char(_QUOTE)),
        step(many(alternative(_escaped_char, not_char(_QUOTE))), "text"),
        step(char(_QUOTE)),
        returning=lambda b: b["text"],
    ),
    "a quoted string",
)


def quote(text: str) -> str:
    """Return the double-quoted form of text accepted by quoted_string.

    Backslashes and double quotes are escaped with a backslash; nothing else
    is escaped.

    Example:
        >>> quote('say "hi"')
        '"say \\\\"hi\\\\""'
    """
    escaped = text.replace(_BACKSLASH, _BACKSLASH * 2).replace(_QUOTE, _BACKSLASH + _QUOTE)
    return _QUOTE + escaped + _QUOTE
