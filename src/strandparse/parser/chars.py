"""Character classification predicates and single-character parsers.

Predicates are pure functions of one character. Digits, letters and word
characters are ASCII only; whitespace is any Unicode whitespace.

Every parser here is sat(predicate) wrapped in label(), so a failure
reports a single readable expectation such as "a digit".
"""

import string
from collections.abc import Callable
from typing import Final

from strandparse.parser.combinators import label, sat

__all__ = [
    "alphanum",
    "digit",
    "is_alphanum",
    "is_digit",
    "is_letter",
    "is_lower",
    "is_space",
    "is_upper",
    "letter",
    "lower",
    "negate",
    "not_alphanum",
    "not_digit",
    "not_letter",
    "not_lower",
    "not_space",
    "not_upper",
    "space",
    "upper",
]

DIGITS: Final[frozenset[str]] = frozenset(string.digits)
UPPERCASE: Final[frozenset[str]] = frozenset(string.ascii_uppercase)
LOWERCASE: Final[frozenset[str]] = frozenset(string.ascii_lowercase)
LETTERS: Final[frozenset[str]] = UPPERCASE | LOWERCASE
WORD_CHARACTERS: Final[frozenset[str]] = LETTERS | DIGITS | {"_"}


def is_digit(char: str) -> bool:
    """True if char is an ASCII digit."""
    return char in DIGITS


def is_space(char: str) -> bool:
    """True if char is a single whitespace character."""
    return len(char) == 1 and char.isspace()


def is_alphanum(char: str) -> bool:
    """True if char is an ASCII letter, an ASCII digit or the underscore."""
    return char in WORD_CHARACTERS


def is_letter(char: str) -> bool:
    """True if char is an ASCII letter."""
    return char in LETTERS


def is_upper(char: str) -> bool:
    """True if char is an upper case ASCII letter."""
    return char in UPPERCASE


def is_lower(char: str) -> bool:
    """True if char is a lower case ASCII letter."""
    return char in LOWERCASE


def negate(predicate: Callable[[str], bool]) -> Callable[[str], bool]:
    """Return the inverse of predicate."""
    return lambda char: not predicate(char)


digit = label(sat(is_digit), "a digit")
space = label(sat(is_space), "whitespace")
alphanum = label(sat(is_alphanum), "a word character")
letter = label(sat(is_letter), "a letter")
upper = label(sat(is_upper), "an upper case letter")
lower = label(sat(is_lower), "a lower case letter")

not_digit = label(sat(negate(is_digit)), "a non-digit")
not_space = label(sat(negate(is_space)), "a non-whitespace character")
not_alphanum = label(sat(negate(is_alphanum)), "a non-word character")
not_letter = label(sat(negate(is_letter)), "a non-letter")
not_upper = label(sat(negate(is_upper)), "anything but an upper case letter")
not_lower = label(sat(negate(is_lower)), "anything but a lower case letter")
