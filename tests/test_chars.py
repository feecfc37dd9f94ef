"""Tests for strandparse.parser.chars: predicates and single-character parsers."""

from __future__ import annotations

import pytest

from strandparse import (
    Failure,
    Result,
    alphanum,
    digit,
    is_alphanum,
    is_digit,
    is_letter,
    is_lower,
    is_space,
    is_upper,
    letter,
    lower,
    make_stream,
    negate,
    not_alphanum,
    not_digit,
    not_letter,
    not_lower,
    not_space,
    not_upper,
    parse,
    space,
    upper,
)

# ============================================================================
# PREDICATES
# ============================================================================


class TestPredicates:
    """Character classification."""

    @pytest.mark.parametrize("char", list("0123456789"))
    def test_digits(self, char: str) -> None:
        """ASCII digits are digits and word characters."""
        assert is_digit(char)
        assert is_alphanum(char)
        assert not is_letter(char)

    @pytest.mark.parametrize("char", ["a", "z", "A", "Z"])
    def test_letters(self, char: str) -> None:
        """ASCII letters are letters and word characters."""
        assert is_letter(char)
        assert is_alphanum(char)
        assert not is_digit(char)

    def test_case(self) -> None:
        """Upper and lower case are disjoint."""
        assert is_upper("Q")
        assert not is_lower("Q")
        assert is_lower("q")
        assert not is_upper("q")

    def test_underscore_is_word_character(self) -> None:
        """The underscore counts as a word character but not a letter."""
        assert is_alphanum("_")
        assert not is_letter("_")

    @pytest.mark.parametrize("char", ["é", "٣", "Ж"])
    def test_non_ascii_excluded(self, char: str) -> None:
        """Digits, letters and word characters are ASCII only."""
        assert not is_digit(char)
        assert not is_letter(char)
        assert not is_alphanum(char)

    @pytest.mark.parametrize("char", [" ", "\t", "\n", "\r", "\u00a0", "\u2003"])
    def test_whitespace(self, char: str) -> None:
        """Whitespace includes Unicode spaces."""
        assert is_space(char)

    @pytest.mark.parametrize("text", ["", "  ", "a", "-"])
    def test_not_whitespace(self, text: str) -> None:
        """Only a single whitespace character is whitespace."""
        assert not is_space(text)

    def test_negate(self) -> None:
        """negate() inverts a predicate."""
        not_a_digit = negate(is_digit)
        assert not_a_digit("a")
        assert not not_a_digit("1")


# ============================================================================
# SINGLE-CHARACTER PARSERS
# ============================================================================

_CASES = [
    (digit, "7", "x", "a digit"),
    (space, " ", "x", "whitespace"),
    (alphanum, "_", "-", "a word character"),
    (letter, "k", "1", "a letter"),
    (upper, "K", "k", "an upper case letter"),
    (lower, "k", "K", "a lower case letter"),
    (not_digit, "x", "7", "a non-digit"),
    (not_space, "x", " ", "a non-whitespace character"),
    (not_alphanum, "-", "_", "a non-word character"),
    (not_letter, "1", "k", "a non-letter"),
    (not_upper, "k", "K", "anything but an upper case letter"),
    (not_lower, "K", "k", "anything but a lower case letter"),
]


class TestCharacterParsers:
    """Each parser consumes one matching character or fails with its label."""

    @pytest.mark.parametrize(("parser", "good", "bad", "label"), _CASES)
    def test_match(self, parser: object, good: str, bad: str, label: str) -> None:
        """A matching character is consumed and returned."""
        result = parse(parser, make_stream(good + "!"))  # type: ignore[arg-type]

        assert isinstance(result, Result)
        assert result.value == good
        assert result.next.cursor == 1

    @pytest.mark.parametrize(("parser", "good", "bad", "label"), _CASES)
    def test_mismatch(self, parser: object, good: str, bad: str, label: str) -> None:
        """A non-matching character fails in place with the parser's label."""
        failure = parse(parser, make_stream(bad))  # type: ignore[arg-type]

        assert isinstance(failure, Failure)
        assert failure.position.cursor == 0
        assert failure.expected == (label,)

    @pytest.mark.parametrize(("parser", "good", "bad", "label"), _CASES)
    def test_end_of_input(self, parser: object, good: str, bad: str, label: str) -> None:
        """Every character parser fails at the end of input."""
        failure = parse(parser, make_stream(""))  # type: ignore[arg-type]

        assert isinstance(failure, Failure)
        assert failure.saw() == "EOF"
