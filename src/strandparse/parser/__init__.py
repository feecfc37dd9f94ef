"""Parser engine: execution protocol, combinators and derived parsers.

Modules:
    protocol: parse(), execute() and the Parser type
    combinators: sequencing, alternation, labeling, cut, primitives
    steps: step programs with named bindings
    repetition: string- and list-valued repetition
    chars: character predicates and single-character parsers
    literals: strings, whitespace, words, numbers, quoted strings

Python 3.13+.
"""

from .chars import (
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
    negate,
    not_alphanum,
    not_digit,
    not_letter,
    not_lower,
    not_space,
    not_upper,
    space,
    upper,
)
from .combinators import (
    alternative,
    alternative_all,
    cut,
    eof,
    fail,
    item,
    label,
    maybe,
    sat,
    sequence,
    sequence_all,
    unit,
)
from .literals import (
    char,
    concat_all,
    float_number,
    integer_number,
    not_char,
    not_spaces,
    not_spaces1,
    quote,
    quoted_string,
    spaces,
    spaces1,
    string,
    token,
    word,
)
from .protocol import Parser, execute, parse
from .repetition import many, many1, many1_list, many_list
from .steps import Bindings, Step, bind, program, step

__all__ = [
    "Bindings",
    "Parser",
    "Step",
    "alphanum",
    "alternative",
    "alternative_all",
    "bind",
    "char",
    "concat_all",
    "cut",
    "digit",
    "eof",
    "execute",
    "fail",
    "float_number",
    "integer_number",
    "is_alphanum",
    "is_digit",
    "is_letter",
    "is_lower",
    "is_space",
    "is_upper",
    "item",
    "label",
    "letter",
    "lower",
    "many",
    "many1",
    "many1_list",
    "many_list",
    "maybe",
    "negate",
    "not_alphanum",
    "not_char",
    "not_digit",
    "not_letter",
    "not_lower",
    "not_space",
    "not_spaces",
    "not_spaces1",
    "not_upper",
    "parse",
    "program",
    "quote",
    "quoted_string",
    "sat",
    "sequence",
    "sequence_all",
    "space",
    "spaces",
    "spaces1",
    "step",
    "string",
    "token",
    "unit",
    "upper",
    "word",
]
