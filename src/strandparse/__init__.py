"""strandparse - parser combinators over an immutable character stream.

Build recursive-descent parsers by composing small parsing functions, with
position-aware diagnostics and explicit control over backtracking.

A parser is any callable taking a Stream and returning a Result or a
Failure. Failures are values: alternative() merges them, label() renames
what was expected, cut() makes them fatal so enclosing alternatives stop
backtracking. Only execute() raises them.

Example:
    >>> from strandparse import execute, program, step, many1, upper, spaces1
    >>> verb = program(step(many1(upper), "verb"), step(spaces1),
    ...                returning=lambda b: b["verb"])
    >>> execute(verb, "GET /")
    'GET'

Public API:
    make_stream, Stream - input positions
    Result, Failure - parse outcomes
    parse, execute - running parsers
    strandparse.parser - combinators and derived parsers (re-exported here)

Exceptions:
    StrandError - Base exception class
    ContractViolationError - Parser composition bugs
    StreamBoundsError - Stream read or stepped past its end
    ParseFailedError - Raised by execute() on a Failure

Every error renders through DiagnosticFormatter: error.format(formatter)
selects Rust-style, single-line or JSON output (OutputFormat).
"""

from .diagnostics import (
    ContractViolationError,
    DiagnosticFormatter,
    OutputFormat,
    ParseFailedError,
    StrandError,
    StreamBoundsError,
)
from .outcome import (
    Failure,
    Outcome,
    Result,
    is_failure,
    is_result,
    make_failure,
    make_result,
)
from .parser import (
    Bindings,
    Parser,
    Step,
    alphanum,
    alternative,
    alternative_all,
    bind,
    char,
    concat_all,
    cut,
    digit,
    eof,
    execute,
    fail,
    float_number,
    integer_number,
    is_alphanum,
    is_digit,
    is_letter,
    is_lower,
    is_space,
    is_upper,
    item,
    label,
    letter,
    lower,
    many,
    many1,
    many1_list,
    many_list,
    maybe,
    negate,
    not_alphanum,
    not_char,
    not_digit,
    not_letter,
    not_lower,
    not_space,
    not_spaces,
    not_spaces1,
    not_upper,
    parse,
    program,
    quote,
    quoted_string,
    sat,
    sequence,
    sequence_all,
    space,
    spaces,
    spaces1,
    step,
    string,
    token,
    unit,
    upper,
    word,
)
from .stream import Stream, make_stream

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("strandparse")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "Bindings",
    "ContractViolationError",
    "DiagnosticFormatter",
    "Failure",
    "Outcome",
    "OutputFormat",
    "ParseFailedError",
    "Parser",
    "Result",
    "Step",
    "StrandError",
    "Stream",
    "StreamBoundsError",
    "__version__",
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
    "is_failure",
    "is_letter",
    "is_lower",
    "is_result",
    "is_space",
    "is_upper",
    "item",
    "label",
    "letter",
    "lower",
    "make_failure",
    "make_result",
    "make_stream",
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
