"""Shared constants for strandparse.

This module provides centralized configuration constants used by the
stream, outcome and parser packages. Placing constants here avoids circular
imports and provides a single source of truth.

Constants are grouped by domain:
- Diagnostic rendering: excerpt window and markers used by Failure.render()
- Expectations: descriptions attached by built-in parsers

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Diagnostic rendering
    "EXCERPT_WIDTH",
    "ELLIPSIS",
    "EOF_MARKER",
    "EXPECTATION_SEPARATOR",
    "CARET",
    "CONTINUATION",
    # Expectations
    "END_OF_FILE",
]

# ============================================================================
# DIAGNOSTIC RENDERING
# ============================================================================
#
# The rendered failure layout is a compatibility surface: downstream code
# snapshot-tests it. Changing any of these values changes that output.

# Number of upcoming characters echoed after "saw" in a rendered failure.
EXCERPT_WIDTH: int = 6

# Appended inside the quotes when the echoed excerpt stops before the line end.
ELLIPSIS: str = "..."

# Shown instead of an excerpt when the failure sits at the end of input.
EOF_MARKER: str = "EOF"

# Joins multiple expectations: 'Expected "hai" or "lol"'.
EXPECTATION_SEPARATOR: str = " or "

# Marker line placed under the failing column.
CARET: str = "^"

# Continuation line placed under the caret.
CONTINUATION: str = "|"

# ============================================================================
# EXPECTATIONS
# ============================================================================

# Expectation reported by the end-of-input parser.
END_OF_FILE: str = "end of file"
