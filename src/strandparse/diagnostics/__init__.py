"""Diagnostic system for strandparse errors.

Provides structured error diagnostics with codes, spans and hints for the
errors the library raises: contract violations and execute() failures.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, SourceSpan
from .errors import (
    ContractViolationError,
    ParseFailedError,
    StrandError,
    StreamBoundsError,
)
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate

__all__ = [
    "ContractViolationError",
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "ErrorTemplate",
    "OutputFormat",
    "ParseFailedError",
    "SourceSpan",
    "StrandError",
    "StreamBoundsError",
]
