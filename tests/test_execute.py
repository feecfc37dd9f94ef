"""Tests for execute() and the package surface."""

from __future__ import annotations

import logging

import pytest

import strandparse
from strandparse import (
    ContractViolationError,
    ParseFailedError,
    concat_all,
    eof,
    execute,
    integer_number,
    program,
    step,
    string,
)


class TestExecute:
    """execute() runs a parser from the start of the text."""

    def test_returns_value(self) -> None:
        """A successful parse returns the bare value."""
        assert execute(integer_number, "-42") == -42

    def test_trailing_input_allowed(self) -> None:
        """Unconsumed input is not an error."""
        assert execute(string("ab"), "abc") == "ab"

    def test_require_full_consumption(self) -> None:
        """Sequencing with eof rejects trailing input."""
        whole = program(step(string("ab"), "ab"), step(eof), returning=lambda b: b["ab"])
        assert execute(whole, "ab") == "ab"
        with pytest.raises(ParseFailedError) as exc_info:
            execute(whole, "abc")
        assert exc_info.value.failure.expected == ("end of file",)

    def test_failure_render_available(self) -> None:
        """The raised error exposes the renderable failure."""
        with pytest.raises(ParseFailedError) as exc_info:
            execute(concat_all([string("omg"), string("lol")]), "omgwat")
        assert exc_info.value.failure.render().startswith("At line 1, column 3:")

    def test_contract_violation_propagates(self) -> None:
        """Protocol violations are not converted into parse failures."""
        with pytest.raises(ContractViolationError):
            execute(lambda _s: None, "x")  # type: ignore[arg-type,return-value]

    def test_logs_failure_at_debug(self, caplog: pytest.LogCaptureFixture) -> None:
        """A failed parse is logged at DEBUG before raising."""
        with caplog.at_level(logging.DEBUG, logger="strandparse.parser.protocol"):
            with pytest.raises(ParseFailedError):
                execute(string("hai"), "wat")
        assert "Parse failed" in caplog.text

    def test_logs_success_at_debug(self, caplog: pytest.LogCaptureFixture) -> None:
        """A successful parse logs how much input was consumed."""
        with caplog.at_level(logging.DEBUG, logger="strandparse.parser.protocol"):
            execute(string("ab"), "abc")
        assert "Parsed 2 of 3 characters" in caplog.text


class TestPackage:
    """Top-level package exports."""

    def test_version(self) -> None:
        """A version string is always available."""
        assert isinstance(strandparse.__version__, str)
        assert strandparse.__version__

    def test_all_exports_resolve(self) -> None:
        """Every name in __all__ is importable from the package."""
        for name in strandparse.__all__:
            assert hasattr(strandparse, name), name
