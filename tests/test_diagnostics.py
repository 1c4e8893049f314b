"""Tests for diagnostics: codes, spans, formatting, and the exception types.

Python 3.13+.
"""

from __future__ import annotations

import json

import pytest

from localematch import LocaleMatchError, LocaleParseError, parse_bcp47
from localematch.diagnostics import (
    Diagnostic,
    DiagnosticCode,
    DiagnosticFormatter,
    OutputFormat,
    SourceSpan,
)


@pytest.fixture
def diagnostic() -> Diagnostic:
    return Diagnostic(
        code=DiagnosticCode.SUBTAG_TOO_LONG,
        message="Subtag 'abcdefghij' exceeds 8 characters",
        span=SourceSpan(start=3, end=13),
        hint="BCP 47 subtags are 1 to 8 ASCII letters or digits",
        subtag="abcdefghij",
    )


class TestDiagnosticCode:
    """Code numbering by category."""

    def test_codes_unique(self) -> None:
        values = [code.value for code in DiagnosticCode]
        assert len(values) == len(set(values))

    def test_categories(self) -> None:
        """1000s input, 1100s BCP 47 structure, 1200s POSIX structure."""
        assert DiagnosticCode.EMPTY_LOCALE.value // 100 == 10
        assert DiagnosticCode.EMPTY_SUBTAG.value // 100 == 11
        assert DiagnosticCode.MISSING_LANGUAGE.value // 100 == 12


class TestSourceSpan:
    """Span validation."""

    def test_negative_start_rejected(self) -> None:
        with pytest.raises(ValueError, match="start"):
            SourceSpan(start=-1, end=2)

    def test_end_before_start_rejected(self) -> None:
        with pytest.raises(ValueError, match="end"):
            SourceSpan(start=4, end=2)

    def test_empty_span_allowed(self) -> None:
        """Zero-width spans point between characters."""
        assert SourceSpan(start=0, end=0).start == 0


class TestFormatter:
    """Output formats."""

    def test_rust_format(self, diagnostic: Diagnostic) -> None:
        """Default output mirrors compiler-style diagnostics."""
        assert DiagnosticFormatter().format(diagnostic) == (
            "error[SUBTAG_TOO_LONG]: Subtag 'abcdefghij' exceeds 8 characters\n"
            "  --> characters 3..13\n"
            "  = subtag: abcdefghij\n"
            "  = help: BCP 47 subtags are 1 to 8 ASCII letters or digits"
        )

    def test_format_error_matches_default_formatter(self, diagnostic: Diagnostic) -> None:
        assert diagnostic.format_error() == DiagnosticFormatter().format(diagnostic)
        assert str(diagnostic) == diagnostic.message

    def test_rust_format_minimal(self) -> None:
        """Optional parts are omitted when absent."""
        minimal = Diagnostic(code=DiagnosticCode.EMPTY_LOCALE, message="Locale string is empty")
        assert DiagnosticFormatter().format(minimal) == "error[EMPTY_LOCALE]: Locale string is empty"

    def test_simple_format(self, diagnostic: Diagnostic) -> None:
        formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)
        assert formatter.format(diagnostic) == "SUBTAG_TOO_LONG: Subtag 'abcdefghij' exceeds 8 characters"

    def test_json_format(self, diagnostic: Diagnostic) -> None:
        formatter = DiagnosticFormatter(output_format=OutputFormat.JSON)
        data = json.loads(formatter.format(diagnostic))
        assert data == {
            "code": "SUBTAG_TOO_LONG",
            "code_value": 1103,
            "message": "Subtag 'abcdefghij' exceeds 8 characters",
            "start": 3,
            "end": 13,
            "subtag": "abcdefghij",
            "hint": "BCP 47 subtags are 1 to 8 ASCII letters or digits",
        }

    def test_control_characters_escaped(self) -> None:
        """Input echoed into messages cannot inject line breaks."""
        injected = Diagnostic(
            code=DiagnosticCode.INVALID_CHARACTER,
            message="Invalid character in 'en\nFAKE LOG LINE'",
            subtag="en\x1b[31m",
        )
        output = DiagnosticFormatter().format(injected)
        assert "\nFAKE" not in output
        assert "\\n" in output
        assert "\x1b" not in output

    def test_sanitize_truncates(self) -> None:
        long_message = Diagnostic(code=DiagnosticCode.INVALID_CHARACTER, message="x" * 300)
        formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE, sanitize=True)
        assert formatter.format(long_message) == "INVALID_CHARACTER: " + "x" * 100 + "..."


class TestExceptions:
    """Exception hierarchy and payloads."""

    def test_hierarchy(self) -> None:
        assert issubclass(LocaleParseError, LocaleMatchError)
        assert issubclass(LocaleMatchError, ValueError)

    def test_plain_message(self) -> None:
        error = LocaleMatchError("something went wrong")
        assert str(error) == "something went wrong"
        assert error.diagnostic is None

    def test_diagnostic_message(self, diagnostic: Diagnostic) -> None:
        error = LocaleParseError(diagnostic, input_value="en-abcdefghij")
        assert error.diagnostic is diagnostic
        assert str(error) == diagnostic.format_error()
        assert error.input_value == "en-abcdefghij"
        assert error.grammar is None

    def test_parser_error_message_is_single_safe_block(self) -> None:
        """Raised parse errors never echo raw control characters."""
        with pytest.raises(LocaleParseError) as exc_info:
            parse_bcp47("en-\x1b[2J")
        assert "\x1b" not in str(exc_info.value)
