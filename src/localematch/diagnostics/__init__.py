"""Diagnostic system for localematch errors.

Provides structured error diagnostics with codes, spans, and hints.
Inspired by Rust compiler diagnostics.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, SourceSpan
from .errors import LocaleMatchError, LocaleParseError
from .formatter import DiagnosticFormatter, OutputFormat

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "LocaleMatchError",
    "LocaleParseError",
    "OutputFormat",
    "SourceSpan",
]
