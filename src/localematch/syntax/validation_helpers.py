"""Input checks and error construction shared by the grammar parsers.

Both parsers reject the same classes of unusable input before looking at
any grammar: non-strings and empty strings. Keeping
these checks here gives both grammars identical diagnostics for them.

Python 3.13+.
"""

from __future__ import annotations

from localematch.diagnostics import Diagnostic, DiagnosticCode, LocaleParseError, SourceSpan
from localematch.enums import Grammar

__all__ = [
    "parse_failure",
    "require_locale_text",
]


def parse_failure(
    raw: object,
    grammar: Grammar,
    code: DiagnosticCode,
    message: str,
    *,
    span: tuple[int, int] | None = None,
    subtag: str | None = None,
    hint: str | None = None,
) -> LocaleParseError:
    """Build a LocaleParseError carrying a structured diagnostic.

    The caller raises the returned exception, which keeps the ``raise``
    visible at the failure site.

    Args:
        raw: The value being parsed
        grammar: Grammar it was parsed against
        code: Diagnostic code
        message: Human-readable description
        span: (start, end) character offsets of the offending part
        subtag: Offending subtag or segment text
        hint: Suggested fix

    Returns:
        Exception ready to be raised
    """
    diagnostic = Diagnostic(
        code=code,
        message=message,
        span=SourceSpan(*span) if span is not None else None,
        hint=hint,
        subtag=subtag,
    )
    return LocaleParseError(diagnostic, input_value=raw, grammar=grammar)


def require_locale_text(raw: object, grammar: Grammar) -> str:
    """Check that a raw value can be parsed at all.

    Args:
        raw: Value supplied by the caller
        grammar: Grammar it will be parsed against

    Returns:
        The value, narrowed to str

    Raises:
        LocaleParseError: If the value is not a string or is empty
    """
    if not isinstance(raw, str):
        raise parse_failure(
            raw,
            grammar,
            DiagnosticCode.NOT_A_STRING,
            f"Locale must be a string, got {type(raw).__name__}",
        )
    if not raw:
        raise parse_failure(
            raw,
            grammar,
            DiagnosticCode.EMPTY_LOCALE,
            "Locale string is empty",
            hint="A locale needs at least a primary language, e.g. 'en'",
        )
    return raw
