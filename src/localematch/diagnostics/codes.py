"""Diagnostic codes and data structures.

Defines error codes, source spans, and diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "SourceSpan",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1099: Input errors (wrong type, empty)
        1100-1199: BCP 47 syntax errors
        1200-1299: POSIX syntax errors
    """

    # Input errors (1000-1099)
    NOT_A_STRING = 1001
    EMPTY_LOCALE = 1002

    # BCP 47 syntax errors (1100-1199)
    INVALID_CHARACTER = 1101
    EMPTY_SUBTAG = 1102
    SUBTAG_TOO_LONG = 1103
    INVALID_LANGUAGE = 1104
    UNRECOGNIZED_SUBTAG = 1105
    SUBTAG_OUT_OF_ORDER = 1106
    DANGLING_SINGLETON = 1107
    INVALID_EXTENSION = 1108

    # POSIX syntax errors (1200-1299)
    MISSING_LANGUAGE = 1201


@dataclass(frozen=True, slots=True)
class SourceSpan:
    """Location of the offending part of a locale string.

    Note:
        Python strings measure positions in characters (Unicode code points),
        not bytes.

    Attributes:
        start: Starting character offset (0-indexed)
        end: Ending character offset (exclusive)
    """

    start: int
    end: int

    def __post_init__(self) -> None:
        """Validate SourceSpan invariants.

        Raises:
            ValueError: If start is negative or end precedes start.
        """
        if self.start < 0:
            msg = f"SourceSpan.start must be >= 0, got {self.start}"
            raise ValueError(msg)
        if self.end < self.start:
            msg = f"SourceSpan.end ({self.end}) must be >= start ({self.start})"
            raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Inspired by Rust compiler diagnostics. Carries enough information for
    callers to report why a locale string was rejected.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        span: Offending characters within the input (None if whole input)
        hint: Suggestion for fixing the error
        subtag: The offending subtag or segment text, if any
    """

    code: DiagnosticCode
    message: str
    span: SourceSpan | None = None
    hint: str | None = None
    subtag: str | None = None

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like Rust compiler.

        Delegates to DiagnosticFormatter for consistent output with
        control-character escaping (log injection prevention).

        Example output:
            error[SUBTAG_TOO_LONG]: Subtag 'abcdefghij' exceeds 8 characters
              --> characters 3..13
              = help: BCP 47 subtags are 1 to 8 ASCII letters or digits

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
