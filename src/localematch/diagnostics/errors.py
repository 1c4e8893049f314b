"""localematch exception hierarchy with structured diagnostics.

All exceptions can carry a Diagnostic object for rich error information.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .codes import Diagnostic

if TYPE_CHECKING:
    from localematch.enums import Grammar

__all__ = [
    "LocaleMatchError",
    "LocaleParseError",
]


class LocaleMatchError(ValueError):
    """Base exception for all localematch errors.

    Subclasses ValueError so callers that already guard locale handling
    with ``except ValueError`` keep working.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize LocaleMatchError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class LocaleParseError(LocaleMatchError):
    """A locale string could not be decomposed into at least a primary language.

    Matching treats this error as local to one entry: the entry is
    excluded and matching continues, unless the caller asked for strict
    mode.

    Attributes:
        input_value: The raw value that failed to parse
        grammar: Grammar the value was parsed against

    Example:
        >>> try:
        ...     parse_bcp47("ru--")
        ... except LocaleParseError as e:
        ...     print(e.diagnostic.code.name)
        EMPTY_SUBTAG
    """

    def __init__(
        self,
        message: str | Diagnostic,
        *,
        input_value: object = "",
        grammar: Grammar | None = None,
    ) -> None:
        """Initialize LocaleParseError.

        Args:
            message: Error message string OR Diagnostic object
            input_value: The raw value that failed to parse
            grammar: Grammar the value was parsed against
        """
        super().__init__(message)
        self.input_value = input_value
        self.grammar = grammar
