"""POSIX locale name decomposer.

Splits ``language[_territory][.codeset][@modifier]`` into its segments.
Each segment is free-form text up to its delimiter; nothing beyond a
non-empty language is validated, matching how C libraries treat the
LANG and LC_* variables.

Splitting order:
    1. modifier: everything after the first '@'
    2. codeset: in what precedes '@', everything after the first '.'
    3. territory: in what precedes '.', everything after the first '_'
    4. language: the rest

Empty optional segments ('ru_', 'fr_FR.@euro') count as absent.

Case folding touches ASCII letters only. Non-ASCII characters are kept
as written, so a KELVIN SIGN (U+212A) never folds into an ASCII 'k'.

Thread Safety:
    Pure functions with no shared state.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import string

from localematch.constants import (
    POSIX_CODESET_DELIMITER,
    POSIX_MODIFIER_DELIMITER,
    POSIX_TERRITORY_DELIMITER,
)
from localematch.diagnostics import DiagnosticCode
from localematch.enums import Grammar

from .tags import PosixTag
from .validation_helpers import parse_failure, require_locale_text

__all__ = ["parse_posix"]

_ASCII_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)
_ASCII_UPPER = str.maketrans(string.ascii_lowercase, string.ascii_uppercase)


def parse_posix(raw: str) -> PosixTag:
    """Decompose a POSIX locale name into canonically-cased segments.

    Args:
        raw: Locale name such as 'en_US.UTF-8' or 'sr_RS@latin'

    Returns:
        PosixTag whose ``source`` is ``raw`` itself

    Raises:
        LocaleParseError: If ``raw`` is empty or its language segment is empty

    Example:
        >>> tag = parse_posix("EN_us.utf-8@Euro")
        >>> tag.language, tag.territory, tag.codeset, tag.modifier
        ('en', 'US', 'UTF-8', 'euro')
    """
    text = require_locale_text(raw, Grammar.POSIX)

    head, _, modifier_text = text.partition(POSIX_MODIFIER_DELIMITER)
    head, _, codeset_text = head.partition(POSIX_CODESET_DELIMITER)
    language_text, _, territory_text = head.partition(POSIX_TERRITORY_DELIMITER)

    if not language_text:
        raise parse_failure(
            text,
            Grammar.POSIX,
            DiagnosticCode.MISSING_LANGUAGE,
            f"Locale name {text!r} has no language segment",
            span=(0, 0),
            hint="POSIX locale names start with the language: language[_territory][.codeset][@modifier]",
        )

    language = language_text.translate(_ASCII_LOWER)
    territory = territory_text.translate(_ASCII_UPPER) or None
    codeset = codeset_text.translate(_ASCII_UPPER) or None
    modifier = modifier_text.translate(_ASCII_LOWER) or None

    normalized = language
    if territory is not None:
        normalized += POSIX_TERRITORY_DELIMITER + territory
    if codeset is not None:
        normalized += POSIX_CODESET_DELIMITER + codeset
    if modifier is not None:
        normalized += POSIX_MODIFIER_DELIMITER + modifier

    return PosixTag(
        source=raw,
        normalized=normalized,
        language=language,
        territory=territory,
        codeset=codeset,
        modifier=modifier,
    )
