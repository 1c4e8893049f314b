"""localematch - Select the best available locale for a user's preferences.

Negotiates between the locales a program can serve and the locales a user
prefers, written either as BCP 47 language tags (en-US) or as POSIX locale
names (en_US.UTF-8). Preferences are tried in priority order; within one
preference, available locales sharing its primary language compete on how
many secondary fields (script, region, codeset, ...) they have in common.

Public API:
    best_matching_locale_bcp47 - Best match among BCP 47 tags
    best_matching_locale_posix - Best match among POSIX locale names
    best_matching_locale - Best match under a runtime-selected Grammar
    MatchConfig - Weighting, strict mode, malformed-entry callback
    parse_locale, parse_bcp47, parse_posix - Locale string parsers
    score - Pairwise compatibility score of two parsed tags

Exceptions:
    LocaleMatchError - Base exception class
    LocaleParseError - A locale string has no usable primary language

Submodules:
    localematch.syntax - Grammar parsers and tag value types
    localematch.matching - Scoring and selection
    localematch.diagnostics - Error codes, diagnostics, formatting
"""

import logging

from .diagnostics import LocaleMatchError, LocaleParseError
from .enums import FieldKind, Grammar, MatchRole, Weighting
from .matching import (
    MalformedLocaleInfo,
    MatchConfig,
    best_matching_locale,
    best_matching_locale_bcp47,
    best_matching_locale_posix,
    max_score,
    score,
)
from .syntax import Bcp47Tag, LocaleTag, PosixTag, parse_bcp47, parse_locale, parse_posix

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("localematch")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "Bcp47Tag",
    "FieldKind",
    "Grammar",
    "LocaleMatchError",
    "LocaleParseError",
    "LocaleTag",
    "MalformedLocaleInfo",
    "MatchConfig",
    "MatchRole",
    "PosixTag",
    "Weighting",
    "__version__",
    "best_matching_locale",
    "best_matching_locale_bcp47",
    "best_matching_locale_posix",
    "max_score",
    "parse_bcp47",
    "parse_locale",
    "parse_posix",
    "score",
]
