"""Locale negotiation: scoring and best-match selection.

Exports:
    best_matching_locale: Match under a grammar chosen at runtime
    best_matching_locale_bcp47: Match BCP 47 tags
    best_matching_locale_posix: Match POSIX locale names
    score, max_score, field_weights: Pairwise tag scoring
    MatchConfig, MalformedLocaleInfo: Matching options and callback payload

Python 3.13+.
"""

from .config import MalformedLocaleInfo, MatchConfig
from .matcher import best_matching_locale, best_matching_locale_bcp47, best_matching_locale_posix
from .scorer import SCORED_FIELD_KINDS, field_weights, max_score, score

__all__ = [
    "SCORED_FIELD_KINDS",
    "MalformedLocaleInfo",
    "MatchConfig",
    "best_matching_locale",
    "best_matching_locale_bcp47",
    "best_matching_locale_posix",
    "field_weights",
    "max_score",
    "score",
]
