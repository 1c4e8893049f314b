"""Best-match selection over ranked user preferences.

Implements lookup-style negotiation: user preferences are tried in
priority order, and the first preference with at least one eligible
available locale decides the result. Within one preference the highest
scoring available locale wins; among equal scores the one listed first
in ``available`` wins.

Malformed entries on either side are excluded from consideration. Per
MatchConfig they can also be reported through a callback, or turned into
a LocaleParseError (strict mode).

Thread Safety:
    No shared state; every call works on its own parsed copies.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator

from localematch.diagnostics import LocaleParseError
from localematch.enums import Grammar, MatchRole
from localematch.syntax import LocaleTag, parse_locale

from .config import MalformedLocaleInfo, MatchConfig
from .scorer import score

__all__ = [
    "best_matching_locale",
    "best_matching_locale_bcp47",
    "best_matching_locale_posix",
]

logger = logging.getLogger(__name__)

_DEFAULT_CONFIG = MatchConfig()


def _parse_entries[T: str](
    entries: Iterable[T],
    role: MatchRole,
    grammar: Grammar,
    config: MatchConfig,
) -> Iterator[tuple[T, LocaleTag]]:
    """Yield (raw, tag) for every entry that parses; report the others."""
    for index, raw in enumerate(entries):
        try:
            tag = parse_locale(raw, grammar)
        except LocaleParseError as e:
            if config.strict:
                raise
            logger.debug("Ignoring malformed %s locale %r at index %d: %s", role, raw, index, e)
            if config.on_malformed is not None:
                config.on_malformed(
                    MalformedLocaleInfo(value=raw, role=role, index=index, error=e)
                )
            continue
        yield raw, tag


def best_matching_locale[T: str](
    available: Iterable[T],
    user: Iterable[str],
    *,
    grammar: Grammar = Grammar.BCP47,
    config: MatchConfig | None = None,
) -> T | None:
    """Select the available locale that best satisfies the user's preferences.

    For each user preference in order, every available locale sharing its
    primary language is scored (see ``localematch.matching.scorer``). The
    first preference with any such candidate decides: its best-scoring
    candidate is returned, the earliest one on ties. Preferences with no
    candidate are skipped.

    Args:
        available: Locales the caller can serve, in caller-chosen order
            (order only breaks ties). Any iterable; consumed once.
        user: User preferences, most preferred first. Any iterable;
            consumed lazily, stopping at the first preference that matches.
        grammar: Grammar both sequences are written in
        config: Matching options (default: ``MatchConfig()``)

    Returns:
        The winning element of ``available`` itself (not a copy or a
        normalized form), or None if no preference shares a primary
        language with any available locale.

    Raises:
        LocaleParseError: Only when ``config.strict`` is set and an entry
            is malformed

    Example:
        >>> best_matching_locale(
        ...     ["en-US", "en-GB", "ru-UA", "fr-FR", "it"],
        ...     ["ru-RU", "ru", "en-US", "en"],
        ... )
        'ru-UA'
    """
    config = config if config is not None else _DEFAULT_CONFIG

    # Parsed once up front: every preference is scored against the same candidates.
    candidates = list(_parse_entries(available, MatchRole.AVAILABLE, grammar, config))

    for user_raw, query in _parse_entries(user, MatchRole.USER, grammar, config):
        best: T | None = None
        best_score = -1
        for available_raw, candidate in candidates:
            result = score(candidate, query, weighting=config.weighting)
            if result is not None and result > best_score:
                best = available_raw
                best_score = result
        if best is not None:
            logger.debug(
                "Selected %r for preference %r (score %d)", best, user_raw, best_score
            )
            return best
        logger.debug("No available locale for preference %r", user_raw)

    return None


def best_matching_locale_bcp47[T: str](
    available: Iterable[T],
    user: Iterable[str],
    *,
    config: MatchConfig | None = None,
) -> T | None:
    """Select the best available BCP 47 tag for the user's preferences.

    Example:
        >>> best_matching_locale_bcp47(["zh", "zh-cmn", "zh-cmn-Hans"], ["zh-Hans"])
        'zh-cmn-Hans'
    """
    return best_matching_locale(available, user, grammar=Grammar.BCP47, config=config)


def best_matching_locale_posix[T: str](
    available: Iterable[T],
    user: Iterable[str],
    *,
    config: MatchConfig | None = None,
) -> T | None:
    """Select the best available POSIX locale name for the user's preferences.

    Example:
        >>> best_matching_locale_posix(["fr", "fr_FR", "fr_CA.UTF-8"], ["fr.UTF-8"])
        'fr_CA.UTF-8'
    """
    return best_matching_locale(available, user, grammar=Grammar.POSIX, config=config)
