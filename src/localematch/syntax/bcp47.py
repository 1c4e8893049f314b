"""Minimal BCP 47 language tag decomposer.

Recognizes the subset of RFC 5646 that locale matching needs:

    langtag   = language ["-" extlang] ["-" script] ["-" region]
                *("-" variant) ["-" remainder]

    language  = 2*3ALPHA
    extlang   = 3ALPHA *2("-" 3ALPHA)      ; only the first is kept as a field
    script    = 4ALPHA
    region    = 2ALPHA / 3DIGIT
    variant   = 5*8alphanum / (DIGIT 3alphanum)
    remainder = extensions and private use, from the first singleton on

Subtags must appear in this order. Extensions and private use are checked
for shape (a singleton followed by at least one subtag) but are otherwise
kept as one opaque lowercase string.

Not supported: 4-8 letter primary languages, grandfathered tags such as
'i-klingon', and tags consisting only of private use ('x-whatever').
None of these carry a primary language this package can match on, so all
of them are parse errors.

Thread Safety:
    Pure functions with no shared state.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import re
from enum import IntEnum

from localematch.constants import (
    BCP47_MAX_EXTLANG_COUNT,
    BCP47_MAX_SUBTAG_LENGTH,
    BCP47_PRIVATE_USE_SINGLETON,
    BCP47_SEPARATOR,
)
from localematch.diagnostics import DiagnosticCode
from localematch.enums import Grammar

from .tags import Bcp47Tag
from .validation_helpers import parse_failure, require_locale_text

__all__ = ["parse_bcp47"]

# Subtag shapes, matched against lowercased subtags with fullmatch().
# [a-z] and [0-9] are ASCII-only, unlike str.isalpha()/str.isdigit().
_ALPHANUM_PATTERN: re.Pattern[str] = re.compile(r"[A-Za-z0-9]+")
_LANGUAGE_PATTERN: re.Pattern[str] = re.compile(r"[a-z]{2,3}")
_EXTLANG_PATTERN: re.Pattern[str] = re.compile(r"[a-z]{3}")
_SCRIPT_PATTERN: re.Pattern[str] = re.compile(r"[a-z]{4}")
_REGION_PATTERN: re.Pattern[str] = re.compile(r"[a-z]{2}|[0-9]{3}")
_VARIANT_PATTERN: re.Pattern[str] = re.compile(r"[a-z0-9]{5,8}|[0-9][a-z0-9]{3}")


class _Slot(IntEnum):
    """Position of a subtag kind in the tag; subtags must not go backwards."""

    EXTLANG = 0
    SCRIPT = 1
    REGION = 2
    VARIANT = 3


_SLOT_NAMES: dict[_Slot, str] = {
    _Slot.EXTLANG: "extended language",
    _Slot.SCRIPT: "script",
    _Slot.REGION: "region",
    _Slot.VARIANT: "variant",
}


def _classify(subtag: str) -> _Slot | None:
    """Return the slot a lowercased subtag's shape belongs to, if any."""
    if _EXTLANG_PATTERN.fullmatch(subtag):
        return _Slot.EXTLANG
    if _SCRIPT_PATTERN.fullmatch(subtag):
        return _Slot.SCRIPT
    if _REGION_PATTERN.fullmatch(subtag):
        return _Slot.REGION
    if _VARIANT_PATTERN.fullmatch(subtag):
        return _Slot.VARIANT
    return None


def _split_subtags(raw: str) -> tuple[list[str], list[int]]:
    """Split a tag into lowercased subtags and their start offsets.

    Raises:
        LocaleParseError: On empty, oversized, or non-alphanumeric subtags
    """
    subtags: list[str] = []
    offsets: list[int] = []
    position = 0
    for subtag in raw.split(BCP47_SEPARATOR):
        end = position + len(subtag)
        if not subtag:
            raise parse_failure(
                raw,
                Grammar.BCP47,
                DiagnosticCode.EMPTY_SUBTAG,
                f"Empty subtag in {raw!r}",
                span=(position, end),
                hint="Subtags are separated by exactly one '-'",
            )
        if not _ALPHANUM_PATTERN.fullmatch(subtag):
            raise parse_failure(
                raw,
                Grammar.BCP47,
                DiagnosticCode.INVALID_CHARACTER,
                f"Subtag {subtag!r} contains characters other than ASCII letters and digits",
                span=(position, end),
                subtag=subtag,
                hint="BCP 47 uses '-' as the only separator; POSIX names use '_'",
            )
        if len(subtag) > BCP47_MAX_SUBTAG_LENGTH:
            raise parse_failure(
                raw,
                Grammar.BCP47,
                DiagnosticCode.SUBTAG_TOO_LONG,
                f"Subtag {subtag!r} exceeds {BCP47_MAX_SUBTAG_LENGTH} characters",
                span=(position, end),
                subtag=subtag,
            )
        subtags.append(subtag.lower())
        offsets.append(position)
        position = end + len(BCP47_SEPARATOR)
    return subtags, offsets


def _check_remainder(raw: str, subtags: list[str], offsets: list[int], start: int) -> None:
    """Validate the extension and private use section starting at ``start``.

    Each extension is a singleton other than 'x' followed by one or more
    subtags of 2-8 characters; a singleton may appear only once. Private
    use ('x') is followed by one or more subtags of 1-8 characters and
    runs to the end of the tag.

    Raises:
        LocaleParseError: On a singleton with nothing after it, or a
            repeated singleton
    """
    seen: set[str] = set()
    index = start
    while index < len(subtags):
        singleton = subtags[index]
        span = (offsets[index], offsets[index] + 1)
        if singleton in seen:
            raise parse_failure(
                raw,
                Grammar.BCP47,
                DiagnosticCode.INVALID_EXTENSION,
                f"Extension singleton {singleton!r} appears more than once",
                span=span,
                subtag=singleton,
            )
        seen.add(singleton)

        if singleton == BCP47_PRIVATE_USE_SINGLETON:
            following = len(subtags) - index - 1
        else:
            following = 0
            while index + following + 1 < len(subtags) and len(subtags[index + following + 1]) > 1:
                following += 1

        if following == 0:
            raise parse_failure(
                raw,
                Grammar.BCP47,
                DiagnosticCode.DANGLING_SINGLETON,
                f"Singleton {singleton!r} is not followed by any subtag",
                span=span,
                subtag=singleton,
            )
        index += following + 1


def parse_bcp47(raw: str) -> Bcp47Tag:
    """Decompose a BCP 47 language tag into typed, canonically-cased fields.

    Args:
        raw: Tag such as 'en-US', 'zh-cmn-Hans-SG', 'de-DE-1901',
            'he-IL-u-ca-hebrew'. Matching is case-insensitive.

    Returns:
        Bcp47Tag whose ``source`` is ``raw`` itself

    Raises:
        LocaleParseError: If ``raw`` does not decompose into at least a
            primary language under the grammar above

    Example:
        >>> tag = parse_bcp47("ZH-cmn-hans-sg")
        >>> tag.normalized
        'zh-cmn-Hans-SG'
        >>> tag.script
        'Hans'
    """
    text = require_locale_text(raw, Grammar.BCP47)
    subtags, offsets = _split_subtags(text)

    language = subtags[0]
    if not _LANGUAGE_PATTERN.fullmatch(language):
        raise parse_failure(
            text,
            Grammar.BCP47,
            DiagnosticCode.INVALID_LANGUAGE,
            f"Expected a 2-3 letter primary language, got {language!r}",
            span=(0, len(language)),
            subtag=language,
        )

    canonical = [language]
    extlang: str | None = None
    extlang_count = 0
    script: str | None = None
    region: str | None = None
    variants: dict[str, None] = {}
    remainder: str | None = None
    expected = _Slot.EXTLANG

    for index in range(1, len(subtags)):
        subtag = subtags[index]
        span = (offsets[index], offsets[index] + len(subtag))

        if len(subtag) == 1:
            _check_remainder(text, subtags, offsets, index)
            remainder = BCP47_SEPARATOR.join(subtags[index:])
            canonical.append(remainder)
            break

        slot = _classify(subtag)
        if slot is None:
            raise parse_failure(
                text,
                Grammar.BCP47,
                DiagnosticCode.UNRECOGNIZED_SUBTAG,
                f"Subtag {subtag!r} is not a valid extended language, script, "
                "region, variant, or singleton",
                span=span,
                subtag=subtag,
            )
        if slot < expected:
            raise parse_failure(
                text,
                Grammar.BCP47,
                DiagnosticCode.SUBTAG_OUT_OF_ORDER,
                f"This {_SLOT_NAMES[slot]} subtag, {subtag!r}, is out of place",
                span=span,
                subtag=subtag,
                hint="Order is language-extlang-script-region-variant-extension",
            )

        match slot:
            case _Slot.EXTLANG:
                extlang_count += 1
                if extlang is None:
                    extlang = subtag
                if extlang_count == BCP47_MAX_EXTLANG_COUNT:
                    expected = _Slot.SCRIPT
                canonical.append(subtag)
            case _Slot.SCRIPT:
                script = subtag.title()
                expected = _Slot.REGION
                canonical.append(script)
            case _Slot.REGION:
                region = subtag.upper()
                expected = _Slot.VARIANT
                canonical.append(region)
            case _Slot.VARIANT:
                # dict.fromkeys semantics: ordered set, first occurrence wins
                variants.setdefault(subtag, None)
                canonical.append(subtag)

    return Bcp47Tag(
        source=raw,
        normalized=BCP47_SEPARATOR.join(canonical),
        language=language,
        extlang=extlang,
        script=script,
        region=region,
        variants=tuple(variants),
        remainder=remainder,
    )
