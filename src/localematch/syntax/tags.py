"""Locale tag value types.

Two independent tag types, one per grammar, joined by the ``LocaleTag``
union alias. They share only the primary language field; every other
field belongs to exactly one grammar. ``FIELD_KINDS`` lists, per grammar,
which fields a tag of that grammar carries and in what order.

Tags are frozen and slotted: they are created by the parsers in
``localematch.syntax`` with every value already in canonical case, and
are never mutated afterwards.

Thread Safety:
    Tags are immutable values. Safe to share across threads.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from localematch.enums import FieldKind, Grammar

__all__ = [
    "FIELD_KINDS",
    "Bcp47Tag",
    "FieldValue",
    "LocaleTag",
    "PosixTag",
]

type FieldValue = str | tuple[str, ...]
"""Value of a tag field: text, or an ordered set of texts for variants."""

FIELD_KINDS: dict[Grammar, tuple[FieldKind, ...]] = {
    Grammar.BCP47: (
        FieldKind.LANGUAGE,
        FieldKind.EXTLANG,
        FieldKind.SCRIPT,
        FieldKind.REGION,
        FieldKind.VARIANTS,
        FieldKind.REMAINDER,
    ),
    Grammar.POSIX: (
        FieldKind.LANGUAGE,
        FieldKind.TERRITORY,
        FieldKind.CODESET,
        FieldKind.MODIFIER,
    ),
}


def _get_field(tag: LocaleTag, kind: FieldKind) -> FieldValue | None:
    if kind not in FIELD_KINDS[tag.grammar]:
        msg = f"{tag.grammar.name} tags have no {kind.value!r} field"
        raise ValueError(msg)
    value: FieldValue | None = getattr(tag, kind.value)
    # An empty variant set means "no variants", same as an absent field.
    return value or None


@dataclass(frozen=True, slots=True)
class Bcp47Tag:
    """Parsed BCP 47 language tag.

    Attributes:
        source: Raw string exactly as the caller supplied it
        normalized: Whole tag rebuilt from canonically-cased subtags
        language: Primary language, lowercase ('zh')
        extlang: First extended language subtag, lowercase ('cmn')
        script: Script subtag, titlecase ('Hans')
        region: Region subtag, uppercase ('SG', '419')
        variants: Variant subtags in order of first appearance, lowercase
        remainder: Extensions and private use, verbatim in lowercase
            ('u-ca-hebrew-x-private'); never decomposed

    Example:
        >>> tag = parse_bcp47("zh-cmn-Hans-SG")
        >>> tag.language, tag.extlang, tag.script, tag.region
        ('zh', 'cmn', 'Hans', 'SG')
    """

    grammar: ClassVar[Grammar] = Grammar.BCP47

    source: str
    normalized: str
    language: str
    extlang: str | None = None
    script: str | None = None
    region: str | None = None
    variants: tuple[str, ...] = ()
    remainder: str | None = None

    def get(self, kind: FieldKind) -> FieldValue | None:
        """Return the value of a field, or None when the tag omits it.

        Raises:
            ValueError: If ``kind`` is not a BCP 47 field kind
        """
        return _get_field(self, kind)

    def __str__(self) -> str:
        return self.normalized


@dataclass(frozen=True, slots=True)
class PosixTag:
    """Parsed POSIX locale name.

    Attributes:
        source: Raw string exactly as the caller supplied it
        normalized: Locale name rebuilt from canonically-cased segments
        language: Language segment, lowercase ('en')
        territory: Territory segment, uppercase ('US')
        codeset: Codeset segment, uppercase ('UTF-8')
        modifier: Modifier segment, lowercase ('euro')
    """

    grammar: ClassVar[Grammar] = Grammar.POSIX

    source: str
    normalized: str
    language: str
    territory: str | None = None
    codeset: str | None = None
    modifier: str | None = None

    def get(self, kind: FieldKind) -> FieldValue | None:
        """Return the value of a field, or None when the tag omits it.

        Raises:
            ValueError: If ``kind`` is not a POSIX field kind
        """
        return _get_field(self, kind)

    def __str__(self) -> str:
        return self.normalized


type LocaleTag = Bcp47Tag | PosixTag
"""A parsed locale tag of either grammar."""
