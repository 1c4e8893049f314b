"""Enumerations for localematch type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.13+.
"""

from enum import StrEnum


class Grammar(StrEnum):
    """Textual grammar a locale identifier is written in.

    StrEnum provides automatic string conversion: str(Grammar.BCP47) == "bcp47"
    """

    BCP47 = "bcp47"
    """IETF language tag: en-US, zh-cmn-Hans-SG, de-DE-1901"""

    POSIX = "posix"
    """POSIX locale name: en_US.UTF-8, sr_RS@latin"""


class FieldKind(StrEnum):
    """Kind of a named field inside a parsed locale tag.

    LANGUAGE is shared by both grammars. Every other kind belongs to
    exactly one grammar. Member values double as the attribute names of
    the corresponding tag dataclasses.
    """

    LANGUAGE = "language"
    """Primary language: 'en' in en-US and en_US.UTF-8"""

    # BCP 47
    EXTLANG = "extlang"
    """Extended language: 'cmn' in zh-cmn-Hans"""

    SCRIPT = "script"
    """Script: 'Hans' in zh-Hans-CN"""

    REGION = "region"
    """Region: 'US' in en-US, '419' in es-419"""

    VARIANTS = "variants"
    """Variants: ('1901',) in de-DE-1901"""

    REMAINDER = "remainder"
    """Opaque extensions and private use: 'u-ca-hebrew' in he-IL-u-ca-hebrew"""

    # POSIX
    TERRITORY = "territory"
    """Territory: 'US' in en_US.UTF-8"""

    CODESET = "codeset"
    """Codeset: 'UTF-8' in en_US.UTF-8"""

    MODIFIER = "modifier"
    """Modifier: 'euro' in fr_FR@euro"""


class Weighting(StrEnum):
    """How much a matching secondary field contributes to a score.

    StrEnum provides automatic string conversion: str(Weighting.FLAT) == "flat"
    """

    FLAT = "flat"
    """Every matching field adds 1; all fields are equally significant."""

    RANKED = "ranked"
    """Earlier fields outweigh all later fields combined (8/4/2/1 for BCP 47)."""


class MatchRole(StrEnum):
    """Which input sequence a raw locale string came from."""

    AVAILABLE = "available"
    """Locale the caller can serve."""

    USER = "user"
    """Locale the user asked for."""


__all__ = [
    "FieldKind",
    "Grammar",
    "MatchRole",
    "Weighting",
]
