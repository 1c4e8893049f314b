"""Locale string parsing.

Converts raw locale strings into typed, immutable tags, one parser per
grammar. Parsers normalize case once so that tags compare with plain
equality afterwards.

Exports:
    parse_locale: Parse against a grammar chosen at runtime
    parse_bcp47: Parse a BCP 47 language tag
    parse_posix: Parse a POSIX locale name
    Bcp47Tag, PosixTag, LocaleTag: Tag value types
    FIELD_KINDS: Field kinds carried by each grammar's tags

Python 3.13+.
"""

from __future__ import annotations

from localematch.enums import Grammar

from .bcp47 import parse_bcp47
from .posix import parse_posix
from .tags import FIELD_KINDS, Bcp47Tag, FieldValue, LocaleTag, PosixTag

__all__ = [
    "FIELD_KINDS",
    "Bcp47Tag",
    "FieldValue",
    "LocaleTag",
    "PosixTag",
    "parse_bcp47",
    "parse_locale",
    "parse_posix",
]


def parse_locale(raw: str, grammar: Grammar) -> LocaleTag:
    """Parse a raw locale string against the given grammar.

    Args:
        raw: Locale string supplied by the caller
        grammar: Grammar to parse against

    Returns:
        Bcp47Tag or PosixTag, depending on ``grammar``

    Raises:
        LocaleParseError: If ``raw`` has no usable primary language
    """
    match grammar:
        case Grammar.BCP47:
            return parse_bcp47(raw)
        case Grammar.POSIX:
            return parse_posix(raw)
        case _:
            msg = f"Unknown grammar: {grammar!r}"
            raise ValueError(msg)
