"""Hypothesis strategies for localematch property-based testing.

- locales: BCP 47 tags, POSIX locale names, and malformed inputs

Usage:
    from tests.strategies import bcp47_tags, posix_names
"""

from .locales import (
    GeneratedBcp47,
    GeneratedPosix,
    any_locale_text,
    bcp47_tags,
    malformed_bcp47,
    malformed_posix,
    posix_names,
)

__all__ = [
    "GeneratedBcp47",
    "GeneratedPosix",
    "any_locale_text",
    "bcp47_tags",
    "malformed_bcp47",
    "malformed_posix",
    "posix_names",
]
