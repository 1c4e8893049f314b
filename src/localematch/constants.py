"""Shared constants for localematch.

This module provides centralized grammar constants used across
the syntax and matching packages. Placing constants here avoids circular
imports and provides a single source of truth.

Constants are grouped by domain:
- BCP 47 grammar: subtag separator and length bounds (RFC 5646 section 2.1)
- POSIX grammar: segment delimiters (IEEE Std 1003.1, 8.2)

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # BCP 47 grammar
    "BCP47_SEPARATOR",
    "BCP47_MAX_SUBTAG_LENGTH",
    "BCP47_MAX_EXTLANG_COUNT",
    "BCP47_PRIVATE_USE_SINGLETON",
    # POSIX grammar
    "POSIX_TERRITORY_DELIMITER",
    "POSIX_CODESET_DELIMITER",
    "POSIX_MODIFIER_DELIMITER",
]

# ============================================================================
# BCP 47 GRAMMAR
# ============================================================================

BCP47_SEPARATOR: str = "-"

# Every BCP 47 subtag is 1 to 8 alphanumeric characters.
BCP47_MAX_SUBTAG_LENGTH: int = 8

# extlang = 3ALPHA *2("-" 3ALPHA)
BCP47_MAX_EXTLANG_COUNT: int = 3

# Singleton introducing the private use section; it consumes the rest of the tag.
BCP47_PRIVATE_USE_SINGLETON: str = "x"

# ============================================================================
# POSIX GRAMMAR
# ============================================================================

# language[_territory][.codeset][@modifier]
POSIX_TERRITORY_DELIMITER: str = "_"
POSIX_CODESET_DELIMITER: str = "."
POSIX_MODIFIER_DELIMITER: str = "@"
