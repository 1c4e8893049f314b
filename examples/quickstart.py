"""localematch Quick Start - Picking a Locale for a User.

Demonstrates choosing which of an application's locales to serve, given
a user's ranked preferences.

Scenarios covered:
1. HTTP Accept-Language style BCP 47 negotiation
2. POSIX locale names from the environment (LANG, LANGUAGE)
3. Weighting and diagnostics for rejected entries
4. Inspecting parsed tags and scores

Python 3.13+.
"""

from __future__ import annotations

import logging

from localematch import (
    Grammar,
    MalformedLocaleInfo,
    MatchConfig,
    Weighting,
    best_matching_locale_bcp47,
    best_matching_locale_posix,
    max_score,
    parse_bcp47,
    score,
)


def example_1_bcp47() -> None:
    """Example 1: Region fallback within a language."""
    print("=" * 60)
    print("Example 1: BCP 47 negotiation")
    print("=" * 60)

    available = ["en-US", "en-GB", "ru-UA", "fr-FR", "it"]
    user = ["ru-RU", "ru", "en-US", "en"]

    # No 'ru-RU' is available, but 'ru-UA' shares the language
    print(f"available: {available}")
    print(f"user:      {user}")
    print(f"selected:  {best_matching_locale_bcp47(available, user)}")

    # A shared script outranks a bare language
    print(best_matching_locale_bcp47(["zh", "zh-cmn", "zh-cmn-Hans"], ["zh-Hans"]))


def example_2_posix() -> None:
    """Example 2: POSIX names such as LANG=fr_CA.UTF-8."""
    print("\n" + "=" * 60)
    print("Example 2: POSIX negotiation")
    print("=" * 60)

    # LANGUAGE is a colon-separated priority list in glibc
    language_env = "ru_RU:ru:en_US:en"
    available = ["en_US", "en_GB", "ru_UA", "fr_FR", "it"]
    print(best_matching_locale_posix(available, language_env.split(":")))

    # Codeset agreement counts when the territory is unspecified
    print(best_matching_locale_posix(["fr", "fr_FR", "fr_CA.UTF-8"], ["fr.UTF-8"]))


def example_3_config() -> None:
    """Example 3: Weighting and malformed-entry reporting."""
    print("\n" + "=" * 60)
    print("Example 3: MatchConfig")
    print("=" * 60)

    available = ["en_US", "ru.UTF-8@dict", "ru_UA"]
    user = ["ru_UA.UTF-8@dict", "en"]

    # FLAT: codeset + modifier (2) beat territory (1)
    print(best_matching_locale_posix(available, user))
    # RANKED: territory outweighs everything after it
    ranked = MatchConfig(weighting=Weighting.RANKED)
    print(best_matching_locale_posix(available, user, config=ranked))

    def report(info: MalformedLocaleInfo) -> None:
        print(f"  ignored {info.role}[{info.index}] {info.value!r}: {info.error.diagnostic}")

    reporting = MatchConfig(on_malformed=report)
    result = best_matching_locale_bcp47(["en_US", "ru--", "en-GB"], ["en-US", ""], config=reporting)
    print(f"selected: {result}")


def example_4_inspection() -> None:
    """Example 4: Parsed tags and raw scores."""
    print("\n" + "=" * 60)
    print("Example 4: Tags and scores")
    print("=" * 60)

    tag = parse_bcp47("zH-cMn-hANS-Sg-u-ca-CHINESE")
    print(f"normalized: {tag}")
    print(f"fields:     {tag.language=} {tag.extlang=} {tag.script=} {tag.region=}")
    print(f"remainder:  {tag.remainder}")

    query = parse_bcp47("zh-Hans")
    print(f"score vs zh-Hans: {score(tag, query)} (exact would be {max_score(Grammar.BCP47)})")


if __name__ == "__main__":
    logging.basicConfig(level=logging.DEBUG, format="%(name)s %(levelname)s %(message)s")

    example_1_bcp47()
    example_2_posix()
    example_3_config()
    example_4_inspection()

    print("\n" + "=" * 60)
    print("[SUCCESS] All examples complete!")
    print("=" * 60)
