#!/usr/bin/env python3
# FUZZ_PLUGIN_HEADER_START
# FUZZ_PLUGIN: negotiator - Locale Parsing & Best-Match Selection
# FUZZ_PLUGIN_HEADER_END
"""Locale Negotiator Fuzzer (Atheris).

Targets: localematch.syntax parsers and localematch.matching selection.
Checks that arbitrary text either parses or raises LocaleParseError, that
normalization is idempotent, and that matching never raises on caller
data and only ever returns an element of ``available``.

Usage:
    python fuzz/fuzz_negotiator.py -max_total_time=60
"""

from __future__ import annotations

import atexit
import json
import logging
import sys

# --- PEP 695 Type Aliases ---
type FuzzStats = dict[str, int | str]

_fuzz_stats: FuzzStats = {"status": "incomplete", "iterations": 0, "findings": 0}


def _emit_final_report() -> None:
    report = json.dumps(_fuzz_stats)
    print(f"\n[SUMMARY-JSON-BEGIN]{report}[SUMMARY-JSON-END]", file=sys.stderr)


atexit.register(_emit_final_report)

try:
    import atheris
except ImportError:
    print("atheris is required: pip install 'localematch[fuzz]'", file=sys.stderr)
    sys.exit(1)

logging.getLogger("localematch").setLevel(logging.CRITICAL)

with atheris.instrument_imports(include=["localematch"]):
    from localematch import (
        Grammar,
        LocaleParseError,
        best_matching_locale,
        parse_locale,
        score,
    )


def _check_parse(raw: str, grammar: Grammar) -> None:
    try:
        tag = parse_locale(raw, grammar)
    except LocaleParseError:
        return
    # Idempotence
    again = parse_locale(tag.normalized, grammar)
    assert again.normalized == tag.normalized, (raw, tag.normalized, again.normalized)
    assert again.language == tag.language
    # A tag is always an exact match for itself
    assert score(tag, again) == score(tag, tag)


def test_one_input(data: bytes) -> None:
    """Atheris entry point: parse and match fuzzer-chosen locale lists."""
    _fuzz_stats["iterations"] = int(_fuzz_stats["iterations"]) + 1
    _fuzz_stats["status"] = "running"

    fdp = atheris.FuzzedDataProvider(data)
    grammar = Grammar.POSIX if fdp.ConsumeBool() else Grammar.BCP47

    try:
        # 1. Single-string parsing
        _check_parse(fdp.ConsumeUnicodeNoSurrogates(40), grammar)

        # 2. Matching never raises and returns a member of available
        available = [fdp.ConsumeUnicodeNoSurrogates(12) for _ in range(fdp.ConsumeIntInRange(0, 6))]
        user = [fdp.ConsumeUnicodeNoSurrogates(12) for _ in range(fdp.ConsumeIntInRange(0, 4))]
        result = best_matching_locale(available, user, grammar=grammar)
        assert result is None or any(result is entry for entry in available)

        # Identical lists always match when any entry parses
        if result is None and any(_parses(entry, grammar) for entry in available):
            assert best_matching_locale(available, available, grammar=grammar) is not None

    except Exception:
        _fuzz_stats["findings"] = int(_fuzz_stats["findings"]) + 1
        raise


def _parses(raw: str, grammar: Grammar) -> bool:
    try:
        parse_locale(raw, grammar)
    except LocaleParseError:
        return False
    return True


if __name__ == "__main__":
    atheris.Setup(sys.argv, test_one_input)
    atheris.Fuzz()
