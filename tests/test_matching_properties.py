"""Property-based tests for best-match selection.

Python 3.13+.
"""

from __future__ import annotations

import pytest
from hypothesis import event, given, settings
from hypothesis import strategies as st

from localematch import (
    Grammar,
    best_matching_locale,
    best_matching_locale_bcp47,
    best_matching_locale_posix,
    parse_bcp47,
    parse_posix,
)
from tests.strategies import (
    GeneratedBcp47,
    GeneratedPosix,
    any_locale_text,
    bcp47_tags,
    malformed_bcp47,
    posix_names,
)

_bcp47_lists = st.lists(bcp47_tags().map(lambda generated: generated.raw), max_size=6)


def _language(raw: str) -> str:
    return parse_bcp47(raw).language


class TestSelectionProperties:
    """Invariants that hold for every input."""

    @given(available=st.lists(any_locale_text, max_size=8), user=st.lists(any_locale_text, max_size=5))
    def test_never_raises_and_returns_member(self, available: list[str], user: list[str]) -> None:
        """Arbitrary input yields None or one of the caller's own elements."""
        for grammar in Grammar:
            result = best_matching_locale(available, user, grammar=grammar)
            event(f"matched={result is not None}")
            assert result is None or any(result is entry for entry in available)

    @given(available=_bcp47_lists, user=_bcp47_lists)
    def test_deterministic(self, available: list[str], user: list[str]) -> None:
        """Same input, same output."""
        first = best_matching_locale_bcp47(available, user)
        assert best_matching_locale_bcp47(available, user) is first

    @given(available=_bcp47_lists, user=_bcp47_lists)
    def test_result_shares_a_user_language(self, available: list[str], user: list[str]) -> None:
        """The winner always has the language of some preference."""
        result = best_matching_locale_bcp47(available, user)
        if result is not None:
            assert _language(result) in {_language(u) for u in user}

    @given(available=_bcp47_lists, user=_bcp47_lists)
    def test_none_only_without_shared_language(self, available: list[str], user: list[str]) -> None:
        """No match means no available tag shares a preferred language."""
        result = best_matching_locale_bcp47(available, user)
        shared = {_language(a) for a in available} & {_language(u) for u in user}
        assert (result is None) == (not shared)

    @given(available=_bcp47_lists, user=_bcp47_lists)
    def test_first_satisfiable_preference_decides(self, available: list[str], user: list[str]) -> None:
        """A lower-priority preference never beats a satisfiable higher one."""
        result = best_matching_locale_bcp47(available, user)
        languages = {_language(a) for a in available}
        decisive = next((u for u in user if _language(u) in languages), None)
        if decisive is None:
            assert result is None
        else:
            assert result is not None
            assert _language(result) == _language(decisive)

    @given(tags=_bcp47_lists.filter(bool))
    def test_identical_lists_pick_first(self, tags: list[str]) -> None:
        """Matching a list against itself returns its first element."""
        assert best_matching_locale_bcp47(tags, tags) is tags[0]

    @given(generated=bcp47_tags())
    def test_ties_go_to_first_listed(self, generated: GeneratedBcp47) -> None:
        """Two spellings of the same tag tie; the earlier one wins."""
        first = generated.raw.lower()
        second = generated.raw.upper()
        assert best_matching_locale_bcp47([first, second], [generated.raw]) is first

    @given(
        available=_bcp47_lists,
        user=_bcp47_lists,
        garbage=st.lists(malformed_bcp47, max_size=4),
        data=st.data(),
    )
    def test_malformed_entries_do_not_change_result(
        self, available: list[str], user: list[str], garbage: list[str], data: st.DataObject
    ) -> None:
        """Inserting unparsable strings anywhere leaves the outcome unchanged."""
        expected = best_matching_locale_bcp47(available, user)

        littered = list(available)
        for junk in garbage:
            littered.insert(data.draw(st.integers(0, len(littered))), junk)
        littered_user = [*garbage, *user]

        assert best_matching_locale_bcp47(littered, littered_user) == expected


class TestPosixSelectionProperties:
    """POSIX-specific selection invariants."""

    @given(names=st.lists(posix_names(), min_size=1, max_size=6))
    def test_identical_lists_pick_first(self, names: list[GeneratedPosix]) -> None:
        """Matching a list against itself returns its first element."""
        raws = [name.raw for name in names]
        assert best_matching_locale_posix(raws, raws) is raws[0]

    @given(names=st.lists(posix_names(), max_size=6), preference=posix_names())
    def test_result_has_preferred_language(
        self, names: list[GeneratedPosix], preference: GeneratedPosix
    ) -> None:
        """A single preference only ever selects its own language."""
        raws = [name.raw for name in names]
        result = best_matching_locale_posix(raws, [preference.raw])
        if result is not None:
            assert parse_posix(result).language == preference.language


@pytest.mark.fuzz
class TestSelectionFuzz:
    """Long-running sweeps over arbitrary text (run with: pytest -m fuzz)."""

    @settings(max_examples=20000, deadline=None)
    @given(
        available=st.lists(st.one_of(any_locale_text, malformed_bcp47), max_size=20),
        user=st.lists(st.one_of(any_locale_text, malformed_bcp47), max_size=10),
    )
    def test_arbitrary_lists(self, available: list[str], user: list[str]) -> None:
        """No input list makes matching raise or invent a result."""
        for grammar in Grammar:
            result = best_matching_locale(available, user, grammar=grammar)
            assert result is None or any(result is entry for entry in available)
