"""Field-wise compatibility scoring of two locale tags.

A candidate (an available locale) is scored against a query (a user
preference) of the same grammar:

1. Eligibility: the primary languages must be equal, otherwise the
   candidate is ineligible (``None``). Matching never crosses a
   language boundary.
2. Exact match: equal normalized tags score ``max_score()``, which beats
   any field-wise total. This also covers extension and private use data,
   which is never decomposed.
3. Otherwise each scored field adds its weight when both tags carry it
   with equal values. Absent fields on either side and differing values
   add nothing; there are no penalties.

Thread Safety:
    Pure functions over immutable tags.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from localematch.enums import FieldKind, Grammar, Weighting
from localematch.syntax import LocaleTag

__all__ = [
    "SCORED_FIELD_KINDS",
    "field_weights",
    "max_score",
    "score",
]

# Secondary fields that contribute to a score, most significant first.
# The primary language is the eligibility anchor and the BCP 47 remainder
# only takes part through the exact-match shortcut.
SCORED_FIELD_KINDS: dict[Grammar, tuple[FieldKind, ...]] = {
    Grammar.BCP47: (
        FieldKind.EXTLANG,
        FieldKind.SCRIPT,
        FieldKind.REGION,
        FieldKind.VARIANTS,
    ),
    Grammar.POSIX: (
        FieldKind.TERRITORY,
        FieldKind.CODESET,
        FieldKind.MODIFIER,
    ),
}


def field_weights(grammar: Grammar, weighting: Weighting = Weighting.FLAT) -> dict[FieldKind, int]:
    """Return the score contribution of each scored field kind.

    FLAT weighs every field 1. RANKED weighs fields by powers of two,
    most significant first, so that one matching field outweighs every
    less significant field combined (BCP 47: 8/4/2/1, POSIX: 4/2/1).

    Example:
        >>> field_weights(Grammar.POSIX, Weighting.RANKED)
        {<FieldKind.TERRITORY: 'territory'>: 4, <FieldKind.CODESET: 'codeset'>: 2, ...}
    """
    kinds = SCORED_FIELD_KINDS[grammar]
    match weighting:
        case Weighting.FLAT:
            return dict.fromkeys(kinds, 1)
        case Weighting.RANKED:
            return {kind: 1 << (len(kinds) - 1 - i) for i, kind in enumerate(kinds)}


def max_score(grammar: Grammar, weighting: Weighting = Weighting.FLAT) -> int:
    """Score given to an exact match; greater than any field-wise total."""
    return sum(field_weights(grammar, weighting).values()) + 1


def score(
    candidate: LocaleTag,
    query: LocaleTag,
    *,
    weighting: Weighting = Weighting.FLAT,
) -> int | None:
    """Score how well a candidate tag satisfies a query tag.

    Args:
        candidate: Parsed available locale
        query: Parsed user preference
        weighting: Field weighting scheme

    Returns:
        None if the candidate is ineligible (different primary language),
        otherwise a non-negative score; higher is better

    Raises:
        ValueError: If the tags were produced by different grammars

    Example:
        >>> score(parse_bcp47("zh-cmn-Hans"), parse_bcp47("zh-Hans"))
        1
        >>> score(parse_bcp47("en-US"), parse_bcp47("ru-RU")) is None
        True
    """
    if candidate.grammar is not query.grammar:
        msg = (
            f"Cannot compare a {candidate.grammar.name} tag with a "
            f"{query.grammar.name} tag"
        )
        raise ValueError(msg)

    if candidate.language != query.language:
        return None

    if candidate.normalized == query.normalized:
        return max_score(candidate.grammar, weighting)

    total = 0
    for kind, weight in field_weights(candidate.grammar, weighting).items():
        value = candidate.get(kind)
        if value is not None and value == query.get(kind):
            total += weight
    return total
