"""Matching configuration.

Provides a single frozen dataclass that encapsulates every knob of a
matching call, plus the record handed to the malformed-entry callback.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from localematch.diagnostics import LocaleParseError
from localematch.enums import MatchRole, Weighting

__all__ = ["MalformedLocaleInfo", "MatchConfig"]


@dataclass(frozen=True, slots=True)
class MalformedLocaleInfo:
    """Information about a locale string excluded from matching.

    Provided to the on_malformed callback each time an entry of
    ``available`` or ``user`` fails to parse.

    Attributes:
        value: The raw entry as supplied by the caller
        role: Which sequence the entry came from
        index: Position of the entry within that sequence
        error: The parse error describing why it was excluded

    Example:
        >>> def report(info: MalformedLocaleInfo) -> None:
        ...     print(f"{info.role}[{info.index}] ignored: {info.error}")
        >>> config = MatchConfig(on_malformed=report)
    """

    value: object
    role: MatchRole
    index: int
    error: LocaleParseError


@dataclass(frozen=True, slots=True)
class MatchConfig:
    """Immutable configuration for a matching call.

    All fields have sensible defaults; ``MatchConfig()`` reproduces the
    default behavior of the matching functions.

    Attributes:
        weighting: How much each matching secondary field is worth
            (default: FLAT, one point per field).
        strict: Raise LocaleParseError on the first malformed entry instead
            of excluding it (default: False). With the default, matching
            never raises on caller data.
        on_malformed: Optional callback invoked for each excluded entry.
            Lets callers surface diagnostics without failing the call.
            Not invoked in strict mode, where the error propagates instead.

    Example:
        >>> config = MatchConfig(weighting=Weighting.RANKED)
        >>> best_matching_locale_posix(
        ...     ["ru.UTF-8@dict", "ru_UA"], ["ru_UA.UTF-8@dict"], config=config
        ... )
        'ru_UA'
    """

    weighting: Weighting = Weighting.FLAT
    strict: bool = False
    on_malformed: Callable[[MalformedLocaleInfo], None] | None = None

    def __post_init__(self) -> None:
        """Validate configuration field types.

        Raises:
            TypeError: If a field has the wrong type
        """
        if not isinstance(self.weighting, Weighting):
            msg = f"weighting must be a Weighting, got {type(self.weighting).__name__}"
            raise TypeError(msg)
        if not isinstance(self.strict, bool):
            msg = f"strict must be a bool, got {type(self.strict).__name__}"
            raise TypeError(msg)
        if self.on_malformed is not None and not callable(self.on_malformed):
            msg = "on_malformed must be callable or None"
            raise TypeError(msg)
