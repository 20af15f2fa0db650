"""Shared PatternMatcher implementations.

Only matchers that are genuinely reusable across multiple kinds and
combinators live here.  Matchers that belong to a single kind (e.g.
``LiteralMatcher``) are co-located with that kind in the ``kinds``
sub-package.

Exports
-------
AlwaysMatcher
    Unconditional match — catch-all.

AnyOfMatcher / AllOfMatcher / NotMatcher
    Boolean composition over already compiled matchers.
"""

from __future__ import annotations

from typing import Any, Iterable

from .core import PatternMatcher


class AlwaysMatcher(PatternMatcher):
    """Unconditional match.

    ::

        AlwaysMatcher().matches(anything)   # True
    """

    def matches(self, value: Any) -> bool:
        return True

    def __call__(self, *_args: Any) -> bool:
        return True

    def __repr__(self) -> str:
        return "AlwaysMatcher()"


class AnyOfMatcher(PatternMatcher):
    """Holds if any inner matcher holds (short-circuits left to right)."""

    def __init__(self, matchers: Iterable[PatternMatcher]) -> None:
        self._matchers = tuple(matchers)

    def matches(self, value: Any) -> bool:
        return any(m.matches(value) for m in self._matchers)

    def __repr__(self) -> str:
        return f"AnyOfMatcher({list(self._matchers)!r})"


class AllOfMatcher(PatternMatcher):
    """Holds if every inner matcher holds; vacuously true when empty."""

    def __init__(self, matchers: Iterable[PatternMatcher]) -> None:
        self._matchers = tuple(matchers)

    def matches(self, value: Any) -> bool:
        return all(m.matches(value) for m in self._matchers)

    def __repr__(self) -> str:
        return f"AllOfMatcher({list(self._matchers)!r})"


class NotMatcher(PatternMatcher):

    def __init__(self, inner: PatternMatcher) -> None:
        self._inner = inner

    def matches(self, value: Any) -> bool:
        return not self._inner.matches(value)

    def __repr__(self) -> str:
        return f"NotMatcher({self._inner!r})"
