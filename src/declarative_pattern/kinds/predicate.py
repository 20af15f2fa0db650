"""Predicate kind — any remaining callable is invoked with the value.

This is the lowest-priority built-in kind: classes are callable too but are
claimed earlier by the constructor kind.  Compiled matchers (including the
ones returned by the combinators) are used as they are.
"""

from __future__ import annotations

from typing import Any, Callable

from ..core import PatternCompiler, PatternKindRegistry, PatternMatcher, SpecDetector


class PredicateDetector(SpecDetector):

    def matches(self, spec: Any) -> bool:
        return callable(spec)


class PredicateMatcher(PatternMatcher):
    """``bool(fn(value))``; exceptions raised by *fn* propagate."""

    def __init__(self, fn: Callable[[Any], Any]) -> None:
        self._fn = fn

    def matches(self, value: Any) -> bool:
        return bool(self._fn(value))

    def __repr__(self) -> str:
        return f"PredicateMatcher({getattr(self._fn, '__name__', self._fn)!r})"


class PredicateCompiler(PatternCompiler):

    def compile(self, spec: Any, registry: PatternKindRegistry, depth: int) -> PatternMatcher:
        if isinstance(spec, PatternMatcher):
            return spec
        return PredicateMatcher(spec)
