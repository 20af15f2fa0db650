"""Predicate combinators: ranges, comparisons, presence and boolean composition.

Every combinator yields a plain predicate (``value → bool``).  They can be
called directly or passed to ``Pattern.when``, where they are classified as
the ``predicate`` kind::

    pattern().when(in_range(0, 9), "digit").when(either(none, str), "blank")

Presence
    ``wildcard`` (alias ``_``), ``some``, ``none``

Composition (specs compiled through a registry)
    ``either``, ``all_of``, ``negate``, ``query``

Comparison
    ``in_range``, ``lt``, ``lte``, ``gt``, ``gte``

Explicit object patterns
    ``instance_of``, ``equal_to``

Results
    ``constant`` — return a callable verbatim instead of invoking it.
"""

from __future__ import annotations

import operator
from typing import Any, Callable, Optional

import jmespath

from .core import Constant, PatternKindRegistry, PatternMatcher, is_absent
from .factory import get_default_registry
from .kinds.classes import InstanceMatcher
from .matchers import AllOfMatcher, AlwaysMatcher, AnyOfMatcher, NotMatcher


def _registry(registry: Optional[PatternKindRegistry]) -> PatternKindRegistry:
    return registry if registry is not None else get_default_registry()


# ─────────────────────────────────────────────────────────────────────────────
# Presence
# ─────────────────────────────────────────────────────────────────────────────


#: Always ``True``; callable with any number of arguments, including none.
wildcard = AlwaysMatcher()
_ = wildcard


def some(value: Any) -> bool:
    """``True`` unless *value* is ``None`` or ``UNDEFINED``.

    Falsy values are present: ``some(0)``, ``some("")``, ``some(False)`` are
    all ``True``.
    """
    return not is_absent(value)


def none(value: Any) -> bool:
    """``True`` for ``None`` and ``UNDEFINED`` only."""
    return is_absent(value)


# ─────────────────────────────────────────────────────────────────────────────
# Composition
# ─────────────────────────────────────────────────────────────────────────────


def either(*specs: Any, registry: Optional[PatternKindRegistry] = None) -> PatternMatcher:
    """Union of patterns of any kind.

    Examples::

        either(5, 6)(5)                          → True
        either([], {})({})                       → True
        either(none, str, Category.NUMBER)({})   → False
    """
    reg = _registry(registry)
    return AnyOfMatcher(reg.compile(spec) for spec in specs)


def all_of(*specs: Any, registry: Optional[PatternKindRegistry] = None) -> PatternMatcher:
    """Intersection of patterns, e.g. ``all_of(int, gt(0))``."""
    reg = _registry(registry)
    return AllOfMatcher(reg.compile(spec) for spec in specs)


def negate(spec: Any, *, registry: Optional[PatternKindRegistry] = None) -> PatternMatcher:
    """Complement of a pattern, e.g. ``negate(none)``."""
    return NotMatcher(_registry(registry).compile(spec))


class QueryMatcher(PatternMatcher):
    """Evaluate a JMESPath expression on the value, match the result.

    JMESPath yields ``None`` both for a missing path and an explicit
    ``null``; ``query("a", None)`` therefore holds for either.
    """

    def __init__(
            self,
            expression: str,
            inner: PatternMatcher,
            options: Optional[jmespath.Options] = None,
    ) -> None:
        self._source = expression
        self._expression = jmespath.compile(expression)
        self._inner = inner
        self._options = options

    def matches(self, value: Any) -> bool:
        return self._inner.matches(self._expression.search(value, options=self._options))

    def __repr__(self) -> str:
        return f"QueryMatcher({self._source!r}, {self._inner!r})"


def query(
        expression: str,
        spec: Any,
        *,
        options: Optional[jmespath.Options] = None,
        registry: Optional[PatternKindRegistry] = None,
) -> PatternMatcher:
    """Match a JMESPath projection of the value against *spec*.

    Examples::

        query("user.age", gte(18))({"user": {"age": 30}})      → True
        query("items[*].id", [1, 2])({"items": [{"id": 1}, {"id": 2}]})  → True
        query("length(tags)", gt(2))({"tags": ["a"]})           → False

    The expression is compiled immediately; a syntax error raises
    ``jmespath.exceptions.ParseError`` at construction time.
    """
    return QueryMatcher(expression, _registry(registry).compile(spec), options)


# ─────────────────────────────────────────────────────────────────────────────
# Comparison
# ─────────────────────────────────────────────────────────────────────────────


class ComparisonMatcher(PatternMatcher):
    """``op(value, bound)``; values that cannot be compared do not match."""

    def __init__(self, op: Callable[[Any, Any], Any], bound: Any, symbol: str) -> None:
        self._op = op
        self._bound = bound
        self._symbol = symbol

    def matches(self, value: Any) -> bool:
        try:
            return bool(self._op(value, self._bound))
        except TypeError:
            return False

    def __repr__(self) -> str:
        return f"<value {self._symbol} {self._bound!r}>"


class RangeMatcher(PatternMatcher):
    """``low <= value <= high``, inclusive at both ends."""

    def __init__(self, low: Any, high: Any) -> None:
        self._low = low
        self._high = high

    def matches(self, value: Any) -> bool:
        try:
            return bool(self._low <= value <= self._high)
        except TypeError:
            return False

    def __repr__(self) -> str:
        return f"<{self._low!r} <= value <= {self._high!r}>"


def in_range(low: Any, high: Any) -> PatternMatcher:
    """Examples::

        in_range(5, 10)(5)    → True
        in_range(5, 10)(10)   → True
        in_range(5, 10)(11)   → False
    """
    return RangeMatcher(low, high)


def lt(n: Any) -> PatternMatcher:
    return ComparisonMatcher(operator.lt, n, "<")


def lte(n: Any) -> PatternMatcher:
    return ComparisonMatcher(operator.le, n, "<=")


def gt(n: Any) -> PatternMatcher:
    return ComparisonMatcher(operator.gt, n, ">")


def gte(n: Any) -> PatternMatcher:
    return ComparisonMatcher(operator.ge, n, ">=")


# ─────────────────────────────────────────────────────────────────────────────
# Explicit object patterns
# ─────────────────────────────────────────────────────────────────────────────


class EqualityMatcher(PatternMatcher):
    """``value == expected`` for arbitrary objects (dates, decimals, sets …)."""

    def __init__(self, expected: Any) -> None:
        self._expected = expected

    def matches(self, value: Any) -> bool:
        return bool(value == self._expected)

    def __repr__(self) -> str:
        return f"EqualityMatcher({self._expected!r})"


def instance_of(*classes: type) -> PatternMatcher:
    """``isinstance(value, classes)``, e.g. ``instance_of(date, datetime)``."""
    if not classes or not all(isinstance(cls, type) for cls in classes):
        raise TypeError("instance_of() requires one or more classes")
    return InstanceMatcher(*classes)


def equal_to(expected: Any) -> PatternMatcher:
    """Equality against an object that is not itself a valid pattern.

    ``pattern().when(date(2024, 1, 1), …)`` is rejected because an arbitrary
    instance is ambiguous; ``equal_to(date(2024, 1, 1))`` says what is meant.
    """
    return EqualityMatcher(expected)


# ─────────────────────────────────────────────────────────────────────────────
# Results
# ─────────────────────────────────────────────────────────────────────────────


def constant(value: Any) -> Constant:
    """Wrap a result so it is returned as is, even when it is callable.

    ::

        handlers = pattern().when("upper", constant(str.upper)).close()
        handlers("upper")("abc")   → "ABC"
    """
    return Constant(value)
