"""Literal kind — booleans, numbers, strings, bytes and the two absences.

Exports
-------
LiteralDetector
    Fires on ``bool``, ``numbers.Number``, ``str``, ``bytes``, ``None`` and
    ``UNDEFINED``.

LiteralMatcher
    Strict equality against the literal (see ``strict_equals``).

LiteralCompiler
    Builds a ``LiteralMatcher``.
"""

from __future__ import annotations

import numbers
from typing import Any

from ..core import UNDEFINED, PatternCompiler, PatternKindRegistry, PatternMatcher, SpecDetector


def is_literal(spec: Any) -> bool:
    return (
        spec is None
        or spec is UNDEFINED
        or isinstance(spec, (bool, numbers.Number, str, bytes))
    )


def strict_equals(expected: Any, value: Any) -> bool:
    """Equality that never crosses value families.

    ``True`` is not ``1``, ``"1"`` is not ``1``, ``None`` is not
    ``UNDEFINED``.  Numbers compare by value across numeric types
    (``1 == 1.0``); NaN equals nothing.
    """
    if expected is None or expected is UNDEFINED:
        return value is expected
    if isinstance(expected, bool) or isinstance(value, bool):
        return isinstance(expected, bool) and isinstance(value, bool) and expected is value
    if isinstance(expected, numbers.Number):
        return isinstance(value, numbers.Number) and value == expected
    if isinstance(expected, str):
        return isinstance(value, str) and value == expected
    if isinstance(expected, bytes):
        return isinstance(value, bytes) and value == expected
    return False


class LiteralDetector(SpecDetector):

    def matches(self, spec: Any) -> bool:
        return is_literal(spec)


class LiteralMatcher(PatternMatcher):
    """Match values strictly equal to *expected*.

    ::

        LiteralMatcher(1).matches(1.0)    # True
        LiteralMatcher(1).matches(True)   # False
        LiteralMatcher(None).matches(UNDEFINED)  # False
    """

    def __init__(self, expected: Any) -> None:
        self._expected = expected

    @property
    def expected(self) -> Any:
        return self._expected

    def matches(self, value: Any) -> bool:
        return strict_equals(self._expected, value)

    def __repr__(self) -> str:
        return f"LiteralMatcher({self._expected!r})"


class LiteralCompiler(PatternCompiler):

    def compile(self, spec: Any, registry: PatternKindRegistry, depth: int) -> PatternMatcher:
        return LiteralMatcher(spec)
