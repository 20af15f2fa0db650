"""Regular-expression kind — compiled ``re`` / ``regex`` patterns.

A regex pattern holds when the value is a string of the same family as the
pattern (``str`` for text patterns, ``bytes`` for byte patterns) and the
expression is found anywhere in it (``search`` semantics; anchor with ``^``
/ ``$`` for prefix / suffix tests).

Every search runs through the third-party ``regex`` engine with a timeout,
so a catastrophic-backtracking pattern fails with ``TimeoutError`` instead of
hanging the dispatcher.  Standard-library patterns are recompiled once at
compile time; their flags are translated explicitly because the two
libraries number some flags differently.
"""

from __future__ import annotations

import re
from typing import Any, Optional

import regex

from ..core import PatternCompiler, PatternKindRegistry, PatternMatcher, SpecDetector

_REGEX_PATTERN_TYPE = type(regex.compile(""))

_FLAG_MAP = (
    (re.IGNORECASE, regex.IGNORECASE),
    (re.LOCALE, regex.LOCALE),
    (re.MULTILINE, regex.MULTILINE),
    (re.DOTALL, regex.DOTALL),
    (re.VERBOSE, regex.VERBOSE),
    (re.ASCII, regex.ASCII),
)


def _translate_flags(flags: int) -> int:
    out = 0
    for re_flag, regex_flag in _FLAG_MAP:
        if flags & re_flag:
            out |= regex_flag
    return out


def _to_regex(spec: Any) -> Any:
    if isinstance(spec, _REGEX_PATTERN_TYPE):
        return spec
    return regex.compile(spec.pattern, _translate_flags(spec.flags))


class RegexDetector(SpecDetector):

    def matches(self, spec: Any) -> bool:
        return isinstance(spec, (re.Pattern, _REGEX_PATTERN_TYPE))


class RegexMatcher(PatternMatcher):
    """``search`` the value with a timeout.

    ::

        RegexMatcher(re.compile(r"^foo")).matches("foobar")   # True
        RegexMatcher(re.compile(r"foo$")).matches("foobar")   # False
        RegexMatcher(re.compile(r"foo")).matches(42)          # False
    """

    def __init__(self, spec: Any, *, timeout: Optional[float] = 2.0) -> None:
        self._source = spec
        self._compiled = _to_regex(spec)
        self._subject_type = bytes if isinstance(spec.pattern, bytes) else str
        self._timeout = timeout

    @property
    def source(self) -> Any:
        return self._source

    def matches(self, value: Any) -> bool:
        if not isinstance(value, self._subject_type):
            return False
        try:
            return self._compiled.search(value, timeout=self._timeout) is not None
        except TimeoutError:
            raise TimeoutError(f"Regex search exceeded timeout of {self._timeout}s")

    def __repr__(self) -> str:
        return f"RegexMatcher({self._source.pattern!r})"


class RegexCompiler(PatternCompiler):
    """*timeout* is the per-search limit in seconds (``None`` disables it)."""

    def __init__(self, timeout: Optional[float] = 2.0) -> None:
        self._timeout = timeout

    def compile(self, spec: Any, registry: PatternKindRegistry, depth: int) -> PatternMatcher:
        return RegexMatcher(spec, timeout=self._timeout)
