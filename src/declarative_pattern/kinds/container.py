"""Structural kinds — sequence (list / tuple) and mapping (plain dict) patterns.

Both kinds compile every nested element / field through the registry, so
any kind can appear inside a container pattern, including other containers.

Matching is a *floor*, not an exact shape:

* ``[a, b]`` holds for any sequence of length ≥ 2 whose first two items
  satisfy ``a`` and ``b``; trailing items are unconstrained.
* ``{"k": v}`` holds for any object value that has entry ``"k"`` satisfying
  ``v``; extra entries are allowed.  Entries of a mapping are its items,
  entries of a sequence are its indices, entries of any other object are
  its instance attributes (``vars``).  ``{}`` therefore holds for every
  non-absent, non-primitive value, lists included.

Exports
-------
SequenceDetector, SequenceMatcher, SequenceCompiler
MappingDetector, MappingMatcher, MappingCompiler
is_sequence
    "Is this a non-string sequence?" — shared with the ``SEQUENCE`` category.
is_object
    "Is this neither absent nor a primitive?" — shared with ``OBJECT``.
"""

from __future__ import annotations

import numbers
from collections.abc import Mapping, Sequence
from typing import Any, List, Tuple

from ..core import PatternCompiler, PatternKindRegistry, PatternMatcher, SpecDetector, is_absent


def is_sequence(value: Any) -> bool:
    """True for lists, tuples and other sequences; strings and bytes excluded."""
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray))


def is_object(value: Any) -> bool:
    """True for anything that is not absent and not a bool, number, str or bytes."""
    return not is_absent(value) and not isinstance(value, (bool, numbers.Number, str, bytes))


def _entries(value: Any) -> Mapping:
    if isinstance(value, Mapping):
        return value
    if is_sequence(value):
        return dict(enumerate(value))
    return getattr(value, "__dict__", {})


# ─────────────────────────────────────────────────────────────────────────────
# sequence
# ─────────────────────────────────────────────────────────────────────────────


class SequenceDetector(SpecDetector):

    def matches(self, spec: Any) -> bool:
        return isinstance(spec, (list, tuple))


class SequenceMatcher(PatternMatcher):
    """Prefix match with a minimum-length floor.

    ::

        m = SequenceMatcher([LiteralMatcher(1), LiteralMatcher(2)])
        m.matches([1, 2])      # True
        m.matches([1, 2, 3])   # True
        m.matches([1])         # False
        m.matches([2, 1])      # False
    """

    def __init__(self, items: List[PatternMatcher]) -> None:
        self._items = tuple(items)

    def matches(self, value: Any) -> bool:
        if not is_sequence(value) or len(value) < len(self._items):
            return False
        return all(matcher.matches(value[i]) for i, matcher in enumerate(self._items))

    def __repr__(self) -> str:
        return f"SequenceMatcher({list(self._items)!r})"


class SequenceCompiler(PatternCompiler):

    def compile(self, spec: Any, registry: PatternKindRegistry, depth: int) -> PatternMatcher:
        return SequenceMatcher([registry.compile(item, depth=depth + 1) for item in spec])


# ─────────────────────────────────────────────────────────────────────────────
# mapping
# ─────────────────────────────────────────────────────────────────────────────


class MappingDetector(SpecDetector):
    """Plain ``dict`` only — subclasses (``OrderedDict``, ``Counter``…) carry
    their own type and are not plain data."""

    def matches(self, spec: Any) -> bool:
        return type(spec) is dict


class MappingMatcher(PatternMatcher):
    """Every declared key present and matching; extra entries allowed.

    ::

        m = MappingMatcher([("one", LiteralMatcher(1)), ("two", LiteralMatcher(2))])
        m.matches({"one": 1, "two": 2, "three": 3})   # True
        m.matches({"one": 1, "two": 1})               # False

        MappingMatcher([(0, LiteralMatcher("a"))]).matches(["a", "b"])   # True
        MappingMatcher([]).matches(None)                                 # False
    """

    def __init__(self, fields: List[Tuple[Any, PatternMatcher]]) -> None:
        self._fields = tuple(fields)

    def matches(self, value: Any) -> bool:
        if not is_object(value):
            return False
        entries = _entries(value)
        if len(entries) < len(self._fields):
            return False
        for key, matcher in self._fields:
            if key not in entries or not matcher.matches(entries[key]):
                return False
        return True

    def __repr__(self) -> str:
        return f"MappingMatcher({dict(self._fields)!r})"


class MappingCompiler(PatternCompiler):

    def compile(self, spec: Any, registry: PatternKindRegistry, depth: int) -> PatternMatcher:
        return MappingMatcher([
            (key, registry.compile(field, depth=depth + 1))
            for key, field in spec.items()
        ])
