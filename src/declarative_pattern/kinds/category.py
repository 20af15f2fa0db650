"""Category kind — six coarse value families.

Plain ``isinstance`` is too fine-grained for some families: ``bool`` is an
``int``, and every value is an ``object``.  A ``Category`` member names the
family the way a dynamically typed caller thinks about it:

==========  ==============================================================
SEQUENCE    non-string sequences (``list``, ``tuple``, ``range`` …)
BOOLEAN     ``True`` / ``False``
ERROR       exception instances
NUMBER      ``numbers.Number`` except ``bool``
OBJECT      anything not absent and not a primitive (containers, instances,
            functions); ``None``, ``UNDEFINED``, bools, numbers, ``str`` and
            ``bytes`` are excluded
STRING      ``str``
==========  ==============================================================
"""

from __future__ import annotations

import numbers
from enum import Enum
from typing import Any, Callable, Dict

from ..core import PatternCompiler, PatternKindRegistry, PatternMatcher, SpecDetector
from .container import is_object, is_sequence


class Category(Enum):
    SEQUENCE = "sequence"
    BOOLEAN = "boolean"
    ERROR = "error"
    NUMBER = "number"
    OBJECT = "object"
    STRING = "string"


def _is_number(value: Any) -> bool:
    return isinstance(value, numbers.Number) and not isinstance(value, bool)


_MEMBERSHIP: Dict[Category, Callable[[Any], bool]] = {
    Category.SEQUENCE: is_sequence,
    Category.BOOLEAN: lambda v: isinstance(v, bool),
    Category.ERROR: lambda v: isinstance(v, BaseException),
    Category.NUMBER: _is_number,
    Category.OBJECT: is_object,
    Category.STRING: lambda v: isinstance(v, str),
}


class CategoryDetector(SpecDetector):

    def matches(self, spec: Any) -> bool:
        return isinstance(spec, Category)


class CategoryMatcher(PatternMatcher):
    """Membership in one ``Category``.

    ::

        CategoryMatcher(Category.NUMBER).matches(0)      # True
        CategoryMatcher(Category.NUMBER).matches(True)   # False
        CategoryMatcher(Category.OBJECT).matches([])     # True
        CategoryMatcher(Category.OBJECT).matches(None)   # False
    """

    def __init__(self, category: Category) -> None:
        self._category = category
        self._test = _MEMBERSHIP[category]

    @property
    def category(self) -> Category:
        return self._category

    def matches(self, value: Any) -> bool:
        return self._test(value)

    def __repr__(self) -> str:
        return f"CategoryMatcher({self._category})"


class CategoryCompiler(PatternCompiler):

    def compile(self, spec: Any, registry: PatternKindRegistry, depth: int) -> PatternMatcher:
        return CategoryMatcher(spec)
