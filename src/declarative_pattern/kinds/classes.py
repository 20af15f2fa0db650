"""Constructor kind — classes used as patterns mean "instance of".

``when(ValueError, …)`` holds for ``ValueError()`` and for instances of its
subclasses.  This is plain ``isinstance`` and differs from the nearest
``Category``:

* ``list`` rejects tuples; ``Category.SEQUENCE`` accepts any sequence.
* ``Exception`` rejects ``KeyboardInterrupt``; ``Category.ERROR`` accepts
  every ``BaseException``.
* ``int`` matches ``True`` (``bool`` subclasses ``int``); ``Category.NUMBER``
  does not.  Put a ``bool`` clause before an ``int`` clause.
* ``object`` matches everything, ``None`` included; ``Category.OBJECT``
  excludes absences and primitives.

Instances are *not* accepted as patterns by this kind.  Use
``combinators.instance_of`` / ``combinators.equal_to`` to say explicitly
which behaviour is wanted for an arbitrary object.
"""

from __future__ import annotations

from typing import Any, Tuple

from ..core import PatternCompiler, PatternKindRegistry, PatternMatcher, SpecDetector


class ConstructorDetector(SpecDetector):

    def matches(self, spec: Any) -> bool:
        return isinstance(spec, type)


class InstanceMatcher(PatternMatcher):
    """``isinstance(value, classes)``."""

    def __init__(self, *classes: type) -> None:
        self._classes: Tuple[type, ...] = classes

    def matches(self, value: Any) -> bool:
        return isinstance(value, self._classes)

    def __repr__(self) -> str:
        names = ", ".join(cls.__name__ for cls in self._classes)
        return f"InstanceMatcher({names})"


class ConstructorCompiler(PatternCompiler):

    def compile(self, spec: Any, registry: PatternKindRegistry, depth: int) -> PatternMatcher:
        return InstanceMatcher(spec)
