"""Registry factory and public entry points — the place where the kinds are wired.

``build_default_registry`` assembles a ``PatternKindRegistry`` with the seven
built-in kinds; ``pattern`` and ``match`` are the user-facing entry points.

Customisation points:

* **regex_timeout** – per-search limit for regex patterns (default 2 s).
* **max_depth**     – structural nesting limit (default 100).
* **extra_kinds**   – additional ``KindNode`` entries, slotted by priority.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Any, Callable, Iterable, Optional

from .core import Kind, KindNode, Pattern, PatternKindRegistry
from .kinds import (
    CategoryCompiler, CategoryDetector,
    ConstructorCompiler, ConstructorDetector,
    LiteralCompiler, LiteralDetector,
    MappingCompiler, MappingDetector,
    PredicateCompiler, PredicateDetector,
    RegexCompiler, RegexDetector,
    SequenceCompiler, SequenceDetector,
)


def build_default_registry(
        *,
        regex_timeout: Optional[float] = 2.0,
        max_depth: int = 100,
        extra_kinds: Optional[Iterable[KindNode]] = None,
) -> PatternKindRegistry:
    """Assemble a registry with the built-in pattern kinds.

    What gets wired (priority, first match wins)
    ---------------------------------------------
    * ``literal``     (70) – bool, numbers, str, bytes, None, UNDEFINED
    * ``sequence``    (60) – list / tuple, prefix floor
    * ``regex``       (50) – compiled ``re`` / ``regex`` patterns
    * ``constructor`` (40) – classes, instance-of
    * ``category``    (30) – ``Category`` members
    * ``mapping``     (20) – plain dict, superset floor
    * ``predicate``   (10) – any other callable

    Args:
        regex_timeout: Seconds allowed per regex search; ``None`` disables
                       the limit.
        max_depth:     Maximum nesting of container patterns.
        extra_kinds:   Extra nodes registered after the built-ins.  Give them
                       a priority between the built-ins to slot them in.

    Returns:
        A ready ``PatternKindRegistry``.

    Example::

        registry = build_default_registry(regex_timeout=0.5)
        registry.classify([1, 2])       # → "sequence"
        registry.compile({"a": int})({"a": 1, "b": 2})   # → True
    """
    registry = PatternKindRegistry(max_depth=max_depth)

    registry.register(KindNode(
        name=Kind.LITERAL, priority=70,
        detector=LiteralDetector(),
        compiler=LiteralCompiler(),
    ))
    registry.register(KindNode(
        name=Kind.SEQUENCE, priority=60,
        detector=SequenceDetector(),
        compiler=SequenceCompiler(),
    ))
    registry.register(KindNode(
        name=Kind.REGEX, priority=50,
        detector=RegexDetector(),
        compiler=RegexCompiler(timeout=regex_timeout),
    ))
    registry.register(KindNode(
        name=Kind.CONSTRUCTOR, priority=40,
        detector=ConstructorDetector(),
        compiler=ConstructorCompiler(),
    ))
    registry.register(KindNode(
        name=Kind.CATEGORY, priority=30,
        detector=CategoryDetector(),
        compiler=CategoryCompiler(),
    ))
    registry.register(KindNode(
        name=Kind.MAPPING, priority=20,
        detector=MappingDetector(),
        compiler=MappingCompiler(),
    ))
    registry.register(KindNode(
        name=Kind.PREDICATE, priority=10,
        detector=PredicateDetector(),
        compiler=PredicateCompiler(),
    ))

    for node in extra_kinds or ():
        registry.register(node)

    return registry


@lru_cache(maxsize=None)
def get_default_registry() -> PatternKindRegistry:
    """Shared registry used when no explicit registry is passed.

    Built once on first use.  Registering kinds on it affects every caller
    that relies on the default; build a private one for local extensions.
    """
    return build_default_registry()


def pattern(*, registry: Optional[PatternKindRegistry] = None) -> Pattern:
    """Return a fresh, open, empty ``Pattern``."""
    return Pattern(registry if registry is not None else get_default_registry())


def match(
        value: Any,
        build: Callable[[Pattern], Any],
        *extra: Any,
        registry: Optional[PatternKindRegistry] = None,
) -> Any:
    """Build a one-off pattern with *build* and dispatch *value* against it.

    *build* receives the open ``Pattern`` and registers clauses on it; its
    return value is ignored.

    Example::

        match(1, lambda p: p.when(1, "one").when(2, "two"))   # → "one"
    """
    p = pattern(registry=registry)
    build(p)
    return p.match(value, *extra)
