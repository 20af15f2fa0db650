"""Core abstractions, the pattern-kind registry, and the Pattern builder.

This module owns every *interface* in the system.  Nothing here depends on a
concrete pattern kind — all concrete detectors, compilers and matchers live
in the ``kinds`` sub-package, the combinators in ``combinators`` and the
default wiring in ``factory``.

Construction and dispatch flow::

    pattern().when(spec, result)
      │
      ▼
    PatternKindRegistry.compile(spec)
        resolve(spec) → KindNode             ← select (priority desc, first-match)
        node.compiler.compile(spec, registry, depth)
            └─ registry.compile(child, depth=depth + 1)   ← structural kinds
      │
      ▼
    Clause(matcher, result) appended
      │
      ▼
    .default(...) / .close()  →  ClosedPattern (frozen clause tuple)
      │
      ▼
    closed(value, *extra)
        first clause whose matcher holds  → result(value, *extra) | result
        else default                      → default(value, *extra) | default
        else                              → MatchError
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Any, List, Optional, Sequence, Tuple

from loguru import logger

from .errors import ClosedPatternError, MatchError, NoMatchingKindError


# ─────────────────────────────────────────────────────────────────────────────
# Absence sentinels
# ─────────────────────────────────────────────────────────────────────────────


class _Undefined:
    """The strictly-absent value.

    ``None`` is the loosely-absent value; ``UNDEFINED`` marks "nothing was
    ever there".  Both match only themselves as literal patterns.
    """

    _instance: Optional['_Undefined'] = None

    def __new__(cls) -> '_Undefined':
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNDEFINED"

    def __bool__(self) -> bool:
        return False

    def __copy__(self) -> '_Undefined':
        return self

    def __deepcopy__(self, memo: dict) -> '_Undefined':
        return self

    def __reduce__(self) -> str:
        return "UNDEFINED"


UNDEFINED = _Undefined()

# Distinguishes "no default" from a default of None / UNDEFINED.
_NO_DEFAULT = object()


def is_absent(value: Any) -> bool:
    """True for either flavour of absence (``None`` or ``UNDEFINED``)."""
    return value is None or value is UNDEFINED


# ─────────────────────────────────────────────────────────────────────────────
# Kind: classification tags of the built-in pattern kinds
# ─────────────────────────────────────────────────────────────────────────────


class Kind(str, Enum):
    """Names of the built-in pattern kinds, in classification order."""

    LITERAL = "literal"
    SEQUENCE = "sequence"
    REGEX = "regex"
    CONSTRUCTOR = "constructor"
    CATEGORY = "category"
    MAPPING = "mapping"
    PREDICATE = "predicate"


# ─────────────────────────────────────────────────────────────────────────────
# Compiled predicates
# ─────────────────────────────────────────────────────────────────────────────


class PatternMatcher(ABC):
    """A compiled pattern: does *value* satisfy it?

    Matchers are immutable once built and callable, so a compiled pattern can
    be used wherever a plain ``value → bool`` predicate is expected::

        registry.compile([1, str]).matches([1, "a", None])   # True
        registry.compile([1, str])([2, "a"])                  # False
    """

    @abstractmethod
    def matches(self, value: Any) -> bool: ...

    def __call__(self, value: Any) -> bool:
        return self.matches(value)


# ─────────────────────────────────────────────────────────────────────────────
# Kind system: detector + compiler pairs
# ─────────────────────────────────────────────────────────────────────────────


class SpecDetector(ABC):
    """Predicate over *pattern specifications*: does *spec* belong to a kind?

    Examples::

        LiteralDetector().matches(1)        → True
        MappingDetector().matches({"a": 1}) → True
    """

    @abstractmethod
    def matches(self, spec: Any) -> bool: ...


class PatternCompiler(ABC):
    """Turn a specification of one kind into a ``PatternMatcher``.

    Structural compilers recurse through ``registry.compile(child,
    depth=depth + 1)``; leaf compilers ignore *registry* and *depth*.
    """

    @abstractmethod
    def compile(self, spec: Any, registry: 'PatternKindRegistry', depth: int) -> PatternMatcher:
        """Return the compiled matcher for *spec*."""


@dataclass
class KindNode:
    """Single entry of the kind registry.

    ``name`` is what ``classify`` reports (a ``Kind`` value for built-ins).
    Nodes are tried by descending ``priority``; ties keep registration order.
    """

    name: str
    priority: int
    detector: SpecDetector
    compiler: PatternCompiler


class PatternKindRegistry:
    """Ordered, first-match registry of pattern kinds.

    Specification shapes are not mutually exclusive (``list`` is both a class
    and a category type), so the priority order is part of the contract::

        literal 70 > sequence 60 > regex 50 > constructor 40
                   > category 30 > mapping 20 > predicate 10

    ``max_depth`` bounds structural nesting; exceeding it raises
    ``RecursionError`` (self-referential containers would otherwise recurse
    forever).
    """

    def __init__(self, *, max_depth: int = 100) -> None:
        self._nodes: List[KindNode] = []
        self.max_depth = max_depth

    # -- registration -------------------------------------------------------

    def register(self, node: KindNode) -> None:
        """Add a node to the registry."""
        self._nodes.append(node)

    def register_kind(
            self,
            name: str,
            detector: SpecDetector,
            compiler: PatternCompiler,
            *,
            priority: int = 0,
    ) -> None:
        """Sugar for ``register(KindNode(…))``."""
        self.register(KindNode(name=name, priority=priority, detector=detector, compiler=compiler))

    # -- classification -----------------------------------------------------

    def resolve(self, spec: Any) -> KindNode:
        """Return the first node whose detector accepts *spec*.

        Raises ``NoMatchingKindError`` when no node does.
        """
        for node in self.nodes():
            if node.detector.matches(spec):
                logger.debug("pattern.kind.resolved kind={} spec={!r}", node.name, spec)
                return node
        raise NoMatchingKindError(spec)

    def classify(self, spec: Any) -> str:
        """Return the kind name *spec* is classified as."""
        return self.resolve(spec).name

    def compile(self, spec: Any, *, depth: int = 0) -> PatternMatcher:
        """Classify *spec* and compile it with the selected kind's compiler."""
        if depth > self.max_depth:
            raise RecursionError("pattern_max_depth exceeded")
        node = self.resolve(spec)
        return node.compiler.compile(spec, self, depth)

    # -- introspection ------------------------------------------------------

    def nodes(self) -> List[KindNode]:
        """Return nodes sorted by descending priority."""
        return sorted(self._nodes, key=lambda n: n.priority, reverse=True)


# ─────────────────────────────────────────────────────────────────────────────
# Clauses and results
# ─────────────────────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class Constant:
    """Result wrapper: return ``value`` verbatim even if it is callable."""

    value: Any


@dataclass(frozen=True)
class Clause:
    """A registered ``(matcher, result)`` pair."""

    matcher: PatternMatcher
    result: Any


def _produce(result: Any, value: Any, extra: Tuple[Any, ...]) -> Any:
    if isinstance(result, Constant):
        return result.value
    if callable(result):
        return result(value, *extra)
    return result


def _dispatch(clauses: Sequence[Clause], default: Any, value: Any, extra: Tuple[Any, ...]) -> Any:
    for clause in clauses:
        if clause.matcher.matches(value):
            return _produce(clause.result, value, extra)

    if default is _NO_DEFAULT:
        logger.debug("pattern.dispatch.no_match value={!r} clauses={}", value, len(clauses))
        raise MatchError(value)

    logger.debug("pattern.dispatch.default value={!r}", value)
    return _produce(default, value, extra)


# ─────────────────────────────────────────────────────────────────────────────
# Pattern (open builder) and ClosedPattern (frozen invocation-only view)
# ─────────────────────────────────────────────────────────────────────────────


class ClosedPattern:
    """Invocation-only view returned by ``Pattern.close`` / ``Pattern.default``.

    Holds an immutable snapshot of the clauses, so it is safe to share and to
    call re-entrantly (a result may call the same pattern again).  There is
    no ``when`` or ``default`` here.
    """

    __slots__ = ("_clauses", "_default")

    def __init__(self, clauses: Tuple[Clause, ...], default: Any = _NO_DEFAULT) -> None:
        self._clauses = clauses
        self._default = default

    def __call__(self, value: Any, *extra: Any) -> Any:
        return _dispatch(self._clauses, self._default, value, extra)

    def match(self, value: Any, *extra: Any) -> Any:
        """Same as calling the pattern."""
        return _dispatch(self._clauses, self._default, value, extra)

    def close(self) -> 'ClosedPattern':
        """Already closed: returns ``self``."""
        return self

    @property
    def clauses(self) -> Tuple[Clause, ...]:
        return self._clauses

    @property
    def has_default(self) -> bool:
        return self._default is not _NO_DEFAULT

    def __repr__(self) -> str:
        return f"<ClosedPattern clauses={len(self._clauses)} default={self.has_default}>"


class Pattern:
    """Mutable builder: append clauses with ``when``, then ``default``/``close``.

    ::

        fib = (pattern()
               .when(0, 0)
               .when(1, 1)
               .default(lambda n: fib(n - 1) + fib(n - 2)))

    ``when`` compiles the specification immediately, so malformed patterns
    fail at construction time and leave the builder unchanged.  The builder
    itself can be called at any time; after closing it refuses further
    ``when``/``default`` calls; ``close`` stays legal and is idempotent.
    """

    def __init__(self, registry: PatternKindRegistry) -> None:
        self._registry = registry
        self._clauses: List[Clause] = []
        self._default: Any = _NO_DEFAULT
        self._closed = False

    # -- construction -------------------------------------------------------

    def when(self, spec: Any, result: Any) -> 'Pattern':
        """Register a clause.  Returns ``self`` for chaining."""
        if self._closed:
            raise ClosedPatternError("when")
        matcher = self._registry.compile(spec)
        self._clauses.append(Clause(matcher, result))
        logger.debug(
            "pattern.clause.registered index={} matcher={}",
            len(self._clauses) - 1, type(matcher).__name__,
        )
        return self

    def default(self, result: Any = None) -> ClosedPattern:
        """Set the fallback result and close the pattern.

        Omitting *result* makes the fallback ``None``.
        """
        if self._closed:
            raise ClosedPatternError("default")
        self._default = result
        return self.close()

    def close(self) -> ClosedPattern:
        """Close the pattern (keeping any default) and return the frozen view.

        Idempotent: closing an already closed builder returns an equivalent
        view over the same clauses and default.
        """
        self._closed = True
        return ClosedPattern(tuple(self._clauses), self._default)

    # -- dispatch -----------------------------------------------------------

    def __call__(self, value: Any, *extra: Any) -> Any:
        return _dispatch(self._clauses, self._default, value, extra)

    def match(self, value: Any, *extra: Any) -> Any:
        """Dispatch *value*; extra positional args go to callable results."""
        return _dispatch(self._clauses, self._default, value, extra)

    # -- introspection ------------------------------------------------------

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def registry(self) -> PatternKindRegistry:
        return self._registry

    @property
    def clauses(self) -> Tuple[Clause, ...]:
        return tuple(self._clauses)

    def __repr__(self) -> str:
        state = "closed" if self._closed else "open"
        return f"<Pattern {state} clauses={len(self._clauses)}>"
