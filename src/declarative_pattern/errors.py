"""Exception types raised by pattern construction and dispatch.

Only two failures are recognised by the engine itself:

* ``NoMatchingKindError`` — raised by ``Pattern.when`` when no registered
  kind accepts the pattern specification.
* ``MatchError`` — raised on dispatch when no clause matches and no default
  was set.

``ClosedPatternError`` guards the builder after ``close``/``default``.
Exceptions raised by caller supplied result callables are never wrapped.
"""

from __future__ import annotations

from typing import Any


class PatternError(Exception):
    """Base class for declarative_pattern errors."""


class NoMatchingKindError(PatternError, TypeError):
    """The pattern specification could not be classified into any kind."""

    def __init__(self, spec: Any) -> None:
        self.spec = spec
        super().__init__(f"No matching pattern kind for pattern {spec!r}")


class MatchError(PatternError, LookupError):
    """No clause matched the value and no default was set."""

    def __init__(self, value: Any) -> None:
        self.value = value
        super().__init__(f"MatchError: no pattern matches value {value!r}")


class ClosedPatternError(PatternError, RuntimeError):
    """A builder operation was attempted after the pattern was closed."""

    def __init__(self, operation: str) -> None:
        self.operation = operation
        super().__init__(f"cannot call {operation}() on a closed pattern")
