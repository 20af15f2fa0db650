"""declarative_pattern — runtime structural pattern matching.

::

    from declarative_pattern import pattern, match, Category, in_range

    describe = (pattern()
                .when(0, "zero")
                .when(in_range(1, 9), "digit")
                .when(Category.NUMBER, "number")
                .when([str, str], lambda pair: "-".join(pair[:2]))
                .when({"type": "user", "name": str}, lambda u: u["name"])
                .default("unknown"))

Debug logging goes through loguru and is disabled by default; enable it
with ``logger.enable("declarative_pattern")``.
"""

from loguru import logger

from .combinators import (
    _,
    all_of,
    constant,
    either,
    equal_to,
    gt,
    gte,
    in_range,
    instance_of,
    lt,
    lte,
    negate,
    none,
    query,
    some,
    wildcard,
)
from .core import (
    UNDEFINED,
    Clause,
    ClosedPattern,
    Constant,
    Kind,
    KindNode,
    Pattern,
    PatternCompiler,
    PatternKindRegistry,
    PatternMatcher,
    SpecDetector,
    is_absent,
)
from .errors import ClosedPatternError, MatchError, NoMatchingKindError, PatternError
from .factory import build_default_registry, get_default_registry, match, pattern
from .kinds import Category
from .matchers import AllOfMatcher, AlwaysMatcher, AnyOfMatcher, NotMatcher

logger.disable(__name__)

__all__ = [
    # entry points
    "pattern",
    "match",
    "build_default_registry",
    "get_default_registry",
    # core
    "Pattern",
    "ClosedPattern",
    "Clause",
    "Constant",
    "Kind",
    "KindNode",
    "PatternKindRegistry",
    "PatternMatcher",
    "PatternCompiler",
    "SpecDetector",
    "UNDEFINED",
    "is_absent",
    "Category",
    # matchers
    "AlwaysMatcher",
    "AnyOfMatcher",
    "AllOfMatcher",
    "NotMatcher",
    # combinators
    "wildcard",
    "_",
    "some",
    "none",
    "either",
    "all_of",
    "negate",
    "query",
    "in_range",
    "lt",
    "lte",
    "gt",
    "gte",
    "instance_of",
    "equal_to",
    "constant",
    # errors
    "PatternError",
    "NoMatchingKindError",
    "MatchError",
    "ClosedPatternError",
]
