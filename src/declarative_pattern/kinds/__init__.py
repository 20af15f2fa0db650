"""Kinds sub-package — concrete SpecDetector + PatternCompiler + PatternMatcher
implementations, one module per family of pattern specification.

literal    – bool / number / str / bytes / None / UNDEFINED, strict equality
container  – list / tuple (prefix floor) and plain dict (superset floor over entries)
regexp     – compiled ``re`` / ``regex`` patterns, searched with a timeout
classes    – classes as "instance of" patterns
category   – the six ``Category`` families
predicate  – any other callable
"""

from .category import Category, CategoryCompiler, CategoryDetector, CategoryMatcher
from .classes import ConstructorCompiler, ConstructorDetector, InstanceMatcher
from .container import (
    MappingCompiler, MappingDetector, MappingMatcher,
    SequenceCompiler, SequenceDetector, SequenceMatcher,
    is_object, is_sequence,
)
from .literal import LiteralCompiler, LiteralDetector, LiteralMatcher, strict_equals
from .predicate import PredicateCompiler, PredicateDetector, PredicateMatcher
from .regexp import RegexCompiler, RegexDetector, RegexMatcher

__all__ = [
    # literal
    "LiteralDetector",
    "LiteralMatcher",
    "LiteralCompiler",
    "strict_equals",
    # container
    "SequenceDetector",
    "SequenceMatcher",
    "SequenceCompiler",
    "MappingDetector",
    "MappingMatcher",
    "MappingCompiler",
    "is_sequence",
    "is_object",
    # regexp
    "RegexDetector",
    "RegexMatcher",
    "RegexCompiler",
    # classes
    "ConstructorDetector",
    "InstanceMatcher",
    "ConstructorCompiler",
    # category
    "Category",
    "CategoryDetector",
    "CategoryMatcher",
    "CategoryCompiler",
    # predicate
    "PredicateDetector",
    "PredicateMatcher",
    "PredicateCompiler",
]
