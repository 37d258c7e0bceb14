"""Pattern compiler and backtracking matcher.

Components:
- Element, ElementKind, Quantifier, CompiledPattern: compiled data model
- compile_pattern / PatternCompiler: pattern text to CompiledPattern
- attempt / search / BacktrackingMatcher: run a compiled pattern on a line

Usage:
    from linegrep.patterns import compile_pattern, attempt

    compiled = compile_pattern("ca+at")
    attempt(compiled, "caaat")  # True
"""

from .elements import CompiledPattern, Element, ElementKind, Quantifier
from .compiler import PatternCompiler, compile_cached, compile_pattern
from .matcher import BacktrackingMatcher, attempt, search

__all__ = [
    "CompiledPattern",
    "Element",
    "ElementKind",
    "Quantifier",
    "PatternCompiler",
    "compile_pattern",
    "compile_cached",
    "BacktrackingMatcher",
    "attempt",
    "search",
]
