"""
linegrep - a small line-oriented pattern matcher.

Provides:
- A compiler for a restricted regex dialect (literals, \\d, \\w, [...],
  [^...], ^, $ and +)
- A backtracking matcher reporting whether, and where, a line matches
- A grep-style command line tool built on the two
"""

__version__ = "0.1.0"

from linegrep.patterns import (
    BacktrackingMatcher,
    CompiledPattern,
    attempt,
    compile_pattern,
    search,
)
from linegrep.types import InvalidPatternError, Span

__all__ = [
    "__version__",
    "BacktrackingMatcher",
    "CompiledPattern",
    "InvalidPatternError",
    "Span",
    "attempt",
    "compile_pattern",
    "search",
]
