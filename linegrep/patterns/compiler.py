"""Pattern compiler.

Turns pattern text into a CompiledPattern. The dialect is deliberately
small:

- literal characters
- ``\\d`` (ASCII digit) and ``\\w`` (ASCII letter, digit or underscore)
- ``[abc]`` and ``[^abc]`` character groups, members taken literally
- ``^`` as the first character and ``$`` as the last character anchor the
  match; anywhere else they are literals
- ``+`` after an element makes it match one or more times

Anything else that looks like syntax (an unknown escape, a group without a
closing bracket, an empty group, a ``+`` with nothing to repeat) raises
InvalidPatternError. There is no partial result.
"""

from __future__ import annotations

from functools import lru_cache

from linegrep.constants import (
    ANCHOR_END,
    ANCHOR_START,
    ESCAPE,
    GROUP_CLOSE,
    GROUP_NEGATE,
    GROUP_OPEN,
    ONE_OR_MORE,
)
from linegrep.types.errors import InvalidPatternError
from linegrep.utils.logger import logger

from .elements import CompiledPattern, Element, ElementKind, Quantifier

_ESCAPES: dict[str, ElementKind] = {
    "d": ElementKind.DIGIT,
    "w": ElementKind.WORD,
}


class PatternCompiler:
    """Single-use left-to-right parser for one pattern string.

    Usage:
        compiled = PatternCompiler("^\\d+ apples$").compile()
    """

    def __init__(self, pattern: str) -> None:
        self.pattern = pattern
        self.anchored_start = pattern.startswith(ANCHOR_START)
        self.anchored_end = (
            pattern.endswith(ANCHOR_END)
            and len(pattern) > (1 if self.anchored_start else 0)
        )
        # Body is the text between the anchors.
        self._begin = 1 if self.anchored_start else 0
        self._end = len(pattern) - 1 if self.anchored_end else len(pattern)
        self._elements: list[Element] = []

    def _fail(self, position: int, construct: str) -> InvalidPatternError:
        return InvalidPatternError(self.pattern, position, construct)

    def compile(self) -> CompiledPattern:
        """Parse the whole pattern.

        Returns:
            The compiled pattern.

        Raises:
            InvalidPatternError: On the first malformed construct.
        """
        i = self._begin
        while i < self._end:
            ch = self.pattern[i]
            if ch == ESCAPE:
                i = self._parse_escape(i)
            elif ch == GROUP_OPEN:
                i = self._parse_group(i)
            elif ch == ONE_OR_MORE:
                i = self._parse_quantifier(i)
            else:
                self._elements.append(Element(ElementKind.LITERAL, ch, position=i))
                i += 1

        compiled = CompiledPattern(
            elements=tuple(self._elements),
            anchored_start=self.anchored_start,
            anchored_end=self.anchored_end,
            source=self.pattern,
        )
        logger.debug(
            f"Compiled pattern {self.pattern!r} into {len(compiled)} elements "
            f"(anchored_start={compiled.anchored_start}, anchored_end={compiled.anchored_end})"
        )
        return compiled

    def _parse_escape(self, i: int) -> int:
        if i + 1 >= len(self.pattern):
            raise self._fail(i, "unterminated escape sequence")
        if i + 1 >= self._end:
            # The character after the backslash is the stripped end anchor.
            raise self._fail(i, f"unrecognized escape sequence '{ESCAPE}{ANCHOR_END}'")

        code = self.pattern[i + 1]
        kind = _ESCAPES.get(code)
        if kind is None:
            raise self._fail(i, f"unrecognized escape sequence '{ESCAPE}{code}'")
        self._elements.append(Element(kind, position=i))
        return i + 2

    def _parse_group(self, i: int) -> int:
        close = self.pattern.find(GROUP_CLOSE, i + 1, self._end)
        if close == -1:
            raise self._fail(i, "unterminated character group")

        start = i + 1
        negated = self.pattern[start:start + 1] == GROUP_NEGATE and start < close
        if negated:
            start += 1

        members = self.pattern[start:close]
        if not members:
            raise self._fail(i, "empty character group")

        self._elements.append(
            Element(
                ElementKind.CHAR_CLASS,
                frozenset(members),
                negated=negated,
                position=i,
            )
        )
        return close + 1

    def _parse_quantifier(self, i: int) -> int:
        # "a++": a quantified element cannot take a second quantifier.
        if not self._elements or self._elements[-1].repeats:
            raise self._fail(i, "dangling quantifier '+'")
        last = self._elements.pop()
        self._elements.append(last.with_quantifier(Quantifier.ONE_OR_MORE))
        return i + 1


def compile_pattern(pattern: str) -> CompiledPattern:
    """Compile pattern text.

    Args:
        pattern: Pattern in the linegrep dialect.

    Returns:
        Immutable compiled pattern, safe to share and reuse.

    Raises:
        InvalidPatternError: If the text contains a malformed construct.
    """
    return PatternCompiler(pattern).compile()


@lru_cache(maxsize=256)
def compile_cached(pattern: str) -> CompiledPattern:
    """Compile pattern text, reusing earlier results for the same text."""
    return compile_pattern(pattern)
