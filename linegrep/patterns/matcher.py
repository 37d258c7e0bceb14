"""Backtracking matcher.

Walks a CompiledPattern against an input string. Start offsets are tried
left to right (only offset 0 for a ``^`` pattern) and the first offset that
matches wins. At each offset the elements are consumed in order; a ``+``
element first takes the longest run it can, then gives characters back one
at a time until the rest of the pattern fits or it is down to a single
repetition.

Known limitation: the search is exponential in the worst case for patterns
with several adjacent ``+`` elements over a long input. Callers matching
untrusted input can pass ``max_steps`` to bound the work; exhausting the
budget raises BacktrackLimitError instead of returning a wrong answer.
"""

from __future__ import annotations

from typing import Iterable, Iterator

from linegrep.types.core import Span
from linegrep.types.errors import BacktrackLimitError
from linegrep.utils.logger import logger

from .elements import CompiledPattern, Element


class _Attempt:
    """Search state for one matcher call over one input string."""

    __slots__ = ("pattern", "elements", "text", "max_steps", "steps")

    def __init__(self, pattern: CompiledPattern, text: str, max_steps: int | None) -> None:
        self.pattern = pattern
        self.elements = pattern.elements
        self.text = text
        self.max_steps = max_steps
        self.steps = 0

    def _tick(self) -> None:
        self.steps += 1
        if self.max_steps is not None and self.steps > self.max_steps:
            logger.warning(
                f"Backtracking budget of {self.max_steps} steps exhausted "
                f"for pattern {self.pattern.source!r} on input of length {len(self.text)}"
            )
            raise BacktrackLimitError(self.pattern.source, self.max_steps)

    def run(self) -> Span | None:
        """Try start offsets in increasing order, return the leftmost match."""
        # Every element consumes at least one character.
        last = 0 if self.pattern.anchored_start else len(self.text) - self.pattern.min_length
        for start in range(last + 1):
            end = self.match_here(0, start)
            if end is not None:
                return Span(start, end)
        return None

    def match_here(self, e: int, i: int) -> int | None:
        """Match elements[e:] starting at text[i].

        Retry points for ``+`` elements live on an explicit stack of
        (element index, input index, repetition count) frames, so the Python
        call depth stays constant however long the pattern is.

        Returns:
            End offset of the match, or None.
        """
        frames: list[tuple[int, int, int]] = []
        while True:
            end = self._advance(e, i, frames)
            if end is not None:
                return end

            # Give one character back from the most recent run that can spare it.
            while frames:
                fe, fi, count = frames.pop()
                if count > 1:
                    count -= 1
                    frames.append((fe, fi, count))
                    e, i = fe + 1, fi + count
                    break
            else:
                return None

    def _advance(self, e: int, i: int, frames: list[tuple[int, int, int]]) -> int | None:
        """Consume elements forward, taking the longest run at each ``+``."""
        elements = self.elements
        text = self.text
        while True:
            self._tick()
            if e == len(elements):
                if self.pattern.anchored_end and i != len(text):
                    return None
                return i
            if i == len(text):
                return None

            element = elements[e]
            if not element.test(text[i]):
                return None
            if element.repeats:
                count = self.run_length(element, i)
                frames.append((e, i, count))
                e, i = e + 1, i + count
            else:
                e, i = e + 1, i + 1

    def match_repeated(self, e: int, i: int, count: int) -> int | None:
        """Match the rest of the pattern after ``count`` repetitions of elements[e]."""
        return self.match_here(e + 1, i + count)

    def run_length(self, element: Element, i: int) -> int:
        """Length of the longest run of characters from text[i] that pass ``element``."""
        text = self.text
        j = i
        while j < len(text) and element.test(text[j]):
            j += 1
        return j - i


def search(
    pattern: CompiledPattern,
    text: str,
    max_steps: int | None = None,
) -> Span | None:
    """Find the leftmost match of a compiled pattern.

    Args:
        pattern: Compiled pattern.
        text: Input line, without its trailing newline.
        max_steps: Optional bound on recursive matching steps.

    Returns:
        Span of the leftmost match, or None.

    Raises:
        BacktrackLimitError: Only when ``max_steps`` is given and exhausted.
    """
    return _Attempt(pattern, text, max_steps).run()


def attempt(
    pattern: CompiledPattern,
    text: str,
    max_steps: int | None = None,
) -> bool:
    """Check whether some substring of ``text`` satisfies ``pattern``."""
    return search(pattern, text, max_steps) is not None


class BacktrackingMatcher:
    """A compiled pattern bound to a step budget.

    Usage:
        matcher = BacktrackingMatcher(compile_pattern("ca+t"))
        for line_number, line, span in matcher.filter_lines(lines):
            print(line_number, span.slice(line))
    """

    def __init__(self, pattern: CompiledPattern, max_steps: int | None = None) -> None:
        if max_steps is not None and max_steps <= 0:
            raise ValueError("max_steps must be positive")
        self.pattern = pattern
        self.max_steps = max_steps

    def attempt(self, text: str) -> bool:
        """Check whether ``text`` contains a match."""
        return attempt(self.pattern, text, self.max_steps)

    def search(self, text: str) -> Span | None:
        """Return the leftmost match span in ``text``, or None."""
        return search(self.pattern, text, self.max_steps)

    def filter_lines(self, lines: Iterable[str]) -> Iterator[tuple[int, str, Span]]:
        """Yield (line_number, line, span) for every matching line.

        Line numbers are 1-based. A trailing ``\\n`` (and ``\\r\\n``) is
        stripped from each line before matching.
        """
        for line_number, line in enumerate(lines, 1):
            if line.endswith("\n"):
                line = line[:-1]
                if line.endswith("\r"):
                    line = line[:-1]
            span = self.search(line)
            if span is not None:
                yield line_number, line, span
