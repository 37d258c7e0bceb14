"""Compiled pattern data model.

A pattern compiles to a CompiledPattern: a tuple of Element values in
source order plus two anchor flags. Everything here is frozen so a compiled
pattern can be shared between threads and cached.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

_ASCII_DIGITS = frozenset("0123456789")
_ASCII_WORD = frozenset(
    "abcdefghijklmnopqrstuvwxyz"
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
    "0123456789_"
)


class ElementKind(str, Enum):
    """The fixed set of single-character tests."""

    LITERAL = "literal"
    DIGIT = "digit"
    WORD = "word"
    CHAR_CLASS = "char_class"


class Quantifier(str, Enum):
    """How many consecutive characters an element consumes."""

    EXACTLY_ONE = "exactly_one"
    ONE_OR_MORE = "one_or_more"


@dataclass(frozen=True)
class Element:
    """One match element of a compiled pattern.

    ``value`` holds the literal character for LITERAL and the member set for
    CHAR_CLASS; it is None for DIGIT and WORD. ``position`` is the offset of
    the construct in the pattern text.
    """

    kind: ElementKind
    value: str | frozenset[str] | None = None
    negated: bool = False
    quantifier: Quantifier = Quantifier.EXACTLY_ONE
    position: int = 0

    def __post_init__(self) -> None:
        if self.kind is ElementKind.LITERAL:
            if not isinstance(self.value, str) or len(self.value) != 1:
                raise ValueError("literal element needs exactly one character")
        elif self.kind is ElementKind.CHAR_CLASS:
            if not self.value:
                raise ValueError("character class must not be empty")

    @property
    def repeats(self) -> bool:
        """True when this element carries the one-or-more quantifier."""
        return self.quantifier is Quantifier.ONE_OR_MORE

    def test(self, ch: str) -> bool:
        """Check whether a single input character satisfies this element."""
        kind = self.kind
        if kind is ElementKind.LITERAL:
            return ch == self.value
        if kind is ElementKind.DIGIT:
            return ch in _ASCII_DIGITS
        if kind is ElementKind.WORD:
            return ch in _ASCII_WORD
        if kind is ElementKind.CHAR_CLASS:
            return (ch in self.value) != self.negated
        raise AssertionError(f"unhandled element kind: {kind}")

    def with_quantifier(self, quantifier: Quantifier) -> Element:
        """Return a copy of this element with a different quantifier."""
        return Element(
            kind=self.kind,
            value=self.value,
            negated=self.negated,
            quantifier=quantifier,
            position=self.position,
        )

    def describe(self) -> str:
        """Render the element back in pattern syntax."""
        if self.kind is ElementKind.LITERAL:
            text = self.value
        elif self.kind is ElementKind.DIGIT:
            text = "\\d"
        elif self.kind is ElementKind.WORD:
            text = "\\w"
        else:
            members = "".join(sorted(self.value))
            text = f"[{'^' if self.negated else ''}{members}]"
        return text + ("+" if self.repeats else "")


@dataclass(frozen=True)
class CompiledPattern:
    """Immutable result of compiling a pattern.

    ``elements`` is consumed strictly left to right by the matcher. Anchors
    are boundary checks and never appear as elements.
    """

    elements: tuple[Element, ...]
    anchored_start: bool = False
    anchored_end: bool = False
    source: str = ""

    def __len__(self) -> int:
        return len(self.elements)

    @property
    def min_length(self) -> int:
        """Shortest input a match can consume."""
        return len(self.elements)

    def describe(self) -> str:
        """Render the compiled pattern back in pattern syntax."""
        body = "".join(e.describe() for e in self.elements)
        return f"{'^' if self.anchored_start else ''}{body}{'$' if self.anchored_end else ''}"

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "source": self.source,
            "anchored_start": self.anchored_start,
            "anchored_end": self.anchored_end,
            "elements": [
                {
                    "kind": e.kind.value,
                    "value": "".join(sorted(e.value)) if isinstance(e.value, frozenset) else e.value,
                    "negated": e.negated,
                    "quantifier": e.quantifier.value,
                    "position": e.position,
                }
                for e in self.elements
            ],
        }
