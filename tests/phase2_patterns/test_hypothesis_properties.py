"""Hypothesis property-based tests for the matching engine.

Properties tested:
- Literal self-match and leftmost offset for metacharacter-free patterns
- \\d and \\w agree with ASCII character predicates
- Negated groups are the set complement
- Random dialect patterns agree with Python's re module (ASCII mode)
"""

import re

from hypothesis import given, settings
from hypothesis import strategies as st

from linegrep.patterns import attempt, compile_pattern, search


# =============================================================================
# Strategy Definitions
# =============================================================================

METACHARACTERS = "\\[+^$"

# Printable ASCII plus a little non-ASCII, without pattern metacharacters
literal_text = st.text(
    alphabet=st.characters(
        min_codepoint=32,
        max_codepoint=0x3FF,
        exclude_characters=METACHARACTERS,
        exclude_categories=("Cs",),
    ),
    max_size=20,
)

# Small alphabet so generated patterns actually match sometimes
SUBJECT_ALPHABET = "ab1_ -"
subjects = st.text(alphabet=SUBJECT_ALPHABET, max_size=12)


@st.composite
def dialect_atoms(draw):
    """One atom as (dialect_text, python_re_text)."""
    kind = draw(st.sampled_from(["literal", "digit", "word", "group", "negated"]))
    if kind == "literal":
        ch = draw(st.sampled_from(SUBJECT_ALPHABET))
        atom, regex = ch, re.escape(ch)
    elif kind == "digit":
        atom, regex = "\\d", "\\d"
    elif kind == "word":
        atom, regex = "\\w", "\\w"
    else:
        members = draw(st.text(alphabet=SUBJECT_ALPHABET, min_size=1, max_size=3))
        escaped = "".join(re.escape(m) for m in members)
        if kind == "group":
            atom, regex = f"[{members}]", f"[{escaped}]"
        else:
            atom, regex = f"[^{members}]", f"[^{escaped}]"
    if draw(st.booleans()):
        atom, regex = atom + "+", regex + "+"
    return atom, regex


@st.composite
def dialect_patterns(draw):
    """A whole pattern as (dialect_text, python_re_text)."""
    atoms = draw(st.lists(dialect_atoms(), max_size=4))
    start = draw(st.booleans())
    end = draw(st.booleans())
    pattern = "".join(a for a, _ in atoms)
    regex = "".join(r for _, r in atoms)
    if start:
        pattern, regex = "^" + pattern, "\\A" + regex
    if end:
        pattern, regex = pattern + "$", regex + "\\Z"
    return pattern, regex


# =============================================================================
# Property Tests
# =============================================================================


class TestLiteralProperties:
    """Properties of metacharacter-free patterns."""

    @given(literal_text)
    def test_self_match(self, text):
        """A literal pattern always matches its own text."""
        assert attempt(compile_pattern(text), text) is True

    @given(literal_text.filter(bool), literal_text)
    def test_leftmost_offset_matches_str_find(self, pattern, subject):
        """The reported start is the first occurrence."""
        span = search(compile_pattern(pattern), subject)
        index = subject.find(pattern)
        if index == -1:
            assert span is None
        else:
            assert span is not None
            assert (span.start, span.end) == (index, index + len(pattern))


class TestClassProperties:
    """Properties of the built-in and custom classes."""

    @given(st.text(max_size=20))
    def test_digit_class(self, subject):
        expected = any(c in "0123456789" for c in subject)
        assert attempt(compile_pattern("\\d"), subject) is expected

    @given(st.text(max_size=20))
    def test_word_class(self, subject):
        expected = any(c.isascii() and (c.isalnum() or c == "_") for c in subject)
        assert attempt(compile_pattern("\\w"), subject) is expected

    @given(st.characters(exclude_categories=("Cs",)))
    def test_negated_group_is_complement(self, ch):
        assert attempt(compile_pattern("[^abc]"), ch) is (ch not in "abc")
        assert attempt(compile_pattern("[abc]"), ch) is (ch in "abc")


class TestAgreesWithRe:
    """Differential test against the standard library engine."""

    @settings(max_examples=300)
    @given(dialect_patterns(), subjects)
    def test_same_span_as_re(self, pair, subject):
        pattern, regex = pair
        expected = re.search(regex, subject, re.ASCII)
        span = search(compile_pattern(pattern), subject)
        if expected is None:
            assert span is None
        else:
            assert span is not None
            assert (span.start, span.end) == expected.span()
