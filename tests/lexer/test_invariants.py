"""Property-based tests for lexer invariants using Hypothesis.

These tests verify that certain properties always hold regardless
of the input, helping catch edge cases that example-based tests miss.
"""

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from yamlsplit.lexer import Lexer, LexerMode, LineKind

YAML_ALPHABET = "-.|>'\"#:%!&[]{},?\\ \t\nabc"


def classify_all(source: str) -> list[tuple[LineKind, LexerMode]]:
    lexer = Lexer()
    result = []
    for line in source.splitlines(keepends=True):
        result.append((lexer.classify_line(line), lexer.mode))
    return result


class TestBasicInvariants:
    """Test basic invariants that should always hold."""

    @given(st.text(max_size=500))
    @settings(max_examples=200)
    def test_never_raises(self, source: str) -> None:
        """The lexer accepts any text; it never validates YAML."""
        classify_all(source)

    @given(st.text(alphabet=YAML_ALPHABET, max_size=300))
    @settings(max_examples=300)
    def test_never_raises_on_yaml_syntax(self, source: str) -> None:
        classify_all(source)

    @given(st.text(alphabet=YAML_ALPHABET, max_size=300))
    @settings(max_examples=200)
    def test_markers_only_at_column_zero(self, source: str) -> None:
        lines = source.splitlines(keepends=True)
        for line, (kind, _) in zip(lines, classify_all(source)):
            if kind == LineKind.START_MARKER:
                assert line.startswith("---")
            elif kind == LineKind.END_MARKER:
                assert line.startswith("...")

    @given(st.text(alphabet="abc: \n-", max_size=200))
    @settings(max_examples=100)
    def test_no_quotes_or_indicators_stay_normal(self, source: str) -> None:
        """Without quotes or block indicators the lexer never leaves NORMAL."""
        for _, mode in classify_all(source):
            assert mode == LexerMode.NORMAL


class TestDeterminism:
    """Test that classification is deterministic."""

    @given(st.text(alphabet=YAML_ALPHABET, max_size=200))
    @settings(max_examples=50)
    def test_repeated_classification_identical(self, source: str) -> None:
        assert classify_all(source) == classify_all(source)


class TestLineEndingVariations:
    """Test handling of different line ending styles."""

    @pytest.mark.parametrize("line_ending", ["\n", "\r\n"])
    def test_line_ending_styles(self, line_ending: str) -> None:
        source = f"a: 1{line_ending}---{line_ending}b: |{line_ending}  x{line_ending}...{line_ending}"
        kinds = [kind for kind, _ in classify_all(source)]

        assert kinds == [
            LineKind.CONTENT,
            LineKind.START_MARKER,
            LineKind.CONTENT,
            LineKind.CONTENT,
            LineKind.END_MARKER,
        ]
