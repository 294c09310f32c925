"""Tests for block scalar tracking (| and >)."""

import pytest

from yamlsplit.lexer import Lexer, LexerMode, LineKind


def feed(lexer: Lexer, *lines: str) -> list[LineKind]:
    return [lexer.classify_line(line) for line in lines]


class TestBlockScalarHeaders:
    """Headers that open a block scalar."""

    @pytest.mark.parametrize(
        "line",
        [
            "key: |\n",
            "key: >\n",
            "key: |-\n",
            "key: >+\n",
            "key: |2\n",
            "key: >2-\n",
            "key: |-2\n",
            "key: |  # trailing comment\n",
            "- |\n",
            "? >\n",
            "|\n",
            "key: !!str |\n",
            "key: &anchor >\n",
            '"quoted key": |\n',
            "--- |\n",
        ],
    )
    def test_opens_block_scalar(self, line: str) -> None:
        lexer = Lexer()
        lexer.classify_line(line)
        assert lexer.mode == LexerMode.BLOCK_SCALAR

    @pytest.mark.parametrize(
        "line",
        [
            "cmd: echo a | grep b\n",
            "expr: a > b\n",
            "key: |x\n",
            "key: | text\n",
            "key: |++\n",
            "key: |23\n",
            "key: '|'\n",
            "key: value # |\n",
            "key:|\n",
        ],
    )
    def test_does_not_open_block_scalar(self, line: str) -> None:
        lexer = Lexer()
        lexer.classify_line(line)
        assert lexer.mode == LexerMode.NORMAL

    def test_header_records_style(self) -> None:
        lexer = Lexer()
        lexer.classify_line("key: >-\n")
        assert lexer._block_style == ">"

    def test_explicit_indentation_indicator(self) -> None:
        lexer = Lexer()
        lexer.classify_line("  key: |3\n")
        assert lexer._block_parent_indent == 2
        assert lexer._block_indent == 5


class TestBlockScalarExtent:
    """Which lines belong to the body."""

    def test_first_body_line_fixes_indentation(self) -> None:
        lexer = Lexer()
        feed(lexer, "key: |\n", "    deep\n")
        assert lexer._block_indent == 4

    def test_more_indented_and_blank_lines_stay(self) -> None:
        lexer = Lexer()
        kinds = feed(lexer, "key: |\n", "  a\n", "\n", "    b\n", "   \n", "  c\n")
        assert kinds[1:] == [LineKind.CONTENT] * 5
        assert lexer.mode == LexerMode.BLOCK_SCALAR

    def test_dedent_ends_scalar(self) -> None:
        lexer = Lexer()
        feed(lexer, "key: |\n", "  body\n", "other: 1\n")
        assert lexer.mode == LexerMode.NORMAL

    def test_dedent_below_content_indent_ends_scalar(self) -> None:
        lexer = Lexer()
        feed(lexer, "key: |\n", "    body\n", "  less\n")
        assert lexer.mode == LexerMode.NORMAL

    def test_leading_blank_lines_then_dedent(self) -> None:
        """An empty block scalar ends on the first line not past its parent."""
        lexer = Lexer()
        feed(lexer, "key: |\n", "\n", "\n", "next: 1\n")
        assert lexer.mode == LexerMode.NORMAL

    def test_nested_block_scalar_uses_owner_indent(self) -> None:
        lexer = Lexer()
        kinds = feed(
            lexer,
            "- name: build\n",
            "  script: |\n",
            "    echo '---\n",
            "---\n",
        )
        assert kinds[2] == LineKind.CONTENT
        assert kinds[3] == LineKind.START_MARKER

    def test_quotes_inside_body_are_ignored(self) -> None:
        lexer = Lexer()
        feed(lexer, "key: |\n", "  it's \"open\n", "done: 1\n")
        assert lexer.mode == LexerMode.NORMAL

    def test_dedented_line_is_reclassified(self) -> None:
        """The line that ends a scalar may itself open another one."""
        lexer = Lexer()
        feed(lexer, "a: |\n", "  x\n", "b: >\n")
        assert lexer.mode == LexerMode.BLOCK_SCALAR
        assert lexer._block_style == ">"
        assert lexer._block_indent is None

    def test_dedented_line_may_open_quote(self) -> None:
        lexer = Lexer()
        feed(lexer, "a: |\n", "  x\n", "b: 'open\n")
        assert lexer.mode == LexerMode.SINGLE_QUOTED


class TestTopLevelBlockScalar:
    """Block scalars following '---' on the marker line."""

    def test_body_may_start_at_column_zero(self) -> None:
        lexer = Lexer()
        kinds = feed(lexer, "--- |\n", "text at column zero\n")
        assert kinds == [LineKind.START_MARKER, LineKind.CONTENT]
        assert lexer.mode == LexerMode.BLOCK_SCALAR

    def test_marker_still_ends_column_zero_body(self) -> None:
        lexer = Lexer()
        kinds = feed(lexer, "--- >\n", "folded\n", "---\n")
        assert kinds[-1] == LineKind.START_MARKER

    def test_end_marker_ends_body(self) -> None:
        lexer = Lexer()
        kinds = feed(lexer, "--- |\n", "  text\n", "...\n")
        assert kinds[-1] == LineKind.END_MARKER
