"""Lexer operating modes, line kinds and character constants.

This module defines the finite state machine modes for the lexer and the
classification results it produces for each line.
"""

from __future__ import annotations

from enum import Enum, auto


class LexerMode(Enum):
    """Lexer operating modes.

    Exactly one mode is active at any line boundary:
    - NORMAL: Not inside any multi-line scalar
    - BLOCK_SCALAR: Inside a literal (|) or folded (>) block scalar body
    - SINGLE_QUOTED: Inside a '...' flow scalar opened on an earlier line
    - DOUBLE_QUOTED: Inside a "..." flow scalar opened on an earlier line

    """

    NORMAL = auto()
    BLOCK_SCALAR = auto()
    SINGLE_QUOTED = auto()
    DOUBLE_QUOTED = auto()


class LineKind(Enum):
    """Role of one line in the stream.

    - START_MARKER: "---" at column zero (directives end / document start)
    - END_MARKER: "..." at column zero (document end)
    - PROLOGUE: blank, comment or directive line outside any document body
    - CONTENT: anything else, including every line inside a scalar

    """

    START_MARKER = auto()
    END_MARKER = auto()
    PROLOGUE = auto()
    CONTENT = auto()


START_MARKER = "---"
END_MARKER = "..."

# Byte order mark, allowed before the first marker of a stream
BOM = "\ufeff"

# Whitespace inside a line (YAML s-white)
WHITESPACE = " \t"

# Line terminator characters stripped before classification
LINE_BREAKS = "\r\n"

BLOCK_SCALAR_INDICATORS = "|>"
CHOMPING_INDICATORS = "+-"
INDENTATION_INDICATORS = "123456789"

# Node properties that may precede a node on the same line
PROPERTY_INDICATORS = "!&"

FLOW_OPEN = "[{"
FLOW_CLOSE = "]}"

QUOTE_MODES = {
    "'": LexerMode.SINGLE_QUOTED,
    '"': LexerMode.DOUBLE_QUOTED,
}
