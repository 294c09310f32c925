"""Line-at-a-time state-machine lexer for YAML document boundaries.

Classifies each line of a YAML stream as a document marker, a prologue
line, or content, while tracking just enough lexical state (quoted and
block scalars) to know when "---" and "..." are markers.

No regex in the hot path. Never rejects input: malformed YAML is the
loader's concern, not the lexer's.

Thread Safety:
Lexer instances are single-use. Create one per stream.
All state is instance-local; no shared mutable state.

"""

from __future__ import annotations

from yamlsplit.lexer.classifiers import (
    BlockScalarClassifierMixin,
    MarkerClassifierMixin,
    QuoteClassifierMixin,
)
from yamlsplit.lexer.modes import BOM, LINE_BREAKS, WHITESPACE, LexerMode, LineKind
from yamlsplit.lexer.scanners import (
    BlockScalarScannerMixin,
    NormalScannerMixin,
    QuotedScannerMixin,
)


class Lexer(
    # Classifiers (pure logic, no mode changes)
    MarkerClassifierMixin,
    QuoteClassifierMixin,
    BlockScalarClassifierMixin,
    # Scanners (mode-specific scanning logic)
    BlockScalarScannerMixin,
    NormalScannerMixin,
    QuotedScannerMixin,
):
    """Line classifier with persistent lexical mode.

    Each call to classify_line():
    1. Consumes the line under the current mode (block scalar or quoted
       scalar), possibly dropping back to NORMAL
    2. Classifies the line under NORMAL rules if the mode allows it
    3. Leaves the mode set for the next line

    Usage:
            >>> lexer = Lexer()
            >>> [lexer.classify_line(line) for line in ["a: |\\n", "  ---\\n", "---\\n"]]
            [<LineKind.CONTENT: 4>, <LineKind.CONTENT: 4>, <LineKind.START_MARKER: 1>]

    Thread Safety:
        Lexer instances are single-use. Create one per stream.

    """

    __slots__ = (
        "_mode",
        # Block scalar state
        "_block_style",  # "|" or ">"
        "_block_parent_indent",  # Indent of the owning node, -1 after "---"
        "_block_indent",  # Content indent, None until known
        # Cross-line NORMAL state
        "_flow_depth",  # Unclosed "[" / "{"
        "_plain_indent",  # Owner indent of a plain scalar that may continue, or None
    )

    def __init__(self) -> None:
        """Initialize lexer in NORMAL mode."""
        self._mode = LexerMode.NORMAL
        self._block_style: str = ""
        self._block_parent_indent: int = 0
        self._block_indent: int | None = None
        self._flow_depth = 0
        self._plain_indent: int | None = None

    @property
    def mode(self) -> LexerMode:
        """Mode in effect at the start of the next line."""
        return self._mode

    def classify_line(self, line: str, *, in_document: bool = True) -> LineKind:
        """Classify one line and advance the lexical mode.

        Markers are recognised only when the line starts in NORMAL mode (or
        ends a block scalar and is re-classified in NORMAL mode). Every line
        consumed by a quoted or block scalar is CONTENT.

        Args:
            line: One line, with or without its terminator
            in_document: Whether the caller's current document already holds
                content; decides if "%" lines are directives

        Returns:
            The LineKind of the line.
        """
        text = line.rstrip(LINE_BREAKS)

        if self._mode == LexerMode.BLOCK_SCALAR:
            if self._scan_block_scalar_content(text):
                return LineKind.CONTENT
        elif self._mode != LexerMode.NORMAL:
            self._scan_quoted_content(text)
            return LineKind.CONTENT

        return self._classify_normal(text, in_document)

    def _classify_normal(self, text: str, in_document: bool) -> LineKind:
        """Classify a line that starts in NORMAL mode."""
        if text.startswith(BOM):
            text = text[1:]

        kind = self._classify_marker(text)
        if kind is not None:
            self._flow_depth = 0
            self._plain_indent = None
        if kind == LineKind.END_MARKER:
            return kind
        if kind == LineKind.START_MARKER:
            # "--- |" and "--- 'text" open scalars owned by the document root
            self._scan_normal(text, 3, parent_indent=-1)
            return kind

        if self._is_prologue_line(text, in_document):
            # Blank lines fold into a plain scalar; comments end it
            if text.strip(WHITESPACE):
                self._plain_indent = None
            return LineKind.PROLOGUE

        if self._continues_plain(text):
            # A quote or "|" at the start of a continuation line is scalar text
            owner = self._plain_indent
            self._scan_normal(text, node_start=False)
            if self._plain_indent is not None:
                self._plain_indent = owner
            return LineKind.CONTENT

        self._scan_normal(text)
        return LineKind.CONTENT
