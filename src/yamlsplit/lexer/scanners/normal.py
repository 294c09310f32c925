"""Normal mode scanner mixin."""

from __future__ import annotations

from yamlsplit.lexer.modes import (
    BLOCK_SCALAR_INDICATORS,
    FLOW_CLOSE,
    FLOW_OPEN,
    PROPERTY_INDICATORS,
    QUOTE_MODES,
    WHITESPACE,
    LexerMode,
)


class NormalScannerMixin:
    """Mixin providing NORMAL mode line scanning.

    Walks one line left to right, tracking only whether the current position
    is where a new node may begin. Quotes and block scalar headers are
    significant only at such positions; anywhere else they are plain scalar
    text ("it's", "a > b"). A line that leaves a scalar open switches the
    lexer into the matching mode.

    Two pieces of state outlive the line:
    - _flow_depth: open "[" / "{" not yet closed
    - _plain_indent: owner indentation of a plain scalar that may continue
      on the next line, or None

    """

    # These will be set by the Lexer class
    _mode: LexerMode
    _flow_depth: int
    _plain_indent: int | None

    def _find_quote_end(self, text: str, start: int, quote: str) -> int:
        """Find closing quote. Implemented by QuoteClassifierMixin."""
        raise NotImplementedError

    def _match_block_header(self, text: str, pos: int) -> tuple[str, int | None] | None:
        """Match block scalar header. Implemented by BlockScalarClassifierMixin."""
        raise NotImplementedError

    def _enter_block_scalar(self, style: str, explicit: int | None, parent_indent: int) -> None:
        """Switch to BLOCK_SCALAR mode. Implemented by BlockScalarScannerMixin."""
        raise NotImplementedError

    def _scan_normal(
        self,
        text: str,
        pos: int = 0,
        *,
        node_start: bool = True,
        parent_indent: int | None = None,
    ) -> None:
        """Scan a line (or the rest of one) under NORMAL rules.

        Args:
            text: Line content with the line break stripped
            pos: Position to start scanning from
            node_start: Whether a node may begin at pos
            parent_indent: Indentation of the node owning this line; defaults
                to the line's leading-space count
        """
        if parent_indent is None:
            parent_indent = len(text) - len(text.lstrip(" "))

        self._plain_indent = None
        text_len = len(text)
        in_plain = False

        while pos < text_len:
            char = text[pos]

            if char in WHITESPACE:
                pos += 1
                continue

            if char == "#" and (pos == 0 or text[pos - 1] in WHITESPACE):
                return

            if node_start:
                if char in QUOTE_MODES:
                    close = self._find_quote_end(text, pos + 1, char)
                    if close == -1:
                        self._mode = QUOTE_MODES[char]
                        return
                    pos = close + 1
                    node_start = False
                    in_plain = False
                    continue

                if char in BLOCK_SCALAR_INDICATORS:
                    header = self._match_block_header(text, pos)
                    if header is not None:
                        style, explicit = header
                        self._enter_block_scalar(style, explicit, parent_indent)
                        return

                if char in PROPERTY_INDICATORS:
                    # Tags and anchors precede the node they decorate
                    while pos < text_len and text[pos] not in WHITESPACE:
                        pos += 1
                    continue

                if char in "-?" and self._is_indicator_at(text, pos):
                    pos += 1
                    continue

                if char in FLOW_OPEN:
                    self._flow_depth += 1
                    pos += 1
                    continue

            if char == ":" and self._is_indicator_at(text, pos):
                node_start = True
                in_plain = False
                pos += 1
                continue

            if self._flow_depth:
                if char == ",":
                    node_start = True
                    in_plain = False
                    pos += 1
                    continue
                if char in FLOW_CLOSE:
                    self._flow_depth -= 1
                    node_start = False
                    in_plain = False
                    pos += 1
                    continue

            node_start = False
            in_plain = True
            pos += 1

        if in_plain:
            self._plain_indent = parent_indent

    def _continues_plain(self, text: str) -> bool:
        """Check if a line continues the plain scalar left open by the last line.

        Inside a flow collection any line does; in block context the line
        must be indented past the scalar's owner.
        """
        if self._plain_indent is None:
            return False
        if self._flow_depth:
            return True
        indent = len(text) - len(text.lstrip(" "))
        return indent > self._plain_indent

    def _is_indicator_at(self, text: str, pos: int) -> bool:
        """Check if the character at pos is followed by whitespace or end of line."""
        nxt = pos + 1
        return nxt == len(text) or text[nxt] in WHITESPACE
