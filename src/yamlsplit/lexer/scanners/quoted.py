"""Quoted scalar mode scanner mixin."""

from __future__ import annotations

from yamlsplit.lexer.modes import LexerMode


class QuotedScannerMixin:
    """Mixin providing SINGLE_QUOTED / DOUBLE_QUOTED mode scanning logic."""

    # These will be set by the Lexer class
    _mode: LexerMode

    def _find_quote_end(self, text: str, start: int, quote: str) -> int:
        """Find closing quote. Implemented by QuoteClassifierMixin."""
        raise NotImplementedError

    def _scan_normal(
        self,
        text: str,
        pos: int = 0,
        *,
        node_start: bool = True,
        parent_indent: int | None = None,
    ) -> None:
        """Scan under NORMAL rules. Implemented by NormalScannerMixin."""
        raise NotImplementedError

    def _scan_quoted_content(self, text: str) -> None:
        """Scan one line while inside a multi-line quoted scalar.

        If the line closes the scalar, the lexer returns to NORMAL mode and
        the remainder of the line is scanned under NORMAL rules (it may
        open another scalar). Otherwise the mode is unchanged.

        Args:
            text: Full line with the line break stripped
        """
        quote = "'" if self._mode == LexerMode.SINGLE_QUOTED else '"'
        close = self._find_quote_end(text, 0, quote)
        if close == -1:
            return

        self._mode = LexerMode.NORMAL
        self._scan_normal(text, close + 1, node_start=False)
