"""Block scalar mode scanner mixin."""

from __future__ import annotations

from yamlsplit.lexer.modes import WHITESPACE, LexerMode


class BlockScalarScannerMixin:
    """Mixin providing BLOCK_SCALAR mode scanning logic.

    Consumes body lines of a literal or folded block scalar and detects the
    first line outside the body.

    """

    # These will be set by the Lexer class
    _mode: LexerMode
    _block_style: str
    _block_parent_indent: int
    _block_indent: int | None

    def _is_block_scalar_end(self, text: str) -> bool:
        """Check if line ends the block scalar. Implemented by BlockScalarClassifierMixin."""
        raise NotImplementedError

    def _enter_block_scalar(self, style: str, explicit: int | None, parent_indent: int) -> None:
        """Switch to BLOCK_SCALAR mode after a header.

        Args:
            style: "|" (literal) or ">" (folded)
            explicit: Indentation indicator from the header, if any
            parent_indent: Indentation of the node owning the scalar, -1 for
                a scalar that follows a "---" marker
        """
        self._mode = LexerMode.BLOCK_SCALAR
        self._block_style = style
        self._block_parent_indent = parent_indent
        self._block_indent = parent_indent + explicit if explicit is not None else None

    def _scan_block_scalar_content(self, text: str) -> bool:
        """Scan one line while in BLOCK_SCALAR mode.

        Args:
            text: Full line with the line break stripped

        Returns:
            True if the line is body content. False if the line ends the
            scalar; the lexer is back in NORMAL mode and the caller must
            classify the line again.
        """
        if self._is_block_scalar_end(text):
            self._exit_block_scalar()
            return False

        # The first non-blank body line fixes the content indentation
        if self._block_indent is None:
            stripped = text.lstrip(" ")
            if stripped.strip(WHITESPACE):
                self._block_indent = len(text) - len(stripped)
        return True

    def _exit_block_scalar(self) -> None:
        self._mode = LexerMode.NORMAL
        self._block_style = ""
        self._block_parent_indent = 0
        self._block_indent = None
