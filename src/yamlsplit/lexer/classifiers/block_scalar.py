"""Block scalar classifier mixin."""

from __future__ import annotations

from yamlsplit.lexer.modes import (
    CHOMPING_INDICATORS,
    INDENTATION_INDICATORS,
    WHITESPACE,
    LineKind,
)


class BlockScalarClassifierMixin:
    """Mixin providing block scalar header and extent classification."""

    # These will be set by the Lexer class
    _block_parent_indent: int
    _block_indent: int | None

    def _classify_marker(self, text: str) -> LineKind | None:
        """Classify document markers. Implemented by MarkerClassifierMixin."""
        raise NotImplementedError

    def _match_block_header(self, text: str, pos: int) -> tuple[str, int | None] | None:
        """Try to match a block scalar header starting at pos.

        A header is "|" or ">" followed by at most one indentation indicator
        (1-9) and at most one chomping indicator (+ or -) in either order,
        then only whitespace and an optional comment.

        Args:
            text: Line content with the line break stripped
            pos: Position of the "|" or ">" character

        Returns:
            (style, explicit_indent) if valid header, None otherwise.
        """
        style = text[pos]
        text_len = len(text)
        explicit: int | None = None
        chomping = False
        idx = pos + 1

        while idx < text_len:
            char = text[idx]
            if char in INDENTATION_INDICATORS and explicit is None:
                explicit = int(char)
            elif char in CHOMPING_INDICATORS and not chomping:
                chomping = True
            else:
                break
            idx += 1

        if idx == text_len:
            return style, explicit
        if text[idx] not in WHITESPACE:
            return None

        rest = text[idx:].lstrip(WHITESPACE)
        if rest and rest[0] != "#":
            return None
        return style, explicit

    def _is_block_scalar_end(self, text: str) -> bool:
        """Check if a line ends the current block scalar.

        Blank (whitespace-only) lines never end a block scalar. A non-blank
        line ends it when it is indented less than the content indentation,
        or, while the content indentation is not yet known, when it is not
        indented past the parent node. A document marker at column zero
        always ends it; it can only be body text of a top-level scalar whose
        content sits at column zero, where YAML forbids it.

        Args:
            text: Full line with the line break stripped

        Returns:
            True if the line is outside the block scalar body.
        """
        stripped = text.lstrip(" ")
        if not stripped.strip(WHITESPACE):
            return False

        indent = len(text) - len(stripped)
        if indent == 0 and self._classify_marker(text) is not None:
            return True
        if self._block_indent is None:
            return indent <= self._block_parent_indent
        return indent < self._block_indent
