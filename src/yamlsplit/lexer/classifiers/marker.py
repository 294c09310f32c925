"""Document marker classifier mixin."""

from __future__ import annotations

from yamlsplit.lexer.modes import BOM, END_MARKER, START_MARKER, WHITESPACE, LineKind


class MarkerClassifierMixin:
    """Mixin providing document marker and prologue line classification."""

    def _classify_marker(self, text: str) -> LineKind | None:
        """Try to classify a line as a document marker.

        A marker is "---" or "..." at column zero followed by whitespace or
        the end of the line. Whatever follows the whitespace (a comment, a
        node such as "--- |" or "--- !tag") does not change the result.
        "---x", " ---" and "'---'" are not markers.

        Args:
            text: Full line with the line break stripped

        Returns:
            START_MARKER, END_MARKER, or None for any other line.
        """
        if text.startswith(BOM):
            text = text[1:]
        if len(text) < 3:
            return None

        head = text[:3]
        if head == START_MARKER:
            kind = LineKind.START_MARKER
        elif head == END_MARKER:
            kind = LineKind.END_MARKER
        else:
            return None

        if len(text) == 3 or text[3] in WHITESPACE:
            return kind
        return None

    def _is_prologue_line(self, text: str, in_document: bool) -> bool:
        """Check if a line could belong to a document prologue.

        Blank lines and comment lines always qualify. Directive lines ("%"
        at column zero) qualify only while no document content has been seen,
        since inside a document they are plain content.

        Args:
            text: Full line with the line break stripped
            in_document: Whether the current buffer already holds content

        Returns:
            True for blank, comment and (outside documents) directive lines.
        """
        if text.startswith(BOM):
            text = text[1:]
        stripped = text.lstrip(WHITESPACE)
        if not stripped or stripped[0] == "#":
            return True
        return not in_document and text[0] == "%"
