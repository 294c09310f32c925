"""Quoted flow scalar classifier mixin."""

from __future__ import annotations


class QuoteClassifierMixin:
    """Mixin providing closing-quote detection for flow scalars.

    Double-quoted scalars close on an unescaped '"'; a backslash escapes the
    next character. Single-quoted scalars close on a "'" not immediately
    followed by another "'" ("''" is an escaped quote). Neither escape spans
    a line break, so scanning always restarts cleanly on the next line.

    """

    def _find_quote_end(self, text: str, start: int, quote: str) -> int:
        """Find the closing quote of a flow scalar.

        Args:
            text: Line content
            start: Position just after the opening quote, or 0 when the
                scalar was opened on an earlier line
            quote: The quote character (' or ")

        Returns:
            Position of the closing quote, or -1 if the line does not close it.
        """
        if quote == '"':
            return self._find_double_quote_end(text, start)
        return self._find_single_quote_end(text, start)

    def _find_double_quote_end(self, text: str, start: int) -> int:
        idx = text.find('"', start)
        while idx != -1:
            # An odd run of backslashes escapes the quote
            backslashes = 0
            back = idx - 1
            while back >= start and text[back] == "\\":
                backslashes += 1
                back -= 1
            if backslashes % 2 == 0:
                return idx
            idx = text.find('"', idx + 1)
        return -1

    def _find_single_quote_end(self, text: str, start: int) -> int:
        text_len = len(text)
        idx = text.find("'", start)
        while idx != -1:
            if idx + 1 < text_len and text[idx + 1] == "'":
                idx = text.find("'", idx + 2)
                continue
            return idx
        return -1
