"""Source spans for yielded documents.

Provides DocumentSpan, the position of one document inside its stream.
Used by the converter and the command-line front end to point error
messages at the right place.

Thread Safety:
DocumentSpan is frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class DocumentSpan:
    """Position of one document in the input stream.

    Line numbers are 1-indexed; offsets are 0-based character offsets.
    end_lineno is the last line that belongs to the document, and
    end_offset is exclusive.

    Attributes:
        index: 0-based position of the document in the stream
        lineno: First line of the document
        end_lineno: Last line of the document
        offset: Character offset of the first character
        end_offset: Character offset just past the last character
        is_blank: True when the document holds only blank lines, comments
            and directives (nothing for a loader to produce)
        source_file: Source file path (optional)

    Examples:
            >>> span = DocumentSpan(index=1, lineno=3, end_lineno=4, offset=13, end_offset=25)
            >>> str(span)
            '3'
            >>> str(DocumentSpan(0, 1, 1, 0, 5, source_file="a.yaml"))
            'a.yaml:1'

    """

    index: int
    lineno: int
    end_lineno: int
    offset: int
    end_offset: int
    is_blank: bool = False
    source_file: str | None = None

    def __str__(self) -> str:
        """Format location for error messages.

        Returns:
            Formatted string like "file.yaml:10" or "10"
        """
        if self.source_file:
            return f"{self.source_file}:{self.lineno}"
        return f"{self.lineno}"

    @property
    def length(self) -> int:
        """Number of characters in the document."""
        return self.end_offset - self.offset
