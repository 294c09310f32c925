"""Streaming document iterator.

Pulls lines from the input, classifies them with the Lexer, and hands
completed documents to the caller one at a time. Between documents the
iterator is suspended: nothing past the line that completed the current
document has been read.

Thread Safety:
DocumentIterator instances are single-use. Create one per stream.
All state is instance-local; configuration and metrics come from
ContextVars.

"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

from yamlsplit.accumulator import DocumentAccumulator
from yamlsplit.config import get_stream_config
from yamlsplit.lexer import Lexer, LexerMode
from yamlsplit.location import DocumentSpan
from yamlsplit.profiling import get_split_accumulator
from yamlsplit.reader import LineReader
from yamlsplit.utils.logger import get_logger

logger = get_logger(__name__)


class DocumentIterator:
    """Iterator over the YAML documents of a stream.

    Each item is the exact text of one document, suitable for a YAML loader.
    A document-start marker belongs to the document it starts; a
    document-end marker belongs to the document it ends. Concatenating all
    items reproduces the input.

    Usage:
            >>> docs = DocumentIterator("hello: world\\n---\\nhello: python\\n")
            >>> next(docs)
            'hello: world\\n'
            >>> next(docs)
            '---\\nhello: python\\n'
            >>> next(docs, None) is None
            True

    Once exhausted (or after a StreamReadError) the iterator stays
    exhausted. It cannot be rewound; build a new one over a fresh stream.

    Memory: O(largest document), not O(stream).

    """

    __slots__ = ("_reader", "_lexer", "_accumulator", "_documents")

    def __init__(
        self,
        source: Any,
        *,
        source_file: str | None = None,
        chunk_size: int | None = None,
        encoding: str | None = None,
    ) -> None:
        """Initialize iterator over a source.

        Args:
            source: str, bytes, or an object with read(n) returning str or bytes
            source_file: Path recorded in document spans and error messages
            chunk_size: Read size; defaults to the active StreamConfig
            encoding: Encoding for byte sources; defaults to the active StreamConfig
        """
        config = get_stream_config()
        self._reader = LineReader(
            source,
            chunk_size=chunk_size or config.chunk_size,
            encoding=encoding or config.encoding,
            source_file=source_file,
        )
        self._lexer = Lexer()
        self._accumulator = DocumentAccumulator(source_file)
        self._documents = self._scan()

    def __iter__(self) -> DocumentIterator:
        return self

    def __next__(self) -> str:
        """Return the next document.

        Raises:
            StopIteration: When no documents remain (on every later call too)
            StreamReadError: If the underlying stream fails; the partially
                read document is discarded and iteration ends
        """
        return next(self._documents)

    @property
    def location(self) -> DocumentSpan | None:
        """Span of the most recently returned document (None before the first)."""
        return self._accumulator.last_span

    @property
    def mode(self) -> LexerMode:
        """Lexical mode at the current read position."""
        return self._lexer.mode

    def _scan(self) -> Iterator[str]:
        """Drive reader, lexer and accumulator; yield completed documents."""
        lexer = self._lexer
        accumulator = self._accumulator
        metrics = get_split_accumulator()

        for line in self._reader:
            kind = lexer.classify_line(line, in_document=accumulator.has_content)
            document = accumulator.feed(line, kind)
            if document is None:
                if metrics is not None:
                    metrics.record_buffered(len(accumulator))
                continue
            self._record(document, metrics)
            yield document

        if accumulator:
            if lexer.mode != LexerMode.NORMAL:
                logger.debug("Stream ended inside %s scalar", lexer.mode.name.lower())
            document = accumulator.flush()
            self._record(document, metrics)
            yield document

    def _record(self, document: str, metrics: Any) -> None:
        span = self._accumulator.last_span
        logger.debug(
            "Document %d at %s: %d lines, %d characters",
            span.index,
            span,
            span.end_lineno - span.lineno + 1,
            span.length,
        )
        if metrics is not None:
            metrics.record_buffered(len(document))
            metrics.record_document(len(document))


def iter_documents(source: Any, *, source_file: str | None = None) -> DocumentIterator:
    """Create a DocumentIterator over source.

    Example:
        >>> for doc in iter_documents("a: 1\\n...\\nb: 2\\n"):
        ...     print(repr(doc))
        'a: 1\\n...\\n'
        'b: 2\\n'
    """
    return DocumentIterator(source, source_file=source_file)


def split_documents(source: Any, *, source_file: str | None = None) -> list[str]:
    """Split source into a list of document texts.

    Materializes every document; prefer iter_documents() for large streams.
    """
    return list(DocumentIterator(source, source_file=source_file))
