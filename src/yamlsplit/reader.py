"""Chunked line reader over any sequential input.

Turns a str, bytes, or file-like object into a lazy stream of lines, each
with its terminator. Only "read next chunk" semantics are required of the
source; nothing is ever rewound, and the reader holds only the unfinished
tail of the last chunk.

Byte sources are decoded incrementally, so a multi-byte character split
across two chunks decodes correctly.

Thread Safety:
LineReader instances are single-use. Create one per stream.

"""

from __future__ import annotations

import codecs
import io
from collections.abc import Iterator
from typing import Any

from yamlsplit.errors import ConfigError, StreamReadError


class LineReader:
    """Lazy line iterator over a sequential source.

    Usage:
            >>> list(LineReader("a\\nb"))
            ['a\\n', 'b']
            >>> list(LineReader(b"x: 1\\r\\n"))
            ['x: 1\\r\\n']

    """

    __slots__ = ("_read", "_decoder", "_chunk_size", "_source_file")

    def __init__(
        self,
        source: Any,
        *,
        chunk_size: int = 64 * 1024,
        encoding: str = "utf-8",
        source_file: str | None = None,
    ) -> None:
        """Initialize reader.

        Args:
            source: str, bytes, bytearray, or an object with read(n)
            chunk_size: Maximum size requested per read
            encoding: Encoding for byte sources
            source_file: Path used in error messages

        Raises:
            TypeError: If source is not readable
            ConfigError: If encoding is unknown
        """
        if isinstance(source, str):
            source = io.StringIO(source)
        elif isinstance(source, (bytes, bytearray, memoryview)):
            source = io.BytesIO(bytes(source))

        # read1 returns whatever is buffered instead of blocking for a full chunk
        read = getattr(source, "read1", None) or getattr(source, "read", None)
        if read is None:
            raise TypeError(f"expected str, bytes or a readable object, got {type(source).__name__}")

        try:
            decoder_cls = codecs.getincrementaldecoder(encoding)
        except LookupError:
            raise ConfigError("encoding", f"unknown encoding {encoding!r}") from None

        self._read = read
        self._decoder = decoder_cls(errors="strict")
        self._chunk_size = chunk_size
        self._source_file = source_file

    def __iter__(self) -> Iterator[str]:
        """Yield lines in order, terminators included.

        The last line is yielded without a terminator if the source does not
        end with one.

        Raises:
            StreamReadError: If the source raises OSError or cannot be decoded
        """
        partial: list[str] = []
        for chunk in self._chunks():
            start = 0
            idx = chunk.find("\n")
            while idx != -1:
                if partial:
                    partial.append(chunk[start : idx + 1])
                    yield "".join(partial)
                    partial.clear()
                else:
                    yield chunk[start : idx + 1]
                start = idx + 1
                idx = chunk.find("\n", start)
            if start < len(chunk):
                partial.append(chunk[start:])

        if partial:
            yield "".join(partial)

    def _chunks(self) -> Iterator[str]:
        """Yield decoded chunks until the source is exhausted."""
        while True:
            try:
                data = self._read(self._chunk_size)
            except OSError as e:
                raise StreamReadError(f"read failed: {e}", self._source_file) from e

            if isinstance(data, (bytes, bytearray)):
                try:
                    text = self._decoder.decode(data, final=not data)
                except UnicodeDecodeError as e:
                    raise StreamReadError(f"invalid encoded data: {e}", self._source_file) from e
            else:
                text = data

            if text:
                yield text
            if not data:
                return
