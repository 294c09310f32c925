"""SplitAccumulator: opt-in metrics for document splitting.

This module provides accumulated metrics while streams are split:
- Documents produced and characters consumed
- Size of the largest document
- Peak number of characters buffered at once

Zero overhead when disabled (get_split_accumulator() returns None).

Example:
    from yamlsplit import split_documents
    from yamlsplit.profiling import profiled_split

    with profiled_split() as metrics:
        docs = split_documents(stream)

    print(metrics.summary())
    # {"total_ms": 0.4, "documents": 3, "characters": 120, ...}

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar, Token
from dataclasses import dataclass, field
from time import perf_counter
from typing import Any


@dataclass
class SplitAccumulator:
    """Accumulated metrics during splitting.

    Attributes:
        start_time: Profiling start timestamp.
        documents: Number of documents produced.
        characters: Total characters across produced documents.
        largest_document: Size of the largest document produced.
        peak_buffered: Largest number of characters held in a document
            buffer at any moment.

    """

    start_time: float = field(default_factory=perf_counter)
    documents: int = 0
    characters: int = 0
    largest_document: int = 0
    peak_buffered: int = 0

    def record_document(self, size: int) -> None:
        """Record one produced document.

        Args:
            size: Length of the document text.

        """
        self.documents += 1
        self.characters += size
        if size > self.largest_document:
            self.largest_document = size

    def record_buffered(self, size: int) -> None:
        """Record the current buffer size, keeping the peak."""
        if size > self.peak_buffered:
            self.peak_buffered = size

    @property
    def total_duration_ms(self) -> float:
        """Total profiling duration in milliseconds."""
        return (perf_counter() - self.start_time) * 1000

    def summary(self) -> dict[str, Any]:
        """Get summary of split metrics.

        Returns:
            Dict with total_ms, documents, characters, largest_document,
            peak_buffered.

        """
        return {
            "total_ms": round(self.total_duration_ms, 2),
            "documents": self.documents,
            "characters": self.characters,
            "largest_document": self.largest_document,
            "peak_buffered": self.peak_buffered,
        }


_accumulator: ContextVar[SplitAccumulator | None] = ContextVar(
    "split_accumulator",
    default=None,
)


def get_split_accumulator() -> SplitAccumulator | None:
    """Get current accumulator (None if profiling disabled)."""
    return _accumulator.get()


@contextmanager
def profiled_split() -> Iterator[SplitAccumulator]:
    """Context manager for profiled splitting.

    Creates a SplitAccumulator and makes it available via
    get_split_accumulator() for the duration of the with block.

    Yields:
        SplitAccumulator that will be populated while documents are produced.

    """
    acc = SplitAccumulator()
    token: Token[SplitAccumulator | None] = _accumulator.set(acc)
    try:
        yield acc
    finally:
        _accumulator.reset(token)
