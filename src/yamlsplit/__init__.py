"""
yamlsplit: streaming splitter for multi-document YAML streams

Splits a stream of concatenated YAML documents into the exact text of each
document, one at a time, without holding more than one document in memory.
"---" and "..." are recognised as markers only at column zero and outside
quoted and block scalars, so a "---" inside a string never splits a
document.

Quick Start:
    >>> from yamlsplit import split_documents
    >>> split_documents("hello: world\\n---\\nfoo: bar\\n")
    ['hello: world\\n', '---\\nfoo: bar\\n']

    >>> # Lazily, over a file
    >>> from yamlsplit import iter_documents
    >>> with open("stream.yaml", "rb") as f:
    ...     for doc in iter_documents(f, source_file="stream.yaml"):
    ...         handle(doc)

    >>> # Straight to JSON
    >>> from yamlsplit import YamlToJson
    >>> YamlToJson().document_to_string("hello: world")
    '{"hello":"world"}'

Command line:
    yaml2json [--pretty] [--error silent|stderr|json] [FILE ...]
"""

from yamlsplit.accumulator import DocumentAccumulator
from yamlsplit.config import (
    ErrorStyle,
    OutputStyle,
    StreamConfig,
    get_stream_config,
    reset_stream_config,
    set_stream_config,
    stream_config_context,
)
from yamlsplit.convert import YamlToJson
from yamlsplit.errors import ConfigError, ConversionError, StreamReadError, YamlSplitError
from yamlsplit.lexer import Lexer, LexerMode, LineKind
from yamlsplit.location import DocumentSpan
from yamlsplit.profiling import SplitAccumulator, get_split_accumulator, profiled_split
from yamlsplit.reader import LineReader
from yamlsplit.splitter import DocumentIterator, iter_documents, split_documents

__version__ = "0.1.0"

__all__ = [
    # Splitting
    "DocumentIterator",
    "iter_documents",
    "split_documents",
    # Building blocks
    "DocumentAccumulator",
    "DocumentSpan",
    "Lexer",
    "LexerMode",
    "LineKind",
    "LineReader",
    # Conversion
    "YamlToJson",
    # Configuration
    "ErrorStyle",
    "OutputStyle",
    "StreamConfig",
    "get_stream_config",
    "reset_stream_config",
    "set_stream_config",
    "stream_config_context",
    # Profiling
    "SplitAccumulator",
    "get_split_accumulator",
    "profiled_split",
    # Errors
    "ConfigError",
    "ConversionError",
    "StreamReadError",
    "YamlSplitError",
    # Version
    "__version__",
]
