"""YAML-to-JSON conversion of split documents.

Each document produced by the splitter is loaded on its own with PyYAML's
safe loader and dumped with the standard json module. Because documents are
converted independently, one malformed document never prevents the others
from being converted.

Timestamps are not resolved: "2001-12-14" stays a string, as it was written.

Example:
    >>> YamlToJson().document_to_string("hello: world")
    '{"hello":"world"}'
    >>> print(YamlToJson(OutputStyle.PRETTY).document_to_string("a: [1, 2]"))
    {
      "a": [
        1,
        2
      ]
    }

"""

from __future__ import annotations

import base64
import datetime
import json
from collections.abc import Callable
from typing import Any, TextIO

import yaml

from yamlsplit.config import OutputStyle, get_stream_config
from yamlsplit.errors import ConversionError
from yamlsplit.location import DocumentSpan
from yamlsplit.splitter import DocumentIterator
from yamlsplit.utils.logger import get_logger

logger = get_logger(__name__)

_TIMESTAMP_TAG = "tag:yaml.org,2002:timestamp"


class JsonSafeLoader(yaml.SafeLoader):
    """SafeLoader that leaves implicit timestamps as plain strings."""


JsonSafeLoader.yaml_implicit_resolvers = {
    first: [(tag, regexp) for tag, regexp in resolvers if tag != _TIMESTAMP_TAG]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}


def _json_default(value: Any) -> Any:
    """Encode values the safe loader can produce but json cannot."""
    if isinstance(value, (datetime.date, datetime.datetime)):
        return value.isoformat()
    if isinstance(value, bytes):
        return base64.b64encode(value).decode("ascii")
    if isinstance(value, (set, frozenset)):
        return sorted(value, key=str)
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


class YamlToJson:
    """Converter from single YAML documents to JSON text.

    Instances are immutable and can be shared.

    """

    __slots__ = ("_style",)

    def __init__(self, style: OutputStyle | None = None) -> None:
        """Initialize converter.

        Args:
            style: Output style; defaults to the active StreamConfig
        """
        self._style = style or get_stream_config().style

    @property
    def style(self) -> OutputStyle:
        return self._style

    def load(self, document: str, span: DocumentSpan | None = None) -> Any:
        """Load one YAML document into Python values.

        Raises:
            ConversionError: If the document is not valid YAML
        """
        try:
            return yaml.load(document, Loader=JsonSafeLoader)
        except yaml.YAMLError as e:
            raise self._error(str(e), span) from e

    def dumps(self, value: Any, span: DocumentSpan | None = None) -> str:
        """Serialize a loaded value to JSON in the configured style.

        Raises:
            ConversionError: If the value has no JSON form (NaN, infinity,
                unsupported mapping keys)
        """
        try:
            if self._style == OutputStyle.PRETTY:
                return json.dumps(value, indent=2, ensure_ascii=False, allow_nan=False, default=_json_default)
            return json.dumps(
                value, separators=(",", ":"), ensure_ascii=False, allow_nan=False, default=_json_default
            )
        except (TypeError, ValueError) as e:
            raise self._error(str(e), span) from e

    def document_to_string(self, document: str, span: DocumentSpan | None = None) -> str:
        """Convert one YAML document to a JSON string.

        Args:
            document: Text of exactly one YAML document
            span: Location of the document, used in error messages

        Returns:
            JSON text without a trailing newline
        """
        return self.dumps(self.load(document, span), span)

    def document_to_writer(
        self, document: str, writer: TextIO, span: DocumentSpan | None = None
    ) -> None:
        """Convert one YAML document and write the JSON to writer."""
        writer.write(self.document_to_string(document, span))

    def convert_stream(
        self,
        source: Any,
        writer: TextIO,
        *,
        source_file: str | None = None,
        on_error: Callable[[ConversionError], None] | None = None,
    ) -> int:
        """Convert every document of a stream, one JSON value per line.

        Blank documents (only blank lines, comments or directives) produce
        no output.

        Args:
            source: Anything DocumentIterator accepts
            writer: Text stream receiving the JSON lines
            source_file: Path used in document spans and error messages
            on_error: Called with each ConversionError; processing then
                continues with the next document. If None, errors propagate.

        Returns:
            Number of documents written

        Raises:
            StreamReadError: If reading the source fails
        """
        written = 0
        documents = DocumentIterator(source, source_file=source_file)
        for document in documents:
            span = documents.location
            if span is not None and span.is_blank:
                continue
            try:
                output = self.document_to_string(document, span)
            except ConversionError as e:
                logger.debug("Document at %s failed to convert: %s", span, e.message)
                if on_error is None:
                    raise
                on_error(e)
                continue
            writer.write(output)
            writer.write("\n")
            written += 1
        return written

    def _error(self, message: str, span: DocumentSpan | None) -> ConversionError:
        if span is None:
            return ConversionError(message)
        return ConversionError(
            message, index=span.index, lineno=span.lineno, source_file=span.source_file
        )
