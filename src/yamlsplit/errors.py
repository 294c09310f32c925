"""Exception classes for yamlsplit.

Provides standardized exceptions for error handling throughout yamlsplit.
The scanner never raises for malformed YAML; only stream failures and
converter failures surface as errors.
"""

from __future__ import annotations


class YamlSplitError(Exception):
    """Base exception for all yamlsplit errors.

    Subclass this for specific error categories.
    """

    pass


class StreamReadError(YamlSplitError):
    """Error reading or decoding the underlying input stream.

    Raised by the line reader when the stream raises OSError or yields bytes
    that cannot be decoded. Iteration over documents stops and the partially
    accumulated document is discarded.
    """

    def __init__(self, message: str, source_file: str | None = None) -> None:
        """Initialize stream read error.

        Args:
            message: Error description
            source_file: Path of the stream being read (optional)
        """
        self.message = message
        self.source_file = source_file
        location = f"{source_file}: " if source_file else ""
        super().__init__(f"{location}{message}")


class ConversionError(YamlSplitError):
    """Error converting one YAML document to JSON.

    Raised when the YAML loader rejects a document or the loaded value
    cannot be represented as JSON.
    """

    def __init__(
        self,
        message: str,
        index: int | None = None,
        lineno: int | None = None,
        source_file: str | None = None,
    ) -> None:
        """Initialize conversion error with optional location.

        Args:
            message: Error description
            index: 0-based position of the document in its stream
            lineno: Line where the document starts (1-indexed)
            source_file: Path to source file (optional)
        """
        self.message = message
        self.index = index
        self.lineno = lineno
        self.source_file = source_file

        location = ""
        if source_file:
            location = f"{source_file}:"
        if lineno is not None:
            location += f"{lineno}:"
        if location:
            location = location.rstrip(":") + " "

        super().__init__(f"{location}{message}")


class ConfigError(YamlSplitError):
    """Invalid configuration value."""

    def __init__(self, field: str, message: str) -> None:
        """Initialize config error.

        Args:
            field: Name of the offending StreamConfig field
            message: Description of the problem
        """
        self.field = field
        super().__init__(f"Config '{field}': {message}")
