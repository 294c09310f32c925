"""ContextVar-based stream configuration for yamlsplit.

Provides context-local configuration using Python's ContextVars (PEP 567).
Config is set once per command-line run (or per caller context) and read by
the document iterator and the JSON converter.

Usage:
    from yamlsplit.config import StreamConfig, stream_config_context

    with stream_config_context(StreamConfig(chunk_size=4096)):
        docs = split_documents(handle)

Explicit constructor arguments always win over the active config.
"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
from enum import Enum
from typing import Any

from yamlsplit.errors import ConfigError


class OutputStyle(Enum):
    """JSON output formats for the converter.

    - COMPACT: one line, no insignificant whitespace: {"hello":"world"}
    - PRETTY: multi-line with two-space indentation
    """

    COMPACT = "compact"
    PRETTY = "pretty"


class ErrorStyle(Enum):
    """How conversion errors are reported by the command-line front end.

    - SILENT: drop the error ("none" is accepted as an alias)
    - STDERR: print the message to stderr
    - JSON: print {"yaml-error": "..."} to stdout in place of the document
    """

    SILENT = "silent"
    STDERR = "stderr"
    JSON = "json"

    @classmethod
    def _missing_(cls, value: object) -> "ErrorStyle | None":
        if value == "none":
            return cls.SILENT
        return None


# Spellings accepted on the command line and in config dicts
ERROR_STYLE_NAMES = (*(style.value for style in ErrorStyle), "none")


@dataclass(frozen=True, slots=True)
class StreamConfig:
    """Immutable stream configuration.

    Attributes:
        chunk_size: Number of characters/bytes requested per read
        encoding: Encoding used to decode byte streams
        style: JSON output style for the converter
        error_style: Error reporting style for the command-line front end

    """

    chunk_size: int = 64 * 1024
    encoding: str = "utf-8"
    style: OutputStyle = OutputStyle.COMPACT
    error_style: ErrorStyle = ErrorStyle.STDERR

    def __post_init__(self) -> None:
        if self.chunk_size < 1:
            raise ConfigError("chunk_size", f"must be positive, got {self.chunk_size}")
        if not self.encoding:
            raise ConfigError("encoding", "must not be empty")

    @classmethod
    def from_dict(cls, config_dict: dict[str, Any]) -> "StreamConfig":
        """Create StreamConfig from dictionary.

        Only includes keys that are valid StreamConfig fields; unknown keys
        are silently ignored. Enum fields accept their string values.

        Args:
            config_dict: Dictionary with config values.

        Returns:
            New StreamConfig instance with values from dict.

        Raises:
            ConfigError: If an enum field has an unknown value.

        Example:
            >>> config = StreamConfig.from_dict({"style": "pretty", "other": 1})
            >>> config.style
            <OutputStyle.PRETTY: 'pretty'>

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}

        for name, enum_type in (("style", OutputStyle), ("error_style", ErrorStyle)):
            value = filtered.get(name)
            if isinstance(value, str):
                try:
                    filtered[name] = enum_type(value)
                except ValueError:
                    choices = ", ".join(m.value for m in enum_type)
                    raise ConfigError(name, f"expected one of {choices}, got {value!r}") from None

        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: StreamConfig = StreamConfig()

_stream_config: ContextVar[StreamConfig] = ContextVar(
    "stream_config",
    default=_DEFAULT_CONFIG,
)


def get_stream_config() -> StreamConfig:
    """Get the active stream configuration for this context."""
    return _stream_config.get()


def set_stream_config(config: StreamConfig) -> None:
    """Set stream configuration for the current context.

    Args:
        config: StreamConfig instance to use for this context.
    """
    _stream_config.set(config)


def reset_stream_config() -> None:
    """Reset to the module-level default configuration."""
    _stream_config.set(_DEFAULT_CONFIG)


@contextmanager
def stream_config_context(config: StreamConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Restores the previous config even if an exception is raised.

    Args:
        config: StreamConfig to use within the context.

    Example:
        >>> with stream_config_context(StreamConfig(style=OutputStyle.PRETTY)):
        ...     get_stream_config().style
        <OutputStyle.PRETTY: 'pretty'>

    """
    previous = _stream_config.get()
    _stream_config.set(config)
    try:
        yield
    finally:
        _stream_config.set(previous)


__all__ = [
    "ERROR_STYLE_NAMES",
    "ErrorStyle",
    "OutputStyle",
    "StreamConfig",
    "get_stream_config",
    "reset_stream_config",
    "set_stream_config",
    "stream_config_context",
]
