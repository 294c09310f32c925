"""Tests for ContextVar-based stream configuration."""

import threading

import pytest

from yamlsplit import split_documents
from yamlsplit.config import (
    ErrorStyle,
    OutputStyle,
    StreamConfig,
    get_stream_config,
    reset_stream_config,
    set_stream_config,
    stream_config_context,
)
from yamlsplit.errors import ConfigError


class TestStreamConfig:
    """Field validation and construction."""

    def test_defaults(self) -> None:
        config = StreamConfig()
        assert config.chunk_size == 65536
        assert config.encoding == "utf-8"
        assert config.style == OutputStyle.COMPACT
        assert config.error_style == ErrorStyle.STDERR

    def test_frozen(self) -> None:
        with pytest.raises(AttributeError):
            StreamConfig().chunk_size = 1  # type: ignore[misc]

    @pytest.mark.parametrize("chunk_size", [0, -5])
    def test_rejects_non_positive_chunk_size(self, chunk_size: int) -> None:
        with pytest.raises(ConfigError, match="chunk_size") as exc_info:
            StreamConfig(chunk_size=chunk_size)
        assert exc_info.value.field == "chunk_size"

    def test_rejects_empty_encoding(self) -> None:
        with pytest.raises(ConfigError, match="encoding"):
            StreamConfig(encoding="")

    def test_from_dict(self) -> None:
        config = StreamConfig.from_dict(
            {"style": "pretty", "error_style": "json", "chunk_size": 10, "unknown": 1}
        )
        assert config == StreamConfig(
            chunk_size=10, style=OutputStyle.PRETTY, error_style=ErrorStyle.JSON
        )

    def test_from_dict_accepts_enums(self) -> None:
        assert StreamConfig.from_dict({"style": OutputStyle.PRETTY}).style == OutputStyle.PRETTY

    def test_from_dict_rejects_unknown_value(self) -> None:
        with pytest.raises(ConfigError, match="compact, pretty"):
            StreamConfig.from_dict({"style": "fancy"})


class TestContext:
    """ContextVar behaviour."""

    def setup_method(self) -> None:
        reset_stream_config()

    def teardown_method(self) -> None:
        reset_stream_config()

    def test_set_and_reset(self) -> None:
        set_stream_config(StreamConfig(chunk_size=3))
        assert get_stream_config().chunk_size == 3
        reset_stream_config()
        assert get_stream_config() == StreamConfig()

    def test_context_restores_on_error(self) -> None:
        with pytest.raises(RuntimeError):
            with stream_config_context(StreamConfig(encoding="latin-1")):
                raise RuntimeError
        assert get_stream_config().encoding == "utf-8"

    def test_iterator_reads_config(self) -> None:
        with stream_config_context(StreamConfig(encoding="latin-1", chunk_size=2)):
            assert split_documents(b"a: caf\xe9\n---\nb: 2\n") == ["a: café\n", "---\nb: 2\n"]

    def test_threads_start_with_default(self) -> None:
        seen: list[StreamConfig] = []
        set_stream_config(StreamConfig(chunk_size=7))

        thread = threading.Thread(target=lambda: seen.append(get_stream_config()))
        thread.start()
        thread.join()

        assert seen == [StreamConfig()]
        assert get_stream_config().chunk_size == 7


class TestErrorStyleAlias:
    """'none' is another spelling of 'silent'."""

    def test_enum_lookup(self) -> None:
        assert ErrorStyle("none") is ErrorStyle.SILENT

    def test_from_dict(self) -> None:
        assert StreamConfig.from_dict({"error_style": "none"}).error_style == ErrorStyle.SILENT

    def test_unknown_still_rejected(self) -> None:
        with pytest.raises(ValueError):
            ErrorStyle("loud")
