"""Tests for exception formatting."""

import pytest

from yamlsplit.errors import ConfigError, ConversionError, StreamReadError, YamlSplitError


@pytest.mark.parametrize(
    "error",
    [StreamReadError("x"), ConversionError("x"), ConfigError("f", "x")],
)
def test_all_share_base(error: YamlSplitError) -> None:
    assert isinstance(error, YamlSplitError)


class TestStreamReadError:
    def test_without_file(self) -> None:
        assert str(StreamReadError("read failed")) == "read failed"

    def test_with_file(self) -> None:
        error = StreamReadError("read failed", "in.yaml")
        assert str(error) == "in.yaml: read failed"
        assert error.message == "read failed"


class TestConversionError:
    @pytest.mark.parametrize(
        "kwargs,expected",
        [
            ({}, "bad"),
            ({"lineno": 4}, "4 bad"),
            ({"source_file": "a.yaml"}, "a.yaml bad"),
            ({"source_file": "a.yaml", "lineno": 4, "index": 1}, "a.yaml:4 bad"),
        ],
    )
    def test_location_prefix(self, kwargs: dict, expected: str) -> None:
        assert str(ConversionError("bad", **kwargs)) == expected


def test_config_error_names_field() -> None:
    error = ConfigError("chunk_size", "must be positive")
    assert str(error) == "Config 'chunk_size': must be positive"
    assert error.field == "chunk_size"
