"""Tests for package logging."""

import logging

import pytest

from yamlsplit import split_documents
from yamlsplit.utils.logger import configure_logging, get_logger


def test_get_logger_prefixes_name() -> None:
    assert get_logger("reader").name == "yamlsplit.reader"
    assert get_logger("yamlsplit.splitter").name == "yamlsplit.splitter"


def test_configure_logging_sets_level() -> None:
    package_logger = logging.getLogger("yamlsplit")
    configure_logging(verbose=True)
    assert package_logger.level == logging.DEBUG
    configure_logging()
    assert package_logger.level == logging.WARNING
    assert len(package_logger.handlers) == 1


def test_documents_logged_at_debug(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.DEBUG, logger="yamlsplit")
    split_documents("a: 1\n---\nb: 2\n", source_file="s.yaml")

    messages = [r.getMessage() for r in caplog.records if r.name == "yamlsplit.splitter"]
    assert messages == [
        "Document 0 at s.yaml:1: 1 lines, 5 characters",
        "Document 1 at s.yaml:2: 2 lines, 9 characters",
    ]


def test_unterminated_scalar_logged(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.DEBUG, logger="yamlsplit")
    split_documents("a: 'open\n")
    assert any("inside single_quoted scalar" in r.getMessage() for r in caplog.records)
