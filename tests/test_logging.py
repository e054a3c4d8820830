"""Tests for localcas.core.logging."""

import logging

import pytest

from localcas.core.logging import configure_logging, get_logger


def test_events_go_to_stderr(capsys: pytest.CaptureFixture[str]) -> None:
    configure_logging(level="DEBUG")
    get_logger("localcas.test").info("object_stored", digest="abc", size=3)

    captured = capsys.readouterr()
    assert captured.out == ""
    assert "object_stored" in captured.err
    assert "digest=abc" in captured.err
    assert "size=3" in captured.err


def test_level_filters_debug(capsys: pytest.CaptureFixture[str]) -> None:
    configure_logging(level="WARNING")
    get_logger("localcas.test").debug("hidden")

    assert "hidden" not in capsys.readouterr().err


def test_stdlib_records_share_the_handler(capsys: pytest.CaptureFixture[str]) -> None:
    configure_logging(level="INFO")
    logging.getLogger("localcas.plain").warning("plain %s", "record")

    assert "plain record" in capsys.readouterr().err
