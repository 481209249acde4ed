"""
Tests for logging helpers.
"""

import logging

import pytest

from algtrees.utils.logging import configure_logging, log_calls


@log_calls("tests.logging")
def _double(value):
    return value * 2


@log_calls("tests.logging")
def _fail():
    raise RuntimeError("boom")


def test_log_calls_records_call_and_result(caplog):
    with caplog.at_level(logging.DEBUG, logger="tests.logging"):
        assert _double(21) == 42
    assert "_double" in caplog.text
    assert "42" in caplog.text


def test_log_calls_reraises(caplog):
    with caplog.at_level(logging.DEBUG, logger="tests.logging"):
        with pytest.raises(RuntimeError, match="boom"):
            _fail()
    assert any(record.levelno == logging.ERROR for record in caplog.records)


def test_log_calls_keeps_metadata():
    assert _double.__name__ == "_double"


def test_configure_logging_rejects_unknown_level():
    with pytest.raises(ValueError, match="Unknown log level"):
        configure_logging("LOUD")
