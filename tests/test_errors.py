import logging

import pytest

from chatclient.errors import (
    ChatClientError,
    NetworkError,
    ParsingError,
    classify_error,
    log_error,
)


def test_error_data_is_copied():
    data = {"line": "msg"}
    err = ParsingError("bad line", data=data)
    data["line"] = "changed"
    assert err.data == {"line": "msg"}
    assert ChatClientError("plain").data == {}


@pytest.mark.parametrize(
    ("error", "category"),
    [
        (NetworkError("down"), "network"),
        (ConnectionRefusedError("refused"), "network"),
        (ParsingError("bad"), "parsing"),
        (ChatClientError("odd"), "internal"),
        (RuntimeError("???"), "unknown"),
    ],
)
def test_classify_error(error, category):
    assert classify_error(error) == category


def test_log_error_includes_message_and_level(caplog):
    caplog.set_level(logging.WARNING)

    log_error("Dropped malformed line", ParsingError("no text", data={"line": "msg"}), level=logging.WARNING)

    record = caplog.records[-1]
    assert record.levelno == logging.WARNING
    assert "Dropped malformed line: no text" in record.getMessage()


def test_log_error_defaults_to_error_level(caplog):
    caplog.set_level(logging.ERROR)

    log_error("Connect failed", OSError("refused"), context={"host": "h"})

    assert caplog.records[-1].levelno == logging.ERROR
