"""Unit tests for the logging utility."""

from __future__ import annotations

import io
import json
import logging

from streamauth.core.logger import JSONFormatter, configure_logging


def test_configure_logging_sets_level() -> None:
    """``configure_logging`` should set the root logger level."""

    # Act
    configure_logging("DEBUG")

    # Assert
    assert logging.getLogger().level == logging.DEBUG


def test_json_formatter_promotes_whitelisted_extras() -> None:
    record = logging.LogRecord("streamauth", logging.INFO, __file__, 1, "auth.logout", None, None)
    record.jti = "j-1"
    record.subject = "42"
    record.token = "never-logged"

    payload = json.loads(JSONFormatter().format(record))

    assert payload["message"] == "auth.logout"
    assert payload["jti"] == "j-1"
    assert payload["subject"] == "42"
    assert "token" not in payload


def test_configure_logging_writes_json_lines() -> None:
    root = logging.getLogger()
    saved = (root.handlers[:], root.level)
    stream = io.StringIO()
    try:
        configure_logging("INFO", stream=stream)
        logging.getLogger("streamauth.events").info(
            "auth.token.issued", extra={"origin": "local"}
        )
    finally:
        root.handlers[:] = saved[0]
        root.setLevel(saved[1])

    line = json.loads(stream.getvalue().strip().splitlines()[-1])
    assert line["message"] == "auth.token.issued"
    assert line["origin"] == "local"
    assert line["request_id"] is None
