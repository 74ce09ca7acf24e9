"""Tests for stdout logging configuration."""

from __future__ import annotations

import json
import logging
from typing import Iterator

import pytest

from packages.errtypes.config import ErrtypesSettings, LoggingSettings
from packages.errtypes.errors import http_status_code, not_found_error
from packages.errtypes.logging import (
    JsonFormatter,
    PlainFormatter,
    configure_logging,
    configure_logging_from_settings,
    get_logger,
)


@pytest.fixture(autouse=True)
def _restore_root_logger() -> Iterator[None]:
    """Drop handlers installed by a test and restore the root level."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    for handler in list(root.handlers):
        if handler not in handlers:
            root.removeHandler(handler)
    root.setLevel(level)


def _record(**extra: object) -> logging.LogRecord:
    record = logging.LogRecord(
        name="errtypes.test",
        level=logging.INFO,
        pathname=__file__,
        lineno=1,
        msg="hello %s",
        args=("world",),
        exc_info=None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_configure_logging_installs_single_stdout_handler() -> None:
    """Repeated configuration should not duplicate handlers."""
    configure_logging(level="debug")
    configure_logging(level="WARNING")

    root = logging.getLogger()
    assert len(root.handlers) == 1
    assert root.level == logging.WARNING
    assert isinstance(root.handlers[0].formatter, JsonFormatter)


def test_json_output_includes_core_and_service_fields(
    capsys: pytest.CaptureFixture[str],
) -> None:
    """JSON lines should carry core fields plus stamped service fields."""
    configure_logging(level="INFO", service="api", environment="test")

    get_logger("errtypes.test").info("hello %s", "world")

    payload = json.loads(capsys.readouterr().out.strip())
    assert payload["level"] == "INFO"
    assert payload["logger"] == "errtypes.test"
    assert payload["message"] == "hello world"
    assert payload["service"] == "api"
    assert payload["environment"] == "test"


def test_json_formatter_renders_classification_fields() -> None:
    """Category and status extras should appear in the JSON payload."""
    payload = json.loads(
        JsonFormatter().format(_record(error_category="not_found", status_code=404))
    )

    assert payload["error_category"] == "not_found"
    assert payload["status_code"] == 404


def test_plain_formatter_appends_sorted_structured_suffix() -> None:
    """Plain output should end with sorted ``key=value`` pairs."""
    line = PlainFormatter().format(_record(status_code=409, error_category="conflict"))

    assert line.endswith("hello world error_category=conflict status_code=409")


def test_plain_formatter_without_fields_is_unchanged() -> None:
    """Records without structured fields should get no suffix."""
    assert PlainFormatter().format(_record()).endswith("errtypes.test hello world")


def test_configure_logging_from_settings_applies_logging_subtree(
    capsys: pytest.CaptureFixture[str],
) -> None:
    """Settings should drive level, format and stamped fields."""
    settings = ErrtypesSettings(
        logging=LoggingSettings(
            level="DEBUG", json_output=False, service="svc", environment="ci"
        )
    )
    configure_logging_from_settings(settings)

    http_status_code(not_found_error("missing"))

    out = capsys.readouterr().out
    assert "DEBUG packages.errtypes.errors.status Resolved HTTP status" in out
    assert "error_category=not_found" in out
    assert "status_code=404" in out
    assert "service=svc" in out
