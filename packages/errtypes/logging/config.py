"""Stdout logging configuration for errtypes consumers.

Library modules only ever obtain loggers through ``get_logger``; handler setup
is left to the application, which calls ``configure_logging`` once at startup.
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import UTC, datetime
from typing import TYPE_CHECKING, Any

from . import fields

if TYPE_CHECKING:
    from packages.errtypes.config import ErrtypesSettings


class StaticFieldsFilter(logging.Filter):
    """Stamp fixed service-level fields onto every record."""

    def __init__(self, values: dict[str, str]) -> None:
        super().__init__()
        self._values = dict(values)

    def filter(self, record: logging.LogRecord) -> bool:
        for key, value in self._values.items():
            if not hasattr(record, key):
                setattr(record, key, value)
        return True


def _structured_fields(record: logging.LogRecord) -> dict[str, Any]:
    """Collect the known structured fields present on one record."""
    return {
        key: getattr(record, key)
        for key in fields.STRUCTURED_FIELDS
        if getattr(record, key, None) is not None
    }


class JsonFormatter(logging.Formatter):
    """Emit newline-delimited JSON logs with stable core fields."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            fields.TIMESTAMP: datetime.now(UTC).isoformat(),
            fields.LEVEL: record.levelname,
            fields.LOGGER: record.name,
            fields.MESSAGE: record.getMessage(),
        }
        payload.update(_structured_fields(record))

        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)

        return json.dumps(payload, default=str, separators=(",", ":"))


class PlainFormatter(logging.Formatter):
    """Human-readable formatter with ``key=value`` structured suffix."""

    def __init__(self) -> None:
        super().__init__(
            fmt="%(asctime)s %(levelname)s %(name)s %(message)s",
            datefmt="%Y-%m-%dT%H:%M:%S%z",
        )

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        structured = _structured_fields(record)
        if not structured:
            return message
        suffix = " ".join(f"{key}={value}" for key, value in sorted(structured.items()))
        return f"{message} {suffix}"


def configure_logging(
    *,
    level: str = "INFO",
    json_output: bool = True,
    service: str | None = None,
    environment: str | None = None,
) -> None:
    """Configure root logging with a single stdout handler.

    Existing root handlers are replaced, so repeated calls never duplicate
    output.
    """
    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(level.upper())

    handler = logging.StreamHandler(stream=sys.stdout)
    handler.setLevel(level.upper())

    static: dict[str, str] = {}
    if service:
        static[fields.SERVICE] = service
    if environment:
        static[fields.ENVIRONMENT] = environment
    if static:
        handler.addFilter(StaticFieldsFilter(static))

    handler.setFormatter(JsonFormatter() if json_output else PlainFormatter())
    root.addHandler(handler)


def configure_logging_from_settings(settings: ErrtypesSettings) -> None:
    """Apply the ``logging`` subtree of resolved settings."""
    configure_logging(
        level=settings.logging.level,
        json_output=settings.logging.json_output,
        service=settings.logging.service,
        environment=settings.logging.environment,
    )


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a logger using Python's standard logging hierarchy."""
    return logging.getLogger(name)
