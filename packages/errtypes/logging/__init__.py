"""Public logging API for errtypes.

Wraps Python's ``logging`` module with stdout defaults and a JSON formatter
that understands the classification fields.
"""

from .config import (
    JsonFormatter,
    PlainFormatter,
    StaticFieldsFilter,
    configure_logging,
    configure_logging_from_settings,
    get_logger,
)

__all__ = [
    "JsonFormatter",
    "PlainFormatter",
    "StaticFieldsFilter",
    "configure_logging",
    "configure_logging_from_settings",
    "get_logger",
]
