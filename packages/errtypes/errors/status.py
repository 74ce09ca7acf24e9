"""HTTP status mapping for categorized errors.

``http_status_code`` is meant to be called once, at the outermost boundary.
Passing ``None`` is a programming error and raises ``AssertionError``: there
is no status code for "no error occurred".
"""

from __future__ import annotations

from http import HTTPStatus
from types import MappingProxyType
from typing import Callable, Mapping

from packages.errtypes.logging import fields, get_logger

from .predicates import (
    category_of,
    is_bad_input,
    is_conflict,
    is_forbidden,
    is_not_found,
    is_unauthenticated,
)
from .types import ErrorCategory

_LOGGER = get_logger(__name__)

DEFAULT_HTTP_STATUS = HTTPStatus.INTERNAL_SERVER_ERROR

HTTP_STATUS_BY_CATEGORY: Mapping[ErrorCategory, HTTPStatus] = MappingProxyType(
    {
        ErrorCategory.BAD_INPUT: HTTPStatus.BAD_REQUEST,
        ErrorCategory.UNAUTHENTICATED: HTTPStatus.UNAUTHORIZED,
        ErrorCategory.FORBIDDEN: HTTPStatus.FORBIDDEN,
        ErrorCategory.NOT_FOUND: HTTPStatus.NOT_FOUND,
        ErrorCategory.CONFLICT: HTTPStatus.CONFLICT,
    }
)

# Evaluated in order; the first match wins.
_STATUS_PRIORITY: tuple[tuple[Callable[[BaseException], bool], HTTPStatus], ...] = (
    (is_bad_input, HTTP_STATUS_BY_CATEGORY[ErrorCategory.BAD_INPUT]),
    (is_unauthenticated, HTTP_STATUS_BY_CATEGORY[ErrorCategory.UNAUTHENTICATED]),
    (is_forbidden, HTTP_STATUS_BY_CATEGORY[ErrorCategory.FORBIDDEN]),
    (is_not_found, HTTP_STATUS_BY_CATEGORY[ErrorCategory.NOT_FOUND]),
    (is_conflict, HTTP_STATUS_BY_CATEGORY[ErrorCategory.CONFLICT]),
)


def http_status_code(err: BaseException | None) -> int:
    """Map an error to the HTTP status code of its category.

    Uncategorized errors map to 500. Raises ``AssertionError`` for ``None``.
    """
    if err is None:
        raise AssertionError("http_status_code called without an error")

    status = DEFAULT_HTTP_STATUS
    for predicate, candidate in _STATUS_PRIORITY:
        if predicate(err):
            status = candidate
            break

    category = category_of(err)
    _LOGGER.debug(
        "Resolved HTTP status for %s",
        type(err).__name__,
        extra={
            fields.ERROR_CATEGORY: category.value if category is not None else None,
            fields.STATUS_CODE: int(status),
        },
    )
    return int(status)
