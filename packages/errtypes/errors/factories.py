"""Factory helpers for creating categorized errors."""

from __future__ import annotations

from .types import (
    ERROR_TYPE_BY_CATEGORY,
    BadInputError,
    CategorizedError,
    ConflictError,
    ErrorCategory,
    ForbiddenError,
    NotFoundError,
    UnauthenticatedError,
)


def bad_input_error(message: str) -> BadInputError:
    """Create an error caused by a missing or wrong input parameter."""
    return BadInputError(message)


def bad_input_error_fmt(template: str, *args: object) -> BadInputError:
    """Create a bad-input error from a printf-style template."""
    return BadInputError(template % args)


def unauthenticated_error(message: str) -> UnauthenticatedError:
    """Create an error caused by missing authentication."""
    return UnauthenticatedError(message)


def unauthenticated_error_fmt(template: str, *args: object) -> UnauthenticatedError:
    """Create an unauthenticated error from a printf-style template."""
    return UnauthenticatedError(template % args)


def forbidden_error(message: str) -> ForbiddenError:
    """Create an error caused by insufficient permissions."""
    return ForbiddenError(message)


def forbidden_error_fmt(template: str, *args: object) -> ForbiddenError:
    """Create a forbidden error from a printf-style template."""
    return ForbiddenError(template % args)


def not_found_error(message: str) -> NotFoundError:
    """Create an error caused by a missing resource."""
    return NotFoundError(message)


def not_found_error_fmt(template: str, *args: object) -> NotFoundError:
    """Create a not-found error from a printf-style template."""
    return NotFoundError(template % args)


def conflict_error(message: str) -> ConflictError:
    """Create an error caused by a conflicting resource state."""
    return ConflictError(message)


def conflict_error_fmt(template: str, *args: object) -> ConflictError:
    """Create a conflict error from a printf-style template."""
    return ConflictError(template % args)


def new_error(category: ErrorCategory, message: str) -> CategorizedError:
    """Create the error type registered for ``category``."""
    return _error_type(category)(message)


def new_error_fmt(
    category: ErrorCategory, template: str, *args: object
) -> CategorizedError:
    """Create the error type registered for ``category`` from a template."""
    return _error_type(category).from_format(template, *args)


def _error_type(category: ErrorCategory) -> type[CategorizedError]:
    """Look up one concrete error class, rejecting non-member categories."""
    try:
        return ERROR_TYPE_BY_CATEGORY[ErrorCategory(category)]
    except ValueError as exc:
        raise ValueError(f"Unknown error category: {category!r}") from exc
