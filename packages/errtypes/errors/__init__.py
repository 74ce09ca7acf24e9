"""Public categorized-error API."""

from .chain import WrappedError, root_cause, wrap, wrap_fmt
from .factories import (
    bad_input_error,
    bad_input_error_fmt,
    conflict_error,
    conflict_error_fmt,
    forbidden_error,
    forbidden_error_fmt,
    new_error,
    new_error_fmt,
    not_found_error,
    not_found_error_fmt,
    unauthenticated_error,
    unauthenticated_error_fmt,
)
from .predicates import (
    category_of,
    has_category,
    is_bad_input,
    is_conflict,
    is_forbidden,
    is_not_found,
    is_unauthenticated,
)
from .status import DEFAULT_HTTP_STATUS, HTTP_STATUS_BY_CATEGORY, http_status_code
from .types import (
    BadInputError,
    CategorizedError,
    ConflictError,
    ErrorCategory,
    ForbiddenError,
    NotFoundError,
    UnauthenticatedError,
)

__all__ = [
    "BadInputError",
    "CategorizedError",
    "ConflictError",
    "DEFAULT_HTTP_STATUS",
    "ErrorCategory",
    "ForbiddenError",
    "HTTP_STATUS_BY_CATEGORY",
    "NotFoundError",
    "UnauthenticatedError",
    "WrappedError",
    "bad_input_error",
    "bad_input_error_fmt",
    "category_of",
    "conflict_error",
    "conflict_error_fmt",
    "forbidden_error",
    "forbidden_error_fmt",
    "has_category",
    "http_status_code",
    "is_bad_input",
    "is_conflict",
    "is_forbidden",
    "is_not_found",
    "is_unauthenticated",
    "new_error",
    "new_error_fmt",
    "not_found_error",
    "not_found_error_fmt",
    "root_cause",
    "unauthenticated_error",
    "unauthenticated_error_fmt",
    "wrap",
    "wrap_fmt",
]
