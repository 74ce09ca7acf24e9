"""Category predicates that look through wrapping layers.

Each predicate resolves the root cause of the chain first, so context added
above a categorized error never changes the answer.
"""

from __future__ import annotations

from .chain import root_cause
from .types import CategorizedError, ErrorCategory


def category_of(err: BaseException | None) -> ErrorCategory | None:
    """Return the category carried by the root cause, if any."""
    if err is None:
        return None
    match root_cause(err):
        case CategorizedError(category=category):
            return category
        case _:
            return None


def has_category(err: BaseException | None, category: ErrorCategory) -> bool:
    """Check whether the root cause carries ``category``."""
    return category_of(err) is category


def is_bad_input(err: BaseException | None) -> bool:
    """Check whether ``err`` is caused by a missing or wrong input parameter."""
    return has_category(err, ErrorCategory.BAD_INPUT)


def is_unauthenticated(err: BaseException | None) -> bool:
    """Check whether ``err`` is caused by missing authentication."""
    return has_category(err, ErrorCategory.UNAUTHENTICATED)


def is_forbidden(err: BaseException | None) -> bool:
    """Check whether ``err`` is caused by insufficient permissions."""
    return has_category(err, ErrorCategory.FORBIDDEN)


def is_not_found(err: BaseException | None) -> bool:
    """Check whether ``err`` is caused by a missing resource."""
    return has_category(err, ErrorCategory.NOT_FOUND)


def is_conflict(err: BaseException | None) -> bool:
    """Check whether ``err`` is caused by a conflicting resource state."""
    return has_category(err, ErrorCategory.CONFLICT)
