"""Canonical categorized error types.

Every categorized error carries exactly one ``ErrorCategory``. The category is
bound to the concrete class rather than stored per instance, so the family is
closed: one subclass per category, and no instance can claim two.
"""

from __future__ import annotations

from dataclasses import FrozenInstanceError, dataclass
from enum import Enum
from typing import ClassVar


class ErrorCategory(str, Enum):
    """Semantic error categories recognized at boundary layers."""

    BAD_INPUT = "bad_input"
    UNAUTHENTICATED = "unauthenticated"
    FORBIDDEN = "forbidden"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"


# Runtime state the interpreter and stdlib write onto any raised exception.
_EXCEPTION_STATE = frozenset(
    {
        "__traceback__",
        "__cause__",
        "__context__",
        "__suppress_context__",
        "__notes__",
    }
)


@dataclass(eq=False)
class CategorizedError(Exception):
    """Base type for errors tagged with one semantic category.

    ``message`` is read-only once set. Exception runtime state stays writable
    so chaining, ``add_note`` and ``contextmanager`` exits keep working.
    """

    message: str

    category: ClassVar[ErrorCategory]

    def __post_init__(self) -> None:
        if type(self) is CategorizedError:
            raise TypeError("CategorizedError is abstract; use a category subclass")
        super().__init__(self.message)

    def __setattr__(self, name: str, value: object) -> None:
        if name not in _EXCEPTION_STATE and "message" in self.__dict__:
            raise FrozenInstanceError(f"cannot assign to field {name!r}")
        super().__setattr__(name, value)

    def __delattr__(self, name: str) -> None:
        if name not in _EXCEPTION_STATE:
            raise FrozenInstanceError(f"cannot delete field {name!r}")
        super().__delattr__(name)

    def __reduce__(self) -> tuple[type[CategorizedError], tuple[str]]:
        return (type(self), (self.message,))

    def __str__(self) -> str:
        """Return the stored message verbatim."""
        return self.message

    @classmethod
    def from_format(cls, template: str, *args: object) -> CategorizedError:
        """Build an error whose message is ``template % args``."""
        return cls(template % args)


@dataclass(eq=False)
class BadInputError(CategorizedError):
    """Caused by a missing or wrong input parameter (HTTP 400)."""

    category: ClassVar[ErrorCategory] = ErrorCategory.BAD_INPUT


@dataclass(eq=False)
class UnauthenticatedError(CategorizedError):
    """Caused by missing authentication (HTTP 401)."""

    category: ClassVar[ErrorCategory] = ErrorCategory.UNAUTHENTICATED


@dataclass(eq=False)
class ForbiddenError(CategorizedError):
    """Caused by insufficient permissions (HTTP 403)."""

    category: ClassVar[ErrorCategory] = ErrorCategory.FORBIDDEN


@dataclass(eq=False)
class NotFoundError(CategorizedError):
    """Caused by a missing resource (HTTP 404)."""

    category: ClassVar[ErrorCategory] = ErrorCategory.NOT_FOUND


@dataclass(eq=False)
class ConflictError(CategorizedError):
    """Caused by a conflict with the current state of a resource (HTTP 409)."""

    category: ClassVar[ErrorCategory] = ErrorCategory.CONFLICT


ERROR_TYPE_BY_CATEGORY: dict[ErrorCategory, type[CategorizedError]] = {
    ErrorCategory.BAD_INPUT: BadInputError,
    ErrorCategory.UNAUTHENTICATED: UnauthenticatedError,
    ErrorCategory.FORBIDDEN: ForbiddenError,
    ErrorCategory.NOT_FOUND: NotFoundError,
    ErrorCategory.CONFLICT: ConflictError,
}
