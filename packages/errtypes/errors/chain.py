"""Causal-chain helpers built on native exception chaining.

An exception's cause is its ``__cause__`` attribute, which ``raise X from Y``
sets. Implicit ``__context__`` links are not followed.
"""

from __future__ import annotations

from typing import overload


class WrappedError(Exception):
    """Context-adding layer over one underlying cause."""

    def __init__(self, message: str, cause: BaseException) -> None:
        super().__init__(message)
        self.message = message
        self.__cause__ = cause

    @property
    def cause(self) -> BaseException:
        """Return the directly wrapped exception."""
        return self.__cause__  # type: ignore[return-value]

    def __str__(self) -> str:
        """Render as ``"<message>: <cause>"``."""
        return f"{self.message}: {self.__cause__}"


@overload
def root_cause(err: BaseException) -> BaseException: ...


@overload
def root_cause(err: None) -> None: ...


def root_cause(err: BaseException | None) -> BaseException | None:
    """Follow ``__cause__`` links and return the innermost exception.

    A chain that loops back on itself stops at the last exception before the
    loop repeats. Process pools attach the worker's formatted traceback as
    ``__cause__`` of a re-raised error; that carrier is never a root.
    """
    if err is None:
        return None

    seen = {id(err)}
    current = err
    while True:
        cause = current.__cause__
        if cause is None or id(cause) in seen or _is_traceback_carrier(cause):
            return current
        current = cause
        seen.add(id(current))


# (module, qualname) of stdlib exceptions that only transport remote tracebacks.
_TRACEBACK_CARRIERS = frozenset(
    {
        ("concurrent.futures.process", "_RemoteTraceback"),
        ("multiprocessing.pool", "RemoteTraceback"),
    }
)


def _is_traceback_carrier(err: BaseException) -> bool:
    cls = type(err)
    return (cls.__module__, cls.__qualname__) in _TRACEBACK_CARRIERS


def wrap(err: BaseException | None, message: str) -> WrappedError | None:
    """Annotate ``err`` with context while keeping it as the cause.

    Returns ``None`` when ``err`` is ``None`` so call sites can wrap
    unconditionally.
    """
    if err is None:
        return None
    return WrappedError(message, err)


def wrap_fmt(
    err: BaseException | None, template: str, *args: object
) -> WrappedError | None:
    """Like ``wrap`` with a printf-style context message."""
    if err is None:
        return None
    return WrappedError(template % args, err)
