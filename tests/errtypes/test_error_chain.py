"""Tests for root-cause resolution and the wrap helpers."""

from __future__ import annotations

from multiprocessing.pool import RemoteTraceback

from packages.errtypes.errors import (
    WrappedError,
    not_found_error,
    root_cause,
    wrap,
    wrap_fmt,
)


def test_root_cause_of_none_is_none() -> None:
    """``None`` should resolve to ``None``."""
    assert root_cause(None) is None


def test_root_cause_of_unchained_error_is_itself() -> None:
    """An error with no cause should be its own root."""
    error = ValueError("plain")

    assert root_cause(error) is error


def test_root_cause_follows_wrap_layers() -> None:
    """Every ``wrap`` layer should be skipped on the way to the root."""
    root = not_found_error("missing")
    outer = wrap(wrap(root, "while loading config"), "while starting")

    assert root_cause(outer) is root


def test_root_cause_follows_raise_from() -> None:
    """Native ``raise ... from ...`` chaining should be followed."""
    root = KeyError("k")
    try:
        try:
            raise root
        except KeyError as exc:
            raise RuntimeError("lookup failed") from exc
    except RuntimeError as outer:
        assert root_cause(outer) is root


def test_root_cause_ignores_implicit_context() -> None:
    """Exceptions raised while handling another are not caused by it."""
    try:
        try:
            raise KeyError("k")
        except KeyError:
            raise RuntimeError("during handling")
    except RuntimeError as outer:
        assert outer.__context__ is not None
        assert root_cause(outer) is outer


def test_root_cause_stops_on_cycles() -> None:
    """A chain that loops should terminate instead of spinning."""
    first = ValueError("first")
    second = ValueError("second")
    first.__cause__ = second
    second.__cause__ = first

    assert root_cause(first) is second


def test_wrap_renders_context_before_cause() -> None:
    """Wrapped errors should render as ``context: cause``."""
    wrapped = wrap(not_found_error("missing"), "while loading config")

    assert isinstance(wrapped, WrappedError)
    assert str(wrapped) == "while loading config: missing"
    assert str(wrap(wrapped, "boot")) == "boot: while loading config: missing"


def test_wrap_exposes_direct_cause() -> None:
    """``cause`` should be the directly wrapped error, not the root."""
    root = not_found_error("missing")
    middle = wrap(root, "middle")
    outer = wrap(middle, "outer")

    assert outer.cause is middle
    assert outer.__cause__ is middle


def test_wrap_of_none_is_none() -> None:
    """Wrapping nothing should produce nothing."""
    assert wrap(None, "context") is None
    assert wrap_fmt(None, "context %d", 1) is None


def test_wrap_fmt_formats_context() -> None:
    """``wrap_fmt`` should apply printf substitution to the context."""
    wrapped = wrap_fmt(ValueError("boom"), "step %d of %d", 2, 5)

    assert str(wrapped) == "step 2 of 5: boom"


def test_raising_wrapped_error_keeps_cause() -> None:
    """A plain ``raise`` of a wrapped error should not replace its cause."""
    root = not_found_error("missing")
    try:
        raise wrap(root, "outer")  # type: ignore[misc]
    except WrappedError as exc:
        assert root_cause(exc) is root


def test_root_cause_skips_remote_traceback_carrier() -> None:
    """A worker traceback attached by a process pool is not the root."""
    error = not_found_error("row missing")
    error.__cause__ = RemoteTraceback("Traceback (most recent call last): ...")

    assert root_cause(error) is error
    assert root_cause(wrap(error, "outer")) is error
