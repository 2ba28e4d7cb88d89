"""Helpers for asserting success and turning failures into values."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Optional, TypeVar

T = TypeVar("T")
E = TypeVar("E", bound=BaseException)

__all__ = [
    "ValidationError",
    "MustError",
    "validate",
    "must",
    "must0",
    "try_call",
    "try_or",
    "try_with_error_value",
    "try_catch",
    "try_catch_with_error_value",
    "errors_as",
]


class ValidationError(Exception):
    """Raised by :func:`validate` when its condition does not hold."""


class MustError(Exception):
    """Raised by :func:`must` when the checked result signals a failure."""


def _format_message(args: tuple[Any, ...]) -> str:
    if not args:
        return ""
    if len(args) == 1:
        return args[0] if isinstance(args[0], str) else str(args[0])
    return args[0] % args[1:]


def validate(ok: bool, message_format: str, *args: Any) -> None:
    """Raise ValidationError with the formatted message unless ``ok``."""
    if not ok:
        message = message_format % args if args else message_format
        raise ValidationError(message)


def _check(err: Any, args: tuple[Any, ...]) -> None:
    if err is None:
        return
    if isinstance(err, bool):
        if not err:
            raise MustError(_format_message(args) or "not ok")
        return
    if isinstance(err, BaseException):
        message = _format_message(args)
        text = f"{message}: {err}" if message else str(err)
        raise MustError(text) from err
    raise TypeError(
        f"must: invalid err type '{type(err).__name__}', "
        "should either be a bool or an error"
    )


def must(value: T, err: Any, *args: Any) -> T:
    """Return ``value`` unless ``err`` is an exception or False.

    ``err`` may be None, a bool or an exception; any other type raises
    TypeError. Extra arguments form a message: a single string, or a
    format string followed by its arguments.
    """
    _check(err, args)
    return value


def must0(err: Any, *args: Any) -> None:
    """Like :func:`must`, with no value to return."""
    _check(err, args)


def try_call(callback: Callable[[], Any]) -> bool:
    """Call ``callback`` and report whether it finished without raising."""
    ok, _ = _run(callback)
    return ok


def _run(callback: Callable[[], T]) -> tuple[bool, Any]:
    try:
        return True, callback()
    except Exception as exc:  # noqa: BLE001 - failures become values here
        return False, exc


def try_or(callback: Callable[[], T], fallback: T) -> tuple[T, bool]:
    """Result of ``callback`` and True, or ``fallback`` and False if it raised."""
    ok, outcome = _run(callback)
    return (outcome, True) if ok else (fallback, False)


def try_with_error_value(
    callback: Callable[[], Any]
) -> tuple[Optional[Exception], bool]:
    """Call ``callback``; return the exception it raised (or None) and success."""
    ok, outcome = _run(callback)
    return (None, True) if ok else (outcome, False)


def try_catch(callback: Callable[[], Any], catch: Callable[[], Any]) -> None:
    """Call ``callback``, and ``catch`` if it raised."""
    if not try_call(callback):
        catch()


def try_catch_with_error_value(
    callback: Callable[[], Any], catch: Callable[[Exception], Any]
) -> None:
    """Call ``callback``, and ``catch`` with the exception if it raised."""
    error, ok = try_with_error_value(callback)
    if not ok:
        catch(error)  # type: ignore[arg-type]


def errors_as(
    err: Optional[BaseException], error_type: type[E]
) -> tuple[Optional[E], bool]:
    """First exception of ``error_type`` in the cause/context chain of ``err``."""
    seen: set[int] = set()
    current = err
    while current is not None and id(current) not in seen:
        if isinstance(current, error_type):
            return current, True
        seen.add(id(current))
        current = current.__cause__ or current.__context__
    return None, False