"""Bridge exception-raising code into Results.

Wrapped calls return ``Success(return_value)``, or ``Failure(exc)`` when they
raise one of the caught exception types. Anything else propagates.
IllegalExtraction always propagates: it marks a caller logic error, not a
data-level failure.
"""

from __future__ import annotations

import asyncio
import inspect
from functools import wraps
from typing import Any, Awaitable, Callable, ParamSpec, TypeVar, overload

from fallible.errors import IllegalExtraction
from fallible.observability import get_logger

from .result import Failure, Result, Success

P = ParamSpec("P")
T = TypeVar("T")

ExcTypes = type[BaseException] | tuple[type[BaseException], ...]

_log = get_logger("fallible.attempt")


def _is_async_callable(fn: object) -> bool:
    return inspect.iscoroutinefunction(fn) or inspect.iscoroutinefunction(getattr(fn, "__call__", None))


def _as_tuple(catch: ExcTypes) -> tuple[type[BaseException], ...]:
    return catch if isinstance(catch, tuple) else (catch,)


def _captured(fn: Callable[..., Any], exc: BaseException) -> Failure[Any, BaseException]:
    _log.debug("exception captured", function=getattr(fn, "__qualname__", repr(fn)), error=repr(exc))
    return Failure(exc)


def attempt(
    fn: Callable[P, T],
    /,
    *args: P.args,
    catch: ExcTypes = Exception,
    **kwargs: P.kwargs,
) -> Result[T, BaseException]:
    """Call ``fn(*args, **kwargs)`` and capture raised ``catch`` exceptions as a Failure.

    Example:
        >>> attempt(int, "42")
        Success(42)
        >>> attempt(int, "x", catch=ValueError).is_failure()
        True
    """
    try:
        return Success(fn(*args, **kwargs))
    except IllegalExtraction:
        raise
    except _as_tuple(catch) as exc:
        return _captured(fn, exc)


async def attempt_async(
    fn: Callable[P, Awaitable[T]] | Callable[P, T],
    /,
    *args: P.args,
    catch: ExcTypes = Exception,
    **kwargs: P.kwargs,
) -> Result[T, BaseException]:
    """Async version of attempt.

    Coroutine functions are awaited; plain callables run via ``asyncio.to_thread``.
    An awaitable returned by a plain callable is awaited as well.
    """
    try:
        if _is_async_callable(fn):
            value = await fn(*args, **kwargs)
        else:
            value = await asyncio.to_thread(fn, *args, **kwargs)
        if inspect.isawaitable(value):
            value = await value
        return Success(value)  # type: ignore[arg-type]
    except IllegalExtraction:
        raise
    except _as_tuple(catch) as exc:
        return _captured(fn, exc)


@overload
def safe(fn: Callable[P, T], /) -> Callable[P, Result[T, BaseException]]: ...
@overload
def safe(*exc_types: type[BaseException]) -> Callable[[Callable[P, T]], Callable[P, Result[T, BaseException]]]: ...


def safe(*args: Any) -> Any:
    """Decorator turning raised exceptions into Failures.

    Use bare (catches Exception) or with explicit exception types. Coroutine
    functions get an async wrapper.

    Example:
        >>> @safe(ZeroDivisionError)
        ... def divide(a: int, b: int) -> float:
        ...     return a / b
        >>> divide(1, 0).is_failure()
        True
    """
    if len(args) == 1 and callable(args[0]) and not (isinstance(args[0], type) and issubclass(args[0], BaseException)):
        return _decorate(args[0], (Exception,))
    catch: tuple[type[BaseException], ...] = args or (Exception,)
    return lambda fn: _decorate(fn, catch)


def _decorate(fn: Callable[..., Any], catch: tuple[type[BaseException], ...]) -> Callable[..., Any]:
    if _is_async_callable(fn):
        @wraps(fn)
        async def async_wrapper(*args: Any, **kwargs: Any) -> Result[Any, BaseException]:
            return await attempt_async(fn, *args, catch=catch, **kwargs)
        return async_wrapper

    @wraps(fn)
    def wrapper(*args: Any, **kwargs: Any) -> Result[Any, BaseException]:
        return attempt(fn, *args, catch=catch, **kwargs)
    return wrapper
