"""Fold many Results into one.

All functions accept any iterable and consume it lazily in order, so
``collect`` and ``traverse`` stop pulling from the source at the first
Failure. This is what makes them safe on infinite generators.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, TypeVar

from fallible.observability import get_logger

from .result import Failure, Result, Success

if TYPE_CHECKING:
    from collections.abc import Iterable

T = TypeVar("T")
E = TypeVar("E")
U = TypeVar("U")

_log = get_logger("fallible.collection")


def collect(results: Iterable[Result[T, E]]) -> Result[list[T], E]:
    """Convert an iterable of Results into a Result of list.

    First failure wins: that Failure object is returned as-is and no further
    element is consumed. Empty input yields ``Success([])``.

    Type signature: Iterable[Result[T, E]] -> Result[list[T], E]

    Example:
        >>> collect([Success(1), Success(2)])
        Success([1, 2])
        >>> collect([Success(1), Failure("x"), Failure("y")])
        Failure('x')
    """
    values: list[T] = []
    for index, result in enumerate(results):
        match result:
            case Success(value):
                values.append(value)
            case Failure():
                _log.debug("collect short-circuited", index=index)
                return result  # type: ignore[return-value]
            case _:
                raise TypeError(f"expected a Result, got {type(result).__name__}")
    return Success(values)


from_iter = collect


def traverse(items: Iterable[U], fn: Callable[[U], Result[T, E]]) -> Result[list[T], E]:
    """Map a fallible function over items and collect, stopping at the first Failure.

    ``fn`` is not called for any item after the failing one.

    Example:
        >>> def parse(s: str) -> Result[int, str]:
        ...     return Success(int(s)) if s.isdigit() else Failure(f"invalid: {s}")
        >>> traverse(["1", "2"], parse)
        Success([1, 2])
        >>> traverse(["1", "bad", "3"], parse)
        Failure('invalid: bad')
    """
    return collect(fn(item) for item in items)


def collect_all(results: Iterable[Result[T, E]]) -> Result[list[T], list[E]]:
    """Collect all Results, accumulating every error instead of failing fast.

    Example:
        >>> collect_all([Success(1), Failure("e1"), Success(3), Failure("e2")])
        Failure(['e1', 'e2'])
    """
    values, errors = partition(results)
    return Failure(errors) if errors else Success(values)


def partition(results: Iterable[Result[T, E]]) -> tuple[list[T], list[E]]:
    """Split Results into ``(success values, failure errors)``, preserving order."""
    values: list[T] = []
    errors: list[E] = []
    for result in results:
        match result:
            case Success(value):
                values.append(value)
            case Failure(error):
                errors.append(error)
            case _:
                raise TypeError(f"expected a Result, got {type(result).__name__}")
    return values, errors
