"""Result type for error handling without exceptions.

``Result[T, E]`` is a closed sum of two variants, each its own class:

- ``Success[T]`` holds the value of a completed computation
- ``Failure[E]`` holds the error of a failed one

Each variant carries explicit method bodies for the whole combinator set, so an
operation aimed at the other variant's payload is a plain passthrough and no
method branches on a tag. Values are immutable: every combinator returns a new
Result (or an existing one), never a modified one.

Async sisters (``map_async``, ``and_then_async``, ...) are lifted from the sync
combinators by :func:`fallible.monads.lift.lift_async`.

Example:
    >>> def parse(s: str) -> Result[int, str]:
    ...     return success(int(s)) if s.isdigit() else failure(f"not a number: {s}")
    >>> parse("21").map(lambda x: x * 2).unwrap()
    42
    >>> parse("x").map(lambda x: x * 2).unwrap_or(0)
    0
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Callable, Generic, Literal, NoReturn, TypeVar

from fallible.config import get_settings
from fallible.errors import IllegalExtraction, InvalidPayload
from fallible.observability import get_logger

from .lift import lift_async

if TYPE_CHECKING:
    from collections.abc import Iterator

T = TypeVar("T")  # Success type
E = TypeVar("E")  # Failure type
U = TypeVar("U")  # Mapped success type
F = TypeVar("F")  # Mapped failure type

_log = get_logger("fallible.result")


def _check_payload(payload: object, variant: Literal["Success", "Failure"]) -> None:
    if payload is None and get_settings().strict_payloads:
        raise InvalidPayload.create(variant)


def _illegal(operation: str, variant: Literal["Success", "Failure"], context: object = None) -> NoReturn:
    _log.debug("illegal extraction", operation=operation, variant=variant)
    raise IllegalExtraction.create(operation, variant, context=None if context is None else str(context))


class Result(ABC, Generic[T, E]):
    """Capability contract shared by Success and Failure.

    Code holding a ``Result`` can call any of these without knowing the
    variant. Narrow with ``is_success()``/``is_failure()``, ``isinstance`` or
    structural pattern matching::

        match result:
            case Success(value): ...
            case Failure(error): ...
    """

    __slots__ = ()

    # ─────────────────────────────────────────────────────────────────
    # State Queries
    # ─────────────────────────────────────────────────────────────────

    @abstractmethod
    def is_success(self) -> bool:
        """True for Success."""

    @abstractmethod
    def is_failure(self) -> bool:
        """True for Failure."""

    @abstractmethod
    def is_success_and(self, predicate: Callable[[T], object]) -> bool:
        """True if Success and ``predicate(value)`` holds. Never calls predicate on Failure."""

    @abstractmethod
    def is_failure_and(self, predicate: Callable[[E], object]) -> bool:
        """True if Failure and ``predicate(error)`` holds. Never calls predicate on Success."""

    # ─────────────────────────────────────────────────────────────────
    # Transformations
    # ─────────────────────────────────────────────────────────────────

    @abstractmethod
    def map(self, fn: Callable[[T], U]) -> Result[U, E]:
        """Apply ``fn`` to the success value. Failure passes through unchanged."""

    @abstractmethod
    def map_failure(self, fn: Callable[[E], F]) -> Result[T, F]:
        """Apply ``fn`` to the failure error. Success passes through unchanged."""

    @abstractmethod
    def map_or(self, default: U, fn: Callable[[T], U]) -> U:
        """``fn(value)`` on Success, ``default`` on Failure.

        ``default`` is evaluated eagerly by the caller; use map_or_else to defer it.
        """

    @abstractmethod
    def map_or_else(self, on_failure: Callable[[E], U], fn: Callable[[T], U]) -> U:
        """``fn(value)`` on Success, ``on_failure(error)`` on Failure."""

    @abstractmethod
    def bimap(self, on_success: Callable[[T], U], on_failure: Callable[[E], F]) -> Result[U, F]:
        """Map whichever payload is present, keeping the variant."""

    @abstractmethod
    def inspect(self, fn: Callable[[T], object]) -> Result[T, E]:
        """Call ``fn(value)`` for its side effect on Success. Returns self."""

    @abstractmethod
    def inspect_failure(self, fn: Callable[[E], object]) -> Result[T, E]:
        """Call ``fn(error)`` for its side effect on Failure. Returns self."""

    # ─────────────────────────────────────────────────────────────────
    # Extraction
    # ─────────────────────────────────────────────────────────────────

    @abstractmethod
    def expect(self, message: str) -> T:
        """Success value, or raise IllegalExtraction prefixed with ``message``."""

    @abstractmethod
    def unwrap(self) -> T:
        """Success value, or raise IllegalExtraction.

        Raises:
            IllegalExtraction: If Result is Failure
        """

    @abstractmethod
    def expect_failure(self, message: str) -> E:
        """Failure error, or raise IllegalExtraction prefixed with ``message``."""

    @abstractmethod
    def unwrap_failure(self) -> E:
        """Failure error, or raise IllegalExtraction.

        Raises:
            IllegalExtraction: If Result is Success
        """

    @abstractmethod
    def unwrap_or(self, default: T) -> T:
        """Success value or ``default``."""

    @abstractmethod
    def unwrap_or_else(self, fn: Callable[[E], T]) -> T:
        """Success value or ``fn(error)``."""

    @abstractmethod
    def ok(self) -> T | None:
        """Success value or None."""

    @abstractmethod
    def err(self) -> E | None:
        """Failure error or None."""

    @abstractmethod
    def match(self, *, success: Callable[[T], U], failure: Callable[[E], U]) -> U:
        """Exhaustive case analysis over both variants.

        Example:
            >>> Success(42).match(success=lambda v: f"got {v}", failure=lambda e: f"failed: {e}")
            'got 42'
        """

    @abstractmethod
    def to_tuple(self) -> tuple[T | None, E | None]:
        """``(value, None)`` for Success, ``(None, error)`` for Failure."""

    # ─────────────────────────────────────────────────────────────────
    # Chaining
    # ─────────────────────────────────────────────────────────────────

    @abstractmethod
    def and_(self, other: Result[U, E]) -> Result[U, E]:
        """``other`` if Success, otherwise self."""

    @abstractmethod
    def and_then(self, fn: Callable[[T], Result[U, E]]) -> Result[U, E]:
        """Chain a fallible step on the success value (monadic bind).

        Example:
            >>> Success(2).and_then(lambda x: Success("big") if x > 1 else Failure("small"))
            Success('big')
        """

    @abstractmethod
    def or_(self, other: Result[T, F]) -> Result[T, F]:
        """Self if Success, otherwise ``other``."""

    @abstractmethod
    def or_else(self, fn: Callable[[E], Result[T, F]]) -> Result[T, F]:
        """Recover from Failure with ``fn(error)``. Success passes through."""

    # ─────────────────────────────────────────────────────────────────
    # Structure
    # ─────────────────────────────────────────────────────────────────

    @abstractmethod
    def transpose(self) -> Result[T, E] | None:
        """Move absence outward: ``Success(None)`` becomes ``None``.

        Only ``None`` counts as absent. Any other Success is returned as a
        Success of the same value, and a Failure is returned unchanged.
        """

    @abstractmethod
    def flatten(self) -> Result[Any, E]:
        """Remove one level of nesting from ``Result[Result[U, E], E]``."""

    @abstractmethod
    def clone(self) -> Result[T, E]:
        """New container holding the same payload object."""

    @abstractmethod
    def __iter__(self) -> Iterator[T]:
        """Yield the success value once, or nothing for Failure."""

    # ─────────────────────────────────────────────────────────────────
    # Async Sisters
    # ─────────────────────────────────────────────────────────────────

    is_success_and_async = lift_async("is_success_and")
    is_failure_and_async = lift_async("is_failure_and")
    map_async = lift_async("map")
    map_failure_async = lift_async("map_failure")
    inspect_async = lift_async("inspect")
    inspect_failure_async = lift_async("inspect_failure")
    and_then_async = lift_async("and_then")
    or_else_async = lift_async("or_else")


# ═════════════════════════════════════════════════════════════════════════════
# Variants
# ═════════════════════════════════════════════════════════════════════════════


class Success(Result[T, E]):
    """Result of a computation that completed with ``value``."""

    __slots__ = ("value",)
    __match_args__ = ("value",)

    value: T

    def __init__(self, value: T) -> None:
        _check_payload(value, "Success")
        object.__setattr__(self, "value", value)

    @classmethod
    def of(cls, value: T) -> Success[T, E]:
        return cls(value)

    def __setattr__(self, name: str, _: object) -> NoReturn:
        raise AttributeError(f"Success is immutable; cannot set {name!r}")

    def __delattr__(self, name: str) -> NoReturn:
        raise AttributeError(f"Success is immutable; cannot delete {name!r}")

    def __reduce__(self) -> tuple[type[Success[T, E]], tuple[T]]:
        return (type(self), (self.value,))

    def is_success(self) -> Literal[True]:
        return True

    def is_failure(self) -> Literal[False]:
        return False

    def is_success_and(self, predicate: Callable[[T], object]) -> bool:
        return bool(predicate(self.value))

    def is_failure_and(self, predicate: Callable[[E], object]) -> Literal[False]:
        return False

    def map(self, fn: Callable[[T], U]) -> Success[U, E]:
        return Success(fn(self.value))

    def map_failure(self, fn: Callable[[E], F]) -> Success[T, F]:
        return self  # type: ignore[return-value]

    def map_or(self, default: U, fn: Callable[[T], U]) -> U:
        return fn(self.value)

    def map_or_else(self, on_failure: Callable[[E], U], fn: Callable[[T], U]) -> U:
        return fn(self.value)

    def bimap(self, on_success: Callable[[T], U], on_failure: Callable[[E], F]) -> Success[U, F]:
        return Success(on_success(self.value))

    def inspect(self, fn: Callable[[T], object]) -> Success[T, E]:
        fn(self.value)
        return self

    def inspect_failure(self, fn: Callable[[E], object]) -> Success[T, E]:
        return self

    def expect(self, message: str) -> T:
        return self.value

    def unwrap(self) -> T:
        return self.value

    def expect_failure(self, message: str) -> NoReturn:
        _illegal("expect_failure", "Success", message)

    def unwrap_failure(self) -> NoReturn:
        _illegal("unwrap_failure", "Success")

    def unwrap_or(self, default: T) -> T:
        return self.value

    def unwrap_or_else(self, fn: Callable[[E], T]) -> T:
        return self.value

    def ok(self) -> T:
        return self.value

    def err(self) -> None:
        return None

    def match(self, *, success: Callable[[T], U], failure: Callable[[E], U]) -> U:
        return success(self.value)

    def to_tuple(self) -> tuple[T, None]:
        return (self.value, None)

    def and_(self, other: Result[U, E]) -> Result[U, E]:
        return other

    def and_then(self, fn: Callable[[T], Result[U, E]]) -> Result[U, E]:
        return fn(self.value)

    def or_(self, other: Result[T, F]) -> Success[T, F]:
        return self  # type: ignore[return-value]

    def or_else(self, fn: Callable[[E], Result[T, F]]) -> Success[T, F]:
        return self  # type: ignore[return-value]

    def transpose(self) -> Success[T, E] | None:
        return None if self.value is None else Success(self.value)

    def flatten(self) -> Result[Any, E]:
        if not isinstance(self.value, Result):
            raise TypeError(f"flatten() requires a nested Result, got {type(self.value).__name__}")
        return self.value

    def clone(self) -> Success[T, E]:
        return Success(self.value)

    def __iter__(self) -> Iterator[T]:
        return iter((self.value,))

    def __bool__(self) -> bool:
        return True

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Result):
            return NotImplemented
        return isinstance(other, Success) and self.value == other.value

    def __hash__(self) -> int:
        return hash(("Success", self.value))

    def __repr__(self) -> str:
        return f"Success({self.value!r})"


class Failure(Result[T, E]):
    """Result of a computation that failed with ``error``."""

    __slots__ = ("error",)
    __match_args__ = ("error",)

    error: E

    def __init__(self, error: E) -> None:
        _check_payload(error, "Failure")
        object.__setattr__(self, "error", error)

    @classmethod
    def of(cls, error: E) -> Failure[T, E]:
        return cls(error)

    def __setattr__(self, name: str, _: object) -> NoReturn:
        raise AttributeError(f"Failure is immutable; cannot set {name!r}")

    def __delattr__(self, name: str) -> NoReturn:
        raise AttributeError(f"Failure is immutable; cannot delete {name!r}")

    def __reduce__(self) -> tuple[type[Failure[T, E]], tuple[E]]:
        return (type(self), (self.error,))

    def is_success(self) -> Literal[False]:
        return False

    def is_failure(self) -> Literal[True]:
        return True

    def is_success_and(self, predicate: Callable[[T], object]) -> Literal[False]:
        return False

    def is_failure_and(self, predicate: Callable[[E], object]) -> bool:
        return bool(predicate(self.error))

    def map(self, fn: Callable[[T], U]) -> Failure[U, E]:
        return self  # type: ignore[return-value]

    def map_failure(self, fn: Callable[[E], F]) -> Failure[T, F]:
        return Failure(fn(self.error))

    def map_or(self, default: U, fn: Callable[[T], U]) -> U:
        return default

    def map_or_else(self, on_failure: Callable[[E], U], fn: Callable[[T], U]) -> U:
        return on_failure(self.error)

    def bimap(self, on_success: Callable[[T], U], on_failure: Callable[[E], F]) -> Failure[U, F]:
        return Failure(on_failure(self.error))

    def inspect(self, fn: Callable[[T], object]) -> Failure[T, E]:
        return self

    def inspect_failure(self, fn: Callable[[E], object]) -> Failure[T, E]:
        fn(self.error)
        return self

    def expect(self, message: str) -> NoReturn:
        _illegal("expect", "Failure", message)

    def unwrap(self) -> NoReturn:
        _illegal("unwrap", "Failure")

    def expect_failure(self, message: str) -> E:
        return self.error

    def unwrap_failure(self) -> E:
        return self.error

    def unwrap_or(self, default: T) -> T:
        return default

    def unwrap_or_else(self, fn: Callable[[E], T]) -> T:
        return fn(self.error)

    def ok(self) -> None:
        return None

    def err(self) -> E:
        return self.error

    def match(self, *, success: Callable[[T], U], failure: Callable[[E], U]) -> U:
        return failure(self.error)

    def to_tuple(self) -> tuple[None, E]:
        return (None, self.error)

    def and_(self, other: Result[U, E]) -> Failure[U, E]:
        return self  # type: ignore[return-value]

    def and_then(self, fn: Callable[[T], Result[U, E]]) -> Failure[U, E]:
        return self  # type: ignore[return-value]

    def or_(self, other: Result[T, F]) -> Result[T, F]:
        return other

    def or_else(self, fn: Callable[[E], Result[T, F]]) -> Result[T, F]:
        return fn(self.error)

    def transpose(self) -> Failure[T, E]:
        return self

    def flatten(self) -> Failure[Any, E]:
        return self

    def clone(self) -> Failure[T, E]:
        return Failure(self.error)

    def __iter__(self) -> Iterator[T]:
        return iter(())

    def __bool__(self) -> bool:
        return False

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Result):
            return NotImplemented
        return isinstance(other, Failure) and self.error == other.error

    def __hash__(self) -> int:
        return hash(("Failure", self.error))

    def __repr__(self) -> str:
        return f"Failure({self.error!r})"


# Rust-flavoured aliases
Ok = Success
Err = Failure


# ═════════════════════════════════════════════════════════════════════════════
# Constructor Functions
# ═════════════════════════════════════════════════════════════════════════════


def success(value: T) -> Result[T, Any]:
    """Construct the Success variant.

    Raises:
        InvalidPayload: If ``value`` is None and strict payloads are enabled
    """
    return Success(value)


def failure(error: E) -> Result[Any, E]:
    """Construct the Failure variant.

    Raises:
        InvalidPayload: If ``error`` is None and strict payloads are enabled
    """
    return Failure(error)
