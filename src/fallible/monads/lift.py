"""Lift a synchronous single-callback combinator into its async sister.

Every async combinator on Result (``map_async``, ``and_then_async``, ...) is
built here from its synchronous counterpart instead of being written twice.
The sync combinator is first run with a capturing callback: if the variant
never calls it, that outcome is already final and ``fn`` is never invoked.
Otherwise ``fn`` is awaited exactly once on the captured payload and the sync
combinator is re-run with a callback returning the awaited outcome.

The await on ``fn`` is the only suspension point. No timeout or cancellation
is layered on top.
"""

from __future__ import annotations

from typing import Any, Awaitable, Callable, Coroutine

_PENDING = object()


def lift_async(name: str) -> Callable[[Any, Callable[[Any], Awaitable[Any]]], Coroutine[Any, Any, Any]]:
    """Build an async method delegating to the sync combinator ``name``.

    Dispatch goes through ``getattr`` so each variant's own implementation of
    ``name`` decides whether ``fn`` runs.

    Example:
        >>> class Box:
        ...     def __init__(self, v): self.v = v
        ...     def map(self, fn): return Box(fn(self.v))
        ...     map_async = lift_async("map")
        >>> async def double(x): return x * 2
        >>> # (await Box(2).map_async(double)).v == 4
    """

    async def sister(self: Any, fn: Callable[[Any], Awaitable[Any]]) -> Any:
        combinator = getattr(self, name)
        captured: list[Any] = []

        def capture(payload: Any) -> Any:
            captured.append(payload)
            return _PENDING

        outcome = combinator(capture)
        if not captured:
            return outcome
        resolved = await fn(captured[0])
        return combinator(lambda _: resolved)

    sister.__name__ = sister.__qualname__ = f"{name}_async"
    sister.__doc__ = f"Async form of ``{name}``: awaits ``fn`` at most once, then behaves like ``{name}``."
    return sister
