"""Fallible - Rust-style Result type for Python.

Compose computations that can fail without raising exceptions. A ``Result``
is either ``Success(value)`` or ``Failure(error)``; combinators transform,
chain, inspect and collect them.

Quick Start:
    >>> from fallible import Failure, Result, Success, collect, failure, success
    >>>
    >>> def parse_port(raw: str) -> Result[int, str]:
    ...     if not raw.isdigit():
    ...         return failure(f"not a number: {raw!r}")
    ...     port = int(raw)
    ...     return success(port) if 0 < port < 65536 else failure(f"out of range: {port}")
    >>>
    >>> parse_port("8080").map(lambda p: p + 1).unwrap()
    8081
    >>> parse_port("http").unwrap_or(80)
    80
    >>> collect(parse_port(p) for p in ["80", "443"])
    Success([80, 443])

Async sisters await a callback and rewrap its output:
    >>> # await success(2).map_async(fetch_double)  -> Success(4)

Pattern matching:
    >>> match parse_port("22"):
    ...     case Success(port): print(port)
    ...     case Failure(error): print(error)
    22

Configuration (environment):
    FALLIBLE_STRICT_PAYLOADS=true   reject None payloads at construction
    FALLIBLE_LOG_LEVEL=DEBUG        emit diagnostic events
"""

from .config import FallibleSettings, clear_settings_cache, get_settings
from .errors import ErrorCode, IllegalExtraction, InvalidPayload, ResultError, ResultException
from .monads import (
    Err,
    Failure,
    Ok,
    Result,
    Success,
    attempt,
    attempt_async,
    collect,
    collect_all,
    failure,
    from_iter,
    lift_async,
    partition,
    safe,
    success,
    traverse,
)
from .observability import configure_logging, get_logger

__version__ = "0.1.0"

__all__ = [
    # Result
    "Result", "Success", "Failure", "Ok", "Err", "success", "failure",
    # Collection
    "collect", "from_iter", "traverse", "collect_all", "partition",
    # Exception bridging
    "attempt", "attempt_async", "safe",
    # Async
    "lift_async",
    # Errors
    "ErrorCode", "ResultError", "ResultException", "IllegalExtraction", "InvalidPayload",
    # Configuration & logging
    "FallibleSettings", "get_settings", "clear_settings_cache", "configure_logging", "get_logger",
]
