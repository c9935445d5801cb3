"""Result type and its combinators.

Example:
    >>> from fallible.monads import Result, success, failure
    >>>
    >>> def divide(a: int, b: int) -> Result[float, str]:
    ...     if b == 0:
    ...         return failure("division by zero")
    ...     return success(a / b)
    >>>
    >>> divide(10, 2).map(lambda x: x * 2).and_then(lambda x: success(x + 1)).unwrap()
    11.0
"""

from .attempt import attempt, attempt_async, safe
from .collection import collect, collect_all, from_iter, partition, traverse
from .lift import lift_async
from .result import Err, Failure, Ok, Result, Success, failure, success

__all__ = [
    # Core types
    "Result",
    "Success",
    "Failure",
    "Ok",
    "Err",
    # Constructors
    "success",
    "failure",
    # Collection operations
    "collect",
    "from_iter",
    "traverse",
    "collect_all",
    "partition",
    # Exception bridging
    "attempt",
    "attempt_async",
    "safe",
    # Async lifting
    "lift_async",
]
