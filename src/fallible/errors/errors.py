"""Standardized errors raised by Result operations.

Two conditions are library-level errors: extracting the wrong variant's payload
and (in strict mode) constructing a variant around ``None``. A Failure's own
payload is a value, never an exception, and is not represented here.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Literal, Self

from pydantic import BaseModel


class ErrorCode(StrEnum):
    """Error codes for misuse of a Result."""
    ILLEGAL_EXTRACTION = "ILLEGAL_EXTRACTION"
    INVALID_PAYLOAD = "INVALID_PAYLOAD"


class ResultError(BaseModel):
    """Structured description of a Result misuse."""

    model_config = {"frozen": True}

    code: ErrorCode
    operation: str
    variant: Literal["Success", "Failure"]
    message: str
    context: str | None = None

    @classmethod
    def create(
        cls,
        code: ErrorCode,
        operation: str,
        variant: Literal["Success", "Failure"],
        message: str,
        *,
        context: str | None = None,
    ) -> Self:
        """Factory method for construction."""
        return cls(code=code, operation=operation, variant=variant, message=message, context=context)

    def render(self) -> str:
        """Format as ``"{context}: {message}"`` or just the message."""
        return f"{self.context}: {self.message}" if self.context else self.message

    __str__ = render


class ResultException(Exception):
    """Exception wrapping a ResultError for raising."""

    __slots__ = ("error",)

    def __init__(self, error: ResultError) -> None:
        self.error = error
        super().__init__(error.render())

    @property
    def code(self) -> ErrorCode:
        return self.error.code


class IllegalExtraction(ResultException):
    """Raised when unwrapping/expecting the payload of the other variant.

    Signals a caller-side logic error and is never recovered internally.
    """

    @classmethod
    def create(
        cls,
        operation: str,
        variant: Literal["Success", "Failure"],
        *,
        context: str | None = None,
    ) -> Self:
        """Create with the fixed ``"<operation> called on a <variant> value"`` text."""
        return cls(ResultError.create(
            ErrorCode.ILLEGAL_EXTRACTION,
            operation,
            variant,
            f"{operation} called on a {variant} value",
            context=context,
        ))


class InvalidPayload(ResultException, ValueError):
    """Raised in strict payload mode when a variant is built around ``None``."""

    @classmethod
    def create(cls, variant: Literal["Success", "Failure"]) -> Self:
        return cls(ResultError.create(
            ErrorCode.INVALID_PAYLOAD,
            "__init__",
            variant,
            f"{variant} payload must not be None when strict payloads are enabled",
        ))
