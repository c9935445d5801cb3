"""Errors raised when a Result is misused.

- ErrorCode: Codes for the two misuse conditions
- ResultError: Frozen structured description (pydantic)
- ResultException: Exception carrying a ResultError
- IllegalExtraction / InvalidPayload: Concrete raised kinds
"""

from .errors import ErrorCode, IllegalExtraction, InvalidPayload, ResultError, ResultException

__all__ = ["ErrorCode", "ResultError", "ResultException", "IllegalExtraction", "InvalidPayload"]
