from __future__ import annotations

from typing import Any, Optional


class BackoffError(Exception):
    """Base class for every error raised by this package."""


class OperationFailure(BackoffError):
    """Raised by a wrapped operation to signal a failed attempt.

    Any exception counts as a failure; this one exists for operations
    that have no natural exception type of their own."""


class RetriesExhaustedError(BackoffError):
    """The retry ceiling was exceeded before the operation succeeded.

    zero_value holds the empty value of the expected result type so
    callers that unpack a result still get something of the right shape.
    The last operation error is chained as __cause__."""

    def __init__(self, zero_value: Any, attempts: int, max_retries: int) -> None:
        super().__init__(f"process reached max retries on exponential backoff ({attempts} attempts, max_retries={max_retries})")
        self.zero_value = zero_value
        self.attempts = attempts
        self.max_retries = max_retries


class BackoffCancelledError(BackoffError):
    """The campaign was cancelled before the operation succeeded."""

    def __init__(self, attempts: int, last_error: Optional[BaseException] = None) -> None:
        super().__init__(f"exponential backoff cancelled after {attempts} attempts")
        self.attempts = attempts
        self.last_error = last_error


class SerializationError(BackoffError):
    """Encoding or decoding a value failed."""
