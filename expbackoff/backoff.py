from __future__ import annotations

import logging
import random
import threading
import time
from typing import Any, Callable, Generic, Optional, Protocol, TypeVar

from .errors import BackoffCancelledError, RetriesExhaustedError
from .models import BackoffOptions
from .zero import get_zero

logger = logging.getLogger(__name__)

T = TypeVar("T")

# internal marker for "no retry ceiling"; never exposed through the public API
_UNLIMITED_RETRIES = -1

_NANOS_PER_SECOND = 1_000_000_000


class RandomSource(Protocol):
    def randint(self, a: int, b: int) -> int:
        ...


class ExponentialBackoffStrategy(Generic[T]):
    """Exponential backoff with jitter around a fallible operation.

    On each failure the strategy sleeps for the current timeout plus up to
    +/- 25% jitter, then grows the timeout by shifting it left by
    (depth - 1) bits, so the sequence for a 100ns base is 100, 100, 200, 800.

    A finite max_retries caps the number of retries after the first
    attempt: the operation runs at most max_retries + 1 times.

    Instances are not thread-safe; use one per retry campaign."""

    def __init__(
        self,
        options: BackoffOptions,
        result_type: Any = None,
        rng: Optional[RandomSource] = None,
        sleep: Optional[Callable[[float], None]] = None,
    ) -> None:
        self._depth = 1
        self._initial_timeout = options.timeout_in_nanosecs
        self._current_timeout = options.timeout_in_nanosecs
        self._max_retries = _UNLIMITED_RETRIES if options.unlimited else options.max_retries
        self._result_type = result_type
        self._rng = rng if rng is not None else random.Random()
        self._sleep = sleep if sleep is not None else time.sleep

    @property
    def depth(self) -> int:
        return self._depth

    @property
    def initial_timeout(self) -> int:
        return self._initial_timeout

    @property
    def current_timeout(self) -> int:
        return self._current_timeout

    @property
    def max_retries(self) -> Optional[int]:
        """The retry ceiling, or None when retries are unlimited."""
        return None if self._max_retries == _UNLIMITED_RETRIES else self._max_retries

    def perform_backoff(
        self,
        operation: Callable[[], T],
        cancel_event: Optional[threading.Event] = None,
    ) -> T:
        """Run operation until it returns, retrying on any exception.

        Raises RetriesExhaustedError once the retry ceiling is passed and
        BackoffCancelledError if cancel_event is set before a success."""
        last_error: Optional[BaseException] = None
        while True:
            if cancel_event is not None and cancel_event.is_set():
                self._cancelled(self._depth - 1, last_error)

            if self._exhausted():
                attempts = self._depth - 1
                logger.warning(
                    "retries exhausted after %d attempts (max_retries=%d)",
                    attempts,
                    self._max_retries,
                )
                raise RetriesExhaustedError(
                    zero_value=get_zero(self._result_type),
                    attempts=attempts,
                    max_retries=self._max_retries,
                ) from last_error

            try:
                return operation()
            except Exception as exc:  # noqa: BLE001
                last_error = exc

            delay = self._current_timeout + self._generate_jitter()
            logger.debug(
                "attempt %d failed with %s, retrying in %dns",
                self._depth,
                type(last_error).__name__,
                delay,
            )
            self._wait(delay, cancel_event, last_error)

            self._current_timeout = self._current_timeout << (self._depth - 1)
            self._depth += 1

    def reset(self) -> None:
        """Return to the first attempt and the initial timeout."""
        self._depth = 1
        self._current_timeout = self._initial_timeout

    def _exhausted(self) -> bool:
        if self._max_retries == _UNLIMITED_RETRIES:
            return False
        return self._depth - 1 > self._max_retries

    def _generate_jitter(self) -> int:
        """Random value in [-current/4, current/4]."""
        n = self._current_timeout // 4
        return self._rng.randint(-n, n)

    def _wait(
        self,
        delay_ns: int,
        cancel_event: Optional[threading.Event],
        last_error: Optional[BaseException],
    ) -> None:
        seconds = max(delay_ns, 0) / _NANOS_PER_SECOND
        if cancel_event is None:
            self._sleep(seconds)
            return
        if cancel_event.wait(timeout=seconds):
            self._cancelled(self._depth, last_error)

    def _cancelled(self, attempts: int, last_error: Optional[BaseException]) -> None:
        logger.info("backoff cancelled after %d attempts", attempts)
        raise BackoffCancelledError(attempts=attempts, last_error=last_error)
