from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class BackoffOptions:
    """Options used to build an ExponentialBackoffStrategy.

    timeout_in_nanosecs is the initial delay before the first retry.
    max_retries bounds the number of retries after the first attempt;
    None means retry forever."""

    timeout_in_nanosecs: int
    max_retries: Optional[int] = None

    def __post_init__(self) -> None:
        if self.timeout_in_nanosecs < 0:
            raise ValueError("timeout_in_nanosecs must be >= 0")
        if self.max_retries is not None and self.max_retries < 0:
            raise ValueError("max_retries must be >= 0 or None")

    @property
    def unlimited(self) -> bool:
        return self.max_retries is None
