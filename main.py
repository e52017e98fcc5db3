from __future__ import annotations

import argparse
import logging
from dataclasses import dataclass
from typing import Optional

from expbackoff.backoff import ExponentialBackoffStrategy
from expbackoff.encode import encode_struct_to_json_string
from expbackoff.errors import OperationFailure, RetriesExhaustedError
from expbackoff.models import BackoffOptions


DEFAULT_TIMEOUT_NS = 50_000_000
DEFAULT_FAIL_TIMES = 3


@dataclass(frozen=True)
class DemoOutcome:
    success: bool
    value: Optional[int]
    attempts: int
    final_depth: int
    final_timeout_ns: int


class FlakyOperation:
    """Fails a fixed number of times, then returns the attempt count."""

    def __init__(self, fail_times: int) -> None:
        self._fail_times = fail_times
        self.calls = 0

    def __call__(self) -> int:
        self.calls += 1
        if self.calls <= self._fail_times:
            raise OperationFailure(f"simulated failure #{self.calls}")
        return self.calls


def run_demo(timeout_ns: int, max_retries: Optional[int], fail_times: int) -> DemoOutcome:
    options = BackoffOptions(timeout_in_nanosecs=timeout_ns, max_retries=max_retries)
    strategy: ExponentialBackoffStrategy[int] = ExponentialBackoffStrategy(options, result_type=int)
    operation = FlakyOperation(fail_times)

    try:
        value: Optional[int] = strategy.perform_backoff(operation)
        success = True
    except RetriesExhaustedError as exc:
        value = exc.zero_value
        success = False

    return DemoOutcome(
        success=success,
        value=value,
        attempts=operation.calls,
        final_depth=strategy.depth,
        final_timeout_ns=strategy.current_timeout,
    )


def main() -> None:
    parser = argparse.ArgumentParser()
    parser.add_argument("--run-demo", action="store_true", help="Retry a simulated flaky operation")

    parser.add_argument("--timeout-ns", type=int, default=DEFAULT_TIMEOUT_NS, help="Initial backoff timeout in nanoseconds")
    parser.add_argument("--max-retries", type=int, default=None, help="Retry ceiling (omit for unlimited)")
    parser.add_argument("--fail-times", type=int, default=DEFAULT_FAIL_TIMES, help="How many times the operation fails before succeeding")

    parser.add_argument("--json", action="store_true", help="Print the outcome as JSON")
    parser.add_argument("--log-level", default="WARNING", help="Logging level (DEBUG shows each retry)")

    args = parser.parse_args()
    logging.basicConfig(level=args.log_level.upper(), format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    if args.run_demo:
        outcome = run_demo(
            timeout_ns=args.timeout_ns,
            max_retries=args.max_retries,
            fail_times=args.fail_times,
        )
        if args.json:
            print(encode_struct_to_json_string(outcome))
        else:
            print(
                f"success={outcome.success} value={outcome.value} attempts={outcome.attempts} "
                f"depth={outcome.final_depth} timeout_ns={outcome.final_timeout_ns}"
            )
        return

    print("Nothing to do. Use --run-demo to run the demo.")


if __name__ == "__main__":
    main()
