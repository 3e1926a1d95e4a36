"""Retry policy wrapping fallible units of work.

Usage:
    from infrastructure.resilience.retry import (
        FixedDelay,
        RetryPolicy,
        StructlogRetryObserver,
    )

    policy = RetryPolicy(
        name="CosmosGameStateStore",
        max_attempts=4,
        delay=FixedDelay(0.2),
        observer=StructlogRetryObserver("CosmosGameStateStore"),
    )
    document = policy.execute(lambda: collection.find_one(query), operation="get")
"""

import time
from typing import Any, Callable, Tuple, Type, TypeVar

from infrastructure.resilience.retry.delays import DelayStrategy
from infrastructure.resilience.retry.observer import RetryObserver

T = TypeVar("T")


class RetryPolicy:
    """Re-executes a zero-argument callable on failure.

    ``max_attempts`` counts every call including the first one. Before each
    retry the observer receives a warning carrying the attempt count, the
    failure description and the delay. Once attempts are exhausted the
    observer receives an error event and the original exception is re-raised
    unchanged, with a note describing the retry context attached.

    Exceptions listed in ``non_retryable`` are reported and re-raised on the
    first occurrence.

    The policy holds no per-call state and is safe to share between threads;
    a retry delay only blocks the thread whose call is retrying.

    Args:
        name: Name used in warning messages (backend-qualified store name)
        max_attempts: Total attempts, at least 1
        delay: DelayStrategy computing the wait before each retry
        observer: RetryObserver receiving retry and failure events
        non_retryable: Exception types that are never retried
        sleep: Sleep function, injectable for tests
    """

    def __init__(
        self,
        name: str,
        max_attempts: int,
        delay: DelayStrategy,
        observer: RetryObserver,
        non_retryable: Tuple[Type[BaseException], ...] = (),
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        if max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")
        self._name = name
        self._max_attempts = max_attempts
        self._delay = delay
        self._observer = observer
        self._non_retryable = tuple(non_retryable)
        self._sleep = sleep

    @property
    def name(self) -> str:
        return self._name

    @property
    def max_attempts(self) -> int:
        return self._max_attempts

    @property
    def delay(self) -> DelayStrategy:
        return self._delay

    def execute(self, operation: Callable[[], T], /, **context: Any) -> T:
        """Run ``operation`` until it succeeds or the attempt budget is spent.

        Args:
            operation: Zero-argument callable performing the backend call
            **context: Extra key/values forwarded to observer events

        Returns:
            Whatever ``operation`` returns

        Raises:
            The last exception raised by ``operation``, unchanged.
        """
        attempt = 0
        while True:
            attempt += 1
            try:
                return operation()
            except Exception as exc:  # pylint: disable=broad-except
                if isinstance(exc, self._non_retryable):
                    self._observer.log_error(exc, attempts=attempt, **context)
                    raise

                if attempt >= self._max_attempts:
                    self._observer.log_error(exc, attempts=attempt, **context)
                    exc.add_note(
                        f"{self._name}: gave up after {attempt} attempt(s)"
                    )
                    raise

                delay = self._delay.delay_for(attempt)
                self._observer.log_warning(
                    f"{self._name} Retry - Count:{attempt}, Exception:{exc}",
                    attempt=attempt,
                    delay=delay,
                    error=str(exc),
                    **context,
                )
                self._sleep(delay)
