"""Shared fixtures for retry policy tests."""

from typing import Any, Dict, List, Tuple

import pytest

from infrastructure.resilience.retry import FixedDelay, RetryPolicy


class RecordingObserver:
    """Retry observer keeping every event in memory."""

    def __init__(self):
        self.warnings: List[Tuple[str, Dict[str, Any]]] = []
        self.errors: List[Tuple[BaseException, Dict[str, Any]]] = []

    def log_warning(self, message: str, **context: Any) -> None:
        self.warnings.append((message, context))

    def log_error(self, error: BaseException, **context: Any) -> None:
        self.errors.append((error, context))


class FlakyOperation:
    """Callable failing a fixed number of times before returning a value."""

    def __init__(self, failures: int, error: Exception = None, result: Any = "ok"):
        self.failures = failures
        self.error = error or ConnectionError("backend unavailable")
        self.result = result
        self.calls = 0

    def __call__(self):
        self.calls += 1
        if self.calls <= self.failures:
            raise self.error
        return self.result


@pytest.fixture
def observer():
    return RecordingObserver()


@pytest.fixture
def flaky_operation_factory():
    """Factory for FlakyOperation instances."""
    return FlakyOperation


@pytest.fixture
def retry_policy_factory(observer):
    """Factory for RetryPolicy instances that record sleeps instead of sleeping."""

    def _factory(
        max_attempts: int = 4,
        delay=None,
        non_retryable=(),
        name: str = "TestGameStateStore",
    ):
        sleeps: List[float] = []
        policy = RetryPolicy(
            name=name,
            max_attempts=max_attempts,
            delay=delay or FixedDelay(0.2),
            observer=observer,
            non_retryable=non_retryable,
            sleep=sleeps.append,
        )
        return policy, sleeps

    return _factory
