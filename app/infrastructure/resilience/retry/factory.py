"""Factory for building retry policies from configuration."""

from typing import Tuple, Type

import structlog

from infrastructure.configuration import RetrySettings
from infrastructure.resilience.retry.delays import (
    DelayStrategy,
    ExponentialDelay,
    FixedDelay,
)
from infrastructure.resilience.retry.observer import StructlogRetryObserver
from infrastructure.resilience.retry.policy import RetryPolicy

logger = structlog.get_logger()


def create_delay_strategy(settings: RetrySettings, backend: str) -> DelayStrategy:
    """Build the delay strategy configured for a backend.

    Args:
        settings: Retry settings
        backend: Backend name (dynamodb, datastore, cosmos)

    Returns:
        FixedDelay or ExponentialDelay

    Raises:
        ValueError: If the backend is unknown
    """
    if settings.strategy_for(backend) == "exponential":
        return ExponentialDelay(
            base_seconds=settings.exponential_base_seconds,
            max_seconds=settings.exponential_max_seconds,
        )
    return FixedDelay(settings.fixed_delay_seconds)


def create_retry_policy(
    name: str,
    settings: RetrySettings,
    backend: str,
    non_retryable: Tuple[Type[BaseException], ...] = (),
) -> RetryPolicy:
    """Factory to create the retry policy for one backend variant.

    Examples:
        >>> policy = create_retry_policy(
        ...     "DynamoDBGameStateStore", RetrySettings(), backend="dynamodb"
        ... )
        >>> policy.max_attempts
        4
    """
    delay = create_delay_strategy(settings, backend)
    logger.info(
        "creating_retry_policy",
        name=name,
        backend=backend,
        max_attempts=settings.max_attempts,
        delay_strategy=type(delay).__name__,
    )
    return RetryPolicy(
        name=name,
        max_attempts=settings.max_attempts,
        delay=delay,
        observer=StructlogRetryObserver(name),
        non_retryable=non_retryable,
    )
