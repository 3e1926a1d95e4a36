"""Retry policy for backend calls.

Architecture:
- RetryPolicy: wraps a zero-argument callable with bounded attempts
- DelayStrategy: FixedDelay or ExponentialDelay backoff
- RetryObserver: side channel receiving retry warnings and terminal errors
- create_retry_policy: builds a policy for a backend from RetrySettings

Usage:
    from infrastructure.resilience.retry import create_retry_policy

    policy = create_retry_policy("CosmosGameStateStore", settings.retry, "cosmos")
    result = policy.execute(lambda: collection.find_one(query), operation="get")
"""

from infrastructure.resilience.retry.delays import (
    DelayStrategy,
    ExponentialDelay,
    FixedDelay,
)
from infrastructure.resilience.retry.factory import (
    create_delay_strategy,
    create_retry_policy,
)
from infrastructure.resilience.retry.observer import (
    RetryObserver,
    StructlogRetryObserver,
)
from infrastructure.resilience.retry.policy import RetryPolicy

__all__ = [
    # Policy
    "RetryPolicy",
    # Delays
    "DelayStrategy",
    "FixedDelay",
    "ExponentialDelay",
    # Observers
    "RetryObserver",
    "StructlogRetryObserver",
    # Factory
    "create_delay_strategy",
    "create_retry_policy",
]
