"""Resilience patterns and implementations.

This module contains resilience-related infrastructure components. The
retry policy wraps every game state backend call.
"""

from infrastructure.resilience.retry import (
    ExponentialDelay,
    FixedDelay,
    RetryObserver,
    RetryPolicy,
    StructlogRetryObserver,
    create_retry_policy,
)

__all__ = [
    "RetryPolicy",
    "FixedDelay",
    "ExponentialDelay",
    "RetryObserver",
    "StructlogRetryObserver",
    "create_retry_policy",
]
