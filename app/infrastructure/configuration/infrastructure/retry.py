"""Retry policy infrastructure settings."""

from typing import Literal

from pydantic import Field, model_validator

from infrastructure.configuration.base import InfrastructureSettings

DelayStrategyName = Literal["fixed", "exponential"]


class RetrySettings(InfrastructureSettings):
    """Retry policy configuration for game state backend calls.

    Every store operation is wrapped in a retry policy built from these
    values when the store is created. The policy is immutable afterwards.

    Environment Variables:
        RETRY_MAX_ATTEMPTS: Total attempts per operation, first call included
            (default: 4, i.e. one call plus three retries)
        RETRY_FIXED_DELAY_SECONDS: Delay used by the fixed strategy (default: 0.2)
        RETRY_EXPONENTIAL_BASE_SECONDS: Base of the exponential strategy (default: 1.0)
        RETRY_EXPONENTIAL_MAX_SECONDS: Cap for exponential delays (default: 30)
        RETRY_DYNAMODB_STRATEGY: 'fixed' or 'exponential' (default: exponential)
        RETRY_DATASTORE_STRATEGY: 'fixed' or 'exponential' (default: fixed)
        RETRY_COSMOS_STRATEGY: 'fixed' or 'exponential' (default: fixed)

    Exponential Backoff:
        Delay calculation: min(base * (2 ^ retry), max)

        Example with defaults (base=1s, max=30s):
            Retry 1: 2s
            Retry 2: 4s
            Retry 3: 8s
    """

    max_attempts: int = Field(
        default=4,
        alias="RETRY_MAX_ATTEMPTS",
        description="Total attempts per operation, including the first call",
    )
    fixed_delay_seconds: float = Field(
        default=0.2,
        alias="RETRY_FIXED_DELAY_SECONDS",
        description="Delay between attempts for the fixed strategy (seconds)",
    )
    exponential_base_seconds: float = Field(
        default=1.0,
        alias="RETRY_EXPONENTIAL_BASE_SECONDS",
        description="Base delay for the exponential strategy (seconds)",
    )
    exponential_max_seconds: float = Field(
        default=30.0,
        alias="RETRY_EXPONENTIAL_MAX_SECONDS",
        description="Maximum delay for the exponential strategy (seconds)",
    )
    dynamodb_strategy: DelayStrategyName = Field(
        default="exponential",
        alias="RETRY_DYNAMODB_STRATEGY",
        description="Delay strategy for the DynamoDB backend",
    )
    datastore_strategy: DelayStrategyName = Field(
        default="fixed",
        alias="RETRY_DATASTORE_STRATEGY",
        description="Delay strategy for the Datastore backend",
    )
    cosmos_strategy: DelayStrategyName = Field(
        default="fixed",
        alias="RETRY_COSMOS_STRATEGY",
        description="Delay strategy for the Cosmos DB backend",
    )

    @model_validator(mode="after")
    def _check_bounds(self) -> "RetrySettings":
        if self.max_attempts < 1:
            raise ValueError("RETRY_MAX_ATTEMPTS must be at least 1")
        if self.fixed_delay_seconds < 0 or self.exponential_base_seconds < 0:
            raise ValueError("retry delays must not be negative")
        if self.exponential_max_seconds < self.exponential_base_seconds:
            raise ValueError(
                "RETRY_EXPONENTIAL_MAX_SECONDS must be >= RETRY_EXPONENTIAL_BASE_SECONDS"
            )
        return self

    def strategy_for(self, backend: str) -> DelayStrategyName:
        """Return the configured delay strategy name for a backend."""
        strategies = {
            "dynamodb": self.dynamodb_strategy,
            "datastore": self.datastore_strategy,
            "cosmos": self.cosmos_strategy,
        }
        if backend not in strategies:
            raise ValueError(f"Unknown game state backend: {backend}")
        return strategies[backend]
