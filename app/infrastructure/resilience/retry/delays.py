"""Delay strategies for the retry policy."""

from dataclasses import dataclass
from typing import Optional, Protocol


class DelayStrategy(Protocol):
    """Computes the wait before a retry.

    ``retry_number`` is 1 for the first retry (the second attempt).
    """

    def delay_for(self, retry_number: int) -> float:
        ...


@dataclass(frozen=True)
class FixedDelay:
    """Waits the same number of seconds before every retry."""

    seconds: float

    def __post_init__(self) -> None:
        if self.seconds < 0:
            raise ValueError("seconds must not be negative")

    def delay_for(self, retry_number: int) -> float:
        return self.seconds


@dataclass(frozen=True)
class ExponentialDelay:
    """Waits ``base_seconds * multiplier ** retry_number``, optionally capped.

    With the defaults (base 1s, multiplier 2) retries wait 2s, 4s, 8s...
    """

    base_seconds: float = 1.0
    multiplier: float = 2.0
    max_seconds: Optional[float] = None

    def __post_init__(self) -> None:
        if self.base_seconds < 0:
            raise ValueError("base_seconds must not be negative")
        if self.multiplier < 1:
            raise ValueError("multiplier must be at least 1")
        if self.max_seconds is not None and self.max_seconds < self.base_seconds:
            raise ValueError("max_seconds must be >= base_seconds")

    def delay_for(self, retry_number: int) -> float:
        delay = self.base_seconds * (self.multiplier**retry_number)
        if self.max_seconds is not None:
            return min(delay, self.max_seconds)
        return delay
