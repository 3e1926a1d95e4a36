"""Error classification dataclass.

Uniform description of a classified failure: its status, a human-friendly
message, and backend-specific details.
"""

from dataclasses import dataclass
from typing import Optional

from infrastructure.operations.status import OperationStatus


@dataclass(frozen=True)
class ErrorClassification:
    """Classification of an exception raised by a backend call.

    Attributes:
        status: OperationStatus -- high-level failure class
        message: str -- human-friendly message for logs/troubleshooting
        error_code: Optional[str] -- machine error code from the backend
        retry_after: Optional[int] -- seconds until retry when rate-limited
    """

    status: OperationStatus
    message: str
    error_code: Optional[str] = None
    retry_after: Optional[int] = None

    @property
    def is_transient(self) -> bool:
        """True when the failure may succeed on retry."""
        return self.status == OperationStatus.TRANSIENT_ERROR

    @classmethod
    def transient(
        cls,
        message: str,
        error_code: Optional[str] = None,
        retry_after: Optional[int] = None,
    ) -> "ErrorClassification":
        """Create a transient (retryable) classification.

        Use for failures such as network timeouts, throttling and temporary
        service unavailability.
        """
        return cls(OperationStatus.TRANSIENT_ERROR, message, error_code, retry_after)

    @classmethod
    def permanent(
        cls, message: str, error_code: Optional[str] = None
    ) -> "ErrorClassification":
        """Create a permanent (fatal) classification."""
        return cls(OperationStatus.PERMANENT_ERROR, message, error_code)
