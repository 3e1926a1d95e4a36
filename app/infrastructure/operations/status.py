"""Operation status enumeration.

Status codes used to classify backend failures so that log events can tell
transient faults from fatal ones.
"""

from enum import Enum


class OperationStatus(Enum):
    """Status codes for classified backend failures.

    Attributes:
        TRANSIENT_ERROR: Retryable error (network, timeout, throttling)
        PERMANENT_ERROR: Non-retryable backend fault (configuration, bad request)
        UNAUTHORIZED: Authentication or authorization failure
        NOT_FOUND: Backend resource (table, collection, database) not found
        VALIDATION_ERROR: Malformed input rejected before or by the backend
    """

    TRANSIENT_ERROR = "transient_error"
    PERMANENT_ERROR = "permanent_error"
    UNAUTHORIZED = "unauthorized"
    NOT_FOUND = "not_found"
    VALIDATION_ERROR = "validation_error"
