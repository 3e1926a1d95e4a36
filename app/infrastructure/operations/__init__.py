"""Error classification types and status enums.

This module contains standardized status enums, the classification
dataclass, and error classifiers for backend client exceptions.
"""

from infrastructure.operations.classifiers import (
    classify_aws_error,
    classify_backend_error,
    classify_google_error,
    classify_mongo_error,
)
from infrastructure.operations.result import ErrorClassification
from infrastructure.operations.status import OperationStatus

__all__ = [
    "ErrorClassification",
    "OperationStatus",
    "classify_aws_error",
    "classify_backend_error",
    "classify_google_error",
    "classify_mongo_error",
]
