"""Retry observers.

Observers are the side channel through which the retry policy reports
retries and terminal failures. They never influence the wrapped call's
return value.
"""

from typing import Any, Optional, Protocol

import structlog

from infrastructure.operations.classifiers import classify_backend_error


class RetryObserver(Protocol):
    """Receives retry warnings and terminal failure events."""

    def log_warning(self, message: str, **context: Any) -> None:
        ...

    def log_error(self, error: BaseException, **context: Any) -> None:
        ...


class StructlogRetryObserver:
    """Retry observer that writes structured log events.

    Every event is bound with the policy ``name`` (the backend-qualified store
    name) so failures from different backend variants are distinguishable.
    Terminal failures are annotated with their error classification.

    Args:
        name: Backend-qualified name, e.g. ``"DynamoDBGameStateStore"``
        logger: Optional structlog logger; defaults to the global logger
    """

    def __init__(self, name: str, logger: Optional[Any] = None) -> None:
        self._name = name
        base = logger if logger is not None else structlog.get_logger()
        self._logger = base.bind(retry_policy=name)

    def log_warning(self, message: str, **context: Any) -> None:
        self._logger.warning("gamestate_retry", message=message, **context)

    def log_error(self, error: BaseException, **context: Any) -> None:
        classification = classify_backend_error(error)
        self._logger.error(
            "gamestate_operation_failed",
            error=str(error),
            error_type=type(error).__name__,
            status=classification.status.value,
            error_code=classification.error_code,
            **context,
        )
