"""Infrastructure modules for the game state store.

Centralized infrastructure components:
- configuration: Settings management (Settings, AwsSettings, RetrySettings)
- clients: Native client construction for DynamoDB, Datastore and Cosmos DB
- logging: Structured logging (configure_logging, get_module_logger)
- operations: Operation status and backend error classification
- resilience: Retry policies and delay strategies
- services: Application-scoped providers (get_settings)
"""

from infrastructure.operations.status import OperationStatus
from infrastructure.services import get_settings

__all__ = [
    "OperationStatus",
    "get_settings",
]
