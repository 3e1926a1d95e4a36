"""Infrastructure configuration module - public API.

This module provides centralized configuration management for the game state
store using Pydantic BaseSettings with backend-based organization.

Exports:
    Settings: Main settings class (for testing/overrides)
    AwsSettings, AzureSettings, GcpSettings: Backend connection settings
    RetrySettings: Retry policy settings class

Example:
    ```python
    from infrastructure.services import get_settings

    settings = get_settings()

    table = settings.aws.DYNAMODB_TABLE
    database = settings.azure.DATABASE_NAME
    max_attempts = settings.retry.max_attempts
    ```
"""

from infrastructure.configuration.settings import Settings
from infrastructure.configuration.integrations import (
    AwsSettings,
    AzureSettings,
    GcpSettings,
)
from infrastructure.configuration.infrastructure.retry import RetrySettings

__all__ = ["Settings", "AwsSettings", "AzureSettings", "GcpSettings", "RetrySettings"]
