"""Game state store configuration settings - main aggregator."""

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Integration settings
from infrastructure.configuration.integrations import (
    AwsSettings,
    AzureSettings,
    GcpSettings,
)

# Infrastructure settings
from infrastructure.configuration.infrastructure import RetrySettings

BackendName = Literal["dynamodb", "datastore", "cosmos"]


class Settings(BaseSettings):
    """Game state store configuration settings - main aggregator.

    Aggregates all domain-specific settings into a single configuration object.
    Settings are organized by concern:

    - **Integrations**: Backend connection parameters (AWS, Azure, GCP)
    - **Infrastructure**: Core system configuration (retry policy)

    Environment Variables:
        PREFIX: Environment prefix for non-production deployments
        LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR)
        GAMESTATE_BACKEND: Default backend variant (dynamodb, datastore, cosmos)

    Example:
        ```python
        from infrastructure.services import get_settings

        settings = get_settings()

        region = settings.aws.AWS_REGION
        attempts = settings.retry.max_attempts

        if settings.is_production:
            # Production-specific logic...
        ```
    """

    # Application-level settings
    PREFIX: str = ""
    LOG_LEVEL: str = "INFO"
    BACKEND: BackendName = Field(default="dynamodb", alias="GAMESTATE_BACKEND")

    # Integration settings
    aws: AwsSettings
    azure: AzureSettings
    gcp: GcpSettings

    # Infrastructure settings
    retry: RetrySettings

    @property
    def is_production(self) -> bool:
        """Check if the application is running in production.

        Returns:
            True if PREFIX is empty (production), False otherwise.
        """
        return not bool(self.PREFIX)

    def __init__(self, **kwargs):
        """Initialize Settings with automatic subsettings instantiation.

        Args:
            **kwargs: Optional overrides for specific settings sections.
        """
        settings_map = {
            # Integrations
            "aws": AwsSettings,
            "azure": AzureSettings,
            "gcp": GcpSettings,
            # Infrastructure
            "retry": RetrySettings,
        }

        for setting_name, setting_class in settings_map.items():
            if setting_name not in kwargs:
                kwargs[setting_name] = setting_class()

        super().__init__(**kwargs)

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )
