"""AWS integration settings."""

from typing import Optional

from pydantic import Field

from infrastructure.configuration.base import IntegrationSettings


class AwsSettings(IntegrationSettings):
    """AWS configuration settings for the DynamoDB game state backend.

    Environment Variables:
        AWS_REGION: AWS region for DynamoDB (default: ca-central-1)
        AWS_ACCESS_KEY_ID: Static access key (optional, falls back to the
            default boto3 credential chain when empty)
        AWS_SECRET_ACCESS_KEY: Static secret key paired with AWS_ACCESS_KEY_ID
        AWS_ENDPOINT_URL: Custom endpoint (DynamoDB Local, LocalStack)
        GAMESTATE_DYNAMODB_TABLE: Table holding game state records

    Example:
        ```python
        from infrastructure.services import get_settings

        settings = get_settings()

        region = settings.aws.AWS_REGION
        table = settings.aws.DYNAMODB_TABLE
        ```
    """

    AWS_REGION: str = Field(default="ca-central-1", alias="AWS_REGION")
    ACCESS_KEY_ID: str = Field(default="", alias="AWS_ACCESS_KEY_ID")
    SECRET_ACCESS_KEY: str = Field(default="", alias="AWS_SECRET_ACCESS_KEY")
    ENDPOINT_URL: Optional[str] = Field(default=None, alias="AWS_ENDPOINT_URL")
    DYNAMODB_TABLE: str = Field(default="GameState", alias="GAMESTATE_DYNAMODB_TABLE")

    @property
    def has_static_credentials(self) -> bool:
        """Whether an explicit access key pair is configured."""
        return bool(self.ACCESS_KEY_ID and self.SECRET_ACCESS_KEY)
