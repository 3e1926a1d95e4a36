"""Session provider for AWS client operations.

Centralizes boto3 session creation, credential handling and configuration
building for AWS service clients.
"""

from typing import Any, Dict, Optional

import structlog
from botocore.client import BaseClient  # type: ignore

from infrastructure.clients.aws.client import get_boto3_client
from infrastructure.configuration import AwsSettings

logger = structlog.get_logger()


class SessionProvider:
    """Centralized provider for AWS session configuration and credentials.

    Manages region, endpoint URL and optional static credentials so service
    clients don't need to duplicate this code. When no access key pair is
    given, boto3's default credential chain applies.

    Args:
        region: AWS region for all clients (e.g., 'ca-central-1')
        endpoint_url: Custom endpoint URL (for DynamoDB Local/LocalStack)
        access_key_id: Optional static access key
        secret_access_key: Optional static secret key
    """

    def __init__(
        self,
        region: Optional[str] = None,
        endpoint_url: Optional[str] = None,
        access_key_id: Optional[str] = None,
        secret_access_key: Optional[str] = None,
    ) -> None:
        self.region = region
        self.endpoint_url = endpoint_url
        self._access_key_id = access_key_id
        self._secret_access_key = secret_access_key

    @classmethod
    def from_settings(cls, settings: AwsSettings) -> "SessionProvider":
        """Build a provider from AWS settings."""
        if not settings.has_static_credentials:
            return cls(region=settings.AWS_REGION, endpoint_url=settings.ENDPOINT_URL)
        return cls(
            region=settings.AWS_REGION,
            endpoint_url=settings.ENDPOINT_URL,
            access_key_id=settings.ACCESS_KEY_ID,
            secret_access_key=settings.SECRET_ACCESS_KEY,
        )

    def build_client_kwargs(self) -> Dict[str, Any]:
        """Build session and client configuration kwargs for boto3.

        Returns:
            Dict with session_config and client_config for get_boto3_client
        """
        session_config: Dict[str, Any] = {}
        client_config: Dict[str, Any] = {}

        if self.region:
            session_config["region_name"] = self.region

        if self._access_key_id and self._secret_access_key:
            session_config["aws_access_key_id"] = self._access_key_id
            session_config["aws_secret_access_key"] = self._secret_access_key

        if self.endpoint_url:
            client_config["endpoint_url"] = self.endpoint_url

        logger.debug(
            "built_client_kwargs",
            region=self.region,
            endpoint_url=self.endpoint_url,
            static_credentials=bool(self._access_key_id),
        )
        return {
            "session_config": session_config or None,
            "client_config": client_config or None,
        }

    def get_client(self, service_name: str) -> BaseClient:
        """Get a fully-configured boto3 client for the given service.

        Args:
            service_name: AWS service name (e.g., 'dynamodb')

        Returns:
            Configured boto3 client instance
        """
        kw = self.build_client_kwargs()
        return get_boto3_client(
            service_name,
            session_config=kw["session_config"],
            client_config=kw["client_config"],
        )
