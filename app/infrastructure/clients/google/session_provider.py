"""Google Cloud session provider for Datastore client creation."""

from typing import List, Optional

import structlog
from google.cloud import datastore  # type: ignore
from google.oauth2 import service_account

from infrastructure.configuration import GcpSettings

logger = structlog.get_logger()


class SessionProvider:
    """Manages Google Cloud authentication and Datastore client creation.

    Centralizes credential loading so the Datastore backend does not need to
    know where its credentials come from. When no key file is configured the
    client falls back to Application Default Credentials.

    Args:
        project_id: GCP project owning the Datastore database
        json_auth_path: Path to a service account JSON key file
        namespace: Optional Datastore namespace
        scopes: OAuth scopes applied to service account credentials

    Thread Safety:
        The returned ``datastore.Client`` is safe to share between threads.
    """

    def __init__(
        self,
        project_id: Optional[str] = None,
        json_auth_path: Optional[str] = None,
        namespace: Optional[str] = None,
        scopes: Optional[List[str]] = None,
    ) -> None:
        self._project_id = project_id or None
        self._json_auth_path = json_auth_path or None
        self._namespace = namespace or None
        self._scopes: List[str] = scopes or []
        self._logger = logger.bind(component="google_session_provider")

    @classmethod
    def from_settings(cls, settings: GcpSettings) -> "SessionProvider":
        """Build a provider from GCP settings."""
        return cls(
            project_id=settings.PROJECT_ID,
            json_auth_path=settings.JSON_AUTH_PATH,
            namespace=settings.NAMESPACE,
            scopes=settings.SCOPES,
        )

    def get_credentials(self) -> Optional[service_account.Credentials]:
        """Load service account credentials, or None for default credentials.

        Raises:
            ValueError: If the key file cannot be read or parsed
        """
        if not self._json_auth_path:
            return None
        try:
            return service_account.Credentials.from_service_account_file(
                self._json_auth_path, scopes=self._scopes or None
            )
        except (OSError, ValueError) as e:
            self._logger.error(
                "invalid_credentials_file", path=self._json_auth_path, error=str(e)
            )
            raise ValueError(
                f"Invalid service account key file: {self._json_auth_path}"
            ) from e

    def get_datastore_client(self) -> datastore.Client:
        """Create an authenticated Datastore client."""
        credentials = self.get_credentials()
        self._logger.debug(
            "creating_datastore_client",
            project_id=self._project_id,
            namespace=self._namespace,
            service_account=credentials is not None,
        )
        return datastore.Client(
            project=self._project_id,
            namespace=self._namespace,
            credentials=credentials,
        )
