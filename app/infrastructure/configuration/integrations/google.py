"""Google Cloud Datastore integration settings."""

from typing import Optional

from pydantic import Field

from infrastructure.configuration.base import IntegrationSettings


class GcpSettings(IntegrationSettings):
    """GCP configuration settings for the Datastore game state backend.

    Environment Variables:
        GCP_PROJECT_ID: Project owning the Datastore database
        GCP_JSON_AUTH_PATH: Path to a service account key file. When empty the
            client uses Application Default Credentials.
        GCP_DATASTORE_NAMESPACE: Optional Datastore namespace
        GAMESTATE_DATASTORE_KIND: Entity kind (default: GameState)

    Example:
        ```python
        from infrastructure.services import get_settings

        settings = get_settings()

        project = settings.gcp.PROJECT_ID
        ```
    """

    PROJECT_ID: str = Field(default="", alias="GCP_PROJECT_ID")
    JSON_AUTH_PATH: str = Field(default="", alias="GCP_JSON_AUTH_PATH")
    NAMESPACE: Optional[str] = Field(default=None, alias="GCP_DATASTORE_NAMESPACE")
    DATASTORE_KIND: str = Field(default="GameState", alias="GAMESTATE_DATASTORE_KIND")

    SCOPES: list[str] = ["https://www.googleapis.com/auth/datastore"]
