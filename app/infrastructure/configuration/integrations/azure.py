"""Azure Cosmos DB (Mongo API) integration settings."""

from pydantic import Field

from infrastructure.configuration.base import IntegrationSettings


class AzureSettings(IntegrationSettings):
    """Azure Cosmos DB configuration settings.

    Environment Variables:
        COSMOS_CONNECTION_STRING: Mongo API connection string for the account
        COSMOS_DATABASE_NAME: Database holding the game state collection
        COSMOS_REGION: Preferred region (informational, logged at startup)
        GAMESTATE_COSMOS_COLLECTION: Collection name (default: GameState)
    """

    CONNECTION_STRING: str = Field(
        default="mongodb://localhost:27017", alias="COSMOS_CONNECTION_STRING"
    )
    DATABASE_NAME: str = Field(default="gamestate", alias="COSMOS_DATABASE_NAME")
    REGION: str = Field(default="", alias="COSMOS_REGION")
    COLLECTION_NAME: str = Field(
        default="GameState", alias="GAMESTATE_COSMOS_COLLECTION"
    )
