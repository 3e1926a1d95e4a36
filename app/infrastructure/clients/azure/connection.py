"""Connection management for the Cosmos DB (Mongo API) backend.

Uses PyMongo's synchronous ``MongoClient``, which pools connections and is
safe to share between threads.
"""

from typing import Optional

import structlog
from pymongo import MongoClient
from pymongo.collection import Collection
from pymongo.database import Database

from infrastructure.configuration import AzureSettings

logger = structlog.get_logger()


class CosmosConnectionManager:
    """Manages the Mongo client for a Cosmos DB account.

    The client is created on first use. Dates are read back timezone-aware
    (UTC) so decoded timestamps compare equal to the stored values.

    Attributes:
        settings: Azure settings holding the connection string and names

    Examples:
        >>> manager = CosmosConnectionManager(settings.azure)
        >>> collection = manager.collection
        >>> collection.find_one({"PlayerId": "P1"})
        >>> manager.close()

        >>> with CosmosConnectionManager(settings.azure) as manager:
        ...     manager.collection.count_documents({})
    """

    def __init__(self, settings: AzureSettings):
        self.settings = settings
        self._client: Optional[MongoClient] = None

    @property
    def client(self) -> MongoClient:
        """Get or create the Mongo client instance."""
        if self._client is None:
            logger.debug(
                "creating_mongo_client",
                database=self.settings.DATABASE_NAME,
                region=self.settings.REGION,
            )
            self._client = MongoClient(self.settings.CONNECTION_STRING, tz_aware=True)
        return self._client

    @property
    def database(self) -> Database:
        """Get the configured database."""
        return self.client[self.settings.DATABASE_NAME]

    @property
    def collection(self) -> Collection:
        """Get the game state collection."""
        return self.database[self.settings.COLLECTION_NAME]

    def close(self) -> None:
        """Close the client and all pooled connections."""
        if self._client is not None:
            self._client.close()
            self._client = None

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False
