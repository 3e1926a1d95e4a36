"""Azure Cosmos DB client construction for the Cosmos backend."""

from infrastructure.clients.azure.connection import CosmosConnectionManager

__all__ = ["CosmosConnectionManager"]
