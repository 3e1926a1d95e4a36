"""Backend adapters for the game state store."""

from modules.gamestate.adapters.base import GameStateAdapter, NativePage
from modules.gamestate.adapters.cosmos import CosmosAdapter
from modules.gamestate.adapters.datastore import DatastoreAdapter
from modules.gamestate.adapters.dynamodb import DynamoDBAdapter

__all__ = [
    "CosmosAdapter",
    "DatastoreAdapter",
    "DynamoDBAdapter",
    "GameStateAdapter",
    "NativePage",
]
