"""Per-backend GameState codecs."""

from modules.gamestate.codecs.base import GameStateCodec
from modules.gamestate.codecs.cosmos import CosmosCodec
from modules.gamestate.codecs.datastore import DatastoreCodec
from modules.gamestate.codecs.dynamodb import DynamoDBCodec

__all__ = ["CosmosCodec", "DatastoreCodec", "DynamoDBCodec", "GameStateCodec"]
