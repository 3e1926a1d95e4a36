"""Game state persistence over DynamoDB, Cloud Datastore and Cosmos DB."""

from modules.gamestate.domain import (
    GameState,
    GameStateError,
    IdentityStrategy,
    NotFoundError,
    PaginationError,
    QueryFilter,
    SearchCriteria,
    ValidationError,
)
from modules.gamestate.factory import create_game_state_store, get_game_state_store
from modules.gamestate.store import GameStateStore

__all__ = [
    "GameState",
    "GameStateError",
    "GameStateStore",
    "IdentityStrategy",
    "NotFoundError",
    "PaginationError",
    "QueryFilter",
    "SearchCriteria",
    "ValidationError",
    "create_game_state_store",
    "get_game_state_store",
]
