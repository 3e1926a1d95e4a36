"""Domain models and errors for the gamestate module."""

from modules.gamestate.domain.errors import (
    GameStateError,
    NotFoundError,
    PaginationError,
    ValidationError,
)
from modules.gamestate.domain.models import (
    GameState,
    IdentityStrategy,
    QueryFilter,
    SearchCriteria,
    normalize_timestamp,
)

__all__ = [
    "GameState",
    "GameStateError",
    "IdentityStrategy",
    "NotFoundError",
    "PaginationError",
    "QueryFilter",
    "SearchCriteria",
    "ValidationError",
    "normalize_timestamp",
]
