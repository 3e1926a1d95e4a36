"""Shared contract for mapping GameState to and from native records."""

from abc import ABC, abstractmethod
from typing import Any, Dict, Mapping, Optional

from modules.gamestate.domain.models import GameState

# Persisted attribute names, identical on every backend.
RECORD_ID = "RecordId"
PLAYER_ID = "PlayerId"
HEALTH = "Health"
CURRENT_LEVEL = "CurrentLevel"
INVENTORY = "Inventory"
GAME_ID = "GameId"
RECORD_CREATED_AT = "RecordCreatedAt"

MUTABLE_FIELDS = (HEALTH, CURRENT_LEVEL, INVENTORY)


class GameStateCodec(ABC):
    """Bidirectional mapping between GameState and one backend's records.

    ``to_native`` never writes the platform key: the backend assigns or
    derives it. ``from_native`` always sets ``platform_key`` and
    ``platform_type``.
    """

    platform_type: str = ""

    @abstractmethod
    def to_native(self, entity: GameState) -> Dict[str, Any]:
        """Encode every domain field of ``entity``."""

    @abstractmethod
    def to_native_updates(self, entity: GameState) -> Dict[str, Any]:
        """Encode only the mutable fields (Health, CurrentLevel, Inventory)."""

    @abstractmethod
    def from_native(self, record: Mapping[str, Any]) -> GameState:
        """Decode a native record into a fully populated GameState."""


def string_or_empty(value: Optional[Any]) -> str:
    """Decode an optional string attribute; missing values become ``""``."""
    return "" if value is None else str(value)


def int_or_zero(value: Optional[Any]) -> int:
    return 0 if value is None else int(value)
