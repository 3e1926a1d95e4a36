"""Cosmos DB (Mongo API) document codec for game states."""

from typing import Any, Dict, Mapping

from modules.gamestate.codecs.base import (
    CURRENT_LEVEL,
    GAME_ID,
    HEALTH,
    INVENTORY,
    PLAYER_ID,
    RECORD_CREATED_AT,
    RECORD_ID,
    GameStateCodec,
    int_or_zero,
    string_or_empty,
)
from modules.gamestate.domain.models import GameState

PLATFORM_TYPE = "COSMOS-MONGO"
DOCUMENT_ID = "_id"


class CosmosCodec(GameStateCodec):
    """Maps GameState to Mongo documents.

    The document ``_id`` is an ObjectId assigned on insert; its string form
    is the platform key. Timestamps are stored as BSON dates.
    """

    platform_type = PLATFORM_TYPE

    def to_native(self, entity: GameState) -> Dict[str, Any]:
        document = {
            RECORD_ID: entity.record_id,
            PLAYER_ID: entity.player_id,
            GAME_ID: entity.game_id,
            RECORD_CREATED_AT: entity.record_created_at,
        }
        document.update(self.to_native_updates(entity))
        return document

    def to_native_updates(self, entity: GameState) -> Dict[str, Any]:
        return {
            HEALTH: entity.health,
            CURRENT_LEVEL: entity.current_level,
            INVENTORY: dict(entity.inventory),
        }

    def from_native(self, record: Mapping[str, Any]) -> GameState:
        document_id = record.get(DOCUMENT_ID)
        return GameState(
            record_id=string_or_empty(record.get(RECORD_ID)),
            game_id=string_or_empty(record.get(GAME_ID)),
            player_id=string_or_empty(record.get(PLAYER_ID)),
            health=int_or_zero(record.get(HEALTH)),
            current_level=int_or_zero(record.get(CURRENT_LEVEL)),
            inventory=dict(record.get(INVENTORY) or {}),
            record_created_at=record.get(RECORD_CREATED_AT),
            platform_key="" if document_id is None else str(document_id),
            platform_type=self.platform_type,
        )
