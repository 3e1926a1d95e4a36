"""Cloud Datastore property codec for game states."""

import json
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

PLATFORM_TYPE = "GCP-DATASTORE"

# Inventory is stored as a JSON string and is never queried.
UNINDEXED_PROPERTIES = (INVENTORY,)


def _decode_inventory(value: Any) -> Dict[str, str]:
    if not value:
        return {}
    if isinstance(value, Mapping):
        return {str(k): str(v) for k, v in value.items()}
    return json.loads(value)


class DatastoreCodec(GameStateCodec):
    """Maps GameState to Datastore entity properties.

    ``to_native`` returns plain properties; the adapter attaches them to an
    entity with a service-allocated key. ``from_native`` expects an
    ``Entity`` and uses its key id as the platform key.
    """

    platform_type = PLATFORM_TYPE

    def to_native(self, entity: GameState) -> Dict[str, Any]:
        properties = {
            RECORD_ID: entity.record_id,
            PLAYER_ID: entity.player_id,
            GAME_ID: entity.game_id,
            RECORD_CREATED_AT: entity.record_created_at,
        }
        properties.update(self.to_native_updates(entity))
        return properties

    def to_native_updates(self, entity: GameState) -> Dict[str, Any]:
        return {
            HEALTH: entity.health,
            CURRENT_LEVEL: entity.current_level,
            INVENTORY: json.dumps(entity.inventory, sort_keys=True, separators=(",", ":")),
        }

    def from_native(self, record: Mapping[str, Any]) -> GameState:
        key = getattr(record, "key", None)
        platform_key = "" if key is None or key.id_or_name is None else str(key.id_or_name)
        return GameState(
            record_id=string_or_empty(record.get(RECORD_ID)),
            game_id=string_or_empty(record.get(GAME_ID)),
            player_id=string_or_empty(record.get(PLAYER_ID)),
            health=int_or_zero(record.get(HEALTH)),
            current_level=int_or_zero(record.get(CURRENT_LEVEL)),
            inventory=_decode_inventory(record.get(INVENTORY)),
            record_created_at=record.get(RECORD_CREATED_AT),
            platform_key=platform_key,
            platform_type=self.platform_type,
        )
