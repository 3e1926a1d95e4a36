"""DynamoDB attribute-value codec for game states."""

from datetime import datetime
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
)
from modules.gamestate.domain.models import GameState, normalize_timestamp

PLATFORM_TYPE = "AWS-DYNAMODB"


def format_timestamp(value: datetime) -> str:
    """Render a timestamp as a sortable ISO-8601 UTC string with milliseconds.

    Example: ``2024-05-01T12:30:00.250Z``
    """
    value = normalize_timestamp(value)
    return value.strftime("%Y-%m-%dT%H:%M:%S.") + f"{value.microsecond // 1000:03d}Z"


def parse_timestamp(value: str) -> datetime:
    return normalize_timestamp(datetime.fromisoformat(value))


def _string(record: Mapping[str, Any], name: str) -> str:
    return record.get(name, {}).get("S", "")


def _number(record: Mapping[str, Any], name: str) -> int:
    return int_or_zero(record.get(name, {}).get("N"))


class DynamoDBCodec(GameStateCodec):
    """Maps GameState to DynamoDB low-level client attribute values.

    The table key is ``PlayerId`` (partition) and ``RecordCreatedAt`` (sort);
    the platform key joins both as ``"{PlayerId}#{RecordCreatedAt}"``.
    """

    platform_type = PLATFORM_TYPE

    def key(self, player_id: str, record_created_at: datetime) -> Dict[str, Any]:
        """Native primary key for a logical identity."""
        return {
            PLAYER_ID: {"S": player_id},
            RECORD_CREATED_AT: {"S": format_timestamp(record_created_at)},
        }

    def platform_key(self, player_id: str, created_at: str) -> str:
        return f"{player_id}#{created_at}"

    def to_native(self, entity: GameState) -> Dict[str, Any]:
        record = self.key(entity.player_id, entity.record_created_at)
        record.update(
            {
                RECORD_ID: {"S": entity.record_id},
                GAME_ID: {"S": entity.game_id},
            }
        )
        record.update(self.to_native_updates(entity))
        return record

    def to_native_updates(self, entity: GameState) -> Dict[str, Any]:
        return {
            HEALTH: {"N": str(entity.health)},
            CURRENT_LEVEL: {"N": str(entity.current_level)},
            INVENTORY: {"M": {k: {"S": v} for k, v in entity.inventory.items()}},
        }

    def from_native(self, record: Mapping[str, Any]) -> GameState:
        player_id = _string(record, PLAYER_ID)
        created_at = _string(record, RECORD_CREATED_AT)
        inventory = record.get(INVENTORY, {}).get("M", {})
        return GameState(
            record_id=_string(record, RECORD_ID),
            game_id=_string(record, GAME_ID),
            player_id=player_id,
            health=_number(record, HEALTH),
            current_level=_number(record, CURRENT_LEVEL),
            inventory={k: v.get("S", "") for k, v in inventory.items()},
            record_created_at=parse_timestamp(created_at) if created_at else None,
            platform_key=self.platform_key(player_id, created_at),
            platform_type=self.platform_type,
        )
