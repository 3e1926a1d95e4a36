"""Backend-neutral data models for the gamestate module.

Lightweight dataclasses (not Pydantic) shared by the store, the codecs and
the backend adapters:

  - GameState: the persisted entity
  - SearchCriteria: caller-facing description of a filtered, paged query
  - QueryFilter: the parsed, validated form of the search predicates
  - IdentityStrategy: how an adapter locates an existing record
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Dict, Optional


def normalize_timestamp(value: datetime) -> datetime:
    """Return ``value`` as an aware UTC datetime truncated to milliseconds.

    Naive datetimes are taken to be UTC.
    """
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    else:
        value = value.astimezone(timezone.utc)
    # BSON dates hold milliseconds; finer precision would not round-trip.
    # Rebuilt as a plain datetime so subclasses returned by native clients
    # (e.g. DatetimeWithNanoseconds) compare and repr like any other value.
    return datetime(
        value.year,
        value.month,
        value.day,
        value.hour,
        value.minute,
        value.second,
        value.microsecond // 1000 * 1000,
        tzinfo=timezone.utc,
    )


@dataclass
class GameState:
    """A player's saved game state.

    ``(player_id, record_created_at)`` is the logical identity.
    ``platform_key`` and ``platform_type`` are filled in by the store after a
    successful add or read and are only meaningful together.

    Attributes:
        record_id: Caller-assigned record identifier.
        game_id: Identifier of the game.
        player_id: Identifier of the player.
        health: Player health.
        current_level: Level reached.
        inventory: Item name to item value.
        record_created_at: Creation time, normalized to UTC milliseconds.
        platform_key: Backend-native identity rendered as a string.
        platform_type: Tag of the backend that produced ``platform_key``.
    """

    record_id: str = ""
    game_id: str = ""
    player_id: str = ""
    health: int = 0
    current_level: int = 0
    inventory: Dict[str, str] = field(default_factory=dict)
    record_created_at: Optional[datetime] = None
    platform_key: Optional[str] = None
    platform_type: Optional[str] = None

    def __setattr__(self, name, value):
        # Covers construction and later reassignment alike.
        if name == "record_created_at" and isinstance(value, datetime):
            value = normalize_timestamp(value)
        super().__setattr__(name, value)


class IdentityStrategy(str, Enum):
    """How an adapter identifies an existing record."""

    LOGICAL = "logical"
    PLATFORM_KEY = "platform_key"


@dataclass
class SearchCriteria:
    """Filtered, paged query over game states.

    Field names in ``search_fields`` are matched ignoring case and
    underscores. ``PlayerId`` is an equality predicate and ``CurrentLevel``
    a greater-than-or-equal threshold. An empty ``next_page_state`` requests
    the first page.
    """

    search_fields: Dict[str, str]
    page_size: int
    next_page_state: str = ""


@dataclass(frozen=True)
class QueryFilter:
    """Validated query predicates."""

    player_id: Optional[str] = None
    min_level: Optional[int] = None
