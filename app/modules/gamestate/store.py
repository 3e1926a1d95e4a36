"""Backend-agnostic game state store.

One store implementation serves every backend: the adapter supplies the
native calls, codec, pagination strategy and identity strategy; the retry
policy wraps each adapter call.
"""

from datetime import datetime
from typing import Any, List, Mapping, Tuple

from infrastructure.logging import get_module_logger
from infrastructure.resilience.retry import RetryPolicy
from modules.gamestate.adapters.base import GameStateAdapter
from modules.gamestate.criteria import build_query_filter
from modules.gamestate.domain.errors import NotFoundError, ValidationError
from modules.gamestate.domain.models import GameState, IdentityStrategy, SearchCriteria

logger = get_module_logger()


def _require_string(entity: GameState, attribute: str) -> None:
    value = getattr(entity, attribute)
    if not isinstance(value, str) or not value:
        raise ValidationError(f"{attribute} must be a non-empty string")


def _require_int(entity: GameState, attribute: str) -> None:
    value = getattr(entity, attribute)
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(f"{attribute} must be an integer, got {value!r}")


def _validate_mutable_fields(entity: GameState) -> None:
    _require_int(entity, "health")
    _require_int(entity, "current_level")
    inventory = entity.inventory
    if not isinstance(inventory, Mapping):
        raise ValidationError("inventory must be a mapping of strings to strings")
    for key, value in inventory.items():
        if not isinstance(key, str) or not isinstance(value, str):
            raise ValidationError(
                f"inventory entries must be strings, got {key!r}: {value!r}"
            )


def _validate_new_entity(entity: GameState) -> None:
    if not isinstance(entity, GameState):
        raise ValidationError(f"Expected GameState, got {type(entity).__name__}")
    for attribute in ("record_id", "player_id", "game_id"):
        _require_string(entity, attribute)
    if not isinstance(entity.record_created_at, datetime):
        raise ValidationError("record_created_at must be set")
    _validate_mutable_fields(entity)


class GameStateStore:
    """CRUD and paged query operations over one backend.

    Every public operation validates its input before any I/O, then runs a
    single adapter call inside the retry policy. Native backend errors
    propagate unchanged once retries are exhausted.

    Args:
        adapter: Backend adapter
        retry_policy: Policy wrapping each adapter call

    Example:
        ```python
        store = create_game_state_store("cosmos")
        store.add(state)
        page, token = store.query(SearchCriteria({"PlayerId": "P1"}, page_size=20))
        ```
    """

    def __init__(self, adapter: GameStateAdapter, retry_policy: RetryPolicy) -> None:
        self._adapter = adapter
        self._retry = retry_policy
        self._logger = logger.bind(backend=adapter.name, store=retry_policy.name)

    @property
    def backend(self) -> str:
        return self._adapter.name

    @property
    def platform_type(self) -> str:
        return self._adapter.codec.platform_type

    def close(self) -> None:
        """Release the adapter's native client resources."""
        self._adapter.close()
        self._logger.debug("gamestate_store_closed")

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False

    def add(self, entity: GameState) -> GameState:
        """Insert ``entity`` and set its platform key and type.

        Raises:
            ValidationError: If a required field is missing or mistyped.
        """
        _validate_new_entity(entity)
        record = self._adapter.codec.to_native(entity)
        platform_key = self._retry.execute(
            lambda: self._adapter.insert(record), operation="add"
        )
        entity.platform_key = platform_key
        entity.platform_type = self.platform_type
        self._logger.debug(
            "game_state_added", player_id=entity.player_id, platform_key=platform_key
        )
        return entity

    def update(self, entity: GameState) -> bool:
        """Set Health, CurrentLevel and Inventory on the stored record.

        Returns:
            False when no record matches.
        """
        identity = self._identity(entity)
        _validate_mutable_fields(entity)
        fields = self._adapter.codec.to_native_updates(entity)
        updated = self._retry.execute(
            lambda: self._adapter.update_where(identity, fields), operation="update"
        )
        self._logger.debug("game_state_updated", updated=updated)
        return updated

    def delete(self, entity: GameState) -> bool:
        """Delete the stored record; True iff one was removed."""
        identity = self._identity(entity)
        deleted = self._retry.execute(
            lambda: self._adapter.delete_where(identity), operation="delete"
        )
        self._logger.debug("game_state_deleted", deleted=deleted)
        return deleted

    def get(self, entity: GameState) -> GameState:
        """Fetch the stored record matching ``entity``.

        Raises:
            NotFoundError: If the backend has no matching record.
        """
        identity = self._identity(entity)
        record = self._retry.execute(
            lambda: self._adapter.find_one(identity), operation="get"
        )
        if record is None:
            raise NotFoundError(
                f"No game state found in {self._adapter.name} for {identity!r}"
            )
        return self._adapter.codec.from_native(record)

    def query(self, criteria: SearchCriteria) -> Tuple[List[GameState], str]:
        """Return up to ``page_size`` matches and the next page token.

        The token is ``""`` once the results are exhausted.
        """
        query_filter = build_query_filter(criteria)
        pagination = self._adapter.pagination
        start = pagination.decode_page(criteria.next_page_state)
        page = self._retry.execute(
            lambda: self._adapter.find_page(query_filter, criteria.page_size, start),
            operation="query",
        )
        entities = [self._adapter.codec.from_native(record) for record in page.records]
        token = pagination.encode_page(
            len(entities),
            criteria.page_size,
            prior_token=criteria.next_page_state,
            end_position=page.end_position,
        )
        self._logger.debug(
            "game_state_query_page", count=len(entities), has_more=bool(token)
        )
        return entities, token

    def _identity(self, entity: GameState) -> Any:
        if not isinstance(entity, GameState):
            raise ValidationError(f"Expected GameState, got {type(entity).__name__}")

        if self._adapter.identity_strategy is IdentityStrategy.PLATFORM_KEY:
            if not entity.platform_key:
                raise ValidationError(
                    f"platform_key is required by the {self._adapter.name} backend"
                )
            if entity.platform_type and entity.platform_type != self.platform_type:
                raise ValidationError(
                    f"platform_type {entity.platform_type!r} does not match "
                    f"{self.platform_type!r}"
                )
        else:
            if not isinstance(entity.player_id, str) or not entity.player_id:
                raise ValidationError("player_id is required to identify a record")
            if not isinstance(entity.record_created_at, datetime):
                raise ValidationError(
                    "record_created_at is required to identify a record"
                )

        return self._adapter.identity(entity)
