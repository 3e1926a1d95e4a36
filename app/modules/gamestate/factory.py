"""Factory wiring a GameStateStore for a configured backend."""

from functools import lru_cache
from typing import Callable, Dict, Optional

from infrastructure.clients.aws import SessionProvider as AwsSessionProvider
from infrastructure.clients.azure import CosmosConnectionManager
from infrastructure.clients.google import SessionProvider as GoogleSessionProvider
from infrastructure.configuration import Settings
from infrastructure.logging import get_module_logger
from infrastructure.resilience.retry import create_retry_policy
from infrastructure.services import get_settings
from modules.gamestate.adapters import (
    CosmosAdapter,
    DatastoreAdapter,
    DynamoDBAdapter,
    GameStateAdapter,
)
from modules.gamestate.domain.errors import ValidationError
from modules.gamestate.store import GameStateStore

logger = get_module_logger()

STORE_NAMES: Dict[str, str] = {
    "dynamodb": "DynamoDBGameStateStore",
    "datastore": "DatastoreGameStateStore",
    "cosmos": "CosmosGameStateStore",
}


def _dynamodb_adapter(settings: Settings) -> GameStateAdapter:
    client = AwsSessionProvider.from_settings(settings.aws).get_client("dynamodb")
    return DynamoDBAdapter(client, settings.aws.DYNAMODB_TABLE)


def _datastore_adapter(settings: Settings) -> GameStateAdapter:
    client = GoogleSessionProvider.from_settings(settings.gcp).get_datastore_client()
    return DatastoreAdapter(client, settings.gcp.DATASTORE_KIND)


def _cosmos_adapter(settings: Settings) -> GameStateAdapter:
    connection = CosmosConnectionManager(settings.azure)
    return CosmosAdapter(connection.collection, connection=connection)


ADAPTER_BUILDERS: Dict[str, Callable[[Settings], GameStateAdapter]] = {
    "dynamodb": _dynamodb_adapter,
    "datastore": _datastore_adapter,
    "cosmos": _cosmos_adapter,
}


def create_game_state_store(
    backend: Optional[str] = None,
    settings: Optional[Settings] = None,
    adapter: Optional[GameStateAdapter] = None,
) -> GameStateStore:
    """Build a fully wired store for one backend.

    Args:
        backend: dynamodb, datastore or cosmos. Defaults to settings.BACKEND,
            or to the adapter's backend when an adapter is given.
        settings: Settings to use. Defaults to the cached application settings.
        adapter: Pre-built adapter, e.g. one wrapping an existing client.

    Raises:
        ValidationError: If the backend name is unknown or does not match
            the given adapter.
    """
    settings = settings or get_settings()
    backend = (backend or (adapter.name if adapter else settings.BACKEND)).lower()
    if backend not in STORE_NAMES:
        raise ValidationError(f"Unknown game state backend: {backend}")
    if adapter is None:
        adapter = ADAPTER_BUILDERS[backend](settings)
    elif adapter.name != backend:
        raise ValidationError(
            f"Adapter for {adapter.name} cannot serve backend {backend}"
        )

    name = STORE_NAMES[backend]
    policy = create_retry_policy(
        name, settings.retry, backend, non_retryable=(ValidationError,)
    )
    logger.info(
        "gamestate_store_initialized",
        store=name,
        backend=backend,
        platform_type=adapter.codec.platform_type,
    )
    return GameStateStore(adapter, policy)


@lru_cache
def get_game_state_store() -> GameStateStore:
    """Get the store for the configured backend (cached).

    Usage:
        from modules.gamestate import get_game_state_store

        store = get_game_state_store()
        state = store.get(GameState(player_id="P1", record_created_at=created))
    """
    return create_game_state_store()
