"""Cloud Datastore adapter over google-cloud-datastore."""

import base64
from typing import Any, Mapping, Optional

from google.cloud import datastore  # type: ignore
from google.cloud.datastore.query import PropertyFilter  # type: ignore

from modules.gamestate.adapters.base import GameStateAdapter, NativePage
from modules.gamestate.codecs.base import CURRENT_LEVEL, PLAYER_ID, RECORD_CREATED_AT
from modules.gamestate.codecs.datastore import UNINDEXED_PROPERTIES, DatastoreCodec
from modules.gamestate.domain.errors import ValidationError
from modules.gamestate.domain.models import GameState, IdentityStrategy, QueryFilter
from modules.gamestate.pagination.strategies import CursorPagination

QUERY_ORDER = ("-" + CURRENT_LEVEL, "-" + RECORD_CREATED_AT)


class DatastoreAdapter(GameStateAdapter):
    """Game state entities of one Datastore kind.

    Entities get service-allocated numeric ids, so records are located by
    platform key rather than by the logical identity.

    Args:
        client: ``datastore.Client`` (thread-safe, shared)
        kind: Entity kind holding game states
    """

    name = "datastore"
    identity_strategy = IdentityStrategy.PLATFORM_KEY

    def __init__(self, client: Any, kind: str) -> None:
        self._client = client
        self._kind = kind
        self.codec = DatastoreCodec()
        self.pagination = CursorPagination()

    @property
    def kind(self) -> str:
        return self._kind

    def insert(self, record: Mapping[str, Any]) -> str:
        entity = datastore.Entity(
            key=self._client.key(self._kind),
            exclude_from_indexes=UNINDEXED_PROPERTIES,
        )
        entity.update(record)
        self._client.put(entity)
        return str(entity.key.id)

    def identity(self, entity: GameState) -> datastore.Key:
        platform_key = str(entity.platform_key)
        if not platform_key.isdigit():
            raise ValidationError(
                f"Datastore platform_key must be a numeric id, got {platform_key!r}"
            )
        return self._client.key(self._kind, int(platform_key))

    def update_where(self, identity: datastore.Key, fields: Mapping[str, Any]) -> bool:
        with self._client.transaction():
            entity = self._client.get(identity)
            if entity is None:
                return False
            entity.update(fields)
            self._client.put(entity)
        return True

    def delete_where(self, identity: datastore.Key) -> bool:
        with self._client.transaction():
            entity = self._client.get(identity)
            if entity is None:
                return False
            self._client.delete(identity)
        return True

    def find_one(self, identity: datastore.Key) -> Optional[datastore.Entity]:
        return self._client.get(identity)

    def find_page(
        self, query_filter: QueryFilter, limit: int, start: Optional[bytes]
    ) -> NativePage:
        query = self._client.query(kind=self._kind)
        if query_filter.player_id:
            query.add_filter(filter=PropertyFilter(PLAYER_ID, "=", query_filter.player_id))
        if query_filter.min_level is not None:
            query.add_filter(
                filter=PropertyFilter(CURRENT_LEVEL, ">=", query_filter.min_level)
            )
        query.order = list(QUERY_ORDER)

        # The client library exchanges cursors in urlsafe base64 form.
        start_cursor = base64.urlsafe_b64encode(start) if start else None
        iterator = query.fetch(limit=limit, start_cursor=start_cursor)
        # Iterating the whole iterator follows NOT_FINISHED batches up to the limit.
        records = list(iterator)

        end_position = None
        if len(records) >= limit and iterator.next_page_token:
            end_position = base64.urlsafe_b64decode(iterator.next_page_token)
        return NativePage(records=records, end_position=end_position)
