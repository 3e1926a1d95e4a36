"""Cosmos DB adapter over a pymongo collection."""

from typing import Any, Dict, Mapping, Optional

from pymongo import DESCENDING

from infrastructure.clients.azure import CosmosConnectionManager
from modules.gamestate.adapters.base import GameStateAdapter, NativePage
from modules.gamestate.codecs.base import CURRENT_LEVEL, PLAYER_ID, RECORD_CREATED_AT
from modules.gamestate.codecs.cosmos import DOCUMENT_ID, CosmosCodec
from modules.gamestate.domain.models import GameState, IdentityStrategy, QueryFilter
from modules.gamestate.pagination.strategies import OffsetPagination

# _id breaks ties so skip offsets stay stable between pages.
QUERY_SORT = [
    (CURRENT_LEVEL, DESCENDING),
    (RECORD_CREATED_AT, DESCENDING),
    (DOCUMENT_ID, DESCENDING),
]


class CosmosAdapter(GameStateAdapter):
    """Game state documents in one Cosmos DB (Mongo API) collection.

    Args:
        collection: pymongo Collection (thread-safe, shared)
        connection: Connection manager owning the collection's client, closed
            by ``close()``. None when the caller owns the client.
    """

    name = "cosmos"
    identity_strategy = IdentityStrategy.LOGICAL

    def __init__(self, collection: Any, connection: Optional[CosmosConnectionManager] = None) -> None:
        self._collection = collection
        self._connection = connection
        self.codec = CosmosCodec()
        self.pagination = OffsetPagination()

    def insert(self, record: Mapping[str, Any]) -> str:
        # insert_one sets _id on the document it is given; a retried call
        # must not reuse it.
        result = self._collection.insert_one(dict(record))
        return str(result.inserted_id)

    def identity(self, entity: GameState) -> Dict[str, Any]:
        return {
            PLAYER_ID: entity.player_id,
            RECORD_CREATED_AT: entity.record_created_at,
        }

    def update_where(self, identity: Dict[str, Any], fields: Mapping[str, Any]) -> bool:
        result = self._collection.update_one(identity, {"$set": dict(fields)})
        return result.modified_count != 0

    def delete_where(self, identity: Dict[str, Any]) -> bool:
        result = self._collection.delete_one(identity)
        return result.deleted_count != 0

    def find_one(self, identity: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        return self._collection.find_one(identity)

    def find_page(self, query_filter: QueryFilter, limit: int, start: int) -> NativePage:
        query: Dict[str, Any] = {}
        if query_filter.player_id:
            query[PLAYER_ID] = query_filter.player_id
        if query_filter.min_level is not None:
            query[CURRENT_LEVEL] = {"$gte": query_filter.min_level}

        cursor = self._collection.find(query).sort(QUERY_SORT).skip(start).limit(limit)
        records = list(cursor)
        return NativePage(records=records, end_position=start + len(records))

    def close(self) -> None:
        if self._connection is not None:
            self._connection.close()
