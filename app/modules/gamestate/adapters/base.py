"""Native client capability set implemented once per backend.

Adapters are the only code that talks to a vendor SDK. They receive and
return native records; mapping to GameState is the codec's job and retrying
is the store's job.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, List, Mapping, Optional

from modules.gamestate.codecs.base import GameStateCodec
from modules.gamestate.domain.models import GameState, IdentityStrategy, QueryFilter
from modules.gamestate.pagination.strategies import PaginationStrategy


@dataclass(frozen=True)
class NativePage:
    """One page of native records.

    ``end_position`` is the native position after the last record, or None
    when the backend reports no further data.
    """

    records: List[Mapping[str, Any]] = field(default_factory=list)
    end_position: Optional[Any] = None


class GameStateAdapter(ABC):
    """Abstract backend adapter.

    Attributes:
        name: Backend name (dynamodb, datastore, cosmos).
        codec: Codec translating GameState to this backend's records.
        pagination: Strategy turning end positions into page tokens.
        identity_strategy: Which entity fields locate an existing record.
    """

    name: str
    codec: GameStateCodec
    pagination: PaginationStrategy
    identity_strategy: IdentityStrategy

    @abstractmethod
    def insert(self, record: Mapping[str, Any]) -> str:
        """Insert a native record and return its platform key."""

    @abstractmethod
    def identity(self, entity: GameState) -> Any:
        """Build the native identity for an entity. Performs no I/O."""

    @abstractmethod
    def update_where(self, identity: Any, fields: Mapping[str, Any]) -> bool:
        """Set ``fields`` on the matching record; False if nothing matched."""

    @abstractmethod
    def delete_where(self, identity: Any) -> bool:
        """Delete the matching record; False if nothing was removed."""

    @abstractmethod
    def find_one(self, identity: Any) -> Optional[Mapping[str, Any]]:
        """Fetch the matching record, or None."""

    @abstractmethod
    def find_page(
        self, query_filter: QueryFilter, limit: int, start: Any
    ) -> NativePage:
        """Read up to ``limit`` records matching ``query_filter`` from ``start``."""

    def close(self) -> None:
        """Release native client resources owned by the adapter."""
