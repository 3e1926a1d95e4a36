import pytest

from modules.gamestate.domain.errors import ValidationError
from modules.gamestate.domain.models import IdentityStrategy, QueryFilter


def _insert(adapter, state):
    state.platform_key = adapter.insert(adapter.codec.to_native(state))
    return state


@pytest.mark.unit
class TestDatastoreAdapter:
    def test_attributes(self, datastore_adapter):
        assert datastore_adapter.name == "datastore"
        assert datastore_adapter.identity_strategy is IdentityStrategy.PLATFORM_KEY
        assert datastore_adapter.codec.platform_type == "GCP-DATASTORE"

    def test_insert_allocates_numeric_id(self, datastore_adapter, game_state_factory):
        first = _insert(datastore_adapter, game_state_factory())
        second = _insert(datastore_adapter, game_state_factory(offset_seconds=1))
        assert first.platform_key.isdigit()
        assert first.platform_key != second.platform_key

    def test_inventory_excluded_from_indexes(
        self, datastore_adapter, fake_datastore_client, game_state_factory
    ):
        state = _insert(datastore_adapter, game_state_factory())
        entity = fake_datastore_client.get(datastore_adapter.identity(state))
        assert "Inventory" in entity.exclude_from_indexes

    def test_identity_requires_numeric_key(self, datastore_adapter, game_state_factory):
        state = game_state_factory()
        state.platform_key = "P1#2024"
        with pytest.raises(ValidationError):
            datastore_adapter.identity(state)

    def test_update_in_transaction(
        self, datastore_adapter, fake_datastore_client, game_state_factory
    ):
        state = _insert(datastore_adapter, game_state_factory())
        state.current_level = 42
        identity = datastore_adapter.identity(state)
        assert datastore_adapter.update_where(
            identity, datastore_adapter.codec.to_native_updates(state)
        )
        assert fake_datastore_client.transactions == 1
        assert datastore_adapter.find_one(identity)["CurrentLevel"] == 42

    def test_update_missing_returns_false(self, datastore_adapter, game_state_factory):
        state = game_state_factory()
        state.platform_key = "99"
        assert datastore_adapter.update_where(datastore_adapter.identity(state), {}) is False

    def test_delete(self, datastore_adapter, fake_datastore_client, game_state_factory):
        state = _insert(datastore_adapter, game_state_factory())
        identity = datastore_adapter.identity(state)
        assert datastore_adapter.delete_where(identity) is True
        assert datastore_adapter.delete_where(identity) is False
        assert datastore_adapter.find_one(identity) is None
        assert fake_datastore_client.transactions == 2

    def test_find_page_orders_by_level_then_created_descending(
        self, datastore_adapter, game_states_factory
    ):
        for state in game_states_factory(4, levels=[2, 3, 2, 1]):
            _insert(datastore_adapter, state)
        page = datastore_adapter.find_page(QueryFilter(player_id="P1", min_level=2), 10, None)
        assert [(r["CurrentLevel"], r["RecordId"]) for r in page.records] == [
            (3, "P1-record-1"),
            (2, "P1-record-2"),
            (2, "P1-record-0"),
        ]
        assert page.end_position is None

    def test_find_page_returns_raw_cursor_and_resumes(
        self, datastore_adapter, game_states_factory
    ):
        for state in game_states_factory(3):
            _insert(datastore_adapter, state)
        first = datastore_adapter.find_page(QueryFilter(player_id="P1"), 2, None)
        assert isinstance(first.end_position, bytes)
        second = datastore_adapter.find_page(
            QueryFilter(player_id="P1"), 2, first.end_position
        )
        assert [r["CurrentLevel"] for r in first.records] == [3, 2]
        assert [r["CurrentLevel"] for r in second.records] == [1]
        assert second.end_position is None

    def test_find_page_reads_every_batch_up_to_limit(
        self, datastore_adapter, fake_datastore_client, game_states_factory
    ):
        for state in game_states_factory(7, levels=[7, 6, 5, 4, 3, 2, 1]):
            _insert(datastore_adapter, state)
        fake_datastore_client.batch_size = 3

        first = datastore_adapter.find_page(QueryFilter(player_id="P1"), 5, None)
        assert [r["CurrentLevel"] for r in first.records] == [7, 6, 5, 4, 3]
        assert isinstance(first.end_position, bytes)

        second = datastore_adapter.find_page(
            QueryFilter(player_id="P1"), 5, first.end_position
        )
        assert [r["CurrentLevel"] for r in second.records] == [2, 1]
        assert second.end_position is None
