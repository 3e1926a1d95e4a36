import dataclasses
from datetime import datetime, timezone

import pytest
from botocore.exceptions import ClientError
from google.api_core import exceptions as google_exceptions
from pymongo.errors import AutoReconnect

from modules.gamestate.domain.errors import NotFoundError, ValidationError
from modules.gamestate.domain.models import GameState


def _identity_of(state):
    """Entity carrying only what each identity strategy needs."""
    return GameState(
        player_id=state.player_id,
        record_created_at=state.record_created_at,
        platform_key=state.platform_key,
        platform_type=state.platform_type,
    )


TRANSIENT_ERRORS = {
    "dynamodb": ("put_item", ClientError(
        {"Error": {"Code": "ProvisionedThroughputExceededException"}}, "PutItem"
    )),
    "datastore": ("put", google_exceptions.ServiceUnavailable("unavailable")),
    "cosmos": ("insert_one", AutoReconnect("connection reset")),
}


@pytest.mark.unit
class TestGameStateStoreContract:
    def test_add_sets_platform_fields(self, backend, game_state_factory):
        state = backend.store.add(game_state_factory())
        assert state.platform_key
        assert state.platform_type == backend.store.platform_type

    def test_add_then_get_round_trips(self, backend, game_state_factory):
        state = backend.store.add(game_state_factory(inventory={"a": "1", "b": "2"}))
        fetched = backend.store.get(_identity_of(state))
        assert fetched == state

    def test_get_is_idempotent(self, backend, game_state_factory):
        state = backend.store.add(game_state_factory())
        assert backend.store.get(_identity_of(state)) == backend.store.get(
            _identity_of(state)
        )

    def test_update_changes_only_mutable_fields(self, backend, game_state_factory):
        state = backend.store.add(game_state_factory())
        changed = dataclasses.replace(
            state, health=7, current_level=4, inventory={"bow": "yew"}, game_id="other"
        )
        assert backend.store.update(changed) is True
        fetched = backend.store.get(_identity_of(state))
        assert (fetched.health, fetched.current_level, fetched.inventory) == (
            7,
            4,
            {"bow": "yew"},
        )
        assert fetched.game_id == "G1"

    def test_update_absent_record_returns_false(self, backend, game_state_factory):
        state = game_state_factory()
        state.platform_key = "12345"
        assert backend.store.update(state) is False

    def test_delete_then_get_raises_not_found(self, backend, game_state_factory):
        state = backend.store.add(game_state_factory())
        assert backend.store.delete(_identity_of(state)) is True
        with pytest.raises(NotFoundError):
            backend.store.get(_identity_of(state))
        assert backend.store.delete(_identity_of(state)) is False

    def test_transient_error_is_retried(self, backend, game_state_factory):
        method, error = TRANSIENT_ERRORS[backend.backend]
        backend.client.fail_next(method, error, times=2)
        state = backend.store.add(game_state_factory())
        assert state.platform_key
        assert backend.policy.observer.log_warning.call_count == 2
        assert backend.policy.sleeps == [0.2, 0.2]

    def test_exhausted_retries_propagate_native_error(
        self, backend, game_state_factory
    ):
        method, error = TRANSIENT_ERRORS[backend.backend]
        backend.client.fail_next(method, error, times=4)
        with pytest.raises(type(error)) as exc_info:
            backend.store.add(game_state_factory())
        assert exc_info.value is error
        assert backend.policy.observer.log_warning.call_count == 3
        backend.policy.observer.log_error.assert_called_once()
        _, kwargs = backend.policy.observer.log_error.call_args
        assert kwargs["operation"] == "add"


@pytest.mark.unit
class TestGameStateStoreValidation:
    @pytest.mark.parametrize(
        "changes",
        [
            {"record_id": ""},
            {"player_id": ""},
            {"game_id": None},
            {"record_created_at": None},
            {"health": "10"},
            {"current_level": 1.5},
            {"inventory": {"gold": 10}},
            {"inventory": ["sword"]},
        ],
    )
    def test_add_rejects_invalid_entities_before_io(
        self, backend, game_state_factory, changes
    ):
        state = dataclasses.replace(game_state_factory(), **changes)
        with pytest.raises(ValidationError):
            backend.store.add(state)
        assert not backend.client.calls

    def test_add_rejects_non_entities(self, backend):
        with pytest.raises(ValidationError):
            backend.store.add({"PlayerId": "P1"})

    @pytest.mark.parametrize("operation", ["update", "delete", "get"])
    def test_missing_identity_rejected(self, backend, operation):
        with pytest.raises(ValidationError):
            getattr(backend.store, operation)(GameState(health=1))
        assert not backend.client.calls

    def test_platform_type_mismatch_rejected(self, make_backend_store, game_state_factory):
        ctx = make_backend_store("datastore")
        state = ctx.store.add(game_state_factory())
        state.platform_type = "AWS-DYNAMODB"
        with pytest.raises(ValidationError, match="platform_type"):
            ctx.store.get(state)

    def test_logical_identity_ignores_platform_key(
        self, make_backend_store, game_state_factory
    ):
        ctx = make_backend_store("cosmos")
        state = ctx.store.add(game_state_factory())
        fetched = ctx.store.get(
            GameState(
                player_id="P1",
                record_created_at=datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc),
            )
        )
        assert fetched.platform_key == state.platform_key

    @pytest.mark.parametrize("backend_name", ["dynamodb", "cosmos"])
    def test_reassigned_timestamp_still_identifies_record(
        self, make_backend_store, game_state_factory, backend_name
    ):
        ctx = make_backend_store(backend_name)
        ctx.store.add(game_state_factory())
        lookup = GameState(player_id="P1")
        # Naive and finer than a millisecond; normalized on assignment.
        lookup.record_created_at = datetime(2024, 5, 1, 12, 0, 0, 700)
        assert ctx.store.get(lookup).record_id == "P1-record-0"

    def test_malformed_token_rejected_without_retry(
        self, backend, search_criteria_factory
    ):
        criteria = search_criteria_factory(token="!!not-a-token!!")
        with pytest.raises(ValidationError):
            backend.store.query(criteria)
        assert not backend.client.calls
        backend.policy.observer.log_warning.assert_not_called()

    def test_foreign_key_token_rejected_without_retry(
        self, make_backend_store, search_criteria_factory
    ):
        ctx = make_backend_store("dynamodb")
        criteria = search_criteria_factory(token='{"a":1}')
        with pytest.raises(ValidationError):
            ctx.store.query(criteria)
        assert not ctx.client.calls
        ctx.policy.observer.log_warning.assert_not_called()

    def test_unknown_search_field_rejected(self, backend):
        from modules.gamestate.domain.models import SearchCriteria

        with pytest.raises(ValidationError):
            backend.store.query(SearchCriteria({"Color": "red"}, page_size=10))
