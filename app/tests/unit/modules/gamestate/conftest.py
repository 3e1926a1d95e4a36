"""Fixtures for gamestate module tests.

Stores are wired with in-memory fake native clients and a retry policy that
never sleeps, so every backend variant can be exercised end to end.
"""

from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest

from infrastructure.resilience.retry import FixedDelay, RetryPolicy
from modules.gamestate.adapters import CosmosAdapter, DatastoreAdapter, DynamoDBAdapter
from modules.gamestate.domain.errors import ValidationError
from modules.gamestate.store import GameStateStore
from tests.fixtures.datastore_client import FakeDatastoreClient
from tests.fixtures.dynamodb_client import FakeDynamoDBClient
from tests.fixtures.mongo_collection import FakeMongoCollection

BACKENDS = ["dynamodb", "datastore", "cosmos"]


@pytest.fixture
def fake_dynamodb_client():
    return FakeDynamoDBClient()


@pytest.fixture
def fake_datastore_client():
    return FakeDatastoreClient()


@pytest.fixture
def fake_mongo_collection():
    return FakeMongoCollection()


@pytest.fixture
def dynamodb_adapter(fake_dynamodb_client):
    return DynamoDBAdapter(fake_dynamodb_client, "GameState")


@pytest.fixture
def datastore_adapter(fake_datastore_client):
    return DatastoreAdapter(fake_datastore_client, "GameState")


@pytest.fixture
def cosmos_adapter(fake_mongo_collection):
    return CosmosAdapter(fake_mongo_collection)


@pytest.fixture
def retry_policy_factory():
    """Factory for retry policies that record events instead of sleeping.

    Usage:
        def test_something(retry_policy_factory):
            policy = retry_policy_factory(max_attempts=2)
            policy.observer.log_warning.assert_not_called()
    """

    def _factory(name="TestGameStateStore", max_attempts=4, observer=None):
        observer = observer or MagicMock()
        sleeps = []
        policy = RetryPolicy(
            name=name,
            max_attempts=max_attempts,
            delay=FixedDelay(0.2),
            observer=observer,
            non_retryable=(ValidationError,),
            sleep=sleeps.append,
        )
        policy.observer = observer
        policy.sleeps = sleeps
        return policy

    return _factory


@pytest.fixture
def make_backend_store(retry_policy_factory):
    """Factory building a store plus its fake native client for a backend.

    Returns a namespace with ``store``, ``client``, ``policy`` and ``backend``.
    """

    def _factory(backend, max_attempts=4):
        if backend == "dynamodb":
            client = FakeDynamoDBClient()
            adapter = DynamoDBAdapter(client, "GameState")
        elif backend == "datastore":
            client = FakeDatastoreClient()
            adapter = DatastoreAdapter(client, "GameState")
        else:
            client = FakeMongoCollection()
            adapter = CosmosAdapter(client)
        policy = retry_policy_factory(
            name=f"{backend}-store", max_attempts=max_attempts
        )
        return SimpleNamespace(
            store=GameStateStore(adapter, policy),
            client=client,
            policy=policy,
            backend=backend,
        )

    return _factory


@pytest.fixture(params=BACKENDS)
def backend(request, make_backend_store):
    """Store wired to each backend variant in turn."""
    return make_backend_store(request.param)
