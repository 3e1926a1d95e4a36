import sys
from pathlib import Path

# Ensure the application package root is on sys.path so importing application
# modules (e.g. `modules.gamestate`) works during pytest collection regardless
# of the invocation directory.
project_root = str(Path(__file__).resolve().parents[1])
if project_root not in sys.path:
    sys.path.insert(0, project_root)

import pytest  # noqa: E402
from tests.factories.gamestate import (  # noqa: E402
    make_game_state,
    make_game_states,
    make_search_criteria,
)


@pytest.fixture
def game_state_factory():
    """Factory fixture for GameState instances.

    Usage:
        def test_something(game_state_factory):
            state = game_state_factory(player_id="P2", current_level=3)
    """
    return make_game_state


@pytest.fixture
def game_states_factory():
    """Factory fixture for lists of GameState instances one second apart."""
    return make_game_states


@pytest.fixture
def search_criteria_factory():
    """Factory fixture for SearchCriteria instances."""
    return make_search_criteria


@pytest.fixture(autouse=True)
def _clear_settings_cache():
    """Reset cached settings and stores so env changes apply per test."""
    from infrastructure.services.providers import get_settings
    from modules.gamestate.factory import get_game_state_store

    get_settings.cache_clear()
    get_game_state_store.cache_clear()
    yield
    get_settings.cache_clear()
    get_game_state_store.cache_clear()
