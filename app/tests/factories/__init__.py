"""Test data factories for deterministic test data generation."""

from tests.factories.gamestate import (
    BASE_TIME,
    make_game_state,
    make_game_states,
    make_search_criteria,
)

__all__ = [
    "BASE_TIME",
    "make_game_state",
    "make_game_states",
    "make_search_criteria",
]
