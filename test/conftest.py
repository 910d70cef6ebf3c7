"""
Shared fixtures for the engine tests.
"""

import pytest

from dotsboxes.engine.actions import draw_line
from dotsboxes.engine.reducer import apply_action
from dotsboxes.engine.settings import GameSettings
from dotsboxes.engine.utils import create_match


@pytest.fixture
def new_match():
    """Factory: new_match("2x1", player_count=2) -> fresh all-human GameState."""
    def _new_match(board_size: str = "2x1", player_count: int = 2, kinds: list[str] | None = None):
        settings = GameSettings(
            player_count=player_count,
            board_size=board_size,
            player_kinds=kinds or ["human"] * player_count,
        )
        return create_match(settings)
    return _new_match


@pytest.fixture
def play():
    """Apply line ids in order; returns (final_state, events_per_move)."""
    def _play(state, line_ids):
        history = []
        for lid in line_ids:
            state, events = apply_action(state, draw_line(lid))
            history.append(events)
        return state, history
    return _play
