"""
Tests for match configuration and match creation.
"""

import pytest

from dotsboxes.config import PLAYER_COLORS, BOARD_SIZES, DIFFICULTIES
from dotsboxes.engine.board import BoardSize
from dotsboxes.engine.settings import GameSettings, ConfigurationError, cycle_option
from dotsboxes.engine.utils import create_match, create_players, reset_match


def test_default_settings():
    settings = GameSettings()

    assert settings.player_count == 2
    assert settings.player_kinds == ["human", "computer"]
    assert settings.difficulty == "medium"
    assert settings.board_size == "5x4"
    assert settings.board_dimensions() == BoardSize(5, 4)
    assert settings.sound_effects and settings.high_quality


def test_player_kinds_default_to_one_human():
    assert GameSettings(player_count=4).player_kinds == ["human", "computer", "computer", "computer"]


@pytest.mark.parametrize("data", [
    {"player_count": 1},
    {"player_count": 5},
    {"board_size": "0x4"},
    {"board_size": "five by four"},
    {"difficulty": "impossible"},
    {"player_count": 3, "player_kinds": ["human", "human"]},
    {"player_kinds": ["human", "robot"]},
])
def test_invalid_configuration_rejected(data):
    with pytest.raises(ConfigurationError):
        GameSettings.load(data)
    with pytest.raises(ConfigurationError):
        create_match(data)


def test_configuration_error_is_value_error():
    with pytest.raises(ValueError):
        create_match({"player_count": 9})


def test_board_size_token_is_normalised():
    assert GameSettings(board_size=" 8X6 ").board_size == "8x6"


def test_updated_resizes_seats():
    settings = GameSettings(player_kinds=["human", "human"])

    grown = settings.updated(player_count=4)
    shrunk = grown.updated(player_count=3)

    assert grown.player_kinds == ["human", "human", "computer", "computer"]
    assert shrunk.player_kinds == ["human", "human", "computer"]
    assert settings.player_count == 2


def test_updated_validates():
    with pytest.raises(ConfigurationError):
        GameSettings().updated(board_size="3x0")


def test_toggle_player_kind():
    settings = GameSettings().with_player_kind_toggled(1)
    assert settings.player_kinds == ["human", "human"]
    assert settings.with_player_kind_toggled(0).player_kinds == ["computer", "human"]
    with pytest.raises(ConfigurationError):
        settings.with_player_kind_toggled(2)


def test_cycle_option_wraps():
    assert cycle_option(BOARD_SIZES, "11x9", "next") == "3x2"
    assert cycle_option(BOARD_SIZES, "3x2", "prev") == "11x9"
    assert cycle_option(DIFFICULTIES, "easy", "next") == "medium"
    assert cycle_option(BOARD_SIZES, "7x7", "next") == "3x2"


def test_create_match_initial_state():
    settings = GameSettings(player_count=3, board_size="3x2", player_kinds=["computer", "human", "computer"])

    state = create_match(settings)

    assert state.board_size == BoardSize(3, 2)
    assert [p.id for p in state.players] == [0, 1, 2]
    assert [p.kind for p in state.players] == ["computer", "human", "computer"]
    assert [p.color for p in state.players] == PLAYER_COLORS[:3]
    assert all(p.score == 0 for p in state.players)
    assert state.current_player == 0
    assert not state.over
    assert state.winner is None
    assert len(state.lines) == 17
    assert len(state.boxes) == 6


def test_create_match_defaults():
    state = create_match()
    assert state.board_size == BoardSize(5, 4)
    assert len(state.players) == 2


def test_colours_cycle_when_palette_is_short():
    players = create_players(["human"] * 3, colors=["red", "blue"])
    assert [p.color for p in players] == ["red", "blue", "red"]


def test_reset_match_builds_a_new_state():
    settings = GameSettings(board_size="2x2")
    first = create_match(settings)

    second = reset_match(settings)

    assert second is not first
    assert second.to_dict() == first.to_dict()
    assert second.lines["h-0-0"] is not first.lines["h-0-0"]


def test_create_match_rechecks_fields_assigned_after_construction():
    settings = GameSettings(board_size="1x1")
    settings.player_count = 7
    settings.player_kinds = ["human"] * 7

    with pytest.raises(ConfigurationError):
        create_match(settings)


def test_create_match_rechecks_seat_list():
    settings = GameSettings(board_size="1x1")
    settings.player_kinds = ["human"]

    with pytest.raises(ConfigurationError):
        create_match(settings)


def test_numeric_string_player_count_gets_default_seats():
    settings = GameSettings.load({"player_count": "3"})

    assert settings.player_count == 3
    assert settings.player_kinds == ["human", "computer", "computer"]
    assert GameSettings().updated(player_count="4").player_kinds == ["human", "computer", "computer", "computer"]
