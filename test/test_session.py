"""
Tests for the session holder and the computer-player seam.
"""

import pytest

from dotsboxes.engine import NOT_STARTED, IN_PROGRESS, OVER
from dotsboxes.engine.events import GameEvent, MATCH_STARTED, LINE_DRAWN
from dotsboxes.engine.players import play_computer_turn, is_computer_turn
from dotsboxes.engine.queries import get_available_lines
from dotsboxes.engine.session import GameSession
from dotsboxes.engine.settings import GameSettings


def first_available(state, difficulty):
    return get_available_lines(state)[0]


class RecordingStrategy:
    def __init__(self):
        self.calls = []

    def __call__(self, state, difficulty):
        self.calls.append(difficulty)
        return get_available_lines(state)[-1]


def test_session_lifecycle():
    session = GameSession(GameSettings(board_size="1x1"))
    assert session.status == NOT_STARTED
    assert not session.in_game
    assert session.draw_line("h-0-0") == []

    session.start_game()
    assert session.status == IN_PROGRESS
    assert session.event_log[0].type == MATCH_STARTED

    for lid in ["h-0-0", "h-1-0", "v-0-0", "v-0-1"]:
        session.draw_line(lid)
    assert session.status == OVER
    assert session.state.winner is not None

    session.exit_to_main_menu()
    assert session.state is None
    assert session.event_log == []


def test_reset_discards_live_match():
    session = GameSession(GameSettings(board_size="2x2"))
    first = session.start_game()
    session.draw_line("h-0-0")

    second = session.reset_game()

    assert second is not first
    assert second.move_count == 0
    assert not second.lines["h-0-0"].drawn
    assert len(session.event_log) == 1


def test_update_settings_applies_on_next_start():
    session = GameSession()
    session.start_game()

    session.update_settings(player_count=3, board_size="3x2")

    assert len(session.state.players) == 2
    session.reset_game()
    assert len(session.state.players) == 3
    assert session.state.board_size.token == "3x2"


def test_session_computer_turn_uses_difficulty():
    session = GameSession(GameSettings(board_size="2x2", difficulty="hard"))
    session.start_game()
    strategy = RecordingStrategy()

    assert session.play_computer_turn(strategy) == []

    session.draw_line("h-0-0")
    events = session.play_computer_turn(strategy)

    assert strategy.calls == ["hard"]
    assert events[0].type == LINE_DRAWN
    assert events[0].payload["player"] == 1


def test_play_computer_turn_skips_human_turn(new_match):
    state = new_match("2x2", kinds=["human", "computer"])
    assert not is_computer_turn(state)

    after, events = play_computer_turn(state, first_available, "easy")

    assert after is state
    assert events == []


def test_play_computer_turn_rejects_bad_choice(new_match):
    state = new_match("2x2", kinds=["computer", "computer"])
    drawn = play_computer_turn(state, first_available, "easy")[0]

    with pytest.raises(ValueError):
        play_computer_turn(drawn, lambda s, d: "h-0-0", "easy")
    with pytest.raises(ValueError):
        play_computer_turn(drawn, lambda s, d: "v-7-7", "easy")


def test_computers_can_finish_a_match(new_match):
    state = new_match("3x3", player_count=4, kinds=["computer"] * 4)
    while is_computer_turn(state):
        state, _ = play_computer_turn(state, first_available, "medium")

    assert state.over
    assert sum(p.score for p in state.players) == 9


def test_event_log_restores_from_dicts():
    session = GameSession(GameSettings(board_size="1x1"))
    session.start_game()
    for lid in ["h-0-0", "h-1-0", "v-0-0", "v-0-1"]:
        session.draw_line(lid)

    restored = [GameEvent.from_dict(e.to_dict()) for e in session.event_log]

    assert restored == session.event_log
    assert restored[-1].payload["winner"] == 1
