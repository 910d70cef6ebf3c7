"""
Holder for the single live match and the settings it was started from.
Mirrors what a front end keeps between screens: options, the current game,
and the log of events produced since the game started.
"""

from typing import Any

from dotsboxes.engine.state import GameState
from dotsboxes.engine.settings import GameSettings
from dotsboxes.engine.actions import draw_line
from dotsboxes.engine.events import GameEvent, match_started
from dotsboxes.engine.reducer import apply_action
from dotsboxes.engine.players import MoveStrategy, play_computer_turn
from dotsboxes.engine.queries import get_match_status
from dotsboxes.engine.utils import create_match


class GameSession:
    def __init__(self, settings: GameSettings | None = None):
        self.settings = settings or GameSettings()
        self.state: GameState | None = None
        self.event_log: list[GameEvent] = []

    @property
    def in_game(self) -> bool:
        return self.state is not None

    @property
    def status(self) -> str:
        return get_match_status(self.state)

    def update_settings(self, **changes: Any) -> GameSettings:
        """Merge changes into the settings. Takes effect at the next start/reset."""
        self.settings = self.settings.updated(**changes)
        return self.settings

    def start_game(self) -> GameState:
        self.state = create_match(self.settings)
        self.event_log = [match_started(self.settings.player_count, self.settings.board_size)]
        return self.state

    def reset_game(self) -> GameState:
        """Discard the live match and start a new one from the current settings."""
        return self.start_game()

    def exit_to_main_menu(self):
        self.state = None
        self.event_log = []

    def draw_line(self, line_id: str) -> list[GameEvent]:
        """Draw a line for the current player. Does nothing when no match is live."""
        if self.state is None:
            return []
        self.state, events = apply_action(self.state, draw_line(line_id))
        self.event_log.extend(events)
        return events

    def play_computer_turn(self, strategy: MoveStrategy) -> list[GameEvent]:
        """Let the injected strategy move for the current computer player, if any."""
        if self.state is None:
            return []
        self.state, events = play_computer_turn(self.state, strategy, self.settings.difficulty)
        self.event_log.extend(events)
        return events
