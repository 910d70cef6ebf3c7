"""
Seam for computer-controlled players.

A computer player is a Player whose kind is "computer". How it picks a line is
not part of the engine: callers inject a MoveStrategy, any callable that takes
the current state and a difficulty and returns one undrawn line id. The engine
applies that line exactly like a human click.
"""

from typing import Protocol

from dotsboxes.engine.state import GameState
from dotsboxes.engine.actions import draw_line
from dotsboxes.engine.events import GameEvent
from dotsboxes.engine.reducer import apply_action


class MoveStrategy(Protocol):
    def __call__(self, state: GameState, difficulty: str) -> str:
        ...


def is_computer_turn(state: GameState) -> bool:
    return not state.over and state.current.is_computer


def play_computer_turn(
    state: GameState,
    strategy: MoveStrategy,
    difficulty: str,
) -> tuple[GameState, list[GameEvent]]:
    """
    Ask the strategy for a line and apply it for the current computer player.

    Returns the state unchanged with no events when it is not a computer's turn.

    Raises:
        ValueError: the strategy returned an unknown or already drawn line
    """
    if not is_computer_turn(state):
        return state, []

    lid = strategy(state, difficulty)
    line = state.get_line(lid)
    if line is None:
        raise ValueError(f"Strategy chose unknown line: {lid}")
    if line.drawn:
        raise ValueError(f"Strategy chose a line that is already drawn: {lid}")

    return apply_action(state, draw_line(lid))
