"""
Action definitions for the game.
Actions are immutable, deterministic instructions. The acting player is always
the state's current player.
"""

from dataclasses import dataclass


DRAW_LINE = "draw_line"


@dataclass(frozen=True)
class Action:
    """Base action class. All actions have a type and payload."""
    type: str  # e.g., "draw_line"
    payload: dict  # Action-specific data


def draw_line(line_id: str) -> Action:
    """
    Draw one undrawn line for the current player.
    Example: draw_line("h-0-1") draws the top edge of box (0, 1).
    """
    return Action(type=DRAW_LINE, payload={"line_id": line_id})
