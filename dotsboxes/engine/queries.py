"""
Query functions for UI integration.
These functions help the UI and computer players understand what moves are available
without mutating game state.
"""

from dataclasses import dataclass
from typing import Any

from dotsboxes.engine import NOT_STARTED, IN_PROGRESS, OVER
from dotsboxes.engine.state import GameState, Player
from dotsboxes.engine.board import box_line_ids


@dataclass
class ValidationResult:
    """Result of move validation."""
    valid: bool
    error: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {"valid": self.valid, "error": self.error}


def validate_move(state: GameState, line_id: str) -> ValidationResult:
    """
    Check whether drawing line_id would change the state.
    Returns ValidationResult with valid=True or valid=False with error message.
    """
    if state.over:
        return ValidationResult(False, "Match is over.")
    line = state.get_line(line_id)
    if line is None:
        return ValidationResult(False, f"Unknown line: {line_id}")
    if line.drawn:
        return ValidationResult(False, f"Line {line_id} is already drawn.")
    return ValidationResult(True)


def is_line_available(state: GameState, line_id: str) -> bool:
    return validate_move(state, line_id).valid


def get_available_lines(state: GameState) -> list[str]:
    """Undrawn line ids in board order. Empty once the match is over."""
    if state.over:
        return []
    return [lid for lid, line in state.lines.items() if not line.drawn]


def get_box_side_count(state: GameState, box_id: str) -> int:
    """How many of a box's four lines are drawn."""
    box = state.get_box(box_id)
    if box is None:
        raise ValueError(f"Unknown box: {box_id}")
    return sum(1 for lid in box_line_ids(box.row, box.col) if state.lines[lid].drawn)


def get_standings(state: GameState) -> list[Player]:
    """Players ordered by score (highest first), ties by id."""
    return sorted(state.players, key=lambda p: (-p.score, p.id))


def get_match_status(state: GameState | None) -> str:
    if state is None:
        return NOT_STARTED
    return OVER if state.over else IN_PROGRESS


def get_game_summary(state: GameState) -> dict[str, Any]:
    """Compact view of the match for status bars and scoreboards."""
    return {
        "status": get_match_status(state),
        "board_size": state.board_size.token,
        "current_player": None if state.over else state.current_player,
        "current_player_kind": None if state.over else state.current.kind,
        "scores": state.scores(),
        "boxes_completed": state.completed_box_count(),
        "boxes_total": len(state.boxes),
        "lines_remaining": sum(1 for line in state.lines.values() if not line.drawn),
        "move_count": state.move_count,
        "winner": state.winner,
    }
