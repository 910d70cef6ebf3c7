"""
Game events for UI hooks and logging.
Events describe what happened during action processing.
"""

from dataclasses import dataclass
from typing import Any


@dataclass
class GameEvent:
    """Base event class. All events have a type and payload."""
    type: str
    payload: dict[str, Any]

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.type, "payload": self.payload}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "GameEvent":
        return cls(type=data["type"], payload=data["payload"])


# ===== Event Type Constants =====

# Move events
LINE_DRAWN = "line_drawn"
MOVE_IGNORED = "move_ignored"

# Scoring events
BOX_COMPLETED = "box_completed"
SCORE_CHANGED = "score_changed"

# Turn events
TURN_CHANGED = "turn_changed"

# Match events
MATCH_STARTED = "match_started"
MATCH_OVER = "match_over"

# Reasons for MOVE_IGNORED
REASON_ALREADY_DRAWN = "already_drawn"
REASON_MATCH_OVER = "match_over"


# ===== Event Factory Functions =====

def match_started(player_count: int, board_size: str) -> GameEvent:
    return GameEvent(MATCH_STARTED, {
        "player_count": player_count,
        "board_size": board_size,
    })


def line_drawn(line_id: str, player: int) -> GameEvent:
    return GameEvent(LINE_DRAWN, {
        "line_id": line_id,
        "player": player,
    })


def move_ignored(line_id: str, player: int, reason: str) -> GameEvent:
    """Emitted when a submission changes nothing (duplicate click, or a move after the match ended)."""
    return GameEvent(MOVE_IGNORED, {
        "line_id": line_id,
        "player": player,
        "reason": reason,
    })


def box_completed(box_id: str, player: int) -> GameEvent:
    return GameEvent(BOX_COMPLETED, {
        "box_id": box_id,
        "player": player,
    })


def score_changed(player: int, old_score: int, new_score: int) -> GameEvent:
    return GameEvent(SCORE_CHANGED, {
        "player": player,
        "old_score": old_score,
        "new_score": new_score,
    })


def turn_changed(old_player: int, new_player: int, extra_turn: bool) -> GameEvent:
    """
    Emitted after every applied move.

    Args:
        old_player: Player who just moved
        new_player: Player to act next
        extra_turn: True when the mover completed a box and keeps the turn
    """
    return GameEvent(TURN_CHANGED, {
        "old_player": old_player,
        "new_player": new_player,
        "extra_turn": extra_turn,
    })


def match_over(winner: int, scores: dict[int, int], tied: bool) -> GameEvent:
    """
    Emitted when the last box is completed.

    Args:
        winner: Winning player id (lowest id among those sharing the top score)
        scores: {player_id: score} for all players
        tied: True when more than one player shares the top score
    """
    return GameEvent(MATCH_OVER, {
        "winner": winner,
        "scores": scores,
        "tied": tied,
    })
