"""
Game state representation.
The reducer never mutates a state it is given; moves return new state copies.
Includes dict/JSON conversion so collaborators can snapshot the state they render.
"""

import json
from dataclasses import dataclass
from copy import deepcopy
from typing import Any

from dotsboxes.engine import HORIZONTAL, HUMAN, COMPUTER, PLAYER_KINDS
from dotsboxes.engine.board import BoardSize, line_id, box_id


def _int_or_none(value: Any) -> int | None:
    if value is None:
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ValueError(f"Expected a player id or None, got {value!r}") from None


def _check_owner(eid: str, flag: str, done: bool, owner: int | None) -> None:
    if done != (owner is not None):
        raise ValueError(f"{eid} must have an owner exactly when {flag}, got {flag}={done} owner={owner!r}")


@dataclass
class Line:
    """A unit edge between two adjacent dots. Identity (row, col, orientation) never changes."""
    row: int
    col: int
    orientation: str  # "h" connects (r,c)-(r,c+1), "v" connects (r,c)-(r+1,c)
    drawn: bool = False
    owner: int | None = None  # player id, set iff drawn

    @property
    def id(self) -> str:
        return line_id(self.row, self.col, self.orientation)

    @property
    def is_horizontal(self) -> bool:
        return self.orientation == HORIZONTAL

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "row": self.row,
            "col": self.col,
            "orientation": self.orientation,
            "drawn": self.drawn,
            "owner": self.owner,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Line":
        line = cls(
            row=int(data["row"]),
            col=int(data["col"]),
            orientation=str(data["orientation"]),
            drawn=bool(data.get("drawn", False)),
            owner=_int_or_none(data.get("owner")),
        )
        _check_owner(line.id, "drawn", line.drawn, line.owner)
        return line


@dataclass
class Box:
    """A unit cell bounded by four lines. Owner is set once, when it completes."""
    row: int
    col: int
    completed: bool = False
    owner: int | None = None

    @property
    def id(self) -> str:
        return box_id(self.row, self.col)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "row": self.row,
            "col": self.col,
            "completed": self.completed,
            "owner": self.owner,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Box":
        box = cls(
            row=int(data["row"]),
            col=int(data["col"]),
            completed=bool(data.get("completed", False)),
            owner=_int_or_none(data.get("owner")),
        )
        _check_owner(box.id, "completed", box.completed, box.owner)
        return box


@dataclass
class Player:
    """A seat in the match. kind is a capability tag only; move selection lives outside the engine."""
    id: int  # stable 0-based index
    kind: str  # "human" or "computer"
    color: str  # opaque display token
    score: int = 0

    @property
    def is_computer(self) -> bool:
        return self.kind == COMPUTER

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "kind": self.kind,
            "color": self.color,
            "score": self.score,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Player":
        kind = str(data.get("kind") or HUMAN)
        if kind not in PLAYER_KINDS:
            raise ValueError(f"Unknown player kind: {kind!r}")
        return cls(
            id=int(data["id"]),
            kind=kind,
            color=str(data.get("color") or ""),
            score=int(data.get("score") or 0),
        )


@dataclass
class GameState:
    """Complete state of one match."""
    board_size: BoardSize
    players: list[Player]
    lines: dict[str, Line]  # line_id -> Line, generated once, never resized
    boxes: dict[str, Box]  # box_id -> Box
    current_player: int = 0  # player id, valid while not over
    over: bool = False
    # Winning player id (None while the match is running). Ties go to the lowest id.
    winner: int | None = None
    # Number of lines drawn so far (stale or post-game submissions are not counted)
    move_count: int = 0

    def copy(self) -> "GameState":
        """Return a deep copy of this game state."""
        return deepcopy(self)

    # ===== Lookups =====

    def get_line(self, lid: str) -> Line | None:
        return self.lines.get(lid)

    def get_box(self, bid: str) -> Box | None:
        return self.boxes.get(bid)

    def get_player(self, player_id: int) -> Player | None:
        if 0 <= player_id < len(self.players):
            return self.players[player_id]
        return None

    @property
    def current(self) -> Player:
        return self.players[self.current_player]

    @property
    def winner_player(self) -> Player | None:
        if self.winner is None:
            return None
        return self.get_player(self.winner)

    @property
    def player_count(self) -> int:
        return len(self.players)

    def completed_box_count(self) -> int:
        return sum(1 for b in self.boxes.values() if b.completed)

    def boxes_owned_by(self, player_id: int) -> int:
        return sum(1 for b in self.boxes.values() if b.owner == player_id)

    def scores(self) -> dict[int, int]:
        return {p.id: p.score for p in self.players}

    # ===== Serialization Methods =====

    def to_dict(self) -> dict[str, Any]:
        """Convert GameState to a plain dictionary for collaborators."""
        return {
            "board_size": self.board_size.to_dict(),
            "players": [p.to_dict() for p in self.players],
            "lines": [line.to_dict() for line in self.lines.values()],
            "boxes": [box.to_dict() for box in self.boxes.values()],
            "current_player": self.current_player,
            "over": self.over,
            "winner": self.winner,
            "move_count": self.move_count,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "GameState":
        """Create GameState from a dictionary produced by to_dict."""
        lines = [Line.from_dict(d) for d in (data.get("lines") or []) if isinstance(d, dict)]
        boxes = [Box.from_dict(d) for d in (data.get("boxes") or []) if isinstance(d, dict)]
        return cls(
            board_size=BoardSize.from_dict(data["board_size"]),
            players=[Player.from_dict(p) for p in (data.get("players") or []) if isinstance(p, dict)],
            lines={line.id: line for line in lines},
            boxes={box.id: box for box in boxes},
            current_player=int(data.get("current_player") or 0),
            over=bool(data.get("over", False)),
            winner=_int_or_none(data.get("winner")),
            move_count=int(data.get("move_count") or 0),
        )

    def to_json(self, indent: int = 2) -> str:
        """Serialize GameState to a JSON string."""
        return json.dumps(self.to_dict(), indent=indent)

    @classmethod
    def from_json(cls, json_str: str) -> "GameState":
        """Deserialize GameState from a JSON string."""
        return cls.from_dict(json.loads(json_str))
