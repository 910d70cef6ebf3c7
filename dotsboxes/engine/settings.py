"""
Match configuration supplied by the options screen.
Validated with pydantic; every failure surfaces as ConfigurationError.
The engine reads player_count, player_kinds and board_size. Difficulty is forwarded
to computer players; theme, sound and quality are carried for the presentation layer only.
"""

from typing import Any, Sequence, TypeVar

from pydantic import BaseModel, ValidationError, field_validator, model_validator

from dotsboxes.config import (
    DEFAULT_BOARD_SIZE,
    DEFAULT_PLAYER_COUNT,
    DEFAULT_DIFFICULTY,
    DEFAULT_THEME,
    DEFAULT_SOUND_EFFECTS,
    DEFAULT_HIGH_QUALITY,
    MIN_PLAYERS,
    MAX_PLAYERS,
    DIFFICULTIES,
)
from dotsboxes.engine import HUMAN, COMPUTER, PLAYER_KINDS
from dotsboxes.engine.board import BoardSize, parse_board_size

T = TypeVar("T")


class ConfigurationError(ValueError):
    """Raised when a match cannot be created from the given configuration."""


def _as_int(value: Any) -> int | None:
    """Player count as an int, or None when it is not numeric (validation reports it)."""
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


def default_player_kinds(player_count: int) -> list[str]:
    """First seat human, the rest computer."""
    return [HUMAN if i == 0 else COMPUTER for i in range(player_count)]


def resize_player_kinds(kinds: list[str], player_count: int) -> list[str]:
    """Append computer seats or drop trailing seats to match player_count."""
    if player_count > len(kinds):
        return list(kinds) + [COMPUTER] * (player_count - len(kinds))
    return list(kinds[:player_count])


class GameSettings(BaseModel):
    player_count: int = DEFAULT_PLAYER_COUNT
    player_kinds: list[str]
    difficulty: str = DEFAULT_DIFFICULTY
    board_size: str = DEFAULT_BOARD_SIZE  # "RxC" token
    theme: str = DEFAULT_THEME
    sound_effects: bool = DEFAULT_SOUND_EFFECTS
    high_quality: bool = DEFAULT_HIGH_QUALITY

    @model_validator(mode="before")
    @classmethod
    def _fill_player_kinds(cls, data: Any) -> Any:
        if isinstance(data, dict) and data.get("player_kinds") is None:
            data = dict(data)
            count = _as_int(data.get("player_count", DEFAULT_PLAYER_COUNT))
            if count is not None:
                data["player_kinds"] = default_player_kinds(count)
        return data

    @field_validator("player_count")
    @classmethod
    def _check_player_count(cls, v: int) -> int:
        if not MIN_PLAYERS <= v <= MAX_PLAYERS:
            raise ValueError(f"player_count must be between {MIN_PLAYERS} and {MAX_PLAYERS}, got {v}")
        return v

    @field_validator("player_kinds")
    @classmethod
    def _check_player_kinds(cls, v: list[str]) -> list[str]:
        for kind in v:
            if kind not in PLAYER_KINDS:
                raise ValueError(f"Unknown player kind '{kind}'. Allowed: {', '.join(PLAYER_KINDS)}")
        return v

    @field_validator("difficulty")
    @classmethod
    def _check_difficulty(cls, v: str) -> str:
        if v not in DIFFICULTIES:
            raise ValueError(f"Unknown difficulty '{v}'. Allowed: {', '.join(DIFFICULTIES)}")
        return v

    @field_validator("board_size")
    @classmethod
    def _check_board_size(cls, v: str) -> str:
        return parse_board_size(v).token

    @model_validator(mode="after")
    def _check_seats(self) -> "GameSettings":
        if len(self.player_kinds) != self.player_count:
            raise ValueError(
                f"player_kinds has {len(self.player_kinds)} entries for {self.player_count} players"
            )
        return self

    @classmethod
    def load(cls, data: dict[str, Any] | None = None) -> "GameSettings":
        """Build settings from a plain dict, missing keys falling back to defaults."""
        try:
            return cls.model_validate(data or {})
        except ValidationError as e:
            raise ConfigurationError(str(e)) from e

    def board_dimensions(self) -> BoardSize:
        return parse_board_size(self.board_size)

    def updated(self, **changes: Any) -> "GameSettings":
        """
        Return a re-validated copy with the given fields replaced.
        Changing player_count without giving player_kinds resizes the seats
        (new seats are computers, extra seats are dropped).
        """
        data = self.model_dump()
        if "player_count" in changes and "player_kinds" not in changes:
            count = _as_int(changes["player_count"])
            if count is not None:
                data["player_kinds"] = resize_player_kinds(self.player_kinds, count)
        data.update(changes)
        return GameSettings.load(data)

    def with_player_kind_toggled(self, index: int) -> "GameSettings":
        """Flip one seat between human and computer."""
        if not 0 <= index < self.player_count:
            raise ConfigurationError(f"No player seat {index} for {self.player_count} players")
        kinds = list(self.player_kinds)
        kinds[index] = COMPUTER if kinds[index] == HUMAN else HUMAN
        return self.updated(player_kinds=kinds)


def cycle_option(options: Sequence[T], current: T, direction: str) -> T:
    """
    Step to the next or previous option, wrapping at either end.
    An unknown current value selects the first option.
    """
    if current not in options:
        return options[0]
    idx = list(options).index(current)
    if direction == "next":
        return options[(idx + 1) % len(options)]
    if direction == "prev":
        return options[(idx - 1) % len(options)]
    raise ValueError(f"direction must be 'next' or 'prev', got {direction!r}")
