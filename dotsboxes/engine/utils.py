"""
Utility functions for the game engine.
"""

from typing import Any

from dotsboxes.config import PLAYER_COLORS
from dotsboxes.engine import HORIZONTAL, VERTICAL
from dotsboxes.engine.state import GameState, Player
from dotsboxes.engine.board import BoardSize, initialize_board, line_id, box_id
from dotsboxes.engine.events import GameEvent
from dotsboxes.engine.settings import GameSettings, ConfigurationError


def create_players(player_kinds: list[str], colors: list[str] | None = None) -> list[Player]:
    """Players with sequential ids, zero score and a colour cycled from the palette."""
    palette = colors or PLAYER_COLORS
    return [
        Player(id=i, kind=kind, color=palette[i % len(palette)], score=0)
        for i, kind in enumerate(player_kinds)
    ]


def create_match(settings: GameSettings | dict[str, Any] | None = None) -> GameState:
    """
    Create a fresh match ready for the first move.

    Args:
        settings: GameSettings, or a plain dict of settings fields.
            None uses the defaults from dotsboxes.config.

    Raises:
        ConfigurationError: player count out of range, bad seat list, or a
            board size that is malformed or non-positive
    """
    if isinstance(settings, GameSettings):
        # Fields may have been assigned after construction; check them again.
        settings = GameSettings.load(settings.model_dump())
    elif settings is None or isinstance(settings, dict):
        settings = GameSettings.load(settings)
    else:
        raise ConfigurationError(f"Expected GameSettings or dict, got {type(settings).__name__}")

    board_size = settings.board_dimensions()
    lines, boxes = initialize_board(board_size)

    return GameState(
        board_size=board_size,
        players=create_players(settings.player_kinds),
        lines=lines,
        boxes=boxes,
        current_player=0,
        over=False,
        winner=None,
    )


def reset_match(settings: GameSettings | dict[str, Any] | None = None) -> GameState:
    """
    Start over with a brand-new match.
    The previous GameState is simply dropped by the caller; it is never reused.
    """
    return create_match(settings)


def render_board(state: GameState) -> str:
    """
    ASCII picture of the board: '+' dots, '---' / '|' drawn lines,
    completed boxes labelled with their owner's id.
    """
    rows, cols = state.board_size.rows, state.board_size.cols
    out = []
    for r in range(rows + 1):
        top = "+"
        for c in range(cols):
            drawn = state.lines[line_id(r, c, HORIZONTAL)].drawn
            top += ("---" if drawn else "   ") + "+"
        out.append(top)
        if r == rows:
            break
        mid = ""
        for c in range(cols + 1):
            drawn = state.lines[line_id(r, c, VERTICAL)].drawn
            mid += "|" if drawn else " "
            if c < cols:
                box = state.boxes[box_id(r, c)]
                mid += f" {box.owner} " if box.completed else "   "
        out.append(mid)
    return "\n".join(out)


def print_game_state(state: GameState, show_board: bool = True):
    """
    Pretty-print the current game state.

    Args:
        state: Current game state
        show_board: If True, include the ASCII board
    """
    size: BoardSize = state.board_size
    print(f"\n{'='*60}")
    status = "OVER" if state.over else f"Player {state.current_player} to move"
    print(f"Board {size.token} | Moves: {state.move_count} | {status}")
    print(f"{'='*60}")

    if show_board:
        print(render_board(state))

    print(f"\n{'Scores':.<40}")
    for player in state.players:
        marker = "*" if player.id == state.current_player and not state.over else " "
        print(f" {marker}Player {player.id} ({player.kind}, {player.color}): {player.score}")

    if state.over and state.winner is not None:
        print(f"\nWinner: Player {state.winner}")
    print()


def print_events(events: list[GameEvent]):
    """Print one line per event, in order."""
    for event in events:
        details = ", ".join(f"{k}={v}" for k, v in event.payload.items())
        print(f"[{event.type}] {details}")
