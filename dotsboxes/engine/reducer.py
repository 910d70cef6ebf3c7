"""
Main game reducer.
Applies actions to state, enforcing rules and producing new state.
Returns (new_state, events) where events describe what happened.
"""

from dotsboxes.engine.state import GameState, Player
from dotsboxes.engine.actions import Action, DRAW_LINE, draw_line
from dotsboxes.engine.board import adjacent_box_ids, box_line_ids
from dotsboxes.engine.events import (
    GameEvent,
    line_drawn,
    move_ignored,
    box_completed,
    score_changed,
    turn_changed,
    match_over,
    REASON_ALREADY_DRAWN,
    REASON_MATCH_OVER,
)


def apply_action(
    state: GameState,
    action: Action,
) -> tuple[GameState, list[GameEvent]]:
    """
    Apply a single action to the current state, returning new state and events.

    The given state is never mutated. Submissions that cannot change anything
    (line already drawn, match already over) return the same state object with
    a single move_ignored event.

    Args:
        state: Current game state
        action: Action to apply

    Returns:
        Tuple of (new_state, events) where events describe what happened

    Raises:
        ValueError: unknown action type or unknown line id
    """
    if action.type == DRAW_LINE:
        return _handle_draw_line(state, action)

    raise ValueError(f"Unknown action type: {action.type}")


def _handle_draw_line(
    state: GameState,
    action: Action,
) -> tuple[GameState, list[GameEvent]]:
    """
    Draw a line for the current player.
    - Completes any adjacent box whose four lines are now drawn
    - Recounts the mover's score
    - Mover keeps the turn if a box was completed, otherwise play passes on
    - Ends the match when every box is completed
    """
    lid = action.payload.get("line_id")
    line = state.get_line(lid)
    if line is None:
        raise ValueError(f"Unknown line: {lid}")

    mover = state.current_player
    if state.over:
        return state, [move_ignored(lid, mover, REASON_MATCH_OVER)]
    if line.drawn:
        return state, [move_ignored(lid, mover, REASON_ALREADY_DRAWN)]

    new_state = state.copy()
    events: list[GameEvent] = []

    new_line = new_state.lines[lid]
    new_line.drawn = True
    new_line.owner = mover
    new_state.move_count += 1
    events.append(line_drawn(lid, mover))

    completed = _complete_adjacent_boxes(new_state, lid, mover)
    for bid in completed:
        events.append(box_completed(bid, mover))

    player = new_state.players[mover]
    old_score = player.score
    player.score = new_state.boxes_owned_by(mover)
    if player.score != old_score:
        events.append(score_changed(mover, old_score, player.score))

    if completed:
        next_player = mover
    else:
        next_player = (mover + 1) % new_state.player_count
    new_state.current_player = next_player
    events.append(turn_changed(mover, next_player, extra_turn=bool(completed)))

    if all(box.completed for box in new_state.boxes.values()):
        new_state.over = True
        winner = determine_winner(new_state.players)
        new_state.winner = winner.id
        events.append(match_over(
            winner.id,
            new_state.scores(),
            tied=_is_tied(new_state.players),
        ))

    return new_state, events


def _complete_adjacent_boxes(state: GameState, lid: str, player_id: int) -> list[str]:
    """Mark the (at most two) boxes bordering a line completed when all their lines are drawn."""
    completed = []
    for bid in adjacent_box_ids(lid, state.board_size):
        box = state.boxes[bid]
        if box.completed:
            continue
        if all(state.lines[side].drawn for side in box_line_ids(box.row, box.col)):
            box.completed = True
            box.owner = player_id
            completed.append(bid)
    return completed


def determine_winner(players: list[Player]) -> Player:
    """Player with the highest score; ties resolve to the lowest player id."""
    best = players[0]
    for player in players[1:]:
        if player.score > best.score:
            best = player
    return best


def _is_tied(players: list[Player]) -> bool:
    top = max(p.score for p in players)
    return sum(1 for p in players if p.score == top) > 1


def submit_move(state: GameState, line_id: str) -> GameState:
    """Draw a line for the current player and return the resulting state."""
    new_state, _ = apply_action(state, draw_line(line_id))
    return new_state


def replay_from_actions(
    initial_state: GameState,
    actions: list[Action],
) -> tuple[GameState, list[GameEvent]]:
    """
    Replay a series of actions from an initial state.
    State is derived from the action log; replaying the same log always
    produces the same state and winner.

    Returns:
        Tuple of (final_state, all_events) after all actions applied
    """
    current_state = initial_state.copy()
    all_events: list[GameEvent] = []

    for action in actions:
        current_state, events = apply_action(current_state, action)
        all_events.extend(events)

    return current_state, all_events
