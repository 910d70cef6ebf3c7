"""
Main entry point for the Dots & Boxes Rules Engine.
Demonstrates core functionality with a simple scripted match.
"""

from dotsboxes.engine.actions import draw_line
from dotsboxes.engine.reducer import apply_action
from dotsboxes.engine.settings import GameSettings
from dotsboxes.engine.queries import get_available_lines, get_standings
from dotsboxes.engine.utils import create_match, print_game_state, print_events


def main():
    print("Dots & Boxes Rules Engine")
    print("=" * 60)

    settings = GameSettings(player_count=2, board_size="2x2", player_kinds=["human", "human"])
    state = create_match(settings)

    print("\n[INITIAL STATE]")
    print_game_state(state)

    # ===== SCENARIO 1: A box completed by the fourth side grants an extra turn =====
    print("\n[SCENARIO 1: Completing box (0, 0)]")
    for lid in ["h-0-0", "v-0-0", "h-1-0", "v-0-1"]:
        state, events = apply_action(state, draw_line(lid))
        print_events(events)
    print_game_state(state)

    # ===== SCENARIO 2: Duplicate click is ignored =====
    print("\n[SCENARIO 2: Drawing h-0-0 again]")
    state, events = apply_action(state, draw_line("h-0-0"))
    print_events(events)

    # ===== SCENARIO 3: Play out the remaining lines in board order =====
    print("\n[SCENARIO 3: Playing out the board]")
    while not state.over:
        lid = get_available_lines(state)[0]
        state, events = apply_action(state, draw_line(lid))
        print_events(events)

    print("\n[FINAL STATE]")
    print_game_state(state)
    for rank, player in enumerate(get_standings(state), 1):
        print(f"{rank}. Player {player.id}: {player.score}")


if __name__ == "__main__":
    main()
