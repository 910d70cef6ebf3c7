"""
Dots & Boxes Rules Engine
Core engine without rendering, input handling, storage, or networking
"""

HORIZONTAL = "h"
VERTICAL = "v"

HUMAN = "human"
COMPUTER = "computer"
PLAYER_KINDS = (HUMAN, COMPUTER)

# Match status, NOT_STARTED means no live GameState exists.
NOT_STARTED = "not_started"
IN_PROGRESS = "in_progress"
OVER = "over"
