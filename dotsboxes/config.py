"""
Single place for default match configuration.
Change DEFAULT_BOARD_SIZE / DEFAULT_PLAYER_COUNT to switch what a fresh GameSettings starts with.
"""
# Board size token "RxC" (rows x cols). This is the default for new matches.
DEFAULT_BOARD_SIZE = "5x4"
DEFAULT_PLAYER_COUNT = 2
DEFAULT_DIFFICULTY = "medium"
DEFAULT_THEME = "default"
DEFAULT_SOUND_EFFECTS = True
DEFAULT_HIGH_QUALITY = True

MIN_PLAYERS = 2
MAX_PLAYERS = 4

# Options offered by the options screen
PLAYER_COUNTS = [2, 3, 4]
DIFFICULTIES = ["easy", "medium", "hard", "expert"]
BOARD_SIZES = ["3x2", "5x4", "8x6", "11x9"]
THEMES = ["default"]

# Display colour per player id (cycled when there are more players than colours)
PLAYER_COLORS = ["#f87171", "#3b82f6", "#10b981", "#f59e0b"]
