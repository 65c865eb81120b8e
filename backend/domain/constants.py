"""
Game constants for Pellet Chase.
"""

# Movement directions
UP = "UP"
DOWN = "DOWN"
LEFT = "LEFT"
RIGHT = "RIGHT"
VALID_MOVES = {UP, DOWN, LEFT, RIGHT}
# Fixed order for random draws so a seeded RNG is reproducible
DIRECTIONS = (UP, DOWN, LEFT, RIGHT)

# Game status
PLAYING = "PLAYING"
VICTORY = "VICTORY"
CAPTURED = "CAPTURED"

# Tick kinds (one periodic trigger each)
PLAYER_TICK = "PLAYER"
GHOST_TICK = "GHOST"
TICK_KINDS = {PLAYER_TICK, GHOST_TICK}

# Events raised by the controller
STATE_CHANGED = "STATE_CHANGED"
VICTORY_EVENT = "VICTORY"
CAPTURED_EVENT = "CAPTURED"
EVENTS = {STATE_CHANGED, VICTORY_EVENT, CAPTURED_EVENT}

# Game settings
GRID_SIZE = 15
PLAYER_MOVE_PERIOD_MS = 150
GHOST_MOVE_PERIOD_MS = 500
DETECTION_RANGE = 3
PELLET_REWARD = 10
GHOST_COUNT = 4


def corner_positions(size: int = GRID_SIZE):
    """Top-left, top-right, bottom-left, bottom-right."""
    return [0, size - 1, size * (size - 1), size * size - 1]


def center_position(size: int = GRID_SIZE) -> int:
    return (size * size) // 2


GHOST_START_POSITIONS = corner_positions(GRID_SIZE)
PLAYER_START_POSITION = center_position(GRID_SIZE)
