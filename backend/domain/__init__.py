"""
Domain entities for the Pellet Chase game engine.

This module contains the core game entities that are independent of
infrastructure concerns (timers, rendering, HTTP).
"""

from .constants import (
    UP, DOWN, LEFT, RIGHT, VALID_MOVES, DIRECTIONS,
    PLAYING, VICTORY, CAPTURED,
    PLAYER_TICK, GHOST_TICK,
    STATE_CHANGED, VICTORY_EVENT, CAPTURED_EVENT,
)
from .grid import to_row_col, to_index, step, step_index, manhattan_distance
from .game_state import GameState, GameSnapshot

__all__ = [
    'UP', 'DOWN', 'LEFT', 'RIGHT', 'VALID_MOVES', 'DIRECTIONS',
    'PLAYING', 'VICTORY', 'CAPTURED',
    'PLAYER_TICK', 'GHOST_TICK',
    'STATE_CHANGED', 'VICTORY_EVENT', 'CAPTURED_EVENT',
    'to_row_col', 'to_index', 'step', 'step_index', 'manhattan_distance',
    'GameState', 'GameSnapshot',
]
