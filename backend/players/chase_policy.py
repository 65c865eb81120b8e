"""
Chase policy - ghosts pursue the player once it comes within detection range.
"""

import random
from typing import Callable, Optional

from domain.constants import DETECTION_RANGE, GRID_SIZE
from domain.grid import manhattan_distance, to_index, to_row_col
from .base import GhostMove, CHASE
from .wander_policy import WanderPolicy


def _approach(current: int, target: int, size: int) -> int:
    # One step toward target on a single axis, clamped to the board (no wrap)
    if current < target:
        return min(current + 1, size - 1)
    if current > target:
        return max(current - 1, 0)
    return current


class ChasePolicy(WanderPolicy):
    """
    Default ghost behavior.

    Within `detection_range` (inclusive, Manhattan distance on the unwrapped
    grid) the ghost closes the row gap and the column gap by one each, so a
    single tick may move it diagonally. Chasing never wraps. Out of range it
    falls back to wandering.
    """

    uses_detection_range = True

    def __init__(
        self,
        size: int = GRID_SIZE,
        detection_range: int = DETECTION_RANGE,
        random_direction: Optional[Callable[[], str]] = None,
        rng: Optional[random.Random] = None,
    ):
        super().__init__(size, random_direction=random_direction, rng=rng)
        self.detection_range = detection_range

    def chase(self, ghost_pos: int, player_pos: int) -> GhostMove:
        ghost_row, ghost_col = to_row_col(ghost_pos, self.size)
        player_row, player_col = to_row_col(player_pos, self.size)

        new_row = _approach(ghost_row, player_row, self.size)
        new_col = _approach(ghost_col, player_col, self.size)
        return GhostMove(CHASE, None, to_index(new_row, new_col, self.size))

    def decide(self, ghost_pos: int, player_pos: int) -> GhostMove:
        distance = manhattan_distance(ghost_pos, player_pos, self.size)
        if distance <= self.detection_range:
            return self.chase(ghost_pos, player_pos)
        return self.wander(ghost_pos)
