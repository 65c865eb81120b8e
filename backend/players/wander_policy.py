"""
Wander policy - ghosts take a uniformly random wrapped step.
"""

import random
from typing import Callable, Optional

from domain.constants import DIRECTIONS, GRID_SIZE
from domain.grid import step_index
from .base import GhostPolicy, GhostMove, WANDER


class WanderPolicy(GhostPolicy):
    """
    A ghost that ignores the player and moves one cell in a random direction,
    wrapping around the grid edges.

    The random source is injectable: pass `random_direction` (a zero-argument
    callable returning a direction) or a seeded `rng`.
    """

    uses_detection_range = False

    def __init__(
        self,
        size: int = GRID_SIZE,
        random_direction: Optional[Callable[[], str]] = None,
        rng: Optional[random.Random] = None,
    ):
        super().__init__(size)
        if random_direction is None:
            rng = rng or random.Random()
            random_direction = lambda: rng.choice(DIRECTIONS)  # noqa: E731
        self.random_direction = random_direction

    def wander(self, ghost_pos: int) -> GhostMove:
        direction = self.random_direction()
        return GhostMove(WANDER, direction, step_index(ghost_pos, direction, self.size))

    def decide(self, ghost_pos: int, player_pos: int) -> GhostMove:
        return self.wander(ghost_pos)
