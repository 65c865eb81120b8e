"""
Base ghost policy interface for the game engine.
"""

from dataclasses import dataclass
from typing import Optional

from domain.constants import GRID_SIZE

CHASE = "chase"
WANDER = "wander"


@dataclass(frozen=True)
class GhostMove:
    """
    The decision a policy made for one ghost in one tick.

    Attributes:
        mode: CHASE or WANDER
        direction: the drawn direction when wandering, None when chasing
        position: the ghost's resulting cell index
    """
    mode: str
    direction: Optional[str]
    position: int


class GhostPolicy:
    """
    Base class/interface for ghost decision logic.

    A policy maps a ghost's position and the player's position to the
    ghost's next move. It never touches GameState.
    """

    def __init__(self, size: int = GRID_SIZE):
        self.size = size

    def decide(self, ghost_pos: int, player_pos: int) -> GhostMove:
        """
        Return the ghost's move for this tick.

        Args:
            ghost_pos: the ghost's current cell index
            player_pos: the player's cell index as of the start of the tick

        Returns:
            A GhostMove describing the mode and resulting position
        """
        raise NotImplementedError
