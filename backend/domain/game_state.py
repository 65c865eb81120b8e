"""
GameState entity - the authoritative positions, pellets, score and status.
"""

from dataclasses import dataclass
from typing import Dict, FrozenSet, List, Optional, Sequence, Set, Tuple, Any

from .constants import (
    GRID_SIZE,
    PLAYING,
    PLAYER_START_POSITION,
    GHOST_START_POSITIONS,
)
from .grid import to_row_col


@dataclass(frozen=True)
class GameSnapshot:
    """
    Read-only view of a GameState, handed to renderers and listeners.
    """
    size: int
    player_position: int
    ghosts: Tuple[int, ...]
    pellets: FrozenSet[int]
    score: int
    status: str
    current_direction: Optional[str]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "size": self.size,
            "player_position": self.player_position,
            "ghosts": list(self.ghosts),
            "pellets": sorted(self.pellets),
            "pellets_remaining": len(self.pellets),
            "score": self.score,
            "status": self.status,
            "current_direction": self.current_direction,
        }


class GameState:
    """
    A snapshot of the game at a specific point in time.

    Attributes:
        size: grid side length
        player_position: cell index of the player
        ghosts: list of ghost cell indices (order is stable, not meaningful)
        pellets: set of cell indices that still hold a pellet
        score: points collected so far
        current_direction: last direction the player issued, or None
        status: PLAYING, VICTORY or CAPTURED
    """

    def __init__(
        self,
        player_position: int,
        ghosts: List[int],
        pellets: Set[int],
        score: int = 0,
        current_direction: Optional[str] = None,
        status: str = PLAYING,
        size: int = GRID_SIZE,
    ):
        self.size = size
        self.player_position = player_position
        self.ghosts = ghosts
        self.pellets = pellets
        self.score = score
        self.current_direction = current_direction
        self.status = status

    @classmethod
    def initial(
        cls,
        size: int = GRID_SIZE,
        player_start: int = PLAYER_START_POSITION,
        ghost_starts: Sequence[int] = GHOST_START_POSITIONS,
    ) -> "GameState":
        """
        Build the start configuration: every cell not occupied by the
        player or a ghost holds a pellet.
        """
        for pos in [player_start, *ghost_starts]:
            to_row_col(pos, size)  # bounds check

        occupied = {player_start, *ghost_starts}
        pellets = {i for i in range(size * size) if i not in occupied}
        return cls(
            player_position=player_start,
            ghosts=list(ghost_starts),
            pellets=pellets,
            size=size,
        )

    def copy(self) -> "GameState":
        return GameState(
            player_position=self.player_position,
            ghosts=list(self.ghosts),
            pellets=set(self.pellets),
            score=self.score,
            current_direction=self.current_direction,
            status=self.status,
            size=self.size,
        )

    def snapshot(self) -> GameSnapshot:
        return GameSnapshot(
            size=self.size,
            player_position=self.player_position,
            ghosts=tuple(self.ghosts),
            pellets=frozenset(self.pellets),
            score=self.score,
            status=self.status,
            current_direction=self.current_direction,
        )

    def __eq__(self, other):
        if not isinstance(other, GameState):
            return NotImplemented
        return self.snapshot() == other.snapshot()

    def print_board(self) -> str:
        """
        Returns a string representation of the board with:
        P = player
        G = ghost (drawn over pellets)
        . = pellet
          = empty cell
        Row 0 is printed first.
        """
        board = [[' ' for _ in range(self.size)] for _ in range(self.size)]

        for pos in self.pellets:
            row, col = to_row_col(pos, self.size)
            board[row][col] = '.'

        row, col = to_row_col(self.player_position, self.size)
        board[row][col] = 'P'

        for pos in self.ghosts:
            row, col = to_row_col(pos, self.size)
            board[row][col] = 'G'

        result = [f"{r:2d} {' '.join(board[r])}" for r in range(self.size)]
        result.append("   " + " ".join(str(c % 10) for c in range(self.size)))
        return "\n".join(result)

    def __repr__(self):
        return (
            f"<GameState status={self.status}, player={self.player_position}, "
            f"ghosts={self.ghosts}, pellets={len(self.pellets)}, score={self.score}>"
        )
