"""
Autopilot player - steers toward the nearest pellet for headless runs.
"""

import random
from typing import Dict, List, Optional

from domain.constants import DIRECTIONS
from domain.game_state import GameSnapshot
from domain.grid import manhattan_distance, step_index


class GreedyPelletPlayer:
    """
    Picks the direction whose wrapped step lands closest to a pellet,
    skipping steps onto a ghost whenever another step is available.
    """

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng or random.Random()

    def _nearest_pellet_distance(self, pos: int, snapshot: GameSnapshot) -> int:
        if pos in snapshot.pellets:
            return 0
        if not snapshot.pellets:
            return 0
        return min(manhattan_distance(pos, p, snapshot.size) for p in snapshot.pellets)

    def get_move(self, snapshot: GameSnapshot) -> str:
        ghosts = set(snapshot.ghosts)

        # Calculate the cell reached by each direction
        candidates: Dict[str, int] = {
            direction: step_index(snapshot.player_position, direction, snapshot.size)
            for direction in DIRECTIONS
        }

        safe = [d for d, pos in candidates.items() if pos not in ghosts]
        # If no safe moves, just return a random move (we'll be caught anyway)
        if not safe:
            return self.rng.choice(DIRECTIONS)

        scores = {d: self._nearest_pellet_distance(candidates[d], snapshot) for d in safe}
        best = min(scores.values())
        best_moves: List[str] = [d for d in safe if scores[d] == best]
        return self.rng.choice(best_moves)
