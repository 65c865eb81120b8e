"""
Game configuration.

Defaults are the reference constants from domain.constants. Any of them can
be overridden through environment variables (or a .env file), which is how
the CLI and the HTTP app pick up a non-default grid or timing.
"""

import os
from dataclasses import dataclass, field
from typing import List, Optional

from dotenv import load_dotenv

from domain.constants import (
    GRID_SIZE,
    PLAYER_MOVE_PERIOD_MS,
    GHOST_MOVE_PERIOD_MS,
    DETECTION_RANGE,
    PELLET_REWARD,
    GHOST_COUNT,
    corner_positions,
    center_position,
)

ENV_PREFIX = "PELLET_CHASE_"


@dataclass
class GameConfig:
    grid_size: int = GRID_SIZE
    player_period_ms: int = PLAYER_MOVE_PERIOD_MS
    ghost_period_ms: int = GHOST_MOVE_PERIOD_MS
    detection_range: int = DETECTION_RANGE
    pellet_reward: int = PELLET_REWARD
    seed: Optional[int] = None
    ghost_starts: List[int] = field(default_factory=list)
    player_start: Optional[int] = None

    def __post_init__(self):
        if self.grid_size < 2:
            raise ValueError(f"grid_size must be at least 2, got {self.grid_size}")
        for name in ("player_period_ms", "ghost_period_ms"):
            if getattr(self, name) <= 0:
                raise ValueError(f"{name} must be positive, got {getattr(self, name)}")
        if self.detection_range < 0:
            raise ValueError(f"detection_range must be >= 0, got {self.detection_range}")
        if self.pellet_reward < 0:
            raise ValueError(f"pellet_reward must be >= 0, got {self.pellet_reward}")

        # Derived from the grid unless given explicitly
        if not self.ghost_starts:
            self.ghost_starts = corner_positions(self.grid_size)
        if self.player_start is None:
            self.player_start = center_position(self.grid_size)

        if len(self.ghost_starts) != GHOST_COUNT:
            raise ValueError(
                f"Expected {GHOST_COUNT} ghost start positions, got {len(self.ghost_starts)}"
            )
        cells = self.grid_size * self.grid_size
        for pos in [self.player_start, *self.ghost_starts]:
            if not 0 <= pos < cells:
                raise ValueError(f"Start position {pos} is off the {self.grid_size}x{self.grid_size} grid")
        # A player starting under a ghost would begin the game already caught
        if self.player_start in self.ghost_starts:
            raise ValueError(
                f"player_start {self.player_start} overlaps a ghost start {self.ghost_starts}"
            )

    @classmethod
    def from_env(cls) -> "GameConfig":
        """Build a config from PELLET_CHASE_* environment variables."""
        load_dotenv()

        kwargs = {}
        for name in ("grid_size", "player_period_ms", "ghost_period_ms",
                     "detection_range", "pellet_reward", "seed"):
            value = _int_from_env(ENV_PREFIX + name.upper())
            if value is not None:
                kwargs[name] = value
        return cls(**kwargs)


def _int_from_env(key: str) -> Optional[int]:
    raw = os.getenv(key)
    if raw is None or raw.strip() == "":
        return None
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"Environment variable {key} must be an integer, got {raw!r}")
