"""
GameController - the single writer of GameState.

The controller serializes its entry points (input, ticks, lifecycle) behind
one re-entrant lock, applies movement rules, handles victory and capture,
and notifies subscribers after each completed transition.
"""

import logging
import random
import threading
from typing import Callable, Dict, List, Optional

from config import GameConfig
from domain.constants import (
    PLAYING,
    VICTORY,
    CAPTURED,
    VALID_MOVES,
    PLAYER_TICK,
    GHOST_TICK,
    STATE_CHANGED,
    VICTORY_EVENT,
    CAPTURED_EVENT,
    EVENTS,
)
from domain.game_state import GameState, GameSnapshot
from players.base import GhostPolicy
from players.chase_policy import ChasePolicy
from services.scheduler import ManualScheduler
from .movement import move_player, move_ghosts

logger = logging.getLogger(__name__)

Listener = Callable[[GameSnapshot], None]


class GameController:
    """
    Orchestrates the game:
      - Owns the one GameState and replaces it after each transition
      - Player ticks move the player in the current direction
      - Ghost ticks move every ghost via the ghost policy
      - Victory stops both timers and freezes the game
      - Capture notifies listeners and immediately resets
    """

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        policy: Optional[GhostPolicy] = None,
        scheduler: Optional[ManualScheduler] = None,
    ):
        self.config = config or GameConfig()
        self.policy = policy or ChasePolicy(
            size=self.config.grid_size,
            detection_range=self.config.detection_range,
            rng=random.Random(self.config.seed),
        )
        self.scheduler = scheduler or ManualScheduler()
        self.captures = 0

        self._lock = threading.RLock()
        self._listeners: Dict[str, List[Listener]] = {event: [] for event in EVENTS}
        self.state = self._initial_state()

    # ------------------------------------------------------------------
    # Subscriptions
    # ------------------------------------------------------------------

    def subscribe(self, event: str, callback: Listener) -> Callable[[], None]:
        """
        Register `callback` for `event`. Returns a function that unsubscribes it.
        """
        if event not in self._listeners:
            raise ValueError(f"Unknown event {event!r}. Expected one of {sorted(EVENTS)}")
        with self._lock:
            self._listeners[event].append(callback)

        def unsubscribe():
            with self._lock:
                if callback in self._listeners[event]:
                    self._listeners[event].remove(callback)

        return unsubscribe

    def _emit(self, event: str) -> None:
        snapshot = self.state.snapshot()
        for callback in list(self._listeners[event]):
            callback(snapshot)

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def _initial_state(self) -> GameState:
        return GameState.initial(
            size=self.config.grid_size,
            player_start=self.config.player_start,
            ghost_starts=self.config.ghost_starts,
        )

    def _reset(self) -> None:
        self.state = self._initial_state()
        # The ghost timer keeps whatever schedule the host gave it
        self.scheduler.stop(PLAYER_TICK)

    def init_game(self) -> None:
        """
        Start (or restart) a session: fresh state and the ghost timer armed.
        """
        with self._lock:
            self._reset()
            self.scheduler.start(GHOST_TICK, self.config.ghost_period_ms)
            logger.info(
                f"Game started on a {self.config.grid_size}x{self.config.grid_size} grid "
                f"with {len(self.state.pellets)} pellets"
            )
            self._emit(STATE_CHANGED)

    def reset_game(self) -> None:
        with self._lock:
            self._reset()
            logger.info("Game reset")
            self._emit(STATE_CHANGED)

    # ------------------------------------------------------------------
    # Input and ticks
    # ------------------------------------------------------------------

    def set_direction(self, direction) -> bool:
        """
        Record the player's latest direction and arm the player timer.

        Unrecognized values and input while the game is not running are
        ignored. Returns True when the direction was accepted.
        """
        if not isinstance(direction, str) or direction not in VALID_MOVES:
            logger.warning(f"Ignoring unrecognized direction {direction!r}")
            return False

        with self._lock:
            if self.state.status != PLAYING:
                logger.debug(f"Ignoring direction {direction} while {self.state.status}")
                return False

            new_state = self.state.copy()
            new_state.current_direction = direction
            self.state = new_state

            if not self.scheduler.is_running(PLAYER_TICK):
                self.scheduler.start(PLAYER_TICK, self.config.player_period_ms)

            self._emit(STATE_CHANGED)
            return True

    def on_tick(self, kind: str) -> List[str]:
        """
        Advance one trigger. Returns the terminal events (VICTORY, CAPTURED)
        raised by this tick alone, in order.
        """
        if kind == PLAYER_TICK:
            return self.advance_player()
        elif kind == GHOST_TICK:
            return self.advance_ghosts()
        else:
            raise ValueError(f"Unknown tick kind {kind!r}")

    def advance_player(self) -> List[str]:
        with self._lock:
            if self.state.status != PLAYING or self.state.current_direction is None:
                return []
            self.state = move_player(
                self.state, self.state.current_direction, reward=self.config.pellet_reward
            )
            return self._after_transition()

    def advance_ghosts(self) -> List[str]:
        with self._lock:
            if self.state.status != PLAYING:
                return []
            self.state = move_ghosts(self.state, self.policy)
            return self._after_transition()

    def _after_transition(self) -> List[str]:
        status = self.state.status

        if status == VICTORY:
            self.scheduler.stop(PLAYER_TICK)
            self.scheduler.stop(GHOST_TICK)
            logger.info(f"Victory with score {self.state.score}")
            self._emit(STATE_CHANGED)
            self._emit(VICTORY_EVENT)
            return [VICTORY_EVENT]
        elif status == CAPTURED:
            self.captures += 1
            logger.info(f"Captured at {self.state.player_position} with score {self.state.score}")
            self._emit(STATE_CHANGED)
            self._emit(CAPTURED_EVENT)
            self._reset()
            self._emit(STATE_CHANGED)
            return [CAPTURED_EVENT]

        self._emit(STATE_CHANGED)
        return []

    # ------------------------------------------------------------------
    # Read access
    # ------------------------------------------------------------------

    def snapshot(self) -> GameSnapshot:
        with self._lock:
            return self.state.snapshot()

    @property
    def status(self) -> str:
        return self.state.status
