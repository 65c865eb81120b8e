"""
Headless game runner driven by a simulated clock.

Advances time in steps of the greatest common divisor of the two timer
periods and fires whichever armed triggers are due, the way a browser's
two setInterval timers would. An optional autopilot supplies the player's
directions.
"""

import logging
import math
import random
from typing import Any, Dict, Optional

from config import GameConfig
from domain.constants import PLAYING, VICTORY, PLAYER_TICK, GHOST_TICK
from engine.controller import GameController
from players.autopilot import GreedyPelletPlayer
from players.variant_registry import build_policy
from services.scheduler import ManualScheduler

logger = logging.getLogger(__name__)

# Order in which triggers due at the same instant fire
TICK_ORDER = (PLAYER_TICK, GHOST_TICK)


class SimulationClock:
    """
    Fires the scheduler's armed triggers against a controller as simulated
    time advances. A trigger armed at time t first fires at t + period.
    """

    def __init__(self, controller: GameController, scheduler: ManualScheduler):
        self.controller = controller
        self.scheduler = scheduler
        self.now_ms = 0
        self.tick_counts = {kind: 0 for kind in TICK_ORDER}
        self._next_fire: Dict[str, int] = {}
        periods = [controller.config.player_period_ms, controller.config.ghost_period_ms]
        self.step_ms = math.gcd(*periods)

    def _sync_timers(self) -> None:
        running = self.scheduler.running()
        for kind in list(self._next_fire):
            if kind not in running:
                del self._next_fire[kind]
        for kind, period in running.items():
            if kind not in self._next_fire:
                self._next_fire[kind] = self.now_ms + period

    def next_fire(self, kind: str) -> Optional[int]:
        self._sync_timers()
        return self._next_fire.get(kind)

    def due(self, kind: str) -> bool:
        return self.next_fire(kind) == self.now_ms

    def advance(self) -> None:
        """Move time forward one step and fire every trigger due at the new time."""
        self._sync_timers()
        self.now_ms += self.step_ms
        for kind in TICK_ORDER:
            # Re-sync: an earlier tick this step may have stopped or re-armed timers
            if not self.due(kind):
                continue
            period = self.scheduler.running()[kind]
            self._next_fire[kind] = self.now_ms + period
            self.tick_counts[kind] += 1
            self.controller.on_tick(kind)


def run_simulation(
    config: Optional[GameConfig] = None,
    max_ms: int = 60_000,
    autopilot: Optional[GreedyPelletPlayer] = None,
    policy_variant: Optional[str] = None,
    show_board: bool = False,
) -> Dict[str, Any]:
    """
    Run one game on a simulated clock until victory or `max_ms` elapses.

    Args:
        config: game configuration (defaults to GameConfig())
        max_ms: simulated time budget in milliseconds
        autopilot: player that picks directions; a seeded GreedyPelletPlayer by default
        policy_variant: ghost policy registry key
        show_board: log the final board

    Returns:
        A dictionary summarizing the run.
    """
    config = config or GameConfig()
    rng = random.Random(config.seed)
    autopilot = autopilot or GreedyPelletPlayer(rng=rng)

    scheduler = ManualScheduler()
    policy = build_policy(policy_variant, config.grid_size, config.detection_range, rng=rng)
    controller = GameController(config=config, policy=policy, scheduler=scheduler)
    clock = SimulationClock(controller, scheduler)

    controller.init_game()

    while clock.now_ms < max_ms and controller.status != VICTORY:
        # Steer before the player's next move, and re-arm after a capture reset
        if controller.status == PLAYING and (
            not scheduler.is_running(PLAYER_TICK)
            or clock.next_fire(PLAYER_TICK) == clock.now_ms + clock.step_ms
        ):
            controller.set_direction(autopilot.get_move(controller.snapshot()))
        clock.advance()

    snapshot = controller.snapshot()
    if show_board:
        logger.info("Final board:\n" + controller.state.print_board())

    summary = {
        "status": snapshot.status,
        "score": snapshot.score,
        "pellets_remaining": len(snapshot.pellets),
        "captures": controller.captures,
        "elapsed_ms": clock.now_ms,
        "player_ticks": clock.tick_counts[PLAYER_TICK],
        "ghost_ticks": clock.tick_counts[GHOST_TICK],
    }
    logger.info(f"Simulation finished: {summary}")
    return summary
