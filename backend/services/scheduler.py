"""
Timer bookkeeping for the two periodic game triggers.

The game core never sleeps or schedules anything itself. It tells the host
which triggers should be running through a scheduler object; the host (a
browser's setInterval, the headless simulation clock, a test) decides when
to actually call GameController.on_tick().
"""

import logging
from typing import Dict

logger = logging.getLogger(__name__)


class ManualScheduler:
    """
    Records which periodic triggers are armed and at what period.

    Nothing fires on its own; whoever owns the clock reads `running()` and
    calls on_tick for the due triggers.
    """

    def __init__(self):
        self._periods: Dict[str, int] = {}

    def start(self, kind: str, period_ms: int) -> None:
        if kind in self._periods:
            return
        self._periods[kind] = period_ms
        logger.debug(f"Started {kind} timer every {period_ms}ms")

    def stop(self, kind: str) -> None:
        if self._periods.pop(kind, None) is not None:
            logger.debug(f"Stopped {kind} timer")

    def is_running(self, kind: str) -> bool:
        return kind in self._periods

    def running(self) -> Dict[str, int]:
        """Armed triggers mapped to their period in milliseconds."""
        return dict(self._periods)
