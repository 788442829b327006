"""
Timer ownership for the snake game.

The engine itself never schedules anything; a SnakeSession wires it to
a Scheduler at the configured tick interval, the way a render loop
would with a real interval timer.
"""

from __future__ import annotations

import logging
from typing import Optional

from game_hub.core.scheduler import Job, Scheduler
from game_hub.core.types import Status
from game_hub.games.snake import SnakeGame

logger = logging.getLogger(__name__)


class SnakeSession:
    """Drives SnakeGame.tick() on a fixed interval while the game runs."""

    def __init__(self, game: SnakeGame, scheduler: Scheduler, interval: float):
        if interval <= 0:
            raise ValueError(f"interval must be positive, got {interval}")
        self.game = game
        self.scheduler = scheduler
        self.interval = interval
        self._job: Optional[Job] = None

    @property
    def active(self) -> bool:
        return self._job is not None

    def start(self) -> None:
        """Start a round and begin ticking. No-op while already ticking."""
        if self._job is not None:
            return
        self.game.start()
        self._job = self.scheduler.call_every(self.interval, self._on_tick)
        logger.debug("Snake session ticking every %.3fs", self.interval)

    def stop(self) -> None:
        self.scheduler.cancel(self._job)
        self._job = None

    def restart(self) -> None:
        self.stop()
        self.start()

    def _on_tick(self) -> None:
        self.game.tick()
        if self.game.status is not Status.RUNNING:
            self.stop()

    def __enter__(self) -> "SnakeSession":
        self.start()
        return self

    def __exit__(self, *exc) -> None:
        self.stop()
