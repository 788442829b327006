"""
Deterministic event scheduler driven by an external clock.

The presentation layer owns real time: it calls ``advance(elapsed)``
from its frame/timer loop. Tests call ``advance`` directly, so timed
behaviour (snake ticks, memory-match conceal delay) stays reproducible.
"""

from __future__ import annotations

import heapq
import itertools
import logging
from dataclasses import dataclass, field
from typing import Callable, List, Optional, Tuple

logger = logging.getLogger(__name__)


@dataclass(eq=False)
class Job:
    """Handle for a scheduled callback."""

    due: float
    callback: Callable[[], None]
    interval: Optional[float] = None  # None = one-shot
    cancelled: bool = field(default=False)

    @property
    def repeating(self) -> bool:
        return self.interval is not None


class Scheduler:
    """Manual-clock event queue."""

    __slots__ = ("_now", "_queue", "_seq")

    def __init__(self, start: float = 0.0):
        self._now = float(start)
        self._queue: List[Tuple[float, int, Job]] = []
        self._seq = itertools.count()

    @property
    def now(self) -> float:
        return self._now

    def call_later(self, delay: float, callback: Callable[[], None]) -> Job:
        """Run ``callback`` once, ``delay`` seconds from now."""
        if delay < 0:
            raise ValueError(f"delay must be non-negative, got {delay}")
        job = Job(self._now + delay, callback)
        self._push(job)
        return job

    def call_every(self, interval: float, callback: Callable[[], None]) -> Job:
        """Run ``callback`` every ``interval`` seconds, first run one interval from now."""
        if interval <= 0:
            raise ValueError(f"interval must be positive, got {interval}")
        job = Job(self._now + interval, callback, interval=interval)
        self._push(job)
        return job

    def cancel(self, job: Optional[Job]) -> None:
        """Cancel a job. Cancelling twice, or a finished job, is harmless."""
        if job is not None:
            job.cancelled = True

    def pending(self) -> int:
        """Number of live (not cancelled) jobs."""
        return sum(1 for _, _, job in self._queue if not job.cancelled)

    def advance(self, seconds: float) -> int:
        """
        Move the clock forward, firing every job that falls due.

        Jobs fire in due order (ties in scheduling order) and see
        ``now`` equal to their due time. Returns the number of
        callbacks run.
        """
        if seconds < 0:
            raise ValueError(f"cannot move clock backwards ({seconds})")

        target = self._now + seconds
        fired = 0

        while self._queue and self._queue[0][0] <= target:
            due, _, job = heapq.heappop(self._queue)
            if job.cancelled:
                continue

            self._now = due
            job.callback()
            fired += 1

            if job.repeating and not job.cancelled:
                job.due = due + job.interval
                self._push(job)

        self._now = target
        if fired:
            logger.debug("Advanced clock to %.3f, fired %d job(s)", target, fired)
        return fired

    def clear(self) -> None:
        """Cancel everything."""
        for _, _, job in self._queue:
            job.cancelled = True
        self._queue.clear()

    def _push(self, job: Job) -> None:
        heapq.heappush(self._queue, (job.due, next(self._seq), job))
