"""
Tick schedulers for the game loop.

A scheduler owns a single repeating timer. Changing the speed never
adjusts the running timer: reschedule() cancels it and arms a fresh one,
so the next tick comes one full new interval after the change.

Two implementations:
 - ManualScheduler: a fake clock driven by advance(), for tests and
   headless simulations
 - IntervalScheduler: wall-clock ticks on top of the `schedule` library
"""

import logging
import time
from typing import Callable, List, Optional

import schedule

logger = logging.getLogger(__name__)

SCHEDULER_LOOP_SLEEP_SECONDS = 0.005


class Scheduler:
    """
    Base class/interface for tick schedulers.
    """

    def __init__(self):
        self.callback: Optional[Callable[[], None]] = None
        self.interval_ms: Optional[float] = None

    @property
    def running(self) -> bool:
        return self.interval_ms is not None

    def start(self, callback: Callable[[], None], interval_ms: float):
        if self.running:
            raise ValueError("Scheduler is already running; use reschedule() to change the interval")
        self.callback = callback
        self._arm(interval_ms)

    def reschedule(self, interval_ms: float):
        """Cancel the pending tick and arm a new timer at interval_ms."""
        if self.callback is None:
            raise ValueError("Scheduler has not been started")
        self.cancel()
        self._arm(interval_ms)

    def cancel(self):
        self._disarm()
        self.interval_ms = None

    def _arm(self, interval_ms: float):
        if interval_ms <= 0:
            raise ValueError(f"interval_ms must be positive, got {interval_ms}")
        self.interval_ms = interval_ms
        logger.debug("Timer armed at %.1f ms", interval_ms)

    def _disarm(self):
        raise NotImplementedError


class ManualScheduler(Scheduler):
    """
    Scheduler on a simulated clock.

    Attributes:
        now_ms: simulated time since creation
        history: every interval the timer was armed with, in order
        ticks_fired: how many times the callback ran
    """

    def __init__(self):
        super().__init__()
        self.now_ms = 0.0
        self.next_fire_ms: Optional[float] = None
        self.history: List[float] = []
        self.ticks_fired = 0

    def _arm(self, interval_ms: float):
        super()._arm(interval_ms)
        self.history.append(interval_ms)
        self.next_fire_ms = self.now_ms + interval_ms

    def _disarm(self):
        self.next_fire_ms = None

    def advance(self, ms: float) -> int:
        """
        Move the clock forward, firing every tick that falls due.

        Returns:
            Number of ticks fired.
        """
        target = self.now_ms + ms
        fired = 0

        while self.next_fire_ms is not None and self.next_fire_ms <= target:
            self.now_ms = self.next_fire_ms
            self.next_fire_ms = self.now_ms + self.interval_ms
            self.ticks_fired += 1
            fired += 1
            # May reschedule, which moves next_fire_ms
            self.callback()

        self.now_ms = target
        return fired

    def fire(self):
        """Run exactly one tick, as if its interval had just elapsed."""
        if self.next_fire_ms is None:
            raise ValueError("Scheduler is not running")
        self.advance(self.next_fire_ms - self.now_ms)


class IntervalScheduler(Scheduler):
    """
    Wall-clock scheduler backed by a private `schedule.Scheduler`.

    Ticks only happen while run_pending() or run_forever() is being called,
    so the callback always runs on the caller's thread.
    """

    def __init__(self, loop_sleep_seconds: float = SCHEDULER_LOOP_SLEEP_SECONDS):
        super().__init__()
        self.loop_sleep_seconds = loop_sleep_seconds
        self._scheduler = schedule.Scheduler()
        self._job: Optional[schedule.Job] = None

    def _arm(self, interval_ms: float):
        super()._arm(interval_ms)
        self._job = self._scheduler.every(interval_ms / 1000).seconds.do(self.callback)

    def _disarm(self):
        if self._job is not None:
            self._scheduler.cancel_job(self._job)
            self._job = None

    def run_pending(self):
        self._scheduler.run_pending()

    def run_forever(self, stop_condition: Callable[[], bool]):
        """Block, ticking on schedule, until stop_condition() returns True."""
        logger.info("Tick loop started at %.1f ms", self.interval_ms or 0)
        while not stop_condition():
            self._scheduler.run_pending()
            time.sleep(self.loop_sleep_seconds)
        logger.info("Tick loop stopped")
