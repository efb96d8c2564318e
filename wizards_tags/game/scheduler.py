"""Delayed callback scheduling for bot thinking time and result display.

The engine never sleeps. It asks a scheduler to run a callback later, and
every callback re-checks the current state when it fires.
"""

from __future__ import annotations

import asyncio
import heapq
import itertools
import logging
from abc import ABC, abstractmethod
from typing import Callable

logger = logging.getLogger(__name__)


class ScheduledTask:
    """Handle for a scheduled callback."""

    def __init__(self, due: float, callback: Callable[[], None]):
        self.due = due
        self.callback = callback
        self.cancelled = False
        self._handle: asyncio.TimerHandle | None = None

    def cancel(self) -> None:
        """Prevent the callback from running."""
        self.cancelled = True
        if self._handle is not None:
            self._handle.cancel()

    def run(self) -> None:
        if not self.cancelled:
            self.callback()


class Scheduler(ABC):
    """Runs callbacks after a delay on a single logical thread."""

    @abstractmethod
    def call_later(self, delay: float, callback: Callable[[], None]) -> ScheduledTask:
        """Schedule ``callback`` to run after ``delay`` seconds.

        Args:
            delay: Delay in seconds (0 runs on the next step)
            callback: Zero-argument callable

        Returns:
            ScheduledTask handle
        """


class ManualScheduler(Scheduler):
    """Scheduler driven by a virtual clock.

    Nothing runs until the owner calls ``advance`` or ``run_until_idle``.
    Callbacks due at the same time run in scheduling order.
    """

    def __init__(self) -> None:
        self.now = 0.0
        self._queue: list[tuple[float, int, ScheduledTask]] = []
        self._counter = itertools.count()

    def call_later(self, delay: float, callback: Callable[[], None]) -> ScheduledTask:
        task = ScheduledTask(self.now + max(0.0, delay), callback)
        heapq.heappush(self._queue, (task.due, next(self._counter), task))
        return task

    @property
    def pending(self) -> int:
        """Number of scheduled callbacks not yet run or cancelled."""
        return sum(1 for _, _, task in self._queue if not task.cancelled)

    def step(self) -> bool:
        """Run the next due callback, moving the clock forward to it.

        Returns:
            False if nothing was left to run
        """
        while self._queue:
            due, _, task = heapq.heappop(self._queue)
            if task.cancelled:
                continue
            self.now = max(self.now, due)
            task.run()
            return True
        return False

    def advance(self, seconds: float) -> int:
        """Move the clock forward and run every callback that falls due.

        Args:
            seconds: Time to advance

        Returns:
            Number of callbacks run
        """
        deadline = self.now + seconds
        ran = 0
        while True:
            self._drop_cancelled()
            if not self._queue or self._queue[0][0] > deadline:
                break
            self.step()
            ran += 1
        self.now = max(self.now, deadline)
        return ran

    def _drop_cancelled(self) -> None:
        """Pop cancelled tasks off the head of the queue."""
        while self._queue and self._queue[0][2].cancelled:
            heapq.heappop(self._queue)

    def run_until_idle(self, max_steps: int = 100_000) -> int:
        """Run callbacks, including newly scheduled ones, until none remain.

        Args:
            max_steps: Safety limit on the number of callbacks

        Returns:
            Number of callbacks run

        Raises:
            RuntimeError: If the limit is reached with work still pending
        """
        ran = 0
        while self.step():
            ran += 1
            if ran >= max_steps:
                if self.pending:
                    raise RuntimeError(f"Scheduler still busy after {max_steps} steps")
                break
        return ran


class AsyncioScheduler(Scheduler):
    """Scheduler backed by an asyncio event loop."""

    def __init__(self, loop: asyncio.AbstractEventLoop | None = None):
        self._loop = loop

    @property
    def loop(self) -> asyncio.AbstractEventLoop:
        if self._loop is None:
            self._loop = asyncio.get_running_loop()
        return self._loop

    def call_later(self, delay: float, callback: Callable[[], None]) -> ScheduledTask:
        task = ScheduledTask(self.loop.time() + max(0.0, delay), callback)
        task._handle = self.loop.call_later(max(0.0, delay), task.run)
        logger.debug("Scheduled callback in %.2fs", delay)
        return task
