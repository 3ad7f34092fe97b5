"""Explicit scheduled tasks

Delays in the controller (message auto-hide, redirect, form switch) are
scheduled here instead of sleeping. Tasks run in due order whenever
run_pending() is called, so a manual clock makes time deterministic.
"""
import heapq
import itertools
import logging
import time
from typing import Any, Callable, List, Optional, Tuple

logger = logging.getLogger(__name__)


class ManualClock:
    """Clock that only moves when told to"""

    def __init__(self, start: float = 0.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class ScheduledTask:
    """Handle to a pending callback"""

    def __init__(self, due: float, callback: Callable[..., Any], args: Tuple):
        self.due = due
        self.callback = callback
        self.args = args
        self.cancelled = False
        self.done = False

    @property
    def pending(self) -> bool:
        return not (self.cancelled or self.done)

    def cancel(self) -> None:
        self.cancelled = True

    def run(self) -> None:
        self.done = True
        self.callback(*self.args)


class Scheduler:
    """Single-threaded timer queue"""

    def __init__(self, clock: Optional[Callable[[], float]] = None):
        self.clock = clock or time.monotonic
        self._queue: List[Tuple[float, int, ScheduledTask]] = []
        self._counter = itertools.count()

    def call_later(self, delay: float, callback: Callable[..., Any], *args: Any) -> ScheduledTask:
        task = ScheduledTask(self.clock() + delay, callback, args)
        heapq.heappush(self._queue, (task.due, next(self._counter), task))
        return task

    def pending(self) -> List[ScheduledTask]:
        return [task for _, _, task in sorted(self._queue) if task.pending]

    def next_due(self) -> Optional[float]:
        while self._queue and not self._queue[0][2].pending:
            heapq.heappop(self._queue)
        return self._queue[0][0] if self._queue else None

    def run_pending(self) -> int:
        """Run every task that is due; returns how many ran"""
        ran = 0
        now = self.clock()
        while self._queue and self._queue[0][0] <= now:
            _, _, task = heapq.heappop(self._queue)
            if not task.pending:
                continue
            task.run()
            ran += 1
        return ran

    def advance(self, seconds: float) -> int:
        """Move a ManualClock forward and run what became due"""
        if not isinstance(self.clock, ManualClock):
            raise TypeError("advance() requires a ManualClock")
        self.clock.advance(seconds)
        return self.run_pending()

    def run_until_idle(self, sleep: Optional[Callable[[float], Any]] = None) -> None:
        """Block until no task is pending, sleeping between due times"""
        sleep = sleep or time.sleep
        while True:
            due = self.next_due()
            if due is None:
                return
            wait = due - self.clock()
            if wait > 0:
                sleep(wait)
            self.run_pending()
