"""A manual-clock scheduler for one-shot timers."""

from __future__ import annotations

import heapq
import itertools
from dataclasses import dataclass, field
from typing import Callable


@dataclass(order=True)
class _Timer:
    due: int
    seq: int
    callback: Callable[[], object] = field(compare=False)
    cancelled: bool = field(default=False, compare=False)


class Scheduler:
    """Runs callbacks after a delay in milliseconds, driven by :meth:`advance`."""

    def __init__(self) -> None:
        self.now = 0
        self._queue: list[_Timer] = []
        self._counter = itertools.count()

    def call_later(self, delay_ms: int, callback: Callable[[], object]) -> _Timer:
        """Schedule ``callback`` to run ``delay_ms`` milliseconds from now."""
        if delay_ms < 0:
            raise ValueError(f"delay must not be negative: {delay_ms}")
        timer = _Timer(self.now + delay_ms, next(self._counter), callback)
        heapq.heappush(self._queue, timer)
        return timer

    def cancel(self, handle: _Timer) -> None:
        """Prevent a scheduled callback from running."""
        handle.cancelled = True

    def advance(self, ms: int) -> int:
        """Move the clock forward, running due callbacks in order; return how many ran."""
        if ms < 0:
            raise ValueError(f"cannot move the clock backwards: {ms}")
        target = self.now + ms
        ran = 0
        while self._queue and self._queue[0].due <= target:
            timer = heapq.heappop(self._queue)
            if timer.cancelled:
                continue
            self.now = timer.due
            timer.callback()
            ran += 1
        self.now = target
        return ran

    def pending(self) -> int:
        """Number of callbacks still waiting to run."""
        return sum(1 for timer in self._queue if not timer.cancelled)