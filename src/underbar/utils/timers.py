"""Deferred-execution backends consumed by :func:`underbar.scheduling.delay`."""

from __future__ import annotations

import heapq
import itertools
import logging
import threading
from dataclasses import dataclass, field
from typing import Any, Callable, List, Protocol

logger = logging.getLogger(__name__)


class Scheduler(Protocol):
    """Anything that can run ``callback`` once, ``wait_ms`` milliseconds from now."""

    def schedule(self, callback: Callable[[], Any], wait_ms: float) -> None:
        ...


@dataclass
class ThreadingScheduler:
    """Wall-clock scheduler backed by one :class:`threading.Timer` per callback."""

    daemon: bool = True

    def schedule(self, callback: Callable[[], Any], wait_ms: float) -> None:
        timer = threading.Timer(max(wait_ms, 0) / 1000.0, callback)
        timer.daemon = self.daemon
        timer.start()
        logger.debug("scheduled %r on a timer thread in %sms", callback, wait_ms)


@dataclass(order=True)
class _Entry:
    due: float
    seq: int
    callback: Callable[[], Any] = field(compare=False)


@dataclass
class ManualScheduler:
    """Simulated clock; callbacks only run when :meth:`advance` is called.

    Callbacks fire in order of due time, ties broken by scheduling order.
    """

    now: float = 0.0
    _queue: List[_Entry] = field(default_factory=list, init=False, repr=False)
    _counter: "itertools.count[int]" = field(default_factory=itertools.count, init=False, repr=False)

    @property
    def pending(self) -> int:
        return len(self._queue)

    def schedule(self, callback: Callable[[], Any], wait_ms: float) -> None:
        due = self.now + max(wait_ms, 0)
        heapq.heappush(self._queue, _Entry(due, next(self._counter), callback))
        logger.debug("queued %r for t=%s", callback, due)

    def advance(self, ms: float) -> int:
        """Move the clock forward by ``ms`` and run everything that fell due.

        Returns the number of callbacks run.
        """

        if ms < 0:
            raise ValueError(f"cannot advance by a negative duration ({ms})")
        target = self.now + ms
        fired = 0
        while self._queue and self._queue[0].due <= target:
            entry = heapq.heappop(self._queue)
            self.now = entry.due
            logger.debug("firing %r at t=%s", entry.callback, entry.due)
            entry.callback()
            fired += 1
        self.now = target
        return fired

    def run_all(self) -> int:
        """Advance until the queue is empty and return the number of callbacks run."""

        fired = 0
        while self._queue:
            fired += self.advance(self._queue[0].due - self.now)
        return fired


__all__ = ["Scheduler", "ThreadingScheduler", "ManualScheduler"]
