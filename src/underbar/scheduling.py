"""Fire-and-forget deferred calls."""

from __future__ import annotations

import contextlib
import logging
from typing import Any, Callable, Iterator, Mapping, Optional, Sequence

from .utils.timers import Scheduler, ThreadingScheduler

logger = logging.getLogger(__name__)

_default_scheduler: Scheduler = ThreadingScheduler()


def get_default_scheduler() -> Scheduler:
    return _default_scheduler


def set_default_scheduler(scheduler: Scheduler) -> Scheduler:
    """Install ``scheduler`` as the default and return the one it replaced."""

    global _default_scheduler
    previous, _default_scheduler = _default_scheduler, scheduler
    return previous


@contextlib.contextmanager
def use_scheduler(scheduler: Scheduler) -> Iterator[Scheduler]:
    """Temporarily make ``scheduler`` the default for :func:`delay`."""

    previous = set_default_scheduler(scheduler)
    try:
        yield scheduler
    finally:
        set_default_scheduler(previous)


def delay(
    fn: Callable[..., Any],
    wait: float,
    args: Sequence[Any] = (),
    kwargs: Optional[Mapping[str, Any]] = None,
    scheduler: Optional[Scheduler] = None,
) -> None:
    """Call ``fn(*args, **kwargs)`` once, no sooner than ``wait`` milliseconds from now.

    Returns immediately.  There is no way to cancel the call once scheduled.
    """

    call_args = tuple(args)
    call_kwargs = dict(kwargs or {})

    def _fire() -> None:
        fn(*call_args, **call_kwargs)

    target = scheduler if scheduler is not None else _default_scheduler
    logger.debug("delay: %r in %sms with args=%r", fn, wait, call_args)
    target.schedule(_fire, wait)


__all__ = ["delay", "get_default_scheduler", "set_default_scheduler", "use_scheduler"]
