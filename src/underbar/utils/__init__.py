"""Support code for :mod:`underbar`: logging, schedulers and random numbers."""

from .rng import RNGManager, default_rng, seed_default_rng
from .timers import ManualScheduler, Scheduler, ThreadingScheduler

__all__ = [
    "ManualScheduler",
    "RNGManager",
    "Scheduler",
    "ThreadingScheduler",
    "default_rng",
    "seed_default_rng",
]
