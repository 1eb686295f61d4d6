"""Configuration for the process-wide defaults used by :mod:`underbar`."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping, Optional

import yaml

from .scheduling import set_default_scheduler
from .utils.logging import resolve_level, setup_logging
from .utils.rng import seed_default_rng
from .utils.timers import ManualScheduler, Scheduler, ThreadingScheduler

SCHEDULER_BACKENDS = ("thread", "manual")


@dataclass
class LoggingConfig:
    """Logging verbosity and formatting options."""

    level: str = "INFO"
    rich_tracebacks: bool = True


@dataclass
class SchedulerConfig:
    """Which deferred-execution backend :func:`underbar.delay` uses by default."""

    backend: str = "thread"
    daemon: bool = True


@dataclass
class RandomConfig:
    """Seed for the default generator behind :func:`underbar.shuffle`."""

    seed: Optional[int] = None


@dataclass
class UnderbarConfig:
    """Top-level configuration object composed of sub-configurations."""

    logging: LoggingConfig = field(default_factory=LoggingConfig)
    scheduler: SchedulerConfig = field(default_factory=SchedulerConfig)
    random: RandomConfig = field(default_factory=RandomConfig)


def _optional_int(value: Any) -> Optional[int]:
    if value is None:
        return None
    return int(value)


def load_yaml(path: Path) -> Mapping[str, Any]:
    """Load a YAML document and return a mapping (empty for an empty file)."""

    with Path(path).open("r", encoding="utf-8") as handle:
        return yaml.safe_load(handle) or {}


def config_from_mapping(raw: Mapping[str, Any]) -> UnderbarConfig:
    """Build :class:`UnderbarConfig` from a parsed mapping, filling in defaults."""

    logging_cfg = raw.get("logging") or {}
    scheduler_cfg = raw.get("scheduler") or {}
    random_cfg = raw.get("random") or {}

    level = str(logging_cfg.get("level", "INFO"))
    resolve_level(level)
    backend = str(scheduler_cfg.get("backend", "thread")).lower()
    if backend not in SCHEDULER_BACKENDS:
        raise ValueError(f"unknown scheduler backend {backend!r}; expected one of {SCHEDULER_BACKENDS}")

    return UnderbarConfig(
        logging=LoggingConfig(
            level=level,
            rich_tracebacks=bool(logging_cfg.get("rich_tracebacks", True)),
        ),
        scheduler=SchedulerConfig(
            backend=backend,
            daemon=bool(scheduler_cfg.get("daemon", True)),
        ),
        random=RandomConfig(seed=_optional_int(random_cfg.get("seed"))),
    )


def load_config(path: Path) -> UnderbarConfig:
    """Load :class:`UnderbarConfig` from ``path``."""

    return config_from_mapping(load_yaml(path))


def build_scheduler(config: SchedulerConfig) -> Scheduler:
    if config.backend == "manual":
        return ManualScheduler()
    return ThreadingScheduler(daemon=config.daemon)


def configure(config: UnderbarConfig) -> Scheduler:
    """Apply ``config`` to logging, the default scheduler and the default RNG.

    Returns the scheduler that was installed.
    """

    setup_logging(level=config.logging.level, rich_tracebacks=config.logging.rich_tracebacks)
    scheduler = build_scheduler(config.scheduler)
    set_default_scheduler(scheduler)
    seed_default_rng(config.random.seed)
    return scheduler


__all__ = [
    "LoggingConfig",
    "SchedulerConfig",
    "RandomConfig",
    "UnderbarConfig",
    "build_scheduler",
    "config_from_mapping",
    "configure",
    "load_config",
    "load_yaml",
]
