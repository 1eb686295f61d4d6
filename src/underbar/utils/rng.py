"""Random number helpers backed by NumPy generators."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

import numpy as np


@dataclass
class RNGManager:
    """Own a :class:`numpy.random.Generator` so draws can be reproduced from a seed."""

    seed: Optional[int] = None
    numpy_rng: np.random.Generator = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self.numpy_rng = np.random.default_rng(self.seed)

    def randint(self, high: int) -> int:
        """Draw an integer uniformly from ``[0, high]`` inclusive."""

        return int(self.numpy_rng.integers(0, high + 1))

    def reseed(self, seed: Optional[int]) -> None:
        self.seed = seed
        self.numpy_rng = np.random.default_rng(seed)


_default = RNGManager()


def default_rng() -> RNGManager:
    """Return the module-wide manager used when callers pass no generator."""

    return _default


def seed_default_rng(seed: Optional[int]) -> RNGManager:
    """Reseed the module-wide manager and return it."""

    _default.reseed(seed)
    return _default


__all__ = ["RNGManager", "default_rng", "seed_default_rng"]
