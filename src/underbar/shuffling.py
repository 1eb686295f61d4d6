"""Fisher-Yates shuffling that never touches its input."""

from __future__ import annotations

from typing import Any, List, Optional, Sequence, Union

import numpy as np

from .iteration import map as map_values
from .utils.rng import RNGManager, default_rng

RandomSource = Union[RNGManager, np.random.Generator, None]


def _draw(rng: RandomSource, high: int) -> int:
    if rng is None:
        return default_rng().randint(high)
    if isinstance(rng, RNGManager):
        return rng.randint(high)
    return int(rng.integers(0, high + 1))


def shuffle(sequence: Sequence[Any], rng: RandomSource = None) -> List[Any]:
    """Return a new list holding a uniformly random permutation of ``sequence``."""

    out = map_values(sequence, lambda value: value)
    for i in range(len(out) - 1, 0, -1):
        j = _draw(rng, i)
        out[i], out[j] = out[j], out[i]
    return out


__all__ = ["RandomSource", "shuffle"]
