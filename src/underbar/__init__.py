"""underbar
=================

Functional helpers for iterating, transforming and folding sequences and
mappings, merging mappings, and decorating functions (``once``, ``memoize``,
``delay``), plus a Fisher-Yates ``shuffle``.

Every iteration helper goes through :func:`each`, so sequences and mappings
follow one dispatch rule.
"""

from .collection import MappingCollection, SequenceCollection, as_collection, is_array_like
from .decorators import CacheStats, Memoized, Once, canonical_key, memoize, once
from .iteration import (
    contains,
    each,
    every,
    filter,
    first,
    index_of,
    last,
    map,
    pluck,
    reduce,
    reject,
    some,
    uniq,
)
from .objects import defaults, extend
from .scheduling import delay, get_default_scheduler, set_default_scheduler, use_scheduler
from .shuffling import shuffle
from .typing import MISSING

__all__ = [
    "MISSING",
    "CacheStats",
    "MappingCollection",
    "Memoized",
    "Once",
    "SequenceCollection",
    "as_collection",
    "canonical_key",
    "contains",
    "defaults",
    "delay",
    "each",
    "every",
    "extend",
    "filter",
    "first",
    "get_default_scheduler",
    "index_of",
    "is_array_like",
    "last",
    "map",
    "memoize",
    "once",
    "pluck",
    "reduce",
    "reject",
    "set_default_scheduler",
    "shuffle",
    "some",
    "uniq",
    "use_scheduler",
]
