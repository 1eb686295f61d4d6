"""Function decorators that hold private call state: :func:`once` and :func:`memoize`."""

from __future__ import annotations

import functools
import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Callable, Dict, Hashable, Mapping, Optional, Sequence, Tuple

from .typing import MISSING

logger = logging.getLogger(__name__)


class Once:
    """Callable that forwards to ``fn`` on its first call only.

    Every later call returns the first result, whatever its arguments.  When
    used as a method the receiver is forwarded, but the state still belongs
    to the decorated function rather than to each instance.
    """

    def __init__(self, fn: Callable[..., Any]) -> None:
        self._fn = fn
        self._called = False
        self._result: Any = MISSING
        self._label = getattr(fn, "__qualname__", repr(fn))
        functools.update_wrapper(self, fn)

    @property
    def called(self) -> bool:
        return self._called

    @property
    def result(self) -> Any:
        return self._result

    def __call__(self, *args: Any, **kwargs: Any) -> Any:
        if not self._called:
            self._result = self._fn(*args, **kwargs)
            self._called = True
            logger.debug("once(%s): first call stored %r", self._label, self._result)
        return self._result

    def __get__(self, instance: Any, owner: Optional[type] = None) -> Any:
        if instance is None:
            return self
        return functools.partial(self, instance)


def once(fn: Callable[..., Any]) -> Once:
    """Return a version of ``fn`` that runs at most once."""

    return Once(fn)


def _canonical(value: Any) -> Hashable:
    """Type-tagged hashable stand-in for ``value``.

    Containers are rebuilt element by element, mapping and set members in a
    fixed order.  Any other hashable value stands for itself; unhashable ones
    are keyed by identity, which stays valid because :class:`Memoized` keeps
    the arguments of every entry alive.
    """

    kind = type(value).__qualname__
    if value is None or isinstance(value, (bool, int, str, bytes)):
        return (kind, value)
    if isinstance(value, float):
        return (kind, repr(value))
    if isinstance(value, (list, tuple)):
        return (kind, tuple(_canonical(item) for item in value))
    if isinstance(value, Mapping):
        pairs = [(_canonical(k), _canonical(v)) for k, v in value.items()]
        pairs.sort(key=lambda pair: repr(pair[0]))
        return (kind, tuple(pairs))
    if isinstance(value, (set, frozenset)):
        members = [_canonical(item) for item in value]
        members.sort(key=repr)
        return (kind, tuple(members))
    try:
        hash(value)
    except TypeError:
        return ("id", kind, id(value))
    return ("obj", kind, value)


def canonical_key(args: Sequence[Any], kwargs: Optional[Mapping[str, Any]] = None) -> Hashable:
    """Build a deterministic cache key from an argument list.

    The ordered argument list itself is keyed, so ``f([1, 2, 3])`` and
    ``f(1, 2, 3)`` get different keys.  Values are tagged with their type, so
    ``{1: "a"}`` and ``{"1": "a"}`` differ too.
    """

    named = sorted((kwargs or {}).items())
    return (
        tuple(_canonical(arg) for arg in args),
        tuple((name, _canonical(value)) for name, value in named),
    )


@dataclass
class CacheStats:
    """Hit and miss counters for a :class:`Memoized` callable."""

    hits: int = 0
    misses: int = 0

    def incr(self, **kwargs: int) -> None:
        for key, value in kwargs.items():
            setattr(self, key, getattr(self, key) + int(value))


class Memoized:
    """Callable that caches ``fn`` results by :func:`canonical_key`."""

    def __init__(self, fn: Callable[..., Any]) -> None:
        self._fn = fn
        # Entries hold their arguments so identity-keyed values stay alive.
        self._cache: Dict[Hashable, Tuple[tuple, dict, Any]] = {}
        self._label = getattr(fn, "__qualname__", repr(fn))
        self.stats = CacheStats()
        functools.update_wrapper(self, fn)

    @property
    def cache(self) -> Mapping[Hashable, Any]:
        return MappingProxyType({key: entry[2] for key, entry in self._cache.items()})

    def cache_clear(self) -> None:
        self._cache.clear()
        self.stats = CacheStats()

    def __call__(self, *args: Any, **kwargs: Any) -> Any:
        key = canonical_key(args, kwargs)
        # Presence check: falsy results are still hits.
        if key in self._cache:
            self.stats.incr(hits=1)
            logger.debug("memoize(%s): hit %s", self._label, key)
            return self._cache[key][2]
        self.stats.incr(misses=1)
        logger.debug("memoize(%s): miss %s", self._label, key)
        result = self._fn(*args, **kwargs)
        self._cache[key] = (args, kwargs, result)
        return result

    def __get__(self, instance: Any, owner: Optional[type] = None) -> Any:
        if instance is None:
            return self
        return functools.partial(self, instance)


def memoize(fn: Callable[..., Any]) -> Memoized:
    """Return a version of ``fn`` that remembers results per argument list."""

    return Memoized(fn)


__all__ = ["CacheStats", "Memoized", "Once", "canonical_key", "memoize", "once"]
