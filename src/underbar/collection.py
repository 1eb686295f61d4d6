"""Two-variant collection abstraction shared by every iteration helper.

A collection is either an ordered sequence or a key-value mapping.  The
variant is resolved once, at the call boundary, by :func:`as_collection`;
callers that already know which variant they hold can pass a
:class:`SequenceCollection` or :class:`MappingCollection` directly and skip
the shape check.
"""

from __future__ import annotations

import inspect
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Callable, Sequence, Union

from .typing import Callback

_POSITIONAL = (inspect.Parameter.POSITIONAL_ONLY, inspect.Parameter.POSITIONAL_OR_KEYWORD)


def is_array_like(value: Any) -> bool:
    """Return ``True`` if ``value`` has a non-negative length and positional indexing."""

    if isinstance(value, Mapping) or not hasattr(value, "__getitem__"):
        return False
    try:
        length = len(value)
    except TypeError:
        return False
    return isinstance(length, int) and length >= 0


def fit_arity(fn: Callable[..., Any], limit: int) -> Callable[..., Any]:
    """Return ``fn`` adapted to accept up to ``limit`` positional arguments.

    Surplus trailing arguments are dropped when ``fn`` declares fewer positional
    parameters, so ``lambda value: ...`` works wherever ``(value, key,
    collection)`` is offered.  Callables without an inspectable signature (most
    builtin types) receive only the first argument.
    """

    try:
        params = inspect.signature(fn).parameters.values()
    except (TypeError, ValueError):
        count = 1
    else:
        if any(p.kind is inspect.Parameter.VAR_POSITIONAL for p in params):
            return fn
        count = sum(1 for p in params if p.kind in _POSITIONAL)

    if count >= limit:
        return fn

    def _fitted(*args: Any) -> Any:
        return fn(*args[:count])

    return _fitted


@dataclass(frozen=True)
class SequenceCollection:
    """Ordered collection visited by ascending integer index."""

    items: Sequence[Any]

    def walk(self, callback: Callback) -> None:
        items = self.items
        for index in range(len(items)):
            callback(items[index], index, items)


@dataclass(frozen=True)
class MappingCollection:
    """Keyed collection visited in the mapping's own key order."""

    items: Mapping[Any, Any]

    def walk(self, callback: Callback) -> None:
        items = self.items
        # Snapshot so callbacks may assign into the mapping; deleted keys are skipped.
        for key in tuple(items.keys()):
            if key not in items:
                continue
            callback(items[key], key, items)


Collection = Union[SequenceCollection, MappingCollection]


def as_collection(value: Any) -> Collection:
    """Resolve ``value`` to one of the two collection variants."""

    if isinstance(value, (SequenceCollection, MappingCollection)):
        return value
    if is_array_like(value):
        return SequenceCollection(value)
    return MappingCollection(value)


__all__ = [
    "Collection",
    "MappingCollection",
    "SequenceCollection",
    "as_collection",
    "fit_arity",
    "is_array_like",
]
