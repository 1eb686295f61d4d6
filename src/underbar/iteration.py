"""Iteration primitives built on a single walk, :func:`each`.

Every helper here visits elements through :func:`each` so sequences and
mappings share one dispatch policy.  ``map`` and ``filter`` deliberately
shadow the builtins inside this module.
"""

from __future__ import annotations

import numbers
from typing import Any, Dict, List, Sequence

from .collection import as_collection, fit_arity
from .typing import MISSING, Callback, Predicate, Reducer


def each(collection: Any, callback: Callback) -> None:
    """Call ``callback(value, index_or_key, collection)`` once per element."""

    as_collection(collection).walk(fit_arity(callback, 3))


def map(collection: Any, callback: Callback) -> List[Any]:  # noqa: A001
    """Return the callback results for every element, in visiting order."""

    fn = fit_arity(callback, 3)
    results: List[Any] = []

    def _collect(value: Any, key: Any, items: Any) -> None:
        results.append(fn(value, key, items))

    each(collection, _collect)
    return results


def pluck(collection: Any, key: Any) -> List[Any]:
    """Return ``value[key]`` for every element; absent keys yield ``MISSING``."""

    def _field(value: Any) -> Any:
        try:
            return value[key]
        except (KeyError, IndexError):
            return MISSING

    return map(collection, _field)


def reduce(collection: Any, callback: Reducer, initial: Any = MISSING) -> Any:
    """Fold left over ``collection``.

    ``callback`` is invoked as ``(accumulator, value, index_or_key,
    collection)``.  When ``initial`` is omitted the first element seeds the
    accumulator and is not passed to ``callback``; an empty collection then
    yields :data:`~underbar.typing.MISSING`.
    """

    fn = fit_arity(callback, 4)
    accumulator = initial
    seeding = initial is MISSING

    def _step(value: Any, key: Any, items: Any) -> None:
        nonlocal accumulator, seeding
        if seeding:
            seeding = False
            accumulator = value
        else:
            accumulator = fn(accumulator, value, key, items)

    each(collection, _step)
    return accumulator


def filter(collection: Any, predicate: Predicate) -> List[Any]:  # noqa: A001
    """Return the values for which ``predicate`` is truthy."""

    test = fit_arity(predicate, 3)
    kept: List[Any] = []

    def _keep(value: Any, key: Any, items: Any) -> None:
        if test(value, key, items):
            kept.append(value)

    each(collection, _keep)
    return kept


def reject(collection: Any, predicate: Predicate) -> List[Any]:
    """Return the values for which ``predicate`` is falsy."""

    test = fit_arity(predicate, 3)
    return filter(collection, lambda value, key, items: not test(value, key, items))


def uniq(collection: Any) -> List[Any]:
    """Drop repeated values, keeping first occurrences.

    Values are compared by ``str(value)``, so ``1`` and ``"1"`` collapse into
    whichever comes first.
    """

    seen: Dict[str, bool] = {}

    def _first_time(value: Any) -> bool:
        token = str(value)
        if token in seen:
            return False
        seen[token] = True
        return True

    return filter(collection, _first_time)


def _same_kind(item: Any, target: Any) -> bool:
    if type(item) is type(target):
        return True
    # int and float compare across types; bool never matches a number.
    return (
        isinstance(item, numbers.Real)
        and isinstance(target, numbers.Real)
        and not isinstance(item, bool)
        and not isinstance(target, bool)
    )


def _matches(item: Any, target: Any) -> bool:
    """Strict equality: identity, or ``==`` between values of the same kind."""

    if item is target:
        return True
    if not _same_kind(item, target):
        return False
    try:
        return bool(item == target)
    except (TypeError, ValueError):
        # Elementwise results (NumPy arrays) have no single truth value.
        return False


def contains(collection: Any, target: Any) -> bool:
    """Return ``True`` if any element strictly equals ``target``."""

    return reduce(collection, lambda found, item: found or _matches(item, target), False)


def every(collection: Any, predicate: Predicate) -> bool:
    """Return ``True`` if ``predicate`` holds for every element (vacuously true)."""

    return reduce(collection, lambda passed, item: passed and bool(predicate(item)), True)


def some(collection: Any, predicate: Predicate) -> bool:
    """Return ``True`` if ``predicate`` holds for at least one element."""

    return reduce(collection, lambda passed, item: passed or bool(predicate(item)), False)


def index_of(sequence: Sequence[Any], target: Any, from_index: int = 0) -> int:
    """Return the first index at or after ``from_index`` holding ``target``, else ``-1``."""

    found = -1

    def _scan(item: Any, index: int) -> None:
        nonlocal found
        if index >= from_index and found == -1 and _matches(item, target):
            found = index

    each(sequence, _scan)
    return found


def first(sequence: Sequence[Any], n: int = 1) -> Any:
    """Return the first element, or the first ``n`` elements when ``n != 1``."""

    return sequence[0] if n == 1 else sequence[:n]


def last(sequence: Sequence[Any], n: int = 1) -> Any:
    """Return the last element, or the last ``n`` elements when ``n != 1``."""

    return sequence[len(sequence) - 1] if n == 1 else sequence[max(0, len(sequence) - n):]


__all__ = [
    "contains",
    "each",
    "every",
    "filter",
    "first",
    "index_of",
    "last",
    "map",
    "pluck",
    "reduce",
    "reject",
    "some",
    "uniq",
]
