"""Helpers for merging the keys of several mappings into one."""

from __future__ import annotations

from typing import Any, MutableMapping, Sequence

from .iteration import each
from .typing import MISSING


def extend(target: MutableMapping[Any, Any], sources: Sequence[Any]) -> MutableMapping[Any, Any]:
    """Copy every key of every source onto ``target``; later sources win.

    Returns ``target`` itself, not a copy.
    """

    def _merge(source: Any) -> None:
        def _assign(value: Any, key: Any) -> None:
            target[key] = value

        each(source, _assign)

    each(sources, _merge)
    return target


def defaults(target: MutableMapping[Any, Any], sources: Sequence[Any]) -> MutableMapping[Any, Any]:
    """Fill in keys that ``target`` lacks, taking the first source that has them.

    A key counts as lacking only when it is absent or holds ``MISSING``; falsy
    values such as ``0``, ``""`` or ``None`` are kept.
    """

    def _merge(source: Any) -> None:
        def _fill(value: Any, key: Any) -> None:
            if target.get(key, MISSING) is MISSING:
                target[key] = value

        each(source, _fill)

    each(sources, _merge)
    return target


__all__ = ["extend", "defaults"]
