"""Shared typing aliases and the ``MISSING`` sentinel for the underbar package."""

from __future__ import annotations

from typing import Any, Callable, Hashable, TypeVar, Union


class _MissingType:
    """Type of :data:`MISSING`; there is exactly one instance."""

    _instance: "_MissingType | None" = None

    def __new__(cls) -> "_MissingType":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False

    def __copy__(self) -> "_MissingType":
        return self

    def __deepcopy__(self, memo: dict) -> "_MissingType":
        return self

    def __reduce__(self) -> str:
        return "MISSING"


MISSING = _MissingType()

Key = Union[int, Hashable]
Callback = Callable[..., Any]
Predicate = Callable[..., Any]
Reducer = Callable[..., Any]

T = TypeVar("T")

__all__ = ["MISSING", "Key", "Callback", "Predicate", "Reducer", "T"]
