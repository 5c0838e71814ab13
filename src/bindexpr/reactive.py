"""Reactive-unwrap collaborator.

Dependency tracking is owned by the binding layer; this module only knows how
to read the current value out of a container.
"""
from __future__ import annotations

from typing import Any, Generic, TypeVar
from typing_extensions import TypeGuard

T = TypeVar("T")


class Observable(Generic[T]):
    """Minimal reactive container: a settable cell read by calling it."""

    __slots__ = ("_value",)

    def __init__(self, value: T):
        self._value = value

    def __call__(self) -> T:
        return self.get()

    def get(self) -> T:
        return self._value

    def peek(self) -> T:
        return self._value

    def set(self, value: T) -> None:
        self._value = value

    def __repr__(self) -> str:
        return f"Observable({self._value!r})"


def is_observable(value: Any) -> TypeGuard[Observable[Any]]:
    return isinstance(value, Observable)


def unwrap(value: Any) -> Any:
    if is_observable(value):
        return value.get()

    return value
