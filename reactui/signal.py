"""Reactive values that notify their dependents whenever they are set."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Callable, Generic, TypeVar

T = TypeVar("T")


class Dependency(ABC, Generic[T]):
    """Something that reacts when a value it depends on changes."""

    @abstractmethod
    def update(self, val: T) -> None:
        """Receive the new value."""


class EffectFunc(Dependency[T]):
    """A dependency that runs a callback, ignoring the new value."""

    def __init__(self, func: Callable[[], object]) -> None:
        self._func = func

    def update(self, val: T) -> None:
        self._func()


class Signal(Dependency[T]):
    """A value that pushes every new setting to its dependencies, in order."""

    def __init__(self, value: T) -> None:
        self._value = value
        self._deps: list[Dependency[T]] = []

    def value(self) -> T:
        """Return the current value."""
        return self._value

    def set(self, val: T) -> None:
        """Store a new value and notify the dependencies registered so far."""
        self._value = val
        for dep in list(self._deps):
            dep.update(val)

    def update(self, val: T) -> None:
        """Let a signal depend on another signal by mirroring its value."""
        self.set(val)

    def add_dependency(self, dep: Dependency[T]) -> None:
        """Register a dependency to be notified on every set."""
        self._deps.append(dep)

    def effect(self, f: Callable[[], object]) -> None:
        """Run ``f`` after every set."""
        self._deps.append(EffectFunc(f))