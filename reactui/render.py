"""Interfaces shared by every renderer back end."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class ComponentTypeError(TypeError):
    """A component was handed to a renderer that did not create it."""


class Component(ABC):
    """A named element with attributes and child components."""

    @abstractmethod
    def name(self) -> str:
        """Return the element name."""

    @abstractmethod
    def attributes(self) -> dict[str, Any]:
        """Return the attributes set so far."""

    @abstractmethod
    def set_attribute(self, key: str, val: Any) -> None:
        """Set an attribute, updating the rendered element if there is one."""

    @abstractmethod
    def children(self) -> list[Component]:
        """Return the child components."""


class Renderer(ABC):
    """Creates components and puts them on screen."""

    @abstractmethod
    def render(self, *args: Component) -> None:
        """Render each of the given components at the top level."""

    @abstractmethod
    def append(self, parent: Component, child: Component) -> None:
        """Add ``child`` beneath ``parent``."""

    @abstractmethod
    def new_component(self, name: str) -> Component:
        """Create an unrendered component of the given element name."""