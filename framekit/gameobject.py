"""Game objects: positioned, sized things that carry components."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Optional, TypeVar

from framekit.component import Component
from framekit.vec2 import Vec2

if TYPE_CHECKING:
    from framekit.collider import Collider

C = TypeVar("C", bound=Component)


class GameObject(ABC):
    """An object in a scene with a position, a size and a list of components."""

    def __init__(self, name: str = "") -> None:
        self.name = name
        self.pos = Vec2()
        self.size = Vec2()
        self._dead = False
        self._components: list[Component] = []
        self._contacts: list[Collider] = []

    @property
    def is_dead(self) -> bool:
        return self._dead

    @property
    def components(self) -> tuple[Component, ...]:
        return tuple(self._components)

    @property
    def contacts(self) -> tuple[Collider, ...]:
        """Colliders this object is currently touching, in order of first contact."""
        return tuple(self._contacts)

    def set_dead(self) -> None:
        self._dead = True

    @abstractmethod
    def update(self) -> None:
        """Advance the object by one frame."""

    def late_update(self) -> None:
        for component in self._components:
            component.late_update()

    @abstractmethod
    def render(self, surface: Any) -> None:
        """Draw the object onto a surface."""

    def component_render(self, surface: Any) -> None:
        for component in self._components:
            component.render(surface)

    def add_component(self, component_type: type[C]) -> C:
        """Create a component of the given type, attach it and return it."""
        component = component_type()
        component.owner = self
        self._components.append(component)
        return component

    def get_component(self, component_type: type[C]) -> Optional[C]:
        """First attached component of the given type, or None."""
        for component in self._components:
            if isinstance(component, component_type):
                return component
        return None

    def _has_contact(self, other: Collider) -> bool:
        return any(contact is other for contact in self._contacts)

    def enter_collision(self, other: Collider) -> None:
        """Start touching another collider."""
        if not self._has_contact(other):
            self._contacts.append(other)

    def stay_collision(self, other: Collider) -> None:
        """Keep touching another collider."""
        if not self._has_contact(other):
            self._contacts.append(other)

    def exit_collision(self, other: Collider) -> None:
        """Stop touching another collider."""
        self._contacts = [contact for contact in self._contacts if contact is not other]