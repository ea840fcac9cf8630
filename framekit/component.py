"""Base class for parts that attach to a game object."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Optional

if TYPE_CHECKING:
    from framekit.gameobject import GameObject


class Component(ABC):
    """A piece of behaviour owned by a game object, run after its update."""

    def __init__(self) -> None:
        self.owner: Optional[GameObject] = None

    @abstractmethod
    def late_update(self) -> None:
        """Run once per frame after the owners have been updated."""

    @abstractmethod
    def render(self, surface: Any) -> None:
        """Draw the component onto a surface."""