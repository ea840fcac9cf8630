"""Scenes: layered collections of game objects."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Optional

from framekit.collision import CollisionManager
from framekit.drawing import Layer
from framekit.gameobject import GameObject


class Scene(ABC):
    """Holds game objects in layers and drives their update and render passes."""

    def __init__(self, collision_manager: Optional[CollisionManager] = None) -> None:
        self.collision_manager = collision_manager
        self._layers: list[list[GameObject]] = [[] for _ in range(int(Layer.END))]

    @abstractmethod
    def init(self) -> None:
        """Populate the scene."""

    def update(self) -> None:
        for layer in self._layers:
            for obj in layer:
                if not obj.is_dead:
                    obj.update()

    def late_update(self) -> None:
        for layer in self._layers:
            for obj in layer:
                obj.late_update()

    def render(self, surface: Any) -> None:
        """Render living objects and drop dead ones from their layers."""
        for index, layer in enumerate(self._layers):
            alive = []
            for obj in layer:
                if obj.is_dead:
                    continue
                obj.render(surface)
                alive.append(obj)
            self._layers[index] = alive

    def release(self) -> None:
        for layer in self._layers:
            layer.clear()
        if self.collision_manager is not None:
            self.collision_manager.check_reset()

    def add_object(self, obj: GameObject, layer: int) -> None:
        self._layers[int(layer)].append(obj)

    def layer_objects(self, layer: int) -> tuple[GameObject, ...]:
        return tuple(self._layers[int(layer)])