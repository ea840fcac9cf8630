"""Concrete game objects: enemies, projectiles and map tiles."""

from __future__ import annotations

import logging
from typing import Any, Optional

from framekit.clock import TimeManager
from framekit.collider import Collider
from framekit.drawing import BrushType, PenType, draw_rect
from framekit.events import EventManager
from framekit.gameobject import GameObject
from framekit.resources import Texture
from framekit.vec2 import Vec2

log = logging.getLogger(__name__)

ENEMY_HP = 5
PROJECTILE_SPEED = 500.0
PLAYER_BULLET_NAME = "PlayerBullet"
ENEMY_NAME = "Enemy"


class Enemy(GameObject):
    """A box with hit points that dies after enough player bullets hit it."""

    def __init__(self, events: EventManager) -> None:
        super().__init__()
        self.events = events
        self.hp = ENEMY_HP
        self.add_component(Collider)

    def update(self) -> None:
        pass

    def render(self, surface: Any) -> None:
        draw_rect(surface, self.pos, self.size)
        self.component_render(surface)

    def enter_collision(self, other: Collider) -> None:
        log.debug("enemy collision enter")
        super().enter_collision(other)
        if other.owner.name == PLAYER_BULLET_NAME:
            self.hp -= 1
            if self.hp <= 0:
                self.events.delete_object(self)

    def exit_collision(self, other: Collider) -> None:
        log.debug("enemy collision exit")
        super().exit_collision(other)


class Projectile(GameObject):
    """A bullet that flies in a straight line and disappears off the top of the screen."""

    def __init__(
        self,
        events: EventManager,
        clock: TimeManager,
        texture: Optional[Texture] = None,
    ) -> None:
        super().__init__()
        self.events = events
        self.clock = clock
        self.texture = texture
        self.angle = 0.0
        self.direction = Vec2(1.0, 1.0)
        self.add_component(Collider).size = Vec2(20.0, 20.0)

    def set_dir(self, direction) -> None:
        """Set the flight direction; it is stored as a unit vector."""
        self.direction = Vec2(*direction).normalized()

    def update(self) -> None:
        step = PROJECTILE_SPEED * self.clock.dt
        self.pos = Vec2(
            self.pos.x + self.direction.x * step,
            self.pos.y + self.direction.y * step,
        )
        if self.pos.y < -self.size.y:
            self.events.delete_object(self)

    def render(self, surface: Any) -> None:
        texture = self.texture
        if texture is not None and texture.surface is not None:
            width, height = texture.width, texture.height
            dest = (int(self.pos.x - width // 2), int(self.pos.y - height // 2))
            surface.blit(texture.surface, dest)
        self.component_render(surface)

    def enter_collision(self, other: Collider) -> None:
        super().enter_collision(other)
        if other.owner.name == ENEMY_NAME:
            self.events.delete_object(self)


class Road(GameObject):
    """A walkable map tile drawn in blue."""

    def update(self) -> None:
        pass

    def render(self, surface: Any) -> None:
        draw_rect(surface, self.pos, self.size, PenType.BLUE, BrushType.BLUE)
        self.component_render(surface)


class Wall(GameObject):
    """A blocking map tile drawn in green."""

    def update(self) -> None:
        pass

    def render(self, surface: Any) -> None:
        draw_rect(surface, self.pos, self.size, PenType.GREEN, BrushType.GREEN)
        self.component_render(surface)