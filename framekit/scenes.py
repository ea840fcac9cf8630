"""Ready-made scenes: a field of enemies and a small tile map."""

from __future__ import annotations

import random
from typing import Optional

from framekit.collision import CollisionManager
from framekit.drawing import SCREEN_HEIGHT, SCREEN_WIDTH, Layer
from framekit.entities import Enemy, Road, Wall
from framekit.events import EventManager
from framekit.scene import Scene
from framekit.vec2 import Vec2

ENEMY_COUNT = 100
ENEMY_SIZE = Vec2(100, 100)

MAP_ROWS = (
    "10000",
    "11100",
    "10001",
    "10111",
    "11110",
)
TILE_SIZE = 30


class GameScene(Scene):
    """A scene scattered with enemies at random positions on the screen."""

    def __init__(
        self,
        collision_manager: Optional[CollisionManager] = None,
        events: Optional[EventManager] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        super().__init__(collision_manager)
        self.events = events if events is not None else EventManager()
        self.rng = rng if rng is not None else random.Random()

    def init(self) -> None:
        for _ in range(ENEMY_COUNT):
            enemy = Enemy(self.events)
            enemy.pos = Vec2(
                self.rng.randrange(SCREEN_WIDTH), self.rng.randrange(SCREEN_HEIGHT)
            )
            enemy.size = ENEMY_SIZE
            self.add_object(enemy, Layer.ENEMY)


class MapScene(Scene):
    """A tile map where '1' is road and anything else is wall."""

    def init(self) -> None:
        half = TILE_SIZE // 2
        for y, row in enumerate(MAP_ROWS):
            for x, cell in enumerate(row):
                tile = Road("Road") if cell == "1" else Wall("Wall")
                tile.pos = Vec2(half + x * TILE_SIZE, half + y * TILE_SIZE)
                tile.size = Vec2(TILE_SIZE, TILE_SIZE)
                self.add_object(tile, Layer.BACKGROUND)