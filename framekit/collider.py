"""Axis-aligned box collider component."""

from __future__ import annotations

import itertools
from typing import Any

from framekit.component import Component
from framekit.drawing import BrushType, PenType, draw_rect
from framekit.vec2 import Vec2

_ids = itertools.count()


class Collider(Component):
    """A box that follows its owner, offset from it, and reports collisions."""

    def __init__(self) -> None:
        super().__init__()
        self.id: int = next(_ids)
        self.size = Vec2(30.0, 30.0)
        self.offset_pos = Vec2(0.0, 0.0)
        self.late_pos = Vec2(0.0, 0.0)
        self.show_debug = False

    def late_update(self) -> None:
        self.late_pos = self.owner.pos + self.offset_pos

    def render(self, surface: Any) -> None:
        pen = PenType.RED if self.show_debug else PenType.GREEN
        draw_rect(surface, self.late_pos, self.size, pen, BrushType.HOLLOW)

    def enter_collision(self, other: Collider) -> None:
        self.show_debug = True
        self.owner.enter_collision(other)

    def stay_collision(self, other: Collider) -> None:
        self.owner.stay_collision(other)

    def exit_collision(self, other: Collider) -> None:
        self.show_debug = False
        self.owner.exit_collision(other)