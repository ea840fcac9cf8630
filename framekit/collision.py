"""Layer-pair collision detection with enter/stay/exit tracking."""

from __future__ import annotations

from typing import Any, Optional

from framekit.collider import Collider
from framekit.drawing import Layer, rect_bounds


def is_collision(left: Collider, right: Collider) -> bool:
    """True when the two colliders' integer boxes overlap with non-empty area."""
    l_left, l_top, l_right, l_bottom = rect_bounds(left.late_pos, left.size)
    r_left, r_top, r_right, r_bottom = rect_bounds(right.late_pos, right.size)
    if l_left >= l_right or l_top >= l_bottom:
        return False
    if r_left >= r_right or r_top >= r_bottom:
        return False
    return max(l_left, r_left) < min(l_right, r_right) and max(l_top, r_top) < min(
        l_bottom, r_bottom
    )


class CollisionManager:
    """Checks colliders in enabled layer pairs and dispatches collision callbacks."""

    def __init__(self) -> None:
        self._layers = [0] * int(Layer.END)
        self._contacts: dict[tuple[int, int], bool] = {}

    @staticmethod
    def _ordered(left: int, right: int) -> tuple[int, int]:
        row, col = int(left), int(right)
        return (row, col) if row <= col else (col, row)

    def check_layer(self, left: int, right: int) -> None:
        """Toggle collision checking between two layers."""
        row, col = self._ordered(left, right)
        self._layers[row] ^= 1 << col

    def is_checked(self, left: int, right: int) -> bool:
        row, col = self._ordered(left, right)
        return bool(self._layers[row] & (1 << col))

    def check_reset(self) -> None:
        self._layers = [0] * int(Layer.END)

    def update(self, scene: Optional[Any]) -> None:
        """Run collision checks on every enabled layer pair of the scene."""
        if scene is None:
            return
        for row in range(int(Layer.END)):
            for col in range(row, int(Layer.END)):
                if self._layers[row] & (1 << col):
                    self._layer_update(scene, row, col)

    def _layer_update(self, scene: Any, left: int, right: int) -> None:
        left_objs = scene.layer_objects(left)
        right_objs = scene.layer_objects(right)
        for left_obj in left_objs:
            left_col = left_obj.get_component(Collider)
            if left_col is None:
                continue
            for right_obj in right_objs:
                right_col = right_obj.get_component(Collider)
                if right_col is None or left_obj is right_obj:
                    continue

                key = (left_col.id, right_col.id)
                was_colliding = self._contacts.setdefault(key, False)
                any_dead = left_obj.is_dead or right_obj.is_dead

                if is_collision(left_col, right_col):
                    if was_colliding:
                        if any_dead:
                            left_col.exit_collision(right_col)
                            right_col.exit_collision(left_col)
                            self._contacts[key] = False
                        else:
                            left_col.stay_collision(right_col)
                            right_col.stay_collision(left_col)
                    elif not any_dead:
                        left_col.enter_collision(right_col)
                        right_col.enter_collision(left_col)
                        self._contacts[key] = True
                elif was_colliding:
                    left_col.exit_collision(right_col)
                    right_col.exit_collision(left_col)
                    self._contacts[key] = False