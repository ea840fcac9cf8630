"""Sprite-sheet animations and the animator component that plays them."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Optional

import pygame

from framekit.component import Component
from framekit.vec2 import Vec2

if TYPE_CHECKING:
    from framekit.resources import Texture


@dataclass
class AnimFrame:
    """One frame: the source rectangle on the sheet, how long it shows, and its offset."""

    left_top: Vec2
    slice: Vec2
    duration: float
    offset: Vec2 = field(default_factory=Vec2)


class Animation:
    """A named sequence of frames cut from one texture."""

    def __init__(self, name: str = "", animator: Optional[Animator] = None) -> None:
        self.name = name
        self.animator = animator
        self.current_frame = 0
        self.acc_time = 0.0
        self.texture: Optional[Texture] = None
        self.frames: list[AnimFrame] = []
        self.rotate = False

    @property
    def max_frame(self) -> int:
        return len(self.frames)

    def create(
        self,
        texture: Texture,
        left_top: Vec2,
        slice_size: Vec2,
        step: Vec2,
        frame_count: int,
        duration: float,
        rotate: bool = False,
    ) -> None:
        """Cut frame_count frames from the texture, each step further along the sheet."""
        self.texture = texture
        self.rotate = rotate
        self.frames.extend(
            AnimFrame(left_top + step * i, slice_size, duration)
            for i in range(frame_count)
        )

    def update(self, dt: float) -> None:
        """Advance by dt seconds, moving at most one frame forward."""
        animator = self.animator
        if animator.repeat_count <= 0:
            self.current_frame = len(self.frames) - 1
            return

        self.acc_time += dt
        frame = self.frames[self.current_frame]
        if self.acc_time >= frame.duration:
            self.acc_time -= frame.duration
            self.current_frame += 1
            if self.current_frame >= len(self.frames):
                if not animator.repeat:
                    animator.repeat_count -= 1
                self.current_frame = 0
                self.acc_time = 0.0

    def render(self, surface: Any) -> None:
        """Draw the current frame centred on the owner's position plus the frame offset."""
        frame = self.frames[self.current_frame]
        pos = self.animator.owner.pos + frame.offset
        dest = (
            int(pos.x - frame.slice.x / 2),
            int(pos.y - frame.slice.y / 2),
        )
        area = pygame.Rect(
            int(frame.left_top.x),
            int(frame.left_top.y),
            int(frame.slice.x),
            int(frame.slice.y),
        )
        surface.blit(self.texture.surface, dest, area)

    def set_frame_offset(self, index: int, offset: Vec2) -> None:
        self.frames[index].offset = offset


class Animator(Component):
    """Component that owns named animations and plays one of them at a time."""

    def __init__(self, clock: Any = None) -> None:
        super().__init__()
        self.clock = clock
        self._animations: dict[str, Animation] = {}
        self.current: Optional[Animation] = None
        self.repeat = False
        self.repeat_count = 0

    @property
    def animations(self) -> dict[str, Animation]:
        return dict(self._animations)

    def create_animation(
        self,
        name: str,
        texture: Texture,
        left_top: Vec2,
        slice_size: Vec2,
        step: Vec2,
        frame_count: int,
        duration: float,
        rotate: bool = False,
    ) -> Animation:
        """Create an animation under name; an existing one of that name is kept as is."""
        existing = self.find_animation(name)
        if existing is not None:
            return existing
        animation = Animation(name, self)
        animation.create(texture, left_top, slice_size, step, frame_count, duration, rotate)
        self._animations[name] = animation
        return animation

    def find_animation(self, name: str) -> Optional[Animation]:
        return self._animations.get(name)

    def play_animation(self, name: str, repeat: bool, repeat_count: int = 1) -> None:
        """Start the named animation from its first frame."""
        animation = self.find_animation(name)
        if animation is None:
            raise KeyError(f"no animation named {name!r}")
        self.current = animation
        animation.current_frame = 0
        self.repeat = repeat
        self.repeat_count = repeat_count

    def stop_animation(self) -> None:
        self.current = None

    def late_update(self) -> None:
        if self.current is not None:
            dt = self.clock.dt if self.clock is not None else 0.0
            self.current.update(dt)

    def render(self, surface: Any) -> None:
        if self.current is not None:
            self.current.render(surface)