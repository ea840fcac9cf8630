"""The game core and the command that opens a window and runs it."""

from __future__ import annotations

import argparse
import os
from typing import Optional, Sequence

import pygame

from framekit.clock import TimeManager
from framekit.collision import CollisionManager
from framekit.drawing import SCREEN_HEIGHT, SCREEN_WIDTH
from framekit.events import EventManager
from framekit.keyboard import InputManager
from framekit.resources import ResourceManager
from framekit.scene import Scene
from framekit.scenes import GameScene, MapScene

WINDOW_TITLE = "framekit"
CLEAR_COLOR = (255, 255, 255)


class Core:
    """Runs one frame at a time: update, render through a back buffer, apply events."""

    def __init__(
        self,
        surface: pygame.Surface,
        scene: Scene,
        clock: TimeManager,
        inputs: InputManager,
        collisions: CollisionManager,
        events: EventManager,
    ) -> None:
        self.surface = surface
        self.scene = scene
        self.clock = clock
        self.inputs = inputs
        self.collisions = collisions
        self.events = events
        self.back_buffer = pygame.Surface(surface.get_size())
        self.title: Optional[str] = None
        self.clock.init()

    def game_loop(self) -> None:
        self.main_update()
        self.main_render()
        self.events.update()

    def main_update(self) -> None:
        if self.clock.update():
            self.title = self.clock.status_text(self.inputs.mouse_pos)
            if pygame.display.get_init():
                pygame.display.set_caption(self.title)
        self.inputs.poll()
        self.scene.update()
        self.scene.late_update()
        self.collisions.update(self.scene)

    def main_render(self) -> None:
        self.back_buffer.fill(CLEAR_COLOR)
        self.scene.render(self.back_buffer)
        self.surface.blit(self.back_buffer, (0, 0))
        if pygame.display.get_init() and self.surface is pygame.display.get_surface():
            pygame.display.flip()

    def clean_up(self) -> None:
        self.scene.release()


def _build_scene(
    name: str, collisions: CollisionManager, events: EventManager
) -> Scene:
    if name == "map":
        return MapScene(collisions)
    return GameScene(collisions, events)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Open the game window and run frames until it is closed."""
    parser = argparse.ArgumentParser(prog="framekit", description="Run the game.")
    parser.add_argument("--scene", choices=("game", "map"), default="game")
    parser.add_argument("--frames", type=int, default=None, help="stop after N frames")
    parser.add_argument("--root", default=None, help="directory holding Resource/")
    args = parser.parse_args(argv)

    os.environ.setdefault("SDL_VIDEO_CENTERED", "1")
    pygame.display.init()
    try:
        surface = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT))
        pygame.display.set_caption(WINDOW_TITLE)
        resources = ResourceManager(args.root)
        collisions = CollisionManager()
        events = EventManager()
        scene = _build_scene(args.scene, collisions, events)
        scene.init()
        core = Core(surface, scene, TimeManager(), InputManager(), collisions, events)

        frames = 0
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
            if not running:
                break
            core.game_loop()
            frames += 1
            if args.frames is not None and frames >= args.frames:
                break

        core.clean_up()
        resources.release()
    finally:
        pygame.display.quit()
    return 0