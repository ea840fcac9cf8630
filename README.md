# framekit

A small 2D game framework built on pygame. A game is organised into
scenes that hold objects on numbered layers. Objects carry pluggable
components (box colliders, animators), collisions are checked between
chosen layer pairs, and every frame runs the same cycle: update,
late update, collision checks, render through a back buffer, then
apply queued events.

## Installing

```
pip install .
```

For running the tests:

```
pip install .[test]
pytest
```

## Running the demo

```
framekit
```

This opens a 1280x720 window and runs the frame loop until the window
is closed. About once a second the window title is replaced with the
frame rate, the last frame time and the mouse position.

Options:

- `--scene game` (default): 100 enemy boxes at random positions.
- `--scene map`: a 5x5 tile map of blue road tiles and green wall tiles.
- `--frames N`: stop after N frames.
- `--root DIR`: directory that holds the `Resource/` folder for
  textures and sounds (default: the current directory).

## Building blocks

- `framekit.vec2.Vec2`: an immutable 2D vector with `+`, `-`, `*`
  (component-wise or by a number), `/` (component-wise; a zero
  component raises `ZeroDivisionError`), `length()`,
  `length_squared()`, `normalized()`, `dot()` and `cross()`.
- `framekit.drawing`: the `Layer`, `PenType`, `BrushType` and
  `EventType` enumerations, `pen_color` / `brush_color`, and
  `rect_bounds`, `draw_rect` and `draw_ellipse` for shapes centred on a
  position. `SCREEN_WIDTH` and `SCREEN_HEIGHT` give the screen size.
- `framekit.clock.TimeManager`: measures the frame time (`dt`) and
  the frame rate (`fps`, recomputed once a second); `status_text`
  formats them for a title bar. The counter it reads can be injected.
- `framekit.keyboard.InputManager`: tracks each `KeyType` through the
  `KeyState` values NONE, DOWN, PRESS and UP. `update` takes the set of
  held keys directly; `poll` reads them from pygame. Losing focus
  resets every key to NONE.
- `framekit.component.Component` and `framekit.gameobject.GameObject`:
  objects with a name, position, size, a dead flag and a list of
  components (`add_component`, `get_component`). A game object keeps
  the colliders it is currently touching in `contacts`.
- `framekit.collider.Collider`: a box (30x30 by default) that follows
  its owner plus an offset and forwards enter, stay and exit collisions
  to it.
- `framekit.collision.CollisionManager`: `check_layer` toggles
  checking between two layers, `is_checked` reports it, and
  `update(scene)` sends enter / stay / exit callbacks. The module-level
  `is_collision` tests two colliders for overlap.
- `framekit.events.EventManager`: `delete_object` queues an object;
  the next `update` marks it dead, and scenes drop dead objects when
  they render.
- `framekit.scene.Scene`: abstract base holding objects by layer, with
  `init`, `update`, `late_update`, `render`, `release`, `add_object`
  and `layer_objects`.
- `framekit.animation`: sprite-sheet animations (`AnimFrame`,
  `Animation`) and the `Animator` component that plays them once, a
  set number of times, or repeating.
- `framekit.resources.ResourceManager`: loads textures and sounds once
  by key from `<root>/Resource`, and plays sounds on the `BGM`
  (looping) and `EFFECT` channels of `SoundChannel`, with `stop`,
  `volume` and `pause`. Missing files raise `FileNotFoundError`.
- `framekit.entities`: ready-made `Enemy` (5 hit points, lost to
  objects named `PlayerBullet`), `Projectile` (flies at 500 units per
  second and is deleted off the top of the screen or on hitting an
  `Enemy`), `Road` and `Wall`.
- `framekit.scenes`: `GameScene` and the tile-map `MapScene`.
- `framekit.app.Core`: the per-frame loop tying everything together;
  `framekit.app.main` is the `framekit` command.

## A minimal scene

```python
from framekit.collision import CollisionManager
from framekit.drawing import Layer
from framekit.entities import Wall
from framekit.scene import Scene
from framekit.vec2 import Vec2


class Demo(Scene):
    def init(self):
        wall = Wall("Wall")
        wall.pos = Vec2(100, 100)
        wall.size = Vec2(30, 30)
        self.add_object(wall, Layer.BACKGROUND)


collisions = CollisionManager()
scene = Demo(collisions)
scene.init()
```

## What it does not do

- There is no player-controlled object and no title scene. The demo
  scenes only draw their objects; keys are read every frame but
  nothing in them reacts to input, and neither demo scene turns on any
  collision layer pair.
- There is no scene switching: `Core` runs the one scene it is given.
- The demo loads no textures and plays no sounds; `ResourceManager` is
  there for games built on the framework. If the audio mixer cannot
  start, sounds are registered but stay silent.