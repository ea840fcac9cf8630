import random

from framekit.collision import CollisionManager
from framekit.drawing import SCREEN_HEIGHT, SCREEN_WIDTH, Layer
from framekit.entities import Enemy, Road, Wall
from framekit.events import EventManager
from framekit.scenes import MAP_ROWS, GameScene, MapScene
from framekit.vec2 import Vec2


def test_game_scene_spawns_hundred_enemies():
    scene = GameScene(CollisionManager(), EventManager(), random.Random(7))
    scene.init()
    enemies = scene.layer_objects(Layer.ENEMY)
    assert len(enemies) == 100
    assert all(isinstance(e, Enemy) for e in enemies)
    assert all(e.size == Vec2(100, 100) for e in enemies)


def test_game_scene_positions_on_screen():
    scene = GameScene(rng=random.Random(3))
    scene.init()
    for enemy in scene.layer_objects(Layer.ENEMY):
        assert 0 <= enemy.pos.x < SCREEN_WIDTH
        assert 0 <= enemy.pos.y < SCREEN_HEIGHT
        assert enemy.pos.x == int(enemy.pos.x)


def test_game_scene_is_deterministic_for_seed():
    first = GameScene(rng=random.Random(11))
    second = GameScene(rng=random.Random(11))
    first.init()
    second.init()
    assert [e.pos for e in first.layer_objects(Layer.ENEMY)] == [
        e.pos for e in second.layer_objects(Layer.ENEMY)
    ]


def test_game_scene_enemies_share_event_manager():
    events = EventManager()
    scene = GameScene(events=events, rng=random.Random(1))
    scene.init()
    assert all(e.events is events for e in scene.layer_objects(Layer.ENEMY))


def test_map_scene_tiles_follow_map():
    scene = MapScene()
    scene.init()
    tiles = scene.layer_objects(Layer.BACKGROUND)
    cells = "".join(MAP_ROWS)
    assert len(tiles) == len(cells)
    for tile, cell in zip(tiles, cells):
        if cell == "1":
            assert isinstance(tile, Road) and tile.name == "Road"
        else:
            assert isinstance(tile, Wall) and tile.name == "Wall"


def test_map_scene_first_tile_geometry():
    scene = MapScene()
    scene.init()
    first = scene.layer_objects(Layer.BACKGROUND)[0]
    assert first.pos == Vec2(15, 15)
    assert first.size == Vec2(30, 30)


def test_map_scene_tiles_adjacent():
    scene = MapScene()
    scene.init()
    tiles = scene.layer_objects(Layer.BACKGROUND)
    width = len(MAP_ROWS[0])
    assert tiles[1].pos - tiles[0].pos == Vec2(tiles[0].size.x, 0)
    assert tiles[width].pos - tiles[0].pos == Vec2(0, tiles[0].size.y)


def test_release_empties_scene():
    scene = MapScene()
    scene.init()
    scene.release()
    assert scene.layer_objects(Layer.BACKGROUND) == ()