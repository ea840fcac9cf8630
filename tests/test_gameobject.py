import pytest

from framekit.collider import Collider
from framekit.component import Component
from framekit.gameobject import GameObject
from framekit.vec2 import Vec2


class _Thing(GameObject):
    def __init__(self, name=""):
        super().__init__(name)
        self.updates = 0

    def update(self):
        self.updates += 1

    def render(self, surface):
        self.component_render(surface)


class _Tracker(Component):
    def __init__(self):
        super().__init__()
        self.late = 0
        self.drawn = []

    def late_update(self):
        self.late += 1

    def render(self, surface):
        self.drawn.append(surface)


class _Other(Component):
    def late_update(self):
        pass

    def render(self, surface):
        pass


def test_game_object_is_abstract():
    with pytest.raises(TypeError):
        GameObject()


def test_defaults():
    obj = _Thing("Enemy")
    assert obj.name == "Enemy"
    assert obj.pos == Vec2(0, 0)
    assert obj.size == Vec2(0, 0)
    assert obj.is_dead is False


def test_set_dead():
    obj = _Thing()
    obj.pos = Vec2(2, 3)
    obj.set_dead()
    assert obj.is_dead is True
    assert obj.pos == Vec2(2, 3)


def test_add_component_sets_owner():
    obj = _Thing()
    comp = obj.add_component(_Tracker)
    collider = obj.add_component(Collider)
    assert comp.owner is obj
    assert collider.owner is obj
    assert obj.components == (comp, collider)
    obj.pos = Vec2(7, 8)
    obj.late_update()
    assert collider.late_pos == Vec2(7, 8)


def test_get_component_finds_by_type():
    obj = _Thing()
    obj.pos = Vec2(1, 1)
    tracker = obj.add_component(_Tracker)
    other = obj.add_component(_Other)
    obj.add_component(Collider)
    assert obj.get_component(_Tracker) is tracker
    assert obj.get_component(_Other) is other
    assert obj.get_component(Component) is tracker
    obj.late_update()
    assert obj.get_component(Collider).late_pos == Vec2(1, 1)


def test_get_component_missing_returns_none():
    obj = _Thing()
    obj.add_component(_Other)
    detached = Collider()
    assert detached.owner is None
    assert obj.get_component(_Tracker) is None
    assert obj.get_component(Collider) is None


def test_late_update_and_render_reach_components():
    obj = _Thing()
    comp = obj.add_component(_Tracker)
    obj.pos = Vec2(4, 5)
    obj.late_update()
    obj.render("surface")
    assert comp.late == 1
    assert comp.drawn == ["surface"]
    assert obj.pos == Vec2(4, 5)


def test_collision_hooks_default_to_nothing():
    obj = _Thing()
    other = Collider()
    obj.enter_collision(other)
    obj.stay_collision(other)
    obj.exit_collision(other)
    assert obj.is_dead is False
    assert obj.pos == Vec2(0, 0)