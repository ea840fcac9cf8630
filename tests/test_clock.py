import pytest

from framekit.clock import TimeManager


def make_clock(readings):
    values = iter(readings)
    return TimeManager(lambda: next(values))


def test_delta_time_between_updates():
    clock = make_clock([0.0, 0.25, 0.75])
    clock.init()
    clock.update()
    assert clock.dt == 0.25
    clock.update()
    assert clock.dt == 0.5


def test_fps_computed_after_one_second():
    clock = make_clock([0.0, 0.5, 1.0])
    clock.init()
    assert clock.update() is False
    assert clock.fps == 0
    assert clock.update() is True
    assert clock.fps == 2


def test_fps_window_resets():
    clock = make_clock([0.0, 1.0, 1.5, 2.0, 2.25])
    clock.init()
    assert clock.update() is True
    assert clock.fps == 1
    assert clock.update() is False
    assert clock.update() is True
    assert clock.fps == 2
    assert clock.update() is False
    assert clock.fps == 2


def test_status_text_format():
    clock = make_clock([0.0, 0.5])
    clock.init()
    clock.update()
    assert clock.status_text((3, 4)) == "FPS: 0, DT: 0.500000, Mouse: (3, 4)"


def test_counter_is_consulted_each_update():
    clock = make_clock([0.0])
    clock.init()
    with pytest.raises(StopIteration):
        clock.update()