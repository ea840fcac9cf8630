import math

import pytest

from framekit.vec2 import Vec2


def test_components_are_floats():
    v = Vec2(3, 4)
    assert isinstance(v.x, float) and v.x == 3.0
    assert tuple(v) == (3.0, 4.0)


def test_default_is_origin():
    assert Vec2() == Vec2(0.0, 0.0)


def test_add_then_sub_round_trip():
    a = Vec2(1.5, -2.0)
    b = Vec2(7.25, 3.0)
    assert a + b - b == a
    assert a + b == b + a


def test_add_pinned_value():
    assert Vec2(1, 2) + Vec2(3, 4) == Vec2(4, 6)


def test_componentwise_mul_and_div_round_trip():
    a = Vec2(3.0, -5.0)
    b = Vec2(2.0, 4.0)
    assert (a * b) / b == a


def test_scalar_mul_both_sides():
    a = Vec2(1.5, 2.5)
    assert a * 2 == 2 * a
    assert a * 2 == a + a


def test_division_by_zero_component_raises():
    with pytest.raises(ZeroDivisionError):
        Vec2(1, 1) / Vec2(0, 1)
    with pytest.raises(ZeroDivisionError):
        Vec2(1, 1) / Vec2(1, 0)


def test_length_pinned():
    assert Vec2(3, 4).length() == 5.0


def test_length_squared_matches_dot():
    a = Vec2(-2.5, 6.0)
    assert a.length_squared() == a.dot(a)
    assert math.isclose(a.length() ** 2, a.length_squared())


def test_normalized_has_unit_length_and_same_direction():
    a = Vec2(10.0, -3.0)
    n = a.normalized()
    assert math.isclose(n.length(), 1.0)
    assert math.isclose(a.cross(n), 0.0, abs_tol=1e-12)
    assert a.dot(n) > 0


def test_normalized_zero_vector_unchanged():
    assert Vec2(0, 0).normalized() == Vec2(0, 0)


def test_cross_antisymmetric():
    a = Vec2(1.0, 2.0)
    b = Vec2(-3.0, 0.5)
    assert a.cross(b) == -b.cross(a)
    assert a.cross(a) == 0.0


def test_frozen():
    v = Vec2(1, 2)
    with pytest.raises(AttributeError):
        v.x = 5.0
    assert v == Vec2(1, 2)
    assert v.x == 1.0