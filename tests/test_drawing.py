import pygame
import pytest

from framekit.drawing import (
    SCREEN_HEIGHT,
    SCREEN_WIDTH,
    BrushType,
    Layer,
    PenType,
    brush_color,
    draw_ellipse,
    draw_rect,
    pen_color,
    rect_bounds,
)
from framekit.vec2 import Vec2

BACKGROUND = (10, 20, 30)


@pytest.fixture
def surface():
    surf = pygame.Surface((50, 50))
    surf.fill(BACKGROUND)
    return surf


def rgb(surface, point):
    return tuple(surface.get_at(point))[:3]


def test_screen_sized_rect_covers_screen():
    bounds = rect_bounds(
        Vec2(SCREEN_WIDTH / 2, SCREEN_HEIGHT / 2), Vec2(SCREEN_WIDTH, SCREEN_HEIGHT)
    )
    assert tuple(bounds) == (0, 0, 1280, 720)


def test_layer_slots():
    assert Layer(4) is Layer.ENEMY
    assert Layer(30) is Layer.END
    assert Layer.DEFAULT < Layer.ENEMY < Layer.END


def test_palette_values():
    assert pen_color(PenType.RED) == (255, 0, 0)
    assert brush_color(BrushType.YELLOW) == (255, 187, 0)
    assert pen_color(PenType.HOLLOW) is None
    assert brush_color(BrushType.HOLLOW) is None


def test_defaults_when_nothing_selected():
    assert pen_color(None) == (0, 0, 0)
    assert brush_color(None) == (255, 255, 255)


def test_rect_bounds_centred():
    pos = Vec2(100, 50)
    size = Vec2(30, 20)
    left, top, right, bottom = rect_bounds(pos, size)
    assert right - left == 30
    assert bottom - top == 20
    assert (left + right) / 2 == pos.x
    assert (top + bottom) / 2 == pos.y


def test_rect_bounds_truncates_toward_zero():
    left, top, right, bottom = rect_bounds(Vec2(0.5, 0.5), Vec2(3, 3))
    assert (left, top) == (-1, -1)
    assert (right, bottom) == (2, 2)


def test_draw_rect_fills_and_outlines(surface):
    rect = draw_rect(surface, Vec2(25, 25), Vec2(20, 20), PenType.RED, BrushType.GREEN)
    assert rgb(surface, rect.topleft) == pen_color(PenType.RED)
    assert rgb(surface, rect.center) == brush_color(BrushType.GREEN)
    assert rgb(surface, (rect.left - 1, rect.top - 1)) == BACKGROUND


def test_draw_rect_hollow_brush_leaves_inside(surface):
    rect = draw_rect(surface, Vec2(25, 25), Vec2(20, 20), PenType.BLUE, BrushType.HOLLOW)
    assert rgb(surface, rect.center) == BACKGROUND
    assert rgb(surface, rect.topleft) == pen_color(PenType.BLUE)


def test_draw_rect_hollow_pen_fills_border(surface):
    rect = draw_rect(surface, Vec2(25, 25), Vec2(20, 20), PenType.HOLLOW, BrushType.BLUE)
    assert rgb(surface, rect.topleft) == brush_color(BrushType.BLUE)


def test_draw_ellipse_corner_untouched(surface):
    rect = draw_ellipse(surface, Vec2(25, 25), Vec2(30, 30), PenType.GREEN, BrushType.RED)
    assert rgb(surface, rect.center) == brush_color(BrushType.RED)
    assert rgb(surface, rect.topleft) == BACKGROUND