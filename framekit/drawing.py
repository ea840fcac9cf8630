"""Layers, pen and brush palettes, and rectangle/ellipse drawing helpers."""

from __future__ import annotations

from enum import Enum, IntEnum
from typing import Optional

import pygame

from framekit.vec2 import Vec2

SCREEN_WIDTH = 1280
SCREEN_HEIGHT = 720
PI = 3.14159265

Color = tuple[int, int, int]

TRANSPARENT_KEY: Color = (255, 0, 255)
DEFAULT_PEN_COLOR: Color = (0, 0, 0)
DEFAULT_BRUSH_COLOR: Color = (255, 255, 255)


class Layer(IntEnum):
    """Render and collision layers; END is the number of layer slots."""

    DEFAULT = 0
    BACKGROUND = 1
    PLAYER = 2
    PROJECTILE = 3
    ENEMY = 4
    END = 30


class PenType(Enum):
    HOLLOW = 0
    RED = 1
    GREEN = 2
    BLUE = 3
    YELLOW = 4


class BrushType(Enum):
    HOLLOW = 0
    RED = 1
    GREEN = 2
    BLUE = 3
    YELLOW = 4


class EventType(Enum):
    CREATE_OBJECT = 0
    DELETE_OBJECT = 1
    SCENE_CHANGE = 2


_PEN_COLORS: dict[PenType, Optional[Color]] = {
    PenType.HOLLOW: None,
    PenType.RED: (255, 0, 0),
    PenType.GREEN: (0, 255, 0),
    PenType.BLUE: (0, 0, 255),
    PenType.YELLOW: (255, 255, 0),
}

_BRUSH_COLORS: dict[BrushType, Optional[Color]] = {
    BrushType.HOLLOW: None,
    BrushType.RED: (255, 167, 167),
    BrushType.GREEN: (134, 229, 134),
    BrushType.BLUE: (103, 153, 255),
    BrushType.YELLOW: (255, 187, 0),
}


def pen_color(pen: Optional[PenType]) -> Optional[Color]:
    """Outline colour of a pen; None for a hollow pen, black when no pen is chosen."""
    if pen is None:
        return DEFAULT_PEN_COLOR
    return _PEN_COLORS[pen]


def brush_color(brush: Optional[BrushType]) -> Optional[Color]:
    """Fill colour of a brush; None for a hollow brush, white when no brush is chosen."""
    if brush is None:
        return DEFAULT_BRUSH_COLOR
    return _BRUSH_COLORS[brush]


def rect_bounds(pos: Vec2, size: Vec2) -> tuple[int, int, int, int]:
    """(left, top, right, bottom) of a box centred on pos, truncated to integers."""
    half_w = size.x / 2
    half_h = size.y / 2
    return (
        int(pos.x - half_w),
        int(pos.y - half_h),
        int(pos.x + half_w),
        int(pos.y + half_h),
    )


def _shape_rect(pos: Vec2, size: Vec2) -> pygame.Rect:
    left, top, right, bottom = rect_bounds(pos, size)
    return pygame.Rect(left, top, right - left, bottom - top)


def draw_rect(
    surface: pygame.Surface,
    pos: Vec2,
    size: Vec2,
    pen: Optional[PenType] = None,
    brush: Optional[BrushType] = None,
) -> pygame.Rect:
    """Draw a rectangle centred on pos; returns the rectangle drawn."""
    rect = _shape_rect(pos, size)
    fill = brush_color(brush)
    outline = pen_color(pen)
    if fill is not None:
        pygame.draw.rect(surface, fill, rect)
    if outline is not None:
        pygame.draw.rect(surface, outline, rect, 1)
    return rect


def draw_ellipse(
    surface: pygame.Surface,
    pos: Vec2,
    size: Vec2,
    pen: Optional[PenType] = None,
    brush: Optional[BrushType] = None,
) -> pygame.Rect:
    """Draw an ellipse inscribed in the box centred on pos; returns its bounding box."""
    rect = _shape_rect(pos, size)
    fill = brush_color(brush)
    outline = pen_color(pen)
    if fill is not None:
        pygame.draw.ellipse(surface, fill, rect)
    if outline is not None:
        pygame.draw.ellipse(surface, outline, rect, 1)
    return rect