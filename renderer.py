# renderer.py
# Immediate-mode drawing: every frame clears and redraws, so dropping an
# object from the level is all it takes to remove it from the screen.

import pygame

from config import BACKGROUND_COLOR
from entities_utils import SHAPE_RECT, SHAPE_ELLIPSE, SHAPE_POLYGON


def clear(surf, color=BACKGROUND_COLOR):
    surf.fill(color)


def draw_rect(surf, x, y, w, h, color):
    pygame.draw.rect(surf, color, pygame.Rect(round(x), round(y), round(w), round(h)))


def draw_ellipse(surf, x, y, w, h, color):
    pygame.draw.ellipse(surf, color, pygame.Rect(round(x), round(y), round(w), round(h)))


def draw_polygon(surf, points, color):
    pygame.draw.polygon(surf, color, [(round(px), round(py)) for px, py in points])


def draw_text(surf, content, x, y, font, color):
    """Blit ``content`` line by line starting at (x, y)."""
    for i, line in enumerate(content.split("\n")):
        txt = font.render(line, True, color)
        surf.blit(txt, (x, y + i * font.get_linesize()))


def draw_entity(surf, entity):
    shape = entity.shape
    if shape == SHAPE_RECT:
        draw_rect(surf, *entity.rect, entity.color)
    elif shape == SHAPE_ELLIPSE:
        draw_ellipse(surf, *entity.rect, entity.color)
    elif shape == SHAPE_POLYGON:
        draw_polygon(surf, entity.points, entity.color)
    else:
        raise ValueError(f"no drawer for shape {shape!r}")


def render_world(surf, game, hud=None):
    clear(surf)
    for entity in game.level.entities:
        draw_entity(surf, entity)
    draw_entity(surf, game.player)
    if hud is not None:
        hud.draw(surf, game)
