# ui.py
import pygame

from config import HUD_COLOR, GAME_OVER_COLOR, HUD_FONT_SIZE, GAME_OVER_FONT_SIZE
from renderer import draw_text


class Hud:
    """Lives / levels readout plus the terminal message."""

    def __init__(self):
        if not pygame.font.get_init():
            pygame.font.init()
        self.font = pygame.font.SysFont("Arial", HUD_FONT_SIZE)
        self.big_font = pygame.font.SysFont("Arial", GAME_OVER_FONT_SIZE, bold=True)

    def draw(self, surf, game):
        lives, levels = game.hud
        draw_text(surf, lives, 10, 10, self.font, HUD_COLOR)
        draw_text(surf, levels, 10, 30, self.font, HUD_COLOR)

        if game.game_over_text:
            x = game.bounds.width / 2 - 150
            y = game.bounds.height / 2 - 50
            draw_text(surf, game.game_over_text, x, y, self.big_font, GAME_OVER_COLOR)
