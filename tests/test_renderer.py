import random
import types
import unittest

import pygame

import renderer
from controls import IDLE
from config import BACKGROUND_COLOR, GOAL_COLOR, PLATFORM_COLOR, PLAYER_COLOR, SPIKE_COLOR
from entities import Goal, Platform, Player, Spike
from game import Game
from tests.test_game import install_level
from ui import Hud


def color_at(surf, pos):
    return tuple(surf.get_at(pos))[:3]


def region_has_ink(surf, left, top, width, height, background=BACKGROUND_COLOR):
    for x in range(left, left + width):
        for y in range(top, top + height):
            if color_at(surf, (x, y)) != background:
                return True
    return False


class ShapeDispatchTests(unittest.TestCase):
    def setUp(self):
        self.surf = pygame.Surface((100, 100))
        renderer.clear(self.surf)

    def test_clear_fills_background(self):
        self.assertEqual(color_at(self.surf, (50, 50)), BACKGROUND_COLOR)

    def test_platform_is_a_rect(self):
        renderer.draw_entity(self.surf, Platform(10, 10, 20))
        self.assertEqual(color_at(self.surf, (15, 14)), PLATFORM_COLOR)
        self.assertEqual(color_at(self.surf, (15, 25)), BACKGROUND_COLOR)

    def test_goal_is_an_ellipse(self):
        renderer.draw_entity(self.surf, Goal(40, 40))
        self.assertEqual(color_at(self.surf, (55, 55)), GOAL_COLOR)
        self.assertEqual(color_at(self.surf, (41, 41)), BACKGROUND_COLOR)

    def test_spike_is_a_triangle(self):
        renderer.draw_entity(self.surf, Spike.on_surface(10, 90))
        self.assertEqual(color_at(self.surf, (20, 88)), SPIKE_COLOR)
        self.assertEqual(color_at(self.surf, (11, 81)), BACKGROUND_COLOR)

    def test_player_is_a_rect(self):
        renderer.draw_entity(self.surf, Player((60, 5)))
        self.assertEqual(color_at(self.surf, (65, 10)), PLAYER_COLOR)

    def test_unknown_shape(self):
        with self.assertRaises(ValueError):
            renderer.draw_entity(self.surf, types.SimpleNamespace(shape="hexagon"))


class WorldRenderTests(unittest.TestCase):
    def setUp(self):
        self.game = Game(rng=random.Random(0))
        self.surf = pygame.Surface((1000, 500))

    def test_bootstrap_frame(self):
        renderer.render_world(self.surf, self.game)
        self.assertEqual(color_at(self.surf, (510, 490)), PLAYER_COLOR)
        self.assertEqual(color_at(self.surf, (415, 465)), GOAL_COLOR)
        self.assertEqual(color_at(self.surf, (990, 10)), BACKGROUND_COLOR)

    def test_hud_lines_are_drawn(self):
        renderer.render_world(self.surf, self.game, Hud())
        self.assertTrue(region_has_ink(self.surf, 10, 10, 150, 40))

    def test_game_over_message_is_drawn(self):
        install_level(self.game, hazards=[Spike.on_surface(495, 500)])
        for _ in range(10):
            self.game.update(IDLE)
        self.assertTrue(self.game.is_over)

        renderer.render_world(self.surf, self.game, Hud())
        self.assertTrue(region_has_ink(self.surf, 350, 200, 300, 40))


class TextTests(unittest.TestCase):
    def test_multiline_text_stacks_lines(self):
        pygame.font.init()
        font = pygame.font.Font(None, 24)
        surf = pygame.Surface((200, 100))
        renderer.clear(surf)
        renderer.draw_text(surf, "A\nB", 5, 5, font, (0, 0, 0))
        second_line = 5 + font.get_linesize()
        self.assertTrue(region_has_ink(surf, 5, second_line, 30, font.get_height()))


if __name__ == "__main__":
    unittest.main()
