# game_loop.py

import random

import pygame

from config import WIDTH, HEIGHT, TITLE, SEED, settings_data
from controls import HeldKeys
from game import Game
from logging_utils import log_debug
from renderer import render_world
from ui import Hud


def process_events(game, keys):
    for event in pygame.event.get():
        if event.type == pygame.QUIT:
            return False
        if event.type == pygame.VIDEORESIZE:
            game.resize(event.w, event.h)
        elif event.type == pygame.WINDOWFOCUSLOST:
            keys.release_all()
        else:
            keys.handle_event(event)
    return True


def update_game(game, keys):
    game.update(keys.sample())


def render_game(game, screen, hud):
    render_world(screen, game, hud)
    pygame.display.flip()


def run_game(seed=SEED):
    pygame.init()
    try:
        clock = pygame.time.Clock()
        screen = pygame.display.set_mode((WIDTH, HEIGHT), pygame.RESIZABLE)
        pygame.display.set_caption(TITLE)
        game = Game(rng=random.Random(seed))
        hud = Hud()
        keys = HeldKeys()
        running = True
        log_debug(f"run_game start seed={seed}")

        while running:
            # Re-read FPS each frame
            clock.tick(settings_data["FPS"])
            running = process_events(game, keys)
            update_game(game, keys)
            render_game(game, screen, hud)

        log_debug(f"run_game stop levels={game.session.levels_won} deaths={game.session.deaths}")
    finally:
        pygame.quit()


def main():
    run_game()


if __name__ == "__main__":
    main()
