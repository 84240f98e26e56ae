# managers.py

from config import DEATH_LIMIT
from logging_utils import log_debug


class Session:
    """Lives, progress and the respawn anchor for one play session."""

    def __init__(self, death_limit=DEATH_LIMIT):
        self.death_limit = death_limit
        self.deaths = 0
        self.levels_won = 0
        self.anchor = None
        self.over = False

    @property
    def lives_left(self):
        return self.death_limit - self.deaths

    def record_death(self):
        self.deaths += 1
        if self.deaths >= self.death_limit:
            self.over = True

    def record_win(self):
        self.levels_won += 1

    def hud_lines(self):
        return (f"Lives left: {self.lives_left}", f"Levels won: {self.levels_won}")

    def game_over_message(self):
        return f"Game Over!\nYou passed {self.levels_won} levels."


class LevelManager:
    """Owns the active level and swaps it wholesale on every transition."""

    def __init__(self, generator):
        self.generator = generator
        self.level = None

    def load(self, index, anchor, bounds):
        log_debug(f"LevelManager.load index={index} anchor={anchor} bounds={tuple(bounds)}")
        self.level = self.generator.generate(index, anchor, bounds)
        return self.level

    def get_level(self):
        return self.level
