# game.py
# ──────────────────────────────────────────────────────────────
# Simulation core: one Game instance per play session.
# • update(controls) is the fixed-rate tick
# • the level generator runs at start-up and after every win
# • ten deaths end the session
# ──────────────────────────────────────────────────────────────

import random

from config import WIDTH, HEIGHT, SEED, RESPAWN_RESETS_VELOCITY
from entities import Bounds, Player, clamp
from level_generator import LevelGenerator
from logging_utils import log_debug
from managers import LevelManager, Session
import physics

PLAYING = "playing"
GAME_OVER = "gameover"


class Game:
    def __init__(self, bounds=None, rng=None, reset_velocity_on_respawn=RESPAWN_RESETS_VELOCITY):
        log_debug("Game.__init__ start")
        self.bounds = Bounds(*bounds) if bounds is not None else Bounds(WIDTH, HEIGHT)
        self.reset_velocity_on_respawn = reset_velocity_on_respawn

        # core state
        self.state = PLAYING
        self.session = Session()
        self.player = Player()
        generator = LevelGenerator(rng if rng is not None else random.Random(SEED))
        self.level_manager = LevelManager(generator)

        # readouts for the HUD collaborator
        self.hud = self.session.hud_lines()
        self.game_over_text = None

        self._start_level()

    @property
    def level(self):
        return self.level_manager.get_level()

    @property
    def is_over(self):
        return self.state == GAME_OVER

    # ──────────────────────────────────────────────────────
    # Level transitions
    def _start_level(self):
        level = self.level_manager.load(self.session.levels_won, self.session.anchor, self.bounds)
        self.session.anchor = level.spawn
        self.player.move_to(level.spawn)
        self.refresh_hud()

    def _win_level(self):
        self.session.record_win()
        log_debug(f"Game level won total={self.session.levels_won}")
        self._start_level()

    def _kill_player(self):
        self.session.record_death()
        self.player.respawn(self.session.anchor, reset_velocity=self.reset_velocity_on_respawn)
        log_debug(f"Game player died deaths={self.session.deaths} vy={self.player.vy}")

    def _enter_game_over(self):
        self.state = GAME_OVER
        self.game_over_text = self.session.game_over_message()
        log_debug(f"Game over levels={self.session.levels_won}")

    # ──────────────────────────────────────────────────────
    # Outside events
    def resize(self, width, height):
        """New world bounds; physics sees them next tick, generation next level."""
        self.bounds = Bounds(width, height)
        if self.session.anchor is not None:
            ax, ay = self.session.anchor
            self.session.anchor = (
                clamp(ax, 0, width - self.player.width),
                clamp(ay, 0, height - self.player.height),
            )
        log_debug(f"Game.resize bounds={tuple(self.bounds)} anchor={self.session.anchor}")

    def refresh_hud(self):
        self.hud = self.session.hud_lines()

    # ──────────────────────────────────────────────────────
    # Tick
    def update(self, controls):
        if self.state != PLAYING:
            return

        physics.tick(self.player, self.level.platforms, controls, self.bounds)

        player_rect = self.player.rect
        if self.level.goal.touches(player_rect):
            self._win_level()
        else:
            for spike in self.level.hazards:
                if spike.hits(player_rect):
                    self._kill_player()
                    break

        self.refresh_hud()
        if self.session.over:
            self._enter_game_over()
