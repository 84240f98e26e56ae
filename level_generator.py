# level_generator.py

import random
from dataclasses import dataclass
from typing import Optional, Tuple

from config import (
    PLAYER_WIDTH, PLAYER_HEIGHT,
    GOAL_MIN_DISTANCE, BOOTSTRAP_GOAL_OFFSET_X, BOOTSTRAP_GOAL_OFFSET_Y,
    BASE_PLATFORM_WIDTH, PATH_PLATFORM_WIDTH, PATH_PLATFORM_COUNT, PLATFORM_HEIGHT,
    SPAWN_EXCLUSION_X, SPAWN_EXCLUSION_Y,
    SAFE_PLATFORM_MIN, SAFE_PLATFORM_MAX, SAFE_PLATFORM_SPREAD_X,
    SAFE_PLATFORM_DROP_MIN, SAFE_PLATFORM_DROP_MAX,
    SPIKE_CHANCE, SPIKE_OFFSET_MIN, SPIKE_OFFSET_MAX,
    MAX_SAMPLE_ATTEMPTS
)
from entities_terrain import Platform, Spike, Goal
from entities_utils import (
    Bounds, SamplingExhausted, clamp, distance, uniform, randint, sample_until
)
from logging_utils import log_debug

Point = Tuple[float, float]


class LevelGenerationError(RuntimeError):
    """Raised when a layout cannot satisfy its placement constraints."""


@dataclass(frozen=True)
class Level:
    index: int
    spawn: Point
    goal: Goal
    platforms: Tuple[Platform, ...]
    hazards: Tuple[Spike, ...]

    @property
    def entities(self):
        """Everything the level owns, back to front."""
        return self.platforms + self.hazards + (self.goal,)


def in_spawn_exclusion(x: float, y: float, spawn: Point) -> bool:
    """True when a path platform at (x, y) would crowd the spawn point."""
    return abs(x - spawn[0]) < SPAWN_EXCLUSION_X and abs(y - spawn[1]) < SPAWN_EXCLUSION_Y


class LevelGenerator:
    """Produces platform / spike / goal layouts.

    Level 0 is a fixed bootstrap layout around the bottom centre of the
    world. Every later level keeps the previous spawn anchor, throws the
    goal somewhere in the upper half at least ``GOAL_MIN_DISTANCE`` away,
    and strings ``PATH_PLATFORM_COUNT`` platforms through evenly spaced
    bands between the two heights, plus a few landing platforms just
    under the goal.

    Rejection loops stop after ``max_attempts`` draws and raise
    ``LevelGenerationError``; worlds of the default size never get close.
    """

    def __init__(self, rng: Optional[random.Random] = None, max_attempts: int = MAX_SAMPLE_ATTEMPTS):
        self.rng = rng if rng is not None else random.Random()
        self.max_attempts = max_attempts

    def generate(self, level_index: int, previous_anchor: Optional[Point], bounds: Bounds) -> Level:
        if level_index == 0 or previous_anchor is None:
            level = self._bootstrap(level_index, bounds)
        else:
            try:
                level = self._random_layout(level_index, tuple(previous_anchor), bounds)
            except SamplingExhausted as exc:
                log_debug(f"LevelGenerator.generate failed level={level_index} bounds={tuple(bounds)}: {exc}")
                raise LevelGenerationError(
                    f"cannot lay out level {level_index} in a {bounds.width}x{bounds.height} world: {exc}"
                ) from exc

        log_debug(
            f"LevelGenerator.generate level={level.index} spawn={level.spawn} "
            f"goal={level.goal.pos} platforms={len(level.platforms)} hazards={len(level.hazards)}"
        )
        return level

    # ──────────────────────────────────────────────────────
    # Layouts
    def _bootstrap(self, level_index, bounds):
        spawn = (bounds.width / 2, bounds.height - PLAYER_HEIGHT)
        goal = Goal(bounds.width / 2 + BOOTSTRAP_GOAL_OFFSET_X,
                    bounds.height + BOOTSTRAP_GOAL_OFFSET_Y)
        base = Platform(spawn[0] + PLAYER_WIDTH / 2 - BASE_PLATFORM_WIDTH / 2,
                        spawn[1] + PLAYER_HEIGHT,
                        BASE_PLATFORM_WIDTH)
        return Level(level_index, spawn, goal, (base,), ())

    def _random_layout(self, level_index, spawn, bounds):
        goal = self._place_goal(spawn, bounds)

        platforms = []
        hazards = []
        step_y = (spawn[1] - goal.y) / PATH_PLATFORM_COUNT
        for i in range(PATH_PLATFORM_COUNT):
            y = spawn[1] - i * step_y
            x = self._sample(
                lambda: uniform(self.rng, 0, bounds.width - PATH_PLATFORM_WIDTH),
                lambda x: not in_spawn_exclusion(x, y, spawn),
            )
            platforms.append(Platform(x, y, PATH_PLATFORM_WIDTH))

            if randint(self.rng, 0, 100) < SPIKE_CHANCE:
                offset = randint(self.rng, SPIKE_OFFSET_MIN, SPIKE_OFFSET_MAX)
                hazards.append(Spike.on_surface(x + offset, y))

        platforms.extend(self._safe_platforms(goal, bounds))
        return Level(level_index, spawn, goal, tuple(platforms), tuple(hazards))

    def _place_goal(self, spawn, bounds):
        pos = self._sample(
            lambda: (uniform(self.rng, 0, bounds.width), uniform(self.rng, 0, bounds.height / 2)),
            lambda p: distance(p, spawn) >= GOAL_MIN_DISTANCE,
        )
        return Goal(*pos)

    def _safe_platforms(self, goal, bounds):
        count = randint(self.rng, SAFE_PLATFORM_MIN, SAFE_PLATFORM_MAX + 1)
        for _ in range(count):
            px = goal.x + randint(self.rng, -SAFE_PLATFORM_SPREAD_X, SAFE_PLATFORM_SPREAD_X)
            py = goal.y + randint(self.rng, SAFE_PLATFORM_DROP_MIN, SAFE_PLATFORM_DROP_MAX)
            px = clamp(px, 0, bounds.width - PATH_PLATFORM_WIDTH)
            py = clamp(py, 0, bounds.height - PLATFORM_HEIGHT)
            yield Platform(px, py, PATH_PLATFORM_WIDTH)

    def _sample(self, draw, accept):
        return sample_until(draw, accept, self.max_attempts)
