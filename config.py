# config.py
# All configurable constants and settings

import os

# Optional debug logging toggle – when enabled, every call routed through
# logging_utils.log_debug appends a timestamped trace to logs/debug.txt.
# Disabled by default for normal play sessions.
LOG_ENABLED = bool(int(os.getenv("SKYHOP_LOG_ENABLED", "0")))
LOG_FILE_PATH = "logs/debug.txt"

# Hazard respawn keeps the player's vertical velocity unless this is set.
RESPAWN_RESETS_VELOCITY = bool(int(os.getenv("SKYHOP_RESPAWN_RESETS_VELOCITY", "0")))

# Seed for the level generator; unset means a fresh layout every run.
_seed = os.getenv("SKYHOP_SEED", "")
SEED = int(_seed) if _seed.strip() else None

TITLE = "Skyhop"

# World / window dimensions
WIDTH = 1000
HEIGHT = 500

# Frames per second (one simulation tick per frame, about 16 ms)
FPS = 60

# Player
PLAYER_WIDTH = 20
PLAYER_HEIGHT = 20

# Movement & Physics Settings (units per tick)
MOVE_SPEED = 7            # Horizontal translation per held direction key
GRAVITY = 1               # Subtracted from vertical velocity every tick
JUMP_VELOCITY = 20        # Launch speed, positive = upward

# Lives
DEATH_LIMIT = 10

# Goal
GOAL_DIAMETER = 30
GOAL_MIN_DISTANCE = 150           # Minimum spawn-to-goal separation (level >= 1)
BOOTSTRAP_GOAL_OFFSET_X = -100    # Level 0 goal, relative to world centre
BOOTSTRAP_GOAL_OFFSET_Y = -50     # Level 0 goal, relative to world bottom

# Platforms
PLATFORM_HEIGHT = 10
BASE_PLATFORM_WIDTH = 100         # The single level 0 platform
PATH_PLATFORM_WIDTH = 80
PATH_PLATFORM_COUNT = 14
SPAWN_EXCLUSION_X = 100           # No path platform within this |dx| ...
SPAWN_EXCLUSION_Y = 80            # ... and this |dy| of the spawn point
SAFE_PLATFORM_MIN = 2             # Landing platforms near the goal, inclusive
SAFE_PLATFORM_MAX = 3
SAFE_PLATFORM_SPREAD_X = 60
SAFE_PLATFORM_DROP_MIN = 40
SAFE_PLATFORM_DROP_MAX = 80

# Spikes
SPIKE_CHANCE = 40                 # Percent chance per path platform
SPIKE_SIZE = 20
SPIKE_HEIGHT = 10
SPIKE_OFFSET_MIN = 10
SPIKE_OFFSET_MAX = 70

# Rejection sampling cap per loop
MAX_SAMPLE_ATTEMPTS = 10_000

# Colours
BACKGROUND_COLOR = (173, 216, 230)
PLAYER_COLOR = (0, 0, 255)
PLATFORM_COLOR = (128, 128, 128)
SPIKE_COLOR = (255, 0, 0)
GOAL_COLOR = (255, 255, 0)
HUD_COLOR = (0, 0, 0)
GAME_OVER_COLOR = (255, 0, 0)

# HUD
HUD_FONT_SIZE = 20
GAME_OVER_FONT_SIZE = 32

# Settings dictionary read by the game loop each frame
settings_data = {
    "FPS": FPS,
}
