# entities_player.py

import numpy as np

from config import PLAYER_WIDTH, PLAYER_HEIGHT, PLAYER_COLOR
from entities_utils import SHAPE_RECT, ROLE_PLAYER


class Player:
    """The controllable square.

    ``pos`` is the top-left corner in world units (y grows downward).
    ``vy`` is an integer vertical velocity where positive means upward.
    """

    shape = SHAPE_RECT
    role = ROLE_PLAYER
    color = PLAYER_COLOR

    def __init__(self, pos=(0.0, 0.0)):
        self.pos = np.array(pos, dtype=float)
        self.vy = 0
        self.width = PLAYER_WIDTH
        self.height = PLAYER_HEIGHT
        self.on_ground = False

    @property
    def x(self):
        return float(self.pos[0])

    @property
    def y(self):
        return float(self.pos[1])

    @property
    def bottom(self):
        return self.y + self.height

    @property
    def rect(self):
        return (self.x, self.y, self.width, self.height)

    def rect_at(self, x, y):
        return (x, y, self.width, self.height)

    def move_to(self, pos):
        self.pos[:] = pos

    def respawn(self, anchor, reset_velocity=False):
        """Teleport to ``anchor``; velocity survives unless asked otherwise."""
        self.move_to(anchor)
        if reset_velocity:
            self.vy = 0
