# physics.py

from config import MOVE_SPEED, GRAVITY, JUMP_VELOCITY
from entities_utils import clamp


def find_landing(player, platforms, next_x, next_y):
    """First platform the player drops onto this tick, or None.

    Only descent from above counts: the player must be falling or
    resting, its tentative box must overlap the platform, and its current
    bottom edge must not already be below the platform top. Iteration
    order decides between several candidates.
    """
    if player.vy > 0:
        return None
    box = player.rect_at(next_x, next_y)
    for platform in platforms:
        if platform.intersects(box) and player.bottom <= platform.top:
            return platform
    return None


def tick(player, platforms, controls, bounds):
    """Advance ``player`` by one tick and return its on-ground flag."""
    x, y = player.x, player.y

    if controls.right:
        x += MOVE_SPEED
    if controls.left:
        x -= MOVE_SPEED

    # positive vy is upward, screen y grows downward
    player.vy -= GRAVITY
    next_y = y - player.vy
    on_ground = False

    platform = find_landing(player, platforms, x, next_y)
    if platform is not None:
        next_y = platform.top - player.height
        player.vy = 0
        on_ground = True

    floor = bounds.height - player.height
    if next_y >= floor:
        next_y = floor
        player.vy = 0
        on_ground = True

    if controls.jump and on_ground:
        player.vy = JUMP_VELOCITY

    x = clamp(x, 0, bounds.width - player.width)
    player.move_to((x, next_y))
    player.on_ground = on_ground
    return on_ground
