# entities.py

# re‑export the world objects and the helpers they are built on

from entities_utils import (
    Bounds,
    clamp,
    distance,
    rects_intersect,
    circle_intersects_rect,
    polygon_intersects_rect,
    SHAPE_RECT,
    SHAPE_ELLIPSE,
    SHAPE_POLYGON,
    ROLE_PLAYER,
    ROLE_PLATFORM,
    ROLE_HAZARD,
    ROLE_GOAL
)

from entities_player import Player

from entities_terrain import (
    Platform,
    Spike,
    Goal
)
