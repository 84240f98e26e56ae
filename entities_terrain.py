# entities_terrain.py

from dataclasses import dataclass
from typing import ClassVar, Tuple

from config import (
    GOAL_DIAMETER, PLATFORM_HEIGHT, SPIKE_SIZE, SPIKE_HEIGHT,
    PLATFORM_COLOR, SPIKE_COLOR, GOAL_COLOR
)
from entities_utils import (
    SHAPE_RECT, SHAPE_ELLIPSE, SHAPE_POLYGON,
    ROLE_PLATFORM, ROLE_HAZARD, ROLE_GOAL,
    rects_intersect, circle_intersects_rect, polygon_intersects_rect
)

Point = Tuple[float, float]


@dataclass(frozen=True)
class Platform:
    """Landable box. Only its top surface takes part in collisions."""

    x: float
    y: float
    width: float
    height: float = PLATFORM_HEIGHT

    shape: ClassVar[str] = SHAPE_RECT
    role: ClassVar[str] = ROLE_PLATFORM
    color: ClassVar[tuple] = PLATFORM_COLOR

    @property
    def top(self) -> float:
        return self.y

    @property
    def rect(self):
        return (self.x, self.y, self.width, self.height)

    def intersects(self, rect) -> bool:
        return rects_intersect(self.rect, rect)


@dataclass(frozen=True)
class Spike:
    """Triangle hazard standing on a platform surface."""

    points: Tuple[Point, Point, Point]

    shape: ClassVar[str] = SHAPE_POLYGON
    role: ClassVar[str] = ROLE_HAZARD
    color: ClassVar[tuple] = SPIKE_COLOR

    @classmethod
    def on_surface(cls, left: float, surface_y: float) -> "Spike":
        """Build a spike whose base starts at ``left`` on the line ``surface_y``."""
        return cls((
            (left + SPIKE_SIZE / 2, surface_y - SPIKE_HEIGHT),
            (left, surface_y),
            (left + SPIKE_SIZE, surface_y),
        ))

    def hits(self, rect) -> bool:
        return polygon_intersects_rect(self.points, rect)


@dataclass(frozen=True)
class Goal:
    """Circular exit; ``x``/``y`` is the top-left of its bounding square."""

    x: float
    y: float
    diameter: float = GOAL_DIAMETER

    shape: ClassVar[str] = SHAPE_ELLIPSE
    role: ClassVar[str] = ROLE_GOAL
    color: ClassVar[tuple] = GOAL_COLOR

    @property
    def pos(self) -> Point:
        return (self.x, self.y)

    @property
    def center(self) -> Point:
        r = self.diameter / 2
        return (self.x + r, self.y + r)

    @property
    def rect(self):
        return (self.x, self.y, self.diameter, self.diameter)

    def touches(self, rect) -> bool:
        return circle_intersects_rect(self.center, self.diameter / 2, rect)
