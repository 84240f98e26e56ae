# entities_utils.py

from collections import namedtuple

import numpy as np

# World rectangle, origin at (0, 0).
Bounds = namedtuple("Bounds", ["width", "height"])


class SamplingExhausted(RuntimeError):
    """Raised when rejection sampling runs out of attempts."""


def clamp(v, lo, hi):
    return max(lo, min(v, hi))


def distance(p, q):
    """Euclidean distance between two points."""
    return float(np.linalg.norm(np.subtract(p, q, dtype=float)))


def rects_intersect(a, b):
    """True if two (x, y, w, h) boxes overlap with a non-zero area.

    Boxes that only share an edge do not intersect, so a player resting
    exactly on a platform top is not inside it.
    """
    ax, ay, aw, ah = a
    bx, by, bw, bh = b
    return ax < bx + bw and bx < ax + aw and ay < by + bh and by < ay + ah


def circle_intersects_rect(center, radius, rect):
    cx, cy = center
    x, y, w, h = rect
    nearest = (clamp(cx, x, x + w), clamp(cy, y, y + h))
    return distance(center, nearest) < radius


def _rect_corners(rect):
    x, y, w, h = rect
    return np.array([(x, y), (x + w, y), (x + w, y + h), (x, y + h)], dtype=float)


def polygon_intersects_rect(points, rect):
    """Separating axis test between a convex polygon and an (x, y, w, h) box."""
    poly = np.asarray(points, dtype=float)
    box = _rect_corners(rect)

    axes = [np.array([1.0, 0.0]), np.array([0.0, 1.0])]
    for i in range(len(poly)):
        edge = poly[(i + 1) % len(poly)] - poly[i]
        axes.append(np.array([-edge[1], edge[0]]))

    for axis in axes:
        if not axis.any():
            continue
        a = poly @ axis
        b = box @ axis
        if a.max() <= b.min() or b.max() <= a.min():
            return False
    return True


def uniform(rng, lo, hi):
    """Real sample in [lo, hi); a collapsed range yields lo."""
    if hi <= lo:
        return lo
    return lo + rng.random() * (hi - lo)


def randint(rng, lo, hi):
    """Integer sample in [lo, hi); a collapsed range yields lo."""
    if hi <= lo:
        return lo
    return rng.randrange(lo, hi)


def sample_until(draw, accept, limit):
    """Call ``draw`` until ``accept`` likes the result, at most ``limit`` times."""
    for _ in range(limit):
        value = draw()
        if accept(value):
            return value
    raise SamplingExhausted(f"no acceptable sample after {limit} attempts")


# Shape tags drive drawing, role tags drive simulation.
SHAPE_RECT = "rect"
SHAPE_ELLIPSE = "ellipse"
SHAPE_POLYGON = "polygon"

ROLE_PLAYER = "player"
ROLE_PLATFORM = "platform"
ROLE_HAZARD = "hazard"
ROLE_GOAL = "goal"
