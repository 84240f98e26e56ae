import random
import unittest

from entities_utils import (
    SamplingExhausted,
    circle_intersects_rect,
    clamp,
    distance,
    polygon_intersects_rect,
    randint,
    rects_intersect,
    sample_until,
    uniform,
)


class RectTests(unittest.TestCase):
    def test_overlapping_boxes_intersect(self):
        self.assertTrue(rects_intersect((0, 0, 20, 20), (10, 10, 20, 20)))

    def test_shared_edge_is_not_an_intersection(self):
        self.assertFalse(rects_intersect((0, 0, 20, 20), (20, 0, 20, 20)))
        self.assertFalse(rects_intersect((0, 0, 20, 20), (0, 20, 20, 10)))

    def test_disjoint_boxes(self):
        self.assertFalse(rects_intersect((0, 0, 5, 5), (50, 50, 5, 5)))


class CircleTests(unittest.TestCase):
    def test_circle_overlapping_box(self):
        self.assertTrue(circle_intersects_rect((15, 15), 15, (25, 10, 20, 20)))

    def test_circle_near_corner_but_outside(self):
        # nearest corner (27, 27) is about 17 units from the centre
        self.assertFalse(circle_intersects_rect((15, 15), 15, (27, 27, 20, 20)))

    def test_centre_inside_box(self):
        self.assertTrue(circle_intersects_rect((5, 5), 1, (0, 0, 20, 20)))


class PolygonTests(unittest.TestCase):
    TRIANGLE = ((10, 0), (0, 10), (20, 10))

    def test_box_over_apex(self):
        self.assertTrue(polygon_intersects_rect(self.TRIANGLE, (5, -5, 10, 8)))

    def test_box_beside_slope_is_separated(self):
        # overlaps the triangle's bounding box but not the triangle itself
        self.assertFalse(polygon_intersects_rect(self.TRIANGLE, (0, 0, 3, 3)))

    def test_box_resting_on_base_does_not_touch(self):
        self.assertFalse(polygon_intersects_rect(self.TRIANGLE, (0, 10, 20, 20)))

    def test_box_containing_triangle(self):
        self.assertTrue(polygon_intersects_rect(self.TRIANGLE, (-5, -5, 40, 40)))


class SamplingTests(unittest.TestCase):
    def test_uniform_stays_in_half_open_range(self):
        rng = random.Random(3)
        for _ in range(1000):
            v = uniform(rng, 10, 20)
            self.assertGreaterEqual(v, 10)
            self.assertLess(v, 20)

    def test_collapsed_ranges_return_low(self):
        rng = random.Random(3)
        self.assertEqual(uniform(rng, 5, 5), 5)
        self.assertEqual(randint(rng, 7, 2), 7)

    def test_randint_excludes_high(self):
        rng = random.Random(4)
        seen = {randint(rng, 2, 4) for _ in range(200)}
        self.assertEqual(seen, {2, 3})

    def test_sample_until_returns_first_accepted(self):
        values = iter([1, 2, 3, 4])
        self.assertEqual(sample_until(lambda: next(values), lambda v: v > 2, 10), 3)

    def test_sample_until_gives_up(self):
        with self.assertRaises(SamplingExhausted):
            sample_until(lambda: 0, lambda v: v > 0, 25)


class MiscTests(unittest.TestCase):
    def test_clamp(self):
        self.assertEqual(clamp(-4, 0, 10), 0)
        self.assertEqual(clamp(14, 0, 10), 10)
        self.assertEqual(clamp(4, 0, 10), 4)

    def test_distance(self):
        self.assertAlmostEqual(distance((0, 0), (3, 4)), 5.0)


if __name__ == "__main__":
    unittest.main()
