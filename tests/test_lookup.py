import math
import random

import pytest

from yapslice.lookup import (
    MAX_GRID_RESOLUTION,
    ClosestPointInRadiusLookup,
    grid_log2_for,
    point_of,
)
from yapslice.point import Point, Point3
## unit tests for yapSlice lookup.py


class Seam:
    """toy value type carrying an optional point"""

    def __init__(self, name, point):
        self.name = name
        self.point = point


def brute_force(points, q, radius):
    best = None
    for p in points:
        d2 = q.distance_to_sq(p)
        if best is None or d2 < best:
            best = d2
    if best is not None and best < radius * radius:
        return best
    return None


class TestGrid:
    """grid resolution bookkeeping"""

    def test_grid_log2(self):
        assert grid_log2_for(10) == 5
        assert grid_log2_for(14) == 5
        assert grid_log2_for(15) == 6

    def test_resolution_is_smallest_power_of_two(self):
        for r in range(1, 5000):
            res = 1 << grid_log2_for(r)
            assert res >= 2 * r + 4
            assert res // 2 < 2 * r + 4

    def test_properties(self):
        lookup = ClosestPointInRadiusLookup(10)
        assert lookup.search_radius == 10
        assert lookup.grid_resolution == 32
        assert lookup.grid_log2 == 5
        assert len(lookup) == 0
        with pytest.raises(ValueError):
            lookup.search_radius = 20

    def test_bad_radius(self):
        for bad in (0, -1, 1.5, True, None):
            with pytest.raises(ValueError):
                ClosestPointInRadiusLookup(bad)
        with pytest.raises(ValueError):
            ClosestPointInRadiusLookup(MAX_GRID_RESOLUTION // 4)
        ClosestPointInRadiusLookup(MAX_GRID_RESOLUTION // 4 - 3)

    def test_bad_accessor(self):
        with pytest.raises(ValueError):
            ClosestPointInRadiusLookup(10, point_accessor=42)

    def test_bucket_key_floors_negative_coordinates(self):
        lookup = ClosestPointInRadiusLookup(10)
        assert lookup.bucket_key(Point(31, 32)) == Point(0, 1)
        assert lookup.bucket_key(Point(-1, -32)) == Point(-1, -1)
        assert lookup.bucket_key(Point(-33, 0)) == Point(-2, 0)


class TestFind:

    def test_scenario(self):
        lookup = ClosestPointInRadiusLookup(10)
        for p in (Point(0, 0), Point(5, 5), Point(20, 20)):
            lookup.insert(p)
        assert len(lookup) == 3

        value, d2 = lookup.find(Point(1, 1))
        assert value == Point(0, 0)
        assert d2 == 2

        value, d2 = lookup.find(Point(15, 15))
        assert value == Point(20, 20)
        assert d2 == 50

    def test_empty(self):
        lookup = ClosestPointInRadiusLookup(10)
        assert lookup.find(Point(0, 0)) == (None, math.inf)

    def test_exact_radius_is_no_match(self):
        lookup = ClosestPointInRadiusLookup(10)
        lookup.insert(Point(10, 0))
        lookup.insert(Point(-6, 8))
        assert lookup.find(Point(0, 0)) == (None, math.inf)
        value, d2 = lookup.find(Point(1, 0))
        assert value == Point(10, 0) and d2 == 81

    def test_values_without_point_are_ignored(self):
        lookup = ClosestPointInRadiusLookup(10)
        assert not lookup.insert(Seam('ghost', None))
        assert len(lookup) == 0
        assert lookup.bucket_sizes() == {}
        assert lookup.find(Point(0, 0)) == (None, math.inf)

        assert lookup.insert(Seam('real', Point(3, 4)))
        assert len(lookup) == 1
        assert lookup.bucket_sizes() == {Point(0, 0): 1}
        value, d2 = lookup.find(Point(0, 0))
        assert value.name == 'real' and d2 == 25

    def test_custom_accessor(self):
        lookup = ClosestPointInRadiusLookup(100, point_accessor=lambda v: v.get('pt'))
        lookup.insert({'pt': Point(50, 50), 'id': 1})
        lookup.insert({'pt': None, 'id': 2})
        lookup.insert({'pt': Point(500, 500), 'id': 3})
        value, _ = lookup.find(Point(0, 0))
        assert value['id'] == 1
        assert len(lookup) == 2

    def test_default_accessor(self):
        assert point_of(Point(1, 1)) == Point(1, 1)
        assert point_of(Seam('s', Point(2, 2))) == Point(2, 2)
        assert point_of(Seam('s', (2, 2))) is None
        assert point_of('nothing') is None
        assert point_of(Point3(4, 5, 6)) == Point(4, 5)
        assert point_of(Seam('s', Point3(4, 5, 6))) == Point(4, 5)

    def test_point3_values(self):
        lookup = ClosestPointInRadiusLookup(10)
        assert lookup.insert(Point3(1, 1, 5))
        assert len(lookup) == 1
        value, d2 = lookup.find(Point(1, 1))
        assert value == Point3(1, 1, 5) and d2 == 0
        assert lookup.find(Point(100, 100)) == (None, math.inf)

    def test_insert_copies_unless_moved(self):
        lookup = ClosestPointInRadiusLookup(10)
        p = Point(0, 0)
        lookup.insert(p)
        p.translate(1000, 1000)
        value, _ = lookup.find(Point(1, 1))
        assert value == Point(0, 0)
        assert value is not p

        q = Point(100, 100)
        lookup.insert(q, move=True)
        value, _ = lookup.find(Point(101, 101))
        assert value is q

    def test_shared_bucket(self):
        lookup = ClosestPointInRadiusLookup(10)
        lookup.insert(Point(1, 1))
        lookup.insert(Point(2, 2))
        assert lookup.bucket_sizes() == {Point(0, 0): 2}
        value, _ = lookup.find(Point(3, 3))
        assert value == Point(2, 2)

    def test_bad_query(self):
        lookup = ClosestPointInRadiusLookup(10)
        with pytest.raises(ValueError):
            lookup.find((0, 0))

    @pytest.mark.parametrize("radius", [1, 7, 10, 50, 333])
    def test_matches_brute_force(self, radius):
        rng = random.Random(radius)
        extent = radius * 20
        points = [Point(rng.randint(-extent, extent), rng.randint(-extent, extent))
                  for _ in range(400)]
        lookup = ClosestPointInRadiusLookup(radius)
        for p in points:
            lookup.insert(p)

        for _ in range(400):
            # bias half the queries next to stored points
            if rng.random() < 0.5:
                base = rng.choice(points)
                q = Point(base.x + rng.randint(-radius, radius),
                          base.y + rng.randint(-radius, radius))
            else:
                q = Point(rng.randint(-extent, extent), rng.randint(-extent, extent))
            expected = brute_force(points, q, radius)
            value, d2 = lookup.find(q)
            if expected is None:
                assert value is None and d2 == math.inf
            else:
                assert d2 == expected
                assert q.distance_to_sq(value) == expected
