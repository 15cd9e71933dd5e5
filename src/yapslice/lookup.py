## closest point in radius spatial hash for yapSlice
## Copyright (c) 2026 yapSlice contributors

# Permission is hereby granted, free of charge, to any person
# obtaining a copy of this software and associated documentation files
# (the "Software"), to deal in the Software without restriction,
# including without limitation the rights to use, copy, modify, merge,
# publish, distribute, sublicense, and/or sell copies of the Software,
# and to permit persons to whom the Software is furnished to do so,
# subject to the following conditions:
# 
# The above copyright notice and this permission notice shall be
# included in all copies or substantial portions of the Software.
# 
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND,
# EXPRESS OR IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF
# MERCHANTABILITY, FITNESS FOR A PARTICULAR PURPOSE AND
# NONINFRINGEMENT. IN NO EVENT SHALL THE AUTHORS OR COPYRIGHT HOLDERS
# BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER LIABILITY, WHETHER IN AN
# ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM, OUT OF OR IN
# CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
# SOFTWARE.

"""closest point in radius spatial hash for **yapSlice**

``ClosestPointInRadiusLookup`` answers "which stored value lies
closest to this point, within a fixed search radius?" for repeated
queries against a point set that only grows.  Values of any type can
be stored; a point accessor callable maps each value to its ``Point``
(or to ``None``, in which case the value is not searchable).

The plane is divided into square cells whose side, the grid
resolution, is the smallest power of two that is at least
``2 * search_radius + 4``.  Each value is bucketed under its cell
index, ``(x >> grid_log2, y >> grid_log2)``.  A query rounds the query
point to its nearest cell corner and only looks at the four cells
sharing that corner.  Because the cell side exceeds twice the search
radius, any point within the radius of the query lies in one of those
four cells, so the answer is exact, not approximate.

There is no removal and the radius is fixed for the life of the
lookup; build a new one for a different point set or radius.  Inserts
must not run concurrently with each other or with queries.
"""

from __future__ import annotations

import copy
import logging
import math
from typing import Callable, Dict, Generic, List, Optional, Tuple, TypeVar

from yapslice.coord import iscoord
from yapslice.point import Point, Point3

logger = logging.getLogger(__name__)

V = TypeVar("V")

PointAccessor = Callable[[V], Optional[Point]]

## grid cells this large or larger are considered a misuse
MAX_GRID_RESOLUTION = 1 << 30


def point_of(value) -> Optional[Point]:
    """Default point accessor: the value itself if it is a ``Point``,
    else its ``point`` attribute if that is a ``Point``, else ``None``.
    A ``Point3`` in either place is located by its ``xy`` part."""

    pt = value if isinstance(value, (Point, Point3)) else getattr(value, "point", None)
    if isinstance(pt, Point3):
        return pt.xy
    if isinstance(pt, Point):
        return pt
    return None


def grid_log2_for(search_radius: int) -> int:
    """Return log2 of the smallest power of two >= ``2 * search_radius + 4``."""

    return (2 * search_radius + 3).bit_length()


class ClosestPointInRadiusLookup(Generic[V]):

    """Spatial hash giving exact nearest-value-within-radius queries"""

    def __init__(self, search_radius: int, point_accessor: PointAccessor = point_of):
        if not iscoord(search_radius) or search_radius <= 0:
            raise ValueError('bad search radius: ' + str(search_radius))
        if not callable(point_accessor):
            raise ValueError('bad point accessor: ' + str(point_accessor))

        self.__search_radius = int(search_radius)
        self.__point_accessor = point_accessor
        self.__grid_log2 = grid_log2_for(self.__search_radius)
        self.__grid_resolution = 1 << self.__grid_log2
        if self.__grid_resolution >= MAX_GRID_RESOLUTION:
            raise ValueError('search radius too large: ' + str(search_radius))

        self.__map: Dict[Point, List[V]] = {}
        self.__size = 0
        logger.debug("lookup created: radius=%d resolution=%d log2=%d",
                     self.__search_radius, self.__grid_resolution, self.__grid_log2)

    def __repr__(self):
        return 'ClosestPointInRadiusLookup(search_radius={},grid_resolution={},size={})'.format(
            self.__search_radius, self.__grid_resolution, self.__size)

    def __len__(self) -> int:
        return self.__size

    @property
    def search_radius(self) -> int:
        return self.__search_radius

    @search_radius.setter
    def search_radius(self, r):
        raise ValueError("can't change the search radius of a lookup")

    @property
    def grid_resolution(self) -> int:
        return self.__grid_resolution

    @property
    def grid_log2(self) -> int:
        return self.__grid_log2

    def bucket_key(self, pt: Point) -> Point:
        """cell index of point ``pt``"""
        return Point(pt.x >> self.__grid_log2, pt.y >> self.__grid_log2)

    def bucket_sizes(self) -> Dict[Point, int]:
        """number of stored values per occupied cell"""
        return {key: len(values) for key, values in self.__map.items()}

    def insert(self, value: V, move: bool = False) -> bool:
        """Store ``value`` under the cell of its point.  The lookup keeps a
        deep copy unless ``move`` is true, in which case the instance
        itself is kept and the caller must not modify it afterwards.

        Values without a point are silently skipped; returns whether the
        value was stored.
        """
        pt = self.__point_accessor(value)
        if pt is None:
            logger.debug("skipping value without a point: %r", value)
            return False
        stored = value if move else copy.deepcopy(value)
        self.__map.setdefault(self.bucket_key(pt), []).append(stored)
        self.__size += 1
        return True

    def find(self, pt: Point) -> Tuple[Optional[V], float]:
        """Return ``(value, distance_squared)`` for the stored value
        closest to ``pt``, provided it lies strictly within the search
        radius; otherwise return ``(None, math.inf)``.
        """
        if not isinstance(pt, Point):
            raise ValueError('bad query point: ' + str(pt))

        value_min = None
        dist_min = math.inf
        found = False
        # round pt to the closest grid corner
        half = self.__grid_resolution >> 1
        corner_x = (pt.x + half) >> self.__grid_log2
        corner_y = (pt.y + half) >> self.__grid_log2
        for neighbor_y in (-1, 0):
            for neighbor_x in (-1, 0):
                bucket = self.__map.get(Point(corner_x + neighbor_x,
                                              corner_y + neighbor_y))
                if not bucket:
                    continue
                for value in bucket:
                    pt2 = self.__point_accessor(value)
                    if pt2 is None:
                        continue
                    d2 = pt.distance_to_sq(pt2)
                    if d2 < dist_min:
                        dist_min = d2
                        value_min = value
                        found = True

        if found and dist_min < self.__search_radius * self.__search_radius:
            return value_min, dist_min
        return None, math.inf


__all__ = [
    'ClosestPointInRadiusLookup',
    'MAX_GRID_RESOLUTION',
    'PointAccessor',
    'grid_log2_for',
    'point_of',
]
