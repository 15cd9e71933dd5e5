## shapely geometry kernel adapter for yapSlice
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

"""Bind yapSlice integer points to the shapely geometry kernel.

Polygon booleans are done by an external kernel, shapely.  This module
provides the hooks that let our ``Point`` stand in for the kernel's
point concept:

1. a concept marker, ``register_point_concept()`` /
   ``is_point_concept()``; ``Point`` is registered on import.
2. a coordinate getter keyed by orientation, ``get_coord()``.
3. a coordinate setter and a two-coordinate constructor,
   ``set_coord()`` and ``construct()``.

On top of the hooks sit the conversions to and from shapely
geometries.  shapely stores coordinates as doubles, so integer
coordinates round-trip exactly only while their magnitude stays within
``MAX_EXACT_COORD``; larger ones raise ``ValueError`` rather than
silently losing precision.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Iterable, List, Set

from shapely.geometry import LineString
from shapely.geometry import Point as ShapelyPoint
from shapely.geometry import Polygon as ShapelyPolygon
from shapely.geometry.base import BaseGeometry

from yapslice.point import Point, Polygon, Polyline

logger = logging.getLogger(__name__)

MAX_EXACT_COORD = 2 ** 53


class Orientation(Enum):
    """axis selector for the coordinate hooks"""

    HORIZONTAL = 0
    VERTICAL = 1


_POINT_CONCEPTS: Set[type] = set()


def register_point_concept(cls: type) -> type:
    """Mark ``cls`` as usable wherever the kernel expects a point.
    Returns ``cls`` so it can be used as a class decorator."""

    if not isinstance(cls, type):
        raise ValueError('bad point concept: ' + str(cls))
    _POINT_CONCEPTS.add(cls)
    return cls


def is_point_concept(obj) -> bool:
    """Is ``obj`` (a class or an instance) a registered point concept?"""

    cls = obj if isinstance(obj, type) else type(obj)
    return any(issubclass(cls, concept) for concept in _POINT_CONCEPTS)


register_point_concept(Point)


def get_coord(point: Point, orient: Orientation) -> int:
    if orient is Orientation.HORIZONTAL:
        return point.x
    if orient is Orientation.VERTICAL:
        return point.y
    raise ValueError('bad orientation: ' + str(orient))


def set_coord(point: Point, orient: Orientation, value: int) -> None:
    if orient is Orientation.HORIZONTAL:
        point.x = value
    elif orient is Orientation.VERTICAL:
        point.y = value
    else:
        raise ValueError('bad orientation: ' + str(orient))


def construct(x_value: int, y_value: int) -> Point:
    return Point(x_value, y_value)


def _checked_xy(point: Point) -> tuple[int, int]:
    if not is_point_concept(point):
        raise ValueError('bad point: ' + str(point))
    x = get_coord(point, Orientation.HORIZONTAL)
    y = get_coord(point, Orientation.VERTICAL)
    if abs(x) > MAX_EXACT_COORD or abs(y) > MAX_EXACT_COORD:
        raise ValueError('coordinate out of exact double range: ' + str(point))
    return x, y


def _xy_list(points: Iterable[Point]) -> List[tuple[int, int]]:
    return [_checked_xy(p) for p in points]


## conversions to shapely
## ----------------------

def to_shapely_point(point: Point) -> ShapelyPoint:
    return ShapelyPoint(*_checked_xy(point))


def to_shapely_linestring(points) -> LineString:
    """Convert a ``Line``, ``Polyline`` or sequence of points."""

    coords = _xy_list(points)
    if len(coords) < 2:
        raise ValueError('a line string needs at least two points')
    return LineString(coords)


def to_shapely_polygon(points) -> ShapelyPolygon:
    """Convert a ``Polygon`` or sequence of points; the ring is closed
    by shapely."""

    coords = _xy_list(points)
    if len(coords) < 3:
        raise ValueError('a polygon needs at least three points')
    logger.debug("converting %d point ring to shapely", len(coords))
    return ShapelyPolygon(coords)


## conversions from shapely
## ------------------------

def points_from_shapely(geometry: BaseGeometry) -> List[Point]:
    """Return the vertices of a shapely point, line string or polygon
    exterior as integer points.  The duplicated closing vertex of a
    polygon ring is dropped.  Polygons with holes are rejected, since a
    flat vertex list cannot carry their interior rings."""

    if not isinstance(geometry, BaseGeometry):
        raise ValueError('bad shapely geometry: ' + str(geometry))
    kind = geometry.geom_type
    if kind == 'Point':
        coords = [(geometry.x, geometry.y)]
    elif kind in ('LineString', 'LinearRing'):
        coords = list(geometry.coords)
    elif kind == 'Polygon':
        if len(geometry.interiors) > 0:
            raise ValueError('polygon has interior rings: ' + str(len(geometry.interiors)))
        coords = list(geometry.exterior.coords)[:-1]
    else:
        raise ValueError('unsupported shapely geometry type: ' + kind)
    logger.debug("converting %d shapely %s vertices", len(coords), kind)
    return [construct(c[0], c[1]) for c in coords]


def polyline_from_shapely(geometry: BaseGeometry) -> Polyline:
    return Polyline(points_from_shapely(geometry))


def polygon_from_shapely(geometry: BaseGeometry) -> Polygon:
    if geometry.geom_type != 'Polygon':
        raise ValueError('expected a shapely Polygon, got ' + geometry.geom_type)
    return Polygon(points_from_shapely(geometry))


__all__ = [
    'MAX_EXACT_COORD',
    'Orientation',
    'register_point_concept',
    'is_point_concept',
    'get_coord',
    'set_coord',
    'construct',
    'to_shapely_point',
    'to_shapely_linestring',
    'to_shapely_polygon',
    'points_from_shapely',
    'polyline_from_shapely',
    'polygon_from_shapely',
]
