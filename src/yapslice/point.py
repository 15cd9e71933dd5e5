## point and vector algebra for yapSlice
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

"""point and vector algebra for **yapSlice**

====================
OVERVIEW
====================

The yapslice.point module provides the value types that everything
else in **yapSlice** is built from:

- ``Point`` -- a 2D point with integer (scaled) coordinates.  Equality
  is exact.  ``Vector`` is the same type, used for displacements.
- ``Point3`` -- a ``Point`` plus an integer ``z``.  A ``Point3`` holds
  its 2D part in the ``xy`` field and delegates to it explicitly, so
  2D operations on a 3D point are spelled ``p3.xy.ccw(a, b)``.
- ``PointF`` and ``PointF3`` -- the same shapes with ``float`` fields,
  for physical values that do not need to survive clipping.
- ``Line``, ``Polyline`` and ``Polygon`` -- segments and ordered point
  lists, needed for projection and distance queries.

Point construction is value-safe: ``Point(p)`` copies ``p``, and the
compound types copy the points handed to them.  Floating point
arguments to the integer types are rounded to the nearest integer.

Translation, rotation and scaling modify a point in place; ``rotated()``
returns a transformed copy.  Angles are in radians, counter-clockwise
positive, and never normalized.

orientation
===========

``ccw(p1, p2)`` is the cross product of ``p1 - self`` and ``p2 -
self``: positive for a left (counter-clockwise) turn from ``p1`` to
``p2`` as seen from ``self``, negative for a right turn and zero when
the three points are collinear.  For integer points it is exact.

nearest point search
====================

``nearest_point_index()`` and ``nearest_waypoint_index()`` do a
linear scan over a flat sequence and return ``None`` for an empty one.
Ties go to the first candidate in iteration order.

"""

from math import atan2, cos, isfinite, sin, sqrt

from yapslice.coord import PI, SCALED_EPSILON, iscoord, isgoodnum, scale_, unscale


def _coord(v):
    """coerce ``v`` to an integer coordinate, rounding real values"""
    if iscoord(v):
        return int(v)
    if isgoodnum(v) and isfinite(v):
        return int(round(v))
    raise ValueError('bad coordinate: {}'.format(v))


def _real(v):
    if isgoodnum(v):
        return float(v)
    raise ValueError('bad real coordinate: {}'.format(v))


## operations on integer points
## ----------------------------

class Point:
    """2D point with integer (scaled) coordinates"""

    __slots__ = ('_x', '_y')

    def __init__(self, x=0, y=0):
        if isinstance(x, Point):
            self._x = x._x
            self._y = x._y
        else:
            self.x = x
            self.y = y

    ## every assignment goes through _coord, so coordinates stay integers
    @property
    def x(self):
        return self._x

    @x.setter
    def x(self, value):
        self._x = _coord(value)

    @property
    def y(self):
        return self._y

    @y.setter
    def y(self, value):
        self._y = _coord(value)

    @classmethod
    def new_scale(cls, x, y):
        """make a point from real coordinates in millimetres"""
        return cls(scale_(x), scale_(y))

    def __repr__(self):
        return 'Point({}, {})'.format(self.x, self.y)

    def __str__(self):
        return '{},{}'.format(self.x, self.y)

    def __iter__(self):
        yield self.x
        yield self.y

    def __eq__(self, other):
        if not isinstance(other, Point):
            return NotImplemented
        return self.x == other.x and self.y == other.y

    ## NOTE: points used as mapping keys must not be mutated
    def __hash__(self):
        return hash((self.x, self.y))

    def __add__(self, other):
        if not isinstance(other, Point):
            return NotImplemented
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other):
        if not isinstance(other, Point):
            return NotImplemented
        return Point(self.x - other.x, self.y - other.y)

    def __mul__(self, factor):
        if not isgoodnum(factor):
            return NotImplemented
        return Point(factor * self.x, factor * self.y)

    __rmul__ = __mul__

    def __neg__(self):
        return self.negative()

    def wkt(self):
        return 'POINT({} {})'.format(self.x, self.y)

    def dump_perl(self):
        return '[{},{}]'.format(self.x, self.y)

    ## affine operations, in place
    ## ---------------------------

    def scale(self, factor):
        """multiply both coordinates by ``factor``, truncating toward zero"""
        if not isgoodnum(factor):
            raise ValueError('bad scale factor: {}'.format(factor))
        self.x = int(self.x * factor)
        self.y = int(self.y * factor)

    def translate(self, dx, dy=None):
        """translate by ``(dx, dy)`` or by a ``Vector``"""
        if isinstance(dx, Point):
            self.x += dx.x
            self.y += dx.y
        else:
            self.x += _coord(dx)
            self.y += _coord(0 if dy is None else dy)

    def rotate(self, angle, center=None):
        """rotate by ``angle`` radians about the origin or about ``center``"""
        s = sin(angle)
        c = cos(angle)
        cx = 0 if center is None else center.x
        cy = 0 if center is None else center.y
        dx = self.x - cx
        dy = self.y - cy
        self.x = _coord(cx + c * dx - s * dy)
        self.y = _coord(cy + c * dy + s * dx)

    def rotated(self, angle, center=None):
        res = Point(self)
        res.rotate(angle, center)
        return res

    ## comparisons and distances
    ## -------------------------

    def coincides_with(self, point):
        return self.x == point.x and self.y == point.y

    def coincides_with_epsilon(self, point):
        """are the points within ``SCALED_EPSILON`` of each other on
        both axes?"""
        return (abs(self.x - point.x) < SCALED_EPSILON and
                abs(self.y - point.y) < SCALED_EPSILON)

    def distance_to_sq(self, point):
        dx = point.x - self.x
        dy = point.y - self.y
        return dx * dx + dy * dy

    def distance_to(self, other):
        """distance to a point, or to the closest point of a ``Line``
        segment"""
        if isinstance(other, Line):
            return self._distance_to_segment(other)
        return sqrt(self.distance_to_sq(other))

    def _distance_to_segment(self, line):
        a = line.a
        b = line.b
        dx = b.x - a.x
        dy = b.y - a.y
        l2 = dx * dx + dy * dy
        if l2 == 0:
            return self.distance_to(a)
        # parameter of the projection onto the infinite line through a, b
        t = ((self.x - a.x) * dx + (self.y - a.y) * dy) / l2
        if t < 0.0:
            return self.distance_to(a)
        if t > 1.0:
            return self.distance_to(b)
        px = a.x + t * dx - self.x
        py = a.y + t * dy - self.y
        return sqrt(px * px + py * py)

    def perp_distance_to(self, line):
        """distance to the infinite line through ``line``"""
        a = line.a
        b = line.b
        if a.coincides_with(b):
            return self.distance_to(a)
        n = (b.x - a.x) * (a.y - self.y) - (a.x - self.x) * (b.y - a.y)
        return abs(n) / line.length()

    ## orientation
    ## -----------

    def ccw(self, p1, p2=None):
        """Cross product of ``p1 - self`` and ``p2 - self``.  Positive if
        ``p1 -> p2`` turns counter-clockwise as seen from this point,
        negative if it turns clockwise, zero if the points are
        collinear.  ``ccw(line)`` uses the endpoints of ``line``.
        """
        if p2 is None:
            if not isinstance(p1, Line):
                raise ValueError('bad arguments to ccw: {}'.format(p1))
            p1, p2 = p1.a, p1.b
        return ((p1.x - self.x) * (p2.y - self.y) -
                (p1.y - self.y) * (p2.x - self.x))

    def ccw_angle(self, p1, p2):
        """counter-clockwise angle from ray ``self->p1`` to ray
        ``self->p2``, in the interval (0, 2*pi]"""
        angle = (atan2(p1.x - self.x, p1.y - self.y) -
                 atan2(p2.x - self.x, p2.y - self.y))
        return angle + 2 * PI if angle <= 0 else angle

    ## projection
    ## ----------

    def projection_onto(self, shape):
        """Return the closest point lying on ``shape``, which is either a
        ``Line`` or a ``Polyline``/``Polygon``.  Projections are clamped
        to the segment endpoints.
        """
        if isinstance(shape, Line):
            return self._project_segment(shape)
        if isinstance(shape, MultiPoint):
            running = shape.first_point()
            running_min = self.distance_to(running)
            for line in shape.lines():
                candidate = self._project_segment(line)
                d = self.distance_to(candidate)
                if d < running_min:
                    running = candidate
                    running_min = d
            return running
        raise ValueError('bad shape passed to projection_onto: {}'.format(shape))

    def _project_segment(self, line):
        a = line.a
        b = line.b
        if a.coincides_with(b):
            return Point(a)
        lx = b.x - a.x
        ly = b.y - a.y
        # affine weight of a in the projection theta*a + (1-theta)*b
        theta = ((b.x - self.x) * lx + (b.y - self.y) * ly) / (lx * lx + ly * ly)
        if 0.0 <= theta <= 1.0:
            return Point(theta * a.x + (1.0 - theta) * b.x,
                         theta * a.y + (1.0 - theta) * b.y)
        if self.distance_to_sq(a) < self.distance_to_sq(b):
            return Point(a)
        return Point(b)

    ## nearest point search
    ## --------------------

    def nearest_point_index(self, points):
        """index of the point in ``points`` closest to this one, or
        ``None`` if ``points`` is empty"""
        idx = None
        best = None
        for i, p in enumerate(points):
            d = self.distance_to_sq(p)
            if best is None or d < best:
                idx = i
                best = d
                if best == 0:
                    break
        return idx

    def nearest_waypoint_index(self, points, point):
        """Index of the path vertex in ``points`` that best serves as a
        waypoint from this point on to ``point``: the vertex minimizing
        the squared distance from here plus the squared distance on to
        ``point``.  ``None`` if ``points`` is empty.
        """
        idx = None
        best = None
        for i, p in enumerate(points):
            d = self.distance_to_sq(p) + p.distance_to_sq(point)
            if best is None or d < best:
                idx = i
                best = d
                if best == 0:
                    break
        return idx

    def nearest_point(self, points):
        idx = self.nearest_point_index(points)
        if idx is None:
            return None
        return Point(points[idx])

    def nearest_waypoint(self, points, point):
        idx = self.nearest_waypoint_index(points, point)
        if idx is None:
            return None
        return Point(points[idx])

    ## derived points
    ## --------------

    def negative(self):
        return Point(-self.x, -self.y)

    def vector_to(self, point):
        return Point(point.x - self.x, point.y - self.y)


Vector = Point


class Point3:
    """3D point with integer coordinates, composed of a 2D ``Point``
    (``xy``) and a ``z`` coordinate"""

    __slots__ = ('xy', 'z')

    def __init__(self, x=0, y=0, z=0):
        if isinstance(x, Point3):
            self.xy = Point(x.xy)
            self.z = x.z
        elif isinstance(x, Point):
            # Point3(point, z)
            self.xy = Point(x)
            self.z = _coord(y)
        else:
            self.xy = Point(x, y)
            self.z = _coord(z)

    @classmethod
    def new_scale(cls, x, y, z):
        return cls(scale_(x), scale_(y), scale_(z))

    @property
    def x(self):
        return self.xy.x

    @x.setter
    def x(self, value):
        self.xy.x = value

    @property
    def y(self):
        return self.xy.y

    @y.setter
    def y(self, value):
        self.xy.y = value

    def __repr__(self):
        return 'Point3({}, {}, {})'.format(self.x, self.y, self.z)

    def __str__(self):
        return '{},{},{}'.format(self.x, self.y, self.z)

    def __iter__(self):
        yield self.x
        yield self.y
        yield self.z

    def __eq__(self, other):
        if not isinstance(other, Point3):
            return NotImplemented
        return self.xy == other.xy and self.z == other.z

    def __hash__(self):
        return hash((self.x, self.y, self.z))

    def __add__(self, other):
        if not isinstance(other, Point3):
            return NotImplemented
        return Point3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other):
        if not isinstance(other, Point3):
            return NotImplemented
        return Point3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __neg__(self):
        return self.negative()

    def scale(self, factor):
        self.xy.scale(factor)
        self.z = int(self.z * factor)

    def translate(self, dx, dy=None, dz=0):
        if isinstance(dx, Point3):
            self.xy.translate(dx.xy)
            self.z += dx.z
        else:
            self.xy.translate(dx, dy)
            self.z += _coord(dz)

    def distance_to_sq(self, point):
        dz = point.z - self.z
        return self.xy.distance_to_sq(point.xy) + dz * dz

    def distance_to(self, point):
        return sqrt(self.distance_to_sq(point))

    def negative(self):
        return Point3(-self.x, -self.y, -self.z)

    def vector_to(self, point):
        return Point3(point.x - self.x, point.y - self.y, point.z - self.z)


## operations on real points
## -------------------------

class PointF:
    """2D point with real (unscaled) coordinates"""

    __slots__ = ('x', 'y')

    def __init__(self, x=0.0, y=0.0):
        if isinstance(x, PointF):
            self.x = x.x
            self.y = x.y
        else:
            self.x = _real(x)
            self.y = _real(y)

    @classmethod
    def new_unscale(cls, x, y=None):
        """make a real point from scaled coordinates or from a ``Point``"""
        if isinstance(x, Point):
            return cls(unscale(x.x), unscale(x.y))
        return cls(unscale(x), unscale(y))

    def __repr__(self):
        return 'PointF({}, {})'.format(self.x, self.y)

    def __str__(self):
        return '{},{}'.format(self.x, self.y)

    def __iter__(self):
        yield self.x
        yield self.y

    def __eq__(self, other):
        if not isinstance(other, PointF):
            return NotImplemented
        return self.x == other.x and self.y == other.y

    __hash__ = None

    def __add__(self, other):
        if not isinstance(other, PointF):
            return NotImplemented
        return PointF(self.x + other.x, self.y + other.y)

    def __sub__(self, other):
        if not isinstance(other, PointF):
            return NotImplemented
        return PointF(self.x - other.x, self.y - other.y)

    def __mul__(self, factor):
        if not isgoodnum(factor):
            return NotImplemented
        return PointF(factor * self.x, factor * self.y)

    __rmul__ = __mul__

    def __neg__(self):
        return self.negative()

    def wkt(self):
        return 'POINT({} {})'.format(self.x, self.y)

    def dump_perl(self):
        return '[{},{}]'.format(self.x, self.y)

    def scale(self, factor):
        self.x *= factor
        self.y *= factor

    def translate(self, dx, dy=None):
        if isinstance(dx, PointF):
            self.x += dx.x
            self.y += dx.y
        else:
            self.x += _real(dx)
            self.y += _real(0.0 if dy is None else dy)

    def rotate(self, angle, center=None):
        s = sin(angle)
        c = cos(angle)
        cx = 0.0 if center is None else center.x
        cy = 0.0 if center is None else center.y
        dx = self.x - cx
        dy = self.y - cy
        self.x = cx + c * dx - s * dy
        self.y = cy + c * dy + s * dx

    def rotated(self, angle, center=None):
        res = PointF(self)
        res.rotate(angle, center)
        return res

    def distance_to_sq(self, point):
        dx = point.x - self.x
        dy = point.y - self.y
        return dx * dx + dy * dy

    def distance_to(self, point):
        return sqrt(self.distance_to_sq(point))

    def negative(self):
        return PointF(-self.x, -self.y)

    def vector_to(self, point):
        return PointF(point.x - self.x, point.y - self.y)


VectorF = PointF


def cross(v1, v2):
    """z component of the cross product of two real 2D vectors"""
    return v1.x * v2.y - v1.y * v2.x


def dot(v1, v2=None):
    """dot product of two real 2D vectors, or of ``v1`` with itself"""
    if v2 is None:
        v2 = v1
    return v1.x * v2.x + v1.y * v2.y


def length(v):
    return sqrt(dot(v))


def l2(v):
    """squared length of a real 2D vector"""
    return dot(v)


class PointF3:
    """3D point with real coordinates, composed of a ``PointF`` (``xy``)
    and a ``z`` coordinate"""

    __slots__ = ('xy', 'z')

    def __init__(self, x=0.0, y=0.0, z=0.0):
        if isinstance(x, PointF3):
            self.xy = PointF(x.xy)
            self.z = x.z
        else:
            self.xy = PointF(x, y)
            self.z = _real(z)

    @classmethod
    def new_unscale(cls, x, y=None, z=None):
        """make a real 3D point from scaled coordinates or a ``Point3``"""
        if isinstance(x, Point3):
            return cls(unscale(x.x), unscale(x.y), unscale(x.z))
        return cls(unscale(x), unscale(y), unscale(z))

    @property
    def x(self):
        return self.xy.x

    @x.setter
    def x(self, value):
        self.xy.x = _real(value)

    @property
    def y(self):
        return self.xy.y

    @y.setter
    def y(self, value):
        self.xy.y = _real(value)

    def __repr__(self):
        return 'PointF3({}, {}, {})'.format(self.x, self.y, self.z)

    def __str__(self):
        return '{},{},{}'.format(self.x, self.y, self.z)

    def __iter__(self):
        yield self.x
        yield self.y
        yield self.z

    def __eq__(self, other):
        if not isinstance(other, PointF3):
            return NotImplemented
        return self.xy == other.xy and self.z == other.z

    __hash__ = None

    def __add__(self, other):
        if not isinstance(other, PointF3):
            return NotImplemented
        return PointF3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other):
        if not isinstance(other, PointF3):
            return NotImplemented
        return PointF3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __neg__(self):
        return self.negative()

    def scale(self, factor):
        self.xy.scale(factor)
        self.z *= factor

    def translate(self, dx, dy=None, dz=0.0):
        if isinstance(dx, PointF3):
            self.xy.translate(dx.xy)
            self.z += dx.z
        else:
            self.xy.translate(dx, dy)
            self.z += _real(dz)

    def distance_to_sq(self, point):
        dz = point.z - self.z
        return self.xy.distance_to_sq(point.xy) + dz * dz

    def distance_to(self, point):
        return sqrt(self.distance_to_sq(point))

    def negative(self):
        return PointF3(-self.x, -self.y, -self.z)

    def vector_to(self, point):
        return PointF3(point.x - self.x, point.y - self.y, point.z - self.z)


VectorF3 = PointF3


## segments and point lists
## ------------------------

class Line:
    """directed segment from ``a`` to ``b``"""

    __slots__ = ('a', 'b')

    def __init__(self, a, b):
        if not (isinstance(a, Point) and isinstance(b, Point)):
            raise ValueError('bad values passed to Line: {}, {}'.format(a, b))
        self.a = Point(a)
        self.b = Point(b)

    def __repr__(self):
        return 'Line({!r}, {!r})'.format(self.a, self.b)

    def __iter__(self):
        yield self.a
        yield self.b

    def __eq__(self, other):
        if not isinstance(other, Line):
            return NotImplemented
        return self.a == other.a and self.b == other.b

    __hash__ = None

    def length(self):
        return self.a.distance_to(self.b)

    def vector(self):
        return self.a.vector_to(self.b)

    def midpoint(self):
        return Point((self.a.x + self.b.x) / 2.0, (self.a.y + self.b.y) / 2.0)


class MultiPoint:
    """ordered list of points; subclasses decide how the points are
    joined into segments"""

    def __init__(self, points=None):
        self.points = []
        for p in points or []:
            if not isinstance(p, Point):
                raise ValueError('bad point in {}: {}'.format(type(self).__name__, p))
            self.points.append(Point(p))

    def __repr__(self):
        return '{}({!r})'.format(type(self).__name__, self.points)

    def __len__(self):
        return len(self.points)

    def __iter__(self):
        return iter(self.points)

    def __getitem__(self, i):
        return self.points[i]

    def __eq__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self.points == other.points

    __hash__ = None

    def first_point(self):
        if not self.points:
            raise ValueError('{} has no points'.format(type(self).__name__))
        return Point(self.points[0])

    def lines(self):
        raise NotImplementedError


class Polyline(MultiPoint):
    """open chain of segments"""

    def lines(self):
        return [Line(self.points[i - 1], self.points[i])
                for i in range(1, len(self.points))]


class Polygon(MultiPoint):
    """closed chain of segments; the closing segment is implied"""

    def lines(self):
        if not self.points:
            return []
        lines = [Line(self.points[i - 1], self.points[i])
                 for i in range(1, len(self.points))]
        lines.append(Line(self.points[-1], self.points[0]))
        return lines


__all__ = [
    'Point',
    'Vector',
    'Point3',
    'PointF',
    'VectorF',
    'PointF3',
    'VectorF3',
    'Line',
    'MultiPoint',
    'Polyline',
    'Polygon',
    'cross',
    'dot',
    'length',
    'l2',
]
