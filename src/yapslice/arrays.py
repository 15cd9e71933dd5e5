## flat numpy views of yapSlice point sequences
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

"""Flat array views of point sequences for rendering collaborators.

Renderers and other consumers copy our points into their own buffers.
These helpers hand them plain ``numpy`` arrays, one row per point,
flagged read-only so nobody mistakes them for live geometry.
"""

from __future__ import annotations

from typing import Iterable, List, Optional, Tuple, Union

import numpy as np

from yapslice.point import Point, Point3, PointF, PointF3

AnyPoint = Union[Point, Point3, PointF, PointF3]

_WIDTHS = {Point: 2, Point3: 3, PointF: 2, PointF3: 3}


def _rows(points: Iterable[AnyPoint], kinds: Tuple[type, ...]) -> Tuple[List[tuple], int]:
    rows = []
    kind = None
    for p in points:
        if type(p) not in kinds:
            raise ValueError('bad point for array conversion: ' + repr(p))
        if kind is None:
            kind = type(p)
        elif type(p) is not kind:
            raise ValueError('mixed point types in sequence')
        rows.append(tuple(p))
    width = _WIDTHS[kind] if kind is not None else 2
    return rows, width


def _frozen(arr: np.ndarray) -> np.ndarray:
    arr.flags.writeable = False
    return arr


def points_to_array(points: Iterable[Union[Point, Point3]]) -> np.ndarray:
    """Return an ``int64`` array of shape ``(n, 2)`` for ``Point`` or
    ``(n, 3)`` for ``Point3`` sequences."""

    rows, width = _rows(points, (Point, Point3))
    return _frozen(np.array(rows, dtype=np.int64).reshape(len(rows), width))


def pointfs_to_array(points: Iterable[Union[PointF, PointF3]]) -> np.ndarray:
    """Return a ``float64`` array of shape ``(n, 2)`` or ``(n, 3)``."""

    rows, width = _rows(points, (PointF, PointF3))
    return _frozen(np.array(rows, dtype=np.float64).reshape(len(rows), width))


def array_to_points(arr) -> List[AnyPoint]:
    """Inverse of the conversions above.  Integer arrays give integer
    points, floating arrays give real points."""

    arr = np.asarray(arr)
    if arr.ndim != 2 or arr.shape[1] not in (2, 3):
        raise ValueError('bad array shape: {}'.format(arr.shape))
    if np.issubdtype(arr.dtype, np.integer):
        cls = Point if arr.shape[1] == 2 else Point3
        return [cls(*(int(v) for v in row)) for row in arr]
    if np.issubdtype(arr.dtype, np.floating):
        cls = PointF if arr.shape[1] == 2 else PointF3
        return [cls(*(float(v) for v in row)) for row in arr]
    raise ValueError('bad array dtype: {}'.format(arr.dtype))


def bounding_box(points: Iterable[Union[Point, Point3]]) -> Optional[Tuple[AnyPoint, AnyPoint]]:
    """Return the ``(min, max)`` corners of an integer point sequence, or
    ``None`` if it is empty."""

    arr = points_to_array(points)
    if arr.shape[0] == 0:
        return None
    lo, hi = array_to_points(np.stack([arr.min(axis=0), arr.max(axis=0)]))
    return lo, hi


__all__ = [
    'points_to_array',
    'pointfs_to_array',
    'array_to_points',
    'bounding_box',
]
