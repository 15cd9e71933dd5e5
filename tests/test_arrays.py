import numpy as np
import pytest

from yapslice.arrays import array_to_points, bounding_box, pointfs_to_array, points_to_array
from yapslice.point import Point, Point3, PointF, PointF3


def test_points_to_array():
    arr = points_to_array([Point(1, 2), Point(-3, 4)])
    assert arr.shape == (2, 2)
    assert arr.dtype == np.int64
    assert arr.tolist() == [[1, 2], [-3, 4]]
    assert not arr.flags.writeable
    with pytest.raises(ValueError):
        arr[0, 0] = 5


def test_point3_rows():
    arr = points_to_array([Point3(1, 2, 3)])
    assert arr.shape == (1, 3)
    assert array_to_points(arr) == [Point3(1, 2, 3)]


def test_empty():
    arr = points_to_array([])
    assert arr.shape == (0, 2)
    assert bounding_box([]) is None


def test_real_points():
    arr = pointfs_to_array([PointF(0.5, 1.5), PointF(2.0, -1.0)])
    assert arr.dtype == np.float64
    assert array_to_points(arr) == [PointF(0.5, 1.5), PointF(2.0, -1.0)]
    arr3 = pointfs_to_array([PointF3(1.0, 2.0, 3.0)])
    assert arr3.shape == (1, 3)


def test_bad_sequences():
    with pytest.raises(ValueError):
        points_to_array([Point(0, 0), Point3(0, 0, 0)])
    with pytest.raises(ValueError):
        points_to_array([PointF(0.0, 0.0)])
    with pytest.raises(ValueError):
        array_to_points(np.zeros((3, 4), dtype=np.int64))
    with pytest.raises(ValueError):
        array_to_points(np.array([['a', 'b']]))


def test_bounding_box():
    lo, hi = bounding_box([Point(5, -2), Point(-1, 7), Point(3, 3)])
    assert lo == Point(-1, -2)
    assert hi == Point(5, 7)
    lo3, hi3 = bounding_box([Point3(0, 0, 9), Point3(2, -2, 1)])
    assert lo3 == Point3(0, -2, 1) and hi3 == Point3(2, 0, 9)
