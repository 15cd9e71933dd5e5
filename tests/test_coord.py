import math

import pytest

from yapslice.coord import (
    EPSILON,
    SCALED_EPSILON,
    SCALING_FACTOR,
    iscoord,
    isgoodnum,
    scale_,
    unscale,
)


def test_constants():
    assert SCALING_FACTOR == 0.000001
    assert SCALED_EPSILON == 100
    assert math.isclose(unscale(SCALED_EPSILON), EPSILON)


def test_scale_rounds_to_integer():
    assert scale_(1.0) == 1000000
    assert isinstance(scale_(0.3), int)
    assert scale_(-2.5) == -2500000
    assert scale_(0.0000004) == 0
    assert scale_(0.0000006) == 1


def test_unscale_inverts_scale():
    for mm in (0.3, -17.25, 1234.5678, 0.0):
        assert math.isclose(unscale(scale_(mm)), mm, abs_tol=SCALING_FACTOR)


def test_number_checks():
    assert isgoodnum(1) and isgoodnum(1.5)
    assert not isgoodnum(True)
    assert not isgoodnum('1')
    assert iscoord(3)
    assert not iscoord(3.0)
    assert not iscoord(False)


def test_bad_values():
    with pytest.raises(ValueError):
        scale_(True)
    with pytest.raises(ValueError):
        scale_('1.0')
    with pytest.raises(ValueError):
        unscale(None)
