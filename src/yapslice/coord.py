## fixed-point coordinate model for yapSlice
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

"""fixed-point coordinate model for **yapSlice**

Coordinates in **yapSlice** are ordinary Python ``int`` values in an
internal fixed-point unit.  Physical lengths are ``float`` millimetres.
The polygon-clipping kernels that consume our points need exact integer
arithmetic to stay robust across repeated boolean operations, so
anything that must survive clipping lives in scaled coordinates, and
anything that must be physically accurate (areas, reported distances,
user feedback) lives in unscaled ``float`` values.

constants
=========

``SCALING_FACTOR`` is the size of one coordinate unit in millimetres;
``scale_()`` and ``unscale()`` convert between the two worlds.
``EPSILON`` is the real-valued tolerance and ``SCALED_EPSILON`` its
fixed-point counterpart.  Redefine these at your peril: every
coordinate already in flight was computed with the old values.

"""

from math import pi
from numbers import Integral, Real

## constants
SCALING_FACTOR = 0.000001
EPSILON = 1e-4
PI = pi


def isgoodnum(n):
    """ determine if an argument is actually a scalar number, and not boolean
    """
    return (not isinstance(n, bool)) and isinstance(n, Real)


def iscoord(n):
    """ is it an integer coordinate (and not a boolean)?"""
    return (not isinstance(n, bool)) and isinstance(n, Integral)


def scale_(val):
    """convert a real length ``val`` in millimetres to the nearest
    fixed-point coordinate"""
    if not isgoodnum(val):
        raise ValueError('bad value passed to scale_: {}'.format(val))
    return int(round(val / SCALING_FACTOR))


def unscale(val):
    """convert a fixed-point coordinate ``val`` back to millimetres"""
    if not isgoodnum(val):
        raise ValueError('bad value passed to unscale: {}'.format(val))
    return val * SCALING_FACTOR


SCALED_EPSILON = scale_(EPSILON)


__all__ = [
    'SCALING_FACTOR',
    'EPSILON',
    'SCALED_EPSILON',
    'PI',
    'isgoodnum',
    'iscoord',
    'scale_',
    'unscale',
]
