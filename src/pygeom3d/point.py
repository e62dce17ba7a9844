## immutable 3D positions for pygeom3d

## Copyright (c) 2026 pygeom3d contributors
## All rights reserved

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

"""immutable 3D positions

A ``Point3D`` is an absolute position.  Unlike a vector, a point has
no length or direction; the relation between two points is their
distance.  A point can be turned into the vector from the origin to
it with ``to_vector()``, which drops the positional meaning and keeps
the coordinates.

Points follow the same rules as vectors: they are immutable, ``==`` is
exact, hashes are consistent with ``==``, and NaN or infinite
coordinates make a point *undefined* rather than invalid.

Arithmetic ::

   p + v   ->  Point3D   translate p by v
   p - v   ->  Point3D   translate p by -v
   p + q   ->  Point3D   component sum (convenient, not geometric)
   p - q   ->  Point3D   component difference, *not* a vector
"""

from __future__ import annotations

from math import sqrt

import numpy as np

from pygeom3d.scalars import fmtrow, isundefined, mixhash, tofloat, tofloats
from pygeom3d.vector import Vector3D


class Point3D:
    """immutable point ``[x, y, z]`` in 3D space"""

    __slots__ = ('_x', '_y', '_z')

    __array_ufunc__ = None

    FIELDS = ('X', 'Y', 'Z')

    def __init__(self, *args):
        if len(args) == 3:
            self._x, self._y, self._z = (tofloat(args[0], 'x'),
                                         tofloat(args[1], 'y'),
                                         tofloat(args[2], 'z'))
        elif len(args) == 1:
            self._x, self._y, self._z = tofloats(args[0], 3)
        elif not args:
            self._x = self._y = self._z = 0.0
        else:
            raise ValueError('Point3D takes three coordinates or one sequence, got {} arguments'.format(len(args)))

    @property
    def x(self) -> float:
        return self._x

    @property
    def y(self) -> float:
        return self._y

    @property
    def z(self) -> float:
        return self._z

    def squared_distance(self, other: Point3D) -> float:
        """squared distance to ``other``, no square root required"""
        return squared_distance(self, other)

    def distance(self, other: Point3D) -> float:
        """euclidean distance to ``other``"""
        return distance(self, other)

    def is_undefined(self) -> bool:
        return isundefined(self._x, self._y, self._z)

    def to_vector(self) -> Vector3D:
        """the vector from the origin to this point"""
        return Vector3D(self._x, self._y, self._z)

    def to_list(self):
        return [self._x, self._y, self._z]

    def to_numpy(self):
        return np.array([self._x, self._y, self._z], dtype=float)

    ## operators
    ## ---------

    def __neg__(self):
        # mirror through the origin
        return Point3D(-self._x, -self._y, -self._z)

    def __pos__(self):
        return self

    def __add__(self, other):
        if not isinstance(other, (Vector3D, Point3D)):
            return NotImplemented
        return Point3D(self._x + other.x, self._y + other.y, self._z + other.z)

    def __sub__(self, other):
        if not isinstance(other, (Vector3D, Point3D)):
            return NotImplemented
        return Point3D(self._x - other.x, self._y - other.y, self._z - other.z)

    def __eq__(self, other):
        if not isinstance(other, Point3D):
            return NotImplemented
        # exact, no tolerance here
        return self._x == other._x and self._y == other._y and self._z == other._z

    def __ne__(self, other):
        if not isinstance(other, Point3D):
            return NotImplemented
        return self._x != other._x or self._y != other._y or self._z != other._z

    def __hash__(self):
        return mixhash(self._x, self._y, self._z)

    def __iter__(self):
        yield self._x
        yield self._y
        yield self._z

    def __reduce__(self):
        return (Point3D, (self._x, self._y, self._z))

    def __repr__(self):
        return 'Point3D({!r}, {!r}, {!r})'.format(self._x, self._y, self._z)

    def __str__(self):
        return fmtrow(self._x, self._y, self._z)


Point3D.ORIGIN = Point3D(0.0, 0.0, 0.0)


def squared_distance(a: Point3D, b: Point3D) -> float:
    """squared euclidean distance between points ``a`` and ``b``"""
    dx = a.x - b.x
    dy = a.y - b.y
    dz = a.z - b.z
    return dx * dx + dy * dy + dz * dz


def distance(a: Point3D, b: Point3D) -> float:
    """ compute the euclidean distance between two points ``a`` and ``b``"""
    return sqrt(squared_distance(a, b))
