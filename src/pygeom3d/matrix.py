## 3x3 linear transformation matrices for pygeom3d

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

"""immutable 3x3 matrices acting on ``Vector3D`` and ``Point3D``

A matrix is nine doubles ``m11 .. m33`` in row-major order.  Matrices
multiply column vectors from the left, so ``M * v`` computes the dot
product of each row of ``M`` with ``v``.  Points are transformed by the
same linear map; there is no translation part in a 3x3 matrix.

Like the vector types, matrices are immutable and compare exactly.
"""

from __future__ import annotations

import logging
from math import cos, sin

import mpmath as mpm
import numpy as np

from pygeom3d.point import Point3D
from pygeom3d.scalars import (
    fmtrow,
    isgoodnum,
    isundefined,
    mixhash,
    tofloat,
    tofloats,
)
from pygeom3d.vector import Vector3D, cross_product, inner_angle

logger = logging.getLogger(__name__)

## squared length of source x target below which rotate_to() treats
## the two directions as parallel (or antiparallel)
PARALLEL_EPSILON = 1e-20

## working precision, in bits, for the determinant.  A product of three
## doubles needs at most 159 bits, so each cofactor product is exact;
## the sums of terms with very different exponents can still round
DETERMINANT_PRECISION = 192

_NAMES = ('M11', 'M12', 'M13',
          'M21', 'M22', 'M23',
          'M31', 'M32', 'M33')


def _element(index):
    return property(lambda self: self._m[index],
                    doc='matrix element {}'.format(_NAMES[index]))


def _checkindex(index):
    if isinstance(index, bool) or index not in (1, 2, 3):
        raise IndexError('index must be in [1,2,3], but got {}'.format(index))
    return index - 1


class Matrix3D:
    """3x3 transformation matrix class for transforming 3D vectors and points

    ``Matrix3D`` accepts a number of initializer forms:

    ``Matrix3D()``
        the identity matrix
    ``Matrix3D(d)``
        ``d`` on the diagonal, zero elsewhere
    ``Matrix3D(m11, m12, m13, m21, m22, m23, m31, m32, m33)``
        nine explicit elements
    ``Matrix3D([m11, ..., m33])``
        a flat row-major sequence of nine numbers
    ``Matrix3D([[m11, m12, m13], [m21, m22, m23], [m31, m32, m33]])``
        a nested 3x3 sequence (numpy arrays work as well)
    ``Matrix3D(other)``
        a copy of another ``Matrix3D``

    Anything else raises ``ValueError``.
    """

    __slots__ = ('_m',)

    __array_ufunc__ = None

    FIELDS = _NAMES

    def __init__(self, *args):
        if len(args) == 9:
            self._m = tuple(tofloat(x, 'matrix element') for x in args)
        elif len(args) == 1:
            self._m = self._from_one(args[0])
        elif not args:
            self._m = (1.0, 0.0, 0.0,
                       0.0, 1.0, 0.0,
                       0.0, 0.0, 1.0)
        else:
            raise ValueError('bad number of arguments in matrix initialization: {}'.format(len(args)))

    @staticmethod
    def _from_one(a):
        if isinstance(a, Matrix3D):
            return a._m
        if isgoodnum(a):
            d = float(a)
            return (d, 0.0, 0.0,
                    0.0, d, 0.0,
                    0.0, 0.0, d)
        if a is None:
            raise ValueError('matrix initializer must not be None')
        try:
            items = list(a)
        except TypeError:
            raise ValueError('bad thing used in attempt to initialize matrix: {!r}'.format(a)) from None
        if len(items) == 9:
            return tofloats(items, 9, 'matrix elements')
        if len(items) == 3:
            rows = []
            for r in items:
                if isgoodnum(r):
                    raise ValueError('expected a 3x3 nested sequence, got a flat sequence of length 3')
                rows.extend(tofloats(r, 3, 'matrix row'))
            return tuple(rows)
        raise ValueError('invalid array length {}, expected 9 elements or 3 rows'.format(len(items)))

    m11 = _element(0)
    m12 = _element(1)
    m13 = _element(2)
    m21 = _element(3)
    m22 = _element(4)
    m23 = _element(5)
    m31 = _element(6)
    m32 = _element(7)
    m33 = _element(8)

    ## factories
    ## ---------

    @classmethod
    def scale(cls, sx: float, sy: float, sz: float) -> Matrix3D:
        """diagonal matrix scaling each axis independently"""
        return cls(sx, 0.0, 0.0,
                   0.0, sy, 0.0,
                   0.0, 0.0, sz)

    @classmethod
    def rotate(cls, axis: Vector3D, theta: float) -> Matrix3D:
        """Return the rotation by ``theta`` radians about ``axis``.

        The rotation is right-handed: looking down the axis towards the
        origin, positive angles turn counter-clockwise.  Points on the
        axis are left unchanged.  ``axis`` need not be a unit vector,
        but a zero-length axis raises ``ZeroLengthError``.
        """
        u = axis.normalized()
        ux = u.x
        uy = u.y
        uz = u.z

        cang = cos(theta)
        cmin = 1.0 - cang
        sang = sin(theta)

        # R = I*cos + (1-cos)*(u (x) u) + sin*[u]x
        return cls(cang + ux*ux*cmin, ux*uy*cmin - uz*sang, ux*uz*cmin + uy*sang,
                   uy*ux*cmin + uz*sang, cang + uy*uy*cmin, uy*uz*cmin - ux*sang,
                   uz*ux*cmin - uy*sang, uz*uy*cmin + ux*sang, cang + uz*uz*cmin)

    @classmethod
    def rotate_to(cls, source: Vector3D, target: Vector3D) -> Matrix3D:
        """Return the rotation that turns the direction of ``source``
        into the direction of ``target``.

        If the two directions are parallel or antiparallel the rotation
        axis is not well defined, and the identity is returned instead
        of a numerically unstable result.
        """
        source = source.normalized()
        target = target.normalized()
        axis = cross_product(source, target)
        if axis.squared_length() < PARALLEL_EPSILON:
            logger.debug('rotate_to: %s and %s are parallel, using identity', source, target)
            return cls.IDENTITY
        return cls.rotate(axis, inner_angle(source, target))

    ## properties and queries
    ## ----------------------

    def is_undefined(self) -> bool:
        """true if any element is NaN or infinite"""
        return isundefined(*self._m)

    def determinant(self) -> float:
        """determinant by cofactor expansion, evaluated in extended
        precision and then rounded to float"""
        with mpm.workprec(DETERMINANT_PRECISION):
            m11, m12, m13, m21, m22, m23, m31, m32, m33 = (mpm.mpf(x) for x in self._m)
            det = (m11*m22*m33 - m11*m23*m32
                   + m21*m32*m13 - m21*m12*m33
                   + m31*m12*m23 - m31*m22*m13)
        return float(det)

    def transposed(self) -> Matrix3D:
        m = self._m
        return Matrix3D(m[0], m[3], m[6],
                        m[1], m[4], m[7],
                        m[2], m[5], m[8])

    def row(self, index: int) -> Vector3D:
        """row ``index`` (1, 2 or 3) as a vector"""
        i = _checkindex(index) * 3
        return Vector3D(self._m[i], self._m[i + 1], self._m[i + 2])

    def column(self, index: int) -> Vector3D:
        """column ``index`` (1, 2 or 3) as a vector"""
        j = _checkindex(index)
        return Vector3D(self._m[j], self._m[j + 3], self._m[j + 6])

    ## conversions
    ## -----------

    def to_row_major(self):
        return list(self._m)

    def to_column_major(self):
        return list(self.transposed()._m)

    def to_list(self):
        m = self._m
        return [list(m[0:3]), list(m[3:6]), list(m[6:9])]

    def to_numpy(self):
        return np.array(self._m, dtype=float).reshape(3, 3)

    ## operators
    ## ---------

    def __neg__(self):
        return Matrix3D(*(-x for x in self._m))

    def __pos__(self):
        return self

    def __add__(self, other):
        if not isinstance(other, Matrix3D):
            return NotImplemented
        return Matrix3D(*(a + b for a, b in zip(self._m, other._m)))

    def __sub__(self, other):
        if not isinstance(other, Matrix3D):
            return NotImplemented
        return Matrix3D(*(a - b for a, b in zip(self._m, other._m)))

    def _apply(self, x, y, z):
        m = self._m
        return (m[0]*x + m[1]*y + m[2]*z,
                m[3]*x + m[4]*y + m[5]*z,
                m[6]*x + m[7]*y + m[8]*z)

    def __matmul__(self, x):
        """matrix product ``M @ X`` for a matrix, vector or point ``X``"""
        if isinstance(x, Matrix3D):
            a = self._m
            b = x._m
            return Matrix3D(*(a[i]*b[j] + a[i + 1]*b[j + 3] + a[i + 2]*b[j + 6]
                              for i in (0, 3, 6) for j in (0, 1, 2)))
        if isinstance(x, Vector3D):
            return Vector3D(*self._apply(x.x, x.y, x.z))
        if isinstance(x, Point3D):
            return Point3D(*self._apply(x.x, x.y, x.z))
        return NotImplemented

    def __mul__(self, x):
        # If x is a matrix, compute MX.  If x is a vector or a point,
        # compute Mx.  If x is a scalar, compute xM.
        if isgoodnum(x):
            return Matrix3D(*(e * x for e in self._m))
        return self.__matmul__(x)

    def __rmul__(self, x):
        if not isgoodnum(x):
            return NotImplemented
        return Matrix3D(*(x * e for e in self._m))

    ## exact equality and hashing
    ## --------------------------

    def __eq__(self, other):
        if not isinstance(other, Matrix3D):
            return NotImplemented
        # element by element, so that NaN never equals itself
        return all(a == b for a, b in zip(self._m, other._m))

    def __ne__(self, other):
        if not isinstance(other, Matrix3D):
            return NotImplemented
        return any(a != b for a, b in zip(self._m, other._m))

    def __hash__(self):
        return mixhash(*self._m)

    def __reduce__(self):
        return (Matrix3D, self._m)

    def __repr__(self):
        return 'Matrix3D({})'.format(', '.join(repr(x) for x in self._m))

    def __str__(self):
        m = self._m
        return '\n'.join((fmtrow(*m[0:3]), fmtrow(*m[3:6]), fmtrow(*m[6:9])))


Matrix3D.IDENTITY = Matrix3D(1.0)
Matrix3D.UNDEFINED = Matrix3D(float('nan'))
