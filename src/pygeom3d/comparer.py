## alternative equality and hashing policies for pygeom3d values

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

"""equality comparers for ``Vector3D`` and ``Point3D``

===============
Overview
===============

The value types compare *exactly*: ``==`` is component-wise float
equality and ``hash()`` is consistent with it.  That is the right
default, but geometry produced by floating point arithmetic is rarely
exactly equal, so this module provides comparers, policy objects with
an ``equals(a, b)`` / ``hash(a)`` pair, that layer other notions of
equality over the same values.

Python's ``set`` and ``dict`` have no hook for a custom comparer, so
each comparer can wrap a value in a ``ComparerKey`` whose ``==`` and
``hash()`` delegate to the comparer: ::

   comparer = RasterEqualityComparer(0.01)
   unique = {comparer.key(p): p for p in points}
   unique = comparer.distinct(points)     # same thing, keeps input order

Which comparer?
===============

``Vector3DComparer``, ``Point3DComparer``
    tolerant ``equals`` (every component within ``tolerance``) with the
    *exact* hash of the value.  Two values that are equal under this
    comparer can hash differently, which breaks the hash/equality
    contract of hash tables; lookups then only find near-equal values
    that also happen to hash alike.  This is a known trade-off, kept
    because these comparers are meant for deduplication where most
    near-duplicates are in fact exact duplicates.

``TolerantEqualityComparer``
    the same tolerant ``equals`` for vectors and points, with a
    constant hash.  Every value lands in the same bucket and a hash
    table degrades to a linear scan with tolerant comparison: correct,
    but O(n) per lookup.

``RasterEqualityComparer``
    quantizes each coordinate into a raster cell and compares cells.
    This is a real equivalence relation with a consistent hash.  Cell
    indices are packed 10 bits per axis, so cells more than about 512
    cells from the centroid alias onto other cells' hashes; that costs
    extra ``equals`` calls, never wrong answers.

The tolerant comparers are not transitive: ``a`` may equal ``b`` and
``b`` equal ``c`` while ``a`` and ``c`` differ.  ``distinct()`` keeps
the first value it meets from each such chain.

Comparers that accept both vectors and points never consider a vector
equal to a point, whatever their coordinates.
"""

import logging
from abc import ABC, abstractmethod
from math import floor, isfinite

from pygeom3d.point import Point3D
from pygeom3d.scalars import isgoodnum, isundefined
from pygeom3d.vector import Vector3D

logger = logging.getLogger(__name__)

## bits per axis in the packed raster hash
RASTER_BITS = 10

## width of the packed raster hash; results wrap like a signed
## two's-complement integer of this many bits
HASH_BITS = 32


def _wrap(n, bits=HASH_BITS):
    """wrap integer ``n`` into a signed ``bits`` wide integer"""
    half = 1 << (bits - 1)
    return ((n + half) % (1 << bits)) - half


def _positive(value, name):
    if not isgoodnum(value) or not value > 0:
        raise ValueError('{} must be a positive number, got {!r}'.format(name, value))
    return float(value)


class ComparerKey:
    """Wrap a value so that ``==`` and ``hash()`` follow a comparer.

    Two keys compare equal only if they were made by the same comparer
    and the comparer considers their values equal.
    """

    __slots__ = ('value', 'comparer', '_hash')

    def __init__(self, value, comparer):
        self.value = value
        self.comparer = comparer
        self._hash = comparer.hash(value)

    def __eq__(self, other):
        if not isinstance(other, ComparerKey):
            return NotImplemented
        return self.comparer is other.comparer and self.comparer.equals(self.value, other.value)

    def __hash__(self):
        return self._hash

    def __repr__(self):
        return 'ComparerKey({!r}, {!r})'.format(self.value, self.comparer)


class EqualityComparer(ABC):
    """Base class for equality policies.

    Subclasses provide ``equals(a, b)`` and ``hash(a)``; the helpers
    for using a comparer with Python collections live here.
    """

    ## value types this comparer understands
    types = (Vector3D, Point3D)

    def check(self, *values):
        for v in values:
            if not isinstance(v, self.types):
                raise TypeError('{} cannot compare {!r}'.format(type(self).__name__, v))

    @abstractmethod
    def equals(self, a, b):
        """true if ``a`` and ``b`` are equal under this comparer"""

    @abstractmethod
    def hash(self, a):
        """hash code of ``a`` under this comparer"""

    def key(self, value):
        """wrap ``value`` for use as a ``set`` member or ``dict`` key"""
        return ComparerKey(value, self)

    def distinct(self, values):
        """Return the first of each group of equal values, in input order."""
        seen = {}
        for v in values:
            seen.setdefault(self.key(v), v)
        return list(seen.values())

    def contains(self, values, value):
        """linear membership test of ``value`` in ``values`` under this comparer"""
        return any(self.equals(v, value) for v in values)


class _TolerantEquals(EqualityComparer):

    def __init__(self, tolerance):
        self._tolerance = _positive(tolerance, 'tolerance')
        logger.debug('%s created with tolerance %g', type(self).__name__, self._tolerance)

    @property
    def tolerance(self):
        """per-axis maximum absolute difference still considered equal"""
        return self._tolerance

    def equals(self, a, b):
        self.check(a, b)
        if type(a) is not type(b):
            return False
        t = self._tolerance
        return abs(a.x - b.x) <= t and abs(a.y - b.y) <= t and abs(a.z - b.z) <= t

    def __repr__(self):
        return '{}({!r})'.format(type(self).__name__, self._tolerance)


class Vector3DComparer(_TolerantEquals):
    """Tolerant ``equals`` with the exact hash of ``Vector3D``.

    Equal vectors may hash differently, see the module documentation.
    """

    types = (Vector3D,)

    def hash(self, a):
        self.check(a)
        return hash(a)


class Point3DComparer(_TolerantEquals):
    """Tolerant ``equals`` with the exact hash of ``Point3D``.

    Equal points may hash differently, see the module documentation.
    """

    types = (Point3D,)

    def hash(self, a):
        self.check(a)
        return hash(a)


class TolerantEqualityComparer(_TolerantEquals):
    """Tolerant ``equals`` for vectors and points with a constant hash.

    No hash can be consistent with a tolerance that is not transitive,
    so everything hashes to zero and hash tables fall back to
    ``equals``.
    """

    def hash(self, a):
        self.check(a)
        return 0


class RasterEqualityComparer(EqualityComparer):
    """Compare vectors and points by the raster cell they fall into.

    A coordinate ``v`` lies in cell ``floor((v - c) / raster_size)``
    where ``c`` is the matching coordinate of ``centroid`` (default the
    origin).  Moving the centroid into the middle of the data keeps
    cell indices small and the packed hash free of aliasing.

    Undefined coordinates have no cell and raise ``ValueError``, as do
    coordinates so far from the centroid that the cell index overflows.
    Vectors and points are never equal to each other.
    """

    def __init__(self, raster_size, centroid=None):
        self._raster_size = _positive(raster_size, 'raster size')
        if centroid is None:
            centroid = Point3D.ORIGIN
        elif not isinstance(centroid, Point3D):
            centroid = Point3D(centroid)
        self._centroid = centroid
        logger.debug('RasterEqualityComparer created with raster size %g around %s',
                     self._raster_size, centroid)

    @property
    def raster_size(self):
        return self._raster_size

    @property
    def centroid(self):
        return self._centroid

    def cell(self, a):
        """integer raster cell ``(i, j, k)`` containing ``a``"""
        self.check(a)
        if isundefined(a.x, a.y, a.z):
            raise ValueError('cannot rasterize undefined value {!r}'.format(a))
        c = self._centroid
        s = self._raster_size
        q = ((a.x - c.x) / s, (a.y - c.y) / s, (a.z - c.z) / s)
        if not all(isfinite(v) for v in q):
            raise ValueError('{!r} is too far from the centroid for raster size {}, no cell index exists'.format(a, s))
        return tuple(floor(v) for v in q)

    def equals(self, a, b):
        return self.cell(a) == self.cell(b) and type(a) is type(b)

    def hash(self, a):
        i, j, k = self.cell(a)
        return _wrap(i + (j << RASTER_BITS) + (k << (2 * RASTER_BITS)))

    def __repr__(self):
        return 'RasterEqualityComparer({!r}, {!r})'.format(self._raster_size, self._centroid)
