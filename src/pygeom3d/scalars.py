## scalar helpers shared by the pygeom3d value types

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

"""scalar operations shared by ``Vector3D``, ``Point3D`` and ``Matrix3D``

Scalars in **pygeom3d** are ordinary Python ``int`` or ``float``
numbers (numpy floating and integer scalars are accepted too), stored
as ``float`` once they become part of a value.  Booleans are not
numbers for our purposes, even though Python lets them take part in
integer arithmetic.
"""

from math import isfinite
from numbers import Integral, Real

## text rendering of a single component: fixed point, three decimals,
## padded to six characters.  str.format ignores the process locale,
## so the decimal separator is always '.'
TEXT_FORMAT = '{:6.3f}'

## multiplicative hash mixing, see mixhash()
HASH_SEED = 17
HASH_FACTOR = 23
HASH_MASK = (1 << 64) - 1


def isgoodnum(n):
    """ determine if an argument is actually a scalar number, and not boolean
    """
    return (not isinstance(n, bool)) and isinstance(n, (Integral, Real))


def isundefined(*values):
    """true if any of the values is NaN or +/- infinity"""
    return not all(isfinite(v) for v in values)


def tofloat(n, name='value'):
    """convert a scalar number to ``float``, rejecting booleans and
    anything that is not a real number"""
    if not isgoodnum(n):
        raise ValueError('bad {} for a geometry component: {!r}'.format(name, n))
    return float(n)


def tofloats(values, length, name='values'):
    """Copy ``values`` into a tuple of ``length`` floats.

    ``values`` may be any sized iterable (list, tuple, numpy array,
    another value type).  ``None`` and iterables of the wrong length
    are rejected with ``ValueError``; the error names the actual
    length.
    """
    if values is None:
        raise ValueError('{} must not be None'.format(name))
    try:
        items = list(values)
    except TypeError:
        raise ValueError('{} must be a sequence of {} numbers, got {!r}'.format(
            name, length, values)) from None
    if len(items) != length:
        raise ValueError('expected a sequence of length {}, but actual length is {}'.format(
            length, len(items)))
    return tuple(tofloat(x, name) for x in items)


def mixhash(*values):
    """combine the hashes of ``values`` with the 17/23 multiplicative
    scheme.  Equal floats hash equal (``0.0`` and ``-0.0`` included),
    so the result is consistent with exact component equality."""
    h = HASH_SEED
    for v in values:
        h = (h * HASH_FACTOR + hash(v)) & HASH_MASK
    return h


def fmtrow(*values):
    """render components as ``[ x.xxx  y.yyy  z.zzz]``"""
    return '[' + ' '.join(TEXT_FORMAT.format(v) for v in values) + ']'
