# -*- coding: utf-8 -*-
from importlib.metadata import PackageNotFoundError, version

from pygeom3d.comparer import (
    ComparerKey,
    EqualityComparer,
    Point3DComparer,
    RasterEqualityComparer,
    TolerantEqualityComparer,
    Vector3DComparer,
)
from pygeom3d.errors import ZeroLengthError
from pygeom3d.matrix import Matrix3D
from pygeom3d.point import Point3D, distance, squared_distance
from pygeom3d.vector import Vector3D, cross_product, dot_product, inner_angle

try:
    __version__ = version("pygeom3d")
except PackageNotFoundError:  # pragma: no cover - handled when package not installed
    __version__ = "unknown"

__all__ = [
    'ComparerKey',
    'EqualityComparer',
    'Matrix3D',
    'Point3D',
    'Point3DComparer',
    'RasterEqualityComparer',
    'TolerantEqualityComparer',
    'Vector3D',
    'Vector3DComparer',
    'ZeroLengthError',
    'cross_product',
    'distance',
    'dot_product',
    'inner_angle',
    'squared_distance',
]
