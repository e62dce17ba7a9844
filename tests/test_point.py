import pickle
import random
from math import inf, nan, pi, sqrt

import numpy as np
import pytest

from pygeom3d.point import *
from pygeom3d.vector import Vector3D
## unit tests for pygeom3d point.py


class TestPointCreate:

    def test_create(self):
        p = Point3D(1, 2, 3)
        assert p.x == 1 and p.y == 2 and p.z == 3
        assert not p.is_undefined()
        assert Point3D() == Point3D.ORIGIN == Point3D(0, 0, 0)

    def test_from_sequence(self):
        arr = [0.1, 0.2, 0.3]
        p = Point3D(arr)
        arr[1] = 7.0
        assert p == Point3D(0.1, 0.2, 0.3)
        assert Point3D(np.array([1, 2, 3])) == Point3D(1, 2, 3)

    def test_invalid_sequences(self):
        with pytest.raises(ValueError):
            Point3D(None)
        with pytest.raises(ValueError, match='actual length is 2'):
            Point3D([1, 2])
        with pytest.raises(ValueError, match='actual length is 0'):
            Point3D([])
        with pytest.raises(ValueError):
            Point3D([1, 2, 3, 4])
        with pytest.raises(ValueError):
            Point3D(1, 2, 3, 4)
        with pytest.raises(ValueError):
            Point3D(1, 'two', 3)

    def test_immutable(self):
        p = Point3D(1, 2, 3)
        with pytest.raises(AttributeError):
            p.y = 0

    def test_undefined(self):
        assert Point3D(nan, 0, 0).is_undefined()
        assert Point3D(0, -inf, 0).is_undefined()
        assert Point3D(0, 0, inf).is_undefined()


class TestPointDistance:

    def test_distance(self):
        a = Point3D(1, 2, 3)
        b = Point3D(4, 6, 3)
        assert squared_distance(a, b) == 25
        assert distance(a, b) == 5
        assert a.distance(b) == b.distance(a) == 5
        assert a.squared_distance(b) == 25
        assert a.distance(a) == 0

    def test_distance_symmetric(self):
        rnd = random.Random(42)
        for i in range(100):
            a = Point3D(rnd.uniform(-10, 10), rnd.uniform(-10, 10), rnd.uniform(-10, 10))
            b = Point3D(rnd.uniform(-10, 10), rnd.uniform(-10, 10), rnd.uniform(-10, 10))
            assert distance(a, b) == distance(b, a)
            assert distance(a, b) == pytest.approx(sqrt(squared_distance(a, b)))


class TestPointOperators:

    def test_translate(self):
        p = Point3D(1, 2, 3)
        v = Vector3D(pi, 4, 5)
        assert p + v == Point3D(1 + pi, 6, 8)
        assert p - v == Point3D(1 - pi, -2, -2)
        assert isinstance(p + v, Point3D)

    def test_point_arithmetic(self):
        p = Point3D(1, 2, 3)
        q = Point3D(4, 6, 3)
        s = p + q
        d = q - p
        assert isinstance(s, Point3D) and s == Point3D(5, 8, 6)
        # the difference of two points is a point here, not a vector
        assert isinstance(d, Point3D) and d == Point3D(3, 4, 0)

    def test_unary(self):
        p = Point3D(1, -2, 3)
        assert +p == p
        assert -p == Point3D(-1, 2, -3)

    def test_bad_operands(self):
        p = Point3D(1, 2, 3)
        with pytest.raises(TypeError):
            p + 1
        with pytest.raises(TypeError):
            p * 2
        with pytest.raises(TypeError):
            Vector3D(1, 2, 3) + p


class TestPointEquality:

    def test_equality(self):
        p = Point3D(1, 2, 3)
        assert p == Point3D(1.0, 2.0, 3.0)
        assert not (p != Point3D(1, 2, 3))
        assert p != Point3D(1, 2, 3.0000000001)
        # a point is never equal to a vector with the same coordinates
        assert p != Vector3D(1, 2, 3)
        assert not (p == Vector3D(1, 2, 3))

    def test_hash(self):
        p = Point3D(1, 2, 3)
        assert hash(p) == hash(Point3D(1, 2, 3))
        assert {p: 'a'}[Point3D(1, 2, 3)] == 'a'

    def test_hash_collisions(self):
        n = 100000
        rnd = random.Random(42)
        hashcodes = set()
        for i in range(n):
            p = Point3D(rnd.random() * 2 - 1,
                        rnd.random() * 100 - 50,
                        rnd.random() * 20 - 10)
            hashcodes.add(hash(p))
        assert (n - len(hashcodes)) / n < 0.01


class TestPointConversion:

    def test_to_vector(self):
        p = Point3D(1, 2, 3)
        v = p.to_vector()
        assert isinstance(v, Vector3D)
        assert v == Vector3D(1, 2, 3)
        assert v.to_point() == p

    def test_sequences(self):
        p = Point3D(1, 2, 3)
        assert p.to_list() == [1.0, 2.0, 3.0]
        assert list(p) == [1.0, 2.0, 3.0]
        assert np.array_equal(p.to_numpy(), np.array([1.0, 2.0, 3.0]))

    def test_format(self):
        p = Point3D(-1, 0.5, 1000)
        assert str(p) == '[-1.000  0.500 1000.000]'
        assert eval(repr(p)) == p
        assert pickle.loads(pickle.dumps(p)) == p
