import json
import sys
from math import inf, isnan, nan

import pytest

from pygeom3d.io.geometry_json import (
    SCHEMA_ID,
    document,
    dumps,
    from_dict,
    from_document,
    loads,
    read_json,
    to_dict,
    write_json,
)
from pygeom3d.matrix import Matrix3D
from pygeom3d.point import Point3D
from pygeom3d.vector import Vector3D


class TestGeometryJson:

    def test_field_order(self):
        assert list(to_dict(Vector3D(1, 2, 3))) == ['type', 'X', 'Y', 'Z']
        assert list(to_dict(Point3D(1, 2, 3))) == ['type', 'X', 'Y', 'Z']
        assert list(to_dict(Matrix3D.IDENTITY))[1:] == [
            'M11', 'M12', 'M13', 'M21', 'M22', 'M23', 'M31', 'M32', 'M33']
        assert to_dict(Matrix3D(1, 2, 3, 4, 5, 6, 7, 8, 9))['M23'] == 6

    def test_round_trip(self):
        big = sys.float_info.max
        tiny = sys.float_info.min
        values = [
            Vector3D(0.1, -0.2, 1 / 3),
            Vector3D(big, -big, tiny),
            Vector3D(inf, -inf, 0),
            Point3D(1e-300, 2.5, -7),
            Matrix3D(0.1, 0.2, 0.3, 0.4, 0.5, 0.6, 0.7, 0.8, 0.9),
            Matrix3D.IDENTITY,
        ]
        for v in values:
            back = loads(dumps(v))
            assert type(back) is type(v)
            assert back == v

    def test_nan_round_trip(self):
        back = loads(dumps(Vector3D(nan, 1, 2)))
        assert isnan(back.x)
        assert back.is_undefined()

    def test_bad_input(self):
        with pytest.raises(ValueError, match='unknown geometry type'):
            from_dict({'type': 'quaternion', 'X': 1})
        with pytest.raises(ValueError, match='missing field Z'):
            from_dict({'type': 'vector3d', 'X': 1, 'Y': 2})
        with pytest.raises(ValueError, match='not a number'):
            from_dict({'type': 'point3d', 'X': 1, 'Y': '2', 'Z': 3})
        with pytest.raises(ValueError):
            from_dict({'type': 'point3d', 'X': 1, 'Y': True, 'Z': 3})
        with pytest.raises(ValueError):
            from_dict([1, 2, 3])
        with pytest.raises(ValueError):
            to_dict((1, 2, 3))
        with pytest.raises(ValueError):
            loads('not json')

    def test_document(self):
        values = [Vector3D(1, 2, 3), Point3D(4, 5, 6), Matrix3D(2)]
        doc = document(values)
        assert doc['schema'] == SCHEMA_ID
        assert len(doc['entities']) == 3
        assert from_document(json.loads(json.dumps(doc))) == values

        with pytest.raises(ValueError, match='unsupported geometry schema'):
            from_document({'schema': 'something-else', 'entities': []})
        with pytest.raises(ValueError):
            from_document([])

    def test_files(self, tmp_path):
        values = [Point3D(0, 0, 0), Point3D(0.001, 0, 0), Vector3D.Z_AXIS]
        path = write_json(tmp_path / 'points.json', values)
        assert path.exists()
        assert read_json(path) == values
        assert read_json(str(path)) == values
