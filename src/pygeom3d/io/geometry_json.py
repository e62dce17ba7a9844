"""Geometry JSON serialization/deserialization helpers.

A single value serializes to a dict holding a ``type`` tag followed by
its fields in declared order, e.g. ::

    {"type": "vector3d", "X": 1.0, "Y": 2.0, "Z": 3.0}
    {"type": "matrix3d", "M11": 1.0, "M12": 0.0, ..., "M33": 1.0}

A document wraps a list of values::

    {"schema": "pygeom3d-geometry-json-v0.1", "entities": [...]}

Python writes floats with their shortest round-tripping representation,
and ``json`` accepts ``NaN``/``Infinity``/``-Infinity``, so reading a
value back always yields a value that is ``==`` to the original (NaN
components excepted, which never compare equal).
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, Iterable, List, Union

from pygeom3d.matrix import Matrix3D
from pygeom3d.point import Point3D
from pygeom3d.scalars import isgoodnum
from pygeom3d.vector import Vector3D

SCHEMA_ID = "pygeom3d-geometry-json-v0.1"

Value = Union[Vector3D, Point3D, Matrix3D]

_TYPES = {
    "vector3d": Vector3D,
    "point3d": Point3D,
    "matrix3d": Matrix3D,
}
_TAGS = {cls: tag for tag, cls in _TYPES.items()}


def _fields(value: Value) -> List[float]:
    if isinstance(value, Matrix3D):
        return value.to_row_major()
    return value.to_list()


def to_dict(value: Value) -> Dict[str, Any]:
    """Serialize a vector, point or matrix into a JSON-ready dict."""
    tag = _TAGS.get(type(value))
    if tag is None:
        raise ValueError(f"cannot serialize {value!r}")
    data: Dict[str, Any] = {"type": tag}
    for name, component in zip(type(value).FIELDS, _fields(value)):
        data[name] = component
    return data


def from_dict(data: Dict[str, Any]) -> Value:
    """Rebuild a value from the output of :func:`to_dict`."""
    if not isinstance(data, dict):
        raise ValueError(f"geometry entity must be an object, got {data!r}")
    cls = _TYPES.get(data.get("type"))
    if cls is None:
        raise ValueError(f"unknown geometry type: {data.get('type')!r}")
    components = []
    for name in cls.FIELDS:
        if name not in data:
            raise ValueError(f"{data['type']} entity missing field {name}")
        component = data[name]
        if not isgoodnum(component):
            raise ValueError(f"{data['type']} field {name} is not a number: {component!r}")
        components.append(component)
    return cls(*components)


def dumps(value: Value, **kwargs: Any) -> str:
    return json.dumps(to_dict(value), **kwargs)


def loads(text: str) -> Value:
    return from_dict(json.loads(text))


def document(values: Iterable[Value]) -> Dict[str, Any]:
    """Serialize several values into a schema-tagged document."""
    return {
        "schema": SCHEMA_ID,
        "entities": [to_dict(v) for v in values],
    }


def from_document(doc: Dict[str, Any]) -> List[Value]:
    """Deserialize a document produced by :func:`document`."""
    if not isinstance(doc, dict):
        raise ValueError(f"geometry document must be an object, got {type(doc).__name__}")
    if doc.get("schema") != SCHEMA_ID:
        raise ValueError(f"unsupported geometry schema: {doc.get('schema')}")
    return [from_dict(entry) for entry in doc.get("entities", [])]


def write_json(path: Union[str, Path], values: Iterable[Value]) -> Path:
    """Write ``values`` as a geometry JSON document to ``path``."""
    path = Path(path)
    path.write_text(json.dumps(document(values), indent=2), encoding="utf-8")
    return path


def read_json(path: Union[str, Path]) -> List[Value]:
    """Read the values stored in a geometry JSON document."""
    with Path(path).open("r", encoding="utf-8") as fh:
        return from_document(json.load(fh))
