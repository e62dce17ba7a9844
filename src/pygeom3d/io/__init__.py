"""I/O utilities for pygeom3d."""

from .geometry_json import dumps, loads, read_json, write_json

__all__ = ['dumps', 'loads', 'read_json', 'write_json']
