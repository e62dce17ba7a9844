#!/usr/bin/env python3
"""
Command line for pygeom3d.

Usage:
    python -m pygeom3d demo
    python -m pygeom3d dedup FILE.json [--raster SIZE | --tolerance T]

Examples:
    # Show the operator demo
    python -m pygeom3d demo

    # Collapse points that fall into the same 1mm raster cell
    python -m pygeom3d dedup points.json --raster 0.001

    # Collapse points within 0.05 of each other, with debug logging
    python -m pygeom3d -v dedup points.json --tolerance 0.05
"""

import argparse
import logging
import math
import sys

from pygeom3d.comparer import RasterEqualityComparer, TolerantEqualityComparer
from pygeom3d.io.geometry_json import read_json
from pygeom3d.logging_config import setup_logging
from pygeom3d.matrix import Matrix3D
from pygeom3d.point import Point3D
from pygeom3d.vector import Vector3D

logger = logging.getLogger("pygeom3d.cli")


def cmd_demo(args) -> int:
    """Print a short tour of the operators."""
    a = Vector3D(1, 2, 3)
    b = 2.5 * a
    print(b)
    # [ 2.500  5.000  7.500]

    m = Matrix3D.rotate(Vector3D.Z_AXIS, math.pi / 2)
    print(m)
    # [ 0.000 -1.000  0.000]
    # [ 1.000  0.000  0.000]
    # [ 0.000  0.000  1.000]

    print(m * b)
    # [-5.000  2.500  7.500]
    return 0


def cmd_dedup(args) -> int:
    """Print the distinct values of a geometry JSON file."""
    try:
        values = read_json(args.file)
    except (OSError, ValueError) as e:
        print(f"Error: cannot read {args.file}: {e}", file=sys.stderr)
        return 1

    others = [v for v in values if not isinstance(v, (Vector3D, Point3D))]
    if others:
        print(f"Error: {args.file}: dedup handles vectors and points only, "
              f"found {type(others[0]).__name__}", file=sys.stderr)
        return 1

    if args.raster is not None:
        comparer = RasterEqualityComparer(args.raster)
    elif args.tolerance is not None:
        comparer = TolerantEqualityComparer(args.tolerance)
    else:
        comparer = None

    if comparer is None:
        distinct = list(dict.fromkeys(values))
    else:
        distinct = comparer.distinct(values)
    logger.info(f"{len(values)} values, {len(distinct)} distinct")

    for v in distinct:
        print(v)
    return 0


def main(argv=None):
    parser = argparse.ArgumentParser(
        prog='python -m pygeom3d',
        description='pygeom3d vectors, points and matrices',
    )
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='Enable debug logging')

    subparsers = parser.add_subparsers(dest='action', required=True)

    subparsers.add_parser('demo', help='Show the operator demo')

    dedup_parser = subparsers.add_parser('dedup', help='Print distinct values of a geometry JSON file')
    dedup_parser.add_argument('file', help='geometry JSON document')
    policy = dedup_parser.add_mutually_exclusive_group()
    policy.add_argument('--raster', type=float, metavar='SIZE',
                        help='Treat values in the same raster cell as equal')
    policy.add_argument('--tolerance', type=float, metavar='T',
                        help='Treat values within T per axis as equal')

    args = parser.parse_args(argv)

    setup_logging(logging.DEBUG if args.verbose else logging.WARNING)

    if args.action == 'demo':
        return cmd_demo(args)
    elif args.action == 'dedup':
        try:
            return cmd_dedup(args)
        except ValueError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1
    else:
        parser.print_help()
        return 1


if __name__ == '__main__':
    sys.exit(main())
