"""
Lattice points from an ASCII floor plan.
"""

from typing import Iterable

from data_types import LatticePoint

WALL_MARKER = 'X'
FLOOR_Y = -1
WALL_Y = 0

DEFAULT_MAP = (
    "XXXXXXXXXXXXXX",
    "X  X         X",
    "X  X  XXXX   X",
    "X     X      X",
    "X  XXXX  X   X",
    "X        X   X",
    "XXXXXXXXXXXXXX",
)


def points_from_map(rows: Iterable[str], wall_marker: str = WALL_MARKER) -> list[LatticePoint]:
    """
    Convert map rows into floor and wall lattice points.

    Row i maps to z = i and the j-th character of a row to x = j + 1. Every
    character puts a floor point at y = -1; a wall marker also puts a wall
    point at y = 0 right after its floor point. Rows may differ in length.
    """
    points = []
    for z, row in enumerate(rows):
        for x, char in enumerate(row, start=1):
            points.append(LatticePoint(x, FLOOR_Y, z))
            if char == wall_marker:
                points.append(LatticePoint(x, WALL_Y, z))
    return points


def count_walls(rows: Iterable[str], wall_marker: str = WALL_MARKER) -> int:
    return sum(row.count(wall_marker) for row in rows)
