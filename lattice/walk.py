"""
Random walks on the integer lattice.
"""

from typing import Iterator, Optional, Union
import numpy as np

from data_types import LatticePoint

WALK_ORIGIN = LatticePoint(0, 5, 0)

# Indexed by a draw from 0..5, so every draw maps to a direction.
AXIS_DIRECTIONS = (
    LatticePoint(1, 0, 0),
    LatticePoint(-1, 0, 0),
    LatticePoint(0, 1, 0),
    LatticePoint(0, -1, 0),
    LatticePoint(0, 0, 1),
    LatticePoint(0, 0, -1),
)

RandomSource = Union[np.random.Generator, int, None]


def iter_random_walk(length: int, rng: RandomSource = None, origin: LatticePoint = WALK_ORIGIN) -> Iterator[LatticePoint]:
    """
    Lazily yield a random walk of unit axis steps starting at origin.

    The origin is always yielded, so a length below 1 still produces one point.
    Points may repeat and a step may undo the previous one.

    Parameters
    ----------
    length : int
        Number of points in the walk, origin included.
    rng : numpy.random.Generator, int or None
        Random source. Seeds and None are turned into a fresh generator; pass a
        generator per call when walks are produced on several threads.
    origin : LatticePoint
        First point of the walk.
    """
    rng = np.random.default_rng(rng)
    point = origin
    yield point
    for _ in range(length - 1):
        point = point.step(AXIS_DIRECTIONS[int(rng.integers(0, len(AXIS_DIRECTIONS)))])
        yield point


def random_walk(length: int, rng: RandomSource = None, origin: LatticePoint = WALK_ORIGIN) -> list[LatticePoint]:
    """Return a random walk of `length` points as a list."""
    return list(iter_random_walk(length, rng, origin))
