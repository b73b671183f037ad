"""
Fixed lookup tables for the 24-vertex rounded box layout.

Y is up, the camera looks from +z towards -z. Vertices come in six groups of
four (front, back, right, left, top, bottom); each group runs bottom-left,
bottom-right, top-right, top-left in that face's own frame. Every triangle is
counter-clockwise when seen from outside the box.
"""

from enum import Enum, IntEnum
import numpy as np


class Face(IntEnum):
    FRONT = 0
    BACK = 1
    RIGHT = 2
    LEFT = 3
    TOP = 4
    BOTTOM = 5


# Axis (0=x, 1=y, 2=z) each face lies on; vertices are not inset along it.
FACE_AXES = {
    Face.FRONT: 2,
    Face.BACK: 2,
    Face.RIGHT: 0,
    Face.LEFT: 0,
    Face.TOP: 1,
    Face.BOTTOM: 1,
}

FACE_NORMALS = {
    Face.FRONT: (0.0, 0.0, 1.0),
    Face.BACK: (0.0, 0.0, -1.0),
    Face.RIGHT: (1.0, 0.0, 0.0),
    Face.LEFT: (-1.0, 0.0, 0.0),
    Face.TOP: (0.0, 1.0, 0.0),
    Face.BOTTOM: (0.0, -1.0, 0.0),
}

# Which extreme (-1 = min, +1 = max) each vertex sits at along x, y and z.
VERTEX_SIGNS = np.array([
    # Front
    [-1, -1, 1], [1, -1, 1], [1, 1, 1], [-1, 1, 1],  # 0-3
    # Back
    [-1, 1, -1], [1, 1, -1], [1, -1, -1], [-1, -1, -1],  # 4-7
    # Right
    [1, -1, -1], [1, 1, -1], [1, 1, 1], [1, -1, 1],  # 8-11
    # Left
    [-1, -1, 1], [-1, 1, 1], [-1, 1, -1], [-1, -1, -1],  # 12-15
    # Top
    [1, 1, -1], [-1, 1, -1], [-1, 1, 1], [1, 1, 1],  # 16-19
    # Bottom
    [1, -1, 1], [-1, -1, 1], [-1, -1, -1], [1, -1, -1],  # 20-23
], dtype=np.int8)

# Picked so that a tiling test texture lines up across neighbouring faces.
VERTEX_UVS = np.array([
    [0.0, 0.0], [1.0, 0.0], [1.0, 1.0], [0.0, 1.0],  # front
    [1.0, 0.0], [0.0, 0.0], [0.0, 1.0], [1.0, 1.0],  # back
    [0.0, 0.0], [1.0, 0.0], [1.0, 1.0], [0.0, 1.0],  # right
    [1.0, 0.0], [0.0, 0.0], [0.0, 1.0], [1.0, 1.0],  # left
    [1.0, 0.0], [0.0, 0.0], [0.0, 1.0], [1.0, 1.0],  # top
    [0.0, 0.0], [1.0, 0.0], [1.0, 1.0], [0.0, 1.0],  # bottom
], dtype=np.float32)

VERTICES_PER_FACE = 4
VERTEX_COUNT = len(Face) * VERTICES_PER_FACE

FACE_TRIANGLES = {
    Face.FRONT: (0, 1, 2, 2, 3, 0),
    Face.BACK: (4, 5, 6, 6, 7, 4),
    Face.RIGHT: (8, 9, 10, 10, 11, 8),
    Face.LEFT: (12, 13, 14, 14, 15, 12),
    Face.TOP: (16, 17, 18, 18, 19, 16),
    Face.BOTTOM: (20, 21, 22, 22, 23, 20),
}


class Edge(Enum):
    """Bevel band between two faces, as two triangles over their facing vertices."""
    FRONT_LEFT = (0, 3, 13, 13, 12, 0)
    TOP_LEFT = (18, 17, 13, 14, 13, 17)
    BACK_LEFT = (4, 7, 14, 14, 7, 15)
    BOTTOM_LEFT = (22, 21, 15, 12, 15, 21)
    FRONT_RIGHT = (11, 10, 2, 2, 1, 11)
    TOP_RIGHT = (16, 19, 10, 10, 9, 16)
    BACK_RIGHT = (6, 5, 9, 9, 8, 6)
    BOTTOM_RIGHT = (8, 11, 20, 20, 23, 8)
    FRONT_TOP = (3, 2, 19, 19, 18, 3)
    FRONT_BOTTOM = (21, 20, 1, 1, 0, 21)
    BACK_TOP = (17, 16, 5, 5, 4, 17)
    BACK_BOTTOM = (7, 6, 23, 23, 22, 7)


class Corner(Enum):
    """Triangle closing the gap where three bevel bands meet."""
    RIGHT_TOP_FRONT = (10, 19, 2)
    RIGHT_TOP_BACK = (9, 5, 16)
    RIGHT_BOTTOM_FRONT = (11, 1, 20)
    RIGHT_BOTTOM_BACK = (8, 23, 6)
    LEFT_TOP_FRONT = (13, 3, 18)
    LEFT_TOP_BACK = (14, 17, 4)
    LEFT_BOTTOM_FRONT = (12, 21, 0)
    LEFT_BOTTOM_BACK = (15, 7, 22)


# Only the left-hand bands; the right-hand side was never filled in at this level.
PARTIAL_EDGES = (Edge.FRONT_LEFT, Edge.TOP_LEFT, Edge.BACK_LEFT, Edge.BOTTOM_LEFT)

assert VERTEX_SIGNS.shape == (VERTEX_COUNT, 3)
assert VERTEX_UVS.shape == (VERTEX_COUNT, 2)
