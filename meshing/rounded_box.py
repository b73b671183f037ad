"""
Rounded box mesh generation.
"""

import numpy as np
from numpy.typing import NDArray

from data_types import BoxSpec, Fidelity, Mesh3d
from .tables import (
    Corner,
    Edge,
    Face,
    FACE_AXES,
    FACE_NORMALS,
    FACE_TRIANGLES,
    PARTIAL_EDGES,
    VERTEX_SIGNS,
    VERTEX_UVS,
    VERTICES_PER_FACE,
)


def box_positions(spec: BoxSpec) -> NDArray[np.float32]:
    """
    Calculate the 24 inset vertex positions of a box.

    Each vertex sits on its face's own extreme and is pulled in by the edge
    radius along the two axes tangent to that face.
    """
    mins = np.array([spec.min_x, spec.min_y, spec.min_z], dtype=np.float64)
    maxs = np.array([spec.max_x, spec.max_y, spec.max_z], dtype=np.float64)
    signs = VERTEX_SIGNS.astype(np.float64)

    positions = np.where(signs > 0, maxs, mins)

    inset = np.ones_like(signs)
    for face in Face:
        start = face * VERTICES_PER_FACE
        inset[start:start + VERTICES_PER_FACE, FACE_AXES[face]] = 0.0

    positions -= signs * inset * spec.edge_radius
    return positions.astype(np.float32)


def box_normals() -> NDArray[np.float32]:
    """One constant outward normal per face, repeated for its four vertices."""
    return np.repeat(
        np.array([FACE_NORMALS[face] for face in Face], dtype=np.float32),
        VERTICES_PER_FACE,
        axis=0,
    )


def box_uvs() -> NDArray[np.float32]:
    return VERTEX_UVS.copy()


def box_indices(fidelity: Fidelity) -> NDArray[np.uint32]:
    """Assemble the triangle list for a fidelity level from the fixed tables."""
    indices = [index for face in Face for index in FACE_TRIANGLES[face]]

    if fidelity is Fidelity.PARTIAL:
        edges = PARTIAL_EDGES
    elif fidelity is Fidelity.FULL:
        edges = tuple(Edge)
    else:
        edges = ()
    for edge in edges:
        indices.extend(edge.value)

    if fidelity is Fidelity.FULL:
        for corner in Corner:
            indices.extend(corner.value)

    return np.array(indices, dtype=np.uint32)


def build_rounded_box(spec: BoxSpec, fidelity: Fidelity = Fidelity.FULL) -> Mesh3d:
    """
    Build the beveled cuboid mesh for a box.

    Parameters
    ----------
    spec : BoxSpec
        Box extents and edge radius. The radius is not checked; a radius of
        half the shortest side or more gives a self-intersecting surface.
    fidelity : Fidelity
        BASIC emits the six flat faces only, PARTIAL adds the four left-side
        bevel bands, FULL adds all twelve bands and the eight corner triangles.

    Returns
    -------
    Mesh3d
        A fresh mesh with 24 vertices and 36, 60 or 132 indices.
    """
    return Mesh3d(
        positions=box_positions(spec),
        normals=box_normals(),
        uvs=box_uvs(),
        indices=box_indices(fidelity),
    )
