import trimesh
import numpy as np
from numpy.typing import NDArray
import networkx as nx


def get_connected_components(edges):
    """
    Helper function to get connected components of a graph.
    Returns the number of connected components and a list of 2-element lists of vertex indices in each edge in each connected component
    """
    graph = nx.Graph()
    graph.add_edges_from(edges)

    connected_components = list(nx.connected_components(graph))
    num_connected_components = len(connected_components)

    component_edges = []
    for component in connected_components:
        component_edges.append(list(graph.subgraph(component).edges()))

    return num_connected_components, component_edges


def sorted_face_edges(faces: NDArray[np.int64]) -> NDArray[np.int64]:
    """Return the three edges of every face as a (3F x 2) array, each row sorted."""
    faces = np.asarray(faces, dtype=np.int64)
    edges = np.concatenate([faces[:, [0, 1]], faces[:, [1, 2]], faces[:, [2, 0]]])
    return np.sort(edges, axis=1)


def boundary_edges(faces: NDArray[np.int64]) -> NDArray[np.int64]:
    """Edges used by exactly one triangle."""
    edges = sorted_face_edges(faces)
    if len(edges) == 0:
        return edges
    single = np.asarray(trimesh.grouping.group_rows(edges, require_count=1), dtype=np.int64).reshape(-1)
    return edges[single]


def count_boundary_loops(faces: NDArray[np.int64]):
    """
    Given the triangles of a mesh, return the boundary loops.
    Returns the number of boundary loops and a list of edges (vertex index pairs) in each loop.
    """
    edges = boundary_edges(faces)
    if len(edges) == 0:
        return 0, []
    return get_connected_components(edges)


def is_edge_watertight(faces: NDArray[np.int64]) -> bool:
    """True when every undirected edge is shared by exactly two triangles."""
    edges = sorted_face_edges(faces)
    if len(edges) == 0:
        return False
    _, counts = np.unique(edges, axis=0, return_counts=True)
    return bool(np.all(counts == 2))


def unique_positions(positions: NDArray[np.float64], decimals: int = 6) -> NDArray[np.float64]:
    """Collapse coincident vertex positions, rounding to `decimals` places first."""
    return np.unique(np.round(np.asarray(positions, dtype=np.float64), decimals), axis=0)
