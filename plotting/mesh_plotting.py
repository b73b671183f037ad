import numpy as np
from numpy.typing import NDArray
import matplotlib.pyplot as plt
from mpl_toolkits.mplot3d.art3d import Poly3DCollection
from mpl_toolkits.mplot3d.art3d import Line3DCollection

from data_types import LatticePoint, Mesh3d


def _set_equal_limits(ax, points: NDArray[np.float64]):
    # Add a small buffer for better visualization
    mins = points.min(axis=0)
    maxs = points.max(axis=0)
    buffer = max((maxs - mins).max() * 0.05, 1e-6)
    ax.set_xlim(mins[0] - buffer, maxs[0] + buffer)
    ax.set_ylim(mins[1] - buffer, maxs[1] + buffer)
    ax.set_zlim(mins[2] - buffer, maxs[2] + buffer)
    ax.set_box_aspect([1, 1, 1])


def plot_box_mesh(mesh: Mesh3d, title="Rounded Box", figsize=(10, 8), ax=None, alpha=0.7,
                  face_color='skyblue', edge_color='black', translation=None):
    """
    Plots the triangles of a box mesh, optionally shifted by a translation.

    Returns
    -------
    fig : matplotlib.figure.Figure
    ax : matplotlib.axes.Axes
    """
    if ax is None:
        fig = plt.figure(figsize=figsize)
        ax = fig.add_subplot(111, projection='3d')
    else:
        fig = ax.figure

    positions = mesh.positions.astype(np.float64)
    if translation is not None:
        positions = positions + translation

    poly3d = Poly3DCollection(positions[mesh.faces], linewidths=0.3, edgecolors=edge_color, alpha=alpha)
    poly3d.set_facecolor(face_color)
    ax.add_collection3d(poly3d)

    ax.set_title(title)
    ax.set_xlabel("X")
    ax.set_ylabel("Y")
    ax.set_zlabel("Z")
    _set_equal_limits(ax, positions)
    return fig, ax


def plot_mesh_with_highlighted_edges(mesh: Mesh3d, highlighted_edges, title="Box with Highlighted Edges",
                                      figsize=(10, 8), highlight_color='red', highlight_width=2,
                                      mesh_alpha=0.7, ax=None):
    """
    Plots a box mesh with specific edges highlighted in color.

    Parameters
    ----------
    mesh : Mesh3d
        The box mesh to draw.

    highlighted_edges : array-like of shape (E, 2)
        Vertex index pairs to draw on top of the surface, e.g. the open
        boundary edges of a BASIC or PARTIAL box.

    Returns
    -------
    fig : matplotlib.figure.Figure
        The figure containing the plot.

    ax : matplotlib.axes.Axes
        The 3D axes containing the plot.
    """
    fig, ax = plot_box_mesh(mesh, title=title, figsize=figsize, ax=ax, alpha=mesh_alpha)

    highlighted_edges = np.asarray(highlighted_edges, dtype=np.int64).reshape(-1, 2)
    if len(highlighted_edges):
        lines = mesh.positions.astype(np.float64)[highlighted_edges]
        lc = Line3DCollection(lines, colors=highlight_color, linewidths=highlight_width, zorder=10)
        ax.add_collection(lc)

    # Adjust view angle slightly to make line visibility more consistent
    ax.view_init(elev=30, azim=45)
    return fig, ax


def plot_lattice_points(points: list[LatticePoint], title="Lattice Points", figsize=(10, 8), ax=None,
                        color_by='y', cmap='viridis', connect=False):
    """
    Scatter a set of lattice points, colored by one coordinate.

    With connect=True consecutive points are joined, which shows the path of a walk.
    """
    if ax is None:
        fig = plt.figure(figsize=figsize)
        ax = fig.add_subplot(111, projection='3d')
    else:
        fig = ax.figure

    coords = np.array(points, dtype=np.float64).reshape(-1, 3)
    if len(coords) == 0:
        ax.set_title(title)
        return fig, ax

    colors = coords[:, "xyz".index(color_by)]
    ax.scatter(coords[:, 0], coords[:, 1], coords[:, 2], c=colors, cmap=cmap, s=30, edgecolors='k')
    if connect and len(coords) > 1:
        ax.plot(coords[:, 0], coords[:, 1], coords[:, 2], color='gray', linewidth=1)

    ax.set_title(title)
    ax.set_xlabel("X")
    ax.set_ylabel("Y")
    ax.set_zlabel("Z")
    _set_equal_limits(ax, coords)
    return fig, ax


def plot_instances(instances, title="Placed Boxes", figsize=(12, 10), ax=None, alpha=0.9):
    """Draw every placed box of a scene into one axes."""
    if ax is None:
        fig = plt.figure(figsize=figsize)
        ax = fig.add_subplot(111, projection='3d')
    else:
        fig = ax.figure

    if not instances:
        ax.set_title(title)
        return fig, ax

    all_positions = []
    for instance in instances:
        positions = instance.mesh.positions.astype(np.float64) + instance.translation
        poly3d = Poly3DCollection(positions[instance.mesh.faces], linewidths=0.1, edgecolors='black', alpha=alpha)
        poly3d.set_facecolor('skyblue')
        ax.add_collection3d(poly3d)
        all_positions.append(positions)

    ax.set_title(title)
    ax.set_xlabel("X")
    ax.set_ylabel("Y")
    ax.set_zlabel("Z")
    _set_equal_limits(ax, np.concatenate(all_positions))
    return fig, ax
