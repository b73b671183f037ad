import os
import sys
import matplotlib

matplotlib.use("Agg")
import matplotlib.pyplot as plt

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from data_types import BoxSpec, Fidelity
from lattice import points_from_map, random_walk
from meshing import build_rounded_box
from placement import build_instances
from plotting import plot_box_mesh, plot_instances, plot_lattice_points, plot_mesh_with_highlighted_edges
from topology import boundary_edges


def test_plot_box_mesh():
    mesh = build_rounded_box(BoxSpec.default(), Fidelity.FULL)
    fig, ax = plot_box_mesh(mesh, title="Full box")
    assert ax.get_title() == "Full box"
    assert len(ax.collections) == 1
    plt.close(fig)


def test_plot_open_edges():
    mesh = build_rounded_box(BoxSpec.default(), Fidelity.BASIC)
    fig, ax = plot_mesh_with_highlighted_edges(mesh, boundary_edges(mesh.faces))
    # Surface plus the highlighted boundary
    assert len(ax.collections) == 2
    plt.close(fig)


def test_plot_points_and_instances():
    points = random_walk(10, rng=0)
    fig, ax = plot_lattice_points(points, connect=True)
    assert len(ax.lines) == 1
    plt.close(fig)

    instances = build_instances(points_from_map(["X "]), BoxSpec.default(), show_progress=False)
    fig, ax = plot_instances(instances)
    assert len(ax.collections) == 3
    plt.close(fig)


def test_plot_empty_inputs():
    fig, ax = plot_lattice_points([])
    assert ax.get_title() == "Lattice Points"
    plt.close(fig)

    fig, ax = plot_instances([])
    plt.close(fig)
