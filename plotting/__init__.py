from .mesh_plotting import plot_box_mesh, plot_instances, plot_lattice_points, plot_mesh_with_highlighted_edges
