import argparse
import sys
import matplotlib.pyplot as plt

from data_types import BoxSpec, Fidelity
from lattice import DEFAULT_MAP, WALL_MARKER, points_from_map, random_walk
from meshing import build_rounded_box
from placement import CELL_SIZE, build_instances, combine_instances
from plotting import plot_instances, plot_lattice_points, plot_mesh_with_highlighted_edges
from topology import boundary_edges, count_boundary_loops


BOX_LENGTH = 3.0
EDGE_RADIUS = 0.5
WALK_LENGTH = 50
LAYOUTS = ("walk", "map", "single")


def parse_scene_cli(argv=None):
    """Parse command-line arguments describing the scene to build."""
    parser = argparse.ArgumentParser(description='Place rounded boxes on a lattice and preview the result.')
    parser.add_argument('layout', choices=LAYOUTS, help='Where to place boxes: a random walk, the default map, or a single box')
    parser.add_argument('--fidelity', '-f', default=Fidelity.FULL.value,
                        help='Bevel fidelity: basic, partial or full')
    parser.add_argument('--size', type=float, nargs=3, default=[BOX_LENGTH] * 3, metavar=('X', 'Y', 'Z'),
                        help='Box side lengths')
    parser.add_argument('--edge-radius', '-r', type=float, default=EDGE_RADIUS, help='Bevel radius')
    parser.add_argument('--cell-size', type=float, default=CELL_SIZE, help='World distance between lattice points')
    parser.add_argument('--length', '-n', type=int, default=WALK_LENGTH, help='Number of points in the walk')
    parser.add_argument('--seed', type=int, default=None, help='Seed for the walk')
    parser.add_argument('--verbose', '-v', action='store_true', help='Enable verbose output with visualizations')

    args = parser.parse_args(argv)

    try:
        args.fidelity = Fidelity(args.fidelity.lower())
    except ValueError:
        print(f"Error: Unknown fidelity '{args.fidelity}'. Expected one of: {', '.join(f.value for f in Fidelity)}")
        sys.exit(1)

    if args.cell_size <= 0:
        print(f"Error: The cell size must be positive. Got: {args.cell_size}")
        sys.exit(1)

    return args


def main(argv=None):
    args = parse_scene_cli(argv)
    spec = BoxSpec.from_lengths(*args.size, args.edge_radius)

    if not spec.has_valid_radius():
        print(f"Warning: edge radius {spec.edge_radius} is not below half the shortest side; "
              f"the box will self-intersect")

    if args.layout == "walk":
        points = random_walk(args.length, args.seed)
    elif args.layout == "map":
        points = points_from_map(DEFAULT_MAP, WALL_MARKER)
    else:
        points = []

    if not points:
        mesh = build_rounded_box(spec, args.fidelity)
        open_edges = boundary_edges(mesh.faces)
        num_loops, _ = count_boundary_loops(mesh.faces)
        print(f"{args.fidelity.value} box: {mesh.vertex_count} vertices, {mesh.index_count} indices, "
              f"{num_loops} boundary loops")
        if args.verbose:
            plot_mesh_with_highlighted_edges(mesh, open_edges, title=f"Rounded box ({args.fidelity.value})")
            plt.show()
        return

    instances = build_instances(points, spec, args.fidelity, cell_size=args.cell_size)
    scene = combine_instances(instances)
    print(f"Placed {len(instances)} boxes at {len(set(points))} distinct lattice points")
    print(f"Scene bounds: {scene.bounds[0]} to {scene.bounds[1]}")

    if args.verbose:
        fig = plt.figure(figsize=(16, 8))
        plot_lattice_points(points, title=f"Lattice points ({args.layout})", ax=fig.add_subplot(121, projection='3d'),
                            connect=args.layout == "walk")
        plot_instances(instances, ax=fig.add_subplot(122, projection='3d'))
        plt.tight_layout()
        plt.show()


if __name__ == "__main__":
    main()
