from dataclasses import dataclass
from typing import Iterable
import numpy as np
from numpy.typing import NDArray
import trimesh
from tqdm import tqdm

from data_types import BoxSpec, Fidelity, LatticePoint, Mesh3d
from meshing import build_rounded_box

CELL_SIZE = 3.0


@dataclass(frozen=True, eq=False)
class Instance:
    mesh: Mesh3d
    translation: NDArray[np.float64]  # world-space offset of the mesh origin


def world_translation(point: LatticePoint, cell_size: float = CELL_SIZE) -> NDArray[np.float64]:
    """Scale a lattice point into a world-space translation."""
    return point.scaled(cell_size)


def build_instances(
    points: Iterable[LatticePoint],
    spec: BoxSpec,
    fidelity: Fidelity = Fidelity.FULL,
    cell_size: float = CELL_SIZE,
    share_mesh: bool = False,
    show_progress: bool = True,
) -> list[Instance]:
    """
    Pair every lattice point with a box mesh and its world translation.

    Args:
        points: Lattice points in placement order
        spec: Box to build for each point
        fidelity: Bevel fidelity of the meshes
        cell_size: World distance between neighbouring lattice points
        share_mesh: Build a single mesh and reuse it for every point
        show_progress: Show a progress bar over the points

    Returns:
        list[Instance]: One instance per point, in the order given
    """
    points = list(points)
    shared = build_rounded_box(spec, fidelity) if share_mesh else None

    instances = []
    for point in tqdm(points, desc="Placing boxes", disable=not show_progress):
        mesh = shared if shared is not None else build_rounded_box(spec, fidelity)
        instances.append(Instance(mesh=mesh, translation=world_translation(point, cell_size)))
    return instances


def combine_instances(instances: list[Instance]) -> trimesh.Trimesh:
    """Concatenate translated copies of every instance into one trimesh."""
    if not instances:
        return trimesh.Trimesh()

    placed = []
    for instance in instances:
        mesh = instance.mesh.to_trimesh()
        mesh.apply_translation(instance.translation)
        placed.append(mesh)
    return trimesh.util.concatenate(placed)
