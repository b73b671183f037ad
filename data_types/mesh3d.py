from dataclasses import dataclass
import numpy as np
from numpy.typing import NDArray
import trimesh


@dataclass(frozen=True, eq=False)
class Mesh3d:
    positions: NDArray[np.float32]  # V x 3 array of vertex coordinates
    normals: NDArray[np.float32]  # V x 3 array of unit vertex normals
    uvs: NDArray[np.float32]  # V x 2 array of texture coordinates in [0, 1]
    indices: NDArray[np.uint32]  # flat triangle list, stride 3

    def __post_init__(self):
        for array in (self.positions, self.normals, self.uvs, self.indices):
            array.setflags(write=False)

    @property
    def vertex_count(self) -> int:
        return len(self.positions)

    @property
    def index_count(self) -> int:
        return len(self.indices)

    @property
    def faces(self) -> NDArray[np.int64]:
        """F x 3 array of vertex *indices* which are triangle corners."""
        return self.indices.reshape(-1, 3).astype(np.int64)

    @property
    def edges(self) -> NDArray[np.int64]:
        """E x 2 array of unique undirected edges, each row sorted."""
        faces = self.faces
        all_edges = np.concatenate([faces[:, [0, 1]], faces[:, [1, 2]], faces[:, [2, 0]]])
        return np.unique(np.sort(all_edges, axis=1), axis=0)

    def to_trimesh(self) -> trimesh.Trimesh:
        """Convert to a trimesh without merging the per-face vertices."""
        return trimesh.Trimesh(
            vertices=self.positions.astype(np.float64),
            faces=self.faces,
            vertex_normals=self.normals.astype(np.float64),
            process=False,
        )
