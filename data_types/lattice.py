from typing import NamedTuple
import numpy as np
from numpy.typing import NDArray


class LatticePoint(NamedTuple):
    x: int
    y: int
    z: int

    def step(self, direction: "LatticePoint") -> "LatticePoint":
        return LatticePoint(self.x + direction.x, self.y + direction.y, self.z + direction.z)

    def scaled(self, cell_size: float) -> NDArray[np.float64]:
        return np.array([self.x, self.y, self.z], dtype=np.float64) * cell_size
