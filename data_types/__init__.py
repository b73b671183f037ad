from .box import BoxSpec, Fidelity
from .lattice import LatticePoint
from .mesh3d import Mesh3d
