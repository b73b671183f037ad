from dataclasses import dataclass
from enum import Enum


class Fidelity(Enum):
    BASIC = "basic"  # flat faces only
    PARTIAL = "partial"  # flat faces and the four left-side bevel bands
    FULL = "full"  # flat faces, all twelve bevel bands and the corner triangles


@dataclass(frozen=True)
class BoxSpec:
    min_x: float
    max_x: float
    min_y: float
    max_y: float
    min_z: float
    max_z: float
    edge_radius: float

    @classmethod
    def from_lengths(cls, x_length: float, y_length: float, z_length: float, edge_radius: float) -> "BoxSpec":
        """Creates a box centered at the origin with the supplied side lengths."""
        return cls(
            min_x=-x_length / 2.0,
            max_x=x_length / 2.0,
            min_y=-y_length / 2.0,
            max_y=y_length / 2.0,
            min_z=-z_length / 2.0,
            max_z=z_length / 2.0,
            edge_radius=edge_radius,
        )

    @classmethod
    def default(cls) -> "BoxSpec":
        return cls.from_lengths(3.0, 3.0, 3.0, 0.5)

    @property
    def lengths(self) -> tuple[float, float, float]:
        return (self.max_x - self.min_x, self.max_y - self.min_y, self.max_z - self.min_z)

    def has_valid_radius(self) -> bool:
        """True when the bevels cannot cross each other."""
        return 0 <= self.edge_radius < min(self.lengths) / 2
