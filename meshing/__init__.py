from .rounded_box import build_rounded_box, box_indices, box_positions
from .tables import Corner, Edge, Face, PARTIAL_EDGES, VERTEX_COUNT
