from .ascii_map import DEFAULT_MAP, WALL_MARKER, count_walls, points_from_map
from .walk import AXIS_DIRECTIONS, WALK_ORIGIN, iter_random_walk, random_walk
