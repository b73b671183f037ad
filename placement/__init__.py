from .instances import CELL_SIZE, Instance, build_instances, combine_instances, world_translation
