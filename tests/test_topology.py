import os
import sys
import numpy as np
import unittest

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from data_types import BoxSpec, Fidelity
from meshing import build_rounded_box
from topology import boundary_edges, count_boundary_loops, is_edge_watertight, unique_positions


class TestBoundaryLoops(unittest.TestCase):
    def setUp(self):
        # Two triangles making a unit square, and a closed tetrahedron
        self.square_faces = np.array([
            [0, 1, 2],
            [0, 2, 3],
        ], dtype=np.int64)

        self.tetra_faces = np.array([
            [0, 2, 1],
            [0, 1, 3],
            [0, 3, 2],
            [1, 2, 3],
        ], dtype=np.int64)

        self.spec = BoxSpec.from_lengths(2.0, 3.0, 4.0, 0.3)

    def test_square_boundary(self):
        """The shared diagonal is interior, the four sides are boundary."""
        edges = boundary_edges(self.square_faces)
        self.assertEqual({tuple(e) for e in edges.tolist()}, {(0, 1), (1, 2), (2, 3), (0, 3)})

        num_loops, loops = count_boundary_loops(self.square_faces)
        self.assertEqual(num_loops, 1)
        self.assertEqual(len(loops[0]), 4)
        self.assertFalse(is_edge_watertight(self.square_faces))

    def test_closed_tetrahedron(self):
        self.assertEqual(len(boundary_edges(self.tetra_faces)), 0)
        self.assertEqual(count_boundary_loops(self.tetra_faces), (0, []))
        self.assertTrue(is_edge_watertight(self.tetra_faces))

    def test_empty_faces(self):
        faces = np.zeros((0, 3), dtype=np.int64)
        self.assertEqual(count_boundary_loops(faces), (0, []))
        self.assertFalse(is_edge_watertight(faces))

    def test_basic_box_has_a_hole_around_every_face(self):
        mesh = build_rounded_box(self.spec, Fidelity.BASIC)
        num_loops, loops = count_boundary_loops(mesh.faces)
        self.assertEqual(num_loops, 6)
        self.assertTrue(all(len(loop) == 4 for loop in loops))

    def test_partial_box_leaves_right_face_detached(self):
        """The left bands join five faces into one open patch; the right face stays alone."""
        mesh = build_rounded_box(self.spec, Fidelity.PARTIAL)
        num_loops, loops = count_boundary_loops(mesh.faces)
        self.assertEqual(num_loops, 2)
        self.assertEqual(sorted(len(loop) for loop in loops), [4, 20])

    def test_full_box_has_no_boundary(self):
        mesh = build_rounded_box(self.spec, Fidelity.FULL)
        self.assertEqual(count_boundary_loops(mesh.faces), (0, []))

    def test_unique_positions(self):
        positions = np.array([
            [0.0, 0.0, 0.0],
            [1.0, 0.0, 0.0],
            [0.0, 0.0, 1e-9],
            [1.0, 0.0, 0.0],
        ])
        np.testing.assert_allclose(unique_positions(positions), [[0.0, 0.0, 0.0], [1.0, 0.0, 0.0]])

    def test_rounded_box_distinct_positions(self):
        """With a radius every one of the 24 vertices sits somewhere else."""
        mesh = build_rounded_box(self.spec, Fidelity.FULL)
        self.assertEqual(len(unique_positions(mesh.positions)), 24)


if __name__ == "__main__":
    unittest.main()
