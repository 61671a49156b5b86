import unittest
import sys
import os
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import numpy as np

from sphere import generate, ring_start, vertex_count


def unit_norms(points):
    return np.allclose(np.linalg.norm(points, axis=1), 1.0, rtol=0, atol=1e-9)


class TestSphereMesh(unittest.TestCase):
    def test_vertex_count(self):
        for rings, points in [(2, 1), (3, 4), (5, 8), (41, 80)]:
            mesh = generate(rings, points)
            self.assertEqual(len(mesh), 2 + (rings - 2) * points)
            self.assertEqual(len(mesh), vertex_count(rings, points))

    def test_poles_first_and_last(self):
        mesh = generate(9, 12)
        np.testing.assert_array_equal(mesh[0], [0.0, 0.0, 1.0])
        np.testing.assert_array_equal(mesh[-1], [0.0, 0.0, -1.0])

    def test_only_poles(self):
        mesh = generate(2, 16)
        self.assertEqual(mesh.shape, (2, 3))

    def test_unit_norm(self):
        self.assertTrue(unit_norms(generate(41, 80)))

    def test_rings_share_z_and_descend(self):
        rings, points = 7, 10
        mesh = generate(rings, points)
        zs = []
        for ring in range(rings - 2):
            start = ring_start(ring, points)
            ring_z = mesh[start:start + points, 2]
            self.assertTrue(np.allclose(ring_z, ring_z[0]))
            zs.append(ring_z[0])
        self.assertTrue(all(a > b for a, b in zip(zs, zs[1:])))

    def test_ring_azimuth_order(self):
        # First point of every ring sits at azimuth 0: x = 0, y = ring radius
        mesh = generate(5, 4)
        first = mesh[ring_start(1, 4)]
        self.assertAlmostEqual(first[0], 0.0)
        self.assertAlmostEqual(first[1], 1.0)
        second = mesh[ring_start(1, 4) + 1]
        self.assertAlmostEqual(second[0], 1.0)
        self.assertAlmostEqual(second[1], 0.0, places=12)

    def test_read_only(self):
        mesh = generate(5, 8)
        with self.assertRaises(ValueError):
            mesh[0, 0] = 3.0

    def test_deterministic(self):
        np.testing.assert_array_equal(generate(11, 20), generate(11, 20))

    def test_invalid_counts(self):
        with self.assertRaises(ValueError):
            generate(1, 10)
        with self.assertRaises(ValueError):
            generate(5, 0)


if __name__ == '__main__':
    unittest.main()
