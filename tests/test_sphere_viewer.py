import unittest
import sys
import os
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import numpy as np

from sphere import generate
from sphere_viewer import PolyLineSurface, create_grid_lines


class TestPolyLineSurface(unittest.TestCase):
    def test_segments_flipped_to_y_up(self):
        surface = PolyLineSurface(100, 100)
        surface.translate(50, 50)
        surface.scale(10, 10)
        surface.beginPath()
        surface.moveTo(0, 0)
        surface.lineTo(1, 1)
        surface.stroke()
        self.assertEqual(surface.segments, [((50.0, 50.0), (60.0, 40.0))])

        mesh = surface.to_polydata()
        self.assertEqual(mesh.n_points, 2)
        self.assertEqual(mesh.n_lines, 1)

    def test_non_finite_segment_skipped(self):
        surface = PolyLineSurface(10, 10)
        surface.beginPath()
        surface.moveTo(float('inf'), 0)
        surface.lineTo(1, 1)
        surface.lineTo(2, 2)
        self.assertEqual(len(surface.segments), 1)

    def test_nothing_drawn(self):
        surface = PolyLineSurface(10, 10)
        surface.beginPath()
        self.assertIsNone(surface.to_polydata())

    def test_stroke_style(self):
        surface = PolyLineSurface(10, 10)
        surface.scale(4, 4)
        surface.lineWidth = 0.5
        surface.strokeStyle = '#abcdef'
        surface.stroke()
        self.assertEqual(surface.stroke_width, 2.0)
        self.assertEqual(surface.stroke_color, '#abcdef')


class TestGridLines(unittest.TestCase):
    def test_counts(self):
        base = generate(5, 8)
        rings, meridians = create_grid_lines(base, 5, 8, 2, 1)
        self.assertEqual(len(rings), 3)
        self.assertEqual(len(meridians), 4)
        self.assertEqual(rings[0].n_points, 9)
        self.assertEqual(meridians[0].n_points, 5)
        np.testing.assert_allclose(meridians[0].points[0], [0.0, 0.0, 1.0])


if __name__ == '__main__':
    unittest.main()
