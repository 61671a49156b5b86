import unittest
from unittest.mock import MagicMock
import sys
import os
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import numpy as np

from coord import convcoor, viewport_scale
from interact import InteractionController
from scene import Frame, Scene, SceneState, Tick, update
from transition import TransitionState


class TestUpdate(unittest.TestCase):
    def test_returns_new_state(self):
        state = SceneState(transition=TransitionState(stereographic=True))
        tick = Tick(sim_time=250.0, sim_speed=1.0, width=400, height=300)
        new = update(state, tick, InteractionController(), speed_y=0.001, speed_z=0.0,
                     duration_ms=1000.0)
        self.assertIsNot(new, state)
        self.assertEqual(state.transition.position, 0.0)
        self.assertAlmostEqual(new.transition.position, 0.25)
        self.assertAlmostEqual(new.rotation.auto_y, 0.25)


class TestScene(unittest.TestCase):
    def setUp(self):
        self.scene = Scene(ring_count=9, ring_point_count=16, line_spacing=4, ring_spacing=2)

    def test_buffer_sized_once(self):
        buffer = self.scene.points
        self.assertEqual(buffer.shape, (2 + 7 * 16, 2))
        for _ in range(3):
            self.scene.on_tick(Tick(16.0, 1.0, 200, 200))
            self.scene.on_draw(Frame(MagicMock(), 200, 200))
        self.assertIs(self.scene.points, buffer)

    def test_start_stereographic(self):
        scene = Scene(ring_count=5, ring_point_count=8, stereographic=True)
        self.assertEqual(scene.state.transition.position, 1.0)

    def test_toggle_then_tick(self):
        self.scene.toggle()
        self.assertTrue(self.scene.state.transition.stereographic)
        self.assertEqual(self.scene.state.transition.position, 0.0)
        self.scene.on_tick(Tick(100.0, 1.0, 200, 200))
        self.assertGreater(self.scene.state.transition.position, 0.0)

    def test_draw_sequence(self):
        ctx = MagicMock()
        self.scene.on_draw(Frame(ctx, 300, 200))
        ctx.fillRect.assert_called_once_with(0, 0, 300, 200)
        ctx.translate.assert_called_once_with(*convcoor(0, 0, 300, 200))
        s = viewport_scale(300, 200)
        ctx.scale.assert_called_once_with(s, s)

        names = [c[0] for c in ctx.method_calls]
        self.assertLess(names.index('save'), names.index('beginPath'))
        self.assertLess(names.index('stroke'), names.index('restore'))
        self.assertEqual(len(self.scene.readout.samples), 1)

    def test_zero_size_frame_skipped(self):
        ctx = MagicMock()
        self.scene.on_tick(Tick(16.0, 1.0, 0, 0))
        self.scene.on_draw(Frame(ctx, 0, 0))
        self.assertEqual(ctx.method_calls, [])
        self.assertEqual(len(self.scene.readout.samples), 0)

    def test_draw_projects_current_rotation(self):
        self.scene.on_tick(Tick(500.0, 1.0, 200, 200))
        self.scene.on_draw(Frame(MagicMock(), 200, 200))
        self.assertTrue(np.all(np.isfinite(self.scene.points)))


class TestCoord(unittest.TestCase):
    def test_center_and_scale(self):
        self.assertEqual(convcoor(0, 0, 400, 200), (200, 100))
        s = viewport_scale(400, 200, margin=0.5)
        self.assertEqual(s, 100)
        self.assertEqual(convcoor(1, -1, 400, 200, margin=0.5), (300, 0))


if __name__ == '__main__':
    unittest.main()
