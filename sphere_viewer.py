#!/usr/bin/env python3
"""
Interactive Sphere Grid Viewer
Animates the projected sphere wireframe in a PyVista window. A repeating
timer drives the scene, left-drag rotates the sphere and the 's' key or the
checkbox button switches between perspective and stereographic projection.

Usage:
    pip install pyvista numpy
    python sphere_viewer.py
    python sphere_viewer.py --preview-3d     # base mesh on a 3D sphere
"""

import argparse
import time

import numpy as np
import pyvista as pv

import config
from interact import DragInput
from scene import Frame, Scene, Tick
from sphere import ring_start


# ============================================================================
# CONFIGURATION
# ============================================================================

TIMER_STEPS = 10 ** 9          # Effectively run until the window closes
READOUT_FONT_SIZE = 10
TOGGLE_BUTTON_SIZE = 30
SPHERE_COLOR = '#1a1a2e'       # Dark blue
RING_COLOR = 'yellow'
MERIDIAN_COLOR = 'gray'


# ============================================================================
# DRAWING SURFACE
# ============================================================================

class PolyLineSurface:
    """
    Canvas-style surface that collects stroked segments as line cells.

    Coordinates are transformed to pixels (origin top-left, y down) and
    flipped into the plotter's y-up world, one unit per pixel.
    """

    def __init__(self, width, height):
        self.width = width
        self.height = height

        self.fillStyle = '#000000'
        self.strokeStyle = '#ffffff'
        self.lineWidth = 1.0
        self.globalCompositeOperation = 'source-over'
        self.background = None

        self.transform = (1.0, 1.0, 0.0, 0.0)
        self.stack = []

        self.segments = []
        self.pen = None
        self.stroke_width = self.lineWidth
        self.stroke_color = self.strokeStyle

    def save(self):
        self.stack.append((self.transform, self.fillStyle, self.strokeStyle,
                           self.lineWidth, self.globalCompositeOperation))

    def restore(self):
        if self.stack:
            (self.transform, self.fillStyle, self.strokeStyle,
             self.lineWidth, self.globalCompositeOperation) = self.stack.pop()

    def translate(self, x, y):
        sx, sy, tx, ty = self.transform
        self.transform = (sx, sy, tx + x * sx, ty + y * sy)

    def scale(self, x, y):
        sx, sy, tx, ty = self.transform
        self.transform = (sx * x, sy * y, tx, ty)

    def to_world(self, x, y):
        sx, sy, tx, ty = self.transform
        return x * sx + tx, self.height - (y * sy + ty)

    def fillRect(self, x, y, w, h):
        # The plotter background stands in for a full-viewport fill
        self.background = self.fillStyle

    def beginPath(self):
        self.segments = []
        self.pen = None

    def moveTo(self, x, y):
        self.pen = self.to_world(x, y)

    def lineTo(self, x, y):
        point = self.to_world(x, y)
        if self.pen is not None and np.all(np.isfinite(self.pen + point)):
            self.segments.append((self.pen, point))
        self.pen = point

    def stroke(self):
        self.stroke_width = self.lineWidth * abs(self.transform[0])
        self.stroke_color = self.strokeStyle

    def to_polydata(self):
        """Stroked segments as PolyData, or None if nothing was drawn."""
        if not self.segments:
            return None
        points = np.zeros((2 * len(self.segments), 3))
        points[:, :2] = np.array(self.segments).reshape(-1, 2)
        n = len(self.segments)
        cells = np.column_stack([np.full(n, 2), np.arange(0, 2 * n, 2), np.arange(1, 2 * n, 2)])
        return pv.PolyData(points, lines=cells.ravel())


# ============================================================================
# VIEWER
# ============================================================================

class SphereViewer:
    def __init__(self, scene, window_size=config.WINDOW_SIZE, frame_ms=config.FRAME_MS):
        self.scene = scene
        self.frame_ms = frame_ms
        self.plotter = pv.Plotter(window_size=list(window_size))
        self.drag: DragInput = scene.interaction
        self.last = None
        self.background = config.BACKGROUND_COLOR

    @property
    def size(self):
        width, height = self.plotter.window_size
        return width, height

    # --- input ---

    def pointer(self):
        x, y = self.plotter.iren.get_event_position()
        return x, self.size[1] - y

    def on_press(self, *args):
        self.drag.on_drag_start(*self.pointer())

    def on_move(self, *args):
        self.drag.on_drag_move(*self.pointer())

    def on_release(self, *args):
        self.drag.on_drag_end(*self.size)

    def on_toggle_key(self):
        self.scene.toggle()

    def on_checkbox(self, value):
        if value != self.scene.state.transition.stereographic:
            self.scene.toggle()

    # --- frame loop ---

    def fit_camera(self, width, height):
        camera = self.plotter.camera
        camera.focal_point = (width / 2, height / 2, 0.0)
        camera.position = (width / 2, height / 2, 1.0)
        camera.up = (0.0, 1.0, 0.0)
        camera.parallel_scale = height / 2

    def step(self, *args):
        now = time.perf_counter()
        dt = self.frame_ms if self.last is None else (now - self.last) * 1000.0
        self.last = now

        width, height = self.size
        self.scene.on_tick(Tick(sim_time=dt, sim_speed=1.0, width=width, height=height))
        if not width or not height:
            return
        surface = PolyLineSurface(width, height)
        self.scene.on_draw(Frame(ctx=surface, width=width, height=height))

        if surface.background not in (None, self.background):
            self.background = surface.background
            self.plotter.set_background(self.background)

        mesh = surface.to_polydata()
        if mesh is None:
            self.plotter.remove_actor('wire')
        else:
            self.plotter.add_mesh(
                mesh,
                color=surface.stroke_color,
                line_width=surface.stroke_width,
                name='wire',
                reset_camera=False
            )
        self.plotter.add_text(str(self.scene.readout), position='lower_right',
                              font_size=READOUT_FONT_SIZE, name='readout')
        self.fit_camera(width, height)
        self.plotter.render()

    def setup(self):
        plotter = self.plotter
        plotter.set_background(config.BACKGROUND_COLOR)
        plotter.enable_parallel_projection()
        plotter.view_xy()
        # No camera interaction; left-drag belongs to the scene
        plotter.enable_image_style()

        iren = plotter.iren
        iren.add_observer("LeftButtonPressEvent", self.on_press)
        iren.add_observer("MouseMoveEvent", self.on_move)
        iren.add_observer("LeftButtonReleaseEvent", self.on_release)

        plotter.add_key_event('s', self.on_toggle_key)
        plotter.add_checkbox_button_widget(
            self.on_checkbox,
            value=self.scene.state.transition.stereographic,
            position=(10, 10),
            size=TOGGLE_BUTTON_SIZE
        )
        plotter.add_timer_event(max_steps=TIMER_STEPS, duration=max(1, int(self.frame_ms)),
                                callback=self.step)

    def show(self):
        self.setup()
        self.step()
        self.plotter.show(title="Sphere Grid")


# ============================================================================
# 3D PREVIEW
# ============================================================================

def create_grid_lines(base, ring_count, ring_point_count, line_spacing, ring_spacing):
    """
    Build the drawn rings and meridians of a base mesh as 3D polylines.

    Returns:
        Tuple of (rings list, meridians list)
    """
    rings = []
    for ring in range(0, ring_count - 2, ring_spacing):
        start = ring_start(ring, ring_point_count)
        loop = base[start:start + ring_point_count]
        rings.append(pv.lines_from_points(np.vstack([loop, loop[:1]])))

    meridians = []
    for k in range(0, ring_point_count, line_spacing):
        idx = [0] + [ring_start(r, ring_point_count) + k for r in range(ring_count - 2)] + [len(base) - 1]
        meridians.append(pv.lines_from_points(base[idx]))

    return rings, meridians


def show_preview(scene, window_size=config.WINDOW_SIZE):
    plotter = pv.Plotter(window_size=list(window_size))
    plotter.set_background('black')
    plotter.add_mesh(pv.Sphere(radius=0.99), color=SPHERE_COLOR, smooth_shading=True)

    rings, meridians = create_grid_lines(scene.base, scene.ring_count, scene.ring_point_count,
                                         scene.line_spacing, scene.ring_spacing)
    for i, ring in enumerate(rings):
        plotter.add_mesh(ring, color=RING_COLOR, opacity=0.7, line_width=2,
                         render_lines_as_tubes=True, name=f'ring_{i}')
    for i, meridian in enumerate(meridians):
        plotter.add_mesh(meridian, color=MERIDIAN_COLOR, opacity=0.7, line_width=2,
                         render_lines_as_tubes=True, name=f'meridian_{i}')

    plotter.camera_position = [(3.0, 0, 0), (0, 0, 0), (0, 0, 1)]
    plotter.enable_terrain_style(mouse_wheel_zooms=True)
    plotter.show(title="Sphere Grid (3D)")


def main(argv=None):
    parser = argparse.ArgumentParser(description="Interactive sphere grid viewer.")
    parser.add_argument("--rings", type=int, default=config.RING_COUNT)
    parser.add_argument("--ring-points", type=int, default=config.RING_POINT_COUNT)
    parser.add_argument("--stereographic", action="store_true")
    parser.add_argument("--preview-3d", action="store_true")
    args = parser.parse_args(argv)
    if args.rings < 2 or args.ring_points < 1:
        parser.error("need --rings >= 2 and --ring-points >= 1")

    print("=" * 60)
    print("Sphere Grid Viewer")
    print("=" * 60)

    scene = Scene(ring_count=args.rings, ring_point_count=args.ring_points,
                  stereographic=args.stereographic)
    print(f"Mesh: {len(scene.base)} vertices")

    if args.preview_3d:
        print("\nOpening 3D preview...")
        show_preview(scene)
        return

    print("\n" + "=" * 60)
    print("CONTROLS:")
    print("  Left-drag:  Rotate sphere")
    print("  S / button: Toggle perspective / stereographic")
    print("  Q or ESC:   Close window")
    print("=" * 60)

    SphereViewer(scene).show()


if __name__ == "__main__":
    main()
