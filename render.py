"""
Wireframe rendering of a projected sphere mesh.

Draws latitude rings and pole-to-pole meridians onto any surface offering
the canvas-style path API (beginPath, moveTo, lineTo, stroke). Points are
in unit-circle space; the caller sets up the pixel transform.
"""

from collections import deque

from config import MAX_LINE_DELTA, READOUT_WINDOW
from sphere import ring_start


def guarded_line(ctx, x0, y0, x1, y1, limit=MAX_LINE_DELTA):
    """
    Draw from (x0, y0) to (x1, y1), or only move the pen there.

    Stereographic projection throws points near its pole far away; a segment
    whose |dx| or |dy| reaches `limit` would streak across the view, so the
    pen is repositioned instead. NaN deltas fail the test as well.
    """
    if abs(x1 - x0) < limit and abs(y1 - y0) < limit:
        ctx.lineTo(x1, y1)
    else:
        ctx.moveTo(x1, y1)


def draw_rings(ctx, pts, ring_count, ring_point_count, ring_spacing):
    for ring in range(0, ring_count - 2, ring_spacing):
        start = ring_start(ring, ring_point_count)
        px, py = pts[start + ring_point_count - 1]
        ctx.moveTo(px, py)
        for i in range(start, start + ring_point_count):
            x, y = pts[i]
            guarded_line(ctx, px, py, x, y)
            px, py = x, y


def draw_meridians(ctx, pts, ring_count, ring_point_count, line_spacing):
    last = len(pts) - 1
    for k in range(0, ring_point_count, line_spacing):
        px, py = pts[0]
        ctx.moveTo(px, py)
        for ring in range(ring_count - 2):
            x, y = pts[ring_start(ring, ring_point_count) + k]
            guarded_line(ctx, px, py, x, y)
            px, py = x, y
        x, y = pts[last]
        guarded_line(ctx, px, py, x, y)


def draw(ctx, points, ring_count, ring_point_count, line_spacing, ring_spacing):
    """
    Stroke rings and meridians of a projected mesh as one path.

    Args:
        ctx: Drawing surface
        points: (N, 2) projected vertices, index-aligned with the base mesh
        ring_count: Ring count the mesh was generated with
        ring_point_count: Points per ring the mesh was generated with
        line_spacing: Draw every Nth meridian
        ring_spacing: Draw every Nth interior ring
    """
    # Plain floats are much faster to index than numpy scalars
    pts = points.tolist()
    ctx.beginPath()
    draw_rings(ctx, pts, ring_count, ring_point_count, ring_spacing)
    draw_meridians(ctx, pts, ring_count, ring_point_count, line_spacing)
    ctx.stroke()


class RenderTimeReadout:
    """Rolling average of per-frame render times in milliseconds."""

    def __init__(self, window=READOUT_WINDOW):
        self.samples = deque(maxlen=window)

    def add(self, ms):
        self.samples.append(ms)

    @property
    def average(self):
        if not self.samples:
            return 0.0
        return sum(self.samples) / len(self.samples)

    def __str__(self):
        return f"render: {self.average:.2f} ms"
