"""
Canvas-style drawing surface that records to SVG.

Implements the subset of the HTML canvas 2D API the renderer uses. Drawing
commands are transformed to pixels as they arrive; each stroke() becomes one
<path> element with "M x y L x y" data.
"""

import math
from pathlib import Path


def fmt(v):
    return f"{v:.2f}".rstrip('0').rstrip('.')


class SvgSurface:
    def __init__(self, width, height):
        self.width = width
        self.height = height

        self.fillStyle = '#000000'
        self.strokeStyle = '#000000'
        self.lineWidth = 1.0
        self.globalCompositeOperation = 'source-over'

        # Affine transform restricted to scale + translate: (sx, sy, tx, ty)
        self.transform = (1.0, 1.0, 0.0, 0.0)
        self.stack = []

        self.elements = []
        self.path = []
        self.pending_move = None
        self.open = False

    # --- state ---

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

    def to_pixels(self, x, y):
        sx, sy, tx, ty = self.transform
        return x * sx + tx, y * sy + ty

    # --- drawing ---

    def fillRect(self, x, y, w, h):
        x0, y0 = self.to_pixels(x, y)
        x1, y1 = self.to_pixels(x + w, y + h)
        self.elements.append(
            f'<rect x="{fmt(min(x0, x1))}" y="{fmt(min(y0, y1))}" '
            f'width="{fmt(abs(x1 - x0))}" height="{fmt(abs(y1 - y0))}" '
            f'fill="{self.fillStyle}"{self.blend_attr()}/>')

    def beginPath(self):
        self.path = []
        self.pending_move = None
        self.open = False

    def moveTo(self, x, y):
        # Only the last of consecutive moves matters
        self.pending_move = (x, y)
        self.open = False

    def lineTo(self, x, y):
        px, py = self.to_pixels(x, y)
        if not (math.isfinite(px) and math.isfinite(py)):
            self.moveTo(x, y)
            return
        if not self.open:
            start = self.pending_move
            if start is None:
                # Canvas treats lineTo without a current point as moveTo
                self.moveTo(x, y)
                return
            mx, my = self.to_pixels(*start)
            if not (math.isfinite(mx) and math.isfinite(my)):
                self.moveTo(x, y)
                return
            self.path.append(f"M{fmt(mx)} {fmt(my)}")
            self.pending_move = None
            self.open = True
        self.path.append(f"L{fmt(px)} {fmt(py)}")

    def stroke(self):
        if not self.path:
            return
        # Stroke width scales with the current transform, like a canvas
        width = self.lineWidth * abs(self.transform[0])
        self.elements.append(
            f'<path d="{"".join(self.path)}" fill="none" stroke="{self.strokeStyle}" '
            f'stroke-linecap="round" stroke-linejoin="round" '
            f'stroke-width="{fmt(width)}"{self.blend_attr()}/>')

    def blend_attr(self):
        mode = self.globalCompositeOperation
        if mode == 'source-over':
            return ''
        # Canvas 'lighter' is additive; 'screen' is the closest SVG blend mode
        if mode == 'lighter':
            mode = 'screen'
        return f' style="mix-blend-mode:{mode}"'

    # --- output ---

    def to_svg(self):
        header = (f'<svg height="{self.height}" viewBox="0 0 {self.width} {self.height}" '
                  f'width="{self.width}" xmlns="http://www.w3.org/2000/svg">\n')
        return header + "\n".join(self.elements) + "\n</svg>\n"

    def save_svg(self, path):
        Path(path).write_text(self.to_svg())
