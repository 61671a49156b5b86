from config import VIEW_MARGIN


def viewport_scale(width, height, margin=VIEW_MARGIN):
    """Pixel radius of the unit circle for a width x height viewport."""
    return min(width, height) * margin


def convcoor(x, y, width, height, margin=VIEW_MARGIN):
    """Convert unit-circle coordinates to pixel coordinates (y down)."""
    s = viewport_scale(width, height, margin)
    return x * s + width / 2, y * s + height / 2
