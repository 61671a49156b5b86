import numpy as np
from transition import Phase, ease, phase_of


def rotate(points, angle_y, angle_z):
    """Rotate (N, 3) points around Z by angle_z, then around Y by angle_y."""
    x, y, z = points[:, 0], points[:, 1], points[:, 2]

    cz, sz = np.cos(angle_z), np.sin(angle_z)
    x, y = x * cz - y * sz, x * sz + y * cz

    cy, sy = np.cos(angle_y), np.sin(angle_y)
    x, z = x * cy - z * sy, x * sy + z * cy

    return x, y, z


def stereographic(x, y, z):
    """Stereographic projection from the z=1 pole. The pole itself goes to inf/nan."""
    with np.errstate(divide='ignore', invalid='ignore'):
        inverse_z = 1 - z
        return x / inverse_z, y / inverse_z


def perspective(x, y, z):
    """Pseudo-perspective: scale by a quadratic falloff in depth."""
    depth = (1 - (z + 1) / 2) ** 2 + 1
    return x * depth, y * depth


def new_buffer(base):
    """Allocate the (N, 2) output buffer matching a base mesh."""
    return np.zeros((len(base), 2))


def project(base, angle_y, angle_z, position, out):
    """
    Rotate the base mesh and project it into `out`, in place.

    Args:
        base: (N, 3) base mesh, left untouched
        angle_y: Rotation around the vertical axis (radians)
        angle_z: Rotation around the depth axis (radians)
        position: Transition position, 0 = perspective, 1 = stereographic
        out: (N, 2) buffer from new_buffer(), overwritten
    """
    if out.shape != (len(base), 2):
        raise ValueError("Output buffer does not match the mesh.")

    x, y, z = rotate(base, angle_y, angle_z)
    phase = phase_of(position)

    if phase is Phase.AT_STEREOGRAPHIC:
        out[:, 0], out[:, 1] = stereographic(x, y, z)
    elif phase is Phase.AT_PERSPECTIVE:
        out[:, 0], out[:, 1] = perspective(x, y, z)
    else:
        sx, sy = stereographic(x, y, z)
        px, py = perspective(x, y, z)
        t = ease(position)
        with np.errstate(invalid='ignore'):
            out[:, 0] = px + (sx - px) * t
            out[:, 1] = py + (sy - py) * t
