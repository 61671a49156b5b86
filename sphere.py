"""
UV-sphere vertex generation.

The mesh is a flat list of unit-sphere points ordered pole, interior rings
(polar angle increasing), pole. The renderer walks it with index arithmetic,
so the order is part of the contract.
"""

import numpy as np


def vertex_count(ring_count: int, ring_point_count: int) -> int:
    """Number of vertices produced by generate()."""
    return 2 + (ring_count - 2) * ring_point_count


def ring_start(ring: int, ring_point_count: int) -> int:
    """Index of the first vertex of interior ring `ring` (0-based, poles excluded)."""
    return 1 + ring * ring_point_count


def generate(ring_count: int, ring_point_count: int) -> np.ndarray:
    """
    Build the base mesh of a unit sphere.

    Args:
        ring_count: Number of polar positions, both poles included
        ring_point_count: Vertices per interior ring

    Returns:
        Read-only NumPy array of shape (N, 3) with N = vertex_count(...)
    """
    if ring_count < 2:
        raise ValueError("ring_count must be at least 2.")
    if ring_point_count < 1:
        raise ValueError("ring_point_count must be at least 1.")

    polar = np.linspace(0, np.pi, ring_count)
    azimuth = np.arange(ring_point_count) * (2 * np.pi / ring_point_count)

    mesh = np.empty((vertex_count(ring_count, ring_point_count), 3))
    i = 0
    for phi in polar:
        ring_radius = np.sin(phi)
        z = np.cos(phi)
        # cos() only lands exactly on +-1 at the two ends of linspace
        if z == 1.0 or z == -1.0:
            mesh[i] = (0.0, 0.0, z)
            i += 1
            continue
        ring = mesh[i:i + ring_point_count]
        ring[:, 0] = np.sin(azimuth) * ring_radius
        ring[:, 1] = np.cos(azimuth) * ring_radius
        ring[:, 2] = z
        i += ring_point_count

    mesh.flags.writeable = False
    return mesh
