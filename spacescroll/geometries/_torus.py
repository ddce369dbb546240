import numpy as np
from pygfx import Geometry


def torus_geometry(
    radius=1.0, tube=0.4, radial_segments=12, tubular_segments=48, arc=2 * np.pi
):
    """Generate a torus.

    Creates a ring-shaped torus around the local origin, lying in the xy
    plane, with the same vertex layout as ThreeJS' ``TorusGeometry``.

    Parameters
    ----------
    radius : float
        Distance from the center of the torus to the center of the tube.
    tube : float
        The radius of the tube. A tube wider than ``radius`` gives a spindle
        torus that passes through its own center.
    radial_segments : int
        The number of segments around the tube's cross section. Default 12.
    tubular_segments : int
        The number of segments along the ring. Default 48.
    arc : float
        The central angle (in rad) of the ring. Default is a full circle.

    Returns
    -------
    torus : Geometry
        A geometry object representing the requested torus. The first and
        last ring of vertices coincide (duplicate vertices) so that texture
        coordinates can wrap.

    """

    if radius <= 0 or tube <= 0:
        raise ValueError("Torus radius and tube must be positive.")
    if int(radial_segments) < 3 or int(tubular_segments) < 3:
        raise ValueError("A torus needs at least 3 radial and 3 tubular segments.")
    radial_segments = int(radial_segments)
    tubular_segments = int(tubular_segments)

    radial_verts = radial_segments + 1
    tubular_verts = tubular_segments + 1

    # Angles around the tube (v) and along the ring (u)
    v = np.linspace(0, 2 * np.pi, radial_verts, dtype=np.float32)
    u = np.linspace(0, arc, tubular_verts, dtype=np.float32)

    # Vertices are ordered per radial ring, like ThreeJS: index = j * tubular_verts + i
    vv, uu = np.meshgrid(v, u, indexing="ij")

    ring = radius + tube * np.cos(vv)
    positions = np.stack(
        [ring * np.cos(uu), ring * np.sin(uu), tube * np.sin(vv)], axis=-1
    )
    centers = np.stack(
        [radius * np.cos(uu), radius * np.sin(uu), np.zeros_like(uu)], axis=-1
    )

    normals = positions - centers
    positions.shape = -1, 3
    normals.shape = -1, 3
    normals *= 1 / np.linalg.norm(normals, axis=1).reshape(-1, 1)

    texcoords = np.stack([uu / arc, vv / (2 * np.pi)], axis=-1).reshape(-1, 2)

    # Two triangles per quad: (a, b, d) and (b, c, d)
    j, i = np.meshgrid(
        np.arange(1, radial_verts, dtype=np.uint32),
        np.arange(1, tubular_verts, dtype=np.uint32),
        indexing="ij",
    )
    a = tubular_verts * j + i - 1
    b = tubular_verts * (j - 1) + i - 1
    c = tubular_verts * (j - 1) + i
    d = tubular_verts * j + i
    indices = np.stack([a, b, d, b, c, d], axis=-1).reshape(-1, 3)

    return Geometry(
        indices=indices.astype(np.uint32),
        positions=positions.astype(np.float32),
        normals=normals.astype(np.float32),
        texcoords=texcoords.astype(np.float32),
    )
