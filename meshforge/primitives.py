"""Primitive shapes (cube, sphere, cylinder) used as building blocks."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Tuple

from .geometry import Face, Vec3, Vertex
from .model import Model

Point = Tuple[float, float, float]

# Corner signs (x, y, z) and texture coordinates of the eight cube vertices.
_CUBE_CORNERS = (
    ((-1, -1, 1), (0.0, 0.0)),
    ((1, -1, 1), (1.0, 0.0)),
    ((1, 1, 1), (1.0, 1.0)),
    ((-1, 1, 1), (0.0, 1.0)),
    ((-1, -1, -1), (0.0, 0.0)),
    ((-1, 1, -1), (0.0, 1.0)),
    ((1, 1, -1), (1.0, 1.0)),
    ((1, -1, -1), (1.0, 0.0)),
)

# Two triangles per side: front, back, top, bottom, right, left.
_CUBE_TRIANGLES = (
    (0, 1, 2), (0, 2, 3),
    (4, 5, 6), (4, 6, 7),
    (3, 2, 6), (3, 6, 5),
    (0, 4, 7), (0, 7, 1),
    (1, 7, 6), (1, 6, 2),
    (0, 3, 5), (0, 5, 4),
)


@dataclass
class Cube:
    """An axis-aligned cube of the given edge length."""

    size: float = 1.0
    center: Point = (0.0, 0.0, 0.0)
    with_uvs: bool = True

    def __post_init__(self) -> None:
        if not self.size > 0.0:
            raise ValueError("Cube size must be positive")

    def build(self) -> Model:
        """Create the cube model with eight shared vertices and twelve triangles."""
        model = Model("Cube")
        half = self.size / 2.0
        cx, cy, cz = self.center
        for (sx, sy, sz), uv in _CUBE_CORNERS:
            model.mesh.add_vertex(
                Vertex(
                    Vec3(cx + sx * half, cy + sy * half, cz + sz * half),
                    Vec3.zeros(),
                    uv if self.with_uvs else None,
                )
            )
        for a, b, c in _CUBE_TRIANGLES:
            model.mesh.add_face(Face.triangle(a, b, c), None)
        return model


@dataclass
class Sphere:
    """A UV sphere made of latitude rings and longitude segments."""

    radius: float = 1.0
    center: Point = (0.0, 0.0, 0.0)
    segments: int = 32
    rings: int = 16

    def __post_init__(self) -> None:
        if not self.radius > 0.0:
            raise ValueError("Sphere radius must be positive")
        if self.segments < 3:
            raise ValueError("Sphere must have at least 3 segments")
        if self.rings < 2:
            raise ValueError("Sphere must have at least 2 rings")

    def build(self) -> Model:
        """Create the sphere model with pole vertices and ring vertices."""
        model = Model("Sphere")
        mesh = model.mesh
        cx, cy, cz = self.center
        r = self.radius

        top = mesh.add_vertex(Vertex(Vec3(cx, cy + r, cz), Vec3(0.0, 1.0, 0.0), (0.5, 1.0)))
        bottom = mesh.add_vertex(Vertex(Vec3(cx, cy - r, cz), Vec3(0.0, -1.0, 0.0), (0.5, 0.0)))

        rings = []
        for i in range(self.rings - 1):
            fraction = (i + 1) / self.rings
            phi = math.pi * fraction
            cos_phi, sin_phi = math.cos(phi), math.sin(phi)
            y = cy + r * cos_phi
            ring_radius = r * sin_phi
            ring = []
            for j in range(self.segments):
                theta = 2.0 * math.pi * j / self.segments
                cos_t, sin_t = math.cos(theta), math.sin(theta)
                ring.append(
                    mesh.add_vertex(
                        Vertex(
                            Vec3(cx + ring_radius * cos_t, y, cz + ring_radius * sin_t),
                            Vec3(sin_phi * cos_t, cos_phi, sin_phi * sin_t),
                            (j / self.segments, 1.0 - fraction),
                        )
                    )
                )
            rings.append(ring)

        def around(ring):
            return zip(ring, ring[1:] + ring[:1])

        for current, following in around(rings[0]):
            mesh.add_face(Face.triangle(top, current, following), None)

        for upper, lower in zip(rings, rings[1:]):
            for (a, a_next), (b, b_next) in zip(around(upper), around(lower)):
                mesh.add_face(Face.triangle(a, b, a_next), None)
                mesh.add_face(Face.triangle(a_next, b, b_next), None)

        for current, following in around(rings[-1]):
            mesh.add_face(Face.triangle(bottom, following, current), None)

        return model


@dataclass
class Cylinder:
    """A cylinder standing along the Y axis, optionally capped."""

    radius: float = 1.0
    height: float = 2.0
    center: Point = (0.0, 0.0, 0.0)
    segments: int = 32
    caps: bool = True

    def __post_init__(self) -> None:
        if not self.radius > 0.0:
            raise ValueError("Cylinder radius must be positive")
        if not self.height > 0.0:
            raise ValueError("Cylinder height must be positive")
        if self.segments < 3:
            raise ValueError("Cylinder must have at least 3 segments")

    def build(self) -> Model:
        """Create the cylinder model: side wall and, if enabled, end caps."""
        model = Model("Cylinder")
        mesh = model.mesh
        cx, cy, cz = self.center
        half = self.height / 2.0

        tops = []
        bottoms = []
        for i in range(self.segments):
            theta = 2.0 * math.pi * i / self.segments
            cos_t, sin_t = math.cos(theta), math.sin(theta)
            x, z = self.radius * cos_t, self.radius * sin_t
            normal = Vec3(cos_t, 0.0, sin_t)
            u = i / self.segments
            tops.append(mesh.add_vertex(Vertex(Vec3(cx + x, cy + half, cz + z), normal, (u, 1.0))))
            bottoms.append(
                mesh.add_vertex(Vertex(Vec3(cx + x, cy - half, cz + z), normal, (u, 0.0)))
            )

        top_pairs = list(zip(tops, tops[1:] + tops[:1]))
        bottom_pairs = list(zip(bottoms, bottoms[1:] + bottoms[:1]))

        for (t, t_next), (b, b_next) in zip(top_pairs, bottom_pairs):
            mesh.add_face(Face.triangle(b, t, t_next), None)
            mesh.add_face(Face.triangle(b, t_next, b_next), None)

        if self.caps:
            top_center = mesh.add_vertex(
                Vertex(Vec3(cx, cy + half, cz), Vec3(0.0, 1.0, 0.0), (0.5, 0.5))
            )
            bottom_center = mesh.add_vertex(
                Vertex(Vec3(cx, cy - half, cz), Vec3(0.0, -1.0, 0.0), (0.5, 0.5))
            )
            for t, t_next in top_pairs:
                mesh.add_face(Face.triangle(top_center, t, t_next), None)
            for b, b_next in bottom_pairs:
                mesh.add_face(Face.triangle(bottom_center, b_next, b), None)

        return model