"""Basic rigid and scaling transformations: rotate, scale, translate."""

from __future__ import annotations

import math
from dataclasses import dataclass

from ..errors import TransformError
from ..geometry import Vec3
from ..model import Model, Transform


def _rotate(vector: Vec3, axis: Vec3, cos_a: float, sin_a: float) -> Vec3:
    """Rotate a vector about a unit axis (Rodrigues' formula)."""
    return (
        vector * cos_a
        + axis.cross(vector) * sin_a
        + axis * (axis.dot(vector) * (1.0 - cos_a))
    )


class Rotate(Transform):
    """Rotates a model about an axis through the origin."""

    def __init__(self, axis: Vec3, angle_degrees: float) -> None:
        self.axis = axis.normalize()
        self.angle_rad = math.radians(angle_degrees)

    def __repr__(self) -> str:
        return f"Rotate(axis={self.axis!r}, angle_rad={self.angle_rad!r})"

    @classmethod
    def around_x(cls, angle_degrees: float) -> "Rotate":
        return cls(Vec3(1.0, 0.0, 0.0), angle_degrees)

    @classmethod
    def around_y(cls, angle_degrees: float) -> "Rotate":
        return cls(Vec3(0.0, 1.0, 0.0), angle_degrees)

    @classmethod
    def around_z(cls, angle_degrees: float) -> "Rotate":
        return cls(Vec3(0.0, 0.0, 1.0), angle_degrees)

    def apply(self, model: Model) -> None:
        axis = self.axis.normalize()
        cos_a, sin_a = math.cos(self.angle_rad), math.sin(self.angle_rad)
        for vertex in model.mesh.vertices:
            vertex.position = _rotate(vertex.position, axis, cos_a, sin_a)
            vertex.normal = _rotate(vertex.normal, axis, cos_a, sin_a)


@dataclass(frozen=True)
class Scale(Transform):
    """Scales a model along each axis, adjusting normals accordingly."""

    x: float
    y: float
    z: float

    @classmethod
    def uniform(cls, scale: float) -> "Scale":
        return cls(scale, scale, scale)

    def apply(self, model: Model) -> None:
        uniform = self.x == self.y == self.z
        for vertex in model.mesh.vertices:
            p = vertex.position
            vertex.position = Vec3(p.x * self.x, p.y * self.y, p.z * self.z)
            if uniform:
                if self.x != 0.0:
                    vertex.normal = vertex.normal.normalize()
            elif self.x != 0.0 and self.y != 0.0 and self.z != 0.0:
                n = vertex.normal
                vertex.normal = Vec3(n.x / self.x, n.y / self.y, n.z / self.z).normalize()
            else:
                raise TransformError("Cannot scale by zero in any dimension")


@dataclass(frozen=True)
class Translate(Transform):
    """Moves a model by a fixed offset."""

    x: float
    y: float
    z: float

    def apply(self, model: Model) -> None:
        offset = Vec3(self.x, self.y, self.z)
        for vertex in model.mesh.vertices:
            vertex.position = vertex.position + offset