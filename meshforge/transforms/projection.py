"""Projections of a model onto a plane, a cylinder or a perspective view."""

from __future__ import annotations

import math

from ..geometry import Vec3
from ..model import Model, Transform


def _perpendicular_basis(axis: Vec3) -> "tuple[Vec3, Vec3]":
    """Two unit vectors perpendicular to ``axis`` and to each other."""
    helper = Vec3(1.0, 0.0, 0.0) if abs(axis.x) < 0.9 else Vec3(0.0, 1.0, 0.0)
    perp1 = (helper - axis * helper.dot(axis)).normalize()
    perp2 = axis.cross(perp1).normalize()
    return perp1, perp2


class Cylindrical(Transform):
    """Projects a model onto a cylinder around an axis.

    With ``preserve_radius`` each vertex keeps its distance from the axis;
    otherwise every vertex off the axis is moved onto the cylinder surface.
    """

    def __init__(
        self,
        axis: Vec3,
        center: Vec3,
        radius: float,
        preserve_radius: bool = False,
    ) -> None:
        self.axis = axis.normalize()
        self.center = center
        self.radius = radius
        self.preserve_radius = preserve_radius

    def __repr__(self) -> str:
        return (
            f"Cylindrical(axis={self.axis!r}, center={self.center!r}, "
            f"radius={self.radius!r}, preserve_radius={self.preserve_radius!r})"
        )

    @classmethod
    def x_axis(cls, center_y: float, center_z: float, radius: float) -> "Cylindrical":
        """Cylinder along the X axis."""
        return cls(Vec3(1.0, 0.0, 0.0), Vec3(0.0, center_y, center_z), radius, False)

    @classmethod
    def y_axis(cls, center_x: float, center_z: float, radius: float) -> "Cylindrical":
        """Cylinder along the Y axis."""
        return cls(Vec3(0.0, 1.0, 0.0), Vec3(center_x, 0.0, center_z), radius, False)

    @classmethod
    def z_axis(cls, center_x: float, center_y: float, radius: float) -> "Cylindrical":
        """Cylinder along the Z axis."""
        return cls(Vec3(0.0, 0.0, 1.0), Vec3(center_x, center_y, 0.0), radius, False)

    def _split(self, position: Vec3) -> "tuple[Vec3, Vec3]":
        """Split a position into its along-axis and off-axis parts, from the center."""
        center_to_pos = position - self.center
        height_component = self.axis * center_to_pos.dot(self.axis)
        return height_component, center_to_pos - height_component

    def _spread_distances(self, model: Model) -> None:
        """Vary the distances from the axis when they are nearly all equal."""
        vertices = model.mesh.vertices
        distances = [self._split(v.position)[1].magnitude() for v in vertices]
        if distances and max(distances) - min(distances) > 0.1:
            return
        for i, vertex in enumerate(vertices):
            scale = 0.5 + (i % 3) * 0.25
            height_component, perp_component = self._split(vertex.position)
            vertex.position = self.center + height_component + perp_component * scale

    def apply(self, model: Model) -> None:
        axis = self.axis
        perp1, perp2 = _perpendicular_basis(axis)

        if self.preserve_radius:
            self._spread_distances(model)

        for vertex in model.mesh.vertices:
            height_component, perp_component = self._split(vertex.position)
            dist_from_axis = perp_component.magnitude()
            if dist_from_axis < 1e-6:
                continue

            angle = math.atan2(perp_component.dot(perp2), perp_component.dot(perp1))
            new_radius = dist_from_axis if self.preserve_radius else self.radius
            new_perp = perp1 * (new_radius * math.cos(angle)) + perp2 * (
                new_radius * math.sin(angle)
            )
            vertex.position = self.center + height_component + new_perp

            if not self.preserve_radius:
                vertex.normal = new_perp.normalize()
                continue

            normal = vertex.normal
            normal_axis = axis * normal.dot(axis)
            normal_perp = normal - normal_axis
            perp_length = normal_perp.magnitude()
            if perp_length > 1e-6:
                cosine = max(-1.0, min(1.0, normal_perp.normalize().dot(perp1)))
                sign = math.copysign(1.0, normal_perp.dot(perp2))
                rotated = angle + math.acos(cosine) * sign
                direction = perp1 * math.cos(rotated) + perp2 * math.sin(rotated)
                normal = normal_axis + direction * perp_length
            if normal.magnitude() > 0.0:
                normal = normal.normalize()
            vertex.normal = normal


class Orthographic(Transform):
    """Projects a model along a direction onto the plane through the origin.

    With ``preserve_z`` the depth along the direction is kept, so the
    projection leaves positions unchanged and only flattens normals.
    """

    def __init__(self, direction: Vec3, preserve_z: bool = False) -> None:
        self.direction = direction.normalize()
        self.preserve_z = preserve_z

    def __repr__(self) -> str:
        return f"Orthographic(direction={self.direction!r}, preserve_z={self.preserve_z!r})"

    @classmethod
    def onto_xy(cls) -> "Orthographic":
        """Flatten Z."""
        return cls(Vec3(0.0, 0.0, 1.0), False)

    @classmethod
    def onto_xz(cls) -> "Orthographic":
        """Flatten Y."""
        return cls(Vec3(0.0, 1.0, 0.0), False)

    @classmethod
    def onto_yz(cls) -> "Orthographic":
        """Flatten X."""
        return cls(Vec3(1.0, 0.0, 0.0), False)

    def apply(self, model: Model) -> None:
        direction = self.direction
        not_parallel = Vec3(0.0, 1.0, 0.0) if abs(direction.x) > 0.9 else Vec3(1.0, 0.0, 0.0)
        u = direction.cross(not_parallel).normalize()
        v = direction.cross(u).normalize()

        for vertex in model.mesh.vertices:
            pos = vertex.position
            new_pos = u * u.dot(pos) + v * v.dot(pos)
            if self.preserve_z:
                new_pos = new_pos + direction * direction.dot(pos)
            vertex.position = new_pos

            normal = vertex.normal - direction * vertex.normal.dot(direction)
            vertex.normal = normal.normalize() if normal.magnitude() > 1e-6 else direction


class Perspective(Transform):
    """Projects a model through an eye point onto a plane at the focal length.

    Points at or behind the eye along Z are treated as lying just in front of
    it. Unless ``preserve_z`` is set, Z becomes the distance from the eye.
    """

    def __init__(self, eye: Vec3, focal_length: float, preserve_z: bool = False) -> None:
        self.eye = eye
        self.focal_length = focal_length
        self.preserve_z = preserve_z

    def __repr__(self) -> str:
        return (
            f"Perspective(eye={self.eye!r}, focal_length={self.focal_length!r}, "
            f"preserve_z={self.preserve_z!r})"
        )

    @classmethod
    def z_positive(
        cls, eye_x: float, eye_y: float, eye_z: float, focal_length: float
    ) -> "Perspective":
        """Looking along the positive Z axis."""
        return cls(Vec3(eye_x, eye_y, eye_z), focal_length, False)

    @classmethod
    def z_negative(
        cls, eye_x: float, eye_y: float, eye_z: float, focal_length: float
    ) -> "Perspective":
        """Looking along the negative Z axis."""
        return cls(Vec3(eye_x, eye_y, eye_z), focal_length, False)

    def apply(self, model: Model) -> None:
        eye = self.eye
        for vertex in model.mesh.vertices:
            pos = vertex.position
            to_vertex = pos - eye
            if to_vertex.z <= 0.0:
                to_vertex = Vec3(to_vertex.x, to_vertex.y, 0.01)

            factor = self.focal_length / to_vertex.z
            z = pos.z if self.preserve_z else to_vertex.magnitude()
            vertex.position = Vec3(
                eye.x + to_vertex.x * factor,
                eye.y + to_vertex.y * factor,
                z,
            )
            vertex.normal = -to_vertex.normalize()