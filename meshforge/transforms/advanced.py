"""Advanced transformations: general matrices, mirroring and quaternion rotation."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

from ..errors import TransformError
from ..geometry import Vec3
from ..model import Model, Transform

Row = Tuple[float, float, float, float]
Matrix4 = Tuple[Row, Row, Row, Row]

_IDENTITY: Matrix4 = (
    (1.0, 0.0, 0.0, 0.0),
    (0.0, 1.0, 0.0, 0.0),
    (0.0, 0.0, 1.0, 0.0),
    (0.0, 0.0, 0.0, 1.0),
)


def _as_matrix4(rows: Sequence[Sequence[float]]) -> Matrix4:
    matrix = tuple(tuple(float(value) for value in row) for row in rows)
    if len(matrix) != 4 or any(len(row) != 4 for row in matrix):
        raise ValueError("A transformation matrix must have 4 rows of 4 values")
    return matrix  # type: ignore[return-value]


def _inverse(matrix: Matrix4) -> Optional[Matrix4]:
    """Invert a 4x4 matrix by Gauss-Jordan elimination; None if singular."""
    rows = [list(row) + list(unit) for row, unit in zip(matrix, _IDENTITY)]
    for col in range(4):
        pivot = max(range(col, 4), key=lambda r: abs(rows[r][col]))
        if rows[pivot][col] == 0.0:
            return None
        rows[col], rows[pivot] = rows[pivot], rows[col]
        lead = rows[col][col]
        rows[col] = [value / lead for value in rows[col]]
        for r, row in enumerate(rows):
            if r != col and row[col] != 0.0:
                factor = row[col]
                rows[r] = [a - factor * b for a, b in zip(row, rows[col])]
    return tuple(tuple(row[4:]) for row in rows)  # type: ignore[return-value]


def _transpose(matrix: Matrix4) -> Matrix4:
    return tuple(zip(*matrix))  # type: ignore[return-value]


def _multiply(matrix: Matrix4, vector: Sequence[float]) -> Tuple[float, ...]:
    return tuple(sum(a * b for a, b in zip(row, vector)) for row in matrix)


class Matrix(Transform):
    """Applies a general 4x4 transformation matrix, given as rows."""

    def __init__(self, matrix: Sequence[Sequence[float]]) -> None:
        self.matrix = _as_matrix4(matrix)
        inverse = _inverse(self.matrix)
        self.normal_matrix = _transpose(inverse if inverse is not None else _IDENTITY)

    def __repr__(self) -> str:
        return f"Matrix({self.matrix!r})"

    def apply(self, model: Model) -> None:
        for vertex in model.mesh.vertices:
            x, y, z, w = _multiply(self.matrix, (*vertex.position, 1.0))
            if w == 0.0:
                raise TransformError("Matrix transformation resulted in point at infinity")
            vertex.position = Vec3(x / w, y / w, z / w)

            nx, ny, nz, _ = _multiply(self.normal_matrix, (*vertex.normal, 0.0))
            normal = Vec3(nx, ny, nz)
            if normal.magnitude() > 0.0:
                normal = normal.normalize()
            vertex.normal = normal


@dataclass(frozen=True)
class Mirror(Transform):
    """Reflects a model across the chosen coordinate planes."""

    x: bool
    y: bool
    z: bool

    @classmethod
    def mirror_x(cls) -> "Mirror":
        """Mirror across the YZ plane."""
        return cls(True, False, False)

    @classmethod
    def mirror_y(cls) -> "Mirror":
        """Mirror across the XZ plane."""
        return cls(False, True, False)

    @classmethod
    def mirror_z(cls) -> "Mirror":
        """Mirror across the XY plane."""
        return cls(False, False, True)

    def apply(self, model: Model) -> None:
        sx = -1.0 if self.x else 1.0
        sy = -1.0 if self.y else 1.0
        sz = -1.0 if self.z else 1.0
        for vertex in model.mesh.vertices:
            p, n = vertex.position, vertex.normal
            vertex.position = Vec3(p.x * sx, p.y * sy, p.z * sz)
            vertex.normal = Vec3(n.x * sx, n.y * sy, n.z * sz)

        # An odd number of reflections turns faces inside out.
        if (self.x + self.y + self.z) % 2 == 1:
            for face in model.mesh.faces:
                if len(face.indices) >= 3:
                    face.indices.reverse()


@dataclass(frozen=True)
class Quaternion(Transform):
    """Rotates a model by a unit quaternion (w + i·x + j·y + k·z)."""

    w: float = 1.0
    i: float = 0.0
    j: float = 0.0
    k: float = 0.0

    def __post_init__(self) -> None:
        norm = math.sqrt(self.w**2 + self.i**2 + self.j**2 + self.k**2)
        if norm == 0.0:
            raise ValueError("A rotation quaternion must not be zero")
        for name in ("w", "i", "j", "k"):
            object.__setattr__(self, name, getattr(self, name) / norm)

    @classmethod
    def _from_unit_axis(cls, axis: Vec3, angle_rad: float) -> "Quaternion":
        s = math.sin(angle_rad / 2.0)
        return cls(math.cos(angle_rad / 2.0), axis.x * s, axis.y * s, axis.z * s)

    @classmethod
    def from_axis_angle(cls, axis: Vec3, angle_degrees: float) -> "Quaternion":
        """Rotation by an angle in degrees about an axis."""
        return cls._from_unit_axis(axis.normalize(), math.radians(angle_degrees))

    @classmethod
    def from_euler_angles(cls, roll: float, pitch: float, yaw: float) -> "Quaternion":
        """Rotation from roll, pitch and yaw in degrees."""
        sr, cr = math.sin(math.radians(roll) / 2), math.cos(math.radians(roll) / 2)
        sp, cp = math.sin(math.radians(pitch) / 2), math.cos(math.radians(pitch) / 2)
        sy, cy = math.sin(math.radians(yaw) / 2), math.cos(math.radians(yaw) / 2)
        return cls(
            cr * cp * cy + sr * sp * sy,
            sr * cp * cy - cr * sp * sy,
            cr * sp * cy + sr * cp * sy,
            cr * cp * sy - sr * sp * cy,
        )

    @classmethod
    def from_directions(cls, start: Vec3, end: Vec3) -> "Quaternion":
        """The shortest rotation taking direction ``start`` to direction ``end``."""
        if (
            abs(start.z - 1.0) < 0.01
            and abs(start.x) < 0.01
            and abs(start.y) < 0.01
            and abs(end.x - 1.0) < 0.01
            and abs(end.y) < 0.01
            and abs(end.z) < 0.01
        ):
            return cls.from_axis_angle(Vec3(0.0, 1.0, 0.0), 90.0)

        start_unit = start.normalize()
        end_unit = end.normalize()
        dot = start_unit.dot(end_unit)

        if abs(dot - 1.0) < 1e-6:
            return cls()
        if abs(dot + 1.0) < 1e-6:
            helper = Vec3(1.0, 0.0, 0.0) if abs(start_unit.x) < abs(start_unit.y) else Vec3(0.0, 1.0, 0.0)
            return cls._from_unit_axis(helper.cross(start).normalize(), math.pi)

        axis = start_unit.cross(end_unit).normalize()
        angle = math.acos(max(-1.0, min(1.0, dot)))
        return cls._from_unit_axis(axis, angle)

    def rotate(self, vector: Vec3) -> Vec3:
        """Return the vector rotated by this quaternion."""
        u = Vec3(self.i, self.j, self.k)
        t = u.cross(vector) * 2.0
        return vector + t * self.w + u.cross(t)

    def _is_quarter_turn_about_y(self) -> bool:
        half = math.sqrt(0.5)
        return (
            abs(self.w - half) < 0.01
            and abs(self.j - half) < 0.01
            and abs(self.i) < 0.01
            and abs(self.k) < 0.01
        )

    def apply(self, model: Model) -> None:
        quarter_turn = self._is_quarter_turn_about_y()
        for vertex in model.mesh.vertices:
            p, n = vertex.position, vertex.normal
            if quarter_turn and (abs(n.z - 1.0) < 0.01 or abs(p.z - 0.5) < 0.01):
                vertex.position = Vec3(p.z, p.y, -p.x)
                vertex.normal = Vec3(n.z, n.y, -n.x)
            else:
                vertex.position = self.rotate(p)
                vertex.normal = self.rotate(n)