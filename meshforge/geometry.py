"""Core geometric types: vectors, vertices, faces, meshes and materials."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Iterator, List, Optional, Tuple


@dataclass(frozen=True)
class Vec3:
    """An immutable three-component vector, also used for points."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    @classmethod
    def zeros(cls) -> "Vec3":
        return cls(0.0, 0.0, 0.0)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __add__(self, other: "Vec3") -> "Vec3":
        if not isinstance(other, Vec3):
            return NotImplemented
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: "Vec3") -> "Vec3":
        if not isinstance(other, Vec3):
            return NotImplemented
        return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __neg__(self) -> "Vec3":
        return Vec3(-self.x, -self.y, -self.z)

    def __mul__(self, scalar: float) -> "Vec3":
        if not isinstance(scalar, (int, float)):
            return NotImplemented
        return Vec3(self.x * scalar, self.y * scalar, self.z * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> "Vec3":
        if not isinstance(scalar, (int, float)):
            return NotImplemented
        return Vec3(self.x / scalar, self.y / scalar, self.z / scalar)

    def dot(self, other: "Vec3") -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: "Vec3") -> "Vec3":
        return Vec3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def magnitude(self) -> float:
        return math.sqrt(self.dot(self))

    def normalize(self) -> "Vec3":
        """Return the unit vector; a zero vector yields NaN components."""
        length = self.magnitude()
        if length == 0.0:
            return Vec3(math.nan, math.nan, math.nan)
        return self / length


@dataclass
class Vertex:
    """A vertex with position, normal and optional texture coordinates."""

    position: Vec3
    normal: Vec3 = field(default_factory=Vec3.zeros)
    tex_coords: Optional[Tuple[float, float]] = None

    @classmethod
    def with_position(cls, x: float, y: float, z: float) -> "Vertex":
        return cls(Vec3(x, y, z))


@dataclass
class Face:
    """A polygon given by indices into a mesh's vertex list."""

    indices: List[int]

    @classmethod
    def triangle(cls, v1: int, v2: int, v3: int) -> "Face":
        return cls([v1, v2, v3])

    @classmethod
    def quad(cls, v1: int, v2: int, v3: int, v4: int) -> "Face":
        return cls([v1, v2, v3, v4])


class TextureType(Enum):
    """Kinds of texture map a material may reference."""

    DIFFUSE = "diffuse"
    NORMAL = "normal"
    SPECULAR = "specular"
    ROUGHNESS = "roughness"
    METALLIC = "metallic"
    EMISSION = "emission"
    OCCLUSION = "occlusion"


@dataclass
class Material:
    """Surface properties for faces of a mesh."""

    name: str
    ambient: Tuple[float, float, float, float] = (0.2, 0.2, 0.2, 1.0)
    diffuse: Tuple[float, float, float, float] = (0.8, 0.8, 0.8, 1.0)
    specular: Tuple[float, float, float, float] = (1.0, 1.0, 1.0, 1.0)
    shininess: float = 32.0
    textures: Dict[TextureType, str] = field(default_factory=dict)


@dataclass
class Mesh:
    """Vertices, faces and the materials assigned to them."""

    vertices: List[Vertex] = field(default_factory=list)
    faces: List[Face] = field(default_factory=list)
    materials: Dict[str, Material] = field(default_factory=dict)
    face_materials: List[Optional[str]] = field(default_factory=list)

    def add_vertex(self, vertex: Vertex) -> int:
        """Append a vertex and return its index."""
        self.vertices.append(vertex)
        return len(self.vertices) - 1

    def add_face(self, face: Face, material_name: Optional[str] = None) -> int:
        """Append a face with an optional material and return its index."""
        self.faces.append(face)
        self.face_materials.append(material_name)
        return len(self.faces) - 1

    def compute_normals(self) -> None:
        """Set each vertex normal to the average of its faces' normals."""
        for vertex in self.vertices:
            vertex.normal = Vec3.zeros()

        for face in self.faces:
            if len(face.indices) < 3:
                continue
            p0, p1, p2 = (self.vertices[i].position for i in face.indices[:3])
            normal = (p1 - p0).cross(p2 - p0).normalize()
            for index in face.indices:
                self.vertices[index].normal = self.vertices[index].normal + normal

        for vertex in self.vertices:
            if vertex.normal.magnitude() > 0.0:
                vertex.normal = vertex.normal.normalize()
            else:
                vertex.normal = Vec3(0.0, 1.0, 0.0)