"""
Data types flowing through the room loader.

Mesh is the input record handed over by a mesh source; Convex,
ThingDirective and Room make up the loaded level.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Sequence, Tuple

import numpy as np

from .plane_math import Plane, Vec3

Vec3i = Tuple[int, int, int]


def _as_rows(values, dtype, what: str) -> np.ndarray:
    """Coerce to an (N, 3) array; an empty input becomes (0, 3)."""
    arr = np.asarray(values, dtype=dtype)
    if arr.size == 0:
        return arr.reshape(0, 3)
    if arr.ndim != 2 or arr.shape[1] != 3:
        raise ValueError(f"{what} must have shape (N, 3), got {arr.shape}")
    return arr


@dataclass
class Mesh:
    """A named triangle mesh.

    Attributes:
        name: Object name from the modeling tool, carries the naming convention
        vertices: Array of shape (N, 3), float64
        faces: Array of shape (M, 3), vertex indices of each triangle

    Face winding is expected to give outward normals by the right-hand rule.
    """
    name: str
    vertices: np.ndarray
    faces: np.ndarray

    def __post_init__(self):
        self.vertices = _as_rows(self.vertices, np.float64, "vertices")
        self.faces = _as_rows(self.faces, np.int64, "faces")
        if len(self.faces) and (self.faces.min() < 0 or self.faces.max() >= len(self.vertices)):
            raise ValueError(
                f"mesh '{self.name}': face indices must lie in [0, {len(self.vertices)})"
            )

    @classmethod
    def from_lists(cls, name: str, vertices: Sequence[Sequence[float]],
                   faces: Sequence[Sequence[int]]) -> "Mesh":
        return cls(name=name, vertices=np.array(vertices, dtype=np.float64),
                   faces=np.array(faces, dtype=np.int64))

    @property
    def is_empty(self) -> bool:
        return len(self.vertices) == 0

    def vertex(self, index: int) -> Vec3:
        """Vertex position as a plain float tuple."""
        v = self.vertices[index]
        return (float(v[0]), float(v[1]), float(v[2]))

    def face_points(self, face_index: int) -> Tuple[Vec3, Vec3, Vec3]:
        """The three corner positions of a face, in listed order."""
        i1, i2, i3 = self.faces[face_index]
        return (self.vertex(i1), self.vertex(i2), self.vertex(i3))

    def centroid(self) -> Vec3:
        """Arithmetic mean of all vertex positions."""
        c = self.vertices.mean(axis=0)
        return (float(c[0]), float(c[1]), float(c[2]))


@dataclass(frozen=True)
class Convex:
    """A collision brush: the intersection of the half-spaces of its planes."""
    planes: Tuple[Plane, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, 'planes', tuple(self.planes))

    def contains(self, point: Vec3) -> bool:
        return all(p.contains(point) for p in self.planes)

    def __len__(self) -> int:
        return len(self.planes)


@dataclass(frozen=True)
class ThingDirective:
    """A deferred request to spawn a game object.

    Attributes:
        pos: World position (centroid of the source mesh)
        type_name: Entity type to construct
        config: Positional arguments keyed "0", "1", ...
    """
    pos: Vec3
    type_name: str
    config: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self):
        object.__setattr__(self, 'config', MappingProxyType(dict(self.config)))


@dataclass(frozen=True)
class Room:
    """A loaded level.

    Attributes:
        start: Player start on the integer grid
        colliders: One Convex per collision mesh, in source order
        things: Spawn directives, in source order
    """
    start: Vec3i
    colliders: Tuple[Convex, ...] = ()
    things: Tuple[ThingDirective, ...] = ()

    @property
    def plane_count(self) -> int:
        return sum(len(c.planes) for c in self.colliders)
