"""
Wavefront OBJ mesh source.

Reads ``o``/``g``, ``v`` and ``f`` records into named triangle meshes.
OBJ vertex indices are global to the file; each Mesh gets its own local
vertex array holding only the vertices its faces use, in first-use order.
Vertices that no face references are dropped, so an object made only of
loose points comes out empty and is skipped by the loader.

Polygons must already be triangles; triangulate on export.
"""

from __future__ import annotations
import logging
from pathlib import Path
from typing import Dict, List, Optional, Tuple, Union

import numpy as np

from .plane_math import Vec3
from .room_types import Mesh
from ..validation.core import MeshSourceError

logger = logging.getLogger(__name__)

# Name given to faces that appear before any o/g record
DEFAULT_OBJECT_NAME = "default"


def _to_room_axes(v: Vec3, y_up: bool) -> Vec3:
    """OBJ Y-up (x, y, z) -> room Z-up (x, -z, y)."""
    if y_up:
        return (v[0], -v[2], v[1])
    return v


class _ObjectBuilder:
    """Accumulates one object's faces with local vertex indices."""

    def __init__(self, name: str):
        self.name = name
        self._local: Dict[int, int] = {}
        self.vertices: List[Vec3] = []
        self.faces: List[Tuple[int, int, int]] = []

    def add_face(self, global_indices: List[int], positions: List[Vec3]):
        local = []
        for gi in global_indices:
            li = self._local.get(gi)
            if li is None:
                li = len(self.vertices)
                self._local[gi] = li
                self.vertices.append(positions[gi])
            local.append(li)
        self.faces.append((local[0], local[1], local[2]))

    def build(self) -> Mesh:
        return Mesh(
            name=self.name,
            vertices=np.array(self.vertices, dtype=np.float64).reshape(-1, 3),
            faces=np.array(self.faces, dtype=np.int64).reshape(-1, 3),
        )


def _resolve_index(token: str, vertex_count: int, where: str) -> int:
    """Turn an OBJ face token (``7``, ``7/1/3``, ``-1//2``) into a 0-based index."""
    ref = token.split('/')[0]
    try:
        index = int(ref)
    except ValueError:
        raise MeshSourceError(f"{where}: bad vertex reference '{token}'") from None

    if index > 0:
        resolved = index - 1
    elif index < 0:
        resolved = vertex_count + index
    else:
        raise MeshSourceError(f"{where}: vertex index 0 is not valid in OBJ")

    if not 0 <= resolved < vertex_count:
        raise MeshSourceError(f"{where}: vertex index {index} out of range (have {vertex_count})")
    return resolved


def parse_obj(text: str, y_up: bool = True, source: str = "<string>") -> List[Mesh]:
    """
    Parse OBJ text into meshes, in the order objects first appear.

    Args:
        text: OBJ file contents
        y_up: Convert from Y-up to the room's Z-up frame
        source: Name used in error messages

    Raises:
        MeshSourceError: Malformed record or non-triangle face
    """
    positions: List[Vec3] = []
    objects: List[_ObjectBuilder] = []
    current: Optional[_ObjectBuilder] = None

    for line_no, raw in enumerate(text.splitlines(), start=1):
        line = raw.strip()
        if not line or line.startswith('#'):
            continue

        where = f"{source}:{line_no}"
        parts = line.split(None, 1)
        keyword = parts[0]
        rest = parts[1].strip() if len(parts) > 1 else ""
        args = rest.split()

        if keyword == 'v':
            if len(args) < 3:
                raise MeshSourceError(f"{where}: vertex needs 3 coordinates")
            try:
                v = (float(args[0]), float(args[1]), float(args[2]))
            except ValueError:
                raise MeshSourceError(f"{where}: bad vertex '{rest}'") from None
            positions.append(_to_room_axes(v, y_up))

        elif keyword in ('o', 'g'):
            # Object names may contain spaces inside quoted directive arguments
            current = _ObjectBuilder(rest or DEFAULT_OBJECT_NAME)
            objects.append(current)

        elif keyword == 'f':
            if len(args) != 3:
                raise MeshSourceError(
                    f"{where}: face has {len(args)} vertices, only triangles are supported"
                )
            if current is None:
                current = _ObjectBuilder(DEFAULT_OBJECT_NAME)
                objects.append(current)
            indices = [_resolve_index(t, len(positions), where) for t in args]
            current.add_face(indices, positions)

        # vt, vn, s, usemtl, mtllib, l, p: not needed for collision

    meshes = [obj.build() for obj in objects]
    logger.info("Read %d objects, %d vertices from %s", len(meshes), len(positions), source)
    return meshes


def read_obj(path: Union[str, Path], y_up: bool = True) -> List[Mesh]:
    """
    Read an OBJ file into meshes.

    Raises:
        MeshSourceError: The file is missing, unreadable or malformed
    """
    path = Path(path)
    try:
        text = path.read_text(encoding='utf-8')
    except (OSError, UnicodeDecodeError) as e:
        raise MeshSourceError(f"Cannot read {path}: {e}") from e
    return parse_obj(text, y_up=y_up, source=str(path))
