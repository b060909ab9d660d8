"""
Optional geometry checks for collision meshes.

Neither check changes the loaded room; they only report content that
would load into wrong collision:
- Degenerate (zero-area) faces (GEOM-001)
- Inward winding, detected as a negative enclosed volume (GEOM-002)
"""

from __future__ import annotations
from typing import List

import numpy as np

from ..core import LoadStage, ValidationIssue
from ..rules import GEOM_001, GEOM_002

# Relative to the squared extent of the mesh
_AREA_TOLERANCE = 1e-12


def signed_volume(vertices: np.ndarray, faces: np.ndarray) -> float:
    """Signed volume enclosed by a closed triangle mesh.

    Sum of dot(A, cross(B, C)) / 6 over all faces; positive when faces
    wind outward.
    """
    if len(faces) == 0:
        return 0.0
    a = vertices[faces[:, 0]]
    b = vertices[faces[:, 1]]
    c = vertices[faces[:, 2]]
    return float(np.einsum('ij,ij->i', a, np.cross(b, c)).sum() / 6.0)


def check_degenerate_faces(mesh) -> List[ValidationIssue]:
    """Report faces whose corners are collinear or coincident."""
    if len(mesh.faces) == 0:
        return []

    v = mesh.vertices
    f = mesh.faces
    cross = np.cross(v[f[:, 1]] - v[f[:, 0]], v[f[:, 2]] - v[f[:, 0]])
    area2 = np.linalg.norm(cross, axis=1)

    extent = float(np.ptp(v, axis=0).max()) if len(v) else 0.0
    threshold = max(extent * extent * _AREA_TOLERANCE, 1e-18)

    return [
        GEOM_001.issue(mesh.name, LoadStage.BRUSH, index=int(i))
        for i in np.flatnonzero(area2 <= threshold)
    ]


def check_mesh_winding(mesh) -> List[ValidationIssue]:
    """Report a mesh whose faces wind inward."""
    volume = signed_volume(mesh.vertices, mesh.faces)
    if volume < 0.0:
        return [GEOM_002.issue(mesh.name, LoadStage.BRUSH, volume=volume)]
    return []
