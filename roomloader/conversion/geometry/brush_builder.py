"""
Collision brush construction from triangle meshes.

Each triangle contributes one plane: normal = normalize((B-A) x (C-A)),
dist = dot(normal, A).  Faces must wind so that this normal points out
of the volume; an inverted face silently flips its half-space.
"""

from __future__ import annotations
import logging
from typing import List, Optional

from ..plane_math import Plane
from ..room_types import Convex, Mesh
from ...profiles.loader_profile import LoaderProfile, get_default_profile
from ...validation.core import ValidationResult
from .edge_bevel import bevel_sharp_edges

logger = logging.getLogger(__name__)


def face_planes(mesh: Mesh) -> List[Plane]:
    """One outward plane per face, in face order."""
    return [Plane.from_three_points(*mesh.face_points(i)) for i in range(len(mesh.faces))]


def build_convex(
    mesh: Mesh,
    profile: Optional[LoaderProfile] = None,
    report: Optional[ValidationResult] = None,
) -> Convex:
    """
    Build the collision brush of a mesh.

    Args:
        mesh: Collision mesh (closed, outward winding)
        profile: Bevel settings; the default profile if omitted
        report: Receives bevel diagnostics

    Returns:
        Convex holding the face planes followed by any bevel planes
    """
    profile = profile or get_default_profile()

    planes = face_planes(mesh)
    if profile.bevel_edges:
        planes.extend(
            bevel_sharp_edges(mesh, sharp_edge_dot=profile.sharp_edge_dot, report=report)
        )
    brush = Convex(planes=tuple(planes))

    logger.debug("Brush '%s': %d faces -> %d planes", mesh.name, len(mesh.faces), len(brush.planes))
    return brush
