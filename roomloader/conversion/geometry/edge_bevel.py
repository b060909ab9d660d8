"""
Bevel planes for sharp brush edges.

A convex brush made only of its face planes has knife-sharp edges that
snag collision response.  For every edge shared by exactly two faces whose
normals meet at 90 degrees or more, an extra plane is added along the
edge with the normalized sum of the two face normals, which shaves the
corner off.

Edges are matched by their endpoint positions, not vertex indices, so
split vertices (UV seams, hard normals) still pair up.  Positions are
compared exactly; there is no welding tolerance.
"""

from __future__ import annotations
import logging
from typing import Dict, List, NamedTuple, Optional

from ..plane_math import (
    Plane, Vec3, _add, _dot, is_degenerate, point_less, triangle_normal,
)
from ..room_types import Mesh
from ...profiles.loader_profile import SHARP_EDGE_DOT
from ...validation.core import LoadStage, ValidationResult
from ...validation.rules import BEVEL_001, BEVEL_002

logger = logging.getLogger(__name__)


class EdgeKey(NamedTuple):
    """An undirected edge; ``v1`` precedes ``v2`` in point order."""
    v1: Vec3
    v2: Vec3

    @classmethod
    def make(cls, a: Vec3, b: Vec3) -> "EdgeKey":
        if point_less(b, a):
            return cls(b, a)
        return cls(a, b)


def collect_edge_normals(mesh: Mesh) -> Dict[EdgeKey, List[Vec3]]:
    """
    Map every edge of the mesh to the normals of the faces using it.

    Edges appear in first-seen order; each face adds its normal to its
    three edges AB, BC and CA.
    """
    edges: Dict[EdgeKey, List[Vec3]] = {}

    for i in range(len(mesh.faces)):
        a, b, c = mesh.face_points(i)
        n = triangle_normal(a, b, c)
        for p, q in ((a, b), (b, c), (c, a)):
            edges.setdefault(EdgeKey.make(p, q), []).append(n)

    return edges


def bevel_sharp_edges(
    mesh: Mesh,
    sharp_edge_dot: float = SHARP_EDGE_DOT,
    report: Optional[ValidationResult] = None,
) -> List[Plane]:
    """
    Compute the bevel planes of a mesh.

    Args:
        mesh: Collision mesh
        sharp_edge_dot: Edges with dot(N1, N2) above this are not beveled
        report: Receives a BEVEL-001 issue per edge not shared by exactly two faces

    Returns:
        Bevel planes in edge first-seen order
    """
    bevels: List[Plane] = []

    for edge, normals in collect_edge_normals(mesh).items():
        if len(normals) != 2:
            logger.warning(
                "Bevel: issue with mesh '%s': %d faces are incident to the same edge",
                mesh.name, len(normals),
            )
            if report is not None:
                report.add_issue(BEVEL_001.issue(mesh.name, LoadStage.BEVEL, count=len(normals)))
            continue

        n1, n2 = normals
        if _dot(n1, n2) > sharp_edge_dot:
            continue

        bisector = _add(n1, n2)
        if is_degenerate(bisector):
            logger.warning("Bevel: mesh '%s' has antiparallel faces on edge %s", mesh.name, edge)
            if report is not None:
                report.add_issue(BEVEL_002.issue(mesh.name, LoadStage.BEVEL, edge=tuple(edge)))
            continue

        bevels.append(Plane.from_normal_point(bisector, edge.v1))

    return bevels
