"""
Room assembly: folds a list of named meshes into a Room.

Each mesh is classified by name and contributes to exactly one part of
the room:
- f.start      -> start position (first vertex of the first face)
- nocollide.*  -> nothing
- f.<call>     -> a ThingDirective at the mesh centroid
- anything else -> one Convex collider

Colliders and things keep the order of their source meshes.
"""

from __future__ import annotations
import logging
from pathlib import Path
from typing import Iterable, List, Optional, Union

from .directive_parser import parse_formula
from .geometry.brush_builder import build_convex
from .name_classifier import MeshRole, classify_mesh, directive_text
from .obj_reader import read_obj
from .room_types import Convex, Mesh, Room, ThingDirective, Vec3i
from ..profiles.loader_profile import DirectivePolicy, LoaderProfile, get_default_profile
from ..validation.checks.geometry_checks import check_degenerate_faces, check_mesh_winding
from ..validation.core import DirectiveParseError, LoadStage, ValidationResult
from ..validation.rules import LOAD_001, LOAD_002, PARSE_001

logger = logging.getLogger(__name__)


def _start_position(mesh: Mesh, report: Optional[ValidationResult]) -> Vec3i:
    if len(mesh.faces):
        pos = mesh.vertex(mesh.faces[0][0])
    else:
        logger.warning("Start marker '%s' has no faces, using its first vertex", mesh.name)
        if report is not None:
            report.add_issue(LOAD_002.issue(mesh.name, LoadStage.CLASSIFY, name=mesh.name))
        pos = mesh.vertex(0)
    # Truncate toward zero onto the start grid
    return (int(pos[0]), int(pos[1]), int(pos[2]))


def _directive(
    mesh: Mesh,
    profile: LoaderProfile,
    report: Optional[ValidationResult],
) -> Optional[ThingDirective]:
    try:
        type_name, config = parse_formula(directive_text(mesh.name, profile))
    except DirectiveParseError as e:
        error = e.with_mesh(mesh.name)
        if profile.directive_policy is DirectivePolicy.RAISE:
            raise error from e
        logger.warning("Skipping spawn directive: %s", error)
        if report is not None:
            report.add_issue(PARSE_001.issue(mesh.name, LoadStage.DIRECTIVE, error=error))
        return None

    return ThingDirective(pos=mesh.centroid(), type_name=type_name, config=config)


def _collider(
    mesh: Mesh,
    profile: LoaderProfile,
    report: Optional[ValidationResult],
) -> Convex:
    if profile.check_winding:
        issues = check_degenerate_faces(mesh) + check_mesh_winding(mesh)
        for issue in issues:
            logger.warning(str(issue))
            if report is not None:
                report.add_issue(issue)
    return build_convex(mesh, profile=profile, report=report)


def build_room(
    meshes: Iterable[Mesh],
    profile: Optional[LoaderProfile] = None,
    report: Optional[ValidationResult] = None,
) -> Room:
    """
    Build a Room from meshes in source order.

    Args:
        meshes: Named triangle meshes from a mesh source
        profile: Loader settings; the default profile if omitted
        report: Collects non-fatal diagnostics (empty meshes, open or
            non-manifold edges, skipped directives)

    Returns:
        The assembled Room

    Raises:
        DirectiveParseError: A spawn directive is malformed and the profile's
            directive policy is RAISE
    """
    profile = profile or get_default_profile()

    start = profile.default_start
    colliders: List[Convex] = []
    things: List[ThingDirective] = []
    mesh_count = 0

    for mesh in meshes:
        mesh_count += 1

        if mesh.is_empty:
            logger.warning("Object '%s' has no vertices", mesh.name)
            if report is not None:
                report.add_issue(LOAD_001.issue(mesh.name, LoadStage.SOURCE, name=mesh.name))
            continue

        role = classify_mesh(mesh.name, profile)
        logger.debug("Mesh '%s' classified as %s", mesh.name, role)

        if role is MeshRole.START:
            start = _start_position(mesh, report)
        elif role is MeshRole.DECORATION:
            continue
        elif role is MeshRole.DIRECTIVE:
            thing = _directive(mesh, profile, report)
            if thing is not None:
                things.append(thing)
        else:
            colliders.append(_collider(mesh, profile, report))

    logger.info(
        "Room built from %d meshes: %d colliders, %d things, start %s",
        mesh_count, len(colliders), len(things), start,
    )
    return Room(start=start, colliders=tuple(colliders), things=tuple(things))


def load_room(
    path: Union[str, Path],
    profile: Optional[LoaderProfile] = None,
    report: Optional[ValidationResult] = None,
) -> Room:
    """
    Read a Wavefront OBJ scene and build its Room.

    Raises:
        MeshSourceError: The file cannot be read as triangle meshes
        DirectiveParseError: See build_room
    """
    profile = profile or get_default_profile()
    meshes = read_obj(path, y_up=profile.y_up_source)
    return build_room(meshes, profile=profile, report=report)
