"""
Test face planes and sharp edge beveling.
"""

import logging
import math

import pytest

from roomloader.conversion.geometry.brush_builder import build_convex, face_planes
from roomloader.conversion.geometry.edge_bevel import (
    EdgeKey, bevel_sharp_edges, collect_edge_normals,
)
from roomloader.conversion.plane_math import Plane, point_less
from roomloader.conversion.room_types import Mesh
from roomloader.profiles.loader_profile import LoaderProfile
from roomloader.validation.core import ValidationResult


def _is_unit(v):
    return math.isclose(math.sqrt(sum(c * c for c in v)), 1.0, rel_tol=1e-12)


def test_plane_from_points_uses_right_hand_rule():
    plane = Plane.from_three_points((0, 0, 2), (1, 0, 2), (0, 1, 2))
    assert plane.normal == (0.0, 0.0, 1.0)
    assert plane.dist == 2.0
    assert plane.contains((0.3, 0.3, 1.0))
    assert not plane.contains((0.3, 0.3, 3.0))


def test_point_order_is_lexicographic():
    assert point_less((0, 5, 5), (1, 0, 0))
    assert point_less((1, 0, 5), (1, 1, 0))
    assert point_less((1, 1, 0), (1, 1, 1))
    assert not point_less((1, 1, 1), (1, 1, 1))


def test_edge_key_is_order_independent():
    a, b = (1.0, 2.0, 3.0), (1.0, 2.0, -3.0)
    assert EdgeKey.make(a, b) == EdgeKey.make(b, a)
    assert EdgeKey.make(a, b).v1 == b


def test_cube_face_planes_point_outward(cube):
    planes = face_planes(cube)
    assert len(planes) == 12
    assert all(_is_unit(p.normal) for p in planes)
    assert all(p.contains((0.5, 0.5, 0.5)) for p in planes)
    assert {p.normal for p in planes} == {
        (0.0, 0.0, -1.0), (0.0, 0.0, 1.0), (0.0, -1.0, 0.0),
        (0.0, 1.0, 0.0), (-1.0, 0.0, 0.0), (1.0, 0.0, 0.0),
    }


def test_cube_edges_each_have_two_faces(cube):
    edges = collect_edge_normals(cube)
    # 12 cube edges plus one diagonal per side
    assert len(edges) == 18
    assert all(len(normals) == 2 for normals in edges.values())


def test_cube_gets_one_bevel_per_cube_edge(cube):
    report = ValidationResult()
    convex = build_convex(cube, report=report)

    # 12 triangle planes + 12 bevels; the side diagonals are flat and get none
    assert len(convex.planes) == 24
    # The two triangles of a side share a plane: 6 sides + 12 bevels
    assert len(set(convex.planes)) == 18
    assert report.issues == []


def test_cube_bevels_touch_the_edges_without_cutting_the_cube(cube):
    bevels = bevel_sharp_edges(cube)
    assert len(bevels) == 12
    s = 1.0 / math.sqrt(2.0)
    for plane in bevels:
        assert _is_unit(plane.normal)
        assert sorted(abs(c) for c in plane.normal) == pytest.approx([0.0, s, s])
        corners = [tuple(map(float, v)) for v in cube.vertices]
        assert all(plane.contains(c) for c in corners)
        # Exactly the two corners of its edge lie on the plane
        on_plane = [c for c in corners if abs(plane.distance_to(c)) < 1e-9]
        assert len(on_plane) == 2


def test_flat_quad_diagonal_is_not_beveled(split_quad):
    edges = collect_edge_normals(split_quad)
    diagonal = EdgeKey.make((0.0, 0.0, 0.0), (1.0, 1.0, 0.0))
    n1, n2 = edges[diagonal]
    assert n1 == n2 == (0.0, 0.0, 1.0)

    convex = build_convex(split_quad)
    assert len(convex.planes) == 2


def test_open_edges_are_reported_and_skipped(split_quad, caplog):
    report = ValidationResult()
    with caplog.at_level(logging.WARNING):
        bevels = bevel_sharp_edges(split_quad, report=report)

    assert bevels == []
    assert report.codes() == ["BEVEL-001"] * 4
    assert all(issue.mesh == "floor" for issue in report.issues)
    assert "1 faces are incident to the same edge" in report.issues[0].message
    assert "floor" in caplog.text


def test_non_manifold_edge_is_reported(cube_factory):
    cube = cube_factory()
    # A fin hanging off the 0-1 edge makes it shared by three faces
    verts = [tuple(v) for v in cube.vertices.tolist()] + [(0.5, -1.0, -1.0)]
    faces = [tuple(f) for f in cube.faces.tolist()] + [(0, 8, 1)]
    finned = Mesh.from_lists("finned", verts, faces)

    report = ValidationResult()
    convex = build_convex(finned, report=report)

    messages = [i.message for i in report.issues]
    assert "3 faces are incident to the same edge" in messages
    assert len(convex.planes) >= len(finned.faces)


def test_tetrahedron_bevels_every_edge(tetrahedron):
    convex = build_convex(tetrahedron)
    assert len(convex.planes) == 4 + 6
    assert all(_is_unit(p.normal) for p in convex.planes)
    assert convex.contains((0.1, 0.1, 0.1))


def test_sharp_edge_cutoff_is_configurable(cube, tetrahedron):
    profile = LoaderProfile(sharp_edge_dot=-0.6)
    # dot 0 and dot -1/sqrt(3) are both above -0.6
    assert len(build_convex(cube, profile=profile).planes) == 12
    assert len(build_convex(tetrahedron, profile=profile).planes) == 4


def test_beveling_can_be_disabled(cube):
    convex = build_convex(cube, profile=LoaderProfile(bevel_edges=False))
    assert len(convex.planes) == 12


def test_antiparallel_faces_get_no_bevel(sheet):
    report = ValidationResult()
    convex = build_convex(sheet, report=report)
    assert len(convex.planes) == 2
    assert report.codes() == ["BEVEL-002"] * 3


def test_small_cube_keeps_true_face_normals(cube_factory):
    # Each triangle's cross product is far shorter than 1e-6 at this size
    small = cube_factory("small", size=5e-4)
    planes = face_planes(small)
    normals = {tuple(round(c, 9) for c in p.normal) for p in planes}
    assert len(normals) == 6
    assert all(_is_unit(p.normal) for p in planes)

    convex = build_convex(small)
    assert convex.contains((2.5e-4, 2.5e-4, 2.5e-4))
    assert not convex.contains((2.5e-4, 2.5e-4, 6e-4))


def test_zero_area_face_falls_back_to_up():
    plane = Plane.from_three_points((0, 0, 0), (1, 0, 0), (2, 0, 0))
    assert plane.normal == (0.0, 0.0, 1.0)
