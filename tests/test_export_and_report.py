"""
Test room export and the diagnostic report.
"""

import json

import pytest

from roomloader.conversion.room_assembler import build_room
from roomloader.conversion.room_export import count_things_by_type, export_room_to_json, room_to_dict
from roomloader.conversion.room_types import Mesh
from roomloader.validation.core import (
    LoadStage, Severity, ValidationError, ValidationIssue, ValidationResult,
)
from roomloader.validation.checks.geometry_checks import (
    check_degenerate_faces, check_mesh_winding, signed_volume,
)

TRI = [(0.0, 0.0, 0.0), (3.0, 0.0, 0.0), (0.0, 3.0, 0.0)]


def _thing(name):
    return Mesh.from_lists(name, TRI, [(0, 1, 2)])


def test_room_to_dict(cube):
    room = build_room([cube, _thing("f.door(2)")])
    data = room_to_dict(room)

    assert data["start"] == [0, 0, 2]
    assert len(data["colliders"]) == 1
    assert len(data["colliders"][0]) == 24
    assert set(data["colliders"][0][0]) == {"normal", "dist"}
    assert data["things"] == [{
        "type": "door",
        "position": {"x": 1.0, "y": 1.0, "z": 0.0},
        "config": {"0": "2"},
    }]


def test_export_is_valid_json(cube):
    room = build_room([cube])
    assert json.loads(export_room_to_json(room)) == room_to_dict(room)


def test_count_things_by_type():
    room = build_room([_thing("f.door(1)"), _thing("f.crate"), _thing("f.door(2)")])
    assert count_things_by_type(room) == {"door": 2, "crate": 1}


def test_cube_encloses_unit_volume(cube, inverted_cube):
    assert signed_volume(cube.vertices, cube.faces) == pytest.approx(1.0)
    assert signed_volume(inverted_cube.vertices, inverted_cube.faces) == pytest.approx(-1.0)
    assert check_mesh_winding(cube) == []
    assert [i.code for i in check_mesh_winding(inverted_cube)] == ["GEOM-002"]


def test_degenerate_face_is_found():
    mesh = Mesh.from_lists("thin", [(0, 0, 0), (1, 0, 0), (2, 0, 0), (0, 1, 0)], [(0, 1, 2), (0, 1, 3)])
    issues = check_degenerate_faces(mesh)
    assert [i.code for i in issues] == ["GEOM-001"]
    assert "Face 0" in issues[0].message


def test_report_format_and_failure():
    result = ValidationResult()
    result.add_issue(ValidationIssue(
        severity=Severity.WARN, code="BEVEL-001", message="2 edges open",
        rule_reference="closed meshes", mesh="wall", stage=LoadStage.BEVEL,
    ))
    assert result.passed
    assert "[WARN] BEVEL-001 mesh=wall stage=bevel :: 2 edges open" in result.report()
    result.raise_if_failed()

    result.add_issue(ValidationIssue(
        severity=Severity.FAIL, code="X-001", message="broken", rule_reference="-",
    ))
    assert result.failed
    with pytest.raises(ValidationError) as exc_info:
        result.raise_if_failed()
    assert exc_info.value.result is result
    assert result.to_dict()["fail_count"] == 1


def test_empty_report():
    assert "No issues" in ValidationResult().report()
