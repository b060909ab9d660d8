"""
Test the Wavefront OBJ mesh source and file-based room loading.
"""

import pytest

from roomloader.conversion.geometry.brush_builder import face_planes
from roomloader.conversion.obj_reader import parse_obj, read_obj
from roomloader.conversion.room_assembler import load_room
from roomloader.profiles.loader_profile import LoaderProfile
from roomloader.validation.core import MalformedCall, MeshSourceError, ValidationResult

SCENE = """\
# exported scene
mtllib scene.mtl
o f.start
v 1.0 2.0 3.0
v 2.0 2.0 3.0
v 1.0 3.0 3.0
f 1 2 3
o f.teleport("room 2", 3)
v 0.0 0.0 0.0
v 2.0 0.0 0.0
v 0.0 0.0 2.0
vt 0.0 0.0
vn 0.0 1.0 0.0
f 4/1/1 5/1/1 6/1/1
o nocollide.lamp
f -3 -2 -1
"""


def test_objects_become_meshes_in_order():
    meshes = parse_obj(SCENE, y_up=False)
    assert [m.name for m in meshes] == ["f.start", 'f.teleport("room 2", 3)', "nocollide.lamp"]


def test_vertices_are_local_to_each_object():
    meshes = parse_obj(SCENE, y_up=False)
    teleport = meshes[1]
    assert teleport.vertices.tolist() == [[0.0, 0.0, 0.0], [2.0, 0.0, 0.0], [0.0, 0.0, 2.0]]
    assert teleport.faces.tolist() == [[0, 1, 2]]


def test_negative_indices_are_relative():
    lamp = parse_obj(SCENE, y_up=False)[2]
    assert lamp.vertices.tolist() == [[0.0, 0.0, 0.0], [2.0, 0.0, 0.0], [0.0, 0.0, 2.0]]


def test_y_up_conversion():
    (mesh,) = parse_obj("o a\nv 1 2 3\nv 0 0 0\nv 1 0 0\nf 1 2 3\n", y_up=True)
    assert mesh.vertex(0) == (1.0, -3.0, 2.0)


def test_y_up_conversion_keeps_winding():
    text = "o a\nv 0 0 0\nv 1 0 0\nv 0 1 0\nf 1 2 3\n"
    (plain,) = parse_obj(text, y_up=False)
    (rotated,) = parse_obj(text, y_up=True)
    assert face_planes(plain)[0].normal == pytest.approx((0.0, 0.0, 1.0))
    # OBJ +z is room -y
    assert face_planes(rotated)[0].normal == pytest.approx((0.0, -1.0, 0.0))


def test_faces_before_any_object_get_a_default_name():
    (mesh,) = parse_obj("v 0 0 0\nv 1 0 0\nv 0 1 0\nf 1 2 3\n")
    assert mesh.name == "default"


def test_object_without_faces_is_empty():
    meshes = parse_obj("v 0 0 0\no loose\n", y_up=False)
    assert meshes[0].is_empty


@pytest.mark.parametrize("text, message", [
    ("v 0 0 0\nv 1 0 0\nv 0 1 0\nv 1 1 0\nf 1 2 3 4\n", "only triangles"),
    ("v 0 0 0\nv 1 0 0\nf 1 2 3\n", "out of range"),
    ("v 0 0 0\nv 1 0 0\nv 0 1 0\nf 0 1 2\n", "index 0"),
    ("v 0 zero 0\n", "bad vertex"),
    ("v 0 0\n", "3 coordinates"),
    ("v 0 0 0\nv 1 0 0\nv 0 1 0\nf a b c\n", "bad vertex reference"),
])
def test_malformed_records(text, message):
    with pytest.raises(MeshSourceError, match=message):
        parse_obj(text, source="scene.obj")


def test_missing_file(tmp_path):
    with pytest.raises(MeshSourceError):
        read_obj(tmp_path / "nope.obj")


def test_load_room_from_file(tmp_path):
    path = tmp_path / "room.obj"
    path.write_text(SCENE, encoding="utf-8")

    report = ValidationResult()
    room = load_room(path, profile=LoaderProfile(y_up_source=False), report=report)

    assert room.start == (1, 2, 3)
    assert room.colliders == ()
    (thing,) = room.things
    assert thing.type_name == "teleport"
    assert thing.config == {"0": "room 2", "1": "3"}
    assert thing.pos == pytest.approx((2.0 / 3.0, 0.0, 2.0 / 3.0))


def test_load_room_propagates_directive_errors(tmp_path):
    path = tmp_path / "bad.obj"
    path.write_text("o f.door(1\nv 0 0 0\nv 1 0 0\nv 0 1 0\nf 1 2 3\n", encoding="utf-8")
    with pytest.raises(MalformedCall):
        load_room(path)
