"""Shared mesh fixtures for the room loader tests."""

import pytest

from roomloader.conversion.room_types import Mesh

CUBE_VERTICES = [
    (0.0, 0.0, 0.0), (1.0, 0.0, 0.0), (1.0, 1.0, 0.0), (0.0, 1.0, 0.0),
    (0.0, 0.0, 1.0), (1.0, 0.0, 1.0), (1.0, 1.0, 1.0), (0.0, 1.0, 1.0),
]

# Counter-clockwise seen from outside, two triangles per side
CUBE_FACES = [
    (0, 2, 1), (0, 3, 2),  # bottom -z
    (4, 5, 6), (4, 6, 7),  # top +z
    (0, 1, 5), (0, 5, 4),  # front -y
    (3, 7, 6), (3, 6, 2),  # back +y
    (0, 4, 7), (0, 7, 3),  # left -x
    (1, 2, 6), (1, 6, 5),  # right +x
]

TETRA_VERTICES = [(0.0, 0.0, 0.0), (1.0, 0.0, 0.0), (0.0, 1.0, 0.0), (0.0, 0.0, 1.0)]
TETRA_FACES = [(0, 2, 1), (0, 1, 3), (0, 3, 2), (1, 2, 3)]


def make_cube(name="wall", offset=(0.0, 0.0, 0.0), size=1.0):
    verts = [
        (offset[0] + x * size, offset[1] + y * size, offset[2] + z * size)
        for x, y, z in CUBE_VERTICES
    ]
    return Mesh.from_lists(name, verts, CUBE_FACES)


@pytest.fixture
def cube():
    return make_cube()


@pytest.fixture
def cube_factory():
    return make_cube


@pytest.fixture
def inverted_cube():
    return Mesh.from_lists("inverted", CUBE_VERTICES, [(a, c, b) for a, b, c in CUBE_FACES])


@pytest.fixture
def tetrahedron():
    return Mesh.from_lists("tetra", TETRA_VERTICES, TETRA_FACES)


@pytest.fixture
def split_quad():
    """A flat unit square made of two triangles sharing the 0-2 diagonal."""
    return Mesh.from_lists(
        "floor",
        [(0.0, 0.0, 0.0), (1.0, 0.0, 0.0), (1.0, 1.0, 0.0), (0.0, 1.0, 0.0)],
        [(0, 1, 2), (0, 2, 3)],
    )


@pytest.fixture
def sheet():
    """One triangle listed twice with opposite windings (zero thickness)."""
    return Mesh.from_lists(
        "sheet",
        [(0.0, 0.0, 0.0), (1.0, 0.0, 0.0), (0.0, 1.0, 0.0)],
        [(0, 1, 2), (0, 2, 1)],
    )
