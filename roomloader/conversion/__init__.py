"""
Mesh to room conversion package.

Handles classification of named meshes and their conversion into
collision brushes, spawn directives and the player start.
"""

from .directive_parser import parse_call, parse_formula
from .name_classifier import MeshRole, classify_mesh
from .obj_reader import parse_obj, read_obj
from .room_assembler import build_room, load_room
from .room_export import count_things_by_type, export_room_to_json, room_to_dict

__all__ = [
    'parse_call',
    'parse_formula',
    'MeshRole',
    'classify_mesh',
    'parse_obj',
    'read_obj',
    'build_room',
    'load_room',
    'count_things_by_type',
    'export_room_to_json',
    'room_to_dict',
]
